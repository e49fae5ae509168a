# Copyright 2021-present StarRocks, Inc. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https:#www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""SQLAlchemy expressions for Doris time bucketing and interval arithmetic.

Usage::

    select(time_grouped("month", orders.c.created_at).label("month"))
    select(date_sub_interval(orders.c.created_at, "1 DAY"))

They compile through the Doris query rules, see
`DorisSQLCompiler.visit_time_grouped` and `DorisSQLCompiler.visit_date_interval`.
"""

from typing import Union

from sqlalchemy.sql import ColumnElement, literal_column
from sqlalchemy.sql.visitors import InternalTraversal

from doris.datatype import DATETIME
from doris.query.granularity import Granularity


def _as_column(expr: Union[ColumnElement, str]) -> ColumnElement:
    if isinstance(expr, str):
        return literal_column(expr)
    return expr


class TimeGrouped(ColumnElement):
    __visit_name__ = "time_grouped"
    _traverse_internals = [("expr", InternalTraversal.dp_clauseelement)]
    inherit_cache = False
    type = DATETIME()

    def __init__(self, granularity: Union[Granularity, str], expr: Union[ColumnElement, str]):
        # unknown granularities are rejected here, before any compilation
        self.granularity = Granularity.parse(granularity)
        self.expr = _as_column(expr)

    @property
    def _from_objects(self):
        return self.expr._from_objects

    def __repr__(self):
        """
        repr for debugging / logging purposes only. For compilation logic, see
        the corresponding visitor in dialect.py
        """
        return f"TimeGrouped({self.granularity.value!r}, {self.expr!r})"


class DateInterval(ColumnElement):
    __visit_name__ = "date_interval"
    _traverse_internals = [("expr", InternalTraversal.dp_clauseelement)]
    inherit_cache = False
    type = DATETIME()

    def __init__(self, expr: Union[ColumnElement, str], interval: str, subtract: bool = False):
        self.expr = _as_column(expr)
        self.interval = interval
        self.subtract = subtract

    @property
    def _from_objects(self):
        return self.expr._from_objects

    def __repr__(self):
        """
        repr for debugging / logging purposes only. For compilation logic, see
        the corresponding visitor in dialect.py
        """
        op = "-" if self.subtract else "+"
        return f"DateInterval({self.expr!r} {op} {self.interval!r})"


def time_grouped(granularity: Union[Granularity, str], expr: Union[ColumnElement, str]) -> TimeGrouped:
    return TimeGrouped(granularity, expr)


def date_add_interval(expr: Union[ColumnElement, str], interval: str) -> DateInterval:
    return DateInterval(expr, interval)


def date_sub_interval(expr: Union[ColumnElement, str], interval: str) -> DateInterval:
    return DateInterval(expr, interval, subtract=True)
