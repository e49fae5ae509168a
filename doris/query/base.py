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

from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, Dict, Optional, Sequence

from doris.query.context import QueryContext
from doris.query.rules import DialectRules


class BaseQuery:
    """Exposes the rules of one dialect at the query-compilation extension points.

    A query binds a `DialectRules` descriptor to a `QueryContext`. The
    context is fixed for the lifetime of the query, so every method is a pure
    function of its arguments.

    Subclasses only choose the rules::

        class DorisQuery(BaseQuery):
            rules = DORIS_RULES
    """

    rules: ClassVar[DialectRules]

    def __init__(self, context: Optional[QueryContext] = None, **options: Any) -> None:
        """Keyword `options` build the context, or override fields of `context` when one is given."""
        if context is None:
            context = QueryContext(**options)
        elif options:
            context = dataclasses.replace(context, **options)
        self.context: QueryContext = context

    @property
    def timezone(self) -> str:
        return self.context.timezone

    def time_grouped_column(self, granularity: Any, dimension: str) -> str:
        return self.rules.time_grouped_column(granularity, dimension)

    def add_interval(self, date: str, interval: str) -> str:
        return self.rules.add_interval(date, interval)

    def subtract_interval(self, date: str, interval: str) -> str:
        return self.rules.subtract_interval(date, interval)

    def convert_tz(self, field: str) -> str:
        return self.rules.convert_tz(field, self.timezone)

    def time_stamp_cast(self, value: str) -> str:
        return self.rules.time_stamp_cast(value)

    def date_time_cast(self, value: str) -> str:
        return self.rules.date_time_cast(value)

    def escape_column_name(self, name: str) -> str:
        return self.rules.escape_column_name(name)

    def concat_strings_sql(self, strings: Sequence[str]) -> str:
        return self.rules.concat_strings(strings)

    def cast_to_string(self, sql: str) -> str:
        return self.rules.cast_to_string(sql)

    def unix_timestamp_sql(self) -> str:
        return self.rules.unix_timestamp()

    def pre_aggregation_table_name(self, cube: str, pre_aggregation_name: str, skip_schema: bool = False) -> str:
        name = self.context.pre_aggregation_table_name(cube, pre_aggregation_name, skip_schema)
        return self.rules.pre_aggregation_table_name(name)

    def sql_templates(self) -> Dict[str, Dict[str, str]]:
        """Return a fresh copy of the template set; callers may change it freely."""
        return self.rules.templates.to_dict()

    def render_template(self, category: str, name: str, **params: Any) -> str:
        return self.rules.templates.render(category, name, **params)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dialect={self.rules.name!r}, context={self.context!r})"
