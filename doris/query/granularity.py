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

"""Time bucketing for Doris.

Doris cannot be relied on for ``DATE_TRUNC`` on every supported version, so
buckets are built from ``DATE_FORMAT`` and, for week and quarter, from the
number of whole units elapsed since a fixed reference date.
"""

import logging
from enum import Enum
from typing import Union

from doris.common.consts import REFERENCE_DATE, DateFormat
from doris.common.utils import UnsupportedGranularity


logger = logging.getLogger(__name__)


class Granularity(str, Enum):
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"

    @classmethod
    def parse(cls, value: Union["Granularity", str]) -> "Granularity":
        """Convert an external granularity name into a member.

        Raises:
            UnsupportedGranularity: if `value` names no known granularity.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedGranularity(value) from None


def _date_format(date: str, pattern: str) -> str:
    return f"DATE_FORMAT({date}, '{pattern}')"


def _since_reference(date: str, unit: str) -> str:
    return (
        f"DATE_ADD('{REFERENCE_DATE}', "
        f"INTERVAL TIMESTAMPDIFF({unit}, '{REFERENCE_DATE}', {date}) {unit})"
    )


def bucket_expression(granularity: Granularity, date: str) -> str:
    """Floor `date` to the start of its `granularity` bucket (uncast)."""
    if granularity is Granularity.SECOND:
        return _date_format(date, DateFormat.SECOND)
    if granularity is Granularity.MINUTE:
        return _date_format(date, DateFormat.MINUTE)
    if granularity is Granularity.HOUR:
        return _date_format(date, DateFormat.HOUR)
    if granularity is Granularity.DAY:
        return _date_format(date, DateFormat.DAY)
    if granularity is Granularity.WEEK:
        return _date_format(_since_reference(date, "WEEK"), DateFormat.DAY)
    if granularity is Granularity.MONTH:
        return _date_format(date, DateFormat.MONTH)
    if granularity is Granularity.QUARTER:
        return _since_reference(date, "QUARTER")
    if granularity is Granularity.YEAR:
        return _date_format(date, DateFormat.YEAR)
    raise UnsupportedGranularity(granularity)


def time_grouped_column(granularity: Union[Granularity, str], dimension: str) -> str:
    """Return ``CAST(<bucket> AS DATETIME)`` for `dimension`.

    The granularity is validated before any SQL is produced.
    """
    member = Granularity.parse(granularity)
    sql = f"CAST({bucket_expression(member, dimension)} AS DATETIME)"
    logger.debug("time grouped column for granularity: %s, dimension: %s, sql: %s", member.value, dimension, sql)
    return sql
