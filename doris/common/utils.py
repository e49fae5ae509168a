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

from datetime import datetime, timezone
from typing import Any, Optional
from zoneinfo import ZoneInfo

from sqlalchemy.exc import CompileError

from doris.common.consts import MAX_TABLE_NAME_LENGTH


class DorisDialectError(CompileError):
    """Base class for SQL-generation errors raised by the Doris dialect."""


class UnsupportedGranularity(DorisDialectError):
    """The time granularity has no Doris bucketing rule."""

    def __init__(self, granularity: Any) -> None:
        self.granularity = getattr(granularity, "value", granularity)
        super().__init__(f"Unsupported granularity: {self.granularity}")


class TableNameTooLong(DorisDialectError):
    """A generated table name exceeds the Doris identifier limit."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Doris cannot work with table names longer than {MAX_TABLE_NAME_LENGTH} symbols. "
            f"Consider using the 'sql_alias' attribute in your cube and pre-aggregation definition for {name}."
        )


def utc_offset(tz_name: str, at: Optional[datetime] = None) -> str:
    """Return the UTC offset of `tz_name` at `at` (default: now) as ``±HH:MM``."""
    moment = (at or datetime.now(timezone.utc)).astimezone(ZoneInfo(tz_name))
    total_minutes = int(moment.utcoffset().total_seconds()) // 60
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def quote_identifier(name: str, quote: str = "`") -> str:
    """Quote an identifier, doubling any embedded quote characters."""
    return f"{quote}{name.replace(quote, quote * 2)}{quote}"
