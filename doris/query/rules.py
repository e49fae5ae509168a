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
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from doris.query.templates import SqlTemplates


@dataclass(frozen=True)
class DialectRules:
    """The SQL-generation rules of one target engine.

    Every rule is an explicit field. An engine that differs from another only
    in a few rules is built with `replace`, keeping every other field.

    Attributes:
        name: Dialect name.
        time_grouped_column: ``(granularity, dimension) -> sql``.
        add_interval: ``(date, interval) -> sql``.
        subtract_interval: ``(date, interval) -> sql``.
        convert_tz: ``(field, timezone) -> sql``; `timezone` is the IANA name
            configured on the query.
        time_stamp_cast: ``(value) -> sql``.
        date_time_cast: ``(value) -> sql``.
        escape_column_name: ``(name) -> sql``.
        concat_strings: ``(strings) -> sql``.
        cast_to_string: ``(sql) -> sql``.
        unix_timestamp: ``() -> sql``.
        pre_aggregation_table_name: ``(name) -> name``; receives the fully
            composed name and returns the name to use, or raises.
        templates: The template set.
    """

    name: str
    time_grouped_column: Callable[[Any, str], str]
    add_interval: Callable[[str, str], str]
    subtract_interval: Callable[[str, str], str]
    convert_tz: Callable[[str, str], str]
    time_stamp_cast: Callable[[str], str]
    date_time_cast: Callable[[str], str]
    escape_column_name: Callable[[str], str]
    concat_strings: Callable[[Sequence[str]], str]
    cast_to_string: Callable[[str], str]
    unix_timestamp: Callable[[], str]
    pre_aggregation_table_name: Callable[[str], str]
    templates: SqlTemplates

    def replace(self, **changes: Any) -> DialectRules:
        return dataclasses.replace(self, **changes)
