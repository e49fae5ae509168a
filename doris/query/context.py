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

from dataclasses import dataclass
from zoneinfo import ZoneInfo

from doris.common.consts import DEFAULT_PRE_AGGREGATIONS_SCHEMA, DEFAULT_TIMEZONE


@dataclass(frozen=True)
class QueryContext:
    """Settings of one query-compilation pass.

    Attributes:
        timezone: IANA name of the timezone the query is expressed in.
        pre_aggregations_schema: Schema that holds pre-aggregation tables.
    """

    timezone: str = DEFAULT_TIMEZONE
    pre_aggregations_schema: str = DEFAULT_PRE_AGGREGATIONS_SCHEMA

    def __post_init__(self) -> None:
        # fail on unknown zones here rather than halfway through compilation
        ZoneInfo(self.timezone)

    def pre_aggregation_table_name(self, cube: str, pre_aggregation_name: str, skip_schema: bool = False) -> str:
        name = f"{cube}_{pre_aggregation_name}"
        if skip_schema:
            return name
        return f"{self.pre_aggregations_schema}.{name}"
