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

"""Shared constants for the Doris dialect.

This module centralizes the engine limits and fixed literals that are used
across the query rules and the SQLAlchemy dialect.
"""

from __future__ import annotations

from typing import Final


MAX_TABLE_NAME_LENGTH: Final[int] = 64
"""Doris rejects table identifiers longer than this."""

REFERENCE_DATE: Final[str] = "1900-01-01"
"""Epoch used for week and quarter bucketing. It is a Monday."""

DEFAULT_QUERY_PORT: Final[int] = 9030
"""MySQL-protocol port of the Doris frontend."""

DEFAULT_TIMEZONE: Final[str] = "UTC"

DEFAULT_PRE_AGGREGATIONS_SCHEMA: Final[str] = "pre_aggregations"


class DateFormat:
    """DATE_FORMAT patterns that floor a timestamp to a bucket start."""

    SECOND: Final[str] = "%Y-%m-%dT%H:%i:%S.000"
    MINUTE: Final[str] = "%Y-%m-%dT%H:%i:00.000"
    HOUR: Final[str] = "%Y-%m-%dT%H:00:00.000"
    DAY: Final[str] = "%Y-%m-%dT00:00:00.000"
    MONTH: Final[str] = "%Y-%m-01T00:00:00.000"
    YEAR: Final[str] = "%Y-01-01T00:00:00.000"
