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

"""MySQL rules, the defaults the Doris rules are derived from."""

import logging
from typing import Sequence

from doris.common.params import TemplateCategory
from doris.common.utils import quote_identifier, utc_offset
from doris.query import granularity
from doris.query.base import BaseQuery
from doris.query.rules import DialectRules
from doris.query.templates import SqlTemplates


logger = logging.getLogger(__name__)


MYSQL_TEMPLATES = SqlTemplates({
    TemplateCategory.FUNCTIONS: {
        "COALESCE": "COALESCE({{ args_concat }})",
        "CONCAT": "CONCAT({{ args_concat }})",
        "GREATEST": "GREATEST({{ args_concat }})",
        "LEAST": "LEAST({{ args_concat }})",
        "LOWER": "LOWER({{ args_concat }})",
        "UPPER": "UPPER({{ args_concat }})",
        "NOW": "NOW()",
    },
    TemplateCategory.EXPRESSIONS: {
        "column_aliased": "{{ expr }} {{ quoted_alias }}",
        "binary": "({{ left }} {{ op }} {{ right }})",
        "is_null": "({{ expr }} IS {% if negate %}NOT {% endif %}NULL)",
        "cast": "CAST({{ expr }} AS {{ data_type }})",
        "sort": "{{ expr }} {% if asc %}ASC{% else %}DESC{% endif %} NULLS {% if nulls_first %}FIRST{% else %}LAST{% endif %}",
        "like": "{{ expr }} {% if negated %}NOT {% endif %}LIKE {{ pattern }}",
        "ilike": "{{ expr }} {% if negated %}NOT {% endif %}ILIKE {{ pattern }}",
        "true": "TRUE",
        "false": "FALSE",
    },
    TemplateCategory.QUOTES: {
        "identifiers": "`",
        "escape": "``",
    },
    TemplateCategory.PARAMS: {
        "param": "?",
    },
    TemplateCategory.TYPES: {
        "string": "VARCHAR",
        "text": "TEXT",
        "boolean": "TINYINT(1)",
        "tinyint": "TINYINT",
        "smallint": "SMALLINT",
        "integer": "INTEGER",
        "bigint": "BIGINT",
        "float": "FLOAT",
        "double": "DOUBLE",
        "decimal": "DECIMAL({{ precision }},{{ scale }})",
        "timestamp": "TIMESTAMP",
        "date": "DATE",
        "time": "TIME",
        "interval": "INTERVAL",
        "binary": "BLOB",
    },
})


def date_add(date: str, interval: str) -> str:
    return f"DATE_ADD({date}, INTERVAL {interval})"


def date_sub(date: str, interval: str) -> str:
    return f"DATE_SUB({date}, INTERVAL {interval})"


def convert_tz_to_offset(field: str, timezone: str) -> str:
    """Convert `field` from the session zone to the fixed offset `timezone` has now.

    The offset is resolved while the SQL is generated, not when it runs.
    """
    offset = utc_offset(timezone)
    logger.debug("resolved offset of timezone %s to %s", timezone, offset)
    return f"CONVERT_TZ({field}, @@session.time_zone, '{offset}')"


def timestamp_function(value: str) -> str:
    return f"TIMESTAMP({value})"


def concat_strings(strings: Sequence[str]) -> str:
    return f"CONCAT({', '.join(strings)})"


def cast_to_char(sql: str) -> str:
    return f"CAST({sql} as CHAR)"


def unix_timestamp() -> str:
    return "UNIX_TIMESTAMP()"


def _as_is(name: str) -> str:
    return name


MYSQL_RULES = DialectRules(
    name="mysql",
    time_grouped_column=granularity.time_grouped_column,
    add_interval=date_add,
    subtract_interval=date_sub,
    convert_tz=convert_tz_to_offset,
    time_stamp_cast=timestamp_function,
    date_time_cast=timestamp_function,
    escape_column_name=quote_identifier,
    concat_strings=concat_strings,
    cast_to_string=cast_to_char,
    unix_timestamp=unix_timestamp,
    pre_aggregation_table_name=_as_is,
    templates=MYSQL_TEMPLATES,
)


class MysqlQuery(BaseQuery):
    rules = MYSQL_RULES
