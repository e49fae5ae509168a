#! /usr/bin/python3
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

__version__ = "0.1.0"

from .common.utils import DorisDialectError, TableNameTooLong, UnsupportedGranularity
from .datatype import (
    BIGINT,
    BITMAP,
    BOOLEAN,
    CHAR,
    DATE,
    DATETIME,
    DECIMAL,
    DOUBLE,
    FLOAT,
    HLL,
    INTEGER,
    JSON,
    LARGEINT,
    SMALLINT,
    STRING,
    TINYINT,
    VARCHAR,
)
from .query import DorisQuery, Granularity, MysqlQuery, QueryContext
from .sql.functions import date_add_interval, date_sub_interval, time_grouped


__all__ = (
    "BOOLEAN", "TINYINT", "SMALLINT", "INTEGER", "BIGINT", "LARGEINT",
    "DECIMAL", "DOUBLE", "FLOAT",
    "DATETIME", "DATE",
    "CHAR", "VARCHAR", "STRING",
    "HLL", "BITMAP", "JSON",

    "DorisQuery", "MysqlQuery", "QueryContext", "Granularity",
    "time_grouped", "date_add_interval", "date_sub_interval",
    "DorisDialectError", "UnsupportedGranularity", "TableNameTooLong",
)
