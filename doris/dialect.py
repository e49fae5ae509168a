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
import logging
from typing import Any, Callable, Final

from sqlalchemy import log, schema as sa_schema
from sqlalchemy.dialects.mysql.base import (
    MySQLCompiler,
    MySQLDDLCompiler,
    MySQLIdentifierPreparer,
    MySQLTypeCompiler,
    colspecs as base_colspecs,
)
from sqlalchemy.dialects.mysql.pymysql import MySQLDialect_pymysql
from sqlalchemy.sql import sqltypes

from doris.common.consts import MAX_TABLE_NAME_LENGTH
from doris.common.params import DialectName
from doris.query.doris import DORIS_RULES, check_table_name_length

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
from .sql.functions import DateInterval, TimeGrouped


logger = logging.getLogger(__name__)

_OPERAND_PLACEHOLDER = "__doris_operand__"

# doris supported data types
ischema_names = {
    # === Boolean ===
    "boolean": BOOLEAN,
    # === Integer ===
    "tinyint": TINYINT,
    "smallint": SMALLINT,
    "int": INTEGER,
    "integer": INTEGER,
    "bigint": BIGINT,
    "largeint": LARGEINT,
    # === Floating-point ===
    "float": FLOAT,
    "double": DOUBLE,
    # === Fixed-precision ===
    "decimal": DECIMAL,
    "decimalv2": DECIMAL,
    "decimalv3": DECIMAL,
    # === String ===
    "varchar": VARCHAR,
    "char": CHAR,
    "string": STRING,
    "text": STRING,
    "json": JSON,
    "jsonb": JSON,
    # === Date and time ===
    "date": DATE,
    "datev2": DATE,
    "datetime": DATETIME,
    "datetimev2": DATETIME,
    # === Aggregate states ===
    "hll": HLL,
    "bitmap": BITMAP,
}

colspecs = base_colspecs | {
    sqltypes.Date: DATE,
    sqltypes.DateTime: DATETIME,
    sqltypes.DECIMAL: DECIMAL,
}


class DorisTypeCompiler(MySQLTypeCompiler):
    """
    Compile a datatype to Doris' SQL type string.
    """

    def visit_BOOLEAN(self, type_, **kw):
        return "BOOLEAN"

    def visit_FLOAT(self, type_, **kw):
        return "FLOAT"

    def visit_TINYINT(self, type_, **kw):
        return "TINYINT"

    def visit_SMALLINT(self, type_, **kw):
        return "SMALLINT"

    def visit_INTEGER(self, type_, **kw):
        return "INT"

    def visit_BIGINT(self, type_, **kw):
        return "BIGINT"

    def visit_LARGEINT(self, type_, **kw):
        return "LARGEINT"

    def visit_STRING(self, type_, **kw):
        return "STRING"

    def visit_TEXT(self, type_, **kw):
        return "STRING"

    def visit_VARCHAR(self, type_, **kw):
        # an unbounded String() has no VARCHAR form in Doris
        if getattr(type_, "length", None) is None:
            return "STRING"
        return f"VARCHAR({type_.length})"

    def visit_NVARCHAR(self, type_, **kw):
        return self.visit_VARCHAR(type_, **kw)

    def visit_DATETIME(self, type_, **kw):
        if getattr(type_, "fsp", None):
            return f"DATETIME({type_.fsp})"
        return "DATETIME"

    def visit_TIMESTAMP(self, type_, **kw):
        return self.visit_DATETIME(type_, **kw)

    # Doris has no BLOB type; binary payloads are kept in STRING columns
    def visit_BLOB(self, type_, **kw):
        return "STRING"

    def visit_large_binary(self, type_, **kw):
        return "STRING"

    def visit_BINARY(self, type_, **kw):
        return "STRING"

    def visit_VARBINARY(self, type_, **kw):
        return "STRING"

    def visit_HLL(self, type_, **kw):
        return "HLL"

    def visit_BITMAP(self, type_, **kw):
        return "BITMAP"


class DorisSQLCompiler(MySQLCompiler):
    def visit_typeclause(
        self,
        typeclause,
        type_=None,
        **kw: Any,
    ):
        if type_ is None:
            type_ = typeclause.type.dialect_impl(self.dialect)
        if isinstance(type_, sqltypes.Boolean):
            return self.dialect.type_compiler_instance.process(type_)
        return super().visit_typeclause(typeclause, type_, **kw)

    def _wrap_expression(self, render: Callable[[str], str], expr: Any, **kw: Any) -> str:
        # the rule output carries literal '%' (DATE_FORMAT patterns) that must be
        # doubled for the format paramstyle, while the compiled operand is already escaped
        fragment = self.post_process_text(render(_OPERAND_PLACEHOLDER))
        return fragment.replace(_OPERAND_PLACEHOLDER, self.process(expr, **kw))

    def visit_time_grouped(self, element: TimeGrouped, **kw: Any) -> str:
        return self._wrap_expression(
            lambda operand: DORIS_RULES.time_grouped_column(element.granularity, operand),
            element.expr,
            **kw,
        )

    def visit_date_interval(self, element: DateInterval, **kw: Any) -> str:
        rule = DORIS_RULES.subtract_interval if element.subtract else DORIS_RULES.add_interval
        return self._wrap_expression(lambda operand: rule(operand, element.interval), element.expr, **kw)


class DorisDDLCompiler(MySQLDDLCompiler):
    def visit_create_table(self, create: sa_schema.CreateTable, **kw: Any) -> str:
        table: sa_schema.Table = create.element
        check_table_name_length(table.name)
        text = super().visit_create_table(create, **kw)
        logger.debug("create table text for table: %s, schema: %s, text: %s", table.name, table.schema, text)
        return text


class DorisIdentifierPreparer(MySQLIdentifierPreparer):
    """
    Identifiers are quoted with backticks, as in MySQL. Quoting is only
    applied where it is required.
    """

    def __init__(self, dialect, server_ansiquotes=False, **kw):
        # Doris has no ANSI_QUOTES sql_mode
        super().__init__(dialect, server_ansiquotes=False, **kw)


@log.class_logger
class DorisDialect(MySQLDialect_pymysql):
    # Dialect name
    name: Final[str] = DialectName

    supports_statement_cache = True
    supports_empty_insert = False
    supports_native_boolean = True

    # Doris limits table names to 64 characters
    max_identifier_length = MAX_TABLE_NAME_LENGTH

    ischema_names = ischema_names
    colspecs = colspecs

    statement_compiler = DorisSQLCompiler
    ddl_compiler = DorisDDLCompiler
    type_compiler_cls = DorisTypeCompiler
    preparer = DorisIdentifierPreparer

    def create_connect_args(self, url):
        connect_args = super(DorisDialect, self).create_connect_args(url)[1]
        logger.debug("connect_args: %s", {k: v for k, v in connect_args.items() if k != "password"})
        return [], connect_args
