# Copyright 2021-present StarRocks, Inc. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import pytest
from sqlalchemy import Boolean, Column, Integer, MetaData, Table, cast, literal_column, select
from sqlalchemy.dialects import registry
from sqlalchemy.schema import CreateTable
from sqlalchemy.sql import visitors
from sqlalchemy.sql.util import ClauseAdapter

from doris import TableNameTooLong, UnsupportedGranularity, date_add_interval, date_sub_interval, time_grouped
from doris.datatype import DATETIME
from tests.test_utils import normalize_sql


class TestTimeGroupedCompiler:
    @classmethod
    def setup_class(cls):
        cls.dialect = registry.load("doris")()
        cls.orders = Table(
            "orders",
            MetaData(),
            Column("id", Integer),
            Column("created_at", DATETIME),
        )

    def _compile(self, stmt) -> str:
        return str(stmt.compile(dialect=self.dialect))

    def test_month(self):
        stmt = select(time_grouped("month", self.orders.c.created_at).label("month"))
        assert normalize_sql(self._compile(stmt)) == normalize_sql(
            "SELECT CAST(DATE_FORMAT(orders.created_at, '%%Y-%%m-01T00:00:00.000') AS DATETIME) AS month "
            "FROM orders"
        )

    def test_quarter_has_no_format_pattern(self):
        stmt = select(time_grouped("quarter", self.orders.c.created_at).label("quarter"))
        assert normalize_sql(self._compile(stmt)) == normalize_sql(
            "SELECT CAST(DATE_ADD('1900-01-01', INTERVAL TIMESTAMPDIFF(QUARTER, '1900-01-01', orders.created_at) "
            "QUARTER) AS DATETIME) AS quarter FROM orders"
        )

    def test_string_expression(self):
        stmt = select(time_grouped("second", "created_at").label("ts"))
        assert normalize_sql(self._compile(stmt)) == normalize_sql(
            "SELECT CAST(DATE_FORMAT(created_at, '%%Y-%%m-%%dT%%H:%%i:%%S.000') AS DATETIME) AS ts"
        )

    def test_group_by(self):
        bucket = time_grouped("day", self.orders.c.created_at)
        stmt = select(bucket.label("day"), literal_column("COUNT(*)").label("n")).group_by(bucket)
        sql = normalize_sql(self._compile(stmt))
        assert sql.endswith(
            "GROUP BY CAST(DATE_FORMAT(orders.created_at,'%%Y-%%m-%%dT00:00:00.000')AS DATETIME)"
        )

    def test_bound_parameters_are_kept(self):
        stmt = select(time_grouped("year", self.orders.c.created_at).label("year")).where(self.orders.c.id == 5)
        compiled = stmt.compile(dialect=self.dialect)
        assert "orders.id = %s" in str(compiled)
        assert compiled.params == {"id_1": 5}

    def test_result_type(self):
        assert isinstance(time_grouped("day", "created_at").type, DATETIME)

    def test_invalid_granularity(self):
        with pytest.raises(UnsupportedGranularity, match="Unsupported granularity: invalid"):
            time_grouped("invalid", self.orders.c.created_at)

    def test_repr(self):
        assert repr(time_grouped("week", "created_at")).startswith("TimeGrouped('week', ")

    def test_operand_is_traversed(self):
        bucket = time_grouped("day", self.orders.c.created_at)
        assert any(elem is self.orders.c.created_at for elem in visitors.iterate(bucket))

    def test_adapted_to_alias(self):
        orders_alias = self.orders.alias("o2")
        stmt = select(time_grouped("day", self.orders.c.created_at).label("d")).select_from(self.orders)
        adapted = ClauseAdapter(orders_alias).traverse(stmt)
        assert normalize_sql(self._compile(adapted)) == normalize_sql(
            "SELECT CAST(DATE_FORMAT(o2.created_at, '%%Y-%%m-%%dT00:00:00.000') AS DATETIME) AS d "
            "FROM orders AS o2"
        )

    def test_adapted_nested_interval(self):
        orders_alias = self.orders.alias("o2")
        expr = time_grouped("month", date_add_interval(self.orders.c.created_at, "1 DAY"))
        stmt = select(expr.label("m")).select_from(self.orders)
        adapted = ClauseAdapter(orders_alias).traverse(stmt)
        assert normalize_sql(self._compile(adapted)) == normalize_sql(
            "SELECT CAST(DATE_FORMAT(DATE_ADD(o2.created_at, INTERVAL 1 DAY), '%%Y-%%m-01T00:00:00.000') "
            "AS DATETIME) AS m FROM orders AS o2"
        )


class TestDateIntervalCompiler:
    @classmethod
    def setup_class(cls):
        cls.dialect = registry.load("doris")()

    def _compile(self, stmt) -> str:
        return str(stmt.compile(dialect=self.dialect))

    def test_add_interval(self):
        stmt = select(date_add_interval("created_at", "1 DAY").label("next_day"))
        assert normalize_sql(self._compile(stmt)) == normalize_sql(
            "SELECT DATE_ADD(created_at, INTERVAL 1 DAY) AS next_day"
        )

    def test_sub_interval(self):
        stmt = select(date_sub_interval("created_at", "2 MONTH").label("prev"))
        assert normalize_sql(self._compile(stmt)) == normalize_sql(
            "SELECT DATE_SUB(created_at, INTERVAL 2 MONTH) AS prev"
        )

    def test_nested_with_time_grouped(self):
        stmt = select(time_grouped("day", date_sub_interval("created_at", "1 DAY")).label("d"))
        assert normalize_sql(self._compile(stmt)) == normalize_sql(
            "SELECT CAST(DATE_FORMAT(DATE_SUB(created_at, INTERVAL 1 DAY), '%%Y-%%m-%%dT00:00:00.000') "
            "AS DATETIME) AS d"
        )


class TestCastCompiler:
    @classmethod
    def setup_class(cls):
        cls.dialect = registry.load("doris")()

    def test_cast_to_boolean(self):
        stmt = select(cast(literal_column("flag"), Boolean).label("b"))
        assert normalize_sql(str(stmt.compile(dialect=self.dialect))) == normalize_sql(
            "SELECT CAST(flag AS BOOLEAN) AS b"
        )


class TestCreateTableCompiler:
    @classmethod
    def setup_class(cls):
        cls.dialect = registry.load("doris")()

    def test_table_name_at_limit(self):
        table = Table("t" * 64, MetaData(), Column("id", Integer))
        sql = str(CreateTable(table).compile(dialect=self.dialect))
        assert normalize_sql(sql) == normalize_sql(f"CREATE TABLE {'t' * 64} (id INT)")

    def test_table_name_too_long(self):
        table = Table("t" * 65, MetaData(), Column("id", Integer))
        with pytest.raises(TableNameTooLong, match="longer than 64 symbols") as exc_info:
            CreateTable(table).compile(dialect=self.dialect)
        assert exc_info.value.name == "t" * 65
