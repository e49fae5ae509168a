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

"""A thin pass-through to a Doris frontend over SQLAlchemy and PyMySQL."""

import logging
import re
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from doris.common.params import ConnectionParams


logger = logging.getLogger(__name__)

GENERIC_TYPES: Dict[str, str] = {
    "string": "text",
    "varchar": "text",
    "char": "text",
    "text": "text",
    "json": "text",
    "jsonb": "text",
    "tinyint": "int",
    "smallint": "int",
    "int": "int",
    "integer": "int",
    "bigint": "int",
    "largeint": "int",
    "decimal": "decimal",
    "decimalv2": "decimal",
    "decimalv3": "decimal",
    "float": "double",
    "double": "double",
    "boolean": "boolean",
    "date": "date",
    "datev2": "date",
    "datetime": "timestamp",
    "datetimev2": "timestamp",
    "timestamp": "timestamp",
}

_TYPE_NAME_PATTERN = re.compile(r"^\s*([A-Za-z0-9_]+)")


class DorisDriver:
    """Runs SQL against Doris.

    Connection parameters come from `params` (default: the ``DORIS_*``
    environment variables), with keyword overrides on top::

        driver = DorisDriver(host="fe.internal", database="analytics")
        rows = driver.query("SELECT id FROM orders WHERE id = %s", [1])
        driver.release()
    """

    def __init__(self, params: Optional[ConnectionParams] = None, engine: Optional[Engine] = None, **overrides: Any):
        self.params = (params or ConnectionParams.from_env()).with_overrides(**overrides)
        if engine is None:
            engine = create_engine(self.params.to_url(), pool_pre_ping=True)
        self.engine = engine
        logger.debug("doris driver for %s:%s/%s", self.params.host, self.params.port, self.params.database)

    def test_connection(self) -> Any:
        with self.engine.connect() as conn:
            return conn.exec_driver_sql("SELECT 1").scalar()

    def query(self, sql: str, values: Optional[Sequence[Any]] = None) -> List[Dict[str, Any]]:
        """Execute `sql` with positional ``%s`` parameters.

        Without `values` the statement is sent as is, so generated SQL that
        carries ``DATE_FORMAT`` patterns runs unchanged. With `values`, literal
        ``%`` signs must be written as ``%%``.

        Returns:
            The rows as dicts, or an empty list for statements without rows.
        """
        with self.engine.begin() as conn:
            if values:
                result = conn.exec_driver_sql(sql, tuple(values))
            else:
                result = conn.execution_options(no_parameters=True).exec_driver_sql(sql)
            if not result.returns_rows:
                return []
            return [dict(row) for row in result.mappings()]

    def release(self) -> None:
        self.engine.dispose()

    @staticmethod
    def to_generic_type(column_type: str) -> str:
        """Map a Doris column type such as ``VARCHAR(255)`` to a generic type name."""
        match = _TYPE_NAME_PATTERN.match(column_type or "")
        if match is None:
            return column_type
        base = match.group(1).lower()
        return GENERIC_TYPES.get(base, base)
