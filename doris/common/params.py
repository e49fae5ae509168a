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

import os
from dataclasses import dataclass, replace
from typing import Final, Mapping, Optional

from sqlalchemy.engine import URL

from doris.common.consts import DEFAULT_QUERY_PORT


DialectName: Final[str] = 'doris'
"""Dialect name for Doris."""

DriverName: Final[str] = 'doris+pymysql'
"""Full SQLAlchemy driver name used when building URLs."""


class TemplateCategory:
    """Top-level keys of a SQL template set."""
    FUNCTIONS = "functions"
    EXPRESSIONS = "expressions"
    QUOTES = "quotes"
    PARAMS = "params"
    TYPES = "types"


TemplateCategory.ALL = {
    v for k, v in vars(TemplateCategory).items() if not k.startswith("__") and isinstance(v, str)
}


class ConnectionEnv:
    """Environment variables read by `ConnectionParams.from_env`."""
    HOST = "DORIS_HOST"
    PORT = "DORIS_PORT"
    USER = "DORIS_USER"
    PASSWORD = "DORIS_PASSWORD"
    DATABASE = "DORIS_DATABASE"


@dataclass(frozen=True)
class ConnectionParams:
    """Connection parameters of a Doris frontend."""

    host: str = "localhost"
    port: int = DEFAULT_QUERY_PORT
    user: str = "root"
    password: str = ""
    database: Optional[str] = "test"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ConnectionParams:
        environ = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            host=environ.get(ConnectionEnv.HOST, defaults.host),
            port=int(environ.get(ConnectionEnv.PORT, defaults.port)),
            user=environ.get(ConnectionEnv.USER, defaults.user),
            password=environ.get(ConnectionEnv.PASSWORD, defaults.password),
            database=environ.get(ConnectionEnv.DATABASE, defaults.database),
        )

    def with_overrides(self, **overrides) -> ConnectionParams:
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def to_url(self) -> URL:
        return URL.create(
            DriverName,
            username=self.user,
            password=self.password or None,
            host=self.host,
            port=self.port,
            database=self.database,
        )
