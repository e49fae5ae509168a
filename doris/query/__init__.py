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

from .base import BaseQuery
from .context import QueryContext
from .doris import DORIS_RULES, DORIS_TEMPLATES, DorisQuery
from .granularity import Granularity
from .mysql import MYSQL_RULES, MYSQL_TEMPLATES, MysqlQuery
from .rules import DialectRules
from .templates import SqlTemplates


__all__ = (
    "BaseQuery", "MysqlQuery", "DorisQuery",
    "QueryContext", "Granularity",
    "DialectRules", "MYSQL_RULES", "DORIS_RULES",
    "SqlTemplates", "MYSQL_TEMPLATES", "DORIS_TEMPLATES",
)
