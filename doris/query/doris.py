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

"""Doris rules.

Doris speaks the MySQL protocol and most of its functions, so its rules are
derived from the MySQL ones. These differ:

- timestamps are already ``DATETIME`` and are not cast again
- pre-aggregation table names are limited to 64 characters
- templates use Doris type names, sort NULLs with ``IS NULL`` and drop
  ``ILIKE`` and the ``INTERVAL`` type

Time bucketing (``DATE_FORMAT`` based, no ``DATE_TRUNC``), interval
arithmetic and timezone conversion (to the query's fixed UTC offset) are the
MySQL rules unchanged and are inherited as is.
"""

import logging

from doris.common.consts import MAX_TABLE_NAME_LENGTH
from doris.common.params import DialectName, TemplateCategory
from doris.common.utils import TableNameTooLong
from doris.query.base import BaseQuery
from doris.query.mysql import MYSQL_RULES, MYSQL_TEMPLATES
from doris.query.templates import override, remove


logger = logging.getLogger(__name__)


NULLS_AWARE_SORT = (
    "{{ expr }} IS NULL {% if nulls_first %}DESC{% else %}ASC{% endif %}, "
    "{{ expr }} {% if asc %}ASC{% else %}DESC{% endif %}"
)

DORIS_TEMPLATE_CHANGES = (
    override(TemplateCategory.QUOTES, "identifiers", "`"),
    override(TemplateCategory.QUOTES, "escape", "\\`"),
    override(TemplateCategory.EXPRESSIONS, "sort", NULLS_AWARE_SORT),
    remove(TemplateCategory.EXPRESSIONS, "ilike"),
    override(TemplateCategory.TYPES, "string", "VARCHAR"),
    override(TemplateCategory.TYPES, "text", "STRING"),
    # no BLOB in Doris
    override(TemplateCategory.TYPES, "binary", "STRING"),
    override(TemplateCategory.TYPES, "boolean", "BOOLEAN"),
    override(TemplateCategory.TYPES, "timestamp", "DATETIME"),
    # intervals only appear inline in DATE_ADD / DATE_SUB
    remove(TemplateCategory.TYPES, "interval"),
)

DORIS_TEMPLATES = MYSQL_TEMPLATES.with_changes(DORIS_TEMPLATE_CHANGES)


def check_table_name_length(name: str) -> str:
    """Return `name` if Doris accepts it as a table name.

    Raises:
        TableNameTooLong: if `name` is longer than 64 characters.
    """
    if len(name) > MAX_TABLE_NAME_LENGTH:
        logger.warning("table name %s has %d characters, limit is %d", name, len(name), MAX_TABLE_NAME_LENGTH)
        raise TableNameTooLong(name)
    return name


def _no_cast(value: str) -> str:
    return value


DORIS_RULES = MYSQL_RULES.replace(
    name=DialectName,
    time_stamp_cast=_no_cast,
    pre_aggregation_table_name=check_table_name_length,
    templates=DORIS_TEMPLATES,
)


class DorisQuery(BaseQuery):
    rules = DORIS_RULES
