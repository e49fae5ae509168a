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

"""Immutable SQL template sets.

A template set maps a category (quotes, types, expressions, ...) to named
Jinja2 fragments. Sets are never changed in place: a dialect derives its own
set from a base one by applying `override` and `remove` operations, which
returns a new `SqlTemplates`.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Mapping, NamedTuple, Union

from jinja2 import Environment, StrictUndefined, select_autoescape


logger = logging.getLogger(__name__)

_jinja_env = Environment(
    autoescape=select_autoescape(enabled_extensions=(), default_for_string=False),
    undefined=StrictUndefined,
    keep_trailing_newline=False,
)


class TemplateOverride(NamedTuple):
    category: str
    name: str
    value: str

    def apply(self, templates: Dict[str, Dict[str, str]]) -> None:
        templates.setdefault(self.category, {})[self.name] = self.value


class TemplateRemoval(NamedTuple):
    category: str
    name: str

    def apply(self, templates: Dict[str, Dict[str, str]]) -> None:
        templates.get(self.category, {}).pop(self.name, None)


TemplateChange = Union[TemplateOverride, TemplateRemoval]


def override(category: str, name: str, value: str) -> TemplateOverride:
    return TemplateOverride(category, name, value)


def remove(category: str, name: str) -> TemplateRemoval:
    return TemplateRemoval(category, name)


class SqlTemplates(Mapping[str, Mapping[str, str]]):
    """A read-only, two-level mapping of SQL templates."""

    def __init__(self, templates: Mapping[str, Mapping[str, str]]) -> None:
        self._templates = MappingProxyType({
            category: MappingProxyType(dict(entries))
            for category, entries in templates.items()
        })

    def __getitem__(self, category: str) -> Mapping[str, str]:
        return self._templates[category]

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self) -> str:
        return f"SqlTemplates({self.to_dict()!r})"

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        """Return an independent, mutable copy."""
        return {category: dict(entries) for category, entries in self._templates.items()}

    def with_changes(self, changes: Iterable[TemplateChange]) -> SqlTemplates:
        templates = self.to_dict()
        for change in changes:
            change.apply(templates)
        return SqlTemplates(templates)

    def render(self, category: str, name: str, **params: Any) -> str:
        """Render one template with Jinja2.

        Raises:
            KeyError: if the set has no such template.
            jinja2.UndefinedError: if a referenced parameter is missing.
        """
        source = self._templates[category][name]
        rendered = _jinja_env.from_string(source).render(**params)
        logger.debug("rendered template %s.%s: %s", category, name, rendered)
        return rendered
