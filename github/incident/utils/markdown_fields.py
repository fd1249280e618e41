#
# Copyright 2026 ABSA Group Limited
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
#


"""Field extraction from the incident report's Markdown export.

The report is a two-column table whose rows look like::

    | **Priority** | P1 |

Each lookup rescans the whole document for one row label; there is no
general table parser. Results are :class:`FieldValue` objects so a real
cell value can never be confused with the "Not Found" / "Not Specified"
sentinels, which only appear once a value is rendered.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from .constants import PLACEHOLDER_VALUES, SENTINEL_NOT_FOUND, SENTINEL_NOT_SPECIFIED


class FieldStatus(StrEnum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    NOT_SPECIFIED = "not_specified"


@dataclass(frozen=True)
class FieldValue:
    status: FieldStatus
    value: str = ""

    @classmethod
    def found(cls, value: str) -> "FieldValue":
        return cls(FieldStatus.FOUND, value)

    @classmethod
    def not_found(cls) -> "FieldValue":
        return cls(FieldStatus.NOT_FOUND)

    @classmethod
    def not_specified(cls) -> "FieldValue":
        return cls(FieldStatus.NOT_SPECIFIED)

    @classmethod
    def from_optional(cls, value: str | None) -> "FieldValue":
        """Wrap a possibly missing value copied from the issue itself."""
        if value is None or not str(value).strip():
            return cls.not_specified()
        return cls.found(str(value))

    @property
    def is_found(self) -> bool:
        return self.status == FieldStatus.FOUND

    def render(self) -> str:
        """Collapse to the output string, substituting the sentinel text."""
        if self.status == FieldStatus.NOT_FOUND:
            return SENTINEL_NOT_FOUND
        if self.status == FieldStatus.NOT_SPECIFIED:
            return SENTINEL_NOT_SPECIFIED
        return self.value

    def __str__(self) -> str:
        return self.render()


def _field_row_re(field_name: str) -> re.Pattern[str]:
    safe = re.escape(field_name)
    return re.compile(
        rf"\|\s*(?:\*\*|__)?{safe}(?:\*\*|__)?\s*\|([^|\n]*)\|",
        re.IGNORECASE,
    )


def extract_markdown_field(markdown: str, field_name: str) -> FieldValue:
    """Return the value cell of the table row labelled *field_name*."""
    m = _field_row_re(field_name).search(markdown or "")
    if not m:
        return FieldValue.not_found()
    value = m.group(1).strip()
    if value in PLACEHOLDER_VALUES:
        return FieldValue.not_specified()
    return FieldValue.found(value)


def extract_first_field(markdown: str, *field_names: str) -> FieldValue:
    """Try each label in turn; return the first result that is not "Not Found"."""
    result = FieldValue.not_found()
    for name in field_names:
        result = extract_markdown_field(markdown, name)
        if result.status != FieldStatus.NOT_FOUND:
            return result
    return result
