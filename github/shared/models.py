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

"""GitHub-side data models – issue records, mirrored issues and
Projects V2 field metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class IssueState(StrEnum):
    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class IssueRecord:
    """Flat view of the issue carried by one inbound issue event."""
    number: int
    title: str
    description: str
    author: str | None
    url: str
    assignees: tuple[str, ...]
    state: IssueState
    updated_at: str
    closed_at: str | None
    source_repo: str
    labels: tuple[str, ...]
    milestone: str | None = None


@dataclass(frozen=True)
class MirroredIssue:
    """The issue created in the central repository."""
    repo: str
    number: int
    html_url: str
    node_id: str


class ProjectFieldKind(StrEnum):
    TEXT = "text"
    DATE = "date"
    SINGLE_SELECT = "single_select"
    OTHER = "other"

    @classmethod
    def from_data_type(cls, data_type: str | None) -> "ProjectFieldKind":
        """Map a GraphQL ``ProjectV2FieldType`` value onto a kind."""
        return {
            "TEXT": cls.TEXT,
            "DATE": cls.DATE,
            "SINGLE_SELECT": cls.SINGLE_SELECT,
        }.get((data_type or "").upper(), cls.OTHER)


@dataclass(frozen=True)
class ProjectField:
    id: str
    name: str
    kind: ProjectFieldKind
    options: dict[str, str] = field(default_factory=dict)   # option name (lowercase) -> option node-id


@dataclass(frozen=True)
class ProjectFieldSchema:
    """Field metadata of one Projects V2 board, keyed by field name."""
    project_id: str
    fields: dict[str, ProjectField]

    def lookup(self, name: str) -> ProjectField | None:
        """Find a field by exact name, then case-insensitively."""
        found = self.fields.get(name)
        if found is not None:
            return found
        wanted = name.strip().lower()
        for field_name, project_field in self.fields.items():
            if field_name.strip().lower() == wanted:
                return project_field
        return None


@dataclass(frozen=True)
class ProjectItem:
    project_id: str
    item_id: str
