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


"""Best-effort synchronisation of incident fields into a Projects V2 board.

The mirror issue is attached to the board, then each board field listed in
``BOARD_FIELDS`` is written according to the type the board declares for
it. Fields missing from the board, sentinel or empty values, unparsable
dates and unknown single-select options are skipped. A failing field
write is reported and the remaining fields are still attempted.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from shared.common import vprint
from shared.dates import normalize_date
from shared.errors import UpstreamError
from shared.github_projects import (
    gh_project_add_item,
    gh_project_get_fields,
    gh_project_set_date_value,
    gh_project_set_single_select_value,
    gh_project_set_text_value,
)
from shared.models import ProjectField, ProjectFieldKind, ProjectItem

from .constants import BOARD_FIELDS
from .markdown_fields import FieldValue
from .models import IncidentDetails


@dataclass
class ProjectSyncResult:
    item: ProjectItem
    written: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


def board_field_values(details: IncidentDetails) -> list[tuple[str, FieldValue]]:
    return [(board_name, details.get(attr)) for board_name, attr in BOARD_FIELDS]


def _write_field(
    item: ProjectItem,
    project_field: ProjectField,
    value: str,
    *,
    token: str | None,
) -> bool:
    """Write *value* by the field's declared kind; False when it was skipped."""
    if project_field.kind == ProjectFieldKind.TEXT:
        gh_project_set_text_value(item, project_field.id, value, token=token)
        return True

    if project_field.kind == ProjectFieldKind.DATE:
        iso = normalize_date(value)
        if iso is None:
            vprint(f"No valid YYYY-MM-DD date in {value!r} for '{project_field.name}' – skipping")
            return False
        gh_project_set_date_value(item, project_field.id, iso, token=token)
        return True

    if project_field.kind == ProjectFieldKind.SINGLE_SELECT:
        option_id = project_field.options.get(value.strip().lower())
        if option_id is None:
            print(
                f"WARN: Value {value!r} does not match any option of '{project_field.name}'. "
                f"Available options: {list(project_field.options.keys())}",
                file=sys.stderr,
            )
            return False
        gh_project_set_single_select_value(item, project_field.id, option_id, token=token)
        return True

    vprint(f"Field '{project_field.name}' has unsupported type – skipping")
    return False


def sync_project_fields(
    owner: str,
    project_number: int,
    content_id: str,
    details: IncidentDetails,
    *,
    token: str | None = None,
) -> ProjectSyncResult:
    """Attach *content_id* to the board and write every mappable field.

    Schema and add-item failures propagate to the caller; individual field
    write failures are collected in ``failed``.
    """
    schema = gh_project_get_fields(owner, project_number, token=token)
    item = gh_project_add_item(schema.project_id, content_id, token=token)
    result = ProjectSyncResult(item=item)

    for board_name, value in board_field_values(details):
        project_field = schema.lookup(board_name)
        if project_field is None:
            vprint(f"No field named '{board_name}' in project #{project_number} – skipping")
            result.skipped.append(board_name)
            continue

        if not value.is_found or not value.value.strip():
            vprint(f"'{board_name}' is {value.render()!r} – skipping")
            result.skipped.append(board_name)
            continue

        try:
            written = _write_field(item, project_field, value.value, token=token)
        except (UpstreamError, ValueError) as exc:
            print(f"WARN: Failed to set '{board_name}' on project item {item.item_id}: {exc}", file=sys.stderr)
            result.failed.append(board_name)
            continue

        if written:
            vprint(f"Set '{board_name}' = {value.value!r}")
            result.written.append(board_name)
        else:
            result.skipped.append(board_name)

    print(
        f"Project #{project_number}: {len(result.written)} field(s) set, "
        f"{len(result.skipped)} skipped, {len(result.failed)} failed"
    )
    return result
