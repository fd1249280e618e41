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

"""GitHub Projects V2 GraphQL operations – project field schema lookup,
adding an issue to a project, and typed field value writes (text, date,
single-select).
"""

from __future__ import annotations

import json
from typing import Any

from .common import run_gh, vprint
from .dates import is_strict_date
from .errors import SyncWarning, UpstreamError
from .models import ProjectField, ProjectFieldKind, ProjectFieldSchema, ProjectItem


# ---------------------------------------------------------------------------
# GraphQL helpers
# ---------------------------------------------------------------------------

def _run_graphql(
    query: str,
    variables: dict[str, Any] | None = None,
    *,
    token: str | None = None,
) -> dict[str, Any]:
    """Execute a GraphQL query via ``gh api graphql`` and return parsed JSON.

    Integers are sent typed (``-F``); everything else is sent as a raw
    string (``-f``) so values such as ``"123"`` or ``"@file"`` are not
    reinterpreted by ``gh``.
    """
    args = ["api", "graphql", "-f", f"query={query}"]
    for k, v in (variables or {}).items():
        if isinstance(v, int) and not isinstance(v, bool):
            args += ["-F", f"{k}={v}"]
        else:
            args += ["-f", f"{k}={v}"]
    try:
        res = run_gh(args, token=token, exit_on_missing=False)
    except FileNotFoundError as exc:
        raise UpstreamError("gh CLI not found; cannot call the GraphQL API") from exc
    if res.returncode != 0:
        raise UpstreamError("GraphQL call failed", payload=(res.stderr or res.stdout or "").strip())
    try:
        data = json.loads(res.stdout)
    except json.JSONDecodeError as exc:
        raise UpstreamError("Could not parse GraphQL response", payload=res.stdout) from exc
    if data.get("errors"):
        raise UpstreamError("GraphQL call returned errors", payload=data["errors"])
    return data


# ---------------------------------------------------------------------------
# Field schema
# ---------------------------------------------------------------------------

_FIELDS_QUERY = """
query($login: String!, $num: Int!) {
  repositoryOwner(login: $login) {
    ... on Organization { projectV2(number: $num) { ...ProjectFields } }
    ... on User { projectV2(number: $num) { ...ProjectFields } }
  }
}
fragment ProjectFields on ProjectV2 {
  id
  fields(first: 100) {
    nodes {
      ... on ProjectV2FieldCommon { id name dataType }
      ... on ProjectV2SingleSelectField { options { id name } }
    }
  }
}
"""


def gh_project_get_fields(
    owner: str,
    project_number: int,
    *,
    token: str | None = None,
) -> ProjectFieldSchema:
    """Fetch the project node-id and every field's id, name and data type.

    *owner* may be an organization or a user login.
    """
    data = _run_graphql(_FIELDS_QUERY, {"login": owner, "num": project_number}, token=token)

    project = ((data.get("data") or {}).get("repositoryOwner") or {}).get("projectV2")
    if project is None:
        raise SyncWarning(f"Project #{project_number} not found for owner {owner}")

    fields: dict[str, ProjectField] = {}
    for node in (project.get("fields") or {}).get("nodes") or []:
        if not isinstance(node, dict) or not node.get("id") or not node.get("name"):
            continue
        options = {
            str(opt["name"]).lower(): opt["id"]
            for opt in node.get("options") or []
            if isinstance(opt, dict) and opt.get("name") and opt.get("id")
        }
        fields[node["name"]] = ProjectField(
            id=node["id"],
            name=node["name"],
            kind=ProjectFieldKind.from_data_type(node.get("dataType")),
            options=options,
        )

    vprint(f"Project #{project_number}: id={project['id']} fields={sorted(fields)}")
    return ProjectFieldSchema(project_id=project["id"], fields=fields)


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------

def gh_project_add_item(
    project_id: str,
    content_id: str,
    *,
    token: str | None = None,
) -> ProjectItem:
    """Attach an issue (by GraphQL node-id) to the project; return the item."""
    query = """
    mutation($projectId: ID!, $contentId: ID!) {
      addProjectV2ItemById(input: {projectId: $projectId, contentId: $contentId}) {
        item { id }
      }
    }
    """
    data = _run_graphql(query, {"projectId": project_id, "contentId": content_id}, token=token)
    item = ((data.get("data") or {}).get("addProjectV2ItemById") or {}).get("item") or {}
    item_id = item.get("id")
    if not item_id:
        raise SyncWarning(f"Project did not return an item id for content {content_id}")
    vprint(f"Added content {content_id} to project {project_id} as item {item_id}")
    return ProjectItem(project_id=project_id, item_id=item_id)


# ---------------------------------------------------------------------------
# Field values
# ---------------------------------------------------------------------------

def _update_field_value(
    item: ProjectItem,
    field_id: str,
    value_type: str,
    graphql_value_key: str,
    value: str,
    *,
    token: str | None,
) -> None:
    query = f"""
    mutation($projectId: ID!, $itemId: ID!, $fieldId: ID!, $value: {value_type}) {{
      updateProjectV2ItemFieldValue(input: {{
        projectId: $projectId,
        itemId: $itemId,
        fieldId: $fieldId,
        value: {{{graphql_value_key}: $value}}
      }}) {{ projectV2Item {{ id }} }}
    }}
    """
    _run_graphql(
        query,
        {
            "projectId": item.project_id,
            "itemId": item.item_id,
            "fieldId": field_id,
            "value": value,
        },
        token=token,
    )


def gh_project_set_text_value(
    item: ProjectItem,
    field_id: str,
    value: str,
    *,
    token: str | None = None,
) -> None:
    _update_field_value(item, field_id, "String!", "text", value, token=token)


def gh_project_set_date_value(
    item: ProjectItem,
    field_id: str,
    value: str,
    *,
    token: str | None = None,
) -> None:
    """Write a ``YYYY-MM-DD`` value to a date field.

    Raises ``ValueError`` without calling GitHub when *value* is not a
    strict calendar date.
    """
    if not is_strict_date(value):
        raise ValueError(f"Not a YYYY-MM-DD date: {value!r}")
    _update_field_value(item, field_id, "Date!", "date", value, token=token)


def gh_project_set_single_select_value(
    item: ProjectItem,
    field_id: str,
    option_id: str,
    *,
    token: str | None = None,
) -> None:
    _update_field_value(item, field_id, "String!", "singleSelectOptionId", option_id, token=token)
