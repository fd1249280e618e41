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


"""Issue event payload loading and normalisation into :class:`IssueRecord`."""

from __future__ import annotations

import json
import os
from typing import Any

from shared.common import vprint
from shared.errors import ConfigurationError
from shared.models import IssueRecord, IssueState


def load_event_payload(path: str | None) -> dict[str, Any]:
    """Read the webhook event JSON written by the Actions runner."""
    if not path:
        raise ConfigurationError("GITHUB_EVENT_PATH is not set and --event-path was not given")
    if not os.path.isfile(path):
        raise ConfigurationError(f"Event payload file not found: {path}")
    try:
        with open(path, encoding="utf-8") as fh:
            payload = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Could not read event payload {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigurationError(f"Event payload in {path} is not a JSON object")
    return payload


def _logins(items: Any) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for item in items or []:
        login = item.get("login") if isinstance(item, dict) else item
        if login:
            seen.setdefault(str(login), None)
    return tuple(seen)


def _label_names(items: Any) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for item in items or []:
        name = item.get("name") if isinstance(item, dict) else item
        if name:
            seen.setdefault(str(name), None)
    return tuple(seen)


def parse_issue_event(payload: dict[str, Any]) -> IssueRecord:
    """Build an :class:`IssueRecord` from an ``issues`` event payload.

    Optional parts of the issue (user, assignees, labels, milestone,
    closed_at) degrade to ``None`` / empty tuples. A payload without an
    issue, an issue number or a repository name is a configuration error.
    """
    issue = (payload or {}).get("issue")
    if not isinstance(issue, dict):
        raise ConfigurationError("No issue payload found.")

    number = issue.get("number")
    if number is None:
        raise ConfigurationError("Issue payload has no number.")
    try:
        number = int(number)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Issue number is not an integer: {number!r}") from exc

    repository = payload.get("repository") or {}
    if not isinstance(repository, dict):
        raise ConfigurationError("Event payload repository is not an object.")
    repo_name = str(repository.get("full_name") or "").strip()
    if not repo_name:
        raise ConfigurationError("Event payload has no repository.full_name.")

    raw_state = str(issue.get("state") or "").strip().lower()
    try:
        state = IssueState(raw_state)
    except ValueError as exc:
        raise ConfigurationError(f"Unsupported issue state: {issue.get('state')!r}") from exc

    user = issue.get("user") or {}
    if not isinstance(user, dict):
        raise ConfigurationError(f"Issue user is not an object: {user!r}")
    milestone = issue.get("milestone") or {}
    if not isinstance(milestone, dict):
        raise ConfigurationError(f"Issue milestone is not an object: {milestone!r}")

    return IssueRecord(
        number=number,
        title=str(issue.get("title") or ""),
        description=str(issue.get("body") or ""),
        author=user.get("login") or None,
        url=str(issue.get("html_url") or ""),
        assignees=_logins(issue.get("assignees")),
        state=state,
        updated_at=str(issue.get("updated_at") or ""),
        closed_at=issue.get("closed_at") or None,
        source_repo=repo_name,
        labels=_label_names(issue.get("labels")),
        milestone=milestone.get("title") or None,
    )


def log_issue_summary(record: IssueRecord) -> None:
    vprint("")
    vprint("---- Incoming Incident Detected ----")
    vprint(f"Incident #: {record.number}")
    vprint(f"Title:      {record.title}")
    vprint(f"Author:     {record.author}")
    vprint(f"Assignees:  {', '.join(record.assignees)}")
    vprint(f"State:      {record.state}")
    vprint(f"Updated:    {record.updated_at}")
    vprint(f"Closed:     {record.closed_at}")
    vprint(f"Labels:     {', '.join(record.labels)}")
    vprint(f"Link:       {record.url}")
    vprint(f"Repository: {record.source_repo}")
    vprint(f"Milestone:  {record.milestone}")
    vprint("-------------------------------------")
    vprint("")
