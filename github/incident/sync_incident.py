#!/usr/bin/env python3
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


"""Mirror a security incident reported on an issue into the central repository.

Triggered by ``issues`` events. When the issue description links a Google
Doc incident report, the report is exported as Markdown, its table fields
are parsed, a mirror issue is created in the central repository, the
incident fields are written to the central Projects V2 board (best effort)
and the original issue receives a comment linking to the mirror.

Outputs (``$GITHUB_OUTPUT``):
- ``doc_id``              id of the linked Google Doc
- ``incident_data_json``  all parsed incident fields as JSON
- ``mirror_issue_url``    URL of the created mirror issue

Usage:
    python3 -m incident.sync_incident --event-path event.json --verbose

Draft / debug (no writes to GitHub):
    python3 -m incident.sync_incident --event-path event.json --dry-run
"""

from __future__ import annotations

import argparse
import os
from typing import Any, Callable

from github import Github

from shared.common import (
    gh_group,
    gh_notice,
    gh_warning,
    parse_runner_debug,
    set_output,
    set_verbose_enabled,
)
from shared.errors import IncidentSyncError
from shared.github_issues import github_client
from shared.templates import load_template

from .utils.config import MirrorTarget
from .utils.constants import DEFAULT_TEMPLATE_PATH
from .utils.google_docs import (
    GoogleCredentials,
    fetch_google_doc_markdown,
    find_google_doc_id,
    google_doc_url,
)
from .utils.incident_builder import build_incident_details, build_mirror_issue_body, build_mirror_labels
from .utils.issue_data import load_event_payload, log_issue_summary, parse_issue_event
from .utils.mirror import comment_back_link, publish_mirror_issue
from .utils.models import IncidentDetails
from .utils.project_sync import sync_project_fields


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Mirror a Google Doc security incident report into the central incident repository",
    )
    parser.add_argument(
        "--event-path",
        default=os.environ.get("GITHUB_EVENT_PATH"),
        help="Path to the issue event JSON (default: $GITHUB_EVENT_PATH)",
    )
    parser.add_argument(
        "--template",
        default=None,
        help=f"Mirror issue body template (default: $GITHUB_WORKSPACE/{DEFAULT_TEMPLATE_PATH})",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Fetch and parse the report, but do not create issues, comments or project items",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Verbose logging (also enabled by RUNNER_DEBUG=1)",
    )
    return parser.parse_args(argv)


def resolve_template_path(template: str | None) -> str:
    if template:
        return template
    workspace = os.getenv("GITHUB_WORKSPACE") or "."
    return os.path.join(workspace, DEFAULT_TEMPLATE_PATH)


def sync_incident(
    payload: dict[str, Any],
    *,
    template_path: str,
    dry_run: bool = False,
    google_credentials: GoogleCredentials | None = None,
    target: MirrorTarget | None = None,
    client_factory: Callable[[str], Github] = github_client,
) -> IncidentDetails | None:
    """Run the whole pipeline for one issue event.

    Returns ``None`` when the issue links no Google Doc. Fatal problems
    raise ``IncidentSyncError``; project board failures are only reported.
    """
    record = parse_issue_event(payload)
    log_issue_summary(record)

    doc_id = find_google_doc_id(record.description)
    if doc_id is None:
        gh_warning("No Google Doc link found in description. Exiting.")
        return None

    gh_notice(f"Security Report Found: {doc_id}")
    print(f"   Full Link: {google_doc_url(doc_id)}")
    set_output("doc_id", doc_id)

    credentials = (google_credentials or GoogleCredentials.from_env()).require()
    markdown = fetch_google_doc_markdown(doc_id, credentials)

    details = build_incident_details(record, markdown, doc_id)
    with gh_group("Parsed Incident Variables"):
        print(details.to_json(indent=2))
    set_output("incident_data_json", details.to_json())

    body = build_mirror_issue_body(load_template(template_path), record, details)

    if dry_run:
        print(f"DRY-RUN: would create mirrored issue {record.title!r} labels={build_mirror_labels(record)}")
        print("DRY-RUN: would sync project fields and comment on the original issue")
        return details

    target = (target or MirrorTarget.from_env()).require()
    target_client = client_factory(target.token)
    mirror = publish_mirror_issue(target_client, target.full_name, record, body)
    set_output("mirror_issue_url", mirror.html_url)

    try:
        sync_project_fields(
            target.project_owner,
            target.project_number,
            mirror.node_id,
            details,
            token=target.token,
        )
    except Exception as exc:
        # The mirror issue already exists; the board is secondary.
        gh_warning(f"Project sync failed: {exc}")

    comment_back_link(client_factory(target.source_token), record, mirror)
    return details


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    set_verbose_enabled(bool(args.verbose) or parse_runner_debug())

    print("Starting Incident Parser & Mirroring...")
    try:
        payload = load_event_payload(args.event_path)
        sync_incident(
            payload,
            template_path=resolve_template_path(args.template),
            dry_run=bool(args.dry_run),
        )
    except IncidentSyncError as exc:
        raise SystemExit(f"Sync Failed: {exc}") from exc


if __name__ == "__main__":
    main()
