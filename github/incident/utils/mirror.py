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


"""Mirror issue creation in the central repository and the back-link
comment on the originating issue.
"""

from __future__ import annotations

from github import Github

from shared.common import gh_notice
from shared.github_issues import gh_issue_comment, gh_issue_create
from shared.models import IssueRecord, MirroredIssue

from .incident_builder import build_back_link_comment, build_mirror_labels


def publish_mirror_issue(
    client: Github,
    target_repo: str,
    record: IssueRecord,
    body: str,
) -> MirroredIssue:
    """Create the mirror issue; raises ``UpstreamError`` on failure."""
    print(f"Creating mirrored issue in {target_repo}...")
    mirror = gh_issue_create(
        client,
        target_repo,
        title=record.title,
        body=body,
        labels=build_mirror_labels(record),
        assignees=list(record.assignees) or None,
    )
    gh_notice(f"Mirrored issue created successfully: {mirror.html_url}")
    return mirror


def comment_back_link(client: Github, record: IssueRecord, mirror: MirroredIssue) -> None:
    """Post the single "mirrored" comment on the original issue."""
    gh_issue_comment(
        client,
        record.source_repo,
        record.number,
        build_back_link_comment(mirror.html_url),
    )
    print(f"Linked {record.source_repo}#{record.number} -> {mirror.html_url}")
