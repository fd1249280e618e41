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

"""GitHub Issues REST operations via PyGithub – client construction,
issue creation and commenting.

Every failure is re-raised as :class:`UpstreamError` carrying the HTTP
status and response payload returned by GitHub.
"""

import requests
from github import Auth, Github, GithubException

from .common import vprint
from .errors import UpstreamError
from .models import MirroredIssue


def github_client(token: str) -> Github:
    return Github(auth=Auth.Token(token))


def gh_issue_create(
    client: Github,
    repo: str,
    title: str,
    body: str,
    labels: list[str],
    assignees: list[str] | None = None,
) -> MirroredIssue:
    kwargs: dict[str, object] = {"title": title, "body": body, "labels": labels}
    # An empty assignee list is omitted rather than sent.
    if assignees:
        kwargs["assignees"] = assignees

    try:
        gh_repo = client.get_repo(repo)
        issue = gh_repo.create_issue(**kwargs)
    except GithubException as exc:
        raise UpstreamError(
            f"Failed to create issue in {repo}", status=exc.status, payload=exc.data
        ) from exc
    except requests.RequestException as exc:
        raise UpstreamError(f"Failed to create issue in {repo}: {exc}") from exc

    vprint(f"Created issue #{issue.number} in {repo} ({issue.html_url})")
    return MirroredIssue(
        repo=repo,
        number=issue.number,
        html_url=issue.html_url,
        node_id=issue.node_id,
    )


def gh_issue_comment(client: Github, repo: str, number: int, body: str) -> None:
    try:
        issue = client.get_repo(repo).get_issue(number)
        issue.create_comment(body)
    except GithubException as exc:
        raise UpstreamError(
            f"Failed to comment on {repo}#{number}", status=exc.status, payload=exc.data
        ) from exc
    except requests.RequestException as exc:
        raise UpstreamError(f"Failed to comment on {repo}#{number}: {exc}") from exc

    vprint(f"Commented on {repo}#{number}")
