"""Tests for PyGithub issue helpers."""

from unittest.mock import MagicMock

import pytest
from github import GithubException

from shared.errors import UpstreamError
from shared.github_issues import gh_issue_comment, gh_issue_create
from shared.models import MirroredIssue


def _client_with_issue(number=7, url="https://github.com/acme/incidents/issues/7", node_id="I_kw7"):
    client = MagicMock()
    issue = MagicMock()
    issue.number = number
    issue.html_url = url
    issue.node_id = node_id
    client.get_repo.return_value.create_issue.return_value = issue
    return client


class TestIssueCreate:
    def test_returns_mirrored_issue(self):
        client = _client_with_issue()

        result = gh_issue_create(client, "acme/incidents", "Title", "Body", ["a"], ["bob"])

        client.get_repo.assert_called_once_with("acme/incidents")
        client.get_repo.return_value.create_issue.assert_called_once_with(
            title="Title", body="Body", labels=["a"], assignees=["bob"]
        )
        assert result == MirroredIssue(
            repo="acme/incidents",
            number=7,
            html_url="https://github.com/acme/incidents/issues/7",
            node_id="I_kw7",
        )

    @pytest.mark.parametrize("assignees", [None, []])
    def test_empty_assignees_are_omitted(self, assignees):
        client = _client_with_issue()
        gh_issue_create(client, "acme/incidents", "Title", "Body", [], assignees)
        kwargs = client.get_repo.return_value.create_issue.call_args.kwargs
        assert "assignees" not in kwargs

    def test_github_error_is_upstream_error(self):
        client = MagicMock()
        client.get_repo.return_value.create_issue.side_effect = GithubException(
            422, {"message": "Validation Failed"}, None
        )
        with pytest.raises(UpstreamError) as exc_info:
            gh_issue_create(client, "acme/incidents", "Title", "Body", [])
        assert exc_info.value.status == 422
        assert "Validation Failed" in str(exc_info.value)


class TestIssueComment:
    def test_comments_on_issue(self):
        client = MagicMock()
        gh_issue_comment(client, "acme/payments", 42, "hello")
        client.get_repo.assert_called_once_with("acme/payments")
        client.get_repo.return_value.get_issue.assert_called_once_with(42)
        client.get_repo.return_value.get_issue.return_value.create_comment.assert_called_once_with("hello")

    def test_github_error_is_upstream_error(self):
        client = MagicMock()
        client.get_repo.side_effect = GithubException(404, {"message": "Not Found"}, None)
        with pytest.raises(UpstreamError) as exc_info:
            gh_issue_comment(client, "acme/payments", 42, "hello")
        assert exc_info.value.status == 404
