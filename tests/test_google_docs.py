"""Tests for Google Doc link detection and Markdown export."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from incident.utils.google_docs import (
    EXPORT_URL,
    TOKEN_URL,
    GoogleCredentials,
    fetch_google_doc_markdown,
    find_google_doc_id,
    google_doc_url,
)
from shared.errors import AuthConfigError, ConfigurationError, UpstreamError

CREDS = GoogleCredentials(client_id="cid", client_secret="secret", refresh_token="refresh")


def _response(status_code=200, json_data=None, text=""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    if json_data is None:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = json_data
    return resp


class TestFindGoogleDocId:
    def test_finds_id_in_edit_link(self):
        assert find_google_doc_id("see https://docs.google.com/document/d/ABC123/edit") == "ABC123"

    def test_id_with_dash_and_underscore(self):
        assert find_google_doc_id("docs.google.com/document/d/a-B_9z?usp=sharing") == "a-B_9z"

    def test_first_link_wins(self):
        text = "docs.google.com/document/d/FIRST and docs.google.com/document/d/SECOND"
        assert find_google_doc_id(text) == "FIRST"

    @pytest.mark.parametrize(
        "text",
        ["", None, "no link here", "https://docs.google.com/spreadsheets/d/XYZ/edit", "docs.google.com/document/d/"],
    )
    def test_absent(self, text):
        assert find_google_doc_id(text) is None

    def test_doc_url(self):
        assert google_doc_url("ABC123") == "https://docs.google.com/document/d/ABC123"


class TestGoogleCredentials:
    def test_from_env_strips(self, monkeypatch):
        monkeypatch.setenv("GCP_CLIENT_ID", " cid ")
        monkeypatch.setenv("GCP_CLIENT_SECRET", "secret")
        monkeypatch.setenv("GCP_REFRESH_TOKEN", "refresh\n")
        assert GoogleCredentials.from_env() == CREDS

    def test_require_names_all_missing(self, monkeypatch):
        monkeypatch.delenv("GCP_CLIENT_ID", raising=False)
        monkeypatch.setenv("GCP_CLIENT_SECRET", "  ")
        monkeypatch.setenv("GCP_REFRESH_TOKEN", "refresh")
        with pytest.raises(AuthConfigError) as exc_info:
            GoogleCredentials.from_env().require()
        assert "GCP_CLIENT_ID" in str(exc_info.value)
        assert "GCP_CLIENT_SECRET" in str(exc_info.value)
        assert isinstance(exc_info.value, ConfigurationError)


@patch("incident.utils.google_docs.requests.get")
@patch("incident.utils.google_docs.requests.post")
class TestFetchGoogleDocMarkdown:
    def test_refreshes_token_and_exports(self, mock_post, mock_get):
        mock_post.return_value = _response(json_data={"access_token": "tok"}, text='{"access_token": "tok"}')
        mock_get.return_value = _response(text="| **Priority** | P1 |")

        assert fetch_google_doc_markdown("ABC123", CREDS) == "| **Priority** | P1 |"

        assert mock_post.call_args.args[0] == TOKEN_URL
        assert mock_post.call_args.kwargs["data"]["grant_type"] == "refresh_token"
        assert mock_post.call_args.kwargs["data"]["refresh_token"] == "refresh"
        assert mock_get.call_args.args[0] == EXPORT_URL.format(doc_id="ABC123")
        assert mock_get.call_args.kwargs["params"] == {"mimeType": "text/markdown"}
        assert mock_get.call_args.kwargs["headers"] == {"Authorization": "Bearer tok"}

    def test_blank_credentials_fail_before_network(self, mock_post, mock_get):
        with pytest.raises(AuthConfigError):
            fetch_google_doc_markdown("ABC123", GoogleCredentials("", "secret", "refresh"))
        mock_post.assert_not_called()
        mock_get.assert_not_called()

    def test_token_refresh_rejected(self, mock_post, mock_get):
        mock_post.return_value = _response(
            status_code=400, json_data={"error": "invalid_grant"}, text='{"error": "invalid_grant"}'
        )
        with pytest.raises(UpstreamError) as exc_info:
            fetch_google_doc_markdown("ABC123", CREDS)
        assert exc_info.value.status == 400
        assert exc_info.value.payload == {"error": "invalid_grant"}
        assert "invalid_grant" in str(exc_info.value)
        mock_get.assert_not_called()

    def test_token_response_without_access_token(self, mock_post, mock_get):
        mock_post.return_value = _response(json_data={}, text="{}")
        with pytest.raises(UpstreamError):
            fetch_google_doc_markdown("ABC123", CREDS)

    def test_export_not_found(self, mock_post, mock_get):
        mock_post.return_value = _response(json_data={"access_token": "tok"}, text="x")
        mock_get.return_value = _response(status_code=404, text="File not found")
        with pytest.raises(UpstreamError) as exc_info:
            fetch_google_doc_markdown("ABC123", CREDS)
        assert exc_info.value.status == 404
        assert exc_info.value.payload == "File not found"

    def test_transport_error(self, mock_post, mock_get):
        mock_post.side_effect = requests.ConnectionError("boom")
        with pytest.raises(UpstreamError, match="boom"):
            fetch_google_doc_markdown("ABC123", CREDS)
