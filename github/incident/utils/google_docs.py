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


"""Google Doc link detection and Markdown export via the Drive v3 API.

Authentication uses an OAuth client plus a long-lived refresh token:
the refresh token is exchanged for a short-lived access token on every
run, then the document is exported with ``mimeType=text/markdown``.

Environment variables
---------------------
GCP_CLIENT_ID      (required)  OAuth client id.
GCP_CLIENT_SECRET  (required)  OAuth client secret.
GCP_REFRESH_TOKEN  (required)  Refresh token granted to the client for Drive read access.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

import requests

from shared.common import vprint
from shared.errors import AuthConfigError, UpstreamError

from .constants import GOOGLE_DOC_RE, GOOGLE_DOC_URL

TOKEN_URL = "https://oauth2.googleapis.com/token"
EXPORT_URL = "https://www.googleapis.com/drive/v3/files/{doc_id}/export"
MARKDOWN_MIME_TYPE = "text/markdown"
REQUEST_TIMEOUT = 30


# ---------------------------------------------------------------------------
# Link detection
# ---------------------------------------------------------------------------

def find_google_doc_id(text: str | None) -> str | None:
    """Return the id of the first Google Doc link in *text*, or ``None``."""
    m = GOOGLE_DOC_RE.search(text or "")
    if not m:
        return None
    return m.group(1)


def google_doc_url(doc_id: str) -> str:
    return GOOGLE_DOC_URL.format(doc_id=doc_id)


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GoogleCredentials:
    client_id: str
    client_secret: str
    refresh_token: str

    @classmethod
    def from_env(cls) -> "GoogleCredentials":
        return cls(
            client_id=(os.getenv("GCP_CLIENT_ID") or "").strip(),
            client_secret=(os.getenv("GCP_CLIENT_SECRET") or "").strip(),
            refresh_token=(os.getenv("GCP_REFRESH_TOKEN") or "").strip(),
        )

    def require(self) -> "GoogleCredentials":
        missing = [
            name
            for name, value in (
                ("GCP_CLIENT_ID", self.client_id),
                ("GCP_CLIENT_SECRET", self.client_secret),
                ("GCP_REFRESH_TOKEN", self.refresh_token),
            )
            if not value
        ]
        if missing:
            raise AuthConfigError(f"Missing GCP secrets: {', '.join(missing)}")
        return self


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------

def _response_payload(resp: requests.Response) -> object:
    try:
        return resp.json()
    except ValueError:
        return resp.text


def refresh_access_token(credentials: GoogleCredentials) -> str:
    """Exchange the stored refresh token for a short-lived access token."""
    try:
        resp = requests.post(
            TOKEN_URL,
            data={
                "client_id": credentials.client_id,
                "client_secret": credentials.client_secret,
                "refresh_token": credentials.refresh_token,
                "grant_type": "refresh_token",
            },
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as exc:
        raise UpstreamError(f"Google token refresh failed: {exc}") from exc

    if resp.status_code != 200:
        raise UpstreamError(
            "Google token refresh failed",
            status=resp.status_code,
            payload=_response_payload(resp),
        )

    payload = _response_payload(resp)
    token = payload.get("access_token") if isinstance(payload, dict) else None
    if not token:
        raise UpstreamError(
            "Google token response has no access_token",
            status=resp.status_code,
            payload=resp.text,
        )
    return token


def fetch_google_doc_markdown(doc_id: str, credentials: GoogleCredentials) -> str:
    """Return the Markdown rendering of the Google Doc *doc_id*."""
    credentials.require()
    access_token = refresh_access_token(credentials)

    print(f"   Fetching Doc ID: {doc_id}...")
    try:
        resp = requests.get(
            EXPORT_URL.format(doc_id=doc_id),
            params={"mimeType": MARKDOWN_MIME_TYPE},
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as exc:
        raise UpstreamError(f"Google Drive export failed: {exc}") from exc

    if resp.status_code != 200:
        raise UpstreamError(
            f"Google Drive export failed for document {doc_id}",
            status=resp.status_code,
            payload=_response_payload(resp),
        )

    print("   Content fetched.")
    vprint(f"   Exported {len(resp.text)} characters of Markdown")
    return resp.text
