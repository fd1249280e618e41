import copy

import pytest

ISSUE_EVENT = {
    "action": "opened",
    "issue": {
        "number": 42,
        "title": "Suspicious login activity on billing portal",
        "body": "Report: https://docs.google.com/document/d/ABC123/edit please review",
        "user": {"login": "alice"},
        "html_url": "https://github.com/acme/payments/issues/42",
        "assignees": [{"login": "bob"}, {"login": "carol"}],
        "state": "open",
        "updated_at": "2024-03-16T09:30:00Z",
        "closed_at": None,
        "labels": [{"name": "security"}, {"name": "sev:high"}],
        "milestone": {"title": "Q1"},
    },
    "repository": {"full_name": "acme/payments"},
}

REPORT_MARKDOWN = """# Security Incident Report

| Field | Value |
| :---- | :---- |
| **Incident type** | Unauthorized access |
| **Incident reported on** | 2024-03-15 |
| **Incident closed on** | SELECT |
| **Reporter** | Alice Smith |
| **Incident Overview** | Brute-force attempts against the billing portal |
| **Customer(s) Impacted** | Retail BU |
| **Priority** | P1 |
| **Coordinator** | Bob Jones |
| **Incident owning team (Custodian)** | Payments Platform |
| **Affected system(s)** | N/A |
"""


@pytest.fixture
def issue_event():
    return copy.deepcopy(ISSUE_EVENT)


@pytest.fixture
def report_markdown():
    return REPORT_MARKDOWN


@pytest.fixture(autouse=True)
def _no_github_output(monkeypatch):
    monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
