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


"""Domain constants – label names, sentinel strings, Google Doc field
labels, template tokens and Projects V2 board field names.
"""

import re

LABEL_MIRRORED_INCIDENT = "mirrored-incident"

SENTINEL_NOT_FOUND = "Not Found"
SENTINEL_NOT_SPECIFIED = "Not Specified"

# Cell values left over from the report template that mean "not filled in".
PLACEHOLDER_VALUES = frozenset({"SELECT", "", "N/A"})

GOOGLE_DOC_RE = re.compile(r"docs\.google\.com/document/d/([a-zA-Z0-9-_]+)")
GOOGLE_DOC_URL = "https://docs.google.com/document/d/{doc_id}"

DEFAULT_TEMPLATE_PATH = ".github/templates/incident-mirror.md"

# Row labels in the incident report table, per IncidentDetails field.
# Labels are tried in order until one matches.
DOC_FIELD_LABELS: dict[str, tuple[str, ...]] = {
    "incident_type": ("Incident type",),
    "opened_date": ("Incident reported on",),
    "closed_date": ("Incident closed on",),
    "reported_by": ("Reporter",),
    "description": ("Incident Overview",),
    "impacted_customer_or_bu": ("Customer(s) Impacted",),
    "priority": ("Priority",),
    "assignment_to": ("Coordinator",),
    "assignment_group": (
        "Incident owning team (Custodian)",
        "Incident owning team (Custodi an)",
    ),
    "affected_system": ("Affected system(s)",),
}

# Projects V2 board field name -> IncidentDetails attribute, in write order.
BOARD_FIELDS: tuple[tuple[str, str], ...] = (
    ("Incident Number", "incident_number"),
    ("Incident Type", "incident_type"),
    ("Opened Date", "opened_date"),
    ("Last Updated", "last_updated"),
    ("Last Updated By", "last_updated_by"),
    ("Closed Date", "closed_date"),
    ("Reported By", "reported_by"),
    ("Description", "description"),
    ("Impacted Customer/BU", "impacted_customer_or_bu"),
    ("State", "state"),
    ("Category/Rating/Priority", "priority"),
    ("Assignment To", "assignment_to"),
    ("Assignment Group", "assignment_group"),
    ("Affected System", "affected_system"),
    ("Attachment Options", "attachment_options"),
)

BACK_LINK_COMMENT = (
    "**Incident Mirrored Successfully**\n"
    "A mirrored ticket containing the parsed document data has been created "
    "in the centralized repository: {url}"
)
