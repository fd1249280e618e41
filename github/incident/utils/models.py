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


"""Incident data models."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields

from .markdown_fields import FieldValue

# IncidentDetails attribute -> key in the published JSON output.
OUTPUT_KEYS: dict[str, str] = {
    "incident_number": "incidentNumber",
    "incident_type": "incidentType",
    "opened_date": "openedDate",
    "last_updated": "lastUpdated",
    "last_updated_by": "lastUpdatedBy",
    "closed_date": "closedDate",
    "reported_by": "reportedBy",
    "description": "description",
    "impacted_customer_or_bu": "impactedCustomerOrBU",
    "state": "state",
    "priority": "priority",
    "assignment_to": "assignmentTo",
    "assignment_group": "assignmentGroup",
    "affected_system": "affectedSystem",
    "attachment_options": "attachmentOptions",
}


@dataclass(frozen=True)
class IncidentDetails:
    """All incident fields; each one is always present as a ``FieldValue``."""
    incident_number: FieldValue
    incident_type: FieldValue
    opened_date: FieldValue
    last_updated: FieldValue
    last_updated_by: FieldValue
    closed_date: FieldValue
    reported_by: FieldValue
    description: FieldValue
    impacted_customer_or_bu: FieldValue
    state: FieldValue
    priority: FieldValue
    assignment_to: FieldValue
    assignment_group: FieldValue
    affected_system: FieldValue
    attachment_options: FieldValue

    def get(self, name: str) -> FieldValue:
        return getattr(self, name)

    def to_output(self) -> dict[str, str]:
        """Sentinel-collapsed mapping keyed by the published camelCase names."""
        return {OUTPUT_KEYS[f.name]: self.get(f.name).render() for f in fields(self)}

    def to_json(self, *, indent: int | None = None) -> str:
        return json.dumps(self.to_output(), indent=indent)
