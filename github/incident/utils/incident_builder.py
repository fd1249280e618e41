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


"""IncidentDetails assembly from the issue and its report, and mirror
issue body / comment construction.
"""

from shared.models import IssueRecord
from shared.templates import render_literal_template

from .constants import BACK_LINK_COMMENT, DOC_FIELD_LABELS, LABEL_MIRRORED_INCIDENT
from .google_docs import google_doc_url
from .markdown_fields import FieldValue, extract_first_field
from .models import IncidentDetails


def _doc_field(markdown: str, name: str) -> FieldValue:
    return extract_first_field(markdown, *DOC_FIELD_LABELS[name])


def build_incident_details(record: IssueRecord, markdown: str, doc_id: str) -> IncidentDetails:
    """Combine report fields with values copied from the issue itself."""
    return IncidentDetails(
        incident_number=FieldValue.found(f"INC-{record.number}"),
        incident_type=_doc_field(markdown, "incident_type"),
        opened_date=_doc_field(markdown, "opened_date"),
        last_updated=FieldValue.from_optional(record.updated_at),
        last_updated_by=FieldValue.from_optional(record.author),
        closed_date=_doc_field(markdown, "closed_date"),
        reported_by=_doc_field(markdown, "reported_by"),
        description=_doc_field(markdown, "description"),
        impacted_customer_or_bu=_doc_field(markdown, "impacted_customer_or_bu"),
        state=FieldValue.found(str(record.state)),
        priority=_doc_field(markdown, "priority"),
        assignment_to=_doc_field(markdown, "assignment_to"),
        assignment_group=_doc_field(markdown, "assignment_group"),
        affected_system=_doc_field(markdown, "affected_system"),
        attachment_options=FieldValue.found(google_doc_url(doc_id)),
    )


def build_template_values(record: IssueRecord, details: IncidentDetails) -> dict[str, str]:
    """Build the token -> value mapping for the mirror issue template."""
    return {
        "{{DESCRIPTION}}": record.description,
        "{{INCIDENT_NUMBER}}": details.incident_number.render(),
        "{{INCIDENT_TYPE}}": details.incident_type.render(),
        "{{OPENED_DATE}}": details.opened_date.render(),
        "{{LAST_UPDATED}}": details.last_updated.render(),
        "{{LAST_UPDATED_BY}}": record.author or "",
        "{{CLOSED_DATE}}": details.closed_date.render(),
        "{{REPORTED_BY}}": details.reported_by.render(),
        "{{DOC_DESCRIPTION}}": details.description.render(),
        "{{PRIORITY}}": details.priority.render(),
        "{{STATE}}": details.state.render(),
        "{{IMPACTED_BU}}": details.impacted_customer_or_bu.render(),
        "{{AFFECTED_SYSTEM}}": details.affected_system.render(),
        "{{ASSIGNMENT_GROUP}}": details.assignment_group.render(),
        "{{ASSIGNMENT_TO}}": details.assignment_to.render(),
        "{{ATTACHMENT_OPTIONS}}": details.attachment_options.render(),
        "{{REPO_NAME}}": record.source_repo,
        "{{ISSUE_NUMBER}}": str(record.number),
        "{{ISSUE_URL}}": record.url,
        "{{AUTHOR}}": record.author or "Unknown",
    }


def build_mirror_issue_body(template: str, record: IssueRecord, details: IncidentDetails) -> str:
    return render_literal_template(template, build_template_values(record, details))


def build_mirror_labels(record: IssueRecord) -> list[str]:
    """Source labels plus the mirror marker, without duplicates."""
    labels = list(record.labels)
    if LABEL_MIRRORED_INCIDENT not in labels:
        labels.append(LABEL_MIRRORED_INCIDENT)
    return labels


def build_back_link_comment(mirror_url: str) -> str:
    return BACK_LINK_COMMENT.format(url=mirror_url)
