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


"""Security incident mirroring utilities.

Modules
-------
constants        Label names, sentinel strings, document field labels, board field names.
issue_data       Issue event payload loading and normalisation into ``IssueRecord``.
google_docs      Google Doc link detection and Markdown export via the Drive API.
markdown_fields  Field extraction from Markdown table rows (``FieldValue`` results).
models           ``IncidentDetails`` record and its JSON output form.
incident_builder IncidentDetails assembly and mirror issue body / comment rendering.
config           Mirror target configuration loaded from the environment.
mirror           Mirror issue creation and back-link comment.
project_sync     Best-effort Projects V2 field synchronisation.
"""
