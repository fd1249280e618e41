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

"""GitHub automation building blocks shared across workflows.

Modules
-------
common          Logging control, workflow commands / step outputs, ``gh`` subprocess wrappers.
errors          Exception taxonomy (configuration, upstream, sync warning).
models          Issue record, mirrored issue and Projects V2 field dataclasses.
dates           Strict ``YYYY-MM-DD`` date normalisation.
templates       Literal ``{{TOKEN}}`` template rendering and loading.
github_issues   GitHub Issues operations via PyGithub (create, comment).
github_projects GitHub Projects V2 GraphQL operations (schema, add item, field writes).
"""
