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


"""Mirror target configuration loaded from the environment.

Environment variables
---------------------
TARGET_REPO_OWNER       (required)  Owner of the central incident repository.
TARGET_REPO_NAME        (required)  Name of the central incident repository.
CENTRALIZED_REPO_TOKEN  (required)  Token with issue + project write access to the target.
PROJECT_NUMBER          (required)  Projects V2 board number.
PROJECT_OWNER           (optional)  Organization or user owning the board (default: TARGET_REPO_OWNER).
GITHUB_TOKEN            (required)  Token used to comment on the source issue.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from shared.errors import ConfigurationError


def _env(key: str) -> str:
    return (os.getenv(key) or "").strip()


@dataclass(frozen=True)
class MirrorTarget:
    owner: str
    repo: str
    token: str
    project_number_raw: str
    project_owner: str
    source_token: str

    @classmethod
    def from_env(cls) -> "MirrorTarget":
        owner = _env("TARGET_REPO_OWNER")
        return cls(
            owner=owner,
            repo=_env("TARGET_REPO_NAME"),
            token=_env("CENTRALIZED_REPO_TOKEN"),
            project_number_raw=_env("PROJECT_NUMBER"),
            project_owner=_env("PROJECT_OWNER") or owner,
            source_token=_env("GITHUB_TOKEN"),
        )

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def project_number(self) -> int:
        try:
            return int(self.project_number_raw)
        except ValueError as exc:
            raise ConfigurationError(
                f"PROJECT_NUMBER must be an integer, got {self.project_number_raw!r}"
            ) from exc

    def require(self) -> "MirrorTarget":
        missing = [
            name
            for name, value in (
                ("TARGET_REPO_OWNER", self.owner),
                ("TARGET_REPO_NAME", self.repo),
                ("CENTRALIZED_REPO_TOKEN", self.token),
                ("PROJECT_NUMBER", self.project_number_raw),
                ("GITHUB_TOKEN", self.source_token),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(f"Missing mirror configuration: {', '.join(missing)}")
        # Validates the number eagerly.
        _ = self.project_number
        return self
