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

"""Exception taxonomy shared by the automation scripts.

``ConfigurationError`` and ``UpstreamError`` are fatal and surface as the
run's failure message; ``SyncWarning`` is raised only inside best-effort
phases and is logged by the caller.
"""

from __future__ import annotations

import json
from typing import Any


class IncidentSyncError(Exception):
    """Base class for all errors raised by the incident automation."""


class ConfigurationError(IncidentSyncError):
    """A required environment variable, payload or file is missing or invalid."""


class AuthConfigError(ConfigurationError):
    """Credentials for an upstream service are blank."""


class UpstreamError(IncidentSyncError):
    """A third-party API or transport call failed."""

    def __init__(self, message: str, *, status: int | None = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.payload = payload

    def __str__(self) -> str:
        parts = [self.message]
        if self.status is not None:
            parts.append(f"status={self.status}")
        if self.payload not in (None, ""):
            payload = self.payload
            if isinstance(payload, (dict, list)):
                payload = json.dumps(payload)
            parts.append(f"payload={payload}")
        return " | ".join(parts)


class SyncWarning(IncidentSyncError):
    """Failure inside the best-effort project sync phase."""
