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

"""Calendar date helpers – coercing loosely formatted text into strict
``YYYY-MM-DD`` values accepted by the Projects V2 ``date`` field.
"""

from __future__ import annotations

import re
from datetime import date

DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")
STRICT_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def normalize_date(text: str | None) -> str | None:
    """Return the first ``YYYY-MM-DD`` date found in *text*, or ``None``.

    The match must name a real calendar day: ``2024-02-30`` or month 13
    are rejected, as is any match that does not survive a round trip
    through :class:`datetime.date` unchanged.
    """
    if not text:
        return None
    m = DATE_RE.search(text)
    if not m:
        return None
    try:
        parsed = date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        return None
    iso = parsed.isoformat()
    if iso != m.group(0):
        return None
    return iso


def is_strict_date(value: str | None) -> bool:
    """True when *value* is exactly a valid ``YYYY-MM-DD`` date."""
    if not value or not STRICT_DATE_RE.fullmatch(value):
        return False
    return normalize_date(value) == value
