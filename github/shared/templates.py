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

"""Literal ``{{TOKEN}}`` Markdown template rendering and template loading."""

import os
import re

from .errors import ConfigurationError


def render_literal_template(template: str, replacements: dict[str, str]) -> str:
    """Replace every listed token in *template* with its value.

    Tokens are matched literally and substituted in a single pass, so a
    value is never re-scanned for other tokens. Tokens not present in
    *replacements* are left untouched.
    """
    if not replacements:
        return template

    # Longest first so a token that is a prefix of another cannot win.
    tokens = sorted(replacements, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(t) for t in tokens))

    def repl(match: re.Match[str]) -> str:
        return str(replacements[match.group(0)])

    return pattern.sub(repl, template)


def load_template(path: str) -> str:
    """Read a Markdown template file, raising ``ConfigurationError`` if absent."""
    if not os.path.isfile(path):
        raise ConfigurationError(f"Template file not found: {path}")
    with open(path, encoding="utf-8") as fh:
        return fh.read()
