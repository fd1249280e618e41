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

"""Shared low-level utilities – logging control, GitHub Actions workflow
commands and step outputs, and subprocess wrappers for the ``gh`` CLI.
"""

from __future__ import annotations

import os
import subprocess
import sys
import uuid
from contextlib import contextmanager
from typing import Iterator

_verbose_enabled = False


def parse_runner_debug() -> bool:
    raw = os.getenv("RUNNER_DEBUG")
    if raw is None or raw == "":
        return False
    if raw not in {"0", "1"}:
        raise SystemExit("ERROR: RUNNER_DEBUG must be '0' or '1' when set")
    return raw == "1"


def set_verbose_enabled(value: bool) -> None:
    global _verbose_enabled
    _verbose_enabled = bool(value)


def vprint(msg: str) -> None:
    if _verbose_enabled:
        print(msg)


# ---------------------------------------------------------------------------
# GitHub Actions workflow commands
# ---------------------------------------------------------------------------

def _escape_command_data(msg: str) -> str:
    # Workflow commands are line-based; %, CR and LF must be percent-encoded.
    return msg.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def gh_warning(msg: str) -> None:
    """Emit a ``::warning::`` annotation (also readable in a plain terminal)."""
    print(f"::warning::{_escape_command_data(msg)}")


def gh_notice(msg: str) -> None:
    print(f"::notice::{_escape_command_data(msg)}")


@contextmanager
def gh_group(title: str) -> Iterator[None]:
    """Fold everything printed inside the block into a collapsible log group."""
    print(f"::group::{title}")
    try:
        yield
    finally:
        print("::endgroup::")


def set_output(name: str, value: str) -> None:
    """Append ``name=value`` to ``$GITHUB_OUTPUT``.

    Multi-line values use the heredoc-style delimiter syntax. Outside of
    GitHub Actions (no ``GITHUB_OUTPUT``) the pair is printed instead.
    """
    output_path = os.getenv("GITHUB_OUTPUT")
    if "\n" in value:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        line = f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
    else:
        line = f"{name}={value}\n"

    if not output_path:
        print(f"GITHUB_OUTPUT not set – {line}", end="")
        return

    with open(output_path, "a", encoding="utf-8") as fh:
        fh.write(line)


# ---------------------------------------------------------------------------
# gh CLI
# ---------------------------------------------------------------------------

def run_cmd(
    cmd: list[str],
    *,
    capture_output: bool = True,
    env: dict[str, str] | None = None,
) -> subprocess.CompletedProcess:
    return subprocess.run(cmd, check=False, capture_output=capture_output, text=True, env=env)


def run_gh(
    args: list[str],
    *,
    token: str | None = None,
    capture_output: bool = True,
    exit_on_missing: bool = True,
) -> subprocess.CompletedProcess:
    """Run ``gh`` with *args*; *token* (if given) overrides ``GH_TOKEN``.

    With ``exit_on_missing=False`` a missing ``gh`` binary raises
    ``FileNotFoundError`` to the caller instead of exiting.
    """
    cmd = ["gh"] + args
    env = None
    if token:
        env = dict(os.environ)
        env["GH_TOKEN"] = token
    try:
        return run_cmd(cmd, capture_output=capture_output, env=env)
    except FileNotFoundError:
        if not exit_on_missing:
            raise
        print("ERROR: gh CLI not found. Install and authenticate gh.", file=sys.stderr)
        raise SystemExit(1)
