# topmark:header:start
#
#   project      : FlowText
#   file         : test_cli_elements.py
#   file_relpath : tests/cli/test_cli_elements.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `flowtext elements` and `flowtext version`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from flowtext.cli.exit_codes import ExitCode
from flowtext.constants import FLOWTEXT_VERSION

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


def test_elements_lists_iana_defaults(run_cli: Any) -> None:
    """The built-in model is listed as aligned text."""
    result = run_cli(["elements"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    lines = result.stdout.splitlines()
    assert lines[0].split() == ["0_1", "octetDeltaCount", "unsigned64"]
    assert any(line.split() == ["0_4", "protocolIdentifier", "unsigned8"] for line in lines)


def test_elements_json(run_cli: Any, elements_dir: Path) -> None:
    """JSON output carries identifiers, names and type details."""
    result = run_cli(["--elements-dir", str(elements_dir), "elements", "--format", "json"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    rows = json.loads(result.stdout)
    assert rows[1] == {
        "key": "9999_2",
        "enterprise": 9999,
        "element": 2,
        "name": "hostOrAddress",
        "type": "ipv4OrString",
        "variable_length": True,
    }
    assert rows[2]["type"] == "unknown"


def test_elements_filter_without_matches(run_cli: Any) -> None:
    """Filtering on an enterprise with no elements says so."""
    result = run_cli(["elements", "--enterprise", "4242"])
    assert result.exit_code == ExitCode.SUCCESS
    assert result.stdout.strip() == "No information elements."


def test_version(run_cli: Any) -> None:
    """`version` prints the installed version."""
    result = run_cli(["version"])
    assert result.exit_code == ExitCode.SUCCESS
    assert result.stdout.strip() == FLOWTEXT_VERSION


def test_version_json(run_cli: Any) -> None:
    """`version --format json` prints a JSON object."""
    result = run_cli(["version", "--format", "json"])
    assert result.exit_code == ExitCode.SUCCESS
    assert json.loads(result.stdout) == {"version": FLOWTEXT_VERSION}
