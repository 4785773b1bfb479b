# topmark:header:start
#
#   project      : FlowText
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running FlowText in a controlled working directory.

The `run_cli` fixture invokes the Click group with the test's ``tmp_path`` as
the working directory, so that ``./flowtext.toml`` auto-discovery only ever
sees files the test created.
"""

from __future__ import annotations

import json
import os
from typing import IO, TYPE_CHECKING, Any, Protocol

import pytest
from click.testing import CliRunner, Result

from flowtext.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class RunCli(Protocol):
    def __call__(
        self,
        argv: Sequence[str],
        *,
        input_text: str | bytes | IO[Any] | None = None,
    ) -> Result: ...


@pytest.fixture
def run_cli(tmp_path: Path) -> RunCli:
    """Return a runner that invokes the CLI with ``tmp_path`` as the CWD."""

    def _run(
        argv: Sequence[str],
        *,
        input_text: str | bytes | IO[Any] | None = None,
    ) -> Result:
        runner = CliRunner()
        cwd: str = os.getcwd()
        try:
            os.chdir(tmp_path)
            return runner.invoke(cli, list(argv), input=input_text)
        finally:
            os.chdir(cwd)

    return _run


HEADER: dict[str, int] = {
    "version": 10,
    "length": 64,
    "export_time": 1483228800,
    "sequence_number": 7,
    "domain_id": 0,
}


@pytest.fixture
def message_document() -> dict[str, Any]:
    """A two-record message: one TCP record with stray ICMP fields, one ICMP record."""
    return {
        "agent_id": "192.0.2.1",
        "header": HEADER,
        "data_sets": [
            [
                {"element": 4, "values": [6]},
                {"element": 8, "values": ["10.0.0.1"]},
                {"element": 176, "values": [8]},
                {"element": 177, "values": [0]},
            ],
            [
                {"element": 4, "values": [1]},
                {"element": 176, "values": [8]},
                {"element": 177, "values": [0]},
            ],
        ],
    }


@pytest.fixture
def message_path(tmp_path: Path, message_document: dict[str, Any]) -> Path:
    """`message_document` written to ``message.json`` in ``tmp_path``."""
    path = tmp_path / "message.json"
    path.write_text(json.dumps(message_document), encoding="utf-8")
    return path
