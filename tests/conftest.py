# topmark:header:start
#
#   project      : FlowText
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the FlowText test suite.

Sets up TRACE logging for test runs, keeps the developer's environment from
forcing a log level, and restores the process-wide information model after
every test.
"""

from __future__ import annotations

from ipaddress import IPv4Address
from typing import TYPE_CHECKING

import pytest

from flowtext.config import logging
from flowtext.ipfix import Field, FieldIdentity, Message, MessageHeader, ScalarType
from flowtext.ipfix.registry import reset_information_model

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

    from flowtext.ipfix import DataSet


@pytest.fixture(autouse=True)
def silence_flowtext_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure FLOWTEXT_LOG_LEVEL from the developer's shell does not leak into tests."""
    monkeypatch.delenv("FLOWTEXT_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def restore_information_model() -> Iterator[None]:
    """Put the built-in information model back after each test."""
    yield
    reset_information_model()


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log everything down to TRACE during tests."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_message(*data_sets: DataSet, agent_id: str = "192.0.2.1") -> Message:
    """Build a message with a fixed header around the given data sets."""
    return Message(
        agent_id=agent_id,
        header=MessageHeader(
            version=10,
            length=64,
            export_time=1483228800,
            sequence_number=7,
            domain_id=0,
        ),
        data_sets=list(data_sets),
    )


@pytest.fixture
def message_factory() -> Callable[..., Message]:
    """Expose `make_message` to tests as a fixture."""
    return make_message


@pytest.fixture
def tcp_data_set() -> DataSet:
    """A TCP record carrying stray ICMP type/code fields."""
    return {
        FieldIdentity(0, 4): [Field(ScalarType.UNSIGNED8, 6)],
        FieldIdentity(0, 8): [Field(ScalarType.IPV4_ADDRESS, IPv4Address("10.0.0.1"))],
        FieldIdentity(0, 176): [Field(ScalarType.UNSIGNED8, 8)],
        FieldIdentity(0, 177): [Field(ScalarType.UNSIGNED8, 0)],
    }


@pytest.fixture
def elements_dir(tmp_path: Path) -> Path:
    """A directory holding a small ``ipfix.elements`` file."""
    (tmp_path / "ipfix.elements").write_text(
        "9999:\n"
        "  1: [customField, unsigned32]\n"
        "  2: [hostOrAddress, ipv4OrString]\n"
        "  3: [onlyName]\n"
        "  4: [oddField, bogusType]\n"
        "  5: [withExtras, string, 42, ~, {note: ignored}]\n",
        encoding="utf-8",
    )
    return tmp_path
