# topmark:header:start
#
#   project      : FlowText
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FlowText project automation via Nox.

Sessions:
  - `qa`: Per-Python session that runs the test suite (property tests excluded).
  - `property_test`: Long-running property tests (opt-in).

Common invocations:
  - `nox -s qa` (runs for all configured Python versions)
  - `nox -s property_test`
"""

from __future__ import annotations

import sys

import nox

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"

# Supported versions come from the pyproject.toml classifiers
PYPROJECT = nox.project.load_toml("pyproject.toml")
PYTHONS: list[str] = nox.project.python_versions(PYPROJECT) or [CURRENT_PYTHON_VERSION]

nox.options.sessions = ["qa"]
nox.options.default_venv_backend = "uv|virtualenv"


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite for one Python version."""
    session.install("-e", ".[test]")
    session.run("pytest", "-m", "not hypothesis_slow", *session.posargs)


@nox.session(python=CURRENT_PYTHON_VERSION)
def property_test(session: nox.Session) -> None:
    """Run the long-running property tests (developer only)."""
    session.install("-e", ".[test]")
    session.run("pytest", "-vv", "-m", "hypothesis_slow", *session.posargs)
