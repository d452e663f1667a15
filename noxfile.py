# topmark:header:start
#
#   project      : inspect-utils
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""inspect-utils project automation via Nox.

Sessions:
  - `lint`: Ruff lint on the package and the tests.
  - `format_check`: Verify formatting with Ruff.
  - `qa`: Per-Python session that runs pytest.
  - `property_test`: Property tests, verbose (developer only).
  - `demo`: Run the CLI demo as a smoke test.

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
  - `nox -s property_test`
"""

from __future__ import annotations

import nox

# Keep in sync with the classifiers in pyproject.toml.
PYTHONS: list[str] = ["3.10", "3.11", "3.12", "3.13"]

SOURCES: tuple[str, ...] = ("src", "tests", "noxfile.py")

# Keep defaults fast; run QA (multi-Python) explicitly or in CI.
nox.options.sessions = ["lint", "format_check"]


@nox.session
def lint(session: nox.Session) -> None:
    """Run Ruff lint checks."""
    session.install("ruff")
    session.run("ruff", "check", *SOURCES)


@nox.session
def format_check(session: nox.Session) -> None:
    """Verify formatting without changing files."""
    session.install("ruff")
    session.run("ruff", "format", "--check", *SOURCES)


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite."""
    session.install("-e", ".[test]")
    session.run("pytest", *session.posargs)


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the property tests verbosely (developer only)."""
    session.install("-e", ".[test]")
    session.run("pytest", "-vv", "tests/core/test_stylized_property.py", *session.posargs)


@nox.session
def demo(session: nox.Session) -> None:
    """Print every README example through the installed CLI."""
    session.install("-e", ".")
    session.run("inspect-utils", "--no-color", "demo")
    session.run("inspect-utils", "--no-color", "--width", "20", "demo", "descriptions")
