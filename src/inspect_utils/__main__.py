# topmark:header:start
#
#   project      : inspect-utils
#   file         : __main__.py
#   file_relpath : src/inspect_utils/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running inspect-utils via ``python -m inspect_utils``.

Delegates to :func:`inspect_utils.cli.main.cli`, the same entry point as the
``inspect-utils`` console script.

Examples:
    Print the README examples::

        python -m inspect_utils demo
"""

from __future__ import annotations

from inspect_utils.cli.main import cli

if __name__ == "__main__":
    cli()
