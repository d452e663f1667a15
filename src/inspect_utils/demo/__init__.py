# topmark:header:start
#
#   project      : inspect-utils
#   file         : __init__.py
#   file_relpath : src/inspect_utils/demo/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runnable examples of every display shape, shown by ``inspect-utils demo``."""

from __future__ import annotations

from inspect_utils.demo.examples import EXAMPLES, Example, get_example

__all__ = ["EXAMPLES", "Example", "get_example"]
