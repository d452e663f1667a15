# topmark:header:start
#
#   project      : inspect-utils
#   file         : __init__.py
#   file_relpath : src/inspect_utils/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``inspect-utils`` CLI."""
