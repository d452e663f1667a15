# topmark:header:start
#
#   project      : inspect-utils
#   file         : __init__.py
#   file_relpath : src/inspect_utils/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for inspect-utils."""
