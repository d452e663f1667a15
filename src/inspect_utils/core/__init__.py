# topmark:header:start
#
#   project      : inspect-utils
#   file         : __init__.py
#   file_relpath : src/inspect_utils/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core of inspect-utils: the formatting tree and the display builders.

Modules:
    - `stylized`: node types, delimiter splicing and the render pass.
    - `nesting`: the scoped nested flag of one render.
    - `fragments`: normalization of loosely-typed builder input.
    - `style_names`: semantic style names and their printer categories.
    - `display`: the struct/tuple/unit/freeform builders.
    - `errors`: exception hierarchy.
"""
