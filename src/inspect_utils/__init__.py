# topmark:header:start
#
#   project      : inspect-utils
#   file         : __init__.py
#   file_relpath : src/inspect_utils/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""inspect-utils: readable, stylized representations of runtime values.

A class describes how it should look when printed (a named struct, a tuple, a
bare label, or a freeform layout) and the display printer takes care of line
breaking, indentation and colors:

```python
from inspect_utils import display_tuple, pprint

class SafeString:
    def __init__(self, value):
        self.value = value

    def __display__(self, ctx):
        return display_tuple("SafeString", self.value)

pprint(SafeString("hello"))  # SafeString('hello')
```
"""

from __future__ import annotations

from inspect_utils.constants import INSPECT_UTILS_VERSION
from inspect_utils.core.display import (
    CompactName,
    DisplayOptions,
    DisplayValue,
    Formatter,
    compact,
    display,
    display_struct,
    display_tuple,
    display_unit,
)
from inspect_utils.core.errors import (
    DisplayArgumentError,
    DisplayConfigError,
    InspectUtilsError,
    SettingsError,
    StyleNameError,
)
from inspect_utils.core.style_names import STYLE_NAMES, StyleName
from inspect_utils.printer.pretty import InspectContext, pformat, pprint
from inspect_utils.registration import inspector

__version__: str = INSPECT_UTILS_VERSION

__all__: list[str] = [
    "STYLE_NAMES",
    "CompactName",
    "DisplayArgumentError",
    "DisplayConfigError",
    "DisplayOptions",
    "DisplayValue",
    "Formatter",
    "InspectContext",
    "InspectUtilsError",
    "SettingsError",
    "StyleName",
    "StyleNameError",
    "compact",
    "display",
    "display_struct",
    "display_tuple",
    "display_unit",
    "inspector",
    "pformat",
    "pprint",
]
