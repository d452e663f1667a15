# topmark:header:start
#
#   project      : inspect-utils
#   file         : registration.py
#   file_relpath : src/inspect_utils/registration.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Declarative registration of display functions on existing classes.

`inspector` attaches a ``__display__`` hook to a class from the outside, so the
class body does not need to know about inspect-utils:

```python
from inspect_utils import display_struct, inspector

class Point:
    def __init__(self, x, y):
        self.x, self.y = x, y

inspector(Point, lambda point: display_struct("Point", {"x": point.x, "y": point.y}))
```

Registration only happens in dev mode (see `inspect_utils.config.is_dev_mode`);
otherwise the class is left untouched and the call is logged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

from inspect_utils.config.logging import get_logger
from inspect_utils.config.settings import is_dev_mode
from inspect_utils.constants import DISPLAY_HOOK
from inspect_utils.printer.pretty import pformat

if TYPE_CHECKING:
    from collections.abc import Mapping

    from inspect_utils.config.logging import InspectUtilsLogger
    from inspect_utils.printer.pretty import InspectContext

logger: InspectUtilsLogger = get_logger(__name__)

T = TypeVar("T")
C = TypeVar("C", bound=type)


def inspector(
    cls: C,
    fn: Callable[[T], object],
    *,
    install_repr: bool = False,
    environ: Mapping[str, str] | None = None,
) -> C:
    """Install `fn` as the display hook of `cls`.

    Args:
        cls (C): The class to extend.
        fn (Callable[[T], object]): Called with the instance; returns what the
            hook returns (usually a builder result).
        install_repr (bool): Also replace ``__repr__`` with the plain display.
        environ (Mapping[str, str] | None): Environment used to detect dev mode.

    Returns:
        C: `cls`, so the call can be chained.
    """
    if not is_dev_mode(environ):
        logger.debug("inspector(%s): not in dev mode, skipped", cls.__qualname__)
        return cls

    def __display__(self: T, ctx: InspectContext) -> object:
        return fn(self)

    setattr(cls, DISPLAY_HOOK, __display__)
    if install_repr:

        def __repr__(self: T) -> str:
            return pformat(self, colors=False)

        cls.__repr__ = __repr__  # type: ignore[assignment]
    logger.debug("inspector(%s): display hook installed", cls.__qualname__)
    return cls
