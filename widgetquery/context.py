"""Ambient current-root resolution for select_all().

The root is stored in a ContextVar, so every thread and asyncio task sees
its own value. Passing a root to select_all() explicitly always wins over
the ambient one.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from .core.component import Component

_current_root: ContextVar[Optional[Component]] = ContextVar('widgetquery_current_root', default=None)


def get_current_root() -> Optional[Component]:
    """Return the ambient root component, or None if none is set."""
    return _current_root.get()


def set_current_root(root: Optional[Component]) -> None:
    """Set (or with None, clear) the ambient root component."""
    _current_root.set(root)


@contextmanager
def current_root(root: Component) -> Iterator[Component]:
    """Make root the ambient root for the duration of a with block.

    Example:
        with current_root(ui):
            select_all().is_(Button).set_enabled(False)
    """
    token = _current_root.set(root)
    try:
        yield root
    finally:
        _current_root.reset(token)
