"""Base component of the reference toolkit.

AbstractComponent implements the whole Component contract in memory. The
concrete widgets, layouts and fields in this package only add what is
specific to them.
"""

import re
from typing import Optional, Tuple

from ..core.component import Component, HasComponents, SizeSpec, Unit

_SIZE_PATTERN = re.compile(r'^\s*(-?\d+(?:\.\d+)?|-?\.\d+)\s*([a-zA-Z%]*)\s*$')

SIZE_UNDEFINED = -1.0


def parse_size(size: SizeSpec, unit: Optional[Unit] = None) -> Tuple[float, Unit]:
    """Turn a size specification into a (value, unit) pair.

    Args:
        size: "50px", "100%", "1.5em", a number, or None/"" for undefined
        unit: Unit for a numeric size (pixels if omitted); must not be
            combined with a string size

    Returns:
        (value, unit); an undefined size is (-1, PIXELS)

    Raises:
        ValueError: If the string cannot be parsed or the unit is unknown
    """
    if size is None or (isinstance(size, str) and not size.strip()):
        return SIZE_UNDEFINED, Unit.PIXELS

    if isinstance(size, str):
        if unit is not None:
            raise ValueError("A unit cannot be combined with a size string")
        match = _SIZE_PATTERN.match(size)
        if match is None:
            raise ValueError(f"Invalid size: {size!r}")
        value, symbol = match.groups()
        return float(value), Unit.from_symbol(symbol)

    value = float(size)
    if value < 0:
        return SIZE_UNDEFINED, Unit.PIXELS
    return value, unit if unit is not None else Unit.PIXELS


class AbstractComponent(Component):
    """In-memory implementation of Component.

    The primary style name defaults to "v-" plus the lower-cased class name,
    so a Button's primary style name is "v-button".
    """

    def __init__(self, caption: Optional[str] = None):
        self._parent: Optional[HasComponents] = None
        self._id: Optional[str] = None
        self._caption = caption
        self._style_names: list = []
        self._primary_style_name = f"v-{type(self).__name__.lower()}"
        self._visible = True
        self._enabled = True
        self._read_only = False
        self._width, self._width_unit = SIZE_UNDEFINED, Unit.PIXELS
        self._height, self._height_unit = SIZE_UNDEFINED, Unit.PIXELS

    # Hierarchy

    def get_parent(self) -> Optional[HasComponents]:
        return self._parent

    def set_parent(self, parent: Optional[HasComponents]) -> None:
        """Set the parent link. Containers call this; applications should not."""
        self._parent = parent

    def get_root(self) -> Component:
        """Walk up to the root of the tree."""
        node: Component = self
        while node.get_parent() is not None:
            node = node.get_parent()
        return node

    def is_attached(self) -> bool:
        # Local import: layouts imports this module
        from .layouts import UI
        return isinstance(self.get_root(), UI)

    # Identity and captions

    def get_id(self) -> Optional[str]:
        return self._id

    def set_id(self, component_id: Optional[str]) -> None:
        self._id = component_id

    def get_caption(self) -> Optional[str]:
        return self._caption

    def set_caption(self, caption: Optional[str]) -> None:
        self._caption = caption

    # Style names

    def get_style_name(self) -> str:
        return " ".join(self._style_names)

    def set_style_name(self, style_name: str) -> None:
        self._style_names = []
        self.add_style_name(style_name)

    def add_style_name(self, style_name: str) -> None:
        for name in (style_name or "").split():
            if name not in self._style_names:
                self._style_names.append(name)

    def remove_style_name(self, style_name: str) -> None:
        for name in (style_name or "").split():
            if name in self._style_names:
                self._style_names.remove(name)

    def get_primary_style_name(self) -> str:
        return self._primary_style_name

    def set_primary_style_name(self, style_name: str) -> None:
        self._primary_style_name = style_name

    # State flags

    def is_visible(self) -> bool:
        return self._visible

    def set_visible(self, visible: bool) -> None:
        self._visible = bool(visible)

    def is_enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = bool(enabled)

    def is_read_only(self) -> bool:
        return self._read_only

    def set_read_only(self, read_only: bool) -> None:
        self._read_only = bool(read_only)

    # Sizing

    def get_width(self) -> float:
        return self._width

    def get_width_units(self) -> Unit:
        return self._width_unit

    def get_height(self) -> float:
        return self._height

    def get_height_units(self) -> Unit:
        return self._height_unit

    def set_width(self, width: SizeSpec, unit: Optional[Unit] = None) -> None:
        self._width, self._width_unit = parse_size(width, unit)

    def set_height(self, height: SizeSpec, unit: Optional[Unit] = None) -> None:
        self._height, self._height_unit = parse_size(height, unit)

    def __repr__(self) -> str:
        label = self._id or self._caption
        if label:
            return f"{type(self).__name__}({label!r})"
        return f"{type(self).__name__}()"
