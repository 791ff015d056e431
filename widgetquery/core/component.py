"""Component abstractions for WidgetQuery.

These abstract classes are the whole contract the query layer needs from a
UI toolkit. A toolkit makes its widgets queryable by implementing them; the
bundled reference toolkit in widgetquery.toolkit is one such implementation.

Components are compared by identity. The query layer never calls __eq__ or
__hash__ on them, so a toolkit is free to define those however it likes.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Iterator, Optional, Type, Union


class Unit(Enum):
    """Units for component width and height."""
    PIXELS = "px"
    POINTS = "pt"
    PICAS = "pc"
    EM = "em"
    EX = "ex"
    MM = "mm"
    CM = "cm"
    INCH = "in"
    PERCENTAGE = "%"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: Optional[str]) -> 'Unit':
        """Look up a unit by its CSS symbol. An empty symbol means pixels.

        Raises:
            ValueError: If the symbol is not a known unit
        """
        if not symbol:
            return cls.PIXELS
        for unit in cls:
            if unit.value == symbol.lower():
                return unit
        raise ValueError(f"Unknown size unit: {symbol!r}")


SizeSpec = Union[str, float, int, None]


class Component(ABC):
    """Abstract base class for a node in a UI component tree.

    A component has an optional parent, presentation state (style names,
    visibility, enabled and read-only flags, size) and two capability
    queries, as_container() and as_field(). The query layer uses the
    capability queries instead of inspecting concrete classes, so a toolkit
    decides for itself which of its classes hold children or edit values.
    """

    # Hierarchy

    @abstractmethod
    def get_parent(self) -> Optional['HasComponents']:
        """Return the container holding this component, or None if detached."""
        pass

    @abstractmethod
    def is_attached(self) -> bool:
        """Check if this component is part of a live UI tree."""
        pass

    # Capabilities - components declare what they support

    def as_container(self) -> Optional['HasComponents']:
        """Return this component viewed as a container, or None.

        Returns:
            A HasComponents handle if this component can hold children
        """
        return None

    def as_field(self) -> Optional['Field']:
        """Return this component viewed as an input field, or None.

        Returns:
            A Field handle if this component edits a value
        """
        return None

    # Identity and captions

    @abstractmethod
    def get_id(self) -> Optional[str]:
        pass

    @abstractmethod
    def set_id(self, component_id: Optional[str]) -> None:
        pass

    @abstractmethod
    def get_caption(self) -> Optional[str]:
        pass

    @abstractmethod
    def set_caption(self, caption: Optional[str]) -> None:
        pass

    # Style names

    @abstractmethod
    def get_style_name(self) -> str:
        """Return the style names as a single space-separated string."""
        pass

    @abstractmethod
    def set_style_name(self, style_name: str) -> None:
        """Replace all style names with the given space-separated names."""
        pass

    @abstractmethod
    def add_style_name(self, style_name: str) -> None:
        """Add one or more space-separated style names."""
        pass

    @abstractmethod
    def remove_style_name(self, style_name: str) -> None:
        """Remove one or more space-separated style names."""
        pass

    @abstractmethod
    def get_primary_style_name(self) -> str:
        pass

    @abstractmethod
    def set_primary_style_name(self, style_name: str) -> None:
        pass

    # State flags

    @abstractmethod
    def is_visible(self) -> bool:
        pass

    @abstractmethod
    def set_visible(self, visible: bool) -> None:
        pass

    @abstractmethod
    def is_enabled(self) -> bool:
        pass

    @abstractmethod
    def set_enabled(self, enabled: bool) -> None:
        pass

    @abstractmethod
    def is_read_only(self) -> bool:
        pass

    @abstractmethod
    def set_read_only(self, read_only: bool) -> None:
        pass

    # Sizing

    @abstractmethod
    def get_width(self) -> float:
        pass

    @abstractmethod
    def get_width_units(self) -> Unit:
        pass

    @abstractmethod
    def get_height(self) -> float:
        pass

    @abstractmethod
    def get_height_units(self) -> Unit:
        pass

    @abstractmethod
    def set_width(self, width: SizeSpec, unit: Optional[Unit] = None) -> None:
        """Set the width from a CSS string ("50px", "100%") or a number and unit."""
        pass

    @abstractmethod
    def set_height(self, height: SizeSpec, unit: Optional[Unit] = None) -> None:
        """Set the height from a CSS string ("50px", "100%") or a number and unit."""
        pass

    def set_size_full(self) -> None:
        """Set the size to 100% x 100%."""
        self.set_width(100, Unit.PERCENTAGE)
        self.set_height(100, Unit.PERCENTAGE)

    def set_size_undefined(self) -> None:
        """Clear width and height (-1 px)."""
        self.set_width(-1, Unit.PIXELS)
        self.set_height(-1, Unit.PIXELS)


class HasComponents(Component):
    """A component holding an ordered sequence of child components.

    Containers that cannot insert at an arbitrary position (single-content
    panels, for instance) report False from supports_indexed_insertion().
    """

    def as_container(self) -> 'HasComponents':
        return self

    @abstractmethod
    def get_children(self) -> Iterator[Component]:
        """Get an iterator of the child components in child order."""
        pass

    def __iter__(self) -> Iterator[Component]:
        return self.get_children()

    def has_children(self) -> bool:
        for _ in self.get_children():
            return True
        return False

    def component_count(self) -> int:
        return sum(1 for _ in self.get_children())

    def supports_indexed_insertion(self) -> bool:
        """Check if add_component() accepts an index.

        Returns:
            True if children can be inserted at a given position
        """
        return False

    @abstractmethod
    def add_component(self, component: Component, index: Optional[int] = None) -> None:
        """Add a child, detaching it from its previous parent first.

        Args:
            component: The component to add
            index: Position to insert at; None appends

        Raises:
            NotImplementedError: If an index is given but indexed insertion
                is not supported
        """
        pass

    @abstractmethod
    def remove_component(self, component: Component) -> None:
        """Remove a child. Removing a non-child is a no-op."""
        pass

    def get_component_index(self, component: Component) -> int:
        """Return the position of a child.

        Raises:
            ValueError: If component is not a child of this container
        """
        for i, child in enumerate(self.get_children()):
            if child is component:
                return i
        raise ValueError(f"{component!r} is not a child of {self!r}")


ValueChangeListener = Callable[[Any], None]


class InvalidValueError(Exception):
    """Raised by a Validator that rejects a value."""
    pass


class Validator(ABC):
    """Validates a field value."""

    @abstractmethod
    def validate(self, value: Any) -> None:
        """Check a value.

        Raises:
            InvalidValueError: If the value is not acceptable
        """
        pass

    def is_valid(self, value: Any) -> bool:
        try:
            self.validate(value)
        except InvalidValueError:
            return False
        return True


class Field(Component):
    """A component editing a value: text fields, check boxes, sliders, ..."""

    def as_field(self) -> 'Field':
        return self

    @abstractmethod
    def get_value(self) -> Any:
        pass

    @abstractmethod
    def set_value(self, value: Any) -> None:
        pass

    @abstractmethod
    def get_type(self) -> Type:
        """Return the declared type of the values this field holds."""
        pass

    @abstractmethod
    def is_valid(self) -> bool:
        pass

    @abstractmethod
    def is_required(self) -> bool:
        pass

    @abstractmethod
    def set_required(self, required: bool) -> None:
        pass

    @abstractmethod
    def get_required_error(self) -> Optional[str]:
        pass

    @abstractmethod
    def set_required_error(self, error: Optional[str]) -> None:
        pass

    @abstractmethod
    def is_buffered(self) -> bool:
        pass

    @abstractmethod
    def set_buffered(self, buffered: bool) -> None:
        pass

    @abstractmethod
    def is_modified(self) -> bool:
        pass

    @abstractmethod
    def add_validator(self, validator: Validator) -> None:
        pass

    @abstractmethod
    def remove_validator(self, validator: Validator) -> None:
        pass

    @abstractmethod
    def add_value_change_listener(self, listener: ValueChangeListener) -> None:
        pass

    @abstractmethod
    def remove_value_change_listener(self, listener: ValueChangeListener) -> None:
        pass

    @abstractmethod
    def commit(self) -> None:
        """Write a buffered value through.

        Raises:
            InvalidValueError: If the value does not validate
        """
        pass

    @abstractmethod
    def discard(self) -> None:
        """Drop a buffered value and go back to the committed one."""
        pass
