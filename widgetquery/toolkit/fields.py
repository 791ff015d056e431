"""Input fields of the reference toolkit.

A field holds a current value and a committed value. Unbuffered fields
write through, so the two are always the same. Buffered fields keep edits
pending until commit(); discard() throws them away.
"""

from typing import Any, List, Optional, Type

from ..core.component import Field, InvalidValueError, ValueChangeListener, Validator
from .base import AbstractComponent


class ReadOnlyError(Exception):
    """Raised when setting the value of a read-only field."""
    pass


class ValueChangeEvent:
    """Passed to value change listeners."""

    def __init__(self, field: 'AbstractField', old_value: Any):
        self.field = field
        self.old_value = old_value

    @property
    def value(self) -> Any:
        return self.field.get_value()

    def __repr__(self) -> str:
        return f"ValueChangeEvent({self.field!r}, {self.old_value!r} -> {self.value!r})"


class AbstractField(AbstractComponent, Field):
    """In-memory implementation of Field.

    Subclasses set value_type and default_value.
    """

    value_type: Type = object
    default_value: Any = None

    def __init__(self, caption: Optional[str] = None, value: Any = None):
        super().__init__(caption)
        initial = self.default_value if value is None else value
        self._value = initial
        self._committed = initial
        self._modified = False
        self._buffered = False
        self._required = False
        self._required_error: Optional[str] = None
        self._validators: List[Validator] = []
        self._listeners: List[ValueChangeListener] = []

    def get_type(self) -> Type:
        return self.value_type

    # Value

    def get_value(self) -> Any:
        return self._value

    def set_value(self, value: Any) -> None:
        """Set the value, notifying listeners if it changed.

        Raises:
            ReadOnlyError: If the field is read-only
        """
        if self.is_read_only():
            raise ReadOnlyError(f"{self!r} is read-only")
        value = self._convert(value)
        old = self._value
        self._value = value
        if self._buffered:
            self._modified = self._value != self._committed
        else:
            self._committed = value
        if old != value:
            self._fire_value_change(old)

    def _convert(self, value: Any) -> Any:
        return value

    def is_empty(self) -> bool:
        return self._value is None or self._value == ""

    # Validation

    def is_valid(self) -> bool:
        if self._required and self.is_empty():
            return False
        return all(v.is_valid(self._value) for v in self._validators)

    def validate(self) -> None:
        """Check the current value.

        Raises:
            InvalidValueError: If the field is required and empty, or a
                validator rejects the value
        """
        if self._required and self.is_empty():
            raise InvalidValueError(self._required_error or f"{self!r} is required")
        for validator in self._validators:
            validator.validate(self._value)

    def add_validator(self, validator: Validator) -> None:
        if validator not in self._validators:
            self._validators.append(validator)

    def remove_validator(self, validator: Validator) -> None:
        if validator in self._validators:
            self._validators.remove(validator)

    def is_required(self) -> bool:
        return self._required

    def set_required(self, required: bool) -> None:
        self._required = bool(required)

    def get_required_error(self) -> Optional[str]:
        return self._required_error

    def set_required_error(self, error: Optional[str]) -> None:
        self._required_error = error

    # Buffering

    def is_buffered(self) -> bool:
        return self._buffered

    def set_buffered(self, buffered: bool) -> None:
        self._buffered = bool(buffered)

    def is_modified(self) -> bool:
        return self._modified

    def commit(self) -> None:
        self.validate()
        self._committed = self._value
        self._modified = False

    def discard(self) -> None:
        old = self._value
        self._value = self._committed
        self._modified = False
        if old != self._value:
            self._fire_value_change(old)

    # Listeners

    def add_value_change_listener(self, listener: ValueChangeListener) -> None:
        self._listeners.append(listener)

    def remove_value_change_listener(self, listener: ValueChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _fire_value_change(self, old_value: Any) -> None:
        event = ValueChangeEvent(self, old_value)
        for listener in list(self._listeners):
            listener(event)


class TextField(AbstractField):
    value_type = str
    default_value = ""

    def _convert(self, value: Any) -> Any:
        return "" if value is None else str(value)


class TextArea(TextField):
    def __init__(self, caption: Optional[str] = None, value: Any = None, rows: int = 5):
        super().__init__(caption, value)
        self.rows = rows


class CheckBox(AbstractField):
    value_type = bool
    default_value = False

    def _convert(self, value: Any) -> Any:
        return bool(value)


class Slider(AbstractField):
    """A numeric field bounded by min and max."""

    value_type = float
    default_value = 0.0

    def __init__(self, caption: Optional[str] = None, min_value: float = 0.0,
                 max_value: float = 100.0, value: Any = None):
        if min_value > max_value:
            raise ValueError("min_value cannot be greater than max_value")
        self.min_value = float(min_value)
        self.max_value = float(max_value)
        super().__init__(caption, value if value is not None else self.min_value)

    def _convert(self, value: Any) -> Any:
        number = float(value)
        if number < self.min_value or number > self.max_value:
            raise ValueError(
                f"Value {number} is outside [{self.min_value}, {self.max_value}]"
            )
        return number
