"""Field queries for WidgetQuery.

A FieldQuery holds only input fields and adds the filters and mutators that
work on field state: value, validity, required-ness and buffering.
"""

from typing import Any, Sequence, TypeVar

from ..exceptions import InvalidArgumentError
from .component import Field, ValueChangeListener, Validator
from .query import AbstractQuery

F = TypeVar('F', bound=Field)


class FieldQuery(AbstractQuery[F]):
    """A query over input fields.

    Every member must answer as_field() with a Field, which is checked when
    the query is created.
    """

    def _validate_members(self, members: Sequence[Any]) -> None:
        super()._validate_members(members)
        for c in members:
            if c.as_field() is None:
                raise InvalidArgumentError(f"{c!r} is not a field")

    # Filtering

    def is_valid(self, valid: bool = True) -> 'FieldQuery[F]':
        return self.filter(lambda f: f.is_valid() == valid)

    def is_required(self, required: bool = True) -> 'FieldQuery[F]':
        return self.filter(lambda f: f.is_required() == required)

    def is_buffered(self, buffered: bool = True) -> 'FieldQuery[F]':
        return self.filter(lambda f: f.is_buffered() == buffered)

    def is_modified(self, modified: bool = True) -> 'FieldQuery[F]':
        return self.filter(lambda f: f.is_modified() == modified)

    def has_value(self, value: Any) -> 'FieldQuery[F]':
        """Return the fields whose value equals value (None matches None)."""
        def _matches(f: Field) -> bool:
            current = f.get_value()
            if current is None:
                return value is None
            return current == value

        return self.filter(_matches)

    def has_value_type(self, value_type: type) -> 'FieldQuery[F]':
        """Return the fields whose declared value type is a subclass of value_type.

        Every field has value type object, so has_value_type(object)
        returns all members.
        """
        return self.filter(lambda f: issubclass(f.get_type(), value_type))

    # Component manipulation

    def add_value_change_listener(self, listener: ValueChangeListener) -> 'FieldQuery[F]':
        return self._apply('add_value_change_listener',
                           lambda f: f.add_value_change_listener(listener))

    def remove_value_change_listener(self, listener: ValueChangeListener) -> 'FieldQuery[F]':
        return self._apply('remove_value_change_listener',
                           lambda f: f.remove_value_change_listener(listener))

    def set_required(self, required: bool) -> 'FieldQuery[F]':
        return self._apply('set_required', lambda f: f.set_required(required))

    def set_buffered(self, buffered: bool) -> 'FieldQuery[F]':
        return self._apply('set_buffered', lambda f: f.set_buffered(buffered))

    def set_required_error(self, error: str) -> 'FieldQuery[F]':
        return self._apply('set_required_error', lambda f: f.set_required_error(error))

    def add_validator(self, validator: Validator) -> 'FieldQuery[F]':
        return self._apply('add_validator', lambda f: f.add_validator(validator))

    def remove_validator(self, validator: Validator) -> 'FieldQuery[F]':
        return self._apply('remove_validator', lambda f: f.remove_validator(validator))

    def set_value(self, value: Any) -> 'FieldQuery[F]':
        return self._apply('set_value', lambda f: f.set_value(value))

    def commit(self) -> 'FieldQuery[F]':
        """Commit every member.

        Fields are committed one by one. With the default fail-fast policy
        the first invalid field stops the batch and raises; fields before it
        stay committed.
        """
        return self._apply('commit', lambda f: f.commit())

    def discard(self) -> 'FieldQuery[F]':
        return self._apply('discard', lambda f: f.discard())
