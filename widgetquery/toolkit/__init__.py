"""Reference UI toolkit for WidgetQuery.

A small, headless, in-memory component tree implementing the component
contract. Useful for tests and for applications that model a UI without
rendering it.
"""

from .base import AbstractComponent, parse_size
from .layouts import (
    AbstractOrderedLayout,
    CssLayout,
    VerticalLayout,
    HorizontalLayout,
    AbstractSingleComponentContainer,
    Panel,
    UI,
)
from .widgets import Button, Label, Image
from .fields import (
    AbstractField,
    TextField,
    TextArea,
    CheckBox,
    Slider,
    ValueChangeEvent,
    ReadOnlyError,
)

__all__ = [
    'AbstractComponent',
    'parse_size',
    'AbstractOrderedLayout',
    'CssLayout',
    'VerticalLayout',
    'HorizontalLayout',
    'AbstractSingleComponentContainer',
    'Panel',
    'UI',
    'Button',
    'Label',
    'Image',
    'AbstractField',
    'TextField',
    'TextArea',
    'CheckBox',
    'Slider',
    'ValueChangeEvent',
    'ReadOnlyError',
]
