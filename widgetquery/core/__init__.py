"""Core abstractions for WidgetQuery.

This package contains the component contract, filters, hierarchy maps and
the query classes built on them.
"""

from .component import (
    Component,
    HasComponents,
    Field,
    Unit,
    Validator,
    InvalidValueError,
    ValueChangeListener,
)
from .filter import Filter, ByPredicate, NotFilter, AllOf, AnyOf, Predicate
from . import hierarchy
from .query import AbstractQuery, Query
from .field_query import FieldQuery

__all__ = [
    "Component",
    "HasComponents",
    "Field",
    "Unit",
    "Validator",
    "InvalidValueError",
    "ValueChangeListener",
    "Filter",
    "ByPredicate",
    "NotFilter",
    "AllOf",
    "AnyOf",
    "Predicate",
    "hierarchy",
    "AbstractQuery",
    "Query",
    "FieldQuery",
]
