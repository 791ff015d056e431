"""High-level API for WidgetQuery.

Entry points that build the first query of a chain:

    >>> select(ok_button, cancel_button).set_enabled(False)
    >>> select_all(ui).is_(Label).has_style_name("error").set_visible(True)
    >>> select_fields(name, email).set_required(True)
"""

from typing import Any, Iterable, Optional, Tuple

from .config import QueryConfig
from .context import get_current_root
from .core import hierarchy
from .core.component import Component
from .core.field_query import FieldQuery
from .core.query import AbstractQuery, Query
from .exceptions import NoCurrentRootError


def _flatten(components: Tuple[Any, ...]) -> Iterable[Any]:
    # select(a, b) and select([a, b]) are the same call
    if len(components) == 1 and not isinstance(components[0], Component):
        return components[0]
    return components


def select(*components: Any, fields: bool = False,
           config: Optional[QueryConfig] = None) -> AbstractQuery:
    """Wrap components in a Query.

    Args:
        *components: Components, or a single iterable of components.
            Duplicates are dropped, keeping the first occurrence.
        fields: If True, return a FieldQuery; every component must then
            be a field
        config: Query configuration (module default if omitted)

    Returns:
        Query (or FieldQuery) over the components in the given order

    Raises:
        InvalidArgumentError: If fields is True and a component is not a
            field

    Example:
        >>> q = select(a, a, b)
        >>> q.size()
        2
    """
    query_class = FieldQuery if fields else Query
    return query_class.of(_flatten(components), config=config)


def select_fields(*fields: Any, config: Optional[QueryConfig] = None) -> FieldQuery:
    """Wrap input fields in a FieldQuery.

    Args:
        *fields: Fields, or a single iterable of fields

    Raises:
        InvalidArgumentError: If any argument is not a field
    """
    return FieldQuery.of(_flatten(fields), config=config)


def select_all(root: Optional[Component] = None, config: Optional[QueryConfig] = None) -> Query:
    """Select a root component and everything below it.

    Args:
        root: Root of the tree. Falls back to the ambient root set with
            widgetquery.context.current_root() or set_current_root().
        config: Query configuration (module default if omitted)

    Returns:
        Query holding the root first, then its descendants in pre-order

    Raises:
        NoCurrentRootError: If no root is given and no ambient root is set
    """
    if root is None:
        root = get_current_root()
    if root is None:
        raise NoCurrentRootError(
            "No root component: pass one to select_all() or set a current root"
        )
    return Query(root, *hierarchy.descendants([root]), config=config)


def none(config: Optional[QueryConfig] = None) -> Query:
    """Return an empty Query."""
    return Query(config=config)
