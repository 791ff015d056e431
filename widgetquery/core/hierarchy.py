"""Hierarchy maps for WidgetQuery.

Each map takes an ordered sequence of components and returns the related
components under the containment relation: children, parents, descendants
or ancestors. Results are ordered and deduplicated by identity. The maps
only read the tree; they never change it.
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence

from ..exceptions import InvalidArgumentError
from .component import Component, HasComponents

HierarchyMap = Callable[[Sequence[Component]], List[Component]]


def _child_components(component: Component) -> Iterable[Component]:
    container = component.as_container()
    if container is None:
        return ()
    return container.get_children()


def children(components: Iterable[Component]) -> List[Component]:
    """Return the direct children of all components.

    For each component in order, its children in child order. A child
    reachable twice appears once, at its first position.
    """
    result: Dict[int, Component] = {}
    for c in components:
        for child in _child_components(c):
            result.setdefault(id(child), child)
    return list(result.values())


def parent(components: Iterable[Component]) -> List[HasComponents]:
    """Return the distinct direct parents of the components.

    Components without a parent contribute nothing.
    """
    result: Dict[int, HasComponents] = {}
    for c in components:
        p = c.get_parent()
        if p is not None:
            result.setdefault(id(p), p)
    return list(result.values())


def descendants(components: Iterable[Component],
                max_depth: Optional[int] = None) -> List[Component]:
    """Return all descendants of the components, depth-first pre-order.

    The walk starts from the children of every component (in the order
    given by children()), and each child is followed by its own subtree
    before the next child is visited.

    Args:
        components: Components whose descendants are wanted
        max_depth: Maximum number of hops below the components
            (1 = children only, 0 = nothing, None = unlimited)

    Returns:
        Ordered descendants, each appearing once at its first position

    Raises:
        InvalidArgumentError: If max_depth is negative
    """
    if max_depth is not None and max_depth < 0:
        raise InvalidArgumentError("Depth cannot be negative")
    if max_depth == 0:
        return []

    result: Dict[int, Component] = {}
    # Shallowest depth each component has been expanded at. With a depth
    # limit, a component first met deep in one subtree may be met again
    # closer to the top, and must then be expanded further.
    expanded: Dict[int, int] = {}

    def _visit(component: Component, depth: int) -> None:
        result.setdefault(id(component), component)
        previous = expanded.get(id(component))
        if previous is not None and previous <= depth:
            return
        expanded[id(component)] = depth
        if max_depth is not None and depth >= max_depth:
            return
        for child in _child_components(component):
            _visit(child, depth + 1)

    for child in children(components):
        _visit(child, 1)

    return list(result.values())


def ancestors(components: Iterable[Component]) -> List[HasComponents]:
    """Return the distinct proper ancestors of the components.

    Each component's parent chain is walked from the parent up to the root.
    """
    result: Dict[int, HasComponents] = {}
    for c in components:
        current = c.get_parent()
        while current is not None:
            result.setdefault(id(current), current)
            current = current.get_parent()
    return list(result.values())


HIERARCHY_MAPS: Dict[str, HierarchyMap] = {
    'children': children,
    'parent': parent,
    'descendants': descendants,
    'ancestors': ancestors,
}


def get_map(name: str) -> HierarchyMap:
    """Look up a hierarchy map by name.

    Args:
        name: One of 'children', 'parent', 'descendants', 'ancestors'

    Returns:
        The map function

    Raises:
        InvalidArgumentError: If the name is not recognized
    """
    try:
        return HIERARCHY_MAPS[name.lower()]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown hierarchy map: {name}. "
            f"Choose from: {', '.join(HIERARCHY_MAPS.keys())}"
        ) from None
