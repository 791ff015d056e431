"""Query objects for WidgetQuery.

A query is an immutable, ordered set of components. Order follows first
insertion and matters for index() and slice(); equality ignores it.
Filtering, traversal and narrowing return new queries. Batch mutators and
hierarchy manipulation change the live components, then return a query over
the same members so calls can be chained:

    select_all().is_(Button).has_style_name("danger").set_enabled(False)

Queries are not thread-safe. They assume the single writer discipline of
the UI toolkit that owns the component tree: nothing else may change the
tree while a query is being built or applied.
"""

import logging
from typing import (
    TYPE_CHECKING, Any, Callable, Generic, Iterable, Iterator, List, Optional,
    Sequence, Tuple, Type, TypeVar, Union, overload,
)

from ..config import QueryConfig, get_default_config
from ..exceptions import CardinalityError, InvalidArgumentError, QueryIndexError
from . import hierarchy
from .component import Component, HasComponents, SizeSpec, Unit
from .filter import Filter, Predicate, as_filter, ordered_set

if TYPE_CHECKING:
    from .field_query import FieldQuery

logger = logging.getLogger(__name__)

C = TypeVar('C', bound=Component)
D = TypeVar('D', bound=Component)
Q = TypeVar('Q', bound='AbstractQuery')


class AbstractQuery(Generic[C]):
    """Base class for queries over components of type C.

    Subclasses add operations that only make sense for their members (see
    FieldQuery). Every operation returning "the same kind of query" builds
    it through _create_query(), which instantiates type(self), so chained
    calls keep the subclass and its extra operations.
    """

    def __init__(self, *components: Any, config: Optional[QueryConfig] = None):
        """Create a query over the given components.

        A single query argument is copied, so Query(field_query) widens a
        FieldQuery into a plain Query with the same members.

        Args:
            *components: Components (duplicates are dropped, first one wins),
                or one query to copy
            config: Configuration; defaults to the source query's config
                when copying, else to the module default
        """
        if len(components) == 1 and isinstance(components[0], AbstractQuery):
            source = components[0]
            if config is None:
                config = source.config
            members = list(source._members)
        else:
            members = ordered_set(components)

        self._validate_members(members)
        self._members: Tuple[C, ...] = tuple(members)
        self._ids = frozenset(id(c) for c in self._members)
        self.config = config if config is not None else get_default_config()

    @classmethod
    def of(cls: Type[Q], components: Iterable[Any], config: Optional[QueryConfig] = None) -> Q:
        """Create a query from any iterable of components."""
        return cls(*components, config=config)

    def _validate_members(self, members: Sequence[Any]) -> None:
        for c in members:
            if not isinstance(c, Component):
                raise InvalidArgumentError(
                    f"{type(self).__name__} members must be Components, got {type(c).__name__}"
                )

    def _create_query(self: Q, members: Iterable[Any]) -> Q:
        return type(self)(*members, config=self.config)

    def _plain_query(self, members: Iterable[Any]) -> 'Query':
        return Query(*members, config=self.config)

    def with_(self: Q, other: 'AbstractQuery') -> Q:
        """Return the union of this query and other.

        This query's members come first in their order, followed by the
        members of other not already present, in other's order. The result
        is of this query's kind.

        Raises:
            InvalidArgumentError: If the result cannot hold a member of
                other, e.g. a non-field added to a FieldQuery
        """
        return self._create_query(self._members + tuple(other))

    def __or__(self: Q, other: 'AbstractQuery') -> Q:
        if not isinstance(other, AbstractQuery):
            return NotImplemented
        return self.with_(other)

    # Filtering

    def filter(self: Q, predicate: Union[Predicate, Filter]) -> Q:
        """Return the members accepted by a predicate or Filter.

        Args:
            predicate: A callable taking one component and returning a bool,
                or a Filter applied to the whole member sequence

        Returns:
            Query of the same kind with the kept members in their order
        """
        return self._create_query(as_filter(predicate).apply(self._members))

    def id(self: Q, component_id: str) -> Q:
        """Return the members with the given id.

        Ids should be unique but this is not enforced; use one() to insist
        on exactly one match.
        """
        return self.filter(lambda c: c.get_id() == component_id)

    def has_style_name(self: Q, style_name: str) -> Q:
        """Return the members that have style_name among their style names."""
        return self.filter(lambda c: style_name in c.get_style_name().split())

    def has_primary_style_name(self: Q, style_name: str) -> Q:
        return self.filter(lambda c: c.get_primary_style_name() == style_name)

    def is_visible(self: Q, visible: bool = True) -> Q:
        return self.filter(lambda c: c.is_visible() == visible)

    def is_enabled(self: Q, enabled: bool = True) -> Q:
        return self.filter(lambda c: c.is_enabled() == enabled)

    def is_read_only(self: Q, read_only: bool = True) -> Q:
        return self.filter(lambda c: c.is_read_only() == read_only)

    def is_attached(self: Q, attached: bool = True) -> Q:
        return self.filter(lambda c: c.is_attached() == attached)

    def is_leaf(self: Q, leaf: bool = True) -> Q:
        """Return the leaf members, or with leaf=False the non-leaf ones.

        A leaf has no children. Containers without children count as
        leaves.
        """
        def _has_children(c: Component) -> bool:
            container = c.as_container()
            return container is not None and container.has_children()

        return self.filter(lambda c: _has_children(c) != leaf)

    @overload
    def is_(self, target: Type[D]) -> 'AbstractQuery[D]': ...

    @overload
    def is_(self, target: Component) -> 'Query': ...

    def is_(self, target):
        """Narrow by type, or test membership of one component.

        Given a class, returns the members that are instances of it, in
        order, as a query of the same kind:

            buttons = query.is_(Button)     # AbstractQuery[Button]

        Given a component, returns a Query holding just that component if it
        is a member, else an empty Query.
        """
        if isinstance(target, type):
            return self._create_query(c for c in self._members if isinstance(c, target))
        if self.contains(target):
            return self._plain_query([target])
        return self._plain_query([])

    def is_field(self, field_type: Optional[type] = None) -> 'FieldQuery':
        """Return the members that are input fields, as a FieldQuery.

        Args:
            field_type: If given, also require members to be instances of it

        Returns:
            FieldQuery of the matching members in their order
        """
        from .field_query import FieldQuery

        fields = []
        for c in self._members:
            f = c.as_field()
            if f is None:
                continue
            if field_type is not None and not isinstance(f, field_type):
                continue
            fields.append(f)
        return FieldQuery(*fields, config=self.config)

    # Component manipulation

    def _apply(self: Q, method_name: str, action: Callable[[Any], None]) -> Q:
        """Run action on every member, routing failures to the error policy."""
        if self.config.log_mutations:
            logger.debug("%s on %d component(s)", method_name, len(self._members))
        policy = self.config.error_policy
        policy.begin_batch(method_name)
        for c in self._members:
            try:
                action(c)
            except Exception as e:
                policy.handle(e, method_name, c)
        return self._create_query(self._members)

    def add_style_name(self: Q, style_name: str) -> Q:
        """Add style_name (one or more space-separated names) to all members."""
        return self._apply('add_style_name', lambda c: c.add_style_name(style_name))

    def remove_style_name(self: Q, style_name: str) -> Q:
        return self._apply('remove_style_name', lambda c: c.remove_style_name(style_name))

    def set_style_name(self: Q, style_name: str) -> Q:
        """Replace the style names of all members."""
        return self._apply('set_style_name', lambda c: c.set_style_name(style_name))

    def set_primary_style_name(self: Q, style_name: str) -> Q:
        return self._apply('set_primary_style_name', lambda c: c.set_primary_style_name(style_name))

    def set_visible(self: Q, visible: bool) -> Q:
        return self._apply('set_visible', lambda c: c.set_visible(visible))

    def set_enabled(self: Q, enabled: bool) -> Q:
        return self._apply('set_enabled', lambda c: c.set_enabled(enabled))

    def set_read_only(self: Q, read_only: bool) -> Q:
        return self._apply('set_read_only', lambda c: c.set_read_only(read_only))

    def set_size_full(self: Q) -> Q:
        """Set the size of all members to 100% x 100%."""
        return self._apply('set_size_full', lambda c: c.set_size_full())

    def set_size_undefined(self: Q) -> Q:
        return self._apply('set_size_undefined', lambda c: c.set_size_undefined())

    def set_width(self: Q, width: SizeSpec, unit: Optional[Unit] = None) -> Q:
        """Set the width of all members.

        Args:
            width: A CSS size string ("50px", "100%") or a number
            unit: Unit for a numeric width (pixels if omitted)
        """
        return self._apply('set_width', lambda c: c.set_width(width, unit))

    def set_height(self: Q, height: SizeSpec, unit: Optional[Unit] = None) -> Q:
        """Set the height of all members. See set_width()."""
        return self._apply('set_height', lambda c: c.set_height(height, unit))

    # Hierarchy traversal

    def map(self, hierarchy_map: Union[str, hierarchy.HierarchyMap]) -> 'Query':
        """Return the components a hierarchy map gives for the members.

        Args:
            hierarchy_map: A map function or the name of a built-in map
                ('children', 'parent', 'descendants', 'ancestors')
        """
        if isinstance(hierarchy_map, str):
            hierarchy_map = hierarchy.get_map(hierarchy_map)
        return self._plain_query(hierarchy_map(self._members))

    def children(self) -> 'Query[Component]':
        """Return the direct children of all members."""
        return self._plain_query(hierarchy.children(self._members))

    def descendants(self, depth: Optional[int] = None) -> 'Query[Component]':
        """Return all descendants of all members.

        Component c is a descendant of d if the parent of c is d or a
        descendant of d.

        Args:
            depth: Maximum hops below the members (1 = children). Defaults
                to the config's max_descendant_depth, unlimited if unset.

        Raises:
            InvalidArgumentError: If depth is negative
        """
        if depth is None:
            depth = self.config.max_descendant_depth
        return self._plain_query(hierarchy.descendants(self._members, depth))

    def parent(self) -> 'Query[HasComponents]':
        """Return the distinct parents of the members."""
        return self._plain_query(hierarchy.parent(self._members))

    def ancestors(self) -> 'Query[HasComponents]':
        """Return all ancestors of all members.

        Component c is an ancestor of d if c is the parent of d or an
        ancestor of the parent.
        """
        return self._plain_query(hierarchy.ancestors(self._members))

    def ancestor(self, depth: int) -> 'Query[HasComponents]':
        """Return the ancestors exactly depth levels above the members.

        ancestor(0) is parent(), ancestor(1) the grandparents, and so on.

        Raises:
            InvalidArgumentError: If depth is negative
        """
        if depth < 0:
            raise InvalidArgumentError("Depth cannot be negative")
        if depth == 0:
            return self.parent()
        return self.parent().ancestor(depth - 1)

    # Hierarchy manipulation

    @staticmethod
    def _container_of(target: Component) -> HasComponents:
        container = target.as_container() if target is not None else None
        if container is None:
            raise InvalidArgumentError(f"{target!r} cannot hold components")
        return container

    @staticmethod
    def _require_indexed(container: HasComponents) -> None:
        if not container.supports_indexed_insertion():
            raise InvalidArgumentError(
                f"{container!r} does not support adding components at an index"
            )

    def add_to(self: Q, container: Component, index: Optional[int] = None) -> Q:
        """Add all members to container, detaching them from their old parents.

        Without an index the members are appended in order. With an index
        they are inserted there, keeping their relative order. Members that
        were already children of container are moved, and the next member
        goes right after the moved one, so the members end up contiguous.

        Raises:
            InvalidArgumentError: If container cannot hold components, or an
                index is given and container cannot insert at an index.
                Nothing has been moved when this is raised.
        """
        target = self._container_of(container)
        if index is None:
            if self.config.log_mutations:
                logger.debug("Appending %d component(s) to %r", len(self._members), target)
            for c in self._members:
                target.add_component(c)
            return self._create_query(self._members)

        self._require_indexed(target)
        if self.config.log_mutations:
            logger.debug("Inserting %d component(s) into %r at %d",
                         len(self._members), target, index)
        for c in self._members:
            was_child = c.get_parent() is target
            target.add_component(c, index)
            index = (target.get_component_index(c) if was_child else index) + 1
        return self._create_query(self._members)

    def _anchor_parent(self, anchor: Component) -> HasComponents:
        parent = anchor.get_parent()
        if parent is None:
            raise InvalidArgumentError(f"{anchor!r} has no parent")
        self._require_indexed(parent)
        return parent

    def add_after(self: Q, anchor: Component) -> Q:
        """Insert all members right after anchor in anchor's parent.

        Raises:
            InvalidArgumentError: If anchor has no parent or the parent
                cannot insert at an index
        """
        parent = self._anchor_parent(anchor)
        return self.add_to(parent, parent.get_component_index(anchor) + 1)

    def add_before(self: Q, anchor: Component) -> Q:
        """Insert all members right before anchor in anchor's parent.

        Raises:
            InvalidArgumentError: If anchor has no parent or the parent
                cannot insert at an index
        """
        parent = self._anchor_parent(anchor)
        return self.add_to(parent, parent.get_component_index(anchor))

    def remove(self: Q) -> Q:
        """Detach all members from their parents. Detached members are skipped."""
        for c in self._members:
            parent = c.get_parent()
            if parent is not None:
                parent.remove_component(c)
        return self._create_query(self._members)

    def remove_from(self: Q, container: Component) -> Q:
        """Detach the members whose parent is container; leave the rest alone."""
        for c in self._members:
            parent = c.get_parent()
            if parent is not None and parent is container:
                parent.remove_component(c)
        return self._create_query(self._members)

    # Set accessors

    def __iter__(self) -> Iterator[C]:
        """Iterate over the members in insertion order."""
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, component: object) -> bool:
        return id(component) in self._ids

    def contains(self, component: Component) -> bool:
        """Check membership by identity."""
        return id(component) in self._ids

    def get(self) -> List[C]:
        """Return the members as a new list, in insertion order."""
        return list(self._members)

    def index(self, index: int) -> C:
        """Return the member at index, counting in insertion order.

        Raises:
            QueryIndexError: If index is negative or not below size()
        """
        if index < 0 or index >= len(self._members):
            raise QueryIndexError(
                f"Index {index} out of range for {type(self).__name__} of size {len(self._members)}"
            )
        return self._members[index]

    def slice(self: Q, start: int, stop: int) -> Q:
        """Return the members with index in [start, stop).

        Raises:
            QueryIndexError: If start is negative or not below size() (an
                empty slice of an empty query is allowed), stop is below
                start, or stop is above size()
        """
        size = len(self._members)
        empty_of_empty = size == 0 and start == 0 and stop == 0
        if start < 0 or (start >= size and not empty_of_empty) or stop < start or stop > size:
            raise QueryIndexError(
                f"Slice [{start}, {stop}) out of range for {type(self).__name__} of size {size}"
            )
        return self._create_query(self._members[start:stop])

    def __getitem__(self, key):
        """q[i] is index(i) and q[a:b] is slice(a, b). Negative indices are not supported."""
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise InvalidArgumentError("Query slices do not support a step")
            start = 0 if key.start is None else key.start
            stop = len(self._members) if key.stop is None else key.stop
            return self.slice(start, stop)
        return self.index(key)

    def first(self) -> C:
        """Return the first member.

        Raises:
            QueryIndexError: If the query is empty
        """
        return self.index(0)

    def last(self) -> C:
        """Return the last member.

        Raises:
            QueryIndexError: If the query is empty
        """
        return self.index(len(self._members) - 1)

    def one(self) -> C:
        """Return the only member.

        Raises:
            CardinalityError: If the query does not hold exactly one member
        """
        if len(self._members) != 1:
            raise CardinalityError(len(self._members))
        return self._members[0]

    def exists(self) -> bool:
        """Check if the query holds at least one member."""
        return len(self._members) > 0

    def size(self) -> int:
        return len(self._members)

    def __eq__(self, other: object) -> bool:
        """Queries are equal if they are of the same class and have the same
        members, disregarding order."""
        if not isinstance(other, AbstractQuery):
            return NotImplemented
        return type(self) is type(other) and self._ids == other._ids

    def __hash__(self) -> int:
        return hash((type(self), self._ids))

    def __repr__(self) -> str:
        return f"{type(self).__name__}{list(self._members)!r}"


class Query(AbstractQuery[C]):
    """A query over components of any kind."""
    pass
