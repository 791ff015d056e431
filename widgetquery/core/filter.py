"""Filtering strategies for WidgetQuery.

A Filter turns an ordered sequence of components into an ordered subset.
Most filters are plain predicates adapted with ByPredicate; a Filter can
also look at the whole sequence at once when a decision depends on more
than one component.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, Generic, Iterable, List, Sequence, TypeVar

from .component import Component

C = TypeVar('C', bound=Component)

Predicate = Callable[[C], bool]


def ordered_set(components: Iterable[C]) -> List[C]:
    """Deduplicate by identity, keeping the first occurrence of each component.

    Args:
        components: Components in any order, possibly repeated

    Returns:
        List in first-seen order with no component appearing twice
    """
    seen: Dict[int, C] = {}
    for c in components:
        if id(c) not in seen:
            seen[id(c)] = c
    return list(seen.values())


class Filter(ABC, Generic[C]):
    """Abstract base class for filters over component sequences."""

    @abstractmethod
    def apply(self, components: Sequence[C]) -> List[C]:
        """Select a subset of components.

        Args:
            components: Ordered, deduplicated components

        Returns:
            The kept components, in their original relative order
        """
        pass

    def __call__(self, components: Sequence[C]) -> List[C]:
        return self.apply(components)


class ByPredicate(Filter[C]):
    """Keeps the components for which a predicate returns True."""

    def __init__(self, predicate: Predicate):
        self.predicate = predicate

    def apply(self, components: Sequence[C]) -> List[C]:
        return [c for c in components if self.predicate(c)]

    def __repr__(self) -> str:
        return f"ByPredicate({self.predicate!r})"


class NotFilter(Filter[C]):
    """Keeps the components another filter drops."""

    def __init__(self, inner: Filter[C]):
        self.inner = inner

    def apply(self, components: Sequence[C]) -> List[C]:
        kept = {id(c) for c in self.inner.apply(components)}
        return [c for c in components if id(c) not in kept]


class AllOf(Filter[C]):
    """Keeps the components every filter keeps."""

    def __init__(self, *filters: Filter[C]):
        self.filters = filters

    def apply(self, components: Sequence[C]) -> List[C]:
        result = list(components)
        for f in self.filters:
            result = f.apply(result)
        return result


class AnyOf(Filter[C]):
    """Keeps the components at least one filter keeps."""

    def __init__(self, *filters: Filter[C]):
        self.filters = filters

    def apply(self, components: Sequence[C]) -> List[C]:
        kept = set()
        for f in self.filters:
            kept.update(id(c) for c in f.apply(components))
        return [c for c in components if id(c) in kept]


def as_filter(predicate_or_filter) -> Filter:
    """Return a Filter, adapting a bare predicate with ByPredicate.

    Raises:
        TypeError: If the argument is neither a Filter nor callable
    """
    if isinstance(predicate_or_filter, Filter):
        return predicate_or_filter
    if callable(predicate_or_filter):
        return ByPredicate(predicate_or_filter)
    raise TypeError(
        f"Expected a Filter or a predicate, got {type(predicate_or_filter).__name__}"
    )
