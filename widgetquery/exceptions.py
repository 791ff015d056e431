"""Exception hierarchy for WidgetQuery.

Every error the query layer raises derives from QueryError, so callers can
catch the whole family at once. The concrete classes also derive from the
matching builtin (IndexError, ValueError, RuntimeError) so code written
against plain Python containers keeps working.
"""

from typing import Any, Dict, List


class QueryError(Exception):
    """Base class for all query errors."""
    pass


class CardinalityError(QueryError):
    """Raised by one() when a query does not hold exactly one component."""

    def __init__(self, size: int):
        super().__init__(f"Query does not contain exactly one component (size={size})")
        self.size = size


class QueryIndexError(QueryError, IndexError):
    """Raised when index() or slice() arguments are out of bounds."""
    pass


class InvalidArgumentError(QueryError, ValueError):
    """Raised when an argument can never be satisfied.

    Examples: a negative depth, an insertion anchor without a parent, or a
    container that cannot insert at an index.
    """
    pass


class NoCurrentRootError(QueryError, RuntimeError):
    """Raised by select_all() when no root component can be resolved."""
    pass


class BatchMutationError(QueryError):
    """Aggregate of the errors recorded while applying a batch mutation."""

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = list(errors)
        summary = "; ".join(
            f"{e['method']} on {e['component']!r}: {e['error_message']}"
            for e in self.errors[:5]
        )
        more = f" (+{len(self.errors) - 5} more)" if len(self.errors) > 5 else ""
        super().__init__(f"{len(self.errors)} batch mutation error(s): {summary}{more}")
