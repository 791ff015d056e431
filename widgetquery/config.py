"""Configuration system for WidgetQuery.

A QueryConfig travels with every query and is inherited by the queries
derived from it. It controls how batch mutations react to failures, whether
they are logged, and the default depth limit for descendant traversal.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .exceptions import InvalidArgumentError
from .policies import ContinueOnErrorsPolicy, ErrorPolicy, FailFastPolicy


@dataclass
class QueryConfig:
    """Complete configuration for queries.

    Queries created without an explicit config use the module default
    (see get_default_config()) as it is at construction time.
    """

    # Batch mutation error handling
    error_policy: ErrorPolicy = field(default_factory=FailFastPolicy)

    # Logging
    log_mutations: bool = False  # DEBUG-log each batch mutation and move

    # Traversal
    max_descendant_depth: Optional[int] = None  # None = unlimited

    @classmethod
    def strict(cls) -> 'QueryConfig':
        """Create config that stops a batch at its first failure."""
        return cls(error_policy=FailFastPolicy())

    @classmethod
    def lenient(cls, verbose: bool = True) -> 'QueryConfig':
        """Create config that logs batch failures and carries on.

        Args:
            verbose: Whether skipped errors are logged as warnings

        Returns:
            QueryConfig using a ContinueOnErrorsPolicy
        """
        return cls(error_policy=ContinueOnErrorsPolicy(verbose=verbose))

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.error_policy, ErrorPolicy):
            errors.append("error_policy must be an ErrorPolicy instance")

        if self.max_descendant_depth is not None and self.max_descendant_depth < 0:
            errors.append("max_descendant_depth cannot be negative")

        return errors


_default_config = QueryConfig()


def get_default_config() -> QueryConfig:
    """Return the config used by queries created without one."""
    return _default_config


def set_default_config(config: QueryConfig) -> None:
    """Replace the module default config.

    Raises:
        InvalidArgumentError: If the config does not validate
    """
    global _default_config
    errors = config.validate()
    if errors:
        raise InvalidArgumentError(f"Invalid configuration: {'; '.join(errors)}")
    _default_config = config


def reset_default_config() -> None:
    """Restore the built-in default config."""
    global _default_config
    _default_config = QueryConfig()
