"""
Error handling policies for batch mutations.

A query applies a batch mutation (set_enabled, commit, ...) to each of its
components in turn. When one of those calls raises, the query hands the
error to its policy, which decides whether the batch stops or carries on.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .exceptions import BatchMutationError, InvalidArgumentError

logger = logging.getLogger(__name__)


class ErrorPolicy(ABC):
    """
    Base class for batch error policies.

    There is no rollback: components processed before a failure keep their
    new state whatever the policy does.
    """

    @abstractmethod
    def handle(self, error: Exception, method_name: str, component: Any) -> None:
        """
        Handle an error raised while mutating one component.

        Args:
            error: The exception that was raised
            method_name: Name of the batch operation (e.g., 'set_enabled')
            component: The component being mutated when the error occurred

        Raises:
            The error itself (or a wrapping error) to stop the batch.
        """
        pass

    def begin_batch(self, method_name: str) -> None:
        """Called by a query before it applies a batch mutation.

        Policies with per-batch state reset it here. Recorded errors of
        the other policies accumulate across batches until clear().
        """
        pass

    @staticmethod
    def _record(error: Exception, method_name: str, component: Any) -> Dict[str, Any]:
        return {
            'component': component,
            'method': method_name,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping the batch.

    This is the default. The caller sees the original exception at the
    point of the offending call.
    """

    def handle(self, error: Exception, method_name: str, component: Any) -> None:
        """Re-raise the error immediately."""
        raise error


class ContinueOnErrorsPolicy(ErrorPolicy):
    """
    Policy that logs errors and keeps going with the remaining components.

    Errors are kept for later inspection, across batches, until clear().
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, log a warning for each error
        """
        self.errors: List[Dict[str, Any]] = []
        self.verbose = verbose

    def handle(self, error: Exception, method_name: str, component: Any) -> None:
        self.errors.append(self._record(error, method_name, component))
        if self.verbose:
            logger.warning("Error in %s for %r: %s", method_name, component, error)

    def clear(self) -> None:
        self.errors.clear()

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        by_method: Dict[str, int] = {}
        for record in self.errors:
            by_method[record['method']] = by_method.get(record['method'], 0) + 1
        return {
            'total_errors': len(self.errors),
            'by_method': by_method,
            'errors': self.errors,
        }


class CollectErrorsPolicy(ErrorPolicy):
    """
    Policy that collects all errors without logging.

    Useful for applying a batch to everything and reporting the failures at
    the end with raise_if_errors().
    """

    def __init__(self):
        self.errors: List[Dict[str, Any]] = []

    def handle(self, error: Exception, method_name: str, component: Any) -> None:
        """Silently collect the error."""
        self.errors.append(self._record(error, method_name, component))

    def clear(self) -> None:
        self.errors.clear()

    def raise_if_errors(self) -> None:
        """Raise a BatchMutationError if anything was collected, then reset."""
        if self.errors:
            errors = list(self.errors)
            self.errors.clear()
            raise BatchMutationError(errors)


class ThresholdPolicy(ErrorPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails fast.

    The count restarts with every batch, so max_errors applies to one
    batch mutation at a time.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum errors to tolerate before failing
            verbose: If True, log a warning for each tolerated error
        """
        self.max_errors = max_errors
        self.error_count = 0
        self.verbose = verbose
        self.errors: List[Dict[str, Any]] = []

    def begin_batch(self, method_name: str) -> None:
        self.clear()

    def clear(self) -> None:
        self.error_count = 0
        self.errors = []

    def handle(self, error: Exception, method_name: str, component: Any) -> None:
        self.error_count += 1
        self.errors.append(self._record(error, method_name, component))

        if self.error_count > self.max_errors:
            raise BatchMutationError(self.errors) from error

        if self.verbose:
            logger.warning(
                "[%d/%d] Error in %s for %r: %s",
                self.error_count, self.max_errors, method_name, component, error,
            )


def create_policy(name: str, **kwargs) -> ErrorPolicy:
    """Create an error policy by name ('fail_fast', 'continue', 'collect', 'threshold')."""
    policies = {
        'fail_fast': FailFastPolicy,
        'continue': ContinueOnErrorsPolicy,
        'continue_on_errors': ContinueOnErrorsPolicy,
        'collect': CollectErrorsPolicy,
        'threshold': ThresholdPolicy,
    }
    try:
        policy_class = policies[name.lower()]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown error policy: {name}. "
            f"Choose from: {', '.join(policies.keys())}"
        ) from None
    return policy_class(**kwargs)
