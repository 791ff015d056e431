"""WidgetQuery - fluent queries over UI component trees.

Select components, filter them, walk the containment hierarchy and change
them in bulk, in the style of CSS selectors over a DOM:

    from widgetquery import select_all
    from widgetquery.toolkit import Button

    select_all(ui).is_(Button).has_style_name("danger").set_enabled(False)

Queries are immutable; every operation returns a new one. The component
contract lives in widgetquery.core, and widgetquery.toolkit provides an
in-memory implementation of it.
"""

__version__ = "0.1.0"

from .core import (
    Component,
    HasComponents,
    Field,
    Unit,
    Validator,
    InvalidValueError,
    Filter,
    ByPredicate,
    NotFilter,
    AllOf,
    AnyOf,
    AbstractQuery,
    Query,
    FieldQuery,
    hierarchy,
)
from .config import QueryConfig, get_default_config, set_default_config, reset_default_config
from .policies import (
    ErrorPolicy,
    FailFastPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
    create_policy,
)
from .exceptions import (
    QueryError,
    CardinalityError,
    QueryIndexError,
    InvalidArgumentError,
    NoCurrentRootError,
    BatchMutationError,
)
from .context import get_current_root, set_current_root, current_root
from .api import select, select_fields, select_all, none

__all__ = [
    "__version__",
    # Core
    "Component",
    "HasComponents",
    "Field",
    "Unit",
    "Validator",
    "InvalidValueError",
    "Filter",
    "ByPredicate",
    "NotFilter",
    "AllOf",
    "AnyOf",
    "AbstractQuery",
    "Query",
    "FieldQuery",
    "hierarchy",
    # Config
    "QueryConfig",
    "get_default_config",
    "set_default_config",
    "reset_default_config",
    # Policies
    "ErrorPolicy",
    "FailFastPolicy",
    "ContinueOnErrorsPolicy",
    "CollectErrorsPolicy",
    "ThresholdPolicy",
    "create_policy",
    # Errors
    "QueryError",
    "CardinalityError",
    "QueryIndexError",
    "InvalidArgumentError",
    "NoCurrentRootError",
    "BatchMutationError",
    # Context
    "get_current_root",
    "set_current_root",
    "current_root",
    # API
    "select",
    "select_fields",
    "select_all",
    "none",
]
