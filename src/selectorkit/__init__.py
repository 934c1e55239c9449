"""selectorkit: immutable CSS selector builder and small data helpers."""

from selectorkit.config import SelectorKitConfig
from selectorkit.errors import (
    DuplicatePartError,
    OrderingError,
    SelectorError,
    SerializationError,
)
from selectorkit.selector import (
    Category,
    CombinedSelector,
    SelectorBuilder,
    SelectorState,
    css_selector_builder,
)
from selectorkit.serialization import from_json, to_json
from selectorkit.shapes import Rectangle

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # selector
    "Category",
    "SelectorState",
    "CombinedSelector",
    "SelectorBuilder",
    "css_selector_builder",
    # errors
    "SelectorError",
    "DuplicatePartError",
    "OrderingError",
    "SerializationError",
    # helpers
    "Rectangle",
    "to_json",
    "from_json",
    # config
    "SelectorKitConfig",
]
