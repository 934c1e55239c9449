from selectorkit.selector.builder import SelectorBuilder, css_selector_builder
from selectorkit.selector.category import Category
from selectorkit.selector.model import CombinedSelector, SelectorState, combine
from selectorkit.selector.rules import check_append, check_order, check_single_occurrence

__all__ = [
    "SelectorBuilder",
    "css_selector_builder",
    "Category",
    "SelectorState",
    "CombinedSelector",
    "combine",
    "check_append",
    "check_order",
    "check_single_occurrence",
]
