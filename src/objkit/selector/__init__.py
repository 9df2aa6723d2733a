from objkit.selector.builder import (
    CombinedSelector,
    CssSelector,
    Selector,
    SelectorBuilder,
    css_selector_builder,
)
from objkit.selector.errors import (
    DuplicateFragment,
    OrderViolation,
    ParseError,
    SelectorError,
)
from objkit.selector.model import Fragment, FragmentKind
from objkit.selector.parser import parse_selector

__all__ = [
    "css_selector_builder",
    "SelectorBuilder",
    "CssSelector",
    "CombinedSelector",
    "Selector",
    "Fragment",
    "FragmentKind",
    "SelectorError",
    "OrderViolation",
    "DuplicateFragment",
    "ParseError",
    "parse_selector",
]
