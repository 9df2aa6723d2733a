"""Selector error types."""

from __future__ import annotations

from objkit.errors import ParseError as _BaseParseError
from objkit.selector.model import FragmentKind

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)


class SelectorError(ValueError):
    """Base class for rejected selector fragments."""

    def __init__(self, message: str, kind: FragmentKind):
        self.kind = kind
        super().__init__(message)


class OrderViolation(SelectorError):
    """A fragment was appended after a fragment of a later kind."""

    def __init__(self, kind: FragmentKind):
        super().__init__(ORDER_MESSAGE, kind)


class DuplicateFragment(SelectorError):
    """A second element, id or pseudo-element fragment was appended."""

    def __init__(self, kind: FragmentKind):
        super().__init__(DUPLICATE_MESSAGE, kind)


class ParseError(_BaseParseError):
    """Raised when selector source cannot be parsed."""
