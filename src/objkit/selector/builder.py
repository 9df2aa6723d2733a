"""Fluent CSS selector builder.

Example::

    css_selector_builder.element("a").id("main").class_("link").stringify()
    # => 'a#main.link'

    css_selector_builder.combine(
        css_selector_builder.element("div"), ">", css_selector_builder.id("child")
    ).stringify()
    # => 'div > #child'
"""

from __future__ import annotations

import logging
from typing import Protocol

from objkit.selector.errors import DuplicateFragment, OrderViolation
from objkit.selector.model import Fragment, FragmentKind

__all__ = [
    "Selector",
    "CssSelector",
    "CombinedSelector",
    "SelectorBuilder",
    "css_selector_builder",
]

logger = logging.getLogger(__name__)


class Selector(Protocol):
    """Anything that renders to a selector string."""

    def stringify(self) -> str: ...


class CssSelector:
    """A compound selector assembled one fragment at a time.

    Every builder method validates before mutating and returns ``self``, so
    calls chain.  A rejected fragment raises :class:`OrderViolation` or
    :class:`DuplicateFragment` and leaves the selector unchanged.
    """

    def __init__(self) -> None:
        self._fragments: list[Fragment] = []
        self._counts: dict[FragmentKind, int] = {
            FragmentKind.ELEMENT: 0,
            FragmentKind.ID: 0,
            FragmentKind.PSEUDO_ELEMENT: 0,
        }

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> CssSelector:
        return self._append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> CssSelector:
        return self._append(FragmentKind.ID, value)

    def class_(self, value: str) -> CssSelector:
        return self._append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> CssSelector:
        return self._append(FragmentKind.ATTRIBUTE, value)

    attribute = attr

    def pseudo_class(self, value: str) -> CssSelector:
        return self._append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> CssSelector:
        return self._append(FragmentKind.PSEUDO_ELEMENT, value)

    def add(self, kind: FragmentKind, value: str) -> CssSelector:
        """Append a fragment of *kind*; used when the kind is only known at runtime."""
        if kind is FragmentKind.COMBINED:
            raise ValueError("combined fragments are produced by combine() only")
        return self._append(kind, value)

    # --- validation -----------------------------------------------------------

    def _check_order(self, kind: FragmentKind) -> None:
        last_rank = self._fragments[-1].kind.rank if self._fragments else -1
        if last_rank > kind.rank:
            raise OrderViolation(kind)

    def _check_duplicates(self, kind: FragmentKind) -> None:
        if kind.unique and self._counts[kind] > 0:
            raise DuplicateFragment(kind)

    def _append(self, kind: FragmentKind, value: str) -> CssSelector:
        try:
            self._check_order(kind)
            self._check_duplicates(kind)
        except (OrderViolation, DuplicateFragment) as exc:
            logger.debug(
                "rejected %s %r after %r: %s",
                kind.value, value, self.stringify(), type(exc).__name__,
            )
            raise
        self._fragments.append(Fragment(kind=kind, text=kind.decorate(value)))
        if kind.unique:
            self._counts[kind] += 1
        return self

    # --- inspection / rendering -----------------------------------------------

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        return tuple(self._fragments)

    def count(self, kind: FragmentKind) -> int:
        """Number of fragments of *kind* appended so far."""
        if kind in self._counts:
            return self._counts[kind]
        return sum(1 for f in self._fragments if f.kind is kind)

    def stringify(self) -> str:
        return "".join(f.text for f in self._fragments)

    render = stringify

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"CssSelector({self.stringify()!r})"



class CombinedSelector:
    """Two rendered selectors joined by a combinator.

    Terminal: it renders, and can be combined again, but accepts no more
    fragments.
    """

    def __init__(self, left: Selector, combinator: str, right: Selector) -> None:
        text = f"{left.stringify()} {combinator} {right.stringify()}"
        self._fragment = Fragment(kind=FragmentKind.COMBINED, text=text)

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        return (self._fragment,)

    def stringify(self) -> str:
        return self._fragment.text

    render = stringify

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"CombinedSelector({self.stringify()!r})"


class SelectorBuilder:
    """Factory: each fragment method starts a new :class:`CssSelector`."""

    def element(self, value: str) -> CssSelector:
        return CssSelector().element(value)

    def id(self, value: str) -> CssSelector:
        return CssSelector().id(value)

    def class_(self, value: str) -> CssSelector:
        return CssSelector().class_(value)

    def attr(self, value: str) -> CssSelector:
        return CssSelector().attr(value)

    attribute = attr

    def pseudo_class(self, value: str) -> CssSelector:
        return CssSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> CssSelector:
        return CssSelector().pseudo_element(value)

    def combine(
        self, selector1: Selector, combinator: str, selector2: Selector
    ) -> CombinedSelector:
        """Join two selectors as ``"<selector1> <combinator> <selector2>"``."""
        return CombinedSelector(selector1, combinator, selector2)


css_selector_builder = SelectorBuilder()
