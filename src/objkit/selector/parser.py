"""Lark-based parser turning selector source back into builders.

Syntax example:
    div#main.content > a[href$=".png"]:hover ~ p::first-line

Each compound selector is replayed fragment by fragment through
:class:`CssSelector`, so out-of-order or repeated fragments raise the same
:class:`OrderViolation` / :class:`DuplicateFragment` errors as the builder.
Compounds are folded left to right with ``combine``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from objkit.selector.builder import CssSelector, Selector, css_selector_builder
from objkit.selector.errors import ParseError
from objkit.selector.model import FragmentKind

__all__ = ["parse_selector"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_Part = tuple[FragmentKind, str]


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into (kind, value) pairs per compound."""

    # ---- fragments ----

    def element(self, items: list[Token]) -> _Part:
        return (FragmentKind.ELEMENT, str(items[0]))

    def id(self, items: list[Token]) -> _Part:
        return (FragmentKind.ID, str(items[0]))

    def class_(self, items: list[Token]) -> _Part:
        return (FragmentKind.CLASS, str(items[0]))

    def attribute(self, items: list[Token]) -> _Part:
        return (FragmentKind.ATTRIBUTE, str(items[0]).strip())

    def pseudo_element(self, items: list[Token]) -> _Part:
        return (FragmentKind.PSEUDO_ELEMENT, str(items[0]))

    def pseudo_class(self, items: list[Token]) -> _Part:
        # Name plus optional "(...)" arguments.
        return (FragmentKind.PSEUDO_CLASS, "".join(str(t) for t in items))

    # ---- structural ----

    def compound(self, items: list[_Part]) -> list[_Part]:
        return list(items)

    def start(self, items: list[object]) -> list[object]:
        return list(items)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def _build_compound(parts: list[_Part]) -> CssSelector:
    selector = CssSelector()
    for kind, value in parts:
        selector.add(kind, value)
    return selector


def parse_selector(source: str) -> Selector:
    """Parse *source* into a :class:`CssSelector` or, when it contains
    combinators, a :class:`CombinedSelector`.

    Raises:
        ParseError: *source* is not valid selector syntax.
        OrderViolation: fragments of one compound are out of order.
        DuplicateFragment: a compound repeats an element, id or pseudo-element.
    """
    try:
        tree = _parser().parse(source.strip())
    except UnexpectedInput as e:
        raise ParseError(str(e), line=e.line, column=e.column) from e

    items = SelectorTransformer().transform(tree)

    result: Selector = _build_compound(items[0])
    for i in range(1, len(items), 2):
        combinator = str(items[i]).strip() or " "
        result = css_selector_builder.combine(
            result, combinator, _build_compound(items[i + 1])
        )
    return result
