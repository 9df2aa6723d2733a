"""Selector model: fragment kinds and decorated fragments."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FragmentKind(Enum):
    """The kind of a selector fragment.

    Orderable kinds must appear in declaration order inside one compound
    selector: element, id, class, attribute, pseudo-class, pseudo-element.
    ``COMBINED`` marks the single fragment of a combined selector and has
    no rank.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"
    COMBINED = "combined"

    @property
    def rank(self) -> int:
        """Position in the fragment order, or -1 for ``COMBINED``."""
        return _RANKS.get(self, -1)

    @property
    def unique(self) -> bool:
        """Whether at most one fragment of this kind may appear."""
        return self in _UNIQUE_KINDS

    def decorate(self, value: str) -> str:
        """Wrap *value* in this kind's punctuation (``#``, ``.``, ``[...]``...)."""
        return _DECORATORS[self].format(value)


_RANKS: dict[FragmentKind, int] = {
    kind: i
    for i, kind in enumerate(
        [
            FragmentKind.ELEMENT,
            FragmentKind.ID,
            FragmentKind.CLASS,
            FragmentKind.ATTRIBUTE,
            FragmentKind.PSEUDO_CLASS,
            FragmentKind.PSEUDO_ELEMENT,
        ]
    )
}

_UNIQUE_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_DECORATORS: dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "{}",
    FragmentKind.ID: "#{}",
    FragmentKind.CLASS: ".{}",
    FragmentKind.ATTRIBUTE: "[{}]",
    FragmentKind.PSEUDO_CLASS: ":{}",
    FragmentKind.PSEUDO_ELEMENT: "::{}",
    FragmentKind.COMBINED: "{}",
}


@dataclass(frozen=True)
class Fragment:
    """One typed piece of a selector; *text* already carries its punctuation."""

    kind: FragmentKind
    text: str
