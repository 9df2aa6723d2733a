"""Tests for the fluent CSS selector builder."""

import itertools

import pytest

from objkit.selector import (
    CombinedSelector,
    CssSelector,
    DuplicateFragment,
    FragmentKind,
    OrderViolation,
    SelectorError,
    css_selector_builder as builder,
)

ORDERED_KINDS = [
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.CLASS,
    FragmentKind.ATTRIBUTE,
    FragmentKind.PSEUDO_CLASS,
    FragmentKind.PSEUDO_ELEMENT,
]


# ---------------------------------------------------------------------------
# Single fragments
# ---------------------------------------------------------------------------


class TestSingleFragments:
    def test_element(self):
        assert builder.element("div").stringify() == "div"

    def test_id(self):
        assert builder.id("main").stringify() == "#main"

    def test_class(self):
        assert builder.class_("container").stringify() == ".container"

    def test_attr(self):
        assert builder.attr('href$=".png"').stringify() == '[href$=".png"]'

    def test_attribute_alias(self):
        assert builder.attribute("target").stringify() == "[target]"

    def test_pseudo_class(self):
        assert builder.pseudo_class("nth-of-type(even)").stringify() == ":nth-of-type(even)"

    def test_pseudo_element(self):
        assert builder.pseudo_element("first-line").stringify() == "::first-line"

    def test_factory_starts_new_builders(self):
        a = builder.element("a")
        b = builder.element("b")
        assert a is not b
        assert a.stringify() == "a"
        assert b.stringify() == "b"


# ---------------------------------------------------------------------------
# Chaining
# ---------------------------------------------------------------------------


class TestChaining:
    def test_element_id_class(self):
        assert builder.element("a").id("b").class_("c").stringify() == "a#b.c"

    def test_returns_same_instance(self):
        sel = builder.element("a")
        assert sel.id("b") is sel

    def test_full_chain(self):
        sel = (
            builder.element("a")
            .id("main")
            .class_("link")
            .class_("active")
            .attr("href")
            .pseudo_class("hover")
            .pseudo_class("focus")
            .pseudo_element("after")
        )
        assert sel.stringify() == "a#main.link.active[href]:hover:focus::after"

    def test_render_idempotent(self):
        sel = builder.element("p").class_("x")
        assert sel.render() == sel.render() == "p.x"
        assert len(sel.fragments) == 2

    def test_str(self):
        assert str(builder.id("x").class_("y")) == "#x.y"

    def test_fragments(self):
        sel = builder.element("a").id("b")
        assert [f.kind for f in sel.fragments] == [FragmentKind.ELEMENT, FragmentKind.ID]
        assert [f.text for f in sel.fragments] == ["a", "#b"]

    def test_counts(self):
        sel = builder.element("a").class_("b").class_("c")
        assert sel.count(FragmentKind.ELEMENT) == 1
        assert sel.count(FragmentKind.ID) == 0
        assert sel.count(FragmentKind.CLASS) == 2

    @pytest.mark.parametrize("kinds", list(itertools.combinations(ORDERED_KINDS, 3)))
    def test_valid_orderings_succeed(self, kinds):
        sel = CssSelector()
        for kind in kinds:
            sel.add(kind, "x")
        assert len(sel.fragments) == 3


# ---------------------------------------------------------------------------
# Order violations
# ---------------------------------------------------------------------------


class TestOrderViolation:
    @pytest.mark.parametrize(
        "first, second",
        [
            (later, earlier)
            for i, earlier in enumerate(ORDERED_KINDS)
            for later in ORDERED_KINDS[i + 1:]
        ],
    )
    def test_inverted_pairs_rejected(self, first, second):
        sel = CssSelector().add(first, "x")
        with pytest.raises(OrderViolation):
            sel.add(second, "y")
        assert len(sel.fragments) == 1

    def test_id_after_class(self):
        with pytest.raises(OrderViolation):
            builder.class_("a").id("b")

    def test_element_after_id(self):
        with pytest.raises(OrderViolation):
            builder.id("a").element("b")

    def test_pseudo_class_after_pseudo_element(self):
        with pytest.raises(OrderViolation):
            builder.pseudo_element("before").pseudo_class("hover")

    def test_state_unchanged(self):
        sel = builder.element("a").class_("b")
        with pytest.raises(OrderViolation):
            sel.id("c")
        assert sel.stringify() == "a.b"
        assert sel.count(FragmentKind.ID) == 0

    def test_message(self):
        with pytest.raises(OrderViolation) as exc_info:
            builder.class_("a").element("b")
        assert str(exc_info.value) == (
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )
        assert exc_info.value.kind is FragmentKind.ELEMENT

    def test_is_selector_error(self):
        with pytest.raises(SelectorError):
            builder.attr("a").class_("b")
        with pytest.raises(ValueError):
            builder.attr("a").class_("b")


# ---------------------------------------------------------------------------
# Duplicates
# ---------------------------------------------------------------------------


class TestDuplicateFragment:
    def test_two_elements(self):
        with pytest.raises(DuplicateFragment):
            builder.element("a").element("b")

    def test_two_ids(self):
        with pytest.raises(DuplicateFragment):
            builder.id("a").id("b")

    def test_two_pseudo_elements(self):
        with pytest.raises(DuplicateFragment):
            builder.pseudo_element("before").pseudo_element("after")

    def test_id_duplicate_in_later_position(self):
        sel = builder.element("div").id("a")
        with pytest.raises(DuplicateFragment):
            sel.id("b")

    def test_duplicate_after_later_kind_is_order_violation(self):
        # The order check runs first.
        sel = builder.id("a").class_("b")
        with pytest.raises(OrderViolation):
            sel.id("c")

    @pytest.mark.parametrize(
        "method", ["class_", "attr", "pseudo_class"]
    )
    def test_repeatable_kinds(self, method):
        sel = getattr(builder, method)("a")
        getattr(sel, method)("b")
        getattr(sel, method)("c")
        assert len(sel.fragments) == 3

    def test_state_unchanged(self):
        sel = builder.element("a")
        with pytest.raises(DuplicateFragment):
            sel.element("b")
        assert sel.stringify() == "a"
        assert sel.count(FragmentKind.ELEMENT) == 1

    def test_message(self):
        with pytest.raises(DuplicateFragment) as exc_info:
            builder.id("a").id("b")
        assert str(exc_info.value) == (
            "Element, id and pseudo-element should not occur more then one "
            "time inside the selector"
        )
        assert exc_info.value.kind is FragmentKind.ID


# ---------------------------------------------------------------------------
# combine
# ---------------------------------------------------------------------------


class TestCombine:
    def test_child_combinator(self):
        sel = builder.combine(builder.element("div"), ">", builder.id("child"))
        assert sel.stringify() == "div > #child"

    def test_returns_combined_selector(self):
        sel = builder.combine(builder.element("a"), "+", builder.element("b"))
        assert isinstance(sel, CombinedSelector)
        assert len(sel.fragments) == 1
        assert sel.fragments[0].kind is FragmentKind.COMBINED

    def test_nested(self):
        sel = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert sel.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_terminal(self):
        sel = builder.combine(builder.element("a"), ">", builder.element("b"))
        assert not hasattr(sel, "element")
        assert not hasattr(sel, "class_")

    def test_children_not_mutated(self):
        left = builder.element("a")
        right = builder.class_("b")
        builder.combine(left, ">", right)
        assert left.stringify() == "a"
        assert right.stringify() == ".b"

    def test_str_and_render(self):
        sel = builder.combine(builder.element("ul"), "~", builder.element("li"))
        assert str(sel) == sel.render() == "ul ~ li"


class TestAddCombined:
    def test_add_combined_kind_rejected(self):
        with pytest.raises(ValueError):
            CssSelector().add(FragmentKind.COMBINED, "a > b")
