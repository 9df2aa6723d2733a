"""CLI commands: objkit selector / objkit build -- CSS selector tools."""

from __future__ import annotations

import sys

import click

from objkit.selector import (
    CssSelector,
    FragmentKind,
    ParseError,
    SelectorError,
    parse_selector,
)

# Accepted KIND names for `objkit build`.
_KIND_NAMES: dict[str, FragmentKind] = {
    "element": FragmentKind.ELEMENT,
    "id": FragmentKind.ID,
    "class": FragmentKind.CLASS,
    "attr": FragmentKind.ATTRIBUTE,
    "attribute": FragmentKind.ATTRIBUTE,
    "pseudo-class": FragmentKind.PSEUDO_CLASS,
    "pseudo-element": FragmentKind.PSEUDO_ELEMENT,
}


@click.command()
@click.argument("source")
def selector(source: str) -> None:
    """Parse and validate a selector, then print its canonical form.

    Exits with code 1 on syntax errors or on fragments that break the
    element, id, class, attribute, pseudo-class, pseudo-element order.
    """
    try:
        result = parse_selector(source)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(result.stringify())


@click.command()
@click.argument("parts", nargs=-1, required=True, metavar="KIND=VALUE...")
def build(parts: tuple[str, ...]) -> None:
    """Build a selector from KIND=VALUE parts, appended in the given order.

    KIND is one of: element, id, class, attr, pseudo-class, pseudo-element.

    \b
    Example:
        objkit build element=a id=main class=link pseudo-class=hover
    """
    result = CssSelector()
    for part in parts:
        name, sep, value = part.partition("=")
        kind = _KIND_NAMES.get(name.lower())
        if not sep or kind is None:
            click.echo(f"Error: invalid part {part!r} (expected KIND=VALUE)", err=True)
            sys.exit(1)
        try:
            result.add(kind, value)
        except SelectorError as exc:
            click.echo(f"Error: {part!r}: {exc}", err=True)
            sys.exit(1)
    click.echo(result.stringify())
