"""CLI commands: objkit encode / objkit decode -- JSON helpers."""

from __future__ import annotations

import sys

import click

from objkit.model import Rectangle
from objkit.serialization import ParseError, Record
from objkit.serialization import decode as decode_json
from objkit.serialization import encode as encode_json


def _location(exc: ParseError) -> str:
    if exc.line is None:
        return ""
    return f" (line {exc.line}, column {exc.column})"


@click.command()
@click.argument("text")
def encode(text: str) -> None:
    """Re-encode JSON TEXT in compact form, keeping key order."""
    try:
        value = decode_json({}, text)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}{_location(exc)}", err=True)
        sys.exit(1)
    click.echo(encode_json(value))


@click.command()
@click.argument("text")
def decode(text: str) -> None:
    """Decode JSON TEXT as a rectangle and print its area.

    TEXT must be an object with ``width`` and ``height`` fields.
    """
    try:
        record = decode_json(Rectangle, text)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}{_location(exc)}", err=True)
        sys.exit(1)

    if not isinstance(record, Record):
        click.echo("Error: expected a JSON object", err=True)
        sys.exit(1)

    try:
        value = record.get_area()
    except (AttributeError, TypeError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(repr(record))
    click.echo(f"Area: {value}")
