"""JSON encode/decode helpers.

``encode`` produces compact JSON text the way ``JSON.stringify`` does:
no whitespace between tokens, keys in insertion order, non-ASCII text kept
as-is.  ``decode`` parses text and binds a top-level object to a behavior
set, yielding a :class:`~objkit.serialization.record.Record`.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from typing import Any

from objkit.serialization.errors import ParseError
from objkit.serialization.record import BehaviorSet, Record

__all__ = ["encode", "decode", "get_json", "from_json"]

logger = logging.getLogger(__name__)


def _to_json_compatible(value: object) -> object:
    """``default`` hook for :func:`json.dumps` covering objkit value types."""
    if isinstance(value, Record):
        # Record.as_dict, not the attribute: a field may be named "as_dict".
        return _replace_non_finite(Record.as_dict(value))
    if is_dataclass(value) and not isinstance(value, type):
        # Nested values go back through the encoder.
        return _replace_non_finite(
            {f.name: getattr(value, f.name) for f in fields(value)}
        )
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _replace_non_finite(value: Any, _active: set[int] | None = None) -> Any:
    """Map NaN and infinities inside lists and dicts to ``None``.

    ``JSON.stringify`` writes them as ``null``.  Other objects are left for
    the encoder, which routes them back here through the ``default`` hook.
    """
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if not isinstance(value, (dict, list, tuple)):
        return value

    active = set() if _active is None else _active
    if id(value) in active:
        raise ValueError("Circular reference detected")
    active.add(id(value))
    try:
        if isinstance(value, dict):
            return {k: _replace_non_finite(v, active) for k, v in value.items()}
        return [_replace_non_finite(v, active) for v in value]
    finally:
        active.discard(id(value))


def _reject_constant(name: str) -> float:
    raise ParseError(f"Unexpected token {name!r} in JSON")


def encode(value: Any) -> str:
    """Return the compact JSON representation of *value*.

    NaN and infinities encode as ``null``.  Cyclic structures raise
    ``ValueError`` and unsupported objects raise ``TypeError``.
    """
    return json.dumps(
        _replace_non_finite(value),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
        default=_to_json_compatible,
    )


def decode(behavior: BehaviorSet, text: str | bytes) -> Any:
    """Parse *text* and attach *behavior* to the resulting object.

    A top-level JSON object is returned as a :class:`Record` whose methods
    come from *behavior*.  Arrays and scalars have nothing to attach to and
    are returned as plain Python values.

    Raises:
        ParseError: *text* is not well-formed JSON.
        TypeError: *behavior* is neither a class nor a mapping.
    """
    if not isinstance(behavior, (type, Mapping)):
        raise TypeError(
            f"behavior must be a class or a mapping, not {type(behavior).__name__}"
        )

    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(exc.msg, line=exc.lineno, column=exc.colno) from exc

    if not isinstance(data, dict):
        logger.debug("decoded top-level %s; no behavior attached", type(data).__name__)
        return data

    record = Record(data, behavior)
    logger.debug("decoded %r", record)
    return record


# Aliases.
get_json = encode
from_json = decode
