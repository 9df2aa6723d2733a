"""Record: decoded JSON fields bound to a caller-supplied behavior set."""

from __future__ import annotations

import inspect
import types
from collections.abc import Mapping
from typing import Any, Union

# A class whose methods operate on the record, or a mapping of
# name -> callable (bound against the record) or constant.
BehaviorSet = Union[type, Mapping[str, Any]]


class Record:
    """Plain data fields plus a reference to an injected behavior set.

    Field lookup wins over behavior lookup, so a method such as
    ``Rectangle.get_area`` sees the decoded ``width`` and ``height`` through
    ``self``. Fields may be read, reassigned, added and deleted as plain
    attributes.
    """

    __slots__ = ("_fields", "_behavior")

    def __init__(self, fields: Mapping[str, Any], behavior: BehaviorSet) -> None:
        object.__setattr__(self, "_fields", dict(fields))
        object.__setattr__(self, "_behavior", behavior)

    @property
    def behavior(self) -> BehaviorSet:
        return self._behavior

    def as_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the fields in insertion order."""
        return dict(self._fields)

    # --- attribute protocol ---------------------------------------------------

    def __getattribute__(self, name: str) -> Any:
        if not name.startswith("_"):
            fields = object.__getattribute__(self, "_fields")
            if name in fields:
                return fields[name]
        return object.__getattribute__(self, name)

    def __getattr__(self, name: str) -> Any:
        if name in Record.__slots__ or name.startswith("__"):
            raise AttributeError(name)
        fields = self._fields
        if name in fields:
            return fields[name]
        return self._resolve_behavior(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in Record.__slots__:
            raise AttributeError(f"{name!r} is read-only")
        self._fields[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self._fields[name]
        except KeyError:
            raise AttributeError(name) from None

    def _resolve_behavior(self, name: str) -> Any:
        behavior = self._behavior
        missing = AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

        if isinstance(behavior, Mapping):
            if name not in behavior:
                raise missing
            member = behavior[name]
            if callable(member):
                return types.MethodType(member, self)
            return member

        # Only the class and its bases; metaclass members such as type.mro
        # do not apply to a record.
        if not any(name in vars(klass) for klass in behavior.__mro__):
            raise missing
        member = inspect.getattr_static(behavior, name)
        if isinstance(member, staticmethod):
            return member.__func__
        if isinstance(member, classmethod):
            return member.__func__.__get__(behavior, behavior)
        if hasattr(member, "__get__"):
            # Functions bind to the record; properties evaluate against it.
            return member.__get__(self, behavior)
        return member

    # --- comparison / display -------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self._fields == other._fields and self._behavior == other._behavior

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        name = getattr(self._behavior, "__name__", type(self._behavior).__name__)
        return f"Record({name}, {self._fields!r})"
