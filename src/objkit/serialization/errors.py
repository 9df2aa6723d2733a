"""Serialization error types."""

from objkit.errors import ParseError as _BaseParseError


class ParseError(_BaseParseError):
    """Raised when JSON text cannot be decoded."""
