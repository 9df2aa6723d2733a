"""objkit: small object utilities -- a rectangle value object, JSON helpers
with behavior attachment, and a fluent CSS selector builder."""

__version__ = "0.1.0"
