"""objkit model layer -- public type re-exports."""

from objkit.model.rectangle import Rectangle

__all__ = ["Rectangle"]
