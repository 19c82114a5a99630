"""Code display registry — get_display, list_displays, register_display."""

from __future__ import annotations

from promocodes.display.base import CodeDisplay

_REGISTRY: dict[str, type] = {}


def register_display(name: str, cls: type) -> None:
    """Register a CodeDisplay implementation by name."""
    _REGISTRY[name] = cls


def get_display(name: str) -> CodeDisplay:
    """Return an instance of the named display. Raises KeyError if unknown."""
    if name not in _REGISTRY:
        raise KeyError(f"Unknown display: '{name}'. Available: {', '.join(_REGISTRY)}")
    return _REGISTRY[name]()


def list_displays() -> list[str]:
    """Return sorted list of registered display names."""
    return sorted(_REGISTRY.keys())


# Register built-in displays
from promocodes.display.builtin import InteractiveDisplay, PlainDisplay  # noqa: E402

register_display("interactive", InteractiveDisplay)
register_display("plain", PlainDisplay)
