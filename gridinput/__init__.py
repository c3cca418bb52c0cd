"""Keyboard, mouse, touch and window event handling for a grid-based editor front end."""

__version__ = "0.10.3"
__all__ = ["events", "settings", "keyboard", "mouse", "window"]