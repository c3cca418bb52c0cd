"""Translation of keyboard events into editor key notation."""

from __future__ import annotations

import sys
from typing import Callable

from gridinput.events import (
    ElementState,
    Focused,
    ImeText,
    KeyboardCommand,
    KeyboardInput,
    KeyEvent,
    MainEventsCleared,
    ModifiersChanged,
    ModifiersState,
    NamedKey,
)
from gridinput.settings import KeyboardSettings

_CONTROL_KEYS = {
    NamedKey.BACKSPACE: "BS",
    NamedKey.ESCAPE: "Esc",
    NamedKey.DELETE: "Del",
    NamedKey.ARROW_UP: "Up",
    NamedKey.ARROW_DOWN: "Down",
    NamedKey.ARROW_LEFT: "Left",
    NamedKey.ARROW_RIGHT: "Right",
    NamedKey.F1: "F1",
    NamedKey.F2: "F2",
    NamedKey.F3: "F3",
    NamedKey.F4: "F4",
    NamedKey.F5: "F5",
    NamedKey.F6: "F6",
    NamedKey.F7: "F7",
    NamedKey.F8: "F8",
    NamedKey.F9: "F9",
    NamedKey.F10: "F10",
    NamedKey.F11: "F11",
    NamedKey.F12: "F12",
    NamedKey.INSERT: "Insert",
    NamedKey.HOME: "Home",
    NamedKey.END: "End",
    NamedKey.PAGE_UP: "PageUp",
    NamedKey.PAGE_DOWN: "PageDown",
    NamedKey.TAB: "Tab",
}

_SPECIAL_TEXT = {
    " ": ("Space", True),
    "<": ("lt", False),
    "\\": ("Bslash", False),
    "|": ("Bar", False),
    "\t": ("Tab", True),
    "\n": ("CR", True),
    "\r": ("CR", True),
}


def control_key_name(key):
    """Name of a key that never produces text, or None."""
    if isinstance(key, NamedKey):
        return _CONTROL_KEYS.get(key)
    return None


def special_key(text):
    """Return ``(escaped_name, use_shift)`` for text needing escaping, or None."""
    return _SPECIAL_TEXT.get(text)


class KeyboardManager:
    """Queues keyboard events per frame and emits key notation commands."""

    def __init__(
        self,
        send: Callable[[KeyboardCommand], None],
        settings: KeyboardSettings | None = None,
        platform: str | None = None,
    ):
        self._platform = sys.platform if platform is None else platform
        self._send = send
        self.settings = settings if settings is not None else KeyboardSettings.for_platform(self._platform)
        self.shift = False
        self.ctrl = False
        self.alt = False
        self.logo = False
        self._prev_dead_key: str | None = None
        self._ignore_input_this_frame = False
        self._queued: list[KeyEvent | str] = []

    @property
    def _macos(self) -> bool:
        return self._platform == "darwin"

    def handle_event(self, event):
        """Record or act on one window event."""
        if isinstance(event, Focused):
            # Key events that arrive in the same frame as a focus change are dropped.
            self._ignore_input_this_frame = True
        elif isinstance(event, KeyboardInput):
            self._queued.append(event.event)
        elif isinstance(event, ImeText):
            self._queued.append(event.text)
        elif isinstance(event, ModifiersChanged):
            modifiers = event.modifiers
            self.shift = ModifiersState.SHIFT in modifiers
            self.ctrl = ModifiersState.CONTROL in modifiers
            self.alt = ModifiersState.ALT in modifiers
            self.logo = ModifiersState.LOGO in modifiers
        elif isinstance(event, MainEventsCleared):
            if not self._should_ignore_input():
                for queued in self._queued:
                    self._process(queued)
            self._ignore_input_this_frame = False
            self._queued.clear()

    def _process(self, queued: KeyEvent | str) -> None:
        next_dead_key = self._prev_dead_key
        if isinstance(queued, str):
            if self._prev_dead_key is None:
                self._send(KeyboardCommand(queued))
        elif queued.state is ElementState.PRESSED:
            keybinding = self._keybinding(queued)
            if keybinding is not None:
                self._send(KeyboardCommand(keybinding))
            next_dead_key = None
        elif queued.logical_key is NamedKey.DEAD:
            next_dead_key = queued.dead_char
        self._prev_dead_key = next_dead_key

    def _should_ignore_input(self) -> bool:
        return self._ignore_input_this_frame or (self.logo and not self.settings.use_logo)

    def _use_alt(self) -> bool:
        if self._macos:
            return self.settings.macos_alt_is_meta and self.alt
        return self.alt

    def _alt_text(self, key_event: KeyEvent) -> str | None:
        if self._macos:
            if self.settings.macos_alt_is_meta:
                return key_event.text
            return key_event.text_with_all_modifiers
        return key_event.text_without_modifiers

    def _keybinding(self, key_event: KeyEvent) -> str | None:
        name = control_key_name(key_event.logical_key)
        if name is not None:
            # A pending dead key is restored as its plain character.
            return (self._prev_dead_key or "") + self._format_special(True, name)

        if self._prev_dead_key is None:
            key_text = key_event.text
        else:
            key_text = key_event.text_with_all_modifiers
        if key_text is None:
            return None

        if self.alt:
            modified = self._alt_text(key_event)
            if modified is not None:
                key_text = modified

        special = special_key(key_text)
        if special is not None:
            escaped, use_shift = special
            return self._format_special(use_shift, escaped)
        return self._format_normal(key_text)

    def _format_special(self, use_shift: bool, text: str) -> str:
        return f"<{self.format_modifier_string(use_shift)}{text}>"

    def _format_normal(self, text: str) -> str:
        if self.ctrl or self._use_alt() or self.logo:
            return self._format_special(all(c.isalpha() for c in text), text)
        return text

    def format_modifier_string(self, use_shift):
        """Modifier prefix in editor notation, such as ``S-C-``."""
        parts = (
            ("S-", self.shift and use_shift),
            ("C-", self.ctrl),
            ("M-", self._use_alt()),
            ("D-", self.logo),
        )
        return "".join(text for text, on in parts if on)