"""The window wrapper: routes events to the input managers and tracks window state."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import Callable, Protocol

from gridinput.events import (
    CloseRequested,
    CursorMoved,
    DroppedFile,
    Focused,
    ImeText,
    KeyboardInput,
    LineScroll,
    LoopDestroyed,
    ModifiersChanged,
    MouseInput,
    PixelScroll,
    RedrawRequested,
    Resumed,
    ScaleFactorChanged,
    Touch,
)
from gridinput.keyboard import KeyboardManager
from gridinput.mouse import MouseManager, RenderState
from gridinput.settings import KeyboardSettings, WindowSettings

MIN_WINDOW_WIDTH = 20
MIN_WINDOW_HEIGHT = 6


@dataclass(frozen=True)
class TitleChanged:
    title: str


@dataclass(frozen=True)
class SetMouseEnabled:
    enabled: bool


@dataclass(frozen=True)
class ListAvailableFonts:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class FocusLost:
    pass


@dataclass(frozen=True)
class FocusGained:
    pass


@dataclass(frozen=True)
class FileDrop:
    path: str


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class DisplayAvailableFonts:
    fonts: tuple[str, ...]


@dataclass(frozen=True)
class RedrawScreen:
    pass


class FocusedState(enum.Enum):
    FOCUSED = "focused"
    UNFOCUSED_NOT_DRAWN = "unfocused_not_drawn"
    UNFOCUSED = "unfocused"


@dataclass(frozen=True)
class WindowPadding:
    top: int = 0
    left: int = 0
    right: int = 0
    bottom: int = 0


class Window(Protocol):
    inner_size: tuple[int, int]

    def set_cursor_visible(self, visible: bool) -> None: ...

    def set_fullscreen(self, fullscreen: bool) -> None: ...

    def set_title(self, title: str) -> None: ...


# Window events that only ask for another frame to be drawn.
_REDRAW_EVENTS = (
    KeyboardInput,
    ImeText,
    ModifiersChanged,
    CursorMoved,
    LineScroll,
    PixelScroll,
    MouseInput,
    Touch,
    RedrawRequested,
)


def is_offscreen(window_position, window_size, monitor_position, monitor_size):
    """True if the window lies wholly outside the monitor."""
    wx, wy = window_position
    ww, wh = window_size
    mx, my = monitor_position
    mw, mh = monitor_size
    return wx + ww < mx or wy + wh < my or wx > mx + mw or wy > my + mh


def frame_duration(settings, focused):
    """Seconds one frame should take for the given focus state."""
    if focused is FocusedState.UNFOCUSED:
        rate = float(settings.refresh_rate_idle)
    else:
        rate = float(settings.refresh_rate)
    return 1.0 / max(rate, 1.0)


class WindowWrapper:
    """Owns the input managers and reacts to window events and commands."""

    def __init__(
        self,
        send: Callable[[object], None],
        window: Window,
        render_state: RenderState,
        window_settings: WindowSettings | None = None,
        keyboard_settings: KeyboardSettings | None = None,
        remote: str | None = None,
        platform: str | None = None,
    ):
        platform = sys.platform if platform is None else platform
        self._send = send
        self.window = window
        self.render_state = render_state
        self.window_settings = window_settings if window_settings is not None else WindowSettings()
        self.remote = remote
        self.keyboard = KeyboardManager(send, keyboard_settings, platform)
        self.mouse = MouseManager(send, self.window_settings, self.keyboard)
        self.title = "Neovide"
        self.fullscreen = False
        self.font_names: list[str] = []
        self.padding = WindowPadding()
        self.saved_grid_size: tuple[int, int] | None = None
        self.scale_factor = 1.0
        self.focused = FocusedState.FOCUSED
        self.redraw_requested = False
        self.running = True
        self.quit_reason: str | None = None

    def toggle_fullscreen(self):
        """Switch between windowed and borderless fullscreen."""
        self.window.set_fullscreen(not self.fullscreen)
        self.fullscreen = not self.fullscreen

    def synchronize_settings(self):
        """Bring the fullscreen state in line with the settings."""
        if self.fullscreen != self.window_settings.fullscreen:
            self.toggle_fullscreen()

    def handle_window_command(self, command):
        """Act on a command addressed to the window."""
        if isinstance(command, TitleChanged):
            self.title = command.title
            self.window.set_title(self.title)
        elif isinstance(command, SetMouseEnabled):
            self.mouse.enabled = command.enabled
        elif isinstance(command, ListAvailableFonts):
            self._send(DisplayAvailableFonts(tuple(self.font_names)))
        else:
            raise TypeError(f"unknown window command: {command!r}")

    def _handle_quit(self) -> None:
        if self.remote is None:
            self._send(Quit())
        else:
            self.running = False
            self.quit_reason = "window closed"

    def handle_event(self, event):
        """Pass an event to the input managers, then act on it."""
        self.keyboard.handle_event(event)
        self.mouse.handle_event(event, self.render_state, self.window)

        if isinstance(event, (LoopDestroyed, CloseRequested)):
            self._handle_quit()
        elif isinstance(event, Resumed):
            self._send(RedrawScreen())
        elif isinstance(event, ScaleFactorChanged):
            self.scale_factor = event.scale_factor
            self._send(RedrawScreen())
        elif isinstance(event, DroppedFile):
            self._send(FileDrop(event.path))
        elif isinstance(event, Focused):
            if event.focused:
                self.focused = FocusedState.FOCUSED
                self._send(FocusGained())
                self.redraw_requested = True
            else:
                self.focused = FocusedState.UNFOCUSED_NOT_DRAWN
                self._send(FocusLost())
        elif isinstance(event, _REDRAW_EVENTS):
            self.redraw_requested = True

    def handle_new_grid_size(self, width, height):
        """Send a resize for a new window size in pixels; return the grid size sent."""
        content_width = max(width - self.padding.left - self.padding.right, 0)
        content_height = max(height - self.padding.top - self.padding.bottom, 0)
        font_width, font_height = self.render_state.font_dimensions
        grid = (content_width // font_width, content_height // font_height)

        if grid[0] < MIN_WINDOW_WIDTH or grid[1] < MIN_WINDOW_HEIGHT:
            return None
        if grid == self.saved_grid_size:
            return None
        self.saved_grid_size = grid
        self._send(Resize(width=grid[0], height=grid[1]))
        return grid

    def update_padding(self):
        """Take the padding from the settings; return whether it changed."""
        settings = self.window_settings
        padding = WindowPadding(
            top=settings.padding_top,
            left=settings.padding_left,
            right=settings.padding_right,
            bottom=settings.padding_bottom,
        )
        if padding == self.padding:
            return False
        self.padding = padding
        return True