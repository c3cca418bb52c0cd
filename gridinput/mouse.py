"""Translation of pointer, wheel and touch events into editor mouse commands."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from typing import Callable, Protocol

from gridinput.events import (
    CursorMoved,
    DragCommand,
    ElementState,
    KeyboardInput,
    LineScroll,
    MouseButton,
    MouseButtonCommand,
    MouseInput,
    PixelScroll,
    ScrollCommand,
    Touch,
    TouchPhase,
)
from gridinput.keyboard import KeyboardManager
from gridinput.settings import WindowSettings

_BUTTON_TEXT = {
    MouseButton.LEFT: "left",
    MouseButton.RIGHT: "right",
    MouseButton.MIDDLE: "middle",
}


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in physical pixels."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_wh(cls, width, height):
        return cls(0.0, 0.0, float(width), float(height))

    def contains(self, x, y):
        """True if the point lies inside; right and bottom edges are excluded."""
        return self.left <= x < self.right and self.top <= y < self.bottom


@dataclass(frozen=True)
class WindowDrawDetails:
    """Where one editor grid was drawn."""

    id: int
    region: Rect


@dataclass
class RenderState:
    """What the renderer knows about the drawn grids.

    ``window_regions`` is in draw order: later entries are drawn on top.
    """

    font_dimensions: tuple[int, int]
    window_regions: list[WindowDrawDetails] = field(default_factory=list)


class Window(Protocol):
    inner_size: tuple[int, int]

    def set_cursor_visible(self, visible: bool) -> None: ...


def clamp_position(position, region, font_dimensions):
    """Keep a pixel position inside ``region``, leaving room for one cell."""
    x, y = position
    font_width, font_height = font_dimensions
    return (
        max(min(x, region.right - font_width), region.left),
        max(min(y, region.bottom - font_height), region.top),
    )


def to_grid_coords(position, font_dimensions):
    """Convert a pixel position into a grid cell."""
    x, y = position
    font_width, font_height = font_dimensions
    return (max(int(x), 0) // font_width, max(int(y), 0) // font_height)


def mouse_button_text(button):
    """The editor's name for a button, or None for buttons it does not know."""
    return _BUTTON_TEXT.get(button)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass
class _TouchTrace:
    start_time: float
    start: tuple[float, float]
    last: tuple[float, float]
    left_deadzone_once: bool


class MouseManager:
    """Tracks pointer state and emits mouse, drag and scroll commands."""

    def __init__(
        self,
        send: Callable[[object], None],
        settings: WindowSettings | None = None,
        keyboard: KeyboardManager | None = None,
    ):
        self._send = send
        self.settings = settings if settings is not None else WindowSettings()
        self.keyboard = keyboard if keyboard is not None else KeyboardManager(lambda _command: None)
        self.enabled = True
        self.clock: Callable[[], float] = time.monotonic
        self._dragging: str | None = None
        self._drag_position: tuple[int, int] = (0, 0)
        self._has_moved = False
        self._position: tuple[int, int] = (0, 0)
        self._relative_position: tuple[int, int] = (0, 0)
        self._scroll_x = 0.0
        self._scroll_y = 0.0
        self._touches: dict[tuple[int, int], _TouchTrace] = {}
        self._window_under_mouse: WindowDrawDetails | None = None
        self._mouse_hidden = False

    @property
    def dragging(self) -> str | None:
        return self._dragging

    @property
    def position(self) -> tuple[int, int]:
        return self._position

    def _modifiers(self) -> str:
        return self.keyboard.format_modifier_string(True)

    def _pointer_motion(self, x: int, y: int, render_state: RenderState, window: Window) -> None:
        width, height = window.inner_size
        if x < 0 or x >= width or y < 0 or y >= height:
            return
        position = (float(x), float(y))
        font = render_state.font_dimensions

        if self._dragging is not None:
            if self._window_under_mouse is None:
                raise RuntimeError("dragging without a recorded window under the mouse")
            wanted = self._window_under_mouse.id
            details = next((d for d in render_state.window_regions if d.id == wanted), None)
        else:
            details = None
            for candidate in render_state.window_regions:
                if candidate.region.contains(*position):
                    details = candidate

        bounds = details.region if details is not None else Rect.from_wh(width, height)
        clamped = clamp_position(position, bounds, font)
        self._position = to_grid_coords(clamped, font)

        if details is None:
            return

        relative = (clamped[0] - details.region.left, clamped[1] - details.region.top)
        self._relative_position = to_grid_coords(relative, font)
        previous = self._drag_position
        self._drag_position = self._relative_position
        moved = self._drag_position != previous

        if self._dragging is not None and moved:
            self._send(
                DragCommand(
                    button=self._dragging,
                    grid_id=details.id,
                    position=self._drag_position,
                    modifier_string=self._modifiers(),
                )
            )
        else:
            self._window_under_mouse = details

        self._has_moved = self._dragging is not None and (self._has_moved or moved)

    def _pointer_transition(self, button: MouseButton, down: bool) -> None:
        if not self.enabled:
            return
        text = mouse_button_text(button)
        if text is None:
            return
        if self._window_under_mouse is not None:
            position = self._drag_position if not down and self._has_moved else self._relative_position
            self._send(
                MouseButtonCommand(
                    button=text,
                    action="press" if down else "release",
                    grid_id=self._window_under_mouse.id,
                    position=position,
                    modifier_string=self._modifiers(),
                )
            )
        self._dragging = text if down else None
        if self._dragging is None:
            self._has_moved = False

    def _emit_scroll(self, previous: int, new: int, positive: str, negative: str) -> None:
        if new == previous:
            return
        command = ScrollCommand(
            direction=positive if new > previous else negative,
            grid_id=self._window_under_mouse.id if self._window_under_mouse is not None else 0,
            position=self._drag_position,
            modifier_string=self._modifiers(),
        )
        for _ in range(abs(new - previous)):
            self._send(command)

    def _line_scroll(self, x: float, y: float) -> None:
        if not self.enabled:
            return
        previous_y = int(self._scroll_y)
        self._scroll_y += y
        self._emit_scroll(previous_y, int(self._scroll_y), "up", "down")

        previous_x = int(self._scroll_x)
        self._scroll_x += x
        self._emit_scroll(previous_x, int(self._scroll_x), "right", "left")

    def _pixel_scroll(self, font_dimensions: tuple[int, int], x: float, y: float) -> None:
        font_width, font_height = font_dimensions
        self._line_scroll(x / font_width, y / font_height)

    def _touch(self, event: Touch, render_state: RenderState, window: Window) -> None:
        finger = (event.device_id, event.finger_id)
        location = (event.x, event.y)
        grid_x, grid_y = _round_half_away(event.x), _round_half_away(event.y)

        if event.phase is TouchPhase.STARTED:
            self._touches[finger] = _TouchTrace(
                start_time=self.clock(),
                start=location,
                last=location,
                left_deadzone_once=not self.settings.touch_deadzone >= 0.0,
            )
        elif event.phase is TouchPhase.MOVED:
            dragging_just_now = False
            trace = self._touches.get(finger)
            if trace is not None:
                if not trace.left_deadzone_once:
                    distance = math.hypot(trace.start[0] - event.x, trace.start[1] - event.y)
                    if distance >= self.settings.touch_deadzone:
                        trace.left_deadzone_once = True
                    timeout = max(self.settings.touch_drag_timeout, 0.0)
                    if self._dragging is None and self.clock() - trace.start_time >= timeout:
                        dragging_just_now = True

                if self._dragging is not None or dragging_just_now:
                    self._pointer_motion(grid_x, grid_y, render_state, window)
                elif trace.left_deadzone_once:
                    delta_x = trace.last[0] - event.x
                    delta_y = event.y - trace.last[1]
                    trace.last = location
                    self._pixel_scroll(render_state.font_dimensions, delta_x, delta_y)

            if dragging_just_now:
                self._pointer_motion(grid_x, grid_y, render_state, window)
                self._pointer_transition(MouseButton.LEFT, True)
        else:
            trace = self._touches.pop(finger, None)
            if trace is None:
                return
            if self._dragging is not None:
                self._pointer_transition(MouseButton.LEFT, False)
            if not trace.left_deadzone_once:
                self._pointer_motion(
                    _round_half_away(trace.start[0]),
                    _round_half_away(trace.start[1]),
                    render_state,
                    window,
                )
                self._pointer_transition(MouseButton.LEFT, True)
                self._pointer_transition(MouseButton.LEFT, False)

    def handle_event(self, event, render_state, window):
        """Act on one window event."""
        if isinstance(event, CursorMoved):
            self._pointer_motion(int(event.x), int(event.y), render_state, window)
            if self._mouse_hidden:
                window.set_cursor_visible(True)
                self._mouse_hidden = False
        elif isinstance(event, LineScroll):
            self._line_scroll(event.x, event.y)
        elif isinstance(event, PixelScroll):
            self._pixel_scroll(render_state.font_dimensions, event.x, event.y)
        elif isinstance(event, Touch):
            self._touch(event, render_state, window)
        elif isinstance(event, MouseInput):
            self._pointer_transition(event.button, event.state is ElementState.PRESSED)
        elif isinstance(event, KeyboardInput):
            if (
                event.event.state is ElementState.PRESSED
                and self.settings.hide_mouse_when_typing
                and not self._mouse_hidden
            ):
                window.set_cursor_visible(False)
                self._mouse_hidden = True