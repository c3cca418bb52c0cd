"""Window events delivered to the input managers and the commands they produce."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class ElementState(enum.Enum):
    """Whether a key or button went down or came up."""

    PRESSED = "pressed"
    RELEASED = "released"


class NamedKey(enum.Enum):
    """Logical keys that are not plain characters."""

    BACKSPACE = "Backspace"
    ESCAPE = "Escape"
    DELETE = "Delete"
    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"
    INSERT = "Insert"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    TAB = "Tab"
    ENTER = "Enter"
    SPACE = "Space"
    SHIFT = "Shift"
    CONTROL = "Control"
    ALT = "Alt"
    SUPER = "Super"
    DEAD = "Dead"


class ModifiersState(enum.Flag):
    """The set of modifier keys currently held."""

    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()
    LOGO = enum.auto()

    @classmethod
    def from_flags(cls, shift=False, ctrl=False, alt=False, logo=False):
        """Build a modifier set from individual booleans."""
        state = cls(0)
        for flag, held in ((cls.SHIFT, shift), (cls.CONTROL, ctrl), (cls.ALT, alt), (cls.LOGO, logo)):
            if held:
                state |= flag
        return state


class MouseButton(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    OTHER = "other"


class TouchPhase(enum.Enum):
    STARTED = "started"
    MOVED = "moved"
    ENDED = "ended"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class KeyEvent:
    """A single key transition.

    ``logical_key`` is either a :class:`NamedKey` or the character the key
    produces.  A dead key has ``logical_key`` set to ``NamedKey.DEAD`` and
    the pending accent in ``dead_char``.
    """

    logical_key: NamedKey | str
    state: ElementState = ElementState.PRESSED
    text: str | None = None
    text_with_all_modifiers: str | None = None
    text_without_modifiers: str | None = None
    dead_char: str | None = None


@dataclass(frozen=True)
class Focused:
    focused: bool


@dataclass(frozen=True)
class KeyboardInput:
    event: KeyEvent


@dataclass(frozen=True)
class ImeText:
    text: str


@dataclass(frozen=True)
class ModifiersChanged:
    modifiers: ModifiersState


@dataclass(frozen=True)
class MainEventsCleared:
    """Marks the end of one batch of window events."""


@dataclass(frozen=True)
class CursorMoved:
    x: float
    y: float


@dataclass(frozen=True)
class LineScroll:
    x: float
    y: float


@dataclass(frozen=True)
class PixelScroll:
    x: float
    y: float


@dataclass(frozen=True)
class MouseInput:
    button: MouseButton
    state: ElementState


@dataclass(frozen=True)
class Touch:
    device_id: int
    finger_id: int
    x: float
    y: float
    phase: TouchPhase


@dataclass(frozen=True)
class CloseRequested:
    pass


@dataclass(frozen=True)
class ScaleFactorChanged:
    scale_factor: float


@dataclass(frozen=True)
class DroppedFile:
    path: str


@dataclass(frozen=True)
class RedrawRequested:
    pass


@dataclass(frozen=True)
class Resumed:
    pass


@dataclass(frozen=True)
class LoopDestroyed:
    pass


Event = Union[
    Focused,
    KeyboardInput,
    ImeText,
    ModifiersChanged,
    MainEventsCleared,
    CursorMoved,
    LineScroll,
    PixelScroll,
    MouseInput,
    Touch,
    CloseRequested,
    ScaleFactorChanged,
    DroppedFile,
    RedrawRequested,
    Resumed,
    LoopDestroyed,
]


@dataclass(frozen=True)
class KeyboardCommand:
    """Keys to hand to the editor, in its key notation."""

    input: str


@dataclass(frozen=True)
class MouseButtonCommand:
    button: str
    action: str
    grid_id: int
    position: tuple[int, int]
    modifier_string: str


@dataclass(frozen=True)
class DragCommand:
    button: str
    grid_id: int
    position: tuple[int, int]
    modifier_string: str


@dataclass(frozen=True)
class ScrollCommand:
    direction: str
    grid_id: int
    position: tuple[int, int]
    modifier_string: str