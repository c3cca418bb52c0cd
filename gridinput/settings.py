"""Window and keyboard settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class WindowSettings:
    """Settings that govern the window, its refresh and its pointer handling."""

    refresh_rate: int = 60
    refresh_rate_idle: int = 5
    no_idle: bool = False
    transparency: float = 1.0
    scale_factor: float = 1.0
    fullscreen: bool = False
    iso_layout: bool = False
    remember_window_size: bool = True
    remember_window_position: bool = True
    hide_mouse_when_typing: bool = False
    touch_deadzone: float = 6.0
    touch_drag_timeout: float = 0.17
    background_color: str = ""
    confirm_quit: bool = True
    padding_top: int = 0
    padding_left: int = 0
    padding_right: int = 0
    padding_bottom: int = 0


@dataclass
class KeyboardSettings:
    """Settings that govern how keys are translated."""

    use_logo: bool = False
    macos_alt_is_meta: bool = False

    @classmethod
    def for_platform(cls, platform):
        """Defaults for the given ``sys.platform`` value."""
        return cls(use_logo=platform == "darwin")