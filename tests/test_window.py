import pytest

from gridinput.events import (
    CloseRequested,
    CursorMoved,
    DroppedFile,
    ElementState,
    Focused,
    KeyboardCommand,
    KeyboardInput,
    KeyEvent,
    LoopDestroyed,
    MainEventsCleared,
    MouseButton,
    MouseButtonCommand,
    MouseInput,
    Resumed,
    ScaleFactorChanged,
)
from gridinput.mouse import Rect, RenderState, WindowDrawDetails
from gridinput.settings import WindowSettings
from gridinput.window import (
    MIN_WINDOW_HEIGHT,
    MIN_WINDOW_WIDTH,
    DisplayAvailableFonts,
    FileDrop,
    FocusedState,
    FocusGained,
    FocusLost,
    ListAvailableFonts,
    Quit,
    RedrawScreen,
    Resize,
    SetMouseEnabled,
    TitleChanged,
    WindowPadding,
    WindowWrapper,
    frame_duration,
    is_offscreen,
)


class FakeWindow:
    def __init__(self, size=(800, 600)):
        self.inner_size = size
        self.titles = []
        self.fullscreen_calls = []
        self.cursor_visible = []

    def set_cursor_visible(self, visible):
        self.cursor_visible.append(visible)

    def set_fullscreen(self, fullscreen):
        self.fullscreen_calls.append(fullscreen)

    def set_title(self, title):
        self.titles.append(title)


def make_wrapper(remote=None, settings=None, regions=None):
    sent = []
    window = FakeWindow()
    state = RenderState(font_dimensions=(10, 20), window_regions=regions or [])
    wrapper = WindowWrapper(sent.append, window, state, settings, None, remote, "linux")
    return wrapper, window, sent


def test_title_changed_sets_window_title():
    wrapper, window, _ = make_wrapper()
    wrapper.handle_window_command(TitleChanged("notes.txt"))
    assert wrapper.title == "notes.txt"
    assert window.titles == ["notes.txt"]


def test_initial_title():
    wrapper, _, _ = make_wrapper()
    assert wrapper.title == "Neovide"


def test_set_mouse_enabled():
    wrapper, _, _ = make_wrapper()
    wrapper.handle_window_command(SetMouseEnabled(False))
    assert wrapper.mouse.enabled is False


def test_list_fonts_sends_names():
    wrapper, _, sent = make_wrapper()
    wrapper.font_names = ["Mono", "Sans"]
    wrapper.handle_window_command(ListAvailableFonts())
    assert sent == [DisplayAvailableFonts(("Mono", "Sans"))]


def test_unknown_command_raises():
    wrapper, _, _ = make_wrapper()
    with pytest.raises(TypeError):
        wrapper.handle_window_command("bogus")


def test_toggle_fullscreen_flips_state():
    wrapper, window, _ = make_wrapper()
    wrapper.toggle_fullscreen()
    wrapper.toggle_fullscreen()
    assert window.fullscreen_calls == [True, False]
    assert wrapper.fullscreen is False


def test_synchronize_settings_follows_setting():
    settings = WindowSettings(fullscreen=True)
    wrapper, window, _ = make_wrapper(settings=settings)
    wrapper.synchronize_settings()
    wrapper.synchronize_settings()
    assert window.fullscreen_calls == [True]
    assert wrapper.fullscreen is True


@pytest.mark.parametrize("event", [CloseRequested(), LoopDestroyed()])
def test_quit_locally_sends_quit(event):
    wrapper, _, sent = make_wrapper()
    wrapper.handle_event(event)
    assert sent == [Quit()]
    assert wrapper.running is True


def test_quit_remote_stops_running():
    wrapper, _, sent = make_wrapper(remote="localhost:6666")
    wrapper.handle_event(CloseRequested())
    assert sent == []
    assert wrapper.running is False
    assert wrapper.quit_reason == "window closed"


def test_focus_events():
    wrapper, _, sent = make_wrapper()
    wrapper.handle_event(Focused(False))
    assert wrapper.focused is FocusedState.UNFOCUSED_NOT_DRAWN
    wrapper.handle_event(Focused(True))
    assert wrapper.focused is FocusedState.FOCUSED
    assert sent == [FocusLost(), FocusGained()]
    assert wrapper.redraw_requested is True


def test_resumed_and_scale_factor_request_redraw_screen():
    wrapper, _, sent = make_wrapper()
    wrapper.handle_event(Resumed())
    wrapper.handle_event(ScaleFactorChanged(2.0))
    assert sent == [RedrawScreen(), RedrawScreen()]
    assert wrapper.scale_factor == 2.0


def test_dropped_file():
    wrapper, _, sent = make_wrapper()
    wrapper.handle_event(DroppedFile("/tmp/a.txt"))
    assert sent == [FileDrop("/tmp/a.txt")]


def test_main_events_cleared_does_not_request_redraw():
    wrapper, _, _ = make_wrapper()
    wrapper.handle_event(MainEventsCleared())
    assert wrapper.redraw_requested is False


def test_key_events_reach_keyboard_manager():
    wrapper, _, sent = make_wrapper()
    wrapper.handle_event(KeyboardInput(KeyEvent("a", ElementState.PRESSED, text="a")))
    wrapper.handle_event(MainEventsCleared())
    assert sent == [KeyboardCommand("a")]
    assert wrapper.redraw_requested is True


def test_mouse_events_reach_mouse_manager():
    regions = [WindowDrawDetails(id=3, region=Rect(0.0, 0.0, 800.0, 600.0))]
    wrapper, _, sent = make_wrapper(regions=regions)
    wrapper.handle_event(CursorMoved(25.0, 45.0))
    wrapper.handle_event(MouseInput(MouseButton.LEFT, ElementState.PRESSED))
    assert len(sent) == 1
    command = sent[0]
    assert isinstance(command, MouseButtonCommand)
    assert (command.button, command.action, command.grid_id) == ("left", "press", 3)
    assert command.position == (25 // 10, 45 // 20)


def test_new_grid_size_sends_resize_once():
    wrapper, _, sent = make_wrapper()
    grid = wrapper.handle_new_grid_size(80 * 10, 24 * 20)
    assert grid == (80, 24)
    assert wrapper.handle_new_grid_size(80 * 10 + 5, 24 * 20 + 5) is None
    assert sent == [Resize(width=80, height=24)]
    assert wrapper.saved_grid_size == (80, 24)


def test_new_grid_size_below_minimum_ignored():
    wrapper, _, sent = make_wrapper()
    result = wrapper.handle_new_grid_size((MIN_WINDOW_WIDTH - 1) * 10, 100 * 20)
    assert result is None
    result = wrapper.handle_new_grid_size(100 * 10, (MIN_WINDOW_HEIGHT - 1) * 20)
    assert result is None
    assert sent == []
    assert wrapper.saved_grid_size is None


def test_padding_reduces_grid():
    settings = WindowSettings(padding_left=10, padding_right=10, padding_top=20)
    wrapper, _, sent = make_wrapper(settings=settings)
    assert wrapper.update_padding() is True
    assert wrapper.padding == WindowPadding(top=20, left=10, right=10, bottom=0)
    assert wrapper.update_padding() is False
    wrapper.handle_new_grid_size(82 * 10, 25 * 20)
    assert sent == [Resize(width=80, height=24)]


def test_is_offscreen():
    monitor = ((0, 0), (1920, 1080))
    assert is_offscreen((100, 100), (800, 600), *monitor) is False
    assert is_offscreen((-900, 100), (800, 600), *monitor) is True
    assert is_offscreen((2000, 100), (800, 600), *monitor) is True
    assert is_offscreen((100, 1100), (800, 600), *monitor) is True


def test_frame_duration_focus_and_clamp():
    settings = WindowSettings()
    focused = frame_duration(settings, FocusedState.FOCUSED)
    not_drawn = frame_duration(settings, FocusedState.UNFOCUSED_NOT_DRAWN)
    idle = frame_duration(settings, FocusedState.UNFOCUSED)
    assert focused == not_drawn
    assert idle > focused
    assert frame_duration(WindowSettings(refresh_rate=0), FocusedState.FOCUSED) == 1.0