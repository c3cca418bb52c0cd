# gridinput

Input handling for a graphical front end to a grid-based text editor.
It turns window-system events (key presses, IME text, modifier changes,
pointer motion, clicks, wheel and touch gestures, focus changes, file
drops, closes) into the commands the editor understands: keybindings
such as `<C-a>` or `<S-Space>`, mouse button presses and releases on a
grid cell, drags and scrolls.

You feed it event objects and give it a `send` callable; everything it
produces goes out through that callable.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Modules

- `gridinput.events`: the event types (`KeyboardInput` wrapping a
  `KeyEvent`, `ImeText`, `ModifiersChanged`, `MainEventsCleared`,
  `CursorMoved`, `LineScroll`, `PixelScroll`, `MouseInput`, `Touch`,
  `Focused`, `CloseRequested`, `ScaleFactorChanged`, `DroppedFile`,
  `RedrawRequested`, `Resumed`, `LoopDestroyed`), the enums
  `ElementState`, `NamedKey`, `MouseButton`, `TouchPhase` and the flag
  set `ModifiersState` (with `ModifiersState.from_flags(shift, ctrl, alt,
  logo)`), and the commands sent out: `KeyboardCommand`,
  `MouseButtonCommand`, `DragCommand`, `ScrollCommand`.
- `gridinput.settings`: `WindowSettings` and `KeyboardSettings` with
  their defaults. `KeyboardSettings.for_platform(platform)` turns the
  logo key on by default only for `"darwin"`.
- `gridinput.keyboard`: `KeyboardManager(send, settings=None,
  platform=None)`. It queues key events and IME text during a frame and
  emits them when `MainEventsCleared` arrives, unless focus changed in
  that frame or the logo key is held while `use_logo` is off. It handles
  dead keys and the macOS option-key setting `macos_alt_is_meta`.
  `format_modifier_string(use_shift)` gives prefixes such as `S-C-M-D-`.
  `control_key_name(key)` and `special_key(text)` give the editor's
  names for non-text keys and for characters that need escaping.
- `gridinput.mouse`: `MouseManager(send, settings=None, keyboard=None)`
  maps pointer positions onto the grid of the window under the cursor
  (described by a `RenderState` holding the font cell size and a list of
  `WindowDrawDetails` with their `Rect` regions), tracks drags,
  accumulates fractional scroll amounts, hides the cursor while typing
  when `hide_mouse_when_typing` is set, and turns touch gestures into
  taps, drags or scrolls using `touch_deadzone` and
  `touch_drag_timeout`. Helpers: `clamp_position`, `to_grid_coords`,
  `mouse_button_text`.
- `gridinput.window`: `WindowWrapper(send, window, render_state,
  window_settings=None, keyboard_settings=None, remote=None,
  platform=None)` passes every event to both managers, then sends
  `Quit`, `FocusGained`, `FocusLost`, `FileDrop` or `RedrawScreen` as
  fitting. With `remote` set, a close stops it (`running` becomes false)
  instead of sending `Quit`. It also handles the window commands
  `TitleChanged`, `SetMouseEnabled` and `ListAvailableFonts` (answered
  with `DisplayAvailableFonts` from `font_names`), keeps fullscreen in
  step with the settings, takes padding from the settings with
  `update_padding()`, and sends `Resize` from `handle_new_grid_size(width,
  height)` when the grid is at least 20 by 6 cells and has changed.
  `frame_duration(settings, focused)` and `is_offscreen(...)` help a
  frame loop.

The `window` objects passed in only need `inner_size` and the methods
`set_cursor_visible`, `set_fullscreen` and `set_title`.

## Example

    from gridinput.events import (
        ElementState, KeyboardInput, KeyEvent, MainEventsCleared,
        ModifiersChanged, ModifiersState,
    )
    from gridinput.keyboard import KeyboardManager
    from gridinput.settings import KeyboardSettings

    sent = []
    keyboard = KeyboardManager(sent.append, KeyboardSettings(), "linux")

    keyboard.handle_event(ModifiersChanged(ModifiersState.from_flags(ctrl=True)))
    keyboard.handle_event(KeyboardInput(KeyEvent("a", ElementState.PRESSED, text="a")))
    keyboard.handle_event(MainEventsCleared())

    print(sent)   # [KeyboardCommand(input='<C-a>')]

## What it does not do

The package opens no window, draws nothing, runs no event loop and
talks to no editor process. It does not load fonts, so font names and
cell sizes must be supplied by the caller, and it does not save or
restore window size or position between runs.