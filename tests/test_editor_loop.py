"""Test the editor main loop with a mocked terminal."""

import os
import tempfile
from unittest.mock import MagicMock, Mock

import pytest
from lined.config import Settings
from lined.editor import Editor
from lined.keyboard import KeyboardHandler
from lined.state import Mode


class FakeTerminal:
    """Terminal stand-in that replays key tokens and records frames."""

    def __init__(self, keys, size=(10, 40)):
        self.keys = list(keys)
        self.size = size
        self.term = MagicMock()
        self.frames = []
        self.errors = []
        self.setup_called = False
        self.cleanup_called = False
        self.tty_settings = object()
        self.restored = []

    def setup(self):
        self.setup_called = True

    def cleanup(self):
        self.cleanup_called = True

    def disable_signal_keys(self):
        return self.tty_settings

    def restore_tty(self, old_settings):
        self.restored.append(old_settings)

    def get_key(self, timeout=None):
        if not self.keys:
            raise AssertionError("editor kept reading after the keys ran out")
        key = self.keys.pop(0)
        if isinstance(key, type) and issubclass(key, BaseException):
            raise key()
        return key

    def draw_frame(self, lines, status, cursor_y, cursor_x):
        self.frames.append((list(lines), status, cursor_y, cursor_x))

    def draw_error_message(self, message1, message2=""):
        self.errors.append((message1, message2))


@pytest.fixture
def temp_path():
    with tempfile.TemporaryDirectory() as tmp:
        yield os.path.join(tmp, "doc.txt")


def run_editor(path, keys, settings=None, size=(10, 40)):
    terminal = FakeTerminal(keys, size=size)
    editor = Editor(path, settings=settings, terminal=terminal)
    editor.load_file(path)
    editor.run()
    return editor, terminal


def read(path):
    with open(path, 'rb') as f:
        return f.read()


def test_quit_saves_and_restores_terminal(temp_path):
    editor, terminal = run_editor(temp_path, ["q"])
    assert terminal.setup_called and terminal.cleanup_called
    terminal.term.cbreak.assert_called_once()
    assert editor.saved is True
    assert read(temp_path) == b"\n"


def test_frame_drawn_before_each_key(temp_path):
    editor, terminal = run_editor(temp_path, ["i", "a", "<ESC>", "q"])
    assert len(terminal.frames) == 4
    lines, status, y, x = terminal.frames[-1]
    assert lines == ["a"]
    assert status.endswith("-- NORMAL")
    assert (y, x) == (0, 1)
    assert terminal.frames[1][1].endswith("-- INSERT")


def test_q_is_typed_in_insert_mode(temp_path):
    editor, terminal = run_editor(temp_path, ["i", "q", "<ESC>", "q"])
    assert read(temp_path) == b"q\n"


def test_legacy_quit_fires_in_insert_mode(temp_path):
    editor, terminal = run_editor(temp_path, ["i", "a", "q"], settings=Settings(legacy_quit=True))
    assert editor.state.mode == Mode.INSERT
    assert read(temp_path) == b"a\n"


def test_small_terminal_shows_error(temp_path):
    editor, terminal = run_editor(temp_path, ["q"], size=(1, 40))
    assert terminal.frames == []
    assert len(terminal.errors) == 1
    assert "too small" in terminal.errors[0][0]


def test_cleanup_runs_when_loop_raises(temp_path):
    terminal = FakeTerminal([])
    editor = Editor(temp_path, terminal=terminal)
    editor.keyboard = Mock(spec=KeyboardHandler)
    editor.keyboard.get_key_event.side_effect = RuntimeError("boom")
    with pytest.raises(RuntimeError):
        editor.run()
    assert terminal.cleanup_called
    # No save on abnormal exit
    assert not os.path.exists(temp_path)
    assert editor.saved is None


def test_failed_save_is_reported(temp_path):
    path = os.path.join(temp_path, "nested", "doc.txt")
    editor, terminal = run_editor(path, ["q"])
    assert editor.saved is False


def test_save_file_without_filename():
    editor = Editor(terminal=FakeTerminal([]))
    assert editor.save_file() is False


def test_ctrl_c_key_is_ignored_and_edits_are_saved(temp_path):
    editor, terminal = run_editor(temp_path, ["i", "a", "<Ctrl-c>", "b", "<ESC>", "<Ctrl-c>", "q"])
    assert editor.saved is True
    assert read(temp_path) == b"ab\n"


def test_keyboard_interrupt_does_not_end_session(temp_path):
    editor, terminal = run_editor(temp_path, ["i", "a", "b", KeyboardInterrupt, "<ESC>", "q"])
    assert editor.state.quit_requested
    assert read(temp_path) == b"ab\n"
    assert terminal.cleanup_called


def test_tty_flags_restored_after_session(temp_path):
    editor, terminal = run_editor(temp_path, ["q"])
    assert terminal.restored == [terminal.tty_settings]


def test_tty_flags_restored_when_loop_raises(temp_path):
    terminal = FakeTerminal([])
    editor = Editor(temp_path, terminal=terminal)
    editor.keyboard = Mock(spec=KeyboardHandler)
    editor.keyboard.get_key_event.side_effect = RuntimeError("boom")
    with pytest.raises(RuntimeError):
        editor.run()
    assert terminal.restored == [terminal.tty_settings]
