"""Tests for clipboard copy state."""

from unittest.mock import MagicMock, patch

import pytest

from handle_agent.core.clipboard import (
    DEFAULT_RESET_MS,
    CopyState,
    TkClipboard,
    clipboard_available,
)


class RecordingClipboard:
    def __init__(self):
        self.values = []

    def write_text(self, value: str) -> None:
        self.values.append(value)


class FailingClipboard:
    def write_text(self, value: str) -> None:
        raise RuntimeError("clipboard permission denied")


class TestCopyState:
    """Test CopyState."""

    def test_successful_copy(self):
        clipboard = RecordingClipboard()
        state = CopyState(writer=clipboard)

        assert state.copy("@lunarlabsgram") is True
        assert state.copied is True
        assert state.label == "Copied"
        assert clipboard.values == ["@lunarlabsgram"]

    def test_failed_copy_is_swallowed(self):
        state = CopyState(writer=FailingClipboard(), copied=True)

        assert state.copy("@lunarlabsgram") is False
        assert state.copied is False
        assert state.label == "Copy"

    def test_no_writer(self):
        state = CopyState()

        assert state.copy("@lunarlabsgram") is False
        assert state.copied is False

    def test_reset(self):
        state = CopyState(writer=RecordingClipboard())
        state.copy("@x")

        state.reset()

        assert state.copied is False
        assert state.reset_ms == DEFAULT_RESET_MS


class TestTkClipboard:
    """Test TkClipboard against a stand-in root window."""

    def test_writes_through_root(self):
        root = MagicMock()
        clipboard = TkClipboard(root)

        clipboard.write_text("@lunarlabsgram")

        root.clipboard_clear.assert_called_once()
        root.clipboard_append.assert_called_once_with("@lunarlabsgram")
        root.update.assert_called_once()

    def test_close_leaves_borrowed_root_alone(self):
        root = MagicMock()
        clipboard = TkClipboard(root)

        clipboard.close()

        root.destroy.assert_not_called()

    def test_root_errors_surface_to_copy_state(self):
        root = MagicMock()
        root.clipboard_append.side_effect = RuntimeError("no display")
        state = CopyState(writer=TkClipboard(root))

        assert state.copy("@x") is False


class TestClipboardAvailable:
    """Test clipboard_available."""

    def test_unavailable_when_tk_cannot_open(self):
        pytest.importorskip("tkinter")
        with patch("tkinter.Tk", side_effect=RuntimeError("no display name")):
            assert clipboard_available() is False

    def test_available_closes_probe_window(self):
        pytest.importorskip("tkinter")
        root = MagicMock()
        with patch("tkinter.Tk", return_value=root):
            assert clipboard_available() is True

        root.destroy.assert_called_once()
