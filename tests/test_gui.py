"""Tests for the copy-button timer in the desktop front end."""

from unittest.mock import MagicMock

import pytest

from handle_agent.core.clipboard import CopyState

pytest.importorskip("tkinter")

from handle_agent.gui.main_window import HandleRow  # noqa: E402


class RecordingClipboard:
    def __init__(self):
        self.values = []

    def write_text(self, value: str) -> None:
        self.values.append(value)


class FailingClipboard:
    def write_text(self, value: str) -> None:
        raise RuntimeError("no display")


def _row(writer, reset_ms=1500):
    """A stand-in widget carrying the attributes HandleRow methods use."""
    row = MagicMock()
    row.copy_value = "@lunarlabspixels"
    row.state = CopyState(writer=writer, reset_ms=reset_ms)
    row._reset_job = None
    row.after.return_value = "after#1"
    return row


class TestHandleRowTimer:
    """Test scheduling and cancelling the copy reset timer."""

    def test_copy_schedules_reset(self):
        clipboard = RecordingClipboard()
        row = _row(clipboard, reset_ms=200)

        HandleRow._copy(row)

        assert clipboard.values == ["@lunarlabspixels"]
        row.button.configure.assert_called_with(text="Copied")
        row.after.assert_called_once_with(200, row._reset)
        assert row._reset_job == "after#1"

    def test_failed_copy_schedules_nothing(self):
        row = _row(FailingClipboard())

        HandleRow._copy(row)

        row.after.assert_not_called()
        row.button.configure.assert_called_with(text="Copy")
        assert row._reset_job is None

    def test_cancel_reset_drops_pending_timer(self):
        row = _row(RecordingClipboard())
        row._reset_job = "after#7"

        HandleRow._cancel_reset(row)

        row.after_cancel.assert_called_once_with("after#7")
        assert row._reset_job is None

    def test_cancel_reset_without_timer(self):
        row = _row(RecordingClipboard())

        HandleRow._cancel_reset(row)

        row.after_cancel.assert_not_called()

    def test_reset_restores_label(self):
        row = _row(RecordingClipboard())
        row.state.copy("@x")
        row._reset_job = "after#1"

        HandleRow._reset(row)

        assert row.state.copied is False
        assert row._reset_job is None
        row.button.configure.assert_called_with(text="Copy")
