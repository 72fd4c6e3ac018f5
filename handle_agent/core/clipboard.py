"""Clipboard access for copy buttons.

Copying is a best-effort side effect: a failed write only resets the
button's "copied" flag and never touches the suggestion state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

logger = logging.getLogger(__name__)

DEFAULT_RESET_MS = 1500


class ClipboardWriter(Protocol):
    """Anything that can put text on a clipboard.  Raises on failure."""

    def write_text(self, value: str) -> None:
        ...


class TkClipboard:
    """Clipboard writer backed by a Tk root window.

    Uses ``root`` when given (the desktop front end passes its own window);
    otherwise a hidden root is created on first use.
    """

    def __init__(self, root: Optional[Any] = None):
        self._root = root
        self._owns_root = root is None

    def _get_root(self) -> Any:
        if self._root is None:
            import tkinter as tk

            self._root = tk.Tk()
            self._root.withdraw()
        return self._root

    def write_text(self, value: str) -> None:
        root = self._get_root()
        root.clipboard_clear()
        root.clipboard_append(value)
        # flush to the window system before a hidden root goes away
        root.update()

    def close(self) -> None:
        if self._owns_root and self._root is not None:
            self._root.destroy()
            self._root = None


def clipboard_available() -> bool:
    """Report whether a Tk clipboard can be opened in this environment."""
    try:
        import tkinter as tk

        root = tk.Tk()
    except Exception as e:
        logger.debug(f"Clipboard unavailable: {e}")
        return False
    root.destroy()
    return True


@dataclass
class CopyState:
    """State of one copy button.

    ``copied`` is set after a successful write and cleared by ``reset`` or by
    a failed write.
    """

    writer: Optional[ClipboardWriter] = None
    copied: bool = False
    reset_ms: int = field(default=DEFAULT_RESET_MS)

    def copy(self, value: str) -> bool:
        """Write ``value`` to the clipboard.  Returns whether it succeeded."""
        if self.writer is None:
            return False

        try:
            self.writer.write_text(value)
        except Exception as e:
            logger.debug(f"Clipboard write failed for {value!r}: {e}")
            self.copied = False
            return False

        self.copied = True
        return True

    def reset(self) -> None:
        self.copied = False

    @property
    def label(self) -> str:
        return "Copied" if self.copied else "Copy"
