#!/usr/bin/env python3
"""Handle Agent desktop front end.

A single dark window: type a name, get handle cards for every platform,
remix for a fresh set and copy any handle with one click.
"""

import logging
import tkinter as tk
from pathlib import Path
from typing import Any, Callable, List, Optional

from handle_agent.core.clipboard import DEFAULT_RESET_MS, CopyState, TkClipboard
from handle_agent.core.config import Config, get_config
from handle_agent.core.data_models import PlatformSuggestion, undecorate_handle
from handle_agent.core.logging_setup import configure_from_settings
from handle_agent.core.platforms import platform_names
from handle_agent.core.session import SuggestionSession

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# COLOR PALETTE
# ═══════════════════════════════════════════════════════════════════════════════


class Colors:
    """Night-sky palette."""

    BG_DARKEST = "#0b1220"  # Main background
    BG_DARK = "#111a2e"  # Form panel
    BG_CARD = "#0f172a"  # Platform cards
    BG_INPUT = "#020617"  # Entry background
    BG_HOVER = "#1e293b"

    SKY = "#0ea5e9"  # Primary accent
    SKY_LIGHT = "#38bdf8"
    SKY_PALE = "#bae6fd"

    TEXT_PRIMARY = "#f8fafc"
    TEXT_SECONDARY = "#cbd5e1"
    TEXT_MUTED = "#64748b"

    BORDER = "#1e293b"


FONT = "Helvetica"


# ═══════════════════════════════════════════════════════════════════════════════
# WIDGETS
# ═══════════════════════════════════════════════════════════════════════════════


class PillButton(tk.Label):
    """Flat clickable label with hover colors."""

    def __init__(
        self,
        parent: tk.Widget,
        text: str = "",
        command: Optional[Callable[[], None]] = None,
        filled: bool = True,
        **kwargs: Any,
    ):
        self._bg = Colors.SKY if filled else Colors.BG_HOVER
        self._bg_hover = Colors.SKY_LIGHT if filled else Colors.BORDER
        fg = Colors.BG_INPUT if filled else Colors.TEXT_PRIMARY
        defaults = {
            "text": text,
            "bg": self._bg,
            "fg": fg,
            "font": (FONT, 11, "bold"),
            "padx": 16,
            "pady": 8,
            "cursor": "hand2",
        }
        defaults.update(kwargs)
        super().__init__(parent, **defaults)
        self.command = command

        self.bind("<Enter>", lambda e: self.configure(bg=self._bg_hover))
        self.bind("<Leave>", lambda e: self.configure(bg=self._bg))
        self.bind("<ButtonRelease-1>", self._on_release)

    def _on_release(self, event: Any) -> None:
        if self.command:
            self.command()


class HandleRow(tk.Frame):
    """One handle with its Copy button."""

    def __init__(
        self,
        parent: tk.Widget,
        handle: str,
        copy_value: str,
        state: CopyState,
        **kwargs: Any,
    ):
        super().__init__(parent, bg=Colors.BG_HOVER, **kwargs)
        self.copy_value = copy_value
        self.state = state
        self._reset_job: Optional[str] = None

        tk.Label(
            self,
            text=handle,
            bg=Colors.BG_HOVER,
            fg=Colors.TEXT_PRIMARY,
            font=(FONT, 11, "bold"),
            anchor="w",
        ).pack(side=tk.LEFT, fill=tk.X, expand=True, padx=(12, 6), pady=6)

        self.button = PillButton(
            self, text=state.label, command=self._copy, filled=False, font=(FONT, 8, "bold")
        )
        self.button.pack(side=tk.RIGHT, padx=8, pady=6)

    def _copy(self) -> None:
        self.state.copy(self.copy_value)
        self.button.configure(text=self.state.label)
        if self.state.copied:
            self._cancel_reset()
            self._reset_job = self.after(self.state.reset_ms, self._reset)

    def _reset(self) -> None:
        self._reset_job = None
        self.state.reset()
        self.button.configure(text=self.state.label)

    def _cancel_reset(self) -> None:
        if self._reset_job is not None:
            self.after_cancel(self._reset_job)
            self._reset_job = None

    def destroy(self) -> None:
        # pending timers would fire into a deleted Tcl command
        self._cancel_reset()
        super().destroy()


# ═══════════════════════════════════════════════════════════════════════════════
# APPLICATION
# ═══════════════════════════════════════════════════════════════════════════════


class HandleAgentApp:
    """Main window: name form, agent update line and suggestion cards."""

    CARD_COLUMNS = 3

    def __init__(self, root: tk.Tk, config: Optional[Config] = None):
        self.root = root
        self.config = config or get_config()
        self.root.title("Handle Agent")
        self.root.geometry("1100x760")
        self.root.minsize(720, 560)
        self.root.configure(bg=Colors.BG_DARKEST)

        self.session = SuggestionSession()
        fixed_salt = self.config.get_int("generation.salt")
        if fixed_salt is not None:
            self.session.salt_source = lambda: fixed_salt

        self.clipboard: Optional[TkClipboard] = None
        if self.config.get_bool("clipboard.enabled", True):
            self.clipboard = TkClipboard(root)
        self.copy_decorated = self.config.get_bool("clipboard.decorated", True)
        self.reset_ms = self.config.get_int("clipboard.reset_ms", DEFAULT_RESET_MS)

        self._create_ui()
        self._render()

    def _create_ui(self) -> None:
        self.main = tk.Frame(self.root, bg=Colors.BG_DARKEST)
        self.main.pack(fill=tk.BOTH, expand=True, padx=32, pady=24)

        self._create_header()
        self._create_form()

        self.results = tk.Frame(self.main, bg=Colors.BG_DARKEST)
        self.results.pack(fill=tk.BOTH, expand=True, pady=(20, 0))

    def _create_header(self) -> None:
        header = tk.Frame(self.main, bg=Colors.BG_DARKEST)
        header.pack(fill=tk.X)

        tk.Label(
            header,
            text="HANDLE AGENT",
            bg=Colors.BG_HOVER,
            fg=Colors.TEXT_SECONDARY,
            font=(FONT, 9, "bold"),
            padx=12,
            pady=3,
        ).pack(anchor="w")
        tk.Label(
            header,
            text="Tell me your name and I'll craft handles that land on every platform.",
            bg=Colors.BG_DARKEST,
            fg=Colors.TEXT_PRIMARY,
            font=(FONT, 20, "bold"),
            wraplength=900,
            justify=tk.LEFT,
        ).pack(anchor="w", pady=(10, 4))
        tk.Label(
            header,
            text=f"Drop a name, brand, or vibe. I'll pitch handles tailored for "
            f"{', '.join(platform_names())}.",
            bg=Colors.BG_DARKEST,
            fg=Colors.TEXT_SECONDARY,
            font=(FONT, 11),
            wraplength=900,
            justify=tk.LEFT,
        ).pack(anchor="w")

    def _create_form(self) -> None:
        form = tk.Frame(self.main, bg=Colors.BG_DARK, padx=18, pady=16)
        form.pack(fill=tk.X, pady=(18, 0))

        tk.Label(
            form,
            text="WHAT SHOULD PEOPLE CALL YOU?",
            bg=Colors.BG_DARK,
            fg=Colors.TEXT_SECONDARY,
            font=(FONT, 9, "bold"),
        ).pack(anchor="w")

        row = tk.Frame(form, bg=Colors.BG_DARK)
        row.pack(fill=tk.X, pady=(8, 0))

        self.name_var = tk.StringVar()
        self.name_entry = tk.Entry(
            row,
            textvariable=self.name_var,
            bg=Colors.BG_INPUT,
            fg=Colors.TEXT_PRIMARY,
            insertbackground=Colors.SKY,
            relief="flat",
            font=(FONT, 13),
            highlightthickness=2,
            highlightbackground=Colors.BORDER,
            highlightcolor=Colors.SKY,
        )
        self.name_entry.pack(side=tk.LEFT, fill=tk.X, expand=True, ipady=8)
        self.name_entry.bind("<Return>", lambda e: self._on_submit())
        self.name_entry.focus_set()

        PillButton(row, text="Generate handles", command=self._on_submit).pack(
            side=tk.LEFT, padx=(10, 0)
        )

        self.update_label = tk.Label(
            form,
            text="",
            bg=Colors.BG_DARK,
            fg=Colors.TEXT_SECONDARY,
            font=(FONT, 10),
            anchor="w",
        )
        self.update_label.pack(fill=tk.X, pady=(10, 0))

    # ═══════════════════════════════════════════════════════════════════════════
    # ACTIONS
    # ═══════════════════════════════════════════════════════════════════════════

    def _on_submit(self) -> None:
        self.session.submit(self.name_var.get())
        self._render()

    def _on_remix(self) -> None:
        if self.session.remix():
            self._render()

    def _copy_value(self, handle: str) -> str:
        return handle if self.copy_decorated else undecorate_handle(handle)

    # ═══════════════════════════════════════════════════════════════════════════
    # RENDERING
    # ═══════════════════════════════════════════════════════════════════════════

    def _render(self) -> None:
        for child in self.results.winfo_children():
            child.destroy()

        if self.session.submitted_name:
            self.update_label.configure(
                text=f"Agent update: got it, searching every feed for "
                f"{self.session.submitted_name}. Here's what stands out right now."
            )
        else:
            self.update_label.configure(text="")

        suggestions = self.session.suggestions
        if suggestions:
            self._render_suggestions(suggestions)
        else:
            self._render_empty_state()

    def _render_suggestions(self, suggestions: List[PlatformSuggestion]) -> None:
        bar = tk.Frame(self.results, bg=Colors.BG_DARKEST)
        bar.pack(fill=tk.X, pady=(0, 12))
        tk.Label(
            bar,
            text="Platform-ready suggestions",
            bg=Colors.BG_DARKEST,
            fg=Colors.TEXT_PRIMARY,
            font=(FONT, 16, "bold"),
        ).pack(side=tk.LEFT)
        PillButton(bar, text="Remix handles", command=self._on_remix, filled=False).pack(
            side=tk.RIGHT
        )

        grid = tk.Frame(self.results, bg=Colors.BG_DARKEST)
        grid.pack(fill=tk.BOTH, expand=True)
        for column in range(self.CARD_COLUMNS):
            grid.grid_columnconfigure(column, weight=1, uniform="cards")

        for position, suggestion in enumerate(suggestions):
            card = self._create_card(grid, suggestion)
            card.grid(
                row=position // self.CARD_COLUMNS,
                column=position % self.CARD_COLUMNS,
                sticky="nsew",
                padx=6,
                pady=6,
            )

    def _create_card(self, parent: tk.Widget, suggestion: PlatformSuggestion) -> tk.Frame:
        card = tk.Frame(parent, bg=Colors.BG_CARD, padx=14, pady=12)

        top = tk.Frame(card, bg=Colors.BG_CARD)
        top.pack(fill=tk.X)
        tk.Label(
            top,
            text=suggestion.platform,
            bg=Colors.BG_CARD,
            fg=Colors.TEXT_PRIMARY,
            font=(FONT, 13, "bold"),
        ).pack(side=tk.LEFT)
        tk.Label(
            top,
            text="AGENT PICKS",
            bg=Colors.BG_HOVER,
            fg=Colors.SKY_PALE,
            font=(FONT, 7, "bold"),
            padx=8,
            pady=2,
        ).pack(side=tk.RIGHT)

        tk.Label(
            card,
            text=suggestion.highlight,
            bg=Colors.BG_CARD,
            fg=Colors.TEXT_SECONDARY,
            font=(FONT, 9),
            wraplength=280,
            justify=tk.LEFT,
        ).pack(anchor="w", pady=(2, 10))

        for handle in suggestion.handles:
            state = CopyState(writer=self.clipboard, reset_ms=self.reset_ms)
            HandleRow(card, handle, self._copy_value(handle), state).pack(fill=tk.X, pady=3)

        return card

    def _render_empty_state(self) -> None:
        panel = tk.Frame(self.results, bg=Colors.BG_DARK, padx=24, pady=20)
        panel.pack(fill=tk.X)
        tk.Label(
            panel,
            text="I'm ready when you are.",
            bg=Colors.BG_DARK,
            fg=Colors.TEXT_PRIMARY,
            font=(FONT, 14, "bold"),
        ).pack(anchor="w")
        tk.Label(
            panel,
            text="Drop a name to explore handles across platforms.",
            bg=Colors.BG_DARK,
            fg=Colors.TEXT_SECONDARY,
            font=(FONT, 10),
        ).pack(anchor="w", pady=(6, 0))
        tk.Label(
            panel,
            text="TIP · TRY NICKNAMES, KEYWORDS, OR A MISSION STATEMENT.",
            bg=Colors.BG_DARK,
            fg=Colors.TEXT_MUTED,
            font=(FONT, 8),
        ).pack(anchor="w", pady=(12, 0))


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN ENTRY POINT
# ═══════════════════════════════════════════════════════════════════════════════


def run_app(config: Optional[Config] = None) -> None:
    """Open the main window and block until it is closed."""
    root = tk.Tk()
    HandleAgentApp(root, config)
    root.mainloop()


def main() -> None:
    """Main entry point."""
    config = get_config()
    log_dir = config.get("logging.directory")
    configure_from_settings(
        log_dir=Path(log_dir) if log_dir else None,
        level_name=config.get("logging.level", "WARNING"),
        use_json=config.get_bool("logging.json_format"),
        file_name=config.get("logging.file", "handle_agent.log"),
    )
    run_app(config)


if __name__ == "__main__":
    main()
