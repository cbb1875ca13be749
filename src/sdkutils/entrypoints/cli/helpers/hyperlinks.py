"""OSC-8 hyperlink utilities for the SDKUTILS CLI.

Detects whether a text stream is likely to render OSC-8 terminal hyperlinks
and renders URLs as clickable links, falling back to plain text.
"""

import os
import sys
from typing import TextIO

OSC8_TERMINALS = frozenset({"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"})


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Heuristically detect whether the target stream supports OSC-8 hyperlinks.

    Args:
        stream: Text stream to probe; defaults to ``sys.stdout``.

    Returns:
        bool: ``False`` for non-TTY streams; otherwise whether the terminal is
        on a conservative allowlist (VS Code, iTerm2, WezTerm, Kitty, Windows
        Terminal, VTE-based and Alacritty/Konsole).
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    terminal_program = (os.getenv("TERM_PROGRAM") or "").lower()
    return bool(
        terminal_program in OSC8_TERMINALS
        or os.getenv("WT_SESSION")  # Windows Terminal
        or os.getenv("VTE_VERSION")  # GNOME Terminal, Tilix, etc.
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, label: str | None = None, stream: TextIO | None = None) -> str:
    """Render ``url`` as an OSC-8 hyperlink when the terminal supports it.

    Args:
        url: Target URL.
        label: Visible text; defaults to the URL itself.
        stream: Stream the link will be written to; defaults to ``sys.stdout``.

    Returns:
        str: The OSC-8 wrapped label, or the plain URL when unsupported.
    """
    if not supports_osc8(stream):
        return url
    return f"\x1b]8;;{url}\x07{label or url}\x1b]8;;\x07"  # OSC 8 ; ; URL BEL
