"""OSC-8 hyperlink utilities for the humanize-url CLI.

Provides a small heuristic to detect whether the active text stream supports
OSC-8 terminal hyperlinks and a helper to render a label as a clickable link
to a URL, falling back to the plain label when unsupported. Pure formatting
only.
"""

import os
import sys
from typing import TextIO


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Heuristically detect whether the target stream supports OSC-8 hyperlinks.

    Args:
        stream: File-like text stream to check; defaults to ``sys.stdout``.

    Returns:
        bool: ``True`` if hyperlinks should be emitted; ``False`` otherwise.

    Notes:
        - Returns ``False`` when the stream is not a TTY (e.g., piped or redirected).
        - Uses a conservative allowlist based on terminal identifiers
          (e.g., VS Code, iTerm2, WezTerm, Kitty, Windows Terminal).
        - This is a best-effort check; some pagers or settings may still strip escapes.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    terminal_program = (os.getenv("TERM_PROGRAM") or "").lower()
    return bool(
        terminal_program
        in {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
        or os.getenv("WT_SESSION")  # Windows Terminal
        or os.getenv("VTE_VERSION")  # GNOME Terminal, Tilix, etc.
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, label: str | None = None) -> str:
    """Return `label` as an OSC-8 hyperlink to `url` when the terminal supports it.

    Args:
        url: Link target.
        label: Visible text; defaults to `url` itself.

    Returns:
        str: The label wrapped in OSC-8 sequences when supported, otherwise the
        plain label.

    Notes:
        - Uses BEL (``\\x07``) as the OSC-8 terminator for broad terminal support.
    """
    text = url if label is None else label
    if not supports_osc8():
        return text
    return f"\x1b]8;;{url}\x07{text}\x1b]8;;\x07"  # OSC 8 ; ; URL BEL
