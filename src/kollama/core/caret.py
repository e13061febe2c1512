"""Caret position helpers for the prompt input."""

from typing import Optional


def caret_is_on_first_line(text: Optional[str], cursor_position: int) -> bool:
    """Return True if the caret sits on the first line of ``text``.

    An empty text or a caret at (or before) offset 0 always counts as the
    first line. Otherwise the caret is on the first line when no newline
    precedes it.
    """
    if not text or cursor_position <= 0:
        return True
    return "\n" not in text[:cursor_position]
