"""Human-friendly labels for model identifiers shown in the model combo box."""

import re
from typing import Optional

# ":latest" or ":(alpha)" at the end of the identifier
_TRAILING_TAG = re.compile(r":\(?(.+?)\)?\Z")


def _capitalize_word(word: str) -> str:
    if not word:
        return word
    if word[0] == "(":
        if len(word) >= 2:
            return "(" + word[1].upper() + word[2:]
        return word
    return word[0].upper() + word[1:]


def parse_text_to_combo_box(text: Optional[str]) -> str:
    """
    Convert a model identifier into a combo box label.

    Hyphens become spaces, a trailing ``:tag`` or ``:(tag)`` becomes
    `` (tag)``, and every word gets its first letter upper-cased. For words
    that open with ``(`` the letter after the parenthesis is upper-cased.
    Only first letters change; the rest of each word is left as-is.

    Example:
        >>> parse_text_to_combo_box("gpt-4o:latest")
        'Gpt 4o (Latest)'
    """
    if not text:
        return ""
    label = text.replace("-", " ")
    label = _TRAILING_TAG.sub(lambda match: f" ({match.group(1)})", label, count=1)
    return " ".join(_capitalize_word(word) for word in label.split(" "))
