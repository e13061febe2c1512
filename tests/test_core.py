"""Tests for core text and URL utilities."""

import pytest


@pytest.mark.parametrize("text,position", [
    ("hello\nworld", 0),
    ("hello\nworld", -3),
    ("", 5),
    (None, 2),
    ("single line", 6),
    ("first\nsecond", 5),
])
def test_caret_on_first_line(text, position):
    """Caret before any newline, at offset <= 0, or in empty text is on the first line."""
    from kollama.core import caret_is_on_first_line

    assert caret_is_on_first_line(text, position) is True


def test_caret_after_newline():
    """Caret past a newline is not on the first line."""
    from kollama.core import caret_is_on_first_line

    assert caret_is_on_first_line("first\nsecond", 6) is False
    assert caret_is_on_first_line("a\nb\nc", 100) is False


def test_get_server_url_defaults():
    """Missing base uses the local Ollama server."""
    from kollama.core import get_server_url, DEFAULT_SERVER_URL

    assert DEFAULT_SERVER_URL == "http://127.0.0.1:11434"
    assert get_server_url(None, "tags") == "http://127.0.0.1:11434/api/tags"
    assert get_server_url("", None) == "http://127.0.0.1:11434/api/"


def test_get_server_url_trims_slashes():
    """Exactly one slash separates base, api prefix and endpoint."""
    from kollama.core import get_server_url

    assert get_server_url("http://host:1/", "/tags") == "http://host:1/api/tags"
    assert get_server_url("http://host:1///", "//chat") == "http://host:1/api/chat"


def test_build_server_url():
    """build_server_url only adds a separator for a non-empty endpoint."""
    from kollama.core import build_server_url

    assert build_server_url("http://host/", "") == "http://host"
    assert build_server_url(None, "ping") == "http://127.0.0.1:11434/ping"
    assert build_server_url("http://host//", "/api/tags") == "http://host/api/tags"
    assert build_server_url("http://host", "///") == "http://host"


@pytest.mark.parametrize("raw,label", [
    ("gpt-4o:latest", "Gpt 4o (Latest)"),
    ("llama3.2:(alpha)", "Llama3.2 (Alpha)"),
    ("mistral", "Mistral"),
    ("qwen2.5-coder:7b", "Qwen2.5 Coder (7b)"),
    ("deepSeek-r1", "DeepSeek R1"),
    ("a--b", "A  B"),
    ("model:", "Model:"),
    ("", ""),
    (None, ""),
])
def test_parse_text_to_combo_box(raw, label):
    """Model identifiers become capitalized labels with the tag in parentheses."""
    from kollama.core import parse_text_to_combo_box

    assert parse_text_to_combo_box(raw) == label


def test_parse_text_keeps_rest_of_word():
    """Only the first letter is changed; the rest of each word is untouched."""
    from kollama.core import parse_text_to_combo_box

    assert parse_text_to_combo_box("phi3:mini-INSTRUCT") == "Phi3 (Mini INSTRUCT)"
    assert parse_text_to_combo_box("a ( b") == "A ( B"


def test_parse_text_is_stable():
    """Repeated calls give identical output."""
    from kollama.core import parse_text_to_combo_box

    assert parse_text_to_combo_box("gpt-4o:latest") == parse_text_to_combo_box("gpt-4o:latest")


def test_trailing_slashes_only_trimmed_at_end():
    """Slashes followed by a final newline are not trailing slashes."""
    from kollama.core import build_server_url, get_server_url

    assert build_server_url("http://host/\n", "x") == "http://host/\n/x"
    assert get_server_url("http://host/\n", "tags") == "http://host/\n/api/tags"
