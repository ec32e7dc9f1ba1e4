import pytest

from message_formatter import coerce_text, format_message, normalize_text
from utils import normalize_address


def test_format_message_keeps_emoji_intact():
    assert format_message("1.2.3.4", "user", "hola 😊") == "[1.2.3.4] [user]:\nhola 😊"


def test_format_message_collapses_crlf():
    assert format_message("1.2.3.4", "user", "a\r\nb") == "[1.2.3.4] [user]:\na\nb"


def test_format_message_is_deterministic():
    # Woman technologist (a ZWJ sequence), a no-break space and a zero-width space.
    text = "\U0001F469\u200d\U0001F4BB one\u00a0two\u200bthree\r\nfour"
    first = format_message("10.0.0.1", "Alice", text)
    second = format_message("10.0.0.1", "Alice", text)
    assert first == second
    assert first == "[10.0.0.1] [Alice]:\n\U0001F469\u200d\U0001F4BB one twothree\nfour"


def test_normalize_text_leaves_surrounding_whitespace_alone():
    assert normalize_text("  padded\n\n") == "  padded\n\n"
    # A lone carriage return is not a CRLF pair.
    assert normalize_text("a\rb") == "a\rb"


@pytest.mark.parametrize(
    "raw, expected",
    [
        (42, "42"),
        (None, "None"),
        (3.5, "3.5"),
        (b"caf\xc3\xa9", "café"),
        (["a", "b"], "['a', 'b']"),
    ],
)
def test_coerce_text_handles_non_string_bodies(raw, expected):
    assert coerce_text(raw) == expected


def test_format_message_accepts_non_string_body():
    assert format_message("1.2.3.4", "Anon", 7) == "[1.2.3.4] [Anon]:\n7"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("::ffff:192.168.1.10", "192.168.1.10"),
        ("192.168.1.10", "192.168.1.10"),
        ("::1", "::1"),
        (None, "unknown"),
        ("", "unknown"),
    ],
)
def test_normalize_address(raw, expected):
    assert normalize_address(raw) == expected
