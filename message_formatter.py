"""
Turns raw chat input into the canonical display string.

The output shape `[<address>] [<nickname>]:\\n<text>` is what clients render
and what the chat log stores, so it must stay byte-for-byte stable.
"""
from typing import Any

NO_BREAK_SPACE = "\u00a0"
ZERO_WIDTH_SPACE = "\u200b"


def coerce_text(raw_text: Any) -> str:
    """Returns the textual form of whatever a client sent as a message body."""
    if isinstance(raw_text, str):
        return raw_text
    if isinstance(raw_text, (bytes, bytearray)):
        return bytes(raw_text).decode("utf-8", errors="replace")
    return str(raw_text)


def normalize_text(text: str) -> str:
    """
    Collapses CRLF line endings, turns non-breaking spaces into plain spaces
    and drops zero-width spaces. Leading and trailing whitespace is kept.
    """
    return (
        text.replace("\r\n", "\n")
        .replace(NO_BREAK_SPACE, " ")
        .replace(ZERO_WIDTH_SPACE, "")
    )


def format_message(address: str, nickname: str, raw_text: Any) -> str:
    """
    Builds the formatted chat line for a message.

    Args:
        address: The sender's normalized network address.
        nickname: The sender's current nickname.
        raw_text: The untrusted message body, not necessarily a string.

    Returns:
        The formatted message, e.g. '[1.2.3.4] [user]:\\nhola'.
    """
    body = normalize_text(coerce_text(raw_text))
    return f"[{address}] [{nickname}]:\n{body}"
