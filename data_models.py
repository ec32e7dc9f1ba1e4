"""
Defines the core data structures for the chat server using Pydantic.

These models describe who is behind each connection and what travels over the
wire, so that the registry, the session core and the event handlers agree on a
single, validated shape for every piece of data they exchange.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from config import DEFAULT_NICKNAME, UNKNOWN_ADDRESS


class ConnectionState(str, Enum):
    """Lifecycle of a single client connection."""

    CONNECTED = "connected"
    # Set once the client has chosen a nickname. Purely cosmetic: an
    # unidentified connection may still send messages.
    IDENTIFIED = "identified"
    DISCONNECTED = "disconnected"


class ConnectionIdentity(BaseModel):
    """
    The (address, nickname) pair bound to a live connection.

    The address never changes after registration; the nickname is replaced
    each time the client sends a 'set nickname' event.
    """

    # The peer's network address with any IPv4-mapped-IPv6 prefix removed.
    address: str = UNKNOWN_ADDRESS
    # The display name used in formatted messages.
    nickname: str = DEFAULT_NICKNAME


class ChatHistoryPayload(BaseModel):
    """
    The catch-up payload sent to a client right after it connects.

    Serialized with `by_alias=True` so the wire key is `sessionId`.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # Identifies the server incarnation that produced this history.
    session_id: str = Field(..., alias="sessionId")
    # Every formatted message accepted so far, oldest first.
    history: list[str] = Field(default_factory=list)
