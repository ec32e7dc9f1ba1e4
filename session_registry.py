"""
Tracks the identity bound to each live connection.

The registry is keyed by the Socket.IO connection id. Entries are created on
connect and removed on disconnect; every lookup for an unknown id falls back
to the default identity instead of raising.
"""
import logging
from typing import Any

from config import DEFAULT_NICKNAME
from data_models import ConnectionIdentity


class SessionRegistry:
    """In-memory map of connection id to ConnectionIdentity."""

    def __init__(self):
        self._identities: dict[str, ConnectionIdentity] = {}

    def __len__(self) -> int:
        return len(self._identities)

    def __contains__(self, connection_id: str) -> bool:
        return connection_id in self._identities

    def register(self, connection_id: str, address: str) -> ConnectionIdentity:
        """
        Creates the identity for a new connection with the default nickname.

        Args:
            connection_id: The transport's identifier for the connection.
            address: The already-normalized peer address.

        Returns:
            The newly stored identity.
        """
        identity = ConnectionIdentity(address=address, nickname=DEFAULT_NICKNAME)
        self._identities[connection_id] = identity
        return identity

    def set_nickname(self, connection_id: str, candidate: Any) -> None:
        """
        Replaces the nickname of a registered connection.

        Whitespace is trimmed and an empty result falls back to the default
        nickname. Unknown connection ids are ignored.
        """
        identity = self._identities.get(connection_id)
        if identity is None:
            logging.warning(f"Nickname change for unregistered connection {connection_id} ignored.")
            return
        nickname = "" if candidate is None else str(candidate).strip()
        identity.nickname = nickname or DEFAULT_NICKNAME

    def get(self, connection_id: str) -> ConnectionIdentity:
        """Returns the connection's identity, or the default one if it is not registered."""
        identity = self._identities.get(connection_id)
        if identity is None:
            return ConnectionIdentity()
        return identity

    def remove(self, connection_id: str) -> None:
        """Forgets the connection. Removing an unknown id is a no-op."""
        self._identities.pop(connection_id, None)
