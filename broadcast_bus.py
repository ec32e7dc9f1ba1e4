"""
Delivers chat messages to connected clients over Socket.IO.

The bus keeps the set of live connection ids reported by the transport and
emits to each of them individually, so that one dead or misbehaving client
cannot stop delivery to the others.
"""
import logging
from typing import Any

from flask_socketio import SocketIO

from config import EVENT_CHAT_MESSAGE


class BroadcastBus:
    """Fan-out and unicast delivery on top of a SocketIO server."""

    def __init__(self, socketio: SocketIO, namespace: str = "/"):
        self.socketio = socketio
        self.namespace = namespace
        # Insertion-ordered set of live connection ids.
        self._connections: dict[str, None] = {}

    def __len__(self) -> int:
        return len(self._connections)

    def attach(self, connection_id: str) -> None:
        self._connections[connection_id] = None

    def detach(self, connection_id: str) -> None:
        self._connections.pop(connection_id, None)

    def connections(self) -> list[str]:
        return list(self._connections)

    def send_to(self, connection_id: str, event: str, payload: Any) -> bool:
        """
        Emits a single event to one connection.

        Returns:
            True if the emit went through, False if the transport raised.
        """
        try:
            self.socketio.emit(event, payload, to=connection_id, namespace=self.namespace)
            return True
        except Exception as e:
            logging.warning(f"Failed to deliver '{event}' to {connection_id}: {e}")
            return False

    def broadcast_all(self, message: str) -> int:
        """
        Sends a formatted message to every live connection, sender included.

        Returns:
            The number of connections the message was delivered to.
        """
        # Snapshot the recipients so a disconnect during fan-out is harmless.
        recipients = list(self._connections)
        delivered = 0
        for connection_id in recipients:
            if self.send_to(connection_id, EVENT_CHAT_MESSAGE, message):
                delivered += 1
        if delivered < len(recipients):
            logging.warning(f"Broadcast reached {delivered} of {len(recipients)} connections.")
        return delivered
