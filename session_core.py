"""
Orchestrates the chat session.

The SessionCore receives transport events (connect, disconnect, nickname
changes and chat messages) and drives the registry, history log, broadcast
bus and log sink in the order the chat protocol requires. It holds no
transport objects of its own: connections are referenced only by id, which
keeps the core testable without a live Socket.IO server.

Every handler runs to completion before the next event is processed, so the
history append and the broadcast for one message always happen before any
other message is handled. Only the log write is deferred.
"""
import logging
from typing import Any, Optional

from config import EVENT_CHAT_HISTORY
from data_models import ChatHistoryPayload, ConnectionIdentity, ConnectionState
from message_formatter import format_message
from session_models import SessionContext
from utils import normalize_address


class SessionCore:
    """Event handlers for the single, process-wide chat session."""

    def __init__(self, context: SessionContext):
        self.context = context
        # Lifecycle state of every live connection. Entries are dropped on
        # disconnect, which makes DISCONNECTED terminal.
        self._states: dict[str, ConnectionState] = {}

    def state_of(self, connection_id: str) -> ConnectionState:
        return self._states.get(connection_id, ConnectionState.DISCONNECTED)

    def _is_live(self, connection_id: str, event: str) -> bool:
        if connection_id in self._states:
            return True
        logging.warning(f"Dropping '{event}' from closed or unknown connection {connection_id}.")
        return False

    def on_connect(self, connection_id: str, raw_address: Optional[str]) -> ConnectionIdentity:
        """
        Registers a new connection and replays the history to it alone.

        Args:
            connection_id: The transport's identifier for the connection.
            raw_address: The peer address as reported by the transport.

        Returns:
            The identity created for the connection.
        """
        ctx = self.context
        if connection_id in self._states:
            logging.warning(f"Connection {connection_id} connected twice; keeping its identity.")
            return ctx.registry.get(connection_id)

        identity = ctx.registry.register(connection_id, normalize_address(raw_address))
        self._states[connection_id] = ConnectionState.CONNECTED
        ctx.bus.attach(connection_id)
        logging.info(f"Client connected: {connection_id} from {identity.address}")

        payload = ChatHistoryPayload(session_id=ctx.session_id, history=ctx.history.snapshot())
        ctx.bus.send_to(connection_id, EVENT_CHAT_HISTORY, payload.model_dump(by_alias=True))

        self._forward_to_sink(f"[{identity.address}] connected", audit=True)
        return identity

    def on_set_nickname(self, connection_id: str, nickname: Any) -> None:
        """Applies a nickname change; later messages use the new name."""
        if not self._is_live(connection_id, "set nickname"):
            return
        self.context.registry.set_nickname(connection_id, nickname)
        self._states[connection_id] = ConnectionState.IDENTIFIED
        identity = self.context.registry.get(connection_id)
        logging.info(f"Connection {connection_id} is now known as '{identity.nickname}'.")

    def on_chat_message(self, connection_id: str, raw_text: Any) -> Optional[str]:
        """
        Formats, records and broadcasts one chat message.

        The message is formatted exactly once; the same string goes to the
        history, to every client and to the log sink.

        Returns:
            The formatted message, or None if the connection is closed.
        """
        if not self._is_live(connection_id, "chat message"):
            return None
        ctx = self.context
        identity = ctx.registry.get(connection_id)
        message = format_message(identity.address, identity.nickname, raw_text)

        ctx.history.append(message)
        ctx.bus.broadcast_all(message)
        logging.info(message)

        self._forward_to_sink(message)
        return message

    def on_disconnect(self, connection_id: str) -> None:
        """Forgets a connection. A second disconnect for the same id is ignored."""
        if connection_id not in self._states:
            return
        ctx = self.context
        identity = ctx.registry.get(connection_id)
        ctx.registry.remove(connection_id)
        ctx.bus.detach(connection_id)
        del self._states[connection_id]
        logging.info(f"Client disconnected: {connection_id} from {identity.address}")

        self._forward_to_sink(f"[{identity.address}] disconnected", audit=True)

    def _forward_to_sink(self, text: str, audit: bool = False) -> None:
        # Log durability never affects chat delivery.
        try:
            if audit:
                self.context.sink.log_event(text)
            else:
                self.context.sink.log_message(text)
        except Exception as e:
            logging.error(f"Chat log sink rejected an entry: {e}")
