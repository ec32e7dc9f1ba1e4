"""
Defines the high-level data structure for the process-wide chat session.

This module contains the Pydantic model that bundles together every stateful
component the session core operates on, so that the state is passed around
explicitly instead of living in module-level globals.
"""
from pydantic import BaseModel, ConfigDict

from broadcast_bus import BroadcastBus
from history_log import HistoryLog
from log_sink import ChatLogSink
from session_registry import SessionRegistry


class SessionContext(BaseModel):
    """
    Represents the single chat session shared by every connection.

    Created once at startup and handed to the SessionCore, which is the only
    writer of the registry and the history log.
    """

    # This config allows the model to hold plain Python objects like
    # HistoryLog without validation errors.
    model_config = ConfigDict(arbitrary_types_allowed=True)

    # Ordered record of every accepted message, plus the session id.
    history: HistoryLog
    # Identity of each live connection, keyed by connection id.
    registry: SessionRegistry
    # Fan-out delivery to connected clients.
    bus: BroadcastBus
    # Durable, append-only chat log.
    sink: ChatLogSink

    @property
    def session_id(self) -> str:
        return self.history.session_id
