"""
Handles all SocketIO event logic for the chat server.

This module is the thin seam between Flask-SocketIO and the SessionCore: each
handler pulls the connection id (and, on connect, the peer address) out of
the request context and hands the event to the core. It is designed to be
registered by the bootstrap in agora.py.
"""

import logging
from typing import Any

from flask import request
from flask_socketio import SocketIO

from config import EVENT_CHAT_MESSAGE, EVENT_SET_NICKNAME
from session_core import SessionCore


def register_events(socketio: SocketIO, core: SessionCore) -> None:
    """
    Registers the chat's SocketIO event handlers with the server.

    Args:
        socketio: The SocketIO server to attach the handlers to.
        core: The session core that owns all chat state.
    """

    @socketio.on("connect")
    def handle_connect(auth=None) -> None:
        """Registers the client and sends it the chat history."""
        core.on_connect(request.sid, request.remote_addr)

    @socketio.on("disconnect")
    def handle_disconnect(reason=None) -> None:
        """Cleans up the client's identity."""
        core.on_disconnect(request.sid)

    @socketio.on(EVENT_SET_NICKNAME)
    def handle_set_nickname(nickname: Any = None) -> None:
        """
        Receives a nickname from the client.

        Args:
            nickname: The requested display name, e.g. "Alice".
        """
        core.on_set_nickname(request.sid, nickname)

    @socketio.on(EVENT_CHAT_MESSAGE)
    def handle_chat_message(text: Any = None) -> None:
        """
        Receives a chat message and broadcasts it to everyone.

        Args:
            text: The raw message body; not necessarily a string.
        """
        core.on_chat_message(request.sid, text)

    @socketio.on_error_default
    def handle_error(e: Exception) -> None:
        """Logs handler errors instead of letting them reach the client."""
        logging.exception(f"Unhandled error in SocketIO event from {request.sid}: {e}")
