"""
Entry point for the Agora chat server.

`create_app` assembles one chat session (history, registry, broadcast bus and
chat log) behind a SessionCore and exposes it over Socket.IO, with the
browser client served from public/. `main` binds the configured port and
exits with status 1 if it cannot.
"""
import logging
import sys
from typing import Optional

from flask import Flask, send_from_directory
from flask_cors import CORS
from flask_socketio import SocketIO

from broadcast_bus import BroadcastBus
from config import (
    ASYNC_MODE,
    CHAT_LOG_PATH,
    HISTORY_MAX_ENTRIES,
    LOG_CONNECTION_EVENTS,
    SERVER_HOST,
    SERVER_PORT,
    STATIC_DIR,
)
import events
from history_log import HistoryLog
from log_sink import ChatLogSink
from session_core import SessionCore
from session_models import SessionContext
from session_registry import SessionRegistry


def create_app(
    async_mode: Optional[str] = ASYNC_MODE,
    chat_log_path: str = CHAT_LOG_PATH,
    history_max_entries: Optional[int] = HISTORY_MAX_ENTRIES,
    log_connection_events: bool = LOG_CONNECTION_EVENTS,
) -> tuple[Flask, SocketIO, SessionCore]:
    """
    Builds the web app, the SocketIO server and the chat session.

    Returns:
        The Flask app, its SocketIO server and the SessionCore driving it.
    """
    app = Flask(__name__, static_folder=STATIC_DIR, static_url_path="")
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", async_mode=async_mode)

    sink = ChatLogSink(chat_log_path, log_connection_events=log_connection_events)
    sink.register_socketio(socketio)
    context = SessionContext(
        history=HistoryLog(max_entries=history_max_entries),
        registry=SessionRegistry(),
        bus=BroadcastBus(socketio),
        sink=sink,
    )
    core = SessionCore(context)
    logging.info(f"Chat session {context.session_id} started.")

    @app.route("/")
    def serve_index():
        return send_from_directory(STATIC_DIR, "index.html")

    events.register_events(socketio, core)
    return app, socketio, core


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    app, socketio, _ = create_app()
    logging.info(f"Starting chat server on http://localhost:{SERVER_PORT}")
    try:
        socketio.run(app, host=SERVER_HOST, port=SERVER_PORT)
    except OSError as e:
        logging.critical(f"FATAL: Could not start the server on port {SERVER_PORT}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
