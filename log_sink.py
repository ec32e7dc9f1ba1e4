import logging
import os
import threading

from utils import get_timestamp


class ChatLogSink:
    """
    Append-only text log of accepted chat messages and connection events.

    Each entry becomes one line, '<ISO-8601 timestamp> <text>'. Writes are
    dispatched as Socket.IO background tasks when a server is registered, so
    the caller never waits on disk I/O. Rotation and retention are left to
    whatever manages the file.
    """

    def __init__(self, filepath="chat.log", log_connection_events=True):
        self.filepath = os.path.abspath(filepath)
        self.log_connection_events = log_connection_events
        self.lock = threading.Lock()
        # Placeholder for the socketio object
        self.socketio = None

    def register_socketio(self, sio):
        """Allows the bootstrap to register the Socket.IO instance."""
        self.socketio = sio

    def log_message(self, message):
        """Queues a formatted chat message for the log."""
        self._submit(message)

    def log_event(self, text):
        """Queues an audit line such as a connect or disconnect notice."""
        if self.log_connection_events:
            self._submit(text)

    def _submit(self, text):
        # Stamp at acceptance time, not at write time.
        line = f"{get_timestamp()} {text}\n"
        if self.socketio:
            self.socketio.start_background_task(self.write_line, line)
        else:
            self.write_line(line)

    def write_line(self, line):
        """
        Appends one line to the log file.

        Returns:
            True on success, False if the write failed. Failures are logged
            and never raised.
        """
        try:
            with self.lock:
                directory = os.path.dirname(self.filepath)
                if directory:
                    os.makedirs(directory, exist_ok=True)
                # Lone surrogates from clients are escaped rather than dropped.
                with open(self.filepath, "a", encoding="utf-8", errors="backslashreplace") as f:
                    f.write(line)
            return True
        except (OSError, UnicodeError) as e:
            logging.error(f"Error writing chat log '{self.filepath}': {e}")
            return False
