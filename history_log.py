"""
Keeps the ordered history of formatted messages for the current process.

The history is what a newly joined client receives as its catch-up replay.
It lives only in memory and is lost on restart; the session id lets clients
tell one server incarnation's history from another's.
"""
import uuid
from collections import deque
from typing import Optional


class HistoryLog:
    """
    Append-only, ordered record of formatted messages.

    With `max_entries` set, the oldest messages are evicted once the cap is
    reached and replay covers only the retained window.
    """

    def __init__(self, max_entries: Optional[int] = None):
        if max_entries is not None and max_entries <= 0:
            raise ValueError("max_entries must be a positive integer or None")
        self._session_id = str(uuid.uuid4())
        self._messages: deque[str] = deque(maxlen=max_entries)

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def max_entries(self) -> Optional[int]:
        return self._messages.maxlen

    def __len__(self) -> int:
        return len(self._messages)

    def append(self, message: str) -> None:
        self._messages.append(message)

    def snapshot(self) -> list[str]:
        """Returns a copy of the history, oldest first, as of this call."""
        return list(self._messages)
