import os


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_positive_int(name):
    value = os.environ.get(name, "").strip()
    if not value:
        return None
    number = int(value)
    return number if number > 0 else None


BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Server configuration
SERVER_HOST = os.environ.get("HOST", "0.0.0.0")
SERVER_PORT = int(os.environ.get("PORT", 3000))
# Handlers rely on cooperative scheduling for ordering; eventlet is the only
# supported mode. Tests pass async_mode="threading" to create_app directly.
ASYNC_MODE = "eventlet"
STATIC_DIR = os.path.join(BASE_DIR, "public")

# Chat log sink
CHAT_LOG_PATH = os.environ.get("CHAT_LOG_PATH", os.path.join(BASE_DIR, "chat.log"))
LOG_CONNECTION_EVENTS = _env_flag("LOG_CONNECTION_EVENTS", True)

# None keeps the full history for the lifetime of the process.
HISTORY_MAX_ENTRIES = _env_positive_int("HISTORY_MAX_ENTRIES")

# Identity defaults
DEFAULT_NICKNAME = "Anon"
UNKNOWN_ADDRESS = "unknown"
IPV4_MAPPED_PREFIX = "::ffff:"

# Socket.IO event names
EVENT_CHAT_MESSAGE = "chat message"
EVENT_CHAT_HISTORY = "chat history"
EVENT_SET_NICKNAME = "set nickname"
