"""
Small helpers shared by the chat log sink and the session core: the
timestamp stamped on each chat log line and the peer address cleanup applied
when a connection registers.
"""
from datetime import datetime, timezone
from typing import Optional

from config import IPV4_MAPPED_PREFIX, UNKNOWN_ADDRESS


def get_timestamp() -> str:
    """
    Generates an ISO-8601 UTC timestamp with millisecond precision.

    Returns:
        A string such as '2025-08-07T13:48:30.123Z'.
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_address(raw_address: Optional[str]) -> str:
    """
    Strips the IPv4-mapped-IPv6 prefix from a peer address.

    '::ffff:10.0.0.5' becomes '10.0.0.5'. A missing address is reported as
    'unknown' so that every identity carries a printable address.
    """
    if not raw_address:
        return UNKNOWN_ADDRESS
    if raw_address.startswith(IPV4_MAPPED_PREFIX):
        return raw_address[len(IPV4_MAPPED_PREFIX):]
    return raw_address
