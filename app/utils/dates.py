"""Date utilities."""

from datetime import datetime, timezone


def now_ms() -> int:
    """Current time as epoch milliseconds.

    Returns:
        int: Milliseconds since the Unix epoch (UTC).
    """
    return int(datetime.now(timezone.utc).timestamp() * 1000)
