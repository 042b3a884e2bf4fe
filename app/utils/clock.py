from datetime import datetime, timezone


def utcnow() -> datetime:
    """Naive UTC timestamp; every stored datetime uses this so comparisons work on any backend."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
