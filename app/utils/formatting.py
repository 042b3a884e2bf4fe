from typing import Optional


def format_time_taken(seconds: Optional[int]) -> str:
    """Render a duration in seconds as e.g. "1h 30m 45s", "2m 5s" or "7s"."""
    if seconds is None:
        return "N/A"

    hours, remainder = divmod(int(seconds), 3600)
    minutes, secs = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"
