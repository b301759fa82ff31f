"""Formatting utilities for durations and change counts."""


def fmt_duration(seconds: float) -> str:
    """Format duration as human readable string."""
    if seconds < 60:
        return f"{seconds:.0f}s"
    elif seconds < 3600:
        mins, secs = divmod(int(seconds), 60)
        return f"{mins}m {secs}s"
    else:
        hours, remainder = divmod(int(seconds), 3600)
        mins, secs = divmod(remainder, 60)
        return f"{hours}h {mins}m {secs}s"


def fmt_progress(total: int, threshold: int) -> str:
    """'7/5 lines (140%)'."""
    pct = (total * 100) // threshold if threshold else 100
    return f"{total}/{threshold} lines ({pct}%)"
