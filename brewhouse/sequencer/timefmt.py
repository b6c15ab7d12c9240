"""Display formatting for minute counts."""

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR


def format_minutes(minutes: int) -> str:
    """Render a minute count as ``45m``, ``1h 30m`` or ``1d 1h``.

    Floor division only; nothing is rounded up and seconds are never shown.
    """
    if minutes < MINUTES_PER_HOUR:
        return f"{minutes}m"
    if minutes < MINUTES_PER_DAY:
        hours, mins = divmod(minutes, MINUTES_PER_HOUR)
        return f"{hours}h {mins}m"
    days, rest = divmod(minutes, MINUTES_PER_DAY)
    return f"{days}d {rest // MINUTES_PER_HOUR}h"
