"""Free-text durations ("1 hour 30 minutes") to minutes and back."""
import re

_DURATION = re.compile(r'(\d+)\s*(hour|minute|min|hr)', re.IGNORECASE)


def parse_duration(text) -> int:
    """Return minutes for the first number+unit pair in text, 0 if there is none."""
    if not text:
        return 0
    match = _DURATION.search(str(text))
    if not match:
        return 0
    value = int(match.group(1))
    unit = match.group(2).lower()
    if unit.startswith('hour') or unit.startswith('hr'):
        return value * 60
    return value


def format_duration(minutes: int) -> str:
    if minutes < 60:
        return f"{minutes} min"
    hours, mins = divmod(minutes, 60)
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}min"


__all__ = ['parse_duration', 'format_duration']
