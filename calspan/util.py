"""Utility constants and helpers for calspan.

The epoch fields define the default reference instant spans are anchored at
when they are compared. Calendars interpret them in their own time zone.
"""

# Default reference instant (1970-01-01 00:00:00 wall clock)
EPOCH_YEAR = 1970
EPOCH_MONTH = 1
EPOCH_DAY = 1

# Range of years a datetime can represent
MIN_YEAR = 1
MAX_YEAR = 9999


def unit_label(amount: int, singular: str) -> str:
    """Return ``"<amount> <unit>"`` with the unit pluralized unless |amount| is 1."""
    name = singular if abs(amount) == 1 else f"{singular}s"
    return f"{amount} {name}"
