"""Calendar units a span can be measured in."""

from enum import Enum


class CalendarUnit(Enum):
    """A calendar unit, ordered from finest to coarsest.

    The coarseness rank is a heuristic only. Whether 11 months is shorter than
    a year, or 31 days equals a month, is decided by calendar projection.
    """

    SECOND = ("second", 0)
    MINUTE = ("minute", 1)
    HOUR = ("hour", 2)
    DAY = ("day", 3)
    MONTH = ("month", 4)
    YEAR = ("year", 5)

    def __init__(self, singular: str, coarseness: int):
        self.singular: str = singular
        self.coarseness: int = coarseness

    @property
    def field(self) -> str:
        """Plural field name, as used by CompositeSpan and relativedelta."""
        return f"{self.singular}s"

    @classmethod
    def parse(cls, value: "CalendarUnit | str") -> "CalendarUnit":
        """Resolve a unit from a member or a singular/plural name.

        Example:
            >>> CalendarUnit.parse("Days")
            <CalendarUnit.DAY: ('day', 3)>
        """
        if isinstance(value, CalendarUnit):
            return value
        if not isinstance(value, str):
            raise TypeError(
                f"Calendar unit must be a CalendarUnit or unit name.\n"
                f"Got {type(value).__name__!r}: {value!r}"
            )
        name = value.strip().lower()
        for unit in cls:
            if name in (unit.singular, unit.field):
                return unit
        valid = ", ".join(unit.field for unit in cls)
        raise ValueError(f"Invalid calendar unit '{value}'. Valid units: {valid}")

    def __lt__(self, other: "CalendarUnit") -> bool:
        if not isinstance(other, CalendarUnit):
            return NotImplemented
        return self.coarseness < other.coarseness


# Coarsest first, the order composite components are listed in
UNITS_BY_COARSENESS: tuple[CalendarUnit, ...] = tuple(
    sorted(CalendarUnit, key=lambda unit: unit.coarseness, reverse=True)
)
