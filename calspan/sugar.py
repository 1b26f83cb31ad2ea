"""Unit literal sugar: ``30 * seconds``, ``days(5)``, ``year(1)``.

Each name is a stateless factory for single-unit spans. Integers are never
patched; multiplication and calls build the span instead.
"""

from typing import Any

from calspan.span import CalendarSpan
from calspan.units import CalendarUnit


class UnitFactory:
    def __init__(self, unit: CalendarUnit):
        self.unit: CalendarUnit = unit

    def __call__(self, amount: int) -> CalendarSpan:
        return CalendarSpan(amount, self.unit)

    def __mul__(self, amount: Any) -> CalendarSpan:
        if isinstance(amount, bool) or not isinstance(amount, int):
            return NotImplemented
        return CalendarSpan(amount, self.unit)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"UnitFactory({self.unit.field})"


seconds: UnitFactory = UnitFactory(CalendarUnit.SECOND)
minutes: UnitFactory = UnitFactory(CalendarUnit.MINUTE)
hours: UnitFactory = UnitFactory(CalendarUnit.HOUR)
days: UnitFactory = UnitFactory(CalendarUnit.DAY)
months: UnitFactory = UnitFactory(CalendarUnit.MONTH)
years: UnitFactory = UnitFactory(CalendarUnit.YEAR)

second: UnitFactory = seconds
minute: UnitFactory = minutes
hour: UnitFactory = hours
day: UnitFactory = days
month: UnitFactory = months
year: UnitFactory = years
