"""Calendar span value types.

A ``CalendarSpan`` is a signed amount of one calendar unit. A ``CompositeSpan``
is a field-wise bundle of all six units. Arithmetic is field-wise and never
carries between units: 70 seconds stays 70 seconds, because how many days a
month holds depends on where the span is applied.

Equality and ordering are not structural. Two spans compare by the instants
they reach when added to a reference instant (see ``calspan.ordering``).
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, fields
from types import ModuleType
from typing import Any

from dateutil.relativedelta import relativedelta
from typing_extensions import override

from calspan.errors import OutOfRangeError
from calspan.units import UNITS_BY_COARSENESS, CalendarUnit
from calspan.util import unit_label


# relativedelta fields that set a value instead of offsetting it
_ABSOLUTE_FIELDS = (
    "year",
    "month",
    "day",
    "weekday",
    "hour",
    "minute",
    "second",
    "microsecond",
)


def _check_amount(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"Span {name} must be an int.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Hint: calendar spans count whole units, e.g. span(90, 'minutes')"
        )


def _ordering() -> ModuleType:
    # calspan.ordering imports this module, so it is resolved on first use
    from calspan import ordering

    return ordering


class Span(ABC):
    """Common behaviour of single-unit and composite spans."""

    @abstractmethod
    def to_composite(self) -> "CompositeSpan":
        """Return this span as a composite with one field per unit."""
        pass

    @abstractmethod
    def __neg__(self) -> "Span":
        pass

    def __add__(self, other: Any) -> "CompositeSpan":
        if not isinstance(other, Span):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: Any) -> "CompositeSpan":
        if not isinstance(other, Span):
            return NotImplemented
        return subtract(self, other)

    def _compare(self, other: "Span") -> int:
        return _ordering().compare(self, other)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self._compare(other) >= 0

    @override
    def __hash__(self) -> int:
        # Must agree with __eq__, which compares default projections
        try:
            return hash(_ordering().projection_key(self))
        except OutOfRangeError:
            return hash(astuple_fields(self.to_composite()))


@dataclass(frozen=True, eq=False)
class CalendarSpan(Span):
    """A signed amount of a single calendar unit.

    Example:
        >>> from calspan import span
        >>> str(span(30, "seconds"))
        '30 seconds'
    """

    amount: int
    unit: CalendarUnit

    def __post_init__(self) -> None:
        _check_amount(self.amount, "amount")
        if not isinstance(self.unit, CalendarUnit):
            object.__setattr__(self, "unit", CalendarUnit.parse(self.unit))

    @override
    def to_composite(self) -> "CompositeSpan":
        return CompositeSpan(**{self.unit.field: self.amount})

    def __neg__(self) -> "CalendarSpan":
        return CalendarSpan(-self.amount, self.unit)

    def __mul__(self, factor: Any) -> "CalendarSpan":
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        return CalendarSpan(self.amount * factor, self.unit)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return unit_label(self.amount, self.unit.singular)

    def __repr__(self) -> str:
        return f"CalendarSpan(amount={self.amount}, unit=CalendarUnit.{self.unit.name})"


@dataclass(frozen=True, eq=False)
class CompositeSpan(Span):
    """An additive combination of single-unit spans.

    Fields are independent counters. Nothing is carried between them, since
    the length of a day, month or year depends on where the span lands.

    Example:
        >>> from calspan import compose
        >>> str(compose(days=1, minutes=5))
        '1 day, 5 minutes'
    """

    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            _check_amount(getattr(self, f.name), f.name)

    @classmethod
    def from_relativedelta(cls, delta: relativedelta) -> "CompositeSpan":
        """Build a composite from the relative fields of a relativedelta.

        relativedelta normalizes on construction, so ``relativedelta(seconds=70)``
        arrives here as 1 minute and 10 seconds.

        Raises:
            ValueError: If the delta carries absolute fields, leap days or
                microseconds, none of which a span can express
        """
        absolute = [name for name in _ABSOLUTE_FIELDS if getattr(delta, name) is not None]
        if absolute or delta.leapdays or delta.microseconds:
            raise ValueError(
                f"Cannot convert {delta!r} to a CompositeSpan.\n"
                f"Only relative whole-unit fields (years ... seconds) are supported.\n"
                f"Hint: drop absolute fields like year=/weekday= and sub-second parts"
            )
        return cls(
            years=delta.years,
            months=delta.months,
            days=delta.days,
            hours=delta.hours,
            minutes=delta.minutes,
            seconds=delta.seconds,
        )

    @property
    def is_zero(self) -> bool:
        return not any(astuple_fields(self))

    @override
    def to_composite(self) -> "CompositeSpan":
        return self

    def as_relativedelta(self) -> relativedelta:
        return relativedelta(
            years=self.years,
            months=self.months,
            days=self.days,
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds,
        )

    def components(self) -> Iterator[CalendarSpan]:
        """Yield the non-zero fields as single-unit spans, coarsest first."""
        for unit in UNITS_BY_COARSENESS:
            amount = getattr(self, unit.field)
            if amount:
                yield CalendarSpan(amount, unit)

    def __neg__(self) -> "CompositeSpan":
        return CompositeSpan(*(-value for value in astuple_fields(self)))

    def __mul__(self, factor: Any) -> "CompositeSpan":
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        return CompositeSpan(*(value * factor for value in astuple_fields(self)))

    __rmul__ = __mul__

    def __str__(self) -> str:
        parts = [str(component) for component in self.components()]
        return ", ".join(parts) if parts else "0 seconds"


def astuple_fields(composite: CompositeSpan) -> tuple[int, ...]:
    """Return the six fields as a tuple, years first."""
    return (
        composite.years,
        composite.months,
        composite.days,
        composite.hours,
        composite.minutes,
        composite.seconds,
    )


def span(amount: int, unit: CalendarUnit | str) -> CalendarSpan:
    """Create a single-unit span.

    Args:
        amount: Signed number of units; zero means no span
        unit: A CalendarUnit or a unit name such as "day" or "months"
    """
    return CalendarSpan(amount, CalendarUnit.parse(unit))


def compose(
    years: int = 0,
    months: int = 0,
    days: int = 0,
    hours: int = 0,
    minutes: int = 0,
    seconds: int = 0,
) -> CompositeSpan:
    """Create a composite span from per-unit amounts."""
    return CompositeSpan(years, months, days, hours, minutes, seconds)


def add(a: Span, b: Span) -> CompositeSpan:
    """Field-wise sum of two spans, with no carrying between units."""
    left, right = astuple_fields(a.to_composite()), astuple_fields(b.to_composite())
    return CompositeSpan(*(x + y for x, y in zip(left, right)))


def subtract(a: Span, b: Span) -> CompositeSpan:
    """Field-wise difference of two spans, with no carrying between units."""
    left, right = astuple_fields(a.to_composite()), astuple_fields(b.to_composite())
    return CompositeSpan(*(x - y for x, y in zip(left, right)))


def negate(a: Span) -> Span:
    """Field-wise negation; a single-unit span stays single-unit."""
    return -a


zero: CompositeSpan = CompositeSpan()
