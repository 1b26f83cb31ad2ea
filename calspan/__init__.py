import logging

from .calendar import (
    DEFAULT_CALENDAR,
    Calendar,
    GregorianCalendar,
    between,
    project,
    shift,
    unshift,
)
from .errors import CalspanError, OutOfRangeError
from .log import configure_logging
from .ordering import compare, equals, fast_compare, is_before, projection_key
from .span import (
    CalendarSpan,
    CompositeSpan,
    Span,
    add,
    compose,
    negate,
    span,
    subtract,
    zero,
)
from .sugar import (
    UnitFactory,
    day,
    days,
    hour,
    hours,
    minute,
    minutes,
    month,
    months,
    second,
    seconds,
    year,
    years,
)
from .units import CalendarUnit

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CalendarUnit",
    "Span",
    "CalendarSpan",
    "CompositeSpan",
    "span",
    "compose",
    "zero",
    "add",
    "subtract",
    "negate",
    "Calendar",
    "GregorianCalendar",
    "DEFAULT_CALENDAR",
    "project",
    "shift",
    "unshift",
    "between",
    "equals",
    "compare",
    "is_before",
    "fast_compare",
    "projection_key",
    "CalspanError",
    "OutOfRangeError",
    "UnitFactory",
    "seconds",
    "minutes",
    "hours",
    "days",
    "months",
    "years",
    "second",
    "minute",
    "hour",
    "day",
    "month",
    "year",
    "configure_logging",
]
