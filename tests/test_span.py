"""Tests for span construction and field-wise arithmetic."""

import pytest
from dateutil.relativedelta import relativedelta

from calspan import (
    CalendarSpan,
    CalendarUnit,
    CompositeSpan,
    add,
    compose,
    negate,
    span,
    subtract,
    zero,
)
from calspan.span import astuple_fields


def test_span_accepts_unit_names():
    """Test that span() resolves singular and plural unit names."""
    assert span(3, "day").unit is CalendarUnit.DAY
    assert span(3, "Months").unit is CalendarUnit.MONTH
    assert span(3, CalendarUnit.YEAR).unit is CalendarUnit.YEAR


def test_span_rejects_non_int_amounts():
    """Test that floats and bools are not valid amounts."""
    with pytest.raises(TypeError, match="must be an int"):
        span(1.5, "hours")  # type: ignore[arg-type]

    with pytest.raises(TypeError, match="must be an int"):
        span(True, "hours")  # type: ignore[arg-type]

    with pytest.raises(TypeError, match="must be an int"):
        compose(days="2")  # type: ignore[arg-type]


def test_span_allows_zero_and_large_amounts():
    """Test that amounts have no bound and zero is a valid span."""
    assert span(0, "second").amount == 0
    huge = span(10**30, "seconds")
    assert huge.to_composite().seconds == 10**30


def test_single_unit_to_composite_sets_one_field():
    """Test that converting a single-unit span fills only its own field."""
    assert span(4, "hours").to_composite() == compose(hours=4)
    assert astuple_fields(span(4, "hours").to_composite()) == (0, 0, 0, 4, 0, 0)
    assert astuple_fields(span(-2, "years").to_composite()) == (-2, 0, 0, 0, 0, 0)


def test_compose_positional_order():
    """Test that compose takes years, months, days, hours, minutes, seconds."""
    composite = compose(1, 2, 3, 4, 5, 6)
    assert astuple_fields(composite) == (1, 2, 3, 4, 5, 6)


def test_addition_is_field_wise():
    """Test that addition sums matching fields."""
    total = span(1, "day") + compose(minutes=5)
    assert isinstance(total, CompositeSpan)
    assert astuple_fields(total) == (0, 0, 1, 0, 5, 0)
    assert astuple_fields(add(span(2, "months"), span(3, "months"))) == (
        0,
        5,
        0,
        0,
        0,
        0,
    )


def test_addition_never_carries():
    """Test that 70 seconds stays 70 seconds rather than 1:10."""
    assert span(70, "seconds").to_composite().seconds == 70
    assert span(70, "seconds").to_composite().minutes == 0

    total = span(3000, "seconds") + span(600, "seconds")
    assert total.seconds == 3600
    assert total.hours == 0


def test_subtraction_is_field_wise():
    """Test that subtraction takes differences per field, allowing mixed signs."""
    diff = span(1, "day") - span(5, "minutes")
    assert astuple_fields(diff) == (0, 0, 1, 0, -5, 0)
    assert astuple_fields(subtract(compose(years=1), compose(years=1))) == (0,) * 6


def test_add_then_subtract_is_identity():
    """Test (a + b) - b has exactly the fields of a."""
    samples = [
        span(1, "year"),
        span(-7, "days"),
        span(70, "seconds"),
        compose(1, -2, 3, -4, 5, -6),
        zero,
    ]
    for a in samples:
        for b in samples:
            result = (a + b) - b
            assert astuple_fields(result) == astuple_fields(a.to_composite())


def test_adding_zero_preserves_span():
    """Test a + zero has the same fields as a."""
    a = span(11, "months")
    assert astuple_fields(a + zero) == astuple_fields(a.to_composite())
    assert a + zero == a
    assert zero.is_zero
    assert not compose(seconds=1).is_zero


def test_negation():
    """Test negation keeps single-unit spans single-unit."""
    assert isinstance(-span(3, "days"), CalendarSpan)
    assert (-span(3, "days")).amount == -3
    assert astuple_fields(-compose(1, 2, 3, 4, 5, 6)) == (-1, -2, -3, -4, -5, -6)
    assert negate(span(2, "hours")).amount == -2


def test_scaling_by_int():
    """Test spans multiply field-wise by integers."""
    assert (span(3, "days") * 4).amount == 12
    assert (4 * span(3, "days")).amount == 12
    assert astuple_fields(compose(days=1, minutes=5) * 3) == (0, 0, 3, 0, 15, 0)


def test_arithmetic_with_other_types_raises():
    """Test that mixing spans with plain numbers is a TypeError."""
    with pytest.raises(TypeError):
        span(1, "day") + 1  # type: ignore[operator]

    with pytest.raises(TypeError):
        compose(days=1) - 1.5  # type: ignore[operator]

    with pytest.raises(TypeError):
        span(1, "day") * 1.5  # type: ignore[operator]


def test_string_forms():
    """Test human-readable span descriptions."""
    assert str(span(1, "year")) == "1 year"
    assert str(span(30, "seconds")) == "30 seconds"
    assert str(span(-1, "day")) == "-1 day"
    assert str(span(0, "minutes")) == "0 minutes"
    assert str(compose(days=1, minutes=5)) == "1 day, 5 minutes"
    assert str(zero) == "0 seconds"
    assert repr(span(2, "hours")) == "CalendarSpan(amount=2, unit=CalendarUnit.HOUR)"


def test_components_coarsest_first():
    """Test components() yields non-zero fields from years down to seconds."""
    parts = list(compose(seconds=9, years=1, days=2).components())
    assert [(p.amount, p.unit) for p in parts] == [
        (1, CalendarUnit.YEAR),
        (2, CalendarUnit.DAY),
        (9, CalendarUnit.SECOND),
    ]


def test_relativedelta_interop():
    """Test conversion to and from dateutil's relativedelta."""
    composite = compose(years=1, months=2, days=3, hours=4, minutes=5, seconds=6)
    delta = composite.as_relativedelta()
    assert delta == relativedelta(
        years=1, months=2, days=3, hours=4, minutes=5, seconds=6
    )
    assert astuple_fields(CompositeSpan.from_relativedelta(delta)) == (
        1,
        2,
        3,
        4,
        5,
        6,
    )


def test_from_relativedelta_rejects_absolute_fields():
    """Test that absolute and sub-second relativedelta fields are refused."""
    with pytest.raises(ValueError, match="Cannot convert"):
        CompositeSpan.from_relativedelta(relativedelta(year=2020))

    with pytest.raises(ValueError, match="Cannot convert"):
        CompositeSpan.from_relativedelta(relativedelta(microseconds=5))


def test_spans_are_immutable():
    """Test span fields cannot be reassigned."""
    s = span(1, "day")
    with pytest.raises(AttributeError):
        s.amount = 2  # type: ignore[misc]
