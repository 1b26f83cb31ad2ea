"""Exceptions raised by calspan.

Absent instants are not errors: shifting ``None`` yields ``None``.
"""


class CalspanError(Exception):
    """Base exception for all calspan errors."""


class OutOfRangeError(CalspanError, ValueError):
    """A calendar computation produced an instant that cannot be represented.

    Raised when projecting a span or shifting an instant lands outside the
    years a ``datetime`` supports (1 through 9999).

    Attributes:
        instant: The instant the span was added to
        fields: The span that was being added
    """

    def __init__(self, message: str, *, instant: object = None, fields: object = None):
        super().__init__(message)
        self.instant: object = instant
        self.fields: object = fields
