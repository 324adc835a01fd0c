"""Exceptions raised by the mealprep core."""


class MealprepError(Exception):
    """Base class for mealprep errors."""


class UnsupportedUnitError(MealprepError):
    """A unit is missing from the factor table it was looked up in."""

    def __init__(self, unit: str | None, kind: str = "volume or weight"):
        self.unit = unit
        self.kind = kind
        super().__init__(f"Unsupported {kind} unit: {unit!r}")


class InvalidQuantityError(MealprepError):
    """An ingredient line carries a missing or non-numeric quantity.

    The core never raises this; aggregation logs and skips such lines.
    Callers that want to reject input outright can raise it themselves.
    """
