"""Typed exceptions for the vehicle equity engine.

Every error carries a machine-readable ``code`` so a presentation layer can
map it to a user-facing message without parsing the text.

    VehicleEquityError (base, a ValueError)
    |
    +-- InvalidParameter
"""

from __future__ import annotations

from typing import Any


class VehicleEquityError(ValueError):
    """Base class for all engine errors."""

    code: str = "VEHICLE_EQUITY_ERROR"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidParameter(VehicleEquityError):
    """A parameter lies outside the engine's valid domain.

    Raised once, before any schedule generation begins.  No partial
    schedule is ever produced alongside this error.
    """

    code: str = "INVALID_PARAMETER"

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid parameter '{field}' = {value!r}: {reason}")
