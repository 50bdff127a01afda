"""Internal type aliases for strict typing."""

from __future__ import annotations

from typing import Literal

# Violation kinds reported by the documentation rules
ViolationKind = Literal["LocationViolation", "NamingViolation"]

LOCATION_VIOLATION: ViolationKind = "LocationViolation"
NAMING_VIOLATION: ViolationKind = "NamingViolation"


__all__ = ["LOCATION_VIOLATION", "NAMING_VIOLATION", "ViolationKind"]
