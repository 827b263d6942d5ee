from __future__ import annotations

from enum import Enum
from typing import Any


class Shift(str, Enum):
    """Driver working window. Decides the rent report deadline."""

    MORNING = "morning"
    NIGHT = "night"
    FULL_DAY = "24hr"
    NONE = "none"

    @classmethod
    def parse(cls, value: Any) -> "Shift":
        """Unset or unknown values degrade to NONE (never overdue)."""
        if isinstance(value, cls):
            return value
        if not value:
            return cls.NONE
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.NONE


class ReportStatus(str, Enum):
    """Status stored on a submitted rent report."""

    PENDING = "pending"
    PENDING_VERIFICATION = "pending_verification"
    PAID = "paid"
    REJECTED = "rejected"
    LEAVE = "leave"


class DayStatus(str, Enum):
    """Derived per-day status. Never persisted."""

    PAID = "paid"
    PAID_WITH_ADJUSTMENT = "paid_with_adjustment"
    PENDING = "pending"
    PENDING_VERIFICATION = "pending_verification"
    OVERDUE = "overdue"
    REJECTED = "rejected"
    LEAVE = "leave"
    OFFLINE = "offline"
    NOT_JOINED = "not_joined"


class AdjustmentStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
