from __future__ import annotations

from typing import Any

from ..core.enums import DayStatus, Shift

_STATUS_DISPLAY = {
    DayStatus.PAID: ("Paid", "bg-green-100", "✅"),
    DayStatus.PAID_WITH_ADJUSTMENT: ("Paid (adjusted)", "bg-emerald-100", "✅"),
    DayStatus.PENDING: ("Pending", "bg-yellow-100", "⏳"),
    DayStatus.PENDING_VERIFICATION: ("Pending verification", "bg-amber-100", "⏳"),
    DayStatus.OVERDUE: ("Overdue", "bg-red-100", "❌"),
    DayStatus.REJECTED: ("Rejected", "bg-rose-200", "⛔"),
    DayStatus.LEAVE: ("Leave", "bg-blue-100", "☀️"),
    DayStatus.OFFLINE: ("Offline", "bg-gray-100", "🔴"),
    DayStatus.NOT_JOINED: ("Not joined", "bg-white", ""),
}

_SHIFT_BADGE = {
    Shift.MORNING: "bg-amber-100 text-amber-800",
    Shift.NIGHT: "bg-indigo-100 text-indigo-800",
    Shift.FULL_DAY: "bg-purple-100 text-purple-800",
}


def status_display(status: Any) -> dict:
    """Label/css/emoji for a calendar cell or badge. Unknown values pass through."""
    try:
        key = DayStatus(status)
    except ValueError:
        return {"label": str(status), "css_class": "", "emoji": ""}

    label, css, emoji = _STATUS_DISPLAY[key]
    return {"label": label, "css_class": css, "emoji": emoji}


def shift_badge_class(shift: Any) -> str:
    return _SHIFT_BADGE.get(Shift.parse(shift), "bg-gray-100 text-gray-800")
