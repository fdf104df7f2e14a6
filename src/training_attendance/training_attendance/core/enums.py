from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Late / early-leave classification of one training day."""

    NONE = "NONE"
    TARDY = "TARDY"
    LEAVING_EARLY = "LEAVING_EARLY"
    TARDY_AND_LEAVING_EARLY = "TARDY_AND_LEAVING_EARLY"

    @property
    def label(self) -> str:
        return {
            AttendanceStatus.NONE: "",
            AttendanceStatus.TARDY: "Tardy",
            AttendanceStatus.LEAVING_EARLY: "Leaving early",
            AttendanceStatus.TARDY_AND_LEAVING_EARLY: "Tardy / leaving early",
        }[self]

    @property
    def is_tardy(self) -> bool:
        return self in {AttendanceStatus.TARDY, AttendanceStatus.TARDY_AND_LEAVING_EARLY}

    @property
    def is_leaving_early(self) -> bool:
        return self in {AttendanceStatus.LEAVING_EARLY, AttendanceStatus.TARDY_AND_LEAVING_EARLY}
