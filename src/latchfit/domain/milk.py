"""Domain models for nursing and pumping sessions."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class TimerMode(StrEnum):
    """What the timer is measuring."""

    NURSE = "nurse"
    PUMP = "pump"


class Side(StrEnum):
    """Breast side a session was logged against."""

    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"
    NONE = "none"


@dataclass(frozen=True)
class MilkInterval:
    """One contiguous running span of a timer."""

    start: datetime
    end: datetime | None = None

    @property
    def is_open(self) -> bool:
        """Return True while the interval is still running."""
        return self.end is None

    @property
    def duration_sec(self) -> int:
        """Whole seconds covered by a closed interval, never negative."""
        if self.end is None:
            return 0
        return max(0, int((self.end - self.start).total_seconds()))

    def close(self, at: datetime) -> "MilkInterval":
        """Return the interval closed at the given time."""
        return MilkInterval(start=self.start, end=at)


def total_duration_sec(intervals: tuple[MilkInterval, ...] | list[MilkInterval]) -> int:
    """Sum the durations of all closed intervals."""
    return sum(interval.duration_sec for interval in intervals)


@dataclass(frozen=True)
class MilkSessionRecord:
    """A finished nursing or pumping session ready to be persisted."""

    id: UUID
    mom_id: UUID | None
    mode: TimerMode
    side: Side
    intervals: tuple[MilkInterval, ...]
    started_at: datetime
    ended_at: datetime
    duration_sec: int
