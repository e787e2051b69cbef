"""Daily nursing and pumping summaries."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from uuid import UUID
from zoneinfo import ZoneInfo

from latchfit.domain.milk import MilkSessionRecord, TimerMode
from latchfit.services.milk_timer import MilkSessionRepository

SECONDS_PER_MINUTE = 60


@dataclass(frozen=True)
class DailyMilkTotals:
    """Total nursing and pumping time for one local day."""

    day: date
    nurse_sec: int
    pump_sec: int
    sessions: list[MilkSessionRecord]


@dataclass
class MilkStatsService:
    """Service for session totals in the parent's timezone."""

    repository: MilkSessionRepository

    def get_today(
        self, mom_id: UUID, timezone_name: str, now: datetime | None = None
    ) -> DailyMilkTotals:
        """Return today's totals in the given timezone."""
        tz = ZoneInfo(timezone_name)
        local_now = (now or datetime.now(tz=UTC)).astimezone(tz)
        start = local_now.replace(hour=0, minute=0, second=0, microsecond=0)
        end = start + timedelta(days=1)
        sessions = self.repository.list_sessions(
            mom_id, start.astimezone(UTC), end.astimezone(UTC)
        )
        return today_totals(sessions, mom_id, timezone_name, now=local_now)


def today_totals(
    sessions: list[MilkSessionRecord],
    mom_id: UUID | None,
    timezone_name: str,
    now: datetime | None = None,
) -> DailyMilkTotals:
    """Sum the parent's nursing and pumping time for the current local day."""
    tz = ZoneInfo(timezone_name)
    day = (now or datetime.now(tz=UTC)).astimezone(tz).date()
    todays = [
        session
        for session in sessions
        if session.mom_id == mom_id and session.started_at.astimezone(tz).date() == day
    ]
    todays.sort(key=lambda session: session.started_at, reverse=True)
    nurse = sum(s.duration_sec for s in todays if s.mode == TimerMode.NURSE)
    pump = sum(s.duration_sec for s in todays if s.mode == TimerMode.PUMP)
    return DailyMilkTotals(day=day, nurse_sec=nurse, pump_sec=pump, sessions=todays)


def format_elapsed(seconds: int) -> str:
    """Format seconds as a ``mm:ss`` timer label."""
    minutes, secs = divmod(max(0, seconds), SECONDS_PER_MINUTE)
    return f"{minutes:02d}:{secs:02d}"


def format_duration(seconds: int) -> str:
    """Format seconds as ``Xm YYs`` for history rows."""
    minutes, secs = divmod(max(0, seconds), SECONDS_PER_MINUTE)
    return f"{minutes}m {secs:02d}s"
