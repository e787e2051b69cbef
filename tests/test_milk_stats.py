"""Tests for daily milk session summaries."""

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

from latchfit.domain.milk import MilkInterval, MilkSessionRecord, Side, TimerMode
from latchfit.services.milk_stats import (
    MilkStatsService,
    format_duration,
    format_elapsed,
    today_totals,
)


def _session(
    mom_id: UUID | None, mode: TimerMode, started_at: datetime, seconds: int
) -> MilkSessionRecord:
    ended_at = started_at + timedelta(seconds=seconds)
    return MilkSessionRecord(
        id=uuid4(),
        mom_id=mom_id,
        mode=mode,
        side=Side.LEFT,
        intervals=(MilkInterval(start=started_at, end=ended_at),),
        started_at=started_at,
        ended_at=ended_at,
        duration_sec=seconds,
    )


def test_today_totals_split_by_mode() -> None:
    mom_id = uuid4()
    now = datetime(2024, 5, 1, 18, 0, tzinfo=UTC)
    sessions = [
        _session(mom_id, TimerMode.NURSE, now - timedelta(hours=2), 600),
        _session(mom_id, TimerMode.NURSE, now - timedelta(hours=1), 300),
        _session(mom_id, TimerMode.PUMP, now - timedelta(hours=3), 900),
        _session(mom_id, TimerMode.PUMP, now - timedelta(days=1), 1200),
        _session(uuid4(), TimerMode.NURSE, now, 999),
    ]

    totals = today_totals(sessions, mom_id, "UTC", now=now)

    assert totals.day == now.date()
    assert totals.nurse_sec == 900
    assert totals.pump_sec == 900
    assert len(totals.sessions) == 3
    assert totals.sessions[0].started_at == now - timedelta(hours=1)


def test_today_totals_respect_timezone() -> None:
    mom_id = uuid4()
    # 03:00 UTC is still the previous evening in New York
    now = datetime(2024, 5, 2, 3, 0, tzinfo=UTC)
    sessions = [
        _session(mom_id, TimerMode.NURSE, datetime(2024, 5, 1, 23, 0, tzinfo=UTC), 120),
        _session(mom_id, TimerMode.NURSE, datetime(2024, 5, 2, 1, 0, tzinfo=UTC), 60),
    ]

    utc_totals = today_totals(sessions, mom_id, "UTC", now=now)
    ny_totals = today_totals(sessions, mom_id, "America/New_York", now=now)

    assert utc_totals.nurse_sec == 60
    assert ny_totals.nurse_sec == 180


def test_stats_service_reads_repository(session_repository) -> None:
    mom_id = uuid4()
    now = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
    session_repository.sessions = [
        _session(mom_id, TimerMode.PUMP, now - timedelta(hours=1), 420),
        _session(mom_id, TimerMode.PUMP, now - timedelta(days=2), 420),
    ]

    totals = MilkStatsService(session_repository).get_today(mom_id, "UTC", now=now)

    assert totals.pump_sec == 420
    assert totals.nurse_sec == 0


def test_format_helpers() -> None:
    assert format_elapsed(0) == "00:00"
    assert format_elapsed(754) == "12:34"
    assert format_elapsed(-5) == "00:00"
    assert format_duration(125) == "2m 05s"
    assert format_duration(3600) == "60m 00s"
