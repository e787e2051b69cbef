"""Interval-accumulating timers for nursing and pumping sessions."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from enum import StrEnum
from typing import Protocol
from uuid import UUID, uuid4

from latchfit.domain.milk import (
    MilkInterval,
    MilkSessionRecord,
    Side,
    TimerMode,
    total_duration_sec,
)
from latchfit.errors import InvalidStateTransition, NoActiveProfile

_logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(tz=UTC)


class TimerStatus(StrEnum):
    """Externally visible timer state."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


@dataclass(frozen=True)
class TimerState:
    """Snapshot of a single timer.

    ``suspended`` marks a timer that is logically running while the host
    app is in the background; its intervals are all closed until the app
    comes back to the foreground.
    """

    intervals: tuple[MilkInterval, ...] = ()
    is_running: bool = False
    is_paused: bool = False
    last_start: datetime | None = None
    suspended: bool = False

    @property
    def status(self) -> TimerStatus:
        """Return idle, running or paused."""
        if self.is_running:
            return TimerStatus.RUNNING
        if self.is_paused:
            return TimerStatus.PAUSED
        return TimerStatus.IDLE

    def duration_sec(self, now: datetime) -> int:
        """Accumulated seconds, including the live span when running."""
        closed = total_duration_sec(self.intervals)
        if self.is_running and self.last_start is not None and not self.suspended:
            live = int((now - self.last_start).total_seconds())
            return closed + max(0, live)
        return closed


@dataclass(frozen=True)
class TimerSettings:
    """Timer preferences persisted by the host application."""

    default_mode: TimerMode = TimerMode.NURSE


class MilkTimer:
    """State machine for one side's timer.

    Each action returns the new state. Invalid transitions are no-ops
    unless the timer was created with ``strict=True``.
    """

    def __init__(
        self,
        clock: Clock = utc_now,
        strict: bool = False,
        state: TimerState | None = None,
    ) -> None:
        self.clock = clock
        self.strict = strict
        self.state = state or TimerState()

    @property
    def status(self) -> TimerStatus:
        """Return the current timer status."""
        return self.state.status

    def duration_sec(self) -> int:
        """Return accumulated seconds at the current clock time."""
        return self.state.duration_sec(self.clock())

    def start(self) -> TimerState:
        """Open a new interval from idle or paused."""
        if self.state.is_running:
            return self._reject("start")
        now = self.clock()
        self.state = TimerState(
            intervals=(*self.state.intervals, MilkInterval(start=now)),
            is_running=True,
            is_paused=False,
            last_start=now,
        )
        return self.state

    def pause(self) -> TimerState:
        """Close the running interval."""
        if not self.state.is_running:
            return self._reject("pause")
        self.state = TimerState(
            intervals=_close_open_interval(self.state.intervals, self.clock()),
            is_running=False,
            is_paused=True,
            last_start=None,
        )
        return self.state

    def resume(self) -> TimerState:
        """Start a fresh interval after a pause."""
        if not self.state.is_paused:
            return self._reject("resume")
        return self.start()

    def stop(
        self,
        mode: TimerMode,
        side: Side,
        mom_id: UUID | None = None,
    ) -> MilkSessionRecord | None:
        """Close the timer, package its intervals and reset to idle."""
        if self.state.status == TimerStatus.IDLE:
            self._reject("stop")
            return None
        now = self.clock()
        intervals = _close_open_interval(self.state.intervals, now)
        record = MilkSessionRecord(
            id=uuid4(),
            mom_id=mom_id,
            mode=mode,
            side=side,
            intervals=intervals,
            started_at=intervals[0].start if intervals else now,
            ended_at=now,
            duration_sec=total_duration_sec(intervals),
        )
        self.state = TimerState()
        return record

    def enter_background(self) -> TimerState:
        """Stop counting while the host app is suspended."""
        if not self.state.is_running or self.state.suspended:
            return self.state
        self.state = replace(
            self.state,
            intervals=_close_open_interval(self.state.intervals, self.clock()),
            last_start=None,
            suspended=True,
        )
        return self.state

    def enter_foreground(self) -> TimerState:
        """Resume counting for a timer that was running when suspended."""
        if not self.state.suspended:
            return self.state
        now = self.clock()
        self.state = replace(
            self.state,
            intervals=(*self.state.intervals, MilkInterval(start=now)),
            last_start=now,
            suspended=False,
        )
        return self.state

    def _reject(self, action: str) -> TimerState:
        if self.strict:
            raise InvalidStateTransition(action, self.state.status.value)
        return self.state


def _close_open_interval(
    intervals: tuple[MilkInterval, ...], at: datetime
) -> tuple[MilkInterval, ...]:
    """Close the last open interval, if any."""
    for index in range(len(intervals) - 1, -1, -1):
        if intervals[index].is_open:
            closed = intervals[index].close(at)
            return (*intervals[:index], closed, *intervals[index + 1 :])
    return intervals


class MilkSessionRepository(Protocol):
    """Persistence interface for finished sessions."""

    def save_session(self, session: MilkSessionRecord) -> None:
        """Persist a finished session."""

    def list_sessions(
        self, mom_id: UUID, start: datetime, end: datetime
    ) -> list[MilkSessionRecord]:
        """Return sessions that started within a time range."""


@dataclass
class MilkLogService:
    """Dual left/right timers that log finished sessions."""

    repository: MilkSessionRepository
    settings: TimerSettings = field(default_factory=TimerSettings)
    clock: Clock = utc_now
    mom_id: UUID | None = None
    timers: dict[Side, MilkTimer] = field(init=False)
    mode: TimerMode = field(init=False)

    def __post_init__(self) -> None:
        self.timers = {
            Side.LEFT: MilkTimer(clock=self.clock),
            Side.RIGHT: MilkTimer(clock=self.clock),
        }
        self.mode = self.settings.default_mode

    def select_mode(self, mode: TimerMode) -> TimerSettings:
        """Switch between nursing and pumping; returns settings to persist."""
        self.mode = mode
        self.settings = TimerSettings(default_mode=mode)
        return self.settings

    def state(self, side: Side) -> TimerState:
        """Return the current state for a side."""
        return self._timer(side).state

    def start(self, side: Side) -> TimerState:
        """Start a side's timer."""
        if self.mom_id is None:
            raise NoActiveProfile("Please add or select a profile before logging.")
        return self._timer(side).start()

    def pause(self, side: Side) -> TimerState:
        """Pause a side's timer."""
        return self._timer(side).pause()

    def resume(self, side: Side) -> TimerState:
        """Resume a side's timer."""
        return self._timer(side).resume()

    def stop_and_log(self, side: Side) -> MilkSessionRecord | None:
        """Stop a side's timer and persist the finished session."""
        if self.mom_id is None:
            raise NoActiveProfile("Please add or select a profile before logging.")
        record = self._timer(side).stop(self.mode, side, self.mom_id)
        if record is None:
            return None
        self.repository.save_session(record)
        _logger.info(
            "Logged %s %s session: %ss over %s intervals",
            side.value,
            record.mode.value,
            record.duration_sec,
            len(record.intervals),
        )
        return record

    def app_backgrounded(self) -> None:
        """Pause counting on every running side."""
        for timer in self.timers.values():
            timer.enter_background()

    def app_foregrounded(self) -> None:
        """Resume counting on every side that was running."""
        for timer in self.timers.values():
            timer.enter_foreground()

    def _timer(self, side: Side) -> MilkTimer:
        timer = self.timers.get(side)
        if timer is None:
            raise ValueError(f"Unsupported timer side: {side}")
        return timer
