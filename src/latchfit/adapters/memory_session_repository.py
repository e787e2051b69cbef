"""In-memory session storage used when no persistent store is wired."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from latchfit.domain.milk import MilkSessionRecord
from latchfit.services.milk_timer import MilkSessionRepository


@dataclass
class InMemoryMilkSessionRepository(MilkSessionRepository):
    """Keeps finished sessions in a list for the life of the process."""

    sessions: list[MilkSessionRecord] = field(default_factory=list)

    def save_session(self, session: MilkSessionRecord) -> None:
        """Store a finished session."""
        self.sessions.append(session)

    def list_sessions(
        self, mom_id: UUID, start: datetime, end: datetime
    ) -> list[MilkSessionRecord]:
        """Return the parent's sessions that started in ``[start, end)``."""
        return [
            session
            for session in self.sessions
            if session.mom_id == mom_id and start <= session.started_at < end
        ]
