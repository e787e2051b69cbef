"""Error types raised by the coaching and timer services."""


class LatchFitError(Exception):
    """Base class for application errors."""


class InvalidStateTransition(LatchFitError):
    """A timer action was invoked from a state that does not allow it."""

    def __init__(self, action: str, status: str) -> None:
        super().__init__(f"Cannot {action} a timer that is {status}")
        self.action = action
        self.status = status


class UpstreamUnavailable(LatchFitError):
    """The recipe search backend failed or returned an unusable payload."""


class NoActiveProfile(LatchFitError):
    """A session was logged without an active profile."""
