"""Analysis session state.

A session tracks one user-facing analysis at a time: which file is being
analysed, whether it is still loading, and either the finished report or
the error message to show. Loading a new file replaces the previous result.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from level4_reporting.report_schema import AnalysisReport
from utils import get_logger

logger = get_logger(__name__)


class SessionStatus(str, Enum):
    """Lifecycle states of an analysis session."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


ALLOWED_TRANSITIONS: dict[SessionStatus, frozenset[SessionStatus]] = {
    SessionStatus.IDLE: frozenset({SessionStatus.LOADING}),
    SessionStatus.LOADING: frozenset({SessionStatus.READY, SessionStatus.ERROR}),
    SessionStatus.READY: frozenset({SessionStatus.LOADING}),
    SessionStatus.ERROR: frozenset({SessionStatus.LOADING}),
}


class SessionStateError(Exception):
    """Raised on a transition the session lifecycle does not allow."""

    pass


@dataclass
class AnalysisSession:
    """Mutable state of one analysis session.

    Transitions: ``idle -> loading -> {ready, error}``, and from ``ready`` or
    ``error`` back to ``loading`` when a new dataset is loaded.
    """

    status: SessionStatus = SessionStatus.IDLE
    source: Optional[str] = None
    report: Optional[AnalysisReport] = None
    error: Optional[str] = None

    def _transition(self, target: SessionStatus) -> None:
        if target not in ALLOWED_TRANSITIONS[self.status]:
            raise SessionStateError(
                f"Cannot move session from '{self.status.value}' to '{target.value}'"
            )
        logger.debug(f"Session: {self.status.value} -> {target.value}")
        self.status = target

    def begin(self, source: str) -> None:
        """Start loading a new dataset, discarding any previous result."""
        self._transition(SessionStatus.LOADING)
        self.source = source
        self.report = None
        self.error = None

    def complete(self, report: AnalysisReport) -> None:
        """Record a finished analysis."""
        self._transition(SessionStatus.READY)
        self.report = report

    def fail(self, message: str) -> None:
        """Record the error message to show instead of a result."""
        self._transition(SessionStatus.ERROR)
        self.error = message

    @property
    def is_ready(self) -> bool:
        return self.status == SessionStatus.READY
