import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from functools import wraps
from typing import Any

from postlint.entities import Finding

logger = logging.getLogger(__name__)


@dataclass
class FindingLog:
    """Represents a recorded finding"""

    finding: Finding
    check: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __repr__(self) -> str:
        return f"FindingLog(finding={self.finding!r}, check={self.check!r}, timestamp={self.timestamp})"


class FindingTracker:
    """Tracks findings emitted during a context"""

    def __init__(self):
        self.findings: list[FindingLog] = []
        self._enabled: bool = False

    def enable(self):
        """Enable finding tracking"""
        self._enabled = True

    def disable(self):
        """Disable finding tracking"""
        self._enabled = False

    def is_enabled(self) -> bool:
        """Check if finding tracking is enabled"""
        return self._enabled

    def record(self, finding: Finding, check: str):
        """Record a finding together with the check that emitted it"""
        if self._enabled:
            self.findings.append(FindingLog(finding=finding, check=check))

    def get_findings(self) -> list[FindingLog]:
        """Get all recorded findings"""
        return self.findings.copy()

    def clear(self):
        """Clear all recorded findings"""
        self.findings.clear()

    def count(self) -> int:
        """Get the number of recorded findings"""
        return len(self.findings)

    def error_count(self) -> int:
        return sum(1 for log in self.findings if log.finding.is_error)

    def to_dict(self) -> list[dict[str, Any]]:
        """Convert recorded findings to a list of dictionaries"""
        return [
            {
                **log.finding.model_dump(),
                "check": log.check,
                "timestamp": log.timestamp.isoformat(),
            }
            for log in self.findings
        ]


# Context variable to store the finding tracker
_finding_tracker: ContextVar[FindingTracker | None] = ContextVar(
    "finding_tracker", default=None
)


class ValidationContext:
    """Routes findings to the tracker of the current context"""

    @classmethod
    def get_finding_tracker(cls) -> FindingTracker | None:
        """Get the current finding tracker from context"""
        return _finding_tracker.get()

    @classmethod
    def record(cls, finding: Finding, check: str):
        """Log a finding and hand it to the current tracker if available"""
        logger.debug("%s reported %s", check, finding)
        tracker = _finding_tracker.get()
        if tracker:
            tracker.record(finding, check)

    @classmethod
    @contextmanager
    def track_findings(cls) -> Iterator[FindingTracker]:
        """Context manager for finding tracking.

        Nested use shares the outer tracker:

        with ValidationContext.track_findings() as tracker:
            validator.validate_tree(root)
            print(tracker.count())
        """
        current_tracker = _finding_tracker.get()

        if current_tracker:
            # Already have a tracker, just enable it
            was_enabled = current_tracker.is_enabled()
            current_tracker.enable()
            try:
                yield current_tracker
            finally:
                if not was_enabled:
                    current_tracker.disable()
        else:
            tracker = FindingTracker()
            tracker.enable()
            token = _finding_tracker.set(tracker)
            try:
                yield tracker
            finally:
                _finding_tracker.reset(token)


def tracked(func):
    """Decorator to run a function with finding tracking enabled.

    Example:
        @tracked
        def check_site(root):
            validator.validate_tree(root)
            tracker = ValidationContext.get_finding_tracker()
            return tracker.error_count()
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        with ValidationContext.track_findings():
            return func(*args, **kwargs)

    return wrapper
