"""Tests for finding tracking"""

from postlint.entities import Finding, Post, Severity
from postlint.report_context import FindingTracker, ValidationContext, tracked
from postlint.validator import ContentValidator


def _finding(code="PL001", severity=Severity.ERROR):
    return Finding(code=code, severity=severity, message="m", source="s")


class TestFindingTracker:
    """Test the tracker on its own"""

    def test_disabled_tracker_records_nothing(self):
        tracker = FindingTracker()
        tracker.record(_finding(), "RequiredFieldsCheck")
        assert tracker.count() == 0

    def test_records_when_enabled(self):
        tracker = FindingTracker()
        tracker.enable()
        tracker.record(_finding(), "RequiredFieldsCheck")
        tracker.record(_finding("PL002", Severity.WARNING), "DescriptionCheck")
        assert tracker.count() == 2
        assert tracker.error_count() == 1
        assert [log.check for log in tracker.get_findings()] == [
            "RequiredFieldsCheck",
            "DescriptionCheck",
        ]

    def test_get_findings_returns_a_copy(self):
        tracker = FindingTracker()
        tracker.enable()
        tracker.record(_finding(), "RequiredFieldsCheck")
        tracker.get_findings().clear()
        assert tracker.count() == 1

    def test_clear(self):
        tracker = FindingTracker()
        tracker.enable()
        tracker.record(_finding(), "RequiredFieldsCheck")
        tracker.clear()
        assert tracker.count() == 0

    def test_to_dict(self):
        tracker = FindingTracker()
        tracker.enable()
        tracker.record(_finding(), "RequiredFieldsCheck")
        entry = tracker.to_dict()[0]
        assert entry["code"] == "PL001"
        assert entry["severity"] == "error"
        assert entry["check"] == "RequiredFieldsCheck"
        assert "timestamp" in entry


class TestValidationContext:
    """Test context-local tracking"""

    def test_no_tracker_outside_context(self):
        assert ValidationContext.get_finding_tracker() is None
        # Recording without a tracker is a no-op
        ValidationContext.record(_finding(), "RequiredFieldsCheck")

    def test_validator_findings_are_tracked(self):
        validator = ContentValidator()
        with ValidationContext.track_findings() as tracker:
            findings = validator.validate_post(Post(title="T"))
        assert tracker.count() == len(findings) == 2
        assert {log.check for log in tracker.get_findings()} == {"RequiredFieldsCheck"}
        assert ValidationContext.get_finding_tracker() is None

    def test_nested_contexts_share_the_tracker(self):
        with ValidationContext.track_findings() as outer:
            with ValidationContext.track_findings() as inner:
                ValidationContext.record(_finding(), "RequiredFieldsCheck")
            assert inner is outer
            assert outer.is_enabled()
        assert outer.count() == 1

    def test_tracked_decorator(self):
        @tracked
        def run():
            ContentValidator().validate_post(Post())
            return ValidationContext.get_finding_tracker().count()

        assert run() == 3
        assert ValidationContext.get_finding_tracker() is None
