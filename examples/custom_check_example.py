"""
Example adding a custom check to the validator.

Checks only override the hooks they need: check_post, check_posts or
check_partial. Everything else defaults to reporting nothing.
"""

from pathlib import Path

from postlint import ContentCheck, ContentValidator, Post, Severity, ValidatorConfig
from postlint.report_context import ValidationContext


class TodoMarkerCheck(ContentCheck):
    """Flag entries that still carry editorial TODO markers"""

    code = "X001"
    severity = Severity.WARNING

    def check_post(self, post: Post):
        findings = []
        for number, line in enumerate(post.entry.splitlines(), start=1):
            if "TODO" in line:
                findings.append(self.finding("editorial TODO left in entry", post.label, field="entry", line=number))
        return findings


def main():
    config = ValidatorConfig()
    checks = config.enabled_checks() + [TodoMarkerCheck()]
    validator = ContentValidator(ValidatorConfig(checks=checks))

    # Tracking records which check emitted each finding
    with ValidationContext.track_findings() as tracker:
        validator.validate_tree(Path(__file__).parent / "content")

    for log in tracker.get_findings():
        print(f"{log.check}: {log.finding}")
    print(f"{tracker.count()} finding(s)")


if __name__ == "__main__":
    main()
