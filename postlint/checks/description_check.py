"""Description check for post artifacts"""

from postlint.checks.base_check import ContentCheck
from postlint.entities import Finding, Post, PostFields, Severity


class DescriptionCheck(ContentCheck):
    """Check that the description stays a short, single line summary."""

    code = "PL002"
    severity = Severity.WARNING

    def __init__(self, max_length: int = 300):
        if max_length < 1:
            raise ValueError("max_length must be positive")
        self.max_length = max_length

    def check_post(self, post: Post) -> list[Finding]:
        description = post.description.strip()
        # Blank descriptions are reported by the required fields check
        if not description:
            return []

        findings = []
        if "\n" in description:
            findings.append(
                self.finding(
                    "description spans several lines",
                    post.label,
                    field=PostFields.description.key,
                )
            )
        if len(description) > self.max_length:
            findings.append(
                self.finding(
                    f"description is {len(description)} characters long (limit {self.max_length})",
                    post.label,
                    field=PostFields.description.key,
                )
            )
        return findings
