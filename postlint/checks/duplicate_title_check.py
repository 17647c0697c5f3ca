"""Duplicate title check across posts"""

from postlint.checks.base_check import ContentCheck
from postlint.entities import Finding, Post, PostFields, Severity


def _normalize(title: str) -> str:
    return " ".join(title.split()).casefold()


class DuplicateTitleCheck(ContentCheck):
    """Check that no two posts share a title, ignoring case and spacing."""

    code = "PL005"
    severity = Severity.WARNING

    def check_posts(self, posts: list[Post]) -> list[Finding]:
        first_seen: dict[str, Post] = {}
        findings = []
        for post in posts:
            key = _normalize(post.title)
            if not key:
                continue
            if key in first_seen:
                findings.append(
                    self.finding(
                        f"title {post.title.strip()!r} is already used by {first_seen[key].label}",
                        post.label,
                        field=PostFields.title.key,
                    )
                )
            else:
                first_seen[key] = post
        return findings
