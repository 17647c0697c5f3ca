"""Hyperlink check for post entries"""

from collections.abc import Iterable
from urllib.parse import urlsplit

from postlint.checks.base_check import ContentCheck
from postlint.entities import Finding, Post, PostFields, Severity
from postlint.markup import find_links

DEFAULT_SCHEMES = ("http", "https", "mailto")


class HyperlinkCheck(ContentCheck):
    """
    Check that inline hyperlinks in an entry are well formed.

    Links are never fetched. A target must be non-empty and either relative
    or use one of the allowed schemes; absolute web links need a host.
    """

    code = "PL004"
    severity = Severity.WARNING

    def __init__(self, allowed_schemes: Iterable[str] = DEFAULT_SCHEMES):
        self.allowed_schemes = frozenset(scheme.lower() for scheme in allowed_schemes)

    def _problem(self, target: str) -> str | None:
        if not target:
            return "link has an empty target"
        try:
            parts = urlsplit(target)
        except ValueError:
            return f"link target {target!r} is not a valid URL"
        if not parts.scheme:
            return None
        if parts.scheme.lower() not in self.allowed_schemes:
            return f"link target {target!r} uses unsupported scheme {parts.scheme!r}"
        if parts.scheme.lower() in ("http", "https") and not parts.netloc:
            return f"link target {target!r} has no host"
        return None

    def check_post(self, post: Post) -> list[Finding]:
        findings = []
        for link in find_links(post.entry):
            problem = self._problem(link.target)
            if problem:
                findings.append(
                    self.finding(
                        problem,
                        post.label,
                        field=PostFields.entry.key,
                        line=link.line,
                    )
                )
        return findings
