"""Base check interface for content checks"""

from typing import TYPE_CHECKING

from postlint.entities import Finding, Post, Severity

if TYPE_CHECKING:
    from postlint.author_partial import AuthorPartial


class ContentCheck:
    """
    Base class for content checks.

    Checks hook into the validation of single posts, of the whole post
    collection and of the author partial. Every hook defaults to reporting
    nothing, so a check only overrides the hooks it cares about.
    """

    code: str = ""
    severity: Severity = Severity.ERROR

    def check_post(self, post: Post) -> list[Finding]:
        """
        Hook called for every post.

        Args:
            post: Post being validated

        Returns:
            Findings for this post
        """
        return []

    def check_posts(self, posts: list[Post]) -> list[Finding]:
        """
        Hook called once with every loaded post.

        Args:
            posts: All posts of the run

        Returns:
            Findings that involve more than one post
        """
        return []

    def check_partial(self, partial: "AuthorPartial") -> list[Finding]:
        """
        Hook called for the author partial template.

        Args:
            partial: Author partial being validated

        Returns:
            Findings for the partial
        """
        return []

    def finding(
        self,
        message: str,
        source: str,
        *,
        field: str | None = None,
        line: int | None = None,
        severity: Severity | None = None,
    ) -> Finding:
        """Build a finding carrying this check's code and default severity"""
        return Finding(
            code=self.code,
            severity=severity or self.severity,
            message=message,
            source=source,
            field=field,
            line=line,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code})"
