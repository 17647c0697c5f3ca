"""Author accessor check for the author partial"""

from typing import TYPE_CHECKING

from postlint.checks.base_check import ContentCheck
from postlint.entities import Author, Finding

if TYPE_CHECKING:
    from postlint.author_partial import AuthorPartial


class AuthorAccessorCheck(ContentCheck):
    """
    Check that the author partial references exactly the three author
    accessors: gravatar, index_uri and feed_uri.

    Repeated references to the same accessor are fine; a missing accessor or
    one the rendering layer does not provide is an error.
    """

    code = "PL101"

    def check_partial(self, partial: "AuthorPartial") -> list[Finding]:
        expected = Author.accessor_names()
        findings = []

        first_line: dict[str, int] = {}
        for reference in partial.references:
            first_line.setdefault(reference.name, reference.line)

        for name, line in first_line.items():
            if name not in expected:
                findings.append(
                    self.finding(
                        f"unknown author accessor '@author.{name}'",
                        partial.label,
                        line=line,
                    )
                )

        for name in sorted(expected - first_line.keys()):
            findings.append(
                self.finding(
                    f"author accessor '@author.{name}' is never referenced",
                    partial.label,
                )
            )
        return findings
