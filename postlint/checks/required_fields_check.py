"""Required fields check for post artifacts"""

from postlint.checks.base_check import ContentCheck
from postlint.entities import Finding, Post, PostFields


class RequiredFieldsCheck(ContentCheck):
    """
    Check that every post carries a title, a description and an entry.

    A field counts as missing when it is absent from the artifact or holds
    only whitespace.
    """

    code = "PL001"

    def check_post(self, post: Post) -> list[Finding]:
        findings = []
        for field in PostFields.fields():
            value = getattr(post, field.key)
            if not value.strip():
                findings.append(
                    self.finding(
                        f"{field} is missing or blank",
                        post.label,
                        field=field.key,
                    )
                )
        return findings
