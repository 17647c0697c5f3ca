"""Code block check for post entries"""

from postlint.checks.base_check import ContentCheck
from postlint.entities import Finding, Post, PostFields, Severity
from postlint.markup import find_code_blocks, unbalanced_code_markers


class CodeBlockCheck(ContentCheck):
    """
    Check the preformatted code blocks embedded in an entry.

    Unbalanced ``<pre>`` tags or backtick fences swallow the rest of the
    article when rendered, so they are errors. An empty block is only a
    warning.
    """

    code = "PL003"

    def check_post(self, post: Post) -> list[Finding]:
        entry_field = PostFields.entry.key
        findings = [
            self.finding(marker.message, post.label, field=entry_field, line=marker.line)
            for marker in unbalanced_code_markers(post.entry)
        ]

        for block in find_code_blocks(post.entry):
            if block.is_empty:
                findings.append(
                    self.finding(
                        "code block is empty",
                        post.label,
                        field=entry_field,
                        line=block.start_line,
                        severity=Severity.WARNING,
                    )
                )
        return findings
