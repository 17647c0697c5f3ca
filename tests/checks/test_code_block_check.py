"""Tests for CodeBlockCheck"""

from postlint.checks import CodeBlockCheck
from postlint.entities import Post, Severity
from tests.sample_content import FILE_HANDLING_POST, RESOURCE_POST


class TestCodeBlockCheck:
    """Embedded code blocks must be balanced and non-empty"""

    def test_balanced_blocks_pass(self):
        check = CodeBlockCheck()
        assert check.check_post(Post(**RESOURCE_POST)) == []
        assert check.check_post(Post(**FILE_HANDLING_POST)) == []

    def test_unclosed_block_is_an_error(self):
        post = Post(entry="Intro\n\n<pre><code>\nputs 1\n", source="a.yml")
        findings = CodeBlockCheck().check_post(post)
        assert len(findings) == 1
        assert findings[0].code == "PL003"
        assert findings[0].is_error
        assert findings[0].line == 3
        assert findings[0].field == "entry"

    def test_empty_block_is_a_warning(self):
        findings = CodeBlockCheck().check_post(Post(entry="text\n```\n```\n"))
        assert len(findings) == 1
        assert findings[0].severity == Severity.WARNING
        assert findings[0].message == "code block is empty"
        assert findings[0].line == 2

    def test_entry_without_code(self):
        assert CodeBlockCheck().check_post(Post(entry="Just prose.")) == []
