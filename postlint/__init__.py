"""postlint: content integrity checks for blog posts and author partials"""

from postlint.author_partial import AuthorPartial
from postlint.checks import ContentCheck
from postlint.entities import Author, AuthorAccessor, Finding, Post, Severity
from postlint.validator import ContentValidator, ValidationReport, ValidatorConfig

__all__ = [
    "ContentValidator",
    "ValidatorConfig",
    "ValidationReport",
    "ContentCheck",
    "Post",
    "Author",
    "AuthorAccessor",
    "AuthorPartial",
    "Finding",
    "Severity",
]
