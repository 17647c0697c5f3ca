"""Content checks package"""

from postlint.checks.author_accessor_check import AuthorAccessorCheck
from postlint.checks.base_check import ContentCheck
from postlint.checks.code_block_check import CodeBlockCheck
from postlint.checks.description_check import DescriptionCheck
from postlint.checks.duplicate_title_check import DuplicateTitleCheck
from postlint.checks.hyperlink_check import HyperlinkCheck
from postlint.checks.required_fields_check import RequiredFieldsCheck

__all__ = [
    "ContentCheck",
    "RequiredFieldsCheck",
    "DescriptionCheck",
    "CodeBlockCheck",
    "HyperlinkCheck",
    "DuplicateTitleCheck",
    "AuthorAccessorCheck",
]
