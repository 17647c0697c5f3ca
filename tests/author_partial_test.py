"""Tests for author partial inspection"""

from pathlib import Path

from postlint.author_partial import AuthorPartial, find_accessor_references
from tests.sample_content import AUTHOR_PARTIAL, PARTIAL_MISSING_FEED


class TestAccessorReferences:
    """Test locating @author accessor references"""

    def test_references_in_order(self):
        references = find_accessor_references(AUTHOR_PARTIAL)
        assert [(ref.name, ref.line) for ref in references] == [
            ("gravatar", 2),
            ("index_uri", 3),
            ("feed_uri", 4),
        ]

    def test_reference_column(self):
        references = find_accessor_references("  @author.gravatar")
        assert references[0].column == 3

    def test_other_objects_are_ignored(self):
        assert find_accessor_references("@post.title @authors.count author.name") == []

    def test_no_references(self):
        assert find_accessor_references("<div></div>") == []


class TestAuthorPartial:
    """Test the AuthorPartial entity"""

    def test_accessor_names_are_distinct(self):
        partial = AuthorPartial.from_text("@author.gravatar @author.gravatar @author.feed_uri")
        assert partial.accessor_names == ["gravatar", "feed_uri"]
        assert len(partial.references) == 3

    def test_accessor_names_follow_text(self):
        partial = AuthorPartial.from_text(PARTIAL_MISSING_FEED, source="_author.html")
        assert partial.accessor_names == ["gravatar", "index_uri", "twitter"]
        assert partial.source == Path("_author.html")

    def test_label(self):
        assert AuthorPartial.from_text("", source="views/_author.html").label == str(
            Path("views/_author.html")
        )
        assert AuthorPartial.from_text("").label == "<author partial>"

    def test_dump_includes_accessor_names(self):
        partial = AuthorPartial.from_text(AUTHOR_PARTIAL)
        assert partial.model_dump()["accessor_names"] == ["gravatar", "index_uri", "feed_uri"]
