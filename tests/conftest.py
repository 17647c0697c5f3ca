import json

import pytest
import yaml

from postlint.validator import ContentValidator
from tests.sample_content import AUTHOR_PARTIAL, FILE_HANDLING_POST, RESOURCE_POST


@pytest.fixture
def content_dir(tmp_path):
    """Write a clean content tree: two posts and the author partial."""
    posts = tmp_path / "posts"
    posts.mkdir()
    (posts / "remote-resources.yml").write_text(
        yaml.safe_dump(RESOURCE_POST, sort_keys=False), encoding="utf-8"
    )
    (posts / "closing-files.json").write_text(json.dumps(FILE_HANDLING_POST), encoding="utf-8")
    (tmp_path / "_author.html.erb").write_text(AUTHOR_PARTIAL, encoding="utf-8")
    return tmp_path


@pytest.fixture
def validator():
    return ContentValidator()
