"""Tests for the postlint command line interface"""

import json

from typer.testing import CliRunner

from postlint.cli import app
from tests.sample_content import PARTIAL_MISSING_FEED

runner = CliRunner()


class TestCheckCommand:
    """Tests for 'postlint check'"""

    def test_clean_tree(self, content_dir):
        result = runner.invoke(app, ["check", str(content_dir)])
        assert result.exit_code == 0
        assert "2 post(s), 1 partial(s) checked: 0 error(s), 0 warning(s)" in result.output

    def test_errors_exit_with_one(self, content_dir):
        (content_dir / "_author.html.erb").write_text(PARTIAL_MISSING_FEED, encoding="utf-8")
        result = runner.invoke(app, ["check", str(content_dir)])
        assert result.exit_code == 1
        assert "PL101 error: unknown author accessor '@author.twitter'" in result.output

    def test_warnings_pass_unless_strict(self, content_dir):
        (content_dir / "posts" / "copy.json").write_text(
            json.dumps({"title": "Closing files on time", "description": "d", "entry": "e"}),
            encoding="utf-8",
        )
        assert runner.invoke(app, ["check", str(content_dir)]).exit_code == 0
        assert runner.invoke(app, ["check", "--strict", str(content_dir)]).exit_code == 1

    def test_json_output(self, content_dir):
        (content_dir / "posts" / "empty.yml").write_text("title: Empty\n", encoding="utf-8")
        result = runner.invoke(app, ["check", "--format", "json", str(content_dir)])
        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["posts_checked"] == 3
        assert data["errors"] == 2
        assert [entry["field"] for entry in data["findings"]] == ["description", "entry"]
        assert all(entry["check"] == "RequiredFieldsCheck" for entry in data["findings"])

    def test_config_file(self, content_dir, tmp_path):
        (content_dir / "_author.html.erb").write_text("<div></div>", encoding="utf-8")
        config = tmp_path / "postlint.yaml"
        config.write_text("disabled_checks: [PL101]\n", encoding="utf-8")
        result = runner.invoke(app, ["check", "--config", str(config), str(content_dir)])
        assert result.exit_code == 0

    def test_invalid_config(self, content_dir, tmp_path):
        config = tmp_path / "postlint.yaml"
        config.write_text("bogus: 1\n", encoding="utf-8")
        result = runner.invoke(app, ["check", "--config", str(config), str(content_dir)])
        assert result.exit_code == 2
        assert "Error:" in result.output

    def test_missing_path(self, tmp_path):
        result = runner.invoke(app, ["check", str(tmp_path / "missing")])
        assert result.exit_code == 2
        assert "no such file or directory" in result.output

    def test_unknown_format(self, content_dir):
        result = runner.invoke(app, ["check", "--format", "xml", str(content_dir)])
        assert result.exit_code == 2


class TestAccessorsCommand:
    """Tests for 'postlint accessors'"""

    def test_lists_references(self, content_dir):
        result = runner.invoke(app, ["accessors", str(content_dir / "_author.html.erb")])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "2:13 @author.gravatar",
            "3:12 @author.index_uri",
            "4:12 @author.feed_uri",
        ]

    def test_missing_partial(self, tmp_path):
        result = runner.invoke(app, ["accessors", str(tmp_path / "missing.html")])
        assert result.exit_code == 2
