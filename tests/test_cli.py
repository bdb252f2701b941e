"""Tests for the portfolio command line interface."""

import json

import pytest
from typer.testing import CliRunner

from portfolio.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestCLIMain:
    def test_help_lists_commands(self, runner):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("build", "posts", "breakpoint"):
            assert command in result.stdout


class TestBuildCommand:
    def test_builds_site(self, runner, content_dir, tmp_path):
        out = tmp_path / "site"
        result = runner.invoke(app, ["--content-dir", str(content_dir), "build", "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert (out / "index.html").is_file()
        assert (out / "blog" / "charlie" / "index.html").is_file()
        assert "[BUILD]" in result.stdout

    def test_no_drafts(self, runner, content_dir, tmp_path):
        out = tmp_path / "site"
        result = runner.invoke(
            app, ["--content-dir", str(content_dir), "build", "-o", str(out), "--no-drafts"]
        )
        assert result.exit_code == 0, result.output
        assert not (out / "blog" / "charlie").exists()

    def test_invalid_content_exits_1(self, runner, content_dir, tmp_path):
        (content_dir / "posts" / "broken.md").write_text("---\ntitle: [\n---\n", encoding="utf-8")
        result = runner.invoke(
            app, ["--content-dir", str(content_dir), "build", "-o", str(tmp_path / "site")]
        )
        assert result.exit_code == 1


    def test_refuses_to_clean_content_dir(self, runner, content_dir):
        result = runner.invoke(app, ["--content-dir", str(content_dir), "build", "-o", str(content_dir)])
        assert result.exit_code == 1
        assert (content_dir / "posts" / "alpha.md").is_file()


class TestPostsCommand:
    def test_table(self, runner, content_dir):
        result = runner.invoke(app, ["--log-level", "ERROR", "--content-dir", str(content_dir), "posts"])
        assert result.exit_code == 0, result.output
        lines = [line for line in result.stdout.splitlines() if line.strip()]
        assert lines[0].startswith("2023-06-01")
        assert "Charlie" not in result.stdout

    def test_json_with_limit(self, runner, content_dir):
        result = runner.invoke(
            app, ["--log-level", "ERROR", "--content-dir", str(content_dir), "posts", "--limit", "2", "--format", "json"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert [p["slug"] for p in data] == ["bravo", "bundle"]

    def test_empty(self, runner, tmp_path):
        result = runner.invoke(app, ["--content-dir", str(tmp_path), "posts"])
        assert result.exit_code == 0
        assert "No published posts." in result.stdout


class TestBreakpointCommand:
    def test_with_model(self, runner):
        result = runner.invoke(app, ["breakpoint", "400"])
        assert result.exit_code == 0
        assert "mobile-large" in result.stdout
        assert "55" in result.stdout

    def test_without_model(self, runner):
        result = runner.invoke(app, ["breakpoint", "300"])
        assert "mobile-small (no 3D model)" in result.stdout
