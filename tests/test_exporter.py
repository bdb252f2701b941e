"""Tests for portfolio.services.exporter."""

import json
import zipfile

import pytest

from portfolio.services.exporter import (
    UnsafeOutputDirError,
    build_archive,
    build_site,
    check_output_dir,
    iter_site_files,
)


class TestIterSiteFiles:
    def test_one_page_per_post(self, store, site):
        names = {name for name, _ in iter_site_files(store, site)}
        assert {"index.html", "blog/index.html", "index.json", "static/site.css"} <= names
        for slug in ("alpha", "bravo", "bundle", "charlie"):
            assert f"blog/{slug}/index.html" in names

    def test_drafts_skipped_when_excluded(self, store, site):
        names = {name for name, _ in iter_site_files(store, site, include_drafts=False)}
        assert "blog/charlie/index.html" not in names
        assert "blog/alpha/index.html" in names

    def test_bundle_assets_copied(self, store, site):
        files = dict(iter_site_files(store, site))
        assert files["blog/bundle/pic.png"].startswith(b"\x89PNG")

    def test_index_json_lists_published_posts(self, store, site):
        files = dict(iter_site_files(store, site))
        index = json.loads(files["index.json"])
        assert index["posts_found"] == 3
        assert [p["slug"] for p in index["posts"]] == ["bravo", "bundle", "alpha"]
        assert index["posts"][0]["url"] == "/blog/bravo"


class TestBuildSite:
    def test_writes_files(self, store, site, tmp_path):
        out = tmp_path / "public"
        written = build_site(store, site, out)
        assert (out / "index.html").is_file()
        assert (out / "blog" / "bravo" / "index.html").is_file()
        assert all(path.is_file() for path in written)

    def test_clean_removes_stale_files(self, store, site, tmp_path):
        out = tmp_path / "public"
        out.mkdir()
        (out / "stale.html").write_text("old", encoding="utf-8")
        build_site(store, site, out)
        assert not (out / "stale.html").exists()

    def test_keep_existing_files(self, store, site, tmp_path):
        out = tmp_path / "public"
        out.mkdir()
        (out / "CNAME").write_text("example.com", encoding="utf-8")
        build_site(store, site, out, clean=False)
        assert (out / "CNAME").exists()

    def test_home_post_limit(self, store, site, tmp_path):
        out = tmp_path / "public"
        build_site(store, site, out, home_post_limit=1)
        home = (out / "index.html").read_text(encoding="utf-8")
        assert "/blog/bravo" in home
        assert "/blog/alpha" not in home


class TestCheckOutputDir:
    def test_refuses_content_dir(self, store, site, content_dir):
        with pytest.raises(UnsafeOutputDirError):
            build_site(store, site, content_dir, content_dir=content_dir)
        assert (content_dir / "posts" / "alpha.md").is_file()

    def test_refuses_parent_of_content_dir(self, content_dir):
        with pytest.raises(UnsafeOutputDirError):
            check_output_dir(content_dir.parent, content_dir)

    def test_refuses_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / "keep.txt").write_text("x", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        with pytest.raises(UnsafeOutputDirError):
            check_output_dir(tmp_path)

    def test_sibling_directory_is_allowed(self, content_dir, tmp_path):
        check_output_dir(tmp_path / "public", content_dir)

    def test_no_check_without_clean(self, store, site, content_dir):
        build_site(store, site, content_dir / "public", clean=False, content_dir=content_dir)
        assert (content_dir / "public" / "index.html").is_file()


class TestBuildArchive:
    def test_zip_contents(self, store, site):
        buffer = build_archive(store, site)
        with zipfile.ZipFile(buffer) as zf:
            names = set(zf.namelist())
            assert "index.html" in names
            assert "blog/alpha/index.html" in names
            assert b"Alpha" in zf.read("blog/alpha/index.html")
