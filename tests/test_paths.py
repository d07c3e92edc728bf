# Tests for storage path helpers.
# Created: 2026-10-19

import pytest

from pubfiles.paths import (
    basename,
    join_path,
    normalize_path,
    parent_path,
    relative_to_base,
    url_path,
)


class TestNormalizePath:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            (None, ""),
            ("", ""),
            ("/", ""),
            ("docs", "docs"),
            ("/docs/", "docs"),
            ("docs//sub/", "docs/sub"),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_path(raw) == expected


class TestParentPath:
    def test_single_segment_parent_is_root(self):
        assert parent_path("docs") == ""

    def test_drops_last_segment(self):
        assert parent_path("docs/sub") == "docs"
        assert parent_path("a/b/c.txt") == "a/b"

    def test_root_has_no_parent(self):
        with pytest.raises(ValueError):
            parent_path("")


class TestJoinAndBasename:
    def test_join_from_root(self):
        assert join_path("", "docs") == "docs"

    def test_join_nested(self):
        assert join_path("docs", "sub") == "docs/sub"
        assert join_path("docs/", "/sub/") == "docs/sub"

    def test_basename(self):
        assert basename("reports/q1.pdf") == "q1.pdf"
        assert basename("q1.pdf") == "q1.pdf"
        assert basename("") == ""


class TestRelativeToBase:
    BASE = "/download/abc"

    def test_base_itself_is_root(self):
        assert relative_to_base("/download/abc", self.BASE) == ""
        assert relative_to_base("/download/abc/", self.BASE) == ""

    def test_nested_path(self):
        assert relative_to_base("/download/abc/docs/sub", self.BASE) == "docs/sub"

    def test_outside_base(self):
        assert relative_to_base("/files/abc/docs", self.BASE) is None
        assert relative_to_base("/", self.BASE) is None

    def test_sibling_storage_prefix_is_outside(self):
        assert relative_to_base("/download/abcdef/docs", self.BASE) is None

    def test_query_and_fragment_ignored(self):
        assert relative_to_base("/download/abc/docs?q=x#top", self.BASE) == "docs"

    def test_full_url(self):
        assert relative_to_base("https://host/download/abc/docs", self.BASE) == "docs"

    def test_percent_decoded(self):
        assert relative_to_base("/download/abc/my%20docs", self.BASE) == "my docs"

    def test_url_path_defaults_to_slash(self):
        assert url_path("https://host") == "/"
