# FILE PATH: tests/unit/test_pattern_processing.py
# LOCATION: tests/unit/test_pattern_processing.py
# DESCRIPTION: Unit tests for URL parsing, exclude patterns and name matching

"""
Unit tests for the small parsing helpers used before any network call.
"""

import pytest

from github_client import RepositoryUrlError, parse_repo_url
from readme_generator import parse_patterns
from repo_tree import IGNORE_DIRS, should_ignore_name


@pytest.mark.unit
class TestRepoUrlParsing:
    """Extract owner/repo from user input."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://github.com/octo/demo", ("octo", "demo")),
            ("https://github.com/octo/demo.git", ("octo", "demo")),
            ("https://github.com/octo/demo/", ("octo", "demo")),
            ("https://github.com/octo/demo/tree/main/src", ("octo", "demo")),
            ("github.com/octo/demo", ("octo", "demo")),
            ("  https://www.github.com/octo/my.repo  ", ("octo", "my.repo")),
            ("https://github.com/octo/demo?tab=readme", ("octo", "demo")),
        ],
    )
    def test_valid_urls(self, url, expected):
        assert parse_repo_url(url) == expected

    def test_only_git_suffix_is_stripped(self):
        assert parse_repo_url("https://github.com/octo/my.github.io.git") == (
            "octo",
            "my.github.io",
        )

    @pytest.mark.parametrize("url", ["", "   "])
    def test_blank_input(self, url):
        with pytest.raises(RepositoryUrlError, match="Please enter"):
            parse_repo_url(url)

    @pytest.mark.parametrize(
        "url",
        [
            "https://gitlab.com/octo/demo",
            "https://github.com/octo",
            "not a url",
        ],
    )
    def test_invalid_urls(self, url):
        with pytest.raises(RepositoryUrlError, match="Invalid GitHub URL"):
            parse_repo_url(url)

    def test_url_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_repo_url("nope")


@pytest.mark.unit
class TestPatternParsing:
    """Test comma-separated and space-separated pattern parsing."""

    def test_parse_single_pattern(self):
        assert parse_patterns(["docs"]) == ["docs"]

    def test_parse_mixed_separators(self):
        assert parse_patterns(["docs,examples", "tmp"]) == ["docs", "examples", "tmp"]

    def test_parse_empty_patterns(self):
        assert parse_patterns([]) == []

    def test_parse_whitespace_handling(self):
        assert parse_patterns([" docs , examples ,, "]) == ["docs", "examples"]


@pytest.mark.unit
class TestShouldIgnoreName:
    """Match directory entry names against the ignore-set."""

    @pytest.mark.parametrize("name", list(IGNORE_DIRS))
    def test_default_ignore_set(self, name):
        assert should_ignore_name(name, IGNORE_DIRS) is True

    @pytest.mark.parametrize("name", ["src", "builder", "my_dist", ".github", "Build"])
    def test_similar_names_are_kept(self, name):
        assert should_ignore_name(name, IGNORE_DIRS) is False

    def test_wildcard_patterns(self):
        assert should_ignore_name("cache.tmp", ["*.tmp"]) is True
        assert should_ignore_name("cache.txt", ["*.tmp"]) is False

    def test_trailing_slash_in_pattern(self):
        assert should_ignore_name("htmlcov", ["htmlcov/"]) is True

    def test_empty_patterns_ignore_nothing(self):
        assert should_ignore_name("node_modules", []) is False
