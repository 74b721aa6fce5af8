"""Tests for GitHub URL parsing."""

import pytest

from repopeek.exceptions import InvalidUrlError
from repopeek.github.url import parse_repo_url


class TestParseRepoUrl:
    """Test parse_repo_url function."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/octo/demo",
            "https://github.com/octo/demo/",
            "https://github.com/octo/demo.git",
            "https://github.com/octo/demo.git/tree/main",
            "https://GitHub.com/octo/demo.GIT",
            "https://github.com/octo/demo/tree/main/src",
            "https://github.com/octo/demo?tab=readme",
            "http://www.github.com/octo/demo",
            "github.com/octo/demo",
            "  https://github.com/octo/demo  ",
        ],
    )
    def test_extracts_owner_and_repo(self, url):
        """Valid repository URLs yield owner and repo with .git stripped."""
        ref = parse_repo_url(url)
        assert ref.owner == "octo"
        assert ref.repo == "demo"

    def test_git_inside_name_kept(self):
        """Only a trailing .git is stripped."""
        assert parse_repo_url("https://github.com/octo/demo.github.io").repo == "demo.github.io"

    def test_keeps_dots_and_dashes(self):
        """Repository names may contain dots and dashes."""
        ref = parse_repo_url("https://github.com/vercel/next.js-commerce")
        assert ref.owner == "vercel"
        assert ref.repo == "next.js-commerce"

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "not a url",
            "https://github.com/octo",
            "https://github.com/octo/",
            "https://github.com/",
            "https://gitlab.com/octo/demo",
            "https://example.com/github.com/octo/demo",
            "https://github.com/octo/.git",
        ],
    )
    def test_rejects_malformed_urls(self, url):
        """Anything without the github.com/owner/repo shape is rejected."""
        with pytest.raises(InvalidUrlError):
            parse_repo_url(url)
