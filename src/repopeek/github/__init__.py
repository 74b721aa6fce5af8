"""GitHub access: URL parsing and REST API reads."""

from repopeek.github.client import GitHubClient, RepositorySnapshot
from repopeek.github.url import parse_repo_url

__all__ = ["GitHubClient", "RepositorySnapshot", "parse_repo_url"]
