"""Shared test fixtures."""

import httpx
import pytest

from repopeek.github.client import GitHubClient
from repopeek.settings import Settings

API = "https://api.github.com"
OWNER = "octo"
REPO = "demo"
RAW = f"https://raw.githubusercontent.com/{OWNER}/{REPO}/main"


def make_entry(name: str, type: str = "file", size: int = 100) -> dict:
    """Build a contents API entry the way GitHub returns it."""
    return {
        "name": name,
        "path": name,
        "sha": "0" * 40,
        "size": size if type == "file" else 0,
        "type": type,
        "url": f"{API}/repos/{OWNER}/{REPO}/contents/{name}?ref=main",
        "html_url": f"https://github.com/{OWNER}/{REPO}/blob/main/{name}",
        "git_url": f"{API}/repos/{OWNER}/{REPO}/git/blobs/{'0' * 40}",
        "download_url": f"{RAW}/{name}" if type == "file" else None,
        "_links": {"self": f"{API}/repos/{OWNER}/{REPO}/contents/{name}"},
    }


class FakeGitHub:
    """Routes for an httpx.MockTransport standing in for GitHub."""

    def __init__(self) -> None:
        self.routes: dict[str, httpx.Response | Exception] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        url: str,
        status: int = 200,
        json=None,
        text: str | None = None,
        error: Exception | None = None,
    ) -> None:
        if error is not None:
            self.routes[url] = error
        elif text is not None:
            self.routes[url] = httpx.Response(status, text=text)
        else:
            self.routes[url] = httpx.Response(status, json=json)

    def serve_repo(
        self,
        entries: list[dict],
        language: str | None = "JavaScript",
        files: dict[str, str] | None = None,
    ) -> None:
        """Register metadata, root listing and raw file bodies for octo/demo."""
        self.add(
            f"{API}/repos/{OWNER}/{REPO}",
            json={
                "id": 1,
                "name": REPO,
                "full_name": f"{OWNER}/{REPO}",
                "language": language,
                "default_branch": "main",
                "stargazers_count": 3,
            },
        )
        self.add(f"{API}/repos/{OWNER}/{REPO}/contents", json=entries)
        for name, body in (files or {}).items():
            self.add(f"{RAW}/{name}", text=body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(str(request.url))
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        if isinstance(route, Exception):
            raise route
        return route

    def requested(self, url: str) -> bool:
        return any(str(r.url) == url for r in self.requests)


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def github_client(fake_github, settings) -> GitHubClient:
    """GitHubClient whose requests are answered by fake_github."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(fake_github.handler))
    return GitHubClient(http=http, settings=settings)


@pytest.fixture
def repo_url() -> str:
    return f"https://github.com/{OWNER}/{REPO}"


@pytest.fixture(name="make_entry")
def make_entry_fixture():
    """Factory for contents API entries."""
    return make_entry
