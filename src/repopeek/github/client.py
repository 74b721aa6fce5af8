"""Read-only client for the GitHub REST API."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from repopeek.exceptions import RepositoryNotAccessibleError
from repopeek.models.analysis import FileEntry, RepoMetadata, RepoRef
from repopeek.settings import Settings, get_settings

logger = logging.getLogger(__name__)

GITHUB_ACCEPT = "application/vnd.github+json"


@dataclass(frozen=True)
class RepositorySnapshot:
    """Repository metadata plus the first page of its root listing."""

    metadata: RepoMetadata
    listing: list[FileEntry] = field(default_factory=list)


class GitHubClient:
    """Unauthenticated GitHub API reads, one attempt per call.

    An ``httpx.AsyncClient`` may be injected (tests pass one built on
    ``httpx.MockTransport``, the server shares one across requests). A client
    created here is closed by ``aclose`` or on leaving the context manager.
    """

    def __init__(
        self,
        http: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(follow_redirects=True)

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.settings.user_agent, "Accept": GITHUB_ACCEPT}

    def _repo_url(self, ref: RepoRef, suffix: str = "") -> str:
        base = self.settings.github_api_url.rstrip("/")
        return f"{base}/repos/{quote(ref.owner)}/{quote(ref.repo)}{suffix}"

    async def _get(self, url: str) -> httpx.Response:
        return await self._http.get(
            url, headers=self.headers, timeout=self.settings.request_timeout
        )

    async def get_repository(self, ref: RepoRef) -> RepoMetadata:
        """Fetch repository metadata.

        Raises:
            RepositoryNotAccessibleError: On a non-success status or a timeout.
        """
        try:
            response = await self._get(self._repo_url(ref))
        except httpx.TimeoutException as e:
            raise RepositoryNotAccessibleError(ref.owner, ref.repo) from e

        if not response.is_success:
            raise RepositoryNotAccessibleError(ref.owner, ref.repo, response.status_code)

        return RepoMetadata.model_validate(response.json())

    async def list_contents(self, ref: RepoRef) -> list[FileEntry]:
        """Fetch the root directory listing. Returns an empty list on any failure."""
        try:
            response = await self._get(self._repo_url(ref, "/contents"))
            if not response.is_success:
                logger.warning(
                    "Contents listing for %s returned %d", ref.full_name, response.status_code
                )
                return []
            payload = response.json()
            if not isinstance(payload, list):
                logger.warning("Contents listing for %s is not a list", ref.full_name)
                return []
            return [FileEntry.model_validate(item) for item in payload]
        except (httpx.HTTPError, ValidationError, ValueError) as e:
            logger.warning("Failed to list contents of %s: %s", ref.full_name, e)
            return []

    async def fetch_snapshot(self, ref: RepoRef) -> RepositorySnapshot:
        """Fetch metadata and root listing concurrently.

        If the metadata call fails, the listing request is cancelled before
        the error propagates.
        """
        listing_task = asyncio.create_task(self.list_contents(ref))
        try:
            metadata = await self.get_repository(ref)
        except BaseException:
            listing_task.cancel()
            await asyncio.gather(listing_task, return_exceptions=True)
            raise
        return RepositorySnapshot(metadata=metadata, listing=await listing_task)

    async def fetch_text(self, url: str) -> str:
        """Fetch a raw file body.

        Raises:
            httpx.HTTPError: On transport failure, timeout or non-success status.
        """
        response = await self._get(url)
        response.raise_for_status()
        return response.text

    async def fetch_json(self, url: str) -> Any:
        """Fetch and decode a raw JSON file.

        Raises:
            httpx.HTTPError: On transport failure, timeout or non-success status.
            ValueError: If the body is not valid JSON.
        """
        response = await self._get(url)
        response.raise_for_status()
        return response.json()
