"""Environment variable discovery from .env.example."""

import logging

import httpx

from repopeek.github.client import GitHubClient
from repopeek.models.analysis import FileEntry

logger = logging.getLogger(__name__)

ENV_FILE = ".env"
ENV_EXAMPLE_FILE = ".env.example"


def has_env_file(listing: list[FileEntry]) -> bool:
    """True if the listing contains a literal .env entry."""
    return any(entry.name == ENV_FILE for entry in listing)


def parse_env_example(content: str) -> list[str]:
    """Return variable names from .env.example content, in file order.

    Keeps lines that are non-blank, not comments and contain ``=``; the name
    is the text before the first ``=``. Duplicates are kept.
    """
    names = []
    for line in content.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        names.append(stripped.split("=", 1)[0].strip())
    return names


async def extract_env_vars(client: GitHubClient, listing: list[FileEntry]) -> list[str]:
    """Fetch .env.example from the listing and extract variable names.

    Never raises for upstream problems: a missing or unreadable file yields [].
    """
    entry = next((e for e in listing if e.name == ENV_EXAMPLE_FILE), None)
    if entry is None:
        return []
    if not entry.download_url:
        logger.warning(".env.example has no download URL")
        return []

    try:
        content = await client.fetch_text(entry.download_url)
    except httpx.HTTPError as e:
        logger.warning("Failed to read .env.example: %s", e)
        return []

    return parse_env_example(content)
