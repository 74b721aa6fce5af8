"""Framework and language detection from a root directory listing."""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from repopeek.github.client import GitHubClient
from repopeek.models.analysis import FileEntry, RepoMetadata

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"
STATIC_WEBSITE = "Static Website"
NODE_RUNTIME = "Node.js"

PACKAGE_JSON = "package.json"
REQUIREMENTS_TXT = "requirements.txt"
DOCKERFILE = "Dockerfile"

# Checked in order; the first dependency present wins ("next" before "react").
NODE_FRAMEWORKS: list[tuple[str, str]] = [
    ("next", "Next.js"),
    ("react", "React"),
    ("vue", "Vue.js"),
    ("express", "Express.js"),
    ("svelte", "Svelte"),
]

STATIC_EXTENSIONS = (".html", ".js", ".css")


@dataclass(frozen=True)
class Detection:
    """Detected framework and language."""

    framework: str
    language: str


def find_entry(listing: list[FileEntry], name: str) -> FileEntry | None:
    """Return the listing entry with exactly this name, if any."""
    return next((entry for entry in listing if entry.name == name), None)


def _from_package_json(package_json: Any, language: str) -> Detection:
    if not isinstance(package_json, dict):
        # Unreadable package.json still means a JavaScript runtime project.
        return Detection(framework=NODE_RUNTIME, language=language)

    framework = UNKNOWN
    dependencies = package_json.get("dependencies")
    if isinstance(dependencies, dict):
        for dependency, name in NODE_FRAMEWORKS:
            if dependency in dependencies:
                framework = name
                break

    # Any Node project is reported as TypeScript, whatever its file extensions.
    return Detection(framework=framework, language="TypeScript")


def _has_static_assets(listing: list[FileEntry]) -> bool:
    return any(
        entry.is_file and entry.name.lower().endswith(STATIC_EXTENSIONS) for entry in listing
    )


def classify(
    listing: list[FileEntry],
    metadata_language: str | None,
    package_json: Any = None,
) -> Detection:
    """Classify a repository from its listing. First match wins.

    Order: package.json, requirements.txt, Dockerfile, static web files, then
    the language GitHub reports for the repository.

    Args:
        listing: Root directory entries.
        metadata_language: Primary language from repository metadata.
        package_json: Decoded package.json, or None if it could not be read.
            Only consulted when the listing contains a package.json entry.
    """
    language = metadata_language or UNKNOWN

    if find_entry(listing, PACKAGE_JSON):
        return _from_package_json(package_json, language)
    if find_entry(listing, REQUIREMENTS_TXT):
        return Detection(framework="Python", language="Python")
    if find_entry(listing, DOCKERFILE):
        return Detection(framework="Docker", language=language)
    if _has_static_assets(listing):
        return Detection(framework=STATIC_WEBSITE, language="JavaScript")
    return Detection(framework=language, language=language)


async def load_package_json(client: GitHubClient, listing: list[FileEntry]) -> Any:
    """Fetch and decode package.json from the listing. None if absent or unreadable."""
    entry = find_entry(listing, PACKAGE_JSON)
    if entry is None:
        return None
    if not entry.download_url:
        logger.warning("package.json has no download URL")
        return None

    try:
        return await client.fetch_json(entry.download_url)
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("Failed to read package.json: %s", e)
        return None


async def detect_framework(
    client: GitHubClient,
    listing: list[FileEntry],
    metadata: RepoMetadata,
) -> Detection:
    """Fetch package.json if present and classify the repository."""
    package_json = await load_package_json(client, listing)
    return classify(listing, metadata.language, package_json)
