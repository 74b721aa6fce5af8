"""Repository inspection activity."""

import asyncio
import logging

from repopeek.detection.env_vars import extract_env_vars, has_env_file
from repopeek.detection.framework import detect_framework
from repopeek.detection.preview import build_preview_options, primary_preview_url
from repopeek.github.client import GitHubClient
from repopeek.github.url import parse_repo_url
from repopeek.models.analysis import AnalysisResult, BuildStatus, RepoRef

logger = logging.getLogger(__name__)


async def _inspect(ref: RepoRef, client: GitHubClient) -> AnalysisResult:
    logger.info("Inspecting %s", ref.full_name)

    snapshot = await client.fetch_snapshot(ref)
    listing = snapshot.listing

    detection, env_vars_needed = await asyncio.gather(
        detect_framework(client, listing, snapshot.metadata),
        extract_env_vars(client, listing),
    )
    options = build_preview_options(detection.framework, ref)

    logger.info(
        "%s: framework=%s language=%s files=%d",
        ref.full_name,
        detection.framework,
        detection.language,
        len(listing),
    )

    return AnalysisResult(
        name=ref.repo,
        framework=detection.framework,
        language=detection.language,
        has_env_file=has_env_file(listing),
        env_vars_needed=env_vars_needed,
        build_status=BuildStatus.SUCCESS,
        preview_url=primary_preview_url(options),
        preview_options=options,
        files=listing[: client.settings.max_listed_files],
    )


async def inspect_repository(
    repo_url: str,
    client: GitHubClient | None = None,
) -> AnalysisResult:
    """Inspect a public GitHub repository.

    Parses the URL, reads metadata and the root listing, then runs framework
    detection, .env.example extraction and preview link selection. Partial
    upstream failures degrade the result instead of failing it.

    Args:
        repo_url: GitHub repository URL.
        client: GitHub client to use. A short-lived one is created if omitted.

    Returns:
        AnalysisResult with build_status SUCCESS.

    Raises:
        InvalidUrlError: If repo_url is not a GitHub repository URL.
        RepositoryNotAccessibleError: If repository metadata cannot be read.
    """
    ref = parse_repo_url(repo_url)

    if client is not None:
        return await _inspect(ref, client)

    async with GitHubClient() as owned_client:
        return await _inspect(ref, owned_client)
