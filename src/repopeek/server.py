"""HTTP interface for repository inspection."""

import logging
from collections.abc import AsyncIterator

from aiohttp import web

from repopeek import __version__
from repopeek.activities.inspect import inspect_repository
from repopeek.exceptions import InvalidUrlError, RepositoryNotAccessibleError
from repopeek.github.client import GitHubClient
from repopeek.settings import Settings, get_settings

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, GET, OPTIONS",
}

MISSING_URL_MESSAGE = "Repository URL is required"

SETTINGS = web.AppKey("settings", Settings)
GITHUB_CLIENT = web.AppKey("github_client", GitHubClient)


def _error(status: int, message: str) -> web.Response:
    return web.json_response({"error": message}, status=status)


@web.middleware
async def cors_middleware(request: web.Request, handler) -> web.StreamResponse:
    """Answer preflight requests and add CORS headers to every response."""
    if request.method == "OPTIONS":
        return web.Response(headers=CORS_HEADERS)

    try:
        response = await handler(request)
    except web.HTTPException as e:
        e.headers.update(CORS_HEADERS)
        raise
    response.headers.update(CORS_HEADERS)
    return response


async def handle_analyze(request: web.Request) -> web.Response:
    """Inspect the repository named by the ``repoUrl`` field of the JSON body."""
    try:
        body = await request.json()
    except ValueError:
        body = None

    repo_url = body.get("repoUrl") if isinstance(body, dict) else None
    if not repo_url or not isinstance(repo_url, str):
        return _error(400, MISSING_URL_MESSAGE)

    logger.info("Analyzing repository: %s", repo_url)
    try:
        result = await inspect_repository(repo_url, request.app[GITHUB_CLIENT])
    except InvalidUrlError as e:
        return _error(400, str(e))
    except RepositoryNotAccessibleError as e:
        logger.warning("%s", e)
        return _error(404 if e.not_found else 502, str(e))
    except Exception as e:
        logger.exception("Analysis failed for %s", repo_url)
        return _error(500, str(e) or type(e).__name__)

    return web.json_response(result.to_response())


async def handle_health(request: web.Request) -> web.Response:
    return web.json_response({"status": "ok", "version": __version__})


async def _github_client_ctx(app: web.Application) -> AsyncIterator[None]:
    """Share one GitHub client (and its connection pool) for the app's lifetime."""
    async with GitHubClient(settings=app[SETTINGS]) as client:
        app[GITHUB_CLIENT] = client
        yield


def create_app(
    settings: Settings | None = None,
    client: GitHubClient | None = None,
) -> web.Application:
    """Build the aiohttp application.

    Args:
        settings: Settings to use. Defaults to get_settings().
        client: GitHub client to use instead of creating one on startup.
    """
    app = web.Application(middlewares=[cors_middleware])
    app[SETTINGS] = settings or get_settings()

    if client is not None:
        app[GITHUB_CLIENT] = client
    else:
        app.cleanup_ctx.append(_github_client_ctx)

    app.router.add_post("/", handle_analyze)
    app.router.add_post("/analyze", handle_analyze)
    app.router.add_get("/health", handle_health)
    return app


def run_server(host: str | None = None, port: int | None = None) -> None:
    """Run the HTTP server until interrupted."""
    settings = get_settings()
    host = host or settings.host
    port = port or settings.port
    logger.info("Serving on http://%s:%d", host, port)
    web.run_app(create_app(settings), host=host, port=port, print=None)
