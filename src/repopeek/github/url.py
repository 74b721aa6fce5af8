"""GitHub repository URL parsing."""

import re

from repopeek.exceptions import InvalidUrlError
from repopeek.models.analysis import RepoRef

# Owner and repo are the first two path segments; anything after them
# (".git", "/tree/main/src", query strings) is ignored.
_REPO_URL_RE = re.compile(
    r"^(?:https?://)?(?:www\.)?github\.com/(?P<owner>[^/\s?#]+)/(?P<repo>[^/\s?#]+)",
    re.IGNORECASE,
)
_GIT_SUFFIX_RE = re.compile(r"\.git$", re.IGNORECASE)


def parse_repo_url(url: str) -> RepoRef:
    """Extract owner and repository name from a GitHub URL.

    Args:
        url: URL such as ``https://github.com/owner/repo`` or
            ``https://github.com/owner/repo.git/tree/main``.

    Returns:
        RepoRef with any trailing ``.git`` stripped from the repo name.

    Raises:
        InvalidUrlError: If the URL does not have the github.com/owner/repo shape.
    """
    match = _REPO_URL_RE.match(url.strip())
    if not match:
        raise InvalidUrlError(url)

    repo = _GIT_SUFFIX_RE.sub("", match.group("repo"))
    if not repo:
        raise InvalidUrlError(url)

    return RepoRef(owner=match.group("owner"), repo=repo)
