"""Exception hierarchy for repopeek."""


class RepoPeekError(Exception):
    """Base exception for all repopeek errors."""


class InvalidUrlError(RepoPeekError):
    """Input is not a github.com/{owner}/{repo} URL."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Invalid GitHub URL: {url}")


class RepositoryNotAccessibleError(RepoPeekError):
    """Repository metadata could not be read from GitHub."""

    def __init__(self, owner: str, repo: str, status_code: int | None = None) -> None:
        self.owner = owner
        self.repo = repo
        self.status_code = status_code
        if self.not_found:
            message = f"Repository not found or is private: {owner}/{repo}"
        elif status_code is None:
            message = f"GitHub API request timed out for {owner}/{repo}"
        else:
            message = f"GitHub API error ({status_code}) for {owner}/{repo}"
        super().__init__(message)

    @property
    def not_found(self) -> bool:
        """True when GitHub reported the repository as missing or private."""
        return self.status_code == 404
