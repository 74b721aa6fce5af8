"""Pydantic models for repository analysis."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RepoRef(BaseModel):
    """Owner and repository name parsed from a GitHub URL."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


class FileEntry(BaseModel):
    """One entry of a repository directory listing, as returned by GitHub."""

    model_config = ConfigDict(extra="ignore")

    name: str
    path: str | None = None
    type: str = "file"  # "file" or "dir" (GitHub also reports "symlink", "submodule")
    size: int | None = None
    download_url: str | None = None
    html_url: str | None = None

    @property
    def is_file(self) -> bool:
        return self.type == "file"


class RepoMetadata(BaseModel):
    """The subset of GitHub repository metadata that analysis reads."""

    model_config = ConfigDict(extra="ignore")

    language: str | None = None


class PreviewOption(BaseModel):
    """An external service that can preview the repository."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    url: str
    is_primary: bool = False


class BuildStatus(StrEnum):
    """Lifecycle of an analysis as surfaced to callers."""

    PENDING = "pending"
    BUILDING = "building"
    SUCCESS = "success"
    ERROR = "error"


class AnalysisResult(BaseModel):
    """Combined result of a repository inspection."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str
    framework: str
    language: str
    has_env_file: bool = False
    env_vars_needed: list[str] = []
    build_status: BuildStatus = BuildStatus.SUCCESS
    preview_url: str | None = None
    preview_options: list[PreviewOption] = []
    files: list[FileEntry] = []

    def to_response(self) -> dict:
        """Serialize to the camelCase JSON shape returned over HTTP."""
        data = self.model_dump(mode="json", by_alias=True)
        if data["previewUrl"] is None:
            del data["previewUrl"]
        return data
