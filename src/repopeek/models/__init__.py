"""Pydantic models for repopeek."""

from repopeek.models.analysis import (
    AnalysisResult,
    BuildStatus,
    FileEntry,
    PreviewOption,
    RepoMetadata,
    RepoRef,
)

__all__ = [
    "AnalysisResult",
    "BuildStatus",
    "FileEntry",
    "PreviewOption",
    "RepoMetadata",
    "RepoRef",
]
