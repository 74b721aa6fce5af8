"""Heuristic detectors run over a repository's root listing."""

from repopeek.detection.env_vars import extract_env_vars, has_env_file, parse_env_example
from repopeek.detection.files import file_language
from repopeek.detection.framework import (
    Detection,
    classify,
    detect_framework,
    load_package_json,
)
from repopeek.detection.preview import build_preview_options, primary_preview_url

__all__ = [
    "Detection",
    "build_preview_options",
    "classify",
    "detect_framework",
    "extract_env_vars",
    "file_language",
    "has_env_file",
    "load_package_json",
    "parse_env_example",
    "primary_preview_url",
]
