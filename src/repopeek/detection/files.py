"""Per-file syntax labels for listing entries."""

from repopeek.models.analysis import FileEntry

EXTENSION_LANGUAGES: dict[str, str] = {
    "js": "javascript",
    "jsx": "javascript",
    "ts": "typescript",
    "tsx": "typescript",
    "html": "html",
    "css": "css",
    "json": "json",
    "md": "markdown",
    "py": "python",
}


def file_language(name: str) -> str:
    """Syntax label for a file name, "text" when the extension is unknown."""
    if "." not in name:
        return "text"
    return EXTENSION_LANGUAGES.get(name.rsplit(".", 1)[1].lower(), "text")


def entry_label(entry: FileEntry) -> str:
    """Short kind label for display: "dir" or the file's syntax label."""
    if entry.type == "dir":
        return "dir"
    return file_language(entry.name)
