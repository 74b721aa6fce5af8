"""Preview links to external hosting and sandbox services."""

from repopeek.detection.framework import STATIC_WEBSITE, UNKNOWN
from repopeek.models.analysis import PreviewOption, RepoRef

INTERACTIVE = "interactive"
STATIC = "static"

# Category -> ordered (service name, URL template). The first entry is primary.
PREVIEW_TEMPLATES: dict[str, list[tuple[str, str]]] = {
    INTERACTIVE: [
        ("StackBlitz", "https://stackblitz.com/github/{owner}/{repo}"),
        ("CodeSandbox", "https://codesandbox.io/p/github/{owner}/{repo}"),
        ("Gitpod", "https://gitpod.io/#https://github.com/{owner}/{repo}"),
    ],
    STATIC: [
        ("GitHub Pages", "https://{owner_lower}.github.io/{repo}/"),
        ("raw.githack", "https://raw.githack.com/{owner}/{repo}/HEAD/index.html"),
        (
            "HTML Preview",
            "https://htmlpreview.github.io/?https://github.com/{owner}/{repo}/blob/HEAD/index.html",
        ),
    ],
}


def preview_category(framework: str) -> str | None:
    """Map a detected framework to a preview category. None means no preview."""
    if framework == UNKNOWN:
        return None
    if framework == STATIC_WEBSITE:
        return STATIC
    return INTERACTIVE


def build_preview_options(framework: str, ref: RepoRef) -> list[PreviewOption]:
    """Build the preview options for a framework, first one marked primary."""
    category = preview_category(framework)
    if category is None:
        return []

    return [
        PreviewOption(
            name=name,
            url=template.format(owner=ref.owner, owner_lower=ref.owner.lower(), repo=ref.repo),
            is_primary=index == 0,
        )
        for index, (name, template) in enumerate(PREVIEW_TEMPLATES[category])
    ]


def primary_preview_url(options: list[PreviewOption]) -> str | None:
    return next((option.url for option in options if option.is_primary), None)
