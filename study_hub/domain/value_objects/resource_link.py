"""Resource link value object."""

from dataclasses import dataclass

from study_hub.domain.constants import DEFAULT_RESOURCE_TITLES


@dataclass(frozen=True)
class ResourceLink:
    """Entry in the static study resources list."""

    title: str
    url: str | None = None

    @property
    def label(self) -> str:
        """Display label with the list bullet."""
        return f"› {self.title}"


def default_resources() -> tuple[ResourceLink, ...]:
    """Get the built-in resource list in display order."""
    return tuple(ResourceLink(title=title) for title in DEFAULT_RESOURCE_TITLES)
