"""Data models for discovered content."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

ROOT_RELATIVE_PATH = "."


@dataclass(frozen=True)
class ContentPage:
    """A markdown document found during discovery.

    Holds the raw frontmatter mapping exactly as parsed. Run it through
    transforms.frontmatter.validate_page_frontmatter() for typed access.
    """
    id: str
    file_path: Path
    relative_path: str
    url_path: str
    frontmatter: Dict[str, Any]
    content: str
    title: str
    is_published: bool


@dataclass(frozen=True)
class ContentAsset:
    """A static file copied through to the site unchanged."""
    id: str
    file_path: Path
    relative_path: str
    url_path: str
    mime_type: str


@dataclass(frozen=True)
class ContentDirectory:
    """One directory node of the content tree.

    The root node has relative_path "." and an empty url_path.
    Children keep the order the filesystem enumerated them in.
    """
    path: Path
    relative_path: str
    url_path: str
    readme: Optional[ContentPage] = None
    children: Tuple["ContentDirectory", ...] = ()
    pages: Tuple[ContentPage, ...] = ()
    assets: Tuple[ContentAsset, ...] = ()

    @property
    def is_root(self) -> bool:
        return self.relative_path == ROOT_RELATIVE_PATH


@dataclass(frozen=True)
class ContentTree:
    """Result of a discovery run.

    The flat indexes and the nested tree describe the same set of
    pages and assets.
    """
    root: ContentDirectory
    all_pages: Dict[str, ContentPage] = field(default_factory=dict)
    all_assets: Dict[str, ContentAsset] = field(default_factory=dict)

    def get_page_by_url(self, url_path: str) -> Optional[ContentPage]:
        """Find a page by its URL slug.

        Args:
            url_path: Slug as produced by normalize_url_path()

        Returns:
            The first matching page, or None
        """
        for page in self.all_pages.values():
            if page.url_path == url_path:
                return page
        return None

    def published_pages(self) -> List[ContentPage]:
        """All pages not marked `publish: false`."""
        return [page for page in self.all_pages.values() if page.is_published]

    def iter_directories(self) -> Iterator[ContentDirectory]:
        """Walk directory nodes depth-first, root first."""
        stack = [self.root]
        while stack:
            directory = stack.pop()
            yield directory
            stack.extend(reversed(directory.children))
