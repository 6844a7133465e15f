"""Content discovery: walk an input directory and build the content tree."""

import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

from markdown_ssg.config.logging import get_logger
from markdown_ssg.config.models import DiscoveryConfig
from markdown_ssg.core.models import (
    ROOT_RELATIVE_PATH,
    ContentAsset,
    ContentDirectory,
    ContentPage,
    ContentTree,
)
from markdown_ssg.core.urls import asset_url_path, mime_type_for, normalize_url_path

log = get_logger(__name__)

README_NAME = "readme.md"

# Opening `---` line, YAML block, closing `---` line, then the body
FRONTMATTER_PATTERN = re.compile(
    r'\A---[ \t]*\r?\n(?P<block>.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)',
    re.DOTALL | re.MULTILINE,
)


def split_frontmatter(text: str) -> Tuple[Optional[str], str]:
    """Separate a leading frontmatter block from the document body.

    Args:
        text: Full file contents

    Returns:
        Tuple of (raw YAML block or None if there is no block, body)
    """
    if text.startswith('\ufeff'):
        text = text[1:]

    match = FRONTMATTER_PATTERN.match(text)
    if match is None:
        return None, text
    return match.group('block'), text[match.end():]


def parse_frontmatter(text: str, source: str = "<string>") -> Tuple[Dict[str, Any], str]:
    """Parse the YAML frontmatter of a markdown document.

    A missing block, invalid YAML or a block that is not a mapping all
    yield an empty dict.

    Args:
        text: Full file contents
        source: Name used in log messages

    Returns:
        Tuple of (frontmatter dict, body without the frontmatter block)
    """
    block, body = split_frontmatter(text)
    if block is None:
        return {}, body

    try:
        frontmatter = yaml.safe_load(block)
    except yaml.YAMLError as e:
        log.warning("frontmatter.invalid_yaml", source=source, error=str(e))
        return {}, body

    if frontmatter is None:
        return {}, body
    if not isinstance(frontmatter, dict):
        log.warning("frontmatter.not_a_mapping", source=source, kind=type(frontmatter).__name__)
        return {}, body

    return frontmatter, body


def _page_title(frontmatter: Dict[str, Any], file_name: str, extension: str) -> str:
    title = frontmatter.get('title')
    if isinstance(title, str) and title:
        return title
    # Unquoted YAML numbers and dates make perfectly good titles too
    if title not in (None, "") and not isinstance(title, (bool, list, dict)):
        return str(title)
    return file_name[:-len(extension)] if extension else file_name


class ContentDiscovery:
    """Walks an input directory and classifies its contents.

    Discovery is all-or-nothing: any error reading a directory or a
    classified file propagates and no tree is returned.
    """

    def __init__(self, config: Optional[DiscoveryConfig] = None):
        """Initialize ContentDiscovery.

        Args:
            config: Ignore rules and extension tables (default: DiscoveryConfig())
        """
        self.config = config or DiscoveryConfig()

    def discover(self, input_dir: Union[str, Path]) -> ContentTree:
        """Build the content tree for a directory.

        Args:
            input_dir: Root of the content to discover

        Returns:
            ContentTree with the nested structure and flat indexes

        Raises:
            OSError: If the root or any subdirectory cannot be listed, or a
                page cannot be read
            UnicodeDecodeError: If a markdown file is not valid UTF-8
        """
        root_path = Path(os.path.abspath(input_dir))
        all_pages: Dict[str, ContentPage] = {}
        all_assets: Dict[str, ContentAsset] = {}

        root = self._scan_directory(root_path, ROOT_RELATIVE_PATH, all_pages, all_assets)

        log.info(
            "discovery.complete",
            root=str(root_path),
            pages=len(all_pages),
            assets=len(all_assets),
        )
        return ContentTree(root=root, all_pages=all_pages, all_assets=all_assets)

    def _scan_directory(
        self,
        dir_path: Path,
        relative_dir: str,
        all_pages: Dict[str, ContentPage],
        all_assets: Dict[str, ContentAsset],
    ) -> ContentDirectory:
        """Recursively build the node for one directory.

        Pages and assets are also recorded in the caller's flat indexes.
        """
        log.debug("discovery.scan_directory", path=str(dir_path))

        with os.scandir(dir_path) as it:
            entries = list(it)
        if self.config.sort_entries:
            entries.sort(key=lambda e: e.name)

        readme: Optional[ContentPage] = None
        children: List[ContentDirectory] = []
        pages: List[ContentPage] = []
        assets: List[ContentAsset] = []

        for entry in entries:
            if self.config.should_ignore(entry.name):
                continue

            full_path = dir_path / entry.name
            rel_path = entry.name if relative_dir == ROOT_RELATIVE_PATH else f"{relative_dir}/{entry.name}"

            # Symlinks are neither followed nor recorded
            if entry.is_dir(follow_symlinks=False):
                children.append(self._scan_directory(full_path, rel_path, all_pages, all_assets))
                continue

            if not entry.is_file(follow_symlinks=False):
                continue

            extension = os.path.splitext(entry.name)[1]

            if self.config.is_markdown(extension):
                page = self._read_page(full_path, rel_path, entry.name, extension)
                if entry.name.lower() == README_NAME:
                    readme = page
                else:
                    pages.append(page)
                all_pages[rel_path] = page

            elif self.config.is_asset(extension):
                asset = ContentAsset(
                    id=rel_path,
                    file_path=full_path,
                    relative_path=rel_path,
                    url_path=asset_url_path(rel_path),
                    mime_type=mime_type_for(extension, self.config.asset_types),
                )
                assets.append(asset)
                all_assets[rel_path] = asset

        return ContentDirectory(
            path=dir_path,
            relative_path=relative_dir,
            url_path="" if relative_dir == ROOT_RELATIVE_PATH else normalize_url_path(relative_dir),
            readme=readme,
            children=tuple(children),
            pages=tuple(pages),
            assets=tuple(assets),
        )

    def _read_page(self, file_path: Path, rel_path: str, file_name: str, extension: str) -> ContentPage:
        """Read a markdown file and build its page record."""
        text = file_path.read_text(encoding='utf-8')
        frontmatter, content = parse_frontmatter(text, source=rel_path)

        return ContentPage(
            id=rel_path,
            file_path=file_path,
            relative_path=rel_path,
            url_path=normalize_url_path(rel_path),
            frontmatter=frontmatter,
            content=content,
            title=_page_title(frontmatter, file_name, extension),
            is_published=frontmatter.get('publish') is not False,
        )


def discover_content(
    input_dir: Union[str, Path],
    config: Optional[DiscoveryConfig] = None,
) -> ContentTree:
    """Discover all pages and assets under input_dir."""
    return ContentDiscovery(config).discover(input_dir)
