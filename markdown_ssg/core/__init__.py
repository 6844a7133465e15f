"""Core components for markdown-ssg."""

from markdown_ssg.core.models import ContentAsset, ContentDirectory, ContentPage, ContentTree
from markdown_ssg.core.discovery import ContentDiscovery, discover_content, parse_frontmatter, split_frontmatter
from markdown_ssg.core.urls import asset_url_path, mime_type_for, normalize_url_path

__all__ = [
    "ContentAsset",
    "ContentDirectory",
    "ContentPage",
    "ContentTree",
    "ContentDiscovery",
    "discover_content",
    "parse_frontmatter",
    "split_frontmatter",
    "asset_url_path",
    "mime_type_for",
    "normalize_url_path",
]
