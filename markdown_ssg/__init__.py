"""
markdown-ssg - Content discovery for an opinionated markdown static site generator

Walks a directory of markdown content and produces an in-memory tree with:
- Page, asset and directory records
- URL slugs for pages and directories
- Raw YAML frontmatter per page
- Optional typed frontmatter validation and normalization
"""

from markdown_ssg.config import ConfigError, DiscoveryConfig, configure_logging, load_config
from markdown_ssg.core.models import ContentAsset, ContentDirectory, ContentPage, ContentTree
from markdown_ssg.core.discovery import ContentDiscovery, discover_content
from markdown_ssg.core.urls import normalize_url_path
from markdown_ssg.transforms.frontmatter import (
    PageFrontmatter,
    SiteFrontmatter,
    default_frontmatter,
    normalize_frontmatter,
    validate_page_frontmatter,
    validate_site_frontmatter,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ContentAsset",
    "ContentDirectory",
    "ContentDiscovery",
    "ContentPage",
    "ContentTree",
    "DiscoveryConfig",
    "PageFrontmatter",
    "SiteFrontmatter",
    "configure_logging",
    "default_frontmatter",
    "discover_content",
    "load_config",
    "normalize_frontmatter",
    "normalize_url_path",
    "validate_page_frontmatter",
    "validate_site_frontmatter",
]
