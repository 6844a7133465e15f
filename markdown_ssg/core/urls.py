"""URL path derivation for discovered content."""

import re

from typing import Mapping

# Trailing .md / .mdx
MARKDOWN_SUFFIX_PATTERN = re.compile(r'\.mdx?$', re.IGNORECASE)

_UNSAFE_RUN = re.compile(r'[^a-z0-9/]+')
_EDGE_DASH = re.compile(r'^-|-$')
_SLASH_RUN = re.compile(r'/+')

ASSET_URL_PREFIX = "/assets/"
DEFAULT_MIME_TYPE = "application/octet-stream"


def strip_markdown_suffix(path: str) -> str:
    """Remove a trailing markdown extension, if any."""
    return MARKDOWN_SUFFIX_PATTERN.sub('', path)


def normalize_url_path(relative_path: str) -> str:
    """Convert a content-relative path into a URL slug.

    Examples:
        >>> normalize_url_path("Blog/My First Post.md")
        'blog/my-first-post'
        >>> normalize_url_path("a___b.mdx")
        'a-b'

    Args:
        relative_path: Forward-slash separated path relative to the input root

    Returns:
        Lower-case, dash-separated slug
    """
    slug = strip_markdown_suffix(relative_path).lower()
    slug = _UNSAFE_RUN.sub('-', slug)
    slug = _EDGE_DASH.sub('', slug)
    return _SLASH_RUN.sub('/', slug)


def asset_url_path(relative_path: str) -> str:
    """Assets are referenced by their exact relative path."""
    return f"{ASSET_URL_PREFIX}{relative_path}"


def mime_type_for(extension: str, asset_types: Mapping[str, str]) -> str:
    return asset_types.get(extension.lower(), DEFAULT_MIME_TYPE)
