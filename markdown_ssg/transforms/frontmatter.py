"""Frontmatter validation and normalization.

Discovery keeps each page's frontmatter as the raw mapping YAML produced.
These helpers narrow that mapping into typed records for consumers that
want strict types. Nothing here raises on bad input: fields with the
wrong type are dropped.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, List, Mapping, Optional

from markdown_ssg.core.urls import strip_markdown_suffix

Clock = Callable[[], datetime]

FALLBACK_TITLE = "Untitled"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Format an instant as ISO-8601 UTC with millisecond precision.

    Naive datetimes are taken to be UTC already.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime('%Y-%m-%dT%H:%M:%S.') + f"{moment.microsecond // 1000:03d}Z"


@dataclass
class PageFrontmatter:
    """Typed view of a page's frontmatter."""
    title: str = ""
    description: Optional[str] = None
    tags: Optional[List[str]] = None
    publish: Optional[bool] = None
    canonical_url: Optional[str] = None
    timestamp: Optional[str] = None


@dataclass
class SiteFrontmatter(PageFrontmatter):
    """Frontmatter of the site's root page, which may also name the domain."""
    domain: Optional[str] = None


def _string_field(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    return value if isinstance(value, str) else None


def validate_page_frontmatter(data: Mapping[str, Any]) -> PageFrontmatter:
    """Extract the recognised fields from a raw frontmatter mapping.

    Args:
        data: Raw mapping as parsed from YAML

    Returns:
        PageFrontmatter with only correctly typed fields set
    """
    frontmatter = PageFrontmatter()

    title = _string_field(data, 'title')
    if title is not None:
        frontmatter.title = title

    frontmatter.description = _string_field(data, 'description')

    tags = data.get('tags')
    if isinstance(tags, list):
        frontmatter.tags = [tag for tag in tags if isinstance(tag, str)]

    publish = data.get('publish')
    if isinstance(publish, bool):
        frontmatter.publish = publish

    frontmatter.canonical_url = _string_field(data, 'canonical_url')
    # YAML turns bare dates into date objects; only quoted strings survive
    frontmatter.timestamp = _string_field(data, 'timestamp')

    return frontmatter


def validate_site_frontmatter(data: Mapping[str, Any]) -> SiteFrontmatter:
    """Like validate_page_frontmatter(), plus the optional `domain` field."""
    page = validate_page_frontmatter(data)
    return SiteFrontmatter(
        title=page.title,
        description=page.description,
        tags=page.tags,
        publish=page.publish,
        canonical_url=page.canonical_url,
        timestamp=page.timestamp,
        domain=_string_field(data, 'domain'),
    )


def _first(*values: Any) -> Any:
    """Return the first value that is neither None nor an empty string."""
    for value in values:
        if value is not None and value != "":
            return value
    return None


def normalize_frontmatter(
    frontmatter: PageFrontmatter,
    defaults: Optional[Mapping[str, Any]] = None,
    clock: Clock = utc_now,
) -> PageFrontmatter:
    """Fill in every field of a frontmatter record.

    Each field takes the value from `frontmatter`, then from `defaults`,
    then a built-in fallback. description and canonical_url have no
    fallback and stay None when neither source sets them.

    publish follows the same order, so `defaults={'publish': False}`
    unpublishes a page that does not set publish itself, unlike a bare
    `frontmatter.publish is not False` check that never consults defaults.

    Args:
        frontmatter: Validated frontmatter
        defaults: Partial field values to use where frontmatter has none
        clock: Source of the current instant for a missing timestamp

    Returns:
        A new, fully populated PageFrontmatter
    """
    defaults = defaults or {}

    timestamp = _first(frontmatter.timestamp, defaults.get('timestamp'))
    if timestamp is None:
        timestamp = format_timestamp(clock())

    tags = _first(frontmatter.tags, defaults.get('tags'))
    publish = _first(frontmatter.publish, defaults.get('publish'))

    return PageFrontmatter(
        title=_first(frontmatter.title, defaults.get('title')) or FALLBACK_TITLE,
        description=_first(frontmatter.description, defaults.get('description')),
        tags=list(tags) if tags is not None else [],
        publish=publish is not False,
        canonical_url=_first(frontmatter.canonical_url, defaults.get('canonical_url')),
        timestamp=timestamp,
    )


def default_frontmatter(file_name: str, clock: Clock = utc_now) -> PageFrontmatter:
    """Build the frontmatter a page would have if it declared none.

    Args:
        file_name: Name of the markdown file, e.g. "my-first_post.md"

    Returns:
        PageFrontmatter titled after the file name ("my first post")
    """
    title = re.sub(r'[-_]', ' ', strip_markdown_suffix(file_name))
    return PageFrontmatter(
        title=title,
        tags=[],
        publish=True,
        timestamp=format_timestamp(clock()),
    )
