"""Discovery configuration with code-baked defaults.

Config files are sparse: only overrides need to be listed.

    ignore_hidden: true
    sort_entries: false
    extra_ignore: [build, _site]
    markdown_extensions: [.md, .mdx, .markdown]
    asset_extensions:
      .avif: image/avif
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Tuple, Union

import yaml

DEFAULT_IGNORE_NAMES: FrozenSet[str] = frozenset({
    'node_modules',
    '.git',
    '.gitignore',
    'dist',
    '.DS_Store',
    'Thumbs.db',
})

DEFAULT_MARKDOWN_EXTENSIONS: Tuple[str, ...] = ('.md', '.mdx')

DEFAULT_ASSET_TYPES: Dict[str, str] = {
    '.png': 'image/png',
    '.jpg': 'image/jpeg',
    '.jpeg': 'image/jpeg',
    '.gif': 'image/gif',
    '.svg': 'image/svg+xml',
    '.webp': 'image/webp',
    '.ico': 'image/x-icon',
    '.pdf': 'application/pdf',
    '.mp4': 'video/mp4',
    '.webm': 'video/webm',
    '.mov': 'video/quicktime',
}

_KNOWN_KEYS = {
    'ignore',
    'extra_ignore',
    'ignore_hidden',
    'sort_entries',
    'markdown_extensions',
    'asset_extensions',
}


class ConfigError(ValueError):
    """Raised for unreadable or malformed discovery configuration."""


def normalize_extension(ext: str) -> str:
    """Lower-case an extension and make sure it starts with a dot."""
    ext = ext.strip().lower()
    if not ext.startswith('.'):
        ext = f".{ext}"
    return ext


@dataclass(frozen=True)
class DiscoveryConfig:
    """Which directory entries discovery keeps and how it classifies them."""

    ignore_names: FrozenSet[str] = DEFAULT_IGNORE_NAMES
    markdown_extensions: Tuple[str, ...] = DEFAULT_MARKDOWN_EXTENSIONS
    # Read-only view; left out of the hash since mappings are unhashable
    asset_types: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_ASSET_TYPES)),
        hash=False,
    )
    ignore_hidden: bool = True
    sort_entries: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'ignore_names', frozenset(self.ignore_names))
        object.__setattr__(self, 'markdown_extensions', tuple(self.markdown_extensions))
        if not isinstance(self.asset_types, MappingProxyType):
            object.__setattr__(self, 'asset_types', MappingProxyType(dict(self.asset_types)))

    def should_ignore(self, name: str) -> bool:
        return name in self.ignore_names or (self.ignore_hidden and name.startswith('.'))

    def is_markdown(self, extension: str) -> bool:
        return extension.lower() in self.markdown_extensions

    def is_asset(self, extension: str) -> bool:
        return extension.lower() in self.asset_types

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DiscoveryConfig":
        """Build a config from a sparse mapping of overrides.

        Args:
            data: Parsed config document

        Returns:
            DiscoveryConfig with defaults for every key not given

        Raises:
            ConfigError: On unknown keys or wrongly typed values
        """
        unknown = set(data) - _KNOWN_KEYS
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        config = cls()
        overrides: Dict[str, Any] = {}

        if 'ignore' in data:
            overrides['ignore_names'] = frozenset(_string_list(data['ignore'], 'ignore'))
        if 'extra_ignore' in data:
            base = overrides.get('ignore_names', config.ignore_names)
            overrides['ignore_names'] = base | frozenset(
                _string_list(data['extra_ignore'], 'extra_ignore')
            )

        for key in ('ignore_hidden', 'sort_entries'):
            if key in data:
                if not isinstance(data[key], bool):
                    raise ConfigError(f"'{key}' must be true or false")
                overrides[key] = data[key]

        if 'markdown_extensions' in data:
            overrides['markdown_extensions'] = tuple(
                normalize_extension(ext)
                for ext in _string_list(data['markdown_extensions'], 'markdown_extensions')
            )

        if 'asset_extensions' in data:
            overrides['asset_types'] = _asset_types(data['asset_extensions'])

        return replace(config, **overrides)


def load_config(path: Union[str, Path]) -> DiscoveryConfig:
    """Load a DiscoveryConfig from a YAML file.

    Args:
        path: Path to the YAML config file

    Returns:
        Parsed DiscoveryConfig (defaults for an empty file)

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the file is not valid YAML or not a mapping
    """
    path = Path(path)
    text = path.read_text(encoding='utf-8')

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return DiscoveryConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    return DiscoveryConfig.from_dict(data)


def _string_list(value: Any, key: str) -> Iterable[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return value


def _asset_types(value: Any) -> Dict[str, str]:
    """Accept either a list of extensions or an extension -> MIME type mapping.

    Listed extensions pick up their MIME type from the default table,
    falling back to a generic binary type.
    """
    if isinstance(value, dict):
        result = {}
        for ext, mime in value.items():
            if not isinstance(ext, str) or not isinstance(mime, str):
                raise ConfigError("'asset_extensions' mapping must be extension: mime-type strings")
            result[normalize_extension(ext)] = mime
        return result

    result = {}
    for ext in _string_list(value, 'asset_extensions'):
        ext = normalize_extension(ext)
        result[ext] = DEFAULT_ASSET_TYPES.get(ext, 'application/octet-stream')
    return result
