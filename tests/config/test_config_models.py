"""Tests for DiscoveryConfig and load_config."""

import pytest
from pathlib import Path
import tempfile
import shutil

from markdown_ssg.config import (
    DEFAULT_ASSET_TYPES,
    DEFAULT_IGNORE_NAMES,
    ConfigError,
    DiscoveryConfig,
    load_config,
)


class TestDiscoveryConfig:
    """Tests for defaults and from_dict overrides."""

    def test_defaults(self):
        config = DiscoveryConfig()

        assert config.markdown_extensions == ('.md', '.mdx')
        assert config.asset_types == DEFAULT_ASSET_TYPES
        assert 'node_modules' in config.ignore_names
        assert config.ignore_hidden is True
        assert config.sort_entries is False

    def test_should_ignore(self):
        config = DiscoveryConfig()

        assert config.should_ignore('node_modules')
        assert config.should_ignore('dist')
        assert config.should_ignore('Thumbs.db')
        assert config.should_ignore('.cache')
        assert not config.should_ignore('docs')

    def test_hidden_rule_can_be_disabled(self):
        config = DiscoveryConfig(ignore_hidden=False)

        assert not config.should_ignore('.well-known')
        assert config.should_ignore('.git')

    def test_extension_checks_case_insensitive(self):
        config = DiscoveryConfig()

        assert config.is_markdown('.MD')
        assert config.is_asset('.Jpg')
        assert not config.is_asset('.txt')

    def test_empty_overrides(self):
        assert DiscoveryConfig.from_dict({}) == DiscoveryConfig()

    def test_extra_ignore_extends_defaults(self):
        config = DiscoveryConfig.from_dict({'extra_ignore': ['_site', 'build']})

        assert config.ignore_names == DEFAULT_IGNORE_NAMES | {'_site', 'build'}

    def test_ignore_replaces_defaults(self):
        config = DiscoveryConfig.from_dict({'ignore': ['vendor']})

        assert config.ignore_names == frozenset({'vendor'})

    def test_markdown_extensions_normalized(self):
        config = DiscoveryConfig.from_dict({'markdown_extensions': ['MD', '.Markdown']})

        assert config.markdown_extensions == ('.md', '.markdown')

    def test_asset_extension_list(self):
        config = DiscoveryConfig.from_dict({'asset_extensions': ['png', '.zip']})

        assert config.asset_types == {
            '.png': 'image/png',
            '.zip': 'application/octet-stream',
        }

    def test_asset_extension_mapping(self):
        config = DiscoveryConfig.from_dict({'asset_extensions': {'AVIF': 'image/avif'}})

        assert config.asset_types == {'.avif': 'image/avif'}

    def test_booleans(self):
        config = DiscoveryConfig.from_dict({'sort_entries': True, 'ignore_hidden': False})

        assert config.sort_entries is True
        assert config.ignore_hidden is False

    @pytest.mark.parametrize("data", [
        {'sort_entries': 'yes'},
        {'ignore': [1, 2]},
        {'markdown_extensions': {'md': True}},
        {'asset_extensions': {'.png': 5}},
        {'unknown_key': 1},
    ])
    def test_invalid_values(self, data):
        with pytest.raises(ConfigError):
            DiscoveryConfig.from_dict(data)

    def test_hashable(self):
        config = DiscoveryConfig.from_dict({'asset_extensions': ['png'], 'sort_entries': True})

        assert hash(config) == hash(DiscoveryConfig.from_dict({'asset_extensions': ['png'], 'sort_entries': True}))
        assert len({DiscoveryConfig(), DiscoveryConfig()}) == 1

    def test_asset_types_read_only(self):
        config = DiscoveryConfig()

        with pytest.raises(TypeError):
            config.asset_types['.exe'] = 'application/x-msdownload'
        assert not config.is_asset('.exe')

    def test_plain_arguments_frozen(self):
        table = {'.png': 'image/png'}
        config = DiscoveryConfig(ignore_names={'build'}, markdown_extensions=['.md'], asset_types=table)
        table['.gif'] = 'image/gif'

        assert config.ignore_names == frozenset({'build'})
        assert config.markdown_extensions == ('.md',)
        assert not config.is_asset('.gif')
        hash(config)

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)


class TestLoadConfig:
    """Tests for reading YAML config files."""

    @pytest.fixture
    def temp_dir(self):
        temp_dir = tempfile.mkdtemp()
        yield Path(temp_dir)
        shutil.rmtree(temp_dir)

    def test_load(self, temp_dir):
        path = temp_dir / "ssg.yaml"
        path.write_text("""
sort_entries: true
extra_ignore:
  - _drafts
asset_extensions:
  .png: image/png
  .woff2: font/woff2
""")

        config = load_config(path)

        assert config.sort_entries is True
        assert '_drafts' in config.ignore_names
        assert config.asset_types == {'.png': 'image/png', '.woff2': 'font/woff2'}

    def test_empty_file_gives_defaults(self, temp_dir):
        path = temp_dir / "ssg.yaml"
        path.write_text("")

        assert load_config(path) == DiscoveryConfig()

    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            load_config(temp_dir / "missing.yaml")

    def test_invalid_yaml(self, temp_dir):
        path = temp_dir / "ssg.yaml"
        path.write_text("extra_ignore: [unclosed\n")

        with pytest.raises(ConfigError):
            load_config(path)

    def test_not_a_mapping(self, temp_dir):
        path = temp_dir / "ssg.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            load_config(path)
