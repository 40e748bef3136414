"""Unit tests for explorer configuration loading."""

import pytest

from depscope.core.config import CATEGORY10, ContractPolicy, ExplorerConfig, load_config
from depscope.core.exceptions import ConfigError
from depscope.core.types import NodeAttribute


class TestLoadConfig:
    """Tests for reading `.depscope/config.yaml`."""

    def test_missing_file_gives_defaults(self, tmp_path):
        """Test that no config file means default settings."""
        config = load_config(tmp_path / "absent.yaml")

        assert config.group_by == NodeAttribute.TYPE
        assert config.search_attributes == [NodeAttribute.FULL_NAME]
        assert config.contract_policy == ContractPolicy.PRUNE_ISOLATED
        assert config.palette == CATEGORY10

    def test_top_level_keys(self, tmp_path):
        """Test settings given at the top level, with duplicates collapsed."""
        f = tmp_path / "config.yaml"
        f.write_text(
            "group_by: namespacePrefix\n"
            "search_attributes: [fullName, fileName, fullName]\n"
            "contract_policy: rewind\n"
        )

        config = load_config(f)

        assert config.group_by == NodeAttribute.NAMESPACE_PREFIX
        assert config.search_attributes == [NodeAttribute.FULL_NAME, NodeAttribute.FILE_NAME]
        assert config.contract_policy == ContractPolicy.REWIND

    def test_explorer_section(self, tmp_path):
        """Test settings nested under an `explorer:` section."""
        f = tmp_path / "config.yaml"
        f.write_text("version: '1.0'\nexplorer:\n  group_by: manageableState\n")

        assert load_config(f).group_by == NodeAttribute.MANAGEABLE_STATE

    def test_empty_file_gives_defaults(self, tmp_path):
        """Test that an empty file behaves like a missing one."""
        f = tmp_path / "config.yaml"
        f.write_text("")
        assert load_config(f) == ExplorerConfig()

    def test_invalid_value(self, tmp_path):
        """Test that an unknown grouping key is a ConfigError."""
        f = tmp_path / "config.yaml"
        f.write_text("group_by: colour\n")
        with pytest.raises(ConfigError):
            load_config(f)

    def test_empty_palette_rejected(self, tmp_path):
        """Test that the palette needs at least one color."""
        f = tmp_path / "config.yaml"
        f.write_text("palette: []\n")
        with pytest.raises(ConfigError):
            load_config(f)

    def test_non_mapping(self, tmp_path):
        """Test that a YAML list is rejected."""
        f = tmp_path / "config.yaml"
        f.write_text("- just\n- a list\n")
        with pytest.raises(ConfigError):
            load_config(f)

    def test_malformed_yaml(self, tmp_path):
        """Test that a YAML syntax error is a ConfigError."""
        f = tmp_path / "config.yaml"
        f.write_text("group_by: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config(f)
