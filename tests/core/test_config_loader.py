"""
Test suite for wordpieces.config_loader module.

Covers:
- Packaged default configuration
- Merging of user configuration files
- Error handling for missing or invalid files
- Config table display
"""

import pytest
import yaml
from unittest.mock import patch

from wordpieces.config_loader import load_wordpieces_config, merge_config
from wordpieces.errors import UnreadableSource


class TestConfigLoader:
    """Test config_loader functionality."""

    def test_defaults(self):
        cfg = load_wordpieces_config()

        assert cfg["render"]["continuation_marker"] == "##"
        assert cfg["render"]["unknown_token"] == "[UNK]"
        assert cfg["vocab"]["encoding"] == "utf-8"
        assert cfg["corpus"]["encoding"] == "utf-8"

    def test_user_file_overrides_defaults(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.dump({"render": {"continuation_marker": "@@"}}), encoding="utf-8")

        cfg = load_wordpieces_config(path)

        assert cfg["render"]["continuation_marker"] == "@@"
        assert cfg["render"]["unknown_token"] == "[UNK]"

    def test_missing_file(self, tmp_path):
        with pytest.raises(UnreadableSource, match="config file not found"):
            load_wordpieces_config(tmp_path / "missing.yaml")

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(UnreadableSource, match="YAML mapping"):
            load_wordpieces_config(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("render: [unclosed\n", encoding="utf-8")

        with pytest.raises(UnreadableSource, match="invalid YAML") as exc_info:
            load_wordpieces_config(path)

        assert exc_info.value.path == path

    def test_null_section(self, tmp_path):
        path = tmp_path / "null.yaml"
        path.write_text("vocab: null\n", encoding="utf-8")

        with pytest.raises(UnreadableSource, match="'vocab' must be a mapping") as exc_info:
            load_wordpieces_config(path)

        assert exc_info.value.path == path

    @pytest.mark.parametrize("override,setting", [
        ({"render": {"unknown_token": None}}, "render.unknown_token"),
        ({"render": {"continuation_marker": 3}}, "render.continuation_marker"),
        ({"corpus": {"encoding": ["utf-8"]}}, "corpus.encoding"),
    ])
    def test_non_string_setting(self, tmp_path, override, setting):
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.dump(override), encoding="utf-8")

        with pytest.raises(UnreadableSource, match=f"'{setting}' must be a string"):
            load_wordpieces_config(path)

    def test_cached(self):
        assert load_wordpieces_config() is load_wordpieces_config()

    def test_table_printed_unless_quiet(self):
        with patch("wordpieces.config_loader.c") as mock_console:
            load_wordpieces_config(quiet=False)
            assert mock_console.print.called

        with patch("wordpieces.config_loader.c") as mock_console:
            load_wordpieces_config(quiet=True)
            assert not mock_console.print.called

    def test_merge_config_is_recursive(self):
        base = {"a": {"x": 1, "y": 2}, "b": 3}
        merged = merge_config(base, {"a": {"y": 20}, "c": 4})

        assert merged == {"a": {"x": 1, "y": 20}, "b": 3, "c": 4}
        assert base == {"a": {"x": 1, "y": 2}, "b": 3}
