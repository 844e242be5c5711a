"""
Tests for fixflow.config module.
"""

import pytest

from fixflow.config import DEFAULT_CONFIG, ConfigError, get_config
from fixflow.config.loader import find_config_file, load_config, merge_configs, parse_toml


class TestConfigLoader:
    """Tests for configuration loading."""

    def test_load_config_with_defaults(self, tmp_path):
        config_file = tmp_path / ".fixflow.toml"
        config_file.write_text('[storage]\ndir = "/srv/flows"\n')

        config = load_config(config_file)

        assert config["storage"]["dir"] == "/srv/flows"
        assert config["storage"]["key"] == "troubleshootingData"
        assert config["flow"]["start"] == "start"

    def test_find_config_file(self, tmp_path):
        (tmp_path / ".fixflow.toml").write_text("")
        assert find_config_file(tmp_path) == tmp_path / ".fixflow.toml"

    def test_find_config_file_not_found(self, tmp_path):
        assert find_config_file(tmp_path) is None

    def test_find_config_in_parent(self, tmp_path):
        (tmp_path / ".fixflow.toml").write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(nested).parent == tmp_path

    def test_invalid_toml(self):
        with pytest.raises(ConfigError):
            parse_toml("[storage\n")

    def test_parse_returns_plain_values(self):
        data = parse_toml("[server]\nport = 8000\n")
        assert type(data["server"]) is dict
        assert data["server"]["port"] == 8000


class TestConfigMerge:
    def test_merge_configs_override(self):
        merged = merge_configs({"flow": {"start": "start", "x": 1}}, {"flow": {"start": "root"}})
        assert merged == {"flow": {"start": "root", "x": 1}}

    def test_merge_does_not_modify_inputs(self):
        base = {"flow": {"start": "start"}}
        merge_configs(base, {"flow": {"start": "root"}})
        assert base == {"flow": {"start": "start"}}


class TestGetConfig:
    def test_defaults_without_file(self, tmp_path):
        config = get_config(start_dir=tmp_path)
        assert config == DEFAULT_CONFIG
        assert config is not DEFAULT_CONFIG

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('[flow]\nsolution_prefix = "Fix: "\n')
        assert get_config(path)["flow"]["solution_prefix"] == "Fix: "

    def test_found_from_cwd(self, tmp_path):
        (tmp_path / ".fixflow.toml").write_text("[server]\nport = 9000\n")
        assert get_config()["server"]["port"] == 9000

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        (tmp_path / ".fixflow.toml").write_text('[storage]\ndir = "/from/file"\n')
        monkeypatch.setenv("FIXFLOW_STORAGE_DIR", "/from/env")
        assert get_config()["storage"]["dir"] == "/from/env"


class TestDefaultConfig:
    def test_default_config_structure(self):
        for section in ("storage", "flow", "editor", "server"):
            assert section in DEFAULT_CONFIG

    def test_default_flow_conventions(self):
        assert DEFAULT_CONFIG["flow"]["start"] == "start"
        assert DEFAULT_CONFIG["flow"]["solution_prefix"] == "Solution: "
