"""
Unit tests for settings resolution (defaults < YAML < environment)
"""

import os
import sys
from unittest.mock import patch

import pytest

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.append(project_root)

from metadata_server.config import load_settings


class TestLoadSettings:

    def test_defaults_without_file(self, tmp_path):
        s = load_settings(str(tmp_path / "missing.yaml"), env={})
        assert s.host == "127.0.0.1"
        assert s.port == 3000
        assert s.bind == "127.0.0.1:3000"
        assert s.asset_path is None
        assert s.allow_origins == ["*"]
        assert s.allow_methods == ["GET"]
        assert s.log_level == "INFO"

    def test_yaml_overrides_defaults(self, tmp_path):
        p = tmp_path / "server.yaml"
        p.write_text("server:\n  port: 8080\ncors:\n  allow_methods: [get]\nlogging:\n  level: debug\n")
        s = load_settings(str(p), env={})
        assert s.host == "127.0.0.1"
        assert s.port == 8080
        assert s.allow_methods == ["GET"]
        assert s.log_level == "DEBUG"

    def test_env_overrides_yaml(self, tmp_path):
        p = tmp_path / "server.yaml"
        p.write_text("server:\n  host: 10.0.0.1\n  port: 8080\n")
        env = {
            "METADATA_HOST": "0.0.0.0",
            "METADATA_PORT": "9000",
            "METADATA_ASSET_PATH": "/srv/leader.jpeg",
            "LOG_LEVEL": "warning",
        }
        s = load_settings(str(p), env=env)
        assert s.bind == "0.0.0.0:9000"
        assert s.asset_path == "/srv/leader.jpeg"
        assert s.log_level == "WARNING"

    def test_config_path_from_env(self, tmp_path):
        p = tmp_path / "alt.yaml"
        p.write_text("server:\n  port: 4321\n")
        with patch.dict(os.environ, {"METADATA_CONFIG": str(p)}, clear=True):
            assert load_settings().port == 4321

    def test_bad_port(self, tmp_path):
        with pytest.raises(ValueError, match="port"):
            load_settings(str(tmp_path / "missing.yaml"), env={"METADATA_PORT": "http"})

    def test_port_out_of_range(self, tmp_path):
        with pytest.raises(ValueError, match="out of range"):
            load_settings(str(tmp_path / "missing.yaml"), env={"METADATA_PORT": "70000"})

    def test_invalid_yaml(self, tmp_path):
        p = tmp_path / "bad.yaml"
        p.write_text("server: [unclosed\n")
        with pytest.raises(ValueError, match="invalid config"):
            load_settings(str(p), env={})

    def test_yaml_must_be_mapping(self, tmp_path):
        p = tmp_path / "list.yaml"
        p.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="mapping"):
            load_settings(str(p), env={})
