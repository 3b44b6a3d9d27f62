"""
Tests for configuration loading — mcdev-copado.yml and environment.
"""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from mcdev_copado.core.config.loader import (
    ConfigError,
    MissingConfigFileError,
    config_from_env,
    find_config_file,
    load_config,
)
from mcdev_copado.core.models.config import CentralConfig


@pytest.fixture
def camel_case_yml(tmp_path: Path) -> Path:
    """Config written with the keys Copado uses."""
    content = textwrap.dedent("""\
        configFilePath: project/.mcdev.json
        installMcdevLocally: true
        mcdevVersion: "7.1.0"
        unknownKey: ignored
    """)
    path = tmp_path / "mcdev-copado.yml"
    path.write_text(content)
    return path


class TestCentralConfig:
    def test_defaults(self):
        config = CentralConfig()
        assert config.config_file_path == Path(".mcdev.json")
        assert config.mcdev_auth_file == Path(".mcdev-auth.json")
        assert config.install_mcdev_locally is False
        assert config.mcdev_version == ""

    def test_branch_version(self):
        assert CentralConfig(mcdev_version="#develop").installs_from_branch
        assert not CentralConfig(mcdev_version="7.1.0").installs_from_branch
        assert not CentralConfig().installs_from_branch

    def test_read_only(self):
        config = CentralConfig()
        with pytest.raises(ValidationError):
            config.mcdev_version = "7.1.0"


class TestLoadConfig:
    def test_camel_case_keys(self, camel_case_yml: Path):
        config = load_config(camel_case_yml)
        assert config.config_file_path == Path("project/.mcdev.json")
        assert config.install_mcdev_locally is True
        assert config.mcdev_version == "7.1.0"

    def test_snake_case_keys(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("mcdev_version: '#main'\ndebug: true\n")
        config = load_config(path)
        assert config.mcdev_version == "#main"
        assert config.debug is True

    def test_json_file(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text('{"installMcdevLocally": false, "mcdevVersion": "6.0.0"}')
        assert load_config(path).mcdev_version == "6.0.0"

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("")
        assert load_config(path) == CentralConfig()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(MissingConfigFileError):
            load_config(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("key: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_config(path)

    def test_invalid_value(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("installMcdevLocally: [1, 2]\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)

    def test_autodetect_walks_up(self, camel_case_yml: Path, monkeypatch):
        nested = camel_case_yml.parent / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert find_config_file() == camel_case_yml.resolve()
        assert load_config().mcdev_version == "7.1.0"

    def test_falls_back_to_environment(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("MCDEV_VERSION", "5.0.0")
        if find_config_file() is not None:
            pytest.skip("a mcdev-copado.yml exists above the temp directory")
        assert load_config().mcdev_version == "5.0.0"


class TestConfigFromEnv:
    def test_reads_variables(self):
        config = config_from_env({
            "MCDEV_CONFIG_FILE_PATH": "/work/.mcdev.json",
            "MCDEV_INSTALL_LOCALLY": "TRUE",
            "MCDEV_VERSION": "#feature/x",
            "MCDEV_AUTH_FILE": "/work/auth.json",
            "MCDEV_DEBUG": "0",
        })
        assert config.config_file_path == Path("/work/.mcdev.json")
        assert config.install_mcdev_locally is True
        assert config.mcdev_version == "#feature/x"
        assert config.debug is False
        assert config.mcdev_auth_file == Path("/work/auth.json")

    def test_empty_environment(self):
        assert config_from_env({}) == CentralConfig()
