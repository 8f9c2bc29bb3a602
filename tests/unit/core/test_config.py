"""Unit tests for configuration loading."""

from pathlib import Path

import pytest

from mms_api.core.config import (
    CONFIG_FILE_NAME,
    DEFAULT_API_URL,
    MMSConfig,
    build_config,
    default_config_path,
    load_config_file,
)
from mms_api.core.exceptions import ConfigError

ENV_VARS = (
    "MMS_USERNAME",
    "MMS_APIKEY",
    "MMS_APIURL",
    "MMS_DEFAULT_GROUP_ID",
    "MMS_DEFAULT_CLUSTER_ID",
    "MMS_LIMIT",
    "MMS_TIMEOUT",
)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the home directory at an empty temp dir and clear MMS_* variables."""
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return tmp_path


def _write(path: Path, *lines: str) -> Path:
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class TestDefaults:
    def test_defaults(self) -> None:
        """Test settings defaults."""
        config = MMSConfig()
        assert config.apiurl == DEFAULT_API_URL
        assert config.limit == 10
        assert config.username is None
        assert config.default_group_id is None

    def test_default_path(self, isolated_home: Path) -> None:
        """Test the per-user config file lives in the home directory."""
        assert default_config_path() == isolated_home / CONFIG_FILE_NAME


class TestLoadConfigFile:
    """Tests for reading the key=value file."""

    def test_missing_default_file(self) -> None:
        """Test a missing ~/.mms-api yields no values."""
        _, values = load_config_file()
        assert values == {}

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        """Test a missing --cfg file is an error."""
        with pytest.raises(ConfigError, match="does not exist"):
            load_config_file(tmp_path / "nope.conf")

    def test_reads_values(self, isolated_home: Path) -> None:
        """Test key=value lines are read from the default file."""
        _write(
            isolated_home / CONFIG_FILE_NAME,
            "username=john.doe@example.com",
            "apikey=secret-key",
            "default_group_id=5196d3628d022db4cbc11111",
        )

        path, values = load_config_file()

        assert path == isolated_home / CONFIG_FILE_NAME
        assert values == {
            "username": "john.doe@example.com",
            "apikey": "secret-key",
            "default_group_id": "5196d3628d022db4cbc11111",
        }

    def test_keys_are_case_insensitive(self, tmp_path: Path) -> None:
        """Test upper case keys are accepted."""
        path = _write(tmp_path / "mms.conf", "USERNAME=john")
        _, values = load_config_file(path)
        assert values == {"username": "john"}

    def test_unknown_key(self, tmp_path: Path) -> None:
        """Test unknown keys are rejected with key and file name."""
        path = _write(tmp_path / "mms.conf", "username=john", "colour=blue")

        with pytest.raises(ConfigError) as exc_info:
            load_config_file(path)

        assert "`colour`" in exc_info.value.message
        assert str(path) in exc_info.value.message

    def test_line_without_value(self, tmp_path: Path) -> None:
        """Test a bare word line is rejected as unknown option."""
        path = _write(tmp_path / "mms.conf", "username=john", "bogus_option")

        with pytest.raises(ConfigError, match="`bogus_option`"):
            load_config_file(path)

    def test_known_key_without_value(self, tmp_path: Path) -> None:
        """Test a known option without "=" is rejected."""
        path = _write(tmp_path / "mms.conf", "apikey")

        with pytest.raises(ConfigError, match="has no value"):
            load_config_file(path)


class TestBuildConfig:
    """Tests for merging file values, overrides and environment."""

    def test_file_values(self, tmp_path: Path) -> None:
        """Test values from the file are converted to their types."""
        path = _write(tmp_path / "mms.conf", "limit=20", "apiurl=https://mms.example.com/api/public/v1.0")

        config = build_config(path)

        assert config.limit == 20
        assert config.apiurl == "https://mms.example.com/api/public/v1.0"

    def test_overrides_win(self, tmp_path: Path) -> None:
        """Test command-line values override file values."""
        path = _write(tmp_path / "mms.conf", "username=file-user", "limit=20")

        config = build_config(path, username="cli-user", limit=None)

        assert config.username == "cli-user"
        assert config.limit == 20

    def test_environment_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test MMS_* variables fill options missing from file and command line."""
        monkeypatch.setenv("MMS_APIKEY", "env-key")

        config = build_config()

        assert config.apikey == "env-key"

    def test_file_beats_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test file values take precedence over MMS_* variables."""
        monkeypatch.setenv("MMS_USERNAME", "env-user")
        path = _write(tmp_path / "mms.conf", "username=file-user")

        assert build_config(path).username == "file-user"

    def test_invalid_file_value(self, tmp_path: Path) -> None:
        """Test invalid values name the key and the file."""
        path = _write(tmp_path / "mms.conf", "limit=0")

        with pytest.raises(ConfigError) as exc_info:
            build_config(path)

        assert "`limit`" in exc_info.value.message
        assert "from file" in exc_info.value.message

    def test_invalid_override(self) -> None:
        """Test invalid command-line values are reported as such."""
        with pytest.raises(ConfigError, match="from command line"):
            build_config(limit=-1)

    def test_invalid_override_of_file_value(self, tmp_path: Path) -> None:
        """Test a bad command-line value is blamed on the command line even when the file sets it."""
        path = _write(tmp_path / "mms.conf", "limit=20")

        with pytest.raises(ConfigError, match="from command line"):
            build_config(path, limit=0)

    def test_invalid_environment_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test invalid MMS_* values are reported as coming from the environment."""
        monkeypatch.setenv("MMS_LIMIT", "0")

        with pytest.raises(ConfigError) as exc_info:
            build_config()

        assert "`limit` from environment" in exc_info.value.message
