from pathlib import Path

import pytest

from src.server.dependencies import get_config
from src.taskboard.config import CONFIG_ENV_VAR, Config


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "app_config.yaml"
    path.write_text(
        """
log:
  level: DEBUG
server:
  port: 8080
auth:
  admin_user_id: 2
  fallback_user_id: null
  accounts:
    - email: ops@example.com
      password: secret
      token: ops-token
      user_id: 2
""",
        encoding="utf-8",
    )
    return path


def test_partial_file_keeps_defaults(config_file):
    config = Config.from_yaml(config_file)

    assert config.log_level == "DEBUG"
    assert config.log_file == "logs/taskboard.log"
    assert config.server.port == 8080
    assert config.server.host == "0.0.0.0"
    assert config.seed is True
    assert config.api_name == "Taskboard API"


def test_auth_section(config_file):
    auth = Config.from_yaml(config_file).auth

    assert auth.admin_user_id == 2
    assert auth.user_for_token("ops-token") == 2
    assert auth.user_for_token("anything-else") is None
    assert auth.login("ops@example.com", "secret").token == "ops-token"
    assert auth.login("ops@example.com", "wrong") is None


def test_env_var_selects_the_file(config_file, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

    assert Config.from_yaml().server.port == 8080


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    config = Config.from_yaml(path)

    assert config.server.port == 3000
    assert config.auth.admin_user_id == 1
    assert config.auth.user_for_token("admin-token") == 1
    assert config.auth.user_for_token("user-token") == 2
    assert config.auth.user_for_token("unknown") == 2


def test_bundled_config_loads(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

    config = Config.from_yaml()

    assert config.server.port == 3000
    assert [a.token for a in config.auth.accounts] == ["admin-token", "user-token"]


def test_environment_settings(monkeypatch):
    monkeypatch.setenv("PORT", "8081")
    monkeypatch.setenv("TASKBOARD_ADMIN_USER_ID", "2")
    monkeypatch.setenv("TASKBOARD_FALLBACK_USER_ID", "")
    monkeypatch.setenv("TASKBOARD_SEED", "false")

    config = Config.from_env()

    assert config.server.port == 8081
    assert config.auth.admin_user_id == 2
    assert config.auth.user_for_token("unknown") is None
    assert config.auth.user_for_token("user-token") == 2
    assert config.seed is False


def test_missing_file_falls_back_to_environment(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.yaml"))
    monkeypatch.setenv("PORT", "8082")
    get_config.cache_clear()
    try:
        assert get_config().server.port == 8082
    finally:
        get_config.cache_clear()
