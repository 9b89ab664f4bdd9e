"""Application configuration.

config/app_config.yaml (or the file named by TASKBOARD_CONFIG) provides the
log, server, auth and store settings. Every key has a default so a partial
file is enough.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

CONFIG_ENV_VAR = "TASKBOARD_CONFIG"


@dataclass
class Account:
    """Demo login account and the bearer token it receives."""

    email: str
    password: str
    token: str
    user_id: int
    name: str = ""


def default_accounts() -> List[Account]:
    return [
        Account("admin@example.com", "admin123", "admin-token", 1, "Admin"),
        Account("user@example.com", "user123", "user-token", 2, "Usuario"),
    ]


@dataclass
class ServerConfig:
    """uvicorn settings."""

    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False


@dataclass
class AuthConfig:
    """Bearer token settings.

    ``fallback_user_id`` is the identity given to any bearer token that is not
    a configured account token; ``None`` rejects such tokens.
    """

    admin_user_id: int = 1
    fallback_user_id: Optional[int] = 2
    accounts: List[Account] = field(default_factory=default_accounts)

    def user_for_token(self, token: str) -> Optional[int]:
        for account in self.accounts:
            if account.token == token:
                return account.user_id
        return self.fallback_user_id

    def login(self, email: str, password: str) -> Optional[Account]:
        for account in self.accounts:
            if account.email == email and account.password == password:
                return account
        return None


@dataclass
class Config:
    """Application settings."""

    server: ServerConfig = None  # type: ignore
    auth: AuthConfig = None  # type: ignore

    log_level: str = "INFO"
    log_file: str = "logs/taskboard.log"

    seed: bool = True
    api_name: str = "Taskboard API"
    api_version: str = "1.0.0"

    def __post_init__(self):
        """Fill in nested defaults."""
        if self.server is None:
            self.server = ServerConfig()
        if self.auth is None:
            self.auth = AuthConfig()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "Config":
        """Load settings from YAML.

        Args:
            config_path: settings file; defaults to $TASKBOARD_CONFIG, then
                config/app_config.yaml at the project root

        Returns:
            Config: loaded settings
        """
        if config_path is None:
            env_path = os.getenv(CONFIG_ENV_VAR)
            if env_path:
                config_path = Path(env_path)
            else:
                project_root = Path(__file__).parent.parent.parent
                config_path = project_root / "config" / "app_config.yaml"

        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data: Dict[str, Any] = yaml.safe_load(f) or {}

        log_data = yaml_data.get("log", {})
        server_data = yaml_data.get("server", {})
        auth_data = yaml_data.get("auth", {})
        store_data = yaml_data.get("store", {})
        api_data = yaml_data.get("api", {})

        accounts_data = auth_data.get("accounts")
        accounts = (
            [Account(**item) for item in accounts_data]
            if accounts_data is not None
            else default_accounts()
        )

        return cls(
            server=ServerConfig(
                host=server_data.get("host", "0.0.0.0"),
                port=server_data.get("port", 3000),
                reload=server_data.get("reload", False),
            ),
            auth=AuthConfig(
                admin_user_id=auth_data.get("admin_user_id", 1),
                fallback_user_id=auth_data.get("fallback_user_id", 2),
                accounts=accounts,
            ),
            log_level=log_data.get("level", "INFO"),
            log_file=log_data.get("file", "logs/taskboard.log"),
            seed=store_data.get("seed", True),
            api_name=api_data.get("name", "Taskboard API"),
            api_version=api_data.get("version", "1.0.0"),
        )

    @classmethod
    def from_env(cls) -> "Config":
        """Load settings from environment variables."""
        fallback = os.getenv("TASKBOARD_FALLBACK_USER_ID", "2")
        return cls(
            server=ServerConfig(
                host=os.getenv("TASKBOARD_HOST", "0.0.0.0"),
                port=int(os.getenv("PORT", "3000")),
            ),
            auth=AuthConfig(
                admin_user_id=int(os.getenv("TASKBOARD_ADMIN_USER_ID", "1")),
                fallback_user_id=int(fallback) if fallback else None,
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE", "logs/taskboard.log"),
            seed=os.getenv("TASKBOARD_SEED", "true").lower() == "true",
        )
