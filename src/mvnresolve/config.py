import os
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, Field, SecretStr

CONFIG_DIR = Path.home() / ".mvnresolve"
CONFIG_FILE = CONFIG_DIR / "config"

REPOSITORY_URL_KEY = "MVNRESOLVE_REPOSITORY_URL"
USERNAME_KEY = "MVNRESOLVE_USERNAME"
TIMEOUT_KEY = "MVNRESOLVE_TIMEOUT"
# only ever read from the environment, never persisted
PASSWORD_KEY = "MVNRESOLVE_PASSWORD"

DEFAULT_USER_AGENT = "mvnresolve/0.1.0"


class Settings(BaseModel):
    """effective configuration for a run."""
    repository_url: Optional[str] = None
    username: str = ""
    password: SecretStr = SecretStr("")
    timeout: float = Field(default=30.0, gt=0)
    user_agent: str = DEFAULT_USER_AGENT


def _read_config(config_file: Path) -> Dict[str, str]:
    config = {}
    if not config_file.exists():
        return config
    try:
        with open(config_file, "r") as f:
            for line in f:
                line = line.strip()
                if "=" in line and not line.startswith("#"):
                    key, value = line.split("=", 1)
                    config[key.strip()] = value.strip()
    except (IOError, PermissionError, OSError):
        # if we can't read the file, treat as not configured
        return {}
    return config


def get_config_value(key: str, config_file: Optional[Path] = None) -> Optional[str]:
    """get a config value, environment variables take precedence over the config file."""
    if os.environ.get(key):
        return os.environ[key]
    return _read_config(config_file or CONFIG_FILE).get(key)


def set_config_value(key: str, value: str, config_file: Optional[Path] = None):
    """set a value in the config file, preserving other config values."""
    if key == PASSWORD_KEY:
        raise ValueError(f"{PASSWORD_KEY} is read from the environment only")

    config_file = config_file or CONFIG_FILE
    config = _read_config(config_file)
    config[key] = value

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w") as f:
            for k, v in config.items():
                f.write(f"{k}={v}\n")
    except (IOError, PermissionError, OSError) as e:
        raise RuntimeError(f"failed to write config file: {e}") from e


def load_settings(config_file: Optional[Path] = None) -> Settings:
    """build settings from the config file and environment."""
    values = {}
    url = get_config_value(REPOSITORY_URL_KEY, config_file)
    if url:
        values["repository_url"] = url
    username = get_config_value(USERNAME_KEY, config_file)
    if username:
        values["username"] = username
    password = os.environ.get(PASSWORD_KEY)
    if password:
        values["password"] = password
    timeout = get_config_value(TIMEOUT_KEY, config_file)
    if timeout:
        values["timeout"] = timeout
    return Settings(**values)
