import os
import inspect
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from tomlkit import parse
from loguru import logger

from vsctools.core.errors import ConfigError
from vsctools.core.paths import get_default_config_dir

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_TIMEOUT = 30.0
SECRET_PROPERTIES = ("token",)


@dataclass(frozen=True)
class ApiSettings:
    """Everything the dispatcher needs to talk to the API."""

    api_url: str
    token: str
    timeout: float = DEFAULT_TIMEOUT


class VsctoolsConfig:
    """
    Settings read from config.toml and credentials.toml in the config directory.

    Both files are optional. Values from credentials.toml are merged over
    config.toml. VSCTOOLS_API_URL (or API_URL) and VSCTOOLS_TOKEN override both;
    the CLI loads a .env file from the working directory into the environment
    first, so these can also be set there.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        self._raw_config = None
        self._config_dir = config_dir

    def _get_config_dir(self) -> Path:
        if self._config_dir is None:
            self._config_dir = get_default_config_dir()
        return self._config_dir

    def _load_toml_file(self, path: Path):
        if not path.exists():
            logger.debug(f"No config file at {path}")
            return {}
        logger.debug(f"Reading {path}")
        return parse(path.read_text()).unwrap()

    def _merge_configs(self, config, credentials):
        api = dict(config.get("api", {}))
        api.update(credentials.get("api", {}))
        config["api"] = api
        return config

    def _validate_log_level(self, value: str) -> str:
        value = str(value).upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"Invalid log_level '{value}'. Must be one of: {', '.join(LOG_LEVELS)}.")
        return value

    def _ensure_loaded(self):
        if self._raw_config is None:
            raise RuntimeError("VsctoolsConfig has not been loaded. Call `config.load()` first.")

    def load(self):
        if self._raw_config is not None:
            return self

        config_dir = self._get_config_dir()
        config = self._load_toml_file(config_dir / "config.toml")
        credentials = self._load_toml_file(config_dir / "credentials.toml")
        self._raw_config = self._merge_configs(config, credentials)
        return self

    def settings(self, token: Optional[str] = None) -> ApiSettings:
        """Build ApiSettings; a `token` given here wins over every other source."""
        self._ensure_loaded()
        api_url = self.api_url
        token = token or self.token
        if not api_url:
            raise ConfigError(
                f"No API URL configured. Set VSCTOOLS_API_URL or [api] api_url in {self.config_dir}/config.toml"
            )
        if not token:
            raise ConfigError(
                f"No API token configured. Use --token, VSCTOOLS_TOKEN or [api] token in {self.config_dir}/credentials.toml"
            )
        return ApiSettings(api_url=api_url, token=token, timeout=self.timeout)

    def list_properties(self) -> dict:
        """Return a dictionary of public property names and their values."""
        self._ensure_loaded()
        props = inspect.getmembers(type(self), lambda o: isinstance(o, property))
        result = {}
        for name, _ in props:
            if name.startswith("_") or name in SECRET_PROPERTIES:
                continue
            try:
                result[name] = getattr(self, name)
            except (ValueError, TypeError, ConfigError) as e:
                result[name] = f"<error: {e}>"
        return result

    def __getitem__(self, key):
        self._ensure_loaded()
        return self._raw_config.get(key)

    def __contains__(self, key):
        self._ensure_loaded()
        return key in self._raw_config

    @property
    def config_dir(self) -> Path:
        return self._get_config_dir()

    @property
    def is_loaded(self):
        return self._raw_config is not None

    @property
    def log_level(self) -> str:
        self._ensure_loaded()
        return self._validate_log_level(self._raw_config.get("log_level", "WARNING"))

    @property
    def api_url(self) -> str:
        self._ensure_loaded()
        return (
            os.getenv("VSCTOOLS_API_URL")
            or os.getenv("API_URL")
            or self._raw_config.get("api", {}).get("api_url")
        )

    @property
    def token(self) -> str:
        self._ensure_loaded()
        return os.getenv("VSCTOOLS_TOKEN") or self._raw_config.get("api", {}).get("token")

    @property
    def masked_token(self) -> str:
        token = self.token
        if not token:
            return None
        if len(token) <= 8:
            return "*" * 8
        return token[:4] + "*" * (len(token) - 4)

    @property
    def timeout(self) -> float:
        self._ensure_loaded()
        value = self._raw_config.get("api", {}).get("timeout", DEFAULT_TIMEOUT)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ConfigError(f"Invalid [api] timeout '{value}'. Must be a positive number of seconds.")
        return float(value)
