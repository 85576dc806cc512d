"""Configuration Management Package

Builds the single Config value used for a run. Sources, lowest to highest
precedence:

1. Built-in defaults
2. .claude-commitrc (JSON) in the current directory, else in the home directory
3. Environment variables (a .env file is loaded into the environment first)
"""

import json
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from claude_commit import (
    API_KEY_ENV,
    BASE_URL_ENV,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    MAX_TOKENS_ENV,
    MODEL_ENV,
)

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


@dataclass
class Settings:
    """Tunable settings read from the rc-file."""
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    base_url: Optional[str] = None

    def validate(self) -> list[str]:
        """Validate settings and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Settings()

        if not isinstance(self.model, str) or not self.model.strip():
            warnings.append(f"Invalid model '{self.model}', using '{defaults.model}'")
            self.model = defaults.model

        # bool is an int subclass, reject it explicitly
        if isinstance(self.max_tokens, bool) or not isinstance(self.max_tokens, int) or self.max_tokens <= 0:
            warnings.append(f"Invalid max_tokens '{self.max_tokens}', using {defaults.max_tokens}")
            self.max_tokens = defaults.max_tokens

        if self.base_url is not None and (not isinstance(self.base_url, str) or not self.base_url.strip()):
            warnings.append(f"Invalid base_url '{self.base_url}', using the default endpoint")
            self.base_url = defaults.base_url

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Settings':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        settings = cls(**filtered)
        for warning in settings.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return settings


@dataclass(frozen=True)
class Config:
    """Everything a run needs, resolved once at startup."""
    api_key: str = field(repr=False)
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    base_url: Optional[str] = None
    verbose: bool = False


class ConfigManager:
    """Loads settings from the rc-file and resolves the run Config."""

    CONFIG_FILENAME = ".claude-commitrc"

    def __init__(self):
        self._settings: Optional[Settings] = None

    def load_settings(self) -> Settings:
        if self._settings is not None:
            return self._settings

        local_path = Path.cwd() / self.CONFIG_FILENAME
        if local_path.exists():
            self._settings = self._load_from_file(local_path)
            return self._settings

        home_path = Path.home() / self.CONFIG_FILENAME
        if home_path.exists():
            self._settings = self._load_from_file(home_path)
            return self._settings

        self._settings = Settings()
        return self._settings

    def _load_from_file(self, path: Path) -> Settings:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Settings()

        if not isinstance(data, dict):
            print(f"Warning: Could not load {path}: expected a JSON object", file=sys.stderr)
            return Settings()

        logger.debug("Loaded settings from %s", path)
        return Settings.from_dict(data)

    def resolve(self, env: Mapping[str, str], verbose: bool = False) -> Config:
        """Combine rc-file settings with environment overrides.

        Raises:
            ConfigError: if the API key is missing or an override is invalid
        """
        api_key = (env.get(API_KEY_ENV) or "").strip()
        if not api_key:
            raise ConfigError(
                f"{API_KEY_ENV} must be set in the environment or a .env file:\n"
                f"  export {API_KEY_ENV}='your-key-here'"
            )

        settings = self.load_settings()
        model = env.get(MODEL_ENV) or settings.model
        base_url = env.get(BASE_URL_ENV) or settings.base_url
        max_tokens = settings.max_tokens

        raw_max_tokens = env.get(MAX_TOKENS_ENV)
        if raw_max_tokens:
            try:
                max_tokens = int(raw_max_tokens)
            except ValueError:
                raise ConfigError(f"{MAX_TOKENS_ENV} must be a positive integer, got '{raw_max_tokens}'")
            if max_tokens <= 0:
                raise ConfigError(f"{MAX_TOKENS_ENV} must be a positive integer, got '{raw_max_tokens}'")

        return Config(
            api_key=api_key,
            model=model,
            max_tokens=max_tokens,
            base_url=base_url,
            verbose=verbose,
        )


def load_env_file() -> Optional[str]:
    """Populate os.environ from the nearest .env file. Existing variables win."""
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path, override=False)
        logger.debug("Loaded environment variables from %s", path)
    return path or None


def load_config(verbose: bool = False, env: Optional[Mapping[str, str]] = None) -> Config:
    """Load .env, read the rc-file and build the run Config."""
    if env is None:
        load_env_file()
        env = os.environ
    return ConfigManager().resolve(env, verbose=verbose)


__all__ = [
    "Config",
    "ConfigError",
    "ConfigManager",
    "Settings",
    "load_config",
    "load_env_file",
]
