from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from platformdirs import user_cache_dir, user_config_dir

APP_NAME = "watsonkit"
ENV_PREFIX = "WATSONKIT_"
ENV_FILE_NAME = "settings.env"

DEFAULT_IAM_URL = "https://iam.cloud.ibm.com/identity/token"
DEFAULT_SERVICE_URL = "https://api.us-south.text-to-speech.watson.cloud.ibm.com"
DEFAULT_USER_AGENT = "watsonkit-python"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def config_dir() -> Path:
    path = Path(user_config_dir(APP_NAME, roaming=True))
    path.mkdir(parents=True, exist_ok=True)
    return path


def log_dir() -> Path:
    path = Path(user_cache_dir(APP_NAME)) / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


def _env_file_path(explicit: Path | None) -> Path:
    if explicit is not None:
        return explicit
    return config_dir() / ENV_FILE_NAME


@dataclass(slots=True)
class Settings:
    """Endpoints and transport options shared by the authenticator and services.

    The identity endpoint is injectable so tests can point the authenticator at
    a mock server. ``http2_prior_knowledge`` is fixed for the lifetime of the
    clients built from these settings; it is never decided per request.
    """

    iam_url: str = DEFAULT_IAM_URL
    service_url: str = DEFAULT_SERVICE_URL
    http2_prior_knowledge: bool = False
    user_agent: str = DEFAULT_USER_AGENT

    def service_endpoint(self, path: str) -> str:
        """Join ``path`` onto the configured service URL."""
        return f"{self.service_url.rstrip('/')}/{path.lstrip('/')}"


class SettingsManager:
    """Load and persist settings with ``WATSONKIT_*`` environment overrides."""

    def __init__(self, env_file: Path | None = None) -> None:
        self._env_file = _env_file_path(env_file)

    @property
    def env_file(self) -> Path:
        return self._env_file

    def load(self) -> Settings:
        """Load settings from environment, falling back to persisted file."""
        load_dotenv(self._env_file, override=False)

        settings = Settings()
        iam_url = self._get_env("IAM_URL")
        service_url = self._get_env("SERVICE_URL")
        user_agent = self._get_env("USER_AGENT")
        http2 = self._get_env("HTTP2_PRIOR_KNOWLEDGE")

        if iam_url:
            settings.iam_url = iam_url
        if service_url:
            settings.service_url = service_url
        if user_agent:
            settings.user_agent = user_agent
        if http2:
            settings.http2_prior_knowledge = http2.strip().lower() in _TRUE_VALUES
        return settings

    def save(self, settings: Settings) -> None:
        """Persist endpoint configuration. Credentials are never written."""
        self._env_file.parent.mkdir(parents=True, exist_ok=True)
        content = [
            f"{ENV_PREFIX}IAM_URL={settings.iam_url}",
            f"{ENV_PREFIX}SERVICE_URL={settings.service_url}",
            f"{ENV_PREFIX}HTTP2_PRIOR_KNOWLEDGE={str(settings.http2_prior_knowledge).lower()}",
            f"{ENV_PREFIX}USER_AGENT={settings.user_agent}",
        ]
        self._env_file.write_text("\n".join(content) + "\n", encoding="utf-8")

    def _get_env(self, name: str) -> str | None:
        return os.getenv(f"{ENV_PREFIX}{name}") or None


__all__ = [
    "DEFAULT_IAM_URL",
    "DEFAULT_SERVICE_URL",
    "DEFAULT_USER_AGENT",
    "Settings",
    "SettingsManager",
    "config_dir",
    "log_dir",
]
