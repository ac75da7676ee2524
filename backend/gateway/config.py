"""LLM Gateway application configuration.

Loads settings from two YAML files:
  * gateway.settings.yaml: non-secret configuration
  * gateway.secrets.yaml : secrets (never committed)

Environment variables (optionally from a ``.env`` file) override both files,
so the service can be run with nothing more than ``OPENAI_API_KEY`` set.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

SETTINGS_FILE = Path("gateway.settings.yaml")
SECRETS_FILE  = Path("gateway.secrets.yaml")


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return {}
    with path.open(encoding="utf-8") as fh:
        return yaml.safe_load(fh) or {}


# ---------------------------------------------------------------------------
# Secrets models
# ---------------------------------------------------------------------------


class OpenAISecrets(BaseModel):
    api_key:      Optional[str] = None
    base_url:     Optional[str] = None
    organization: Optional[str] = None


class Secrets(BaseModel):
    openai: OpenAISecrets = Field(default_factory=OpenAISecrets)


# ---------------------------------------------------------------------------
# Settings models
# ---------------------------------------------------------------------------


class ServerSettings(BaseModel):
    host:            str       = "0.0.0.0"
    port:            int       = 3000
    reload:          bool      = False
    allowed_origins: List[str] = Field(default_factory=lambda: ["*"])


class LoggingSettings(BaseModel):
    level:        str  = "info"
    # Summarise every provider response at DEBUG level.
    log_payloads: bool = False


class ProviderSettings(BaseModel):
    """Outbound client options for the OpenAI SDK."""
    # None keeps the SDK default; requests are never retried.
    timeout_seconds: Optional[float] = None


class AppConfig(BaseModel):
    server:   ServerSettings   = Field(default_factory=ServerSettings)
    logging:  LoggingSettings  = Field(default_factory=LoggingSettings)
    provider: ProviderSettings = Field(default_factory=ProviderSettings)
    secrets:  Secrets          = Field(default_factory=Secrets)

    @property
    def has_api_key(self) -> bool:
        return bool(self.secrets.openai.api_key)


# ---------------------------------------------------------------------------
# Environment overrides
# ---------------------------------------------------------------------------


def _apply_env_overrides(data: Dict[str, Any], env: Mapping[str, str]) -> None:
    """Overlay environment variables onto the merged YAML data in place."""
    server  = data.setdefault("server", {})
    log_cfg = data.setdefault("logging", {})
    openai  = data.setdefault("secrets", {}).setdefault("openai", {})

    if env.get("OPENAI_API_KEY"):
        openai["api_key"] = env["OPENAI_API_KEY"]
    if env.get("OPENAI_BASE_URL"):
        openai["base_url"] = env["OPENAI_BASE_URL"]
    if env.get("OPENAI_ORGANIZATION"):
        openai["organization"] = env["OPENAI_ORGANIZATION"]
    if env.get("HOST"):
        server["host"] = env["HOST"]
    if env.get("PORT"):
        server["port"] = env["PORT"]
    if env.get("LOG_LEVEL"):
        log_cfg["level"] = env["LOG_LEVEL"]


# ---------------------------------------------------------------------------
# Public loader
# ---------------------------------------------------------------------------


def load_config(
    settings_path: Optional[Path] = None,
    secrets_path: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> AppConfig:
    """Load and merge settings, secrets and environment into an *AppConfig*.

    Args:
        settings_path: Settings YAML.  Defaults to ``gateway.settings.yaml``.
        secrets_path:  Secrets YAML.  Defaults to ``gateway.secrets.yaml``.
        env:           Environment mapping.  Defaults to ``os.environ``
                       after loading ``.env``.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    settings_data = _load_yaml(Path(settings_path) if settings_path else SETTINGS_FILE)
    secrets_data  = _load_yaml(Path(secrets_path) if secrets_path else SECRETS_FILE)

    # Merge: secrets live under the "secrets" key in AppConfig
    settings_data["secrets"] = secrets_data
    _apply_env_overrides(settings_data, env)

    config = AppConfig(**settings_data)
    logger.info(
        "Config loaded (server=%s:%s, api_key=%s, base_url=%s)",
        config.server.host,
        config.server.port,
        "set" if config.has_api_key else "missing",
        config.secrets.openai.base_url or "default",
    )
    return config


_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Return the process-wide config, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
