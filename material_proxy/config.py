# created: 10/19/2026
# last updated: 10/19/2026
# settings read from environment variables

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

DEFAULT_MODEL_NAME = "gemini-2.5-flash-preview-05-20"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT_SECONDS = 30.0


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    model_name: str = DEFAULT_MODEL_NAME
    api_base: str = DEFAULT_API_BASE
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    cors_origins: Tuple[str, ...] = ("*",)
    log_level: str = "INFO"

    @property
    def endpoint(self) -> str:
        return f"{self.api_base.rstrip('/')}/models/{self.model_name}:generateContent"


def _parse_timeout(raw: Optional[str]) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"GEMINI_TIMEOUT_SECONDS must be a number, got {raw!r}.")
    if value <= 0:
        raise ConfigError("GEMINI_TIMEOUT_SECONDS must be positive.")
    return value


def _parse_origins(raw: Optional[str]) -> Tuple[str, ...]:
    origins = tuple(o.strip() for o in (raw or "").split(",") if o.strip())
    return origins or ("*",)


def _parse_log_level(raw: Optional[str]) -> str:
    level = (raw or "").strip().upper() or "INFO"
    # getLevelName maps known names to their number
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"LOG_LEVEL must be a logging level name, got {raw!r}.")
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    A missing GEMINI_API_KEY is not an error here: the server still starts
    and every request answers 500 until the key is configured.
    """
    env = os.environ if environ is None else environ

    return Settings(
        api_key=(env.get("GEMINI_API_KEY") or "").strip(),
        model_name=(env.get("GEMINI_MODEL_NAME") or DEFAULT_MODEL_NAME).strip(),
        api_base=(env.get("GEMINI_API_BASE") or DEFAULT_API_BASE).strip(),
        timeout_seconds=_parse_timeout(env.get("GEMINI_TIMEOUT_SECONDS")),
        cors_origins=_parse_origins(env.get("CORS_ORIGINS")),
        log_level=_parse_log_level(env.get("LOG_LEVEL")),
    )
