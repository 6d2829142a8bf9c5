from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from profile_api.domain.entities.profile import ProfileEntity

logger = logging.getLogger(__name__)

DEFAULT_CAT_FACT_API_URL = "https://catfact.ninja/fact"
DEFAULT_TIMEOUT_MS = 20000
DEFAULT_PORT = 5000


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default
    if value <= 0:
        logger.warning(f"Ignoring non-positive {name}={raw!r}, using {default}")
        return default
    return value


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    cat_fact_api_url: str = DEFAULT_CAT_FACT_API_URL
    external_api_timeout_ms: int = DEFAULT_TIMEOUT_MS
    env: str = "development"
    log_level: str = "INFO"
    profile: ProfileEntity = field(
        default_factory=lambda: ProfileEntity(
            email="eacontent1@gmail.com",
            name="Eniola Agboola",
            stack="Python/FastAPI",
        )
    )

    @property
    def external_api_timeout(self) -> float:
        """Bounded wait for the upstream call, in seconds."""
        return self.external_api_timeout_ms / 1000

    @classmethod
    def from_env(cls) -> Settings:
        defaults = cls()
        profile = ProfileEntity(
            email=os.getenv("PROFILE_EMAIL", defaults.profile.email),
            name=os.getenv("PROFILE_NAME", defaults.profile.name),
            stack=os.getenv("PROFILE_STACK", defaults.profile.stack),
        )
        return cls(
            host=os.getenv("HOST", defaults.host),
            port=_int_env("PORT", DEFAULT_PORT),
            cat_fact_api_url=os.getenv("CAT_FACT_API_URL", DEFAULT_CAT_FACT_API_URL),
            external_api_timeout_ms=_int_env("EXTERNAL_API_TIMEOUT_MS", DEFAULT_TIMEOUT_MS),
            env=os.getenv("ENV", defaults.env),
            log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
            profile=profile,
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
