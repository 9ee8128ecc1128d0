"""Settings read from the environment (and a .env file when present)."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Repo root: src/grandstrand/infrastructure/settings.py -> up four levels
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent.parent

LOG_LEVEL_ENV = "GRANDSTRAND_LOG_LEVEL"
PHONE_REGION_ENV = "GRANDSTRAND_PHONE_REGION"


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    phone_region: str = "US"

    def __post_init__(self):
        level = (self.log_level or "").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}.")
        object.__setattr__(self, "log_level", level)

        region = (self.phone_region or "").strip().upper()
        if len(region) != 2 or not region.isalpha():
            raise ValueError(
                f"Phone region must be a two-letter region code, got {self.phone_region!r}."
            )
        object.__setattr__(self, "phone_region", region)


def load_dotenv_file() -> Path | None:
    """Load .env from repo root or current dir. Returns the file used, if any."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            return path
    return None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environ, defaulting to os.environ after loading .env."""
    if environ is None:
        path = load_dotenv_file()
        if path is not None:
            logger.debug("Loaded environment from %s", path)
        environ = os.environ
    defaults = Settings()
    return Settings(
        log_level=environ.get(LOG_LEVEL_ENV, defaults.log_level),
        phone_region=environ.get(PHONE_REGION_ENV, defaults.phone_region),
    )
