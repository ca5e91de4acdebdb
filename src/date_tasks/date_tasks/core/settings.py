from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module


@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from the APP_ENV-selected module."""

    module: str
    local_timezone: Optional[str]
    log_level: str
    debug: bool


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    return Settings(
        module=settings_module,
        local_timezone=getattr(settings, "LOCAL_TIMEZONE", None) or None,
        log_level=str(getattr(settings, "LOG_LEVEL", "WARNING")).upper(),
        debug=bool(getattr(settings, "DEBUG", False)),
    )


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply a basic root handler at the configured level.

    Note: Library code never calls this; scripts do.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
