"""Application configuration loaded from environment variables."""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_float(value: str, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


@dataclass
class Settings:
    """Runtime settings; every field can be overridden from the environment."""
    app_name: str = "BunkApp"
    app_tagline: str = "Smart Attendance Calculator"
    default_criteria: float = 75.0
    storage_path: str = os.path.join(".bunkapp", "storage.json")
    allow_origins: List[str] = field(default_factory=lambda: ["*"])
    debug: bool = False
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Build settings from the current environment."""
    defaults = Settings()
    criteria = _parse_float(os.getenv('DEFAULT_CRITERIA', ''), defaults.default_criteria)
    if not 0 < criteria <= 100:
        criteria = defaults.default_criteria

    return Settings(
        app_name=os.getenv('APP_NAME', defaults.app_name),
        app_tagline=os.getenv('APP_TAGLINE', defaults.app_tagline),
        default_criteria=criteria,
        storage_path=os.getenv('STORAGE_PATH', defaults.storage_path),
        allow_origins=[o.strip() for o in os.getenv('ALLOW_ORIGINS', '*').split(',') if o.strip()],
        debug=_parse_bool(os.getenv('DEBUG', 'False')),
        log_level=os.getenv('LOG_LEVEL', defaults.log_level).upper(),
    )
