"""Centralized configuration loading.

Loads environment variables once and provides a typed Settings object
for the rest of the codebase. Entry points (the GUI, tests) call
get_settings() instead of reading os.environ directly so .env is respected.
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv


# Load .env once at import time
load_dotenv()

DEFAULT_API_URL = "https://api.artic.edu/api/v1/artworks"
# The artworks API ignores `limit` above this
MAX_PAGE_SIZE = 100


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass
class Settings:
    # Art Institute of Chicago API
    api_url: str = field(default_factory=lambda: os.getenv("ARTIC_API_URL", DEFAULT_API_URL))
    user_agent: str = field(
        default_factory=lambda: os.getenv("ARTIC_USER_AGENT", "artic-selector (desktop)")
    )
    timeout_seconds: float = field(default_factory=lambda: _env_float("ARTIC_TIMEOUT_SECONDS", 10.0))

    # Table
    page_size: int = field(default_factory=lambda: _env_int("ARTIC_PAGE_SIZE", 10))

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("ARTIC_LOG_LEVEL", "INFO"))
    verbose: bool = field(default_factory=lambda: os.getenv("ARTIC_VERBOSE", "0") == "1")

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            self.page_size = 10
        self.page_size = min(self.page_size, MAX_PAGE_SIZE)
        if self.timeout_seconds <= 0:
            self.timeout_seconds = 10.0


def get_settings() -> Settings:
    """Return a new Settings instance (cheap dataclass construction)."""
    return Settings()
