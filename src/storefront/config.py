"""Runtime settings for the storefront, read from environment variables.

    STOREFRONT_STORE          "memory" (default) or "jsonl"
    STOREFRONT_DATA_DIR       directory holding the JSON-lines store files
    STOREFRONT_REQUIRE_LOGIN  whether checkout requires a signed-in user
    SESSION_SECRET            key used to sign the session cookie
    SESSION_MAX_AGE           session cookie lifetime in seconds
"""

import os
from dataclasses import dataclass
from pathlib import Path

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    store_backend: str = "memory"
    data_dir: Path = Path("data")
    require_login_for_checkout: bool = True
    session_secret: str = "dev-secret-change-me"
    session_max_age: int = 60 * 60 * 24

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            store_backend=os.environ.get("STOREFRONT_STORE", "memory").strip().lower(),
            data_dir=Path(os.environ.get("STOREFRONT_DATA_DIR", "data")),
            require_login_for_checkout=_flag("STOREFRONT_REQUIRE_LOGIN", True),
            session_secret=os.environ.get("SESSION_SECRET", "dev-secret-change-me"),
            session_max_age=int(os.environ.get("SESSION_MAX_AGE", str(60 * 60 * 24))),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the active settings, loading them from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def set_settings(settings: Settings) -> None:
    """Override the active settings (useful for tests)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Forget overrides; the next call re-reads the environment."""
    global _settings
    _settings = None
