"""Load and validate environment variables. Uses python-dotenv.

This module is intentionally thin and side-effect free except for loading `.env`.
Callers should use the accessor functions below rather than reading `os.environ`
directly, to keep environment handling consistent.
"""

from pathlib import Path

from dotenv import load_dotenv
import os

DEFAULT_API_BASE_URL = "http://localhost:8080/api"


def _project_root() -> Path:
    """Resolve project root (the directory holding app.py and .env)."""
    return Path(__file__).resolve().parent.parent.parent


def load_config() -> None:
    """
    Load .env from project root. Idempotent; safe to call multiple times.
    Existing environment variables win over .env values.
    """
    load_dotenv(_project_root() / ".env", override=False)


def get_required(key: str) -> str:
    """
    Get required env var. Raises if missing or empty.

    Raises:
        ValueError: If key is missing or empty after trimming.
    """
    load_config()
    val = os.getenv(key, "").strip()
    if not val:
        raise ValueError(
            f"Missing required environment variable: {key}. "
            "Set it in .env or export it."
        )
    return val


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def get_optional_int(key: str, default: int) -> int:
    """Get optional env var as int; return default if missing or invalid."""
    load_config()
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_optional_float(key: str, default: float) -> float:
    """Get optional env var as float; return default if missing or invalid."""
    load_config()
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# --- Public config accessors ---

def api_base_url() -> str:
    """Optional: base URL of the user-admin API. Trailing slash stripped."""
    return get_optional("USER_ADMIN_API_URL", DEFAULT_API_BASE_URL).rstrip("/")


def api_token() -> str | None:
    """Optional: bearer token sent with every API request."""
    val = get_optional("USER_ADMIN_API_TOKEN", "")
    return val or None


def api_timeout() -> float:
    """Optional: per-request timeout in seconds. Default 30."""
    return get_optional_float("USER_ADMIN_API_TIMEOUT", 30.0)


def users_page_size() -> int:
    """Optional: rows per page on the user table. Default 20."""
    size = get_optional_int("USERS_PAGE_SIZE", 20)
    return size if size > 0 else 20


def app_name() -> str:
    """Optional: application name used as the prefix of alert headers (X-<name>-alert)."""
    return get_optional("USER_ADMIN_APP_NAME", "")


def log_level() -> str:
    """Optional: log level name. Default INFO."""
    return get_optional("LOG_LEVEL", "INFO").upper()


def log_file() -> Path | None:
    """Optional: log file path, relative paths resolved against the project root."""
    val = get_optional("LOG_FILE", "")
    if not val:
        return None
    p = Path(val)
    return p if p.is_absolute() else _project_root() / p