import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    secret_key: str
    env: str
    log_level: str

    customers_api_url: str
    customers_api_token: str
    customers_api_timeout: float

    reset_pending_on_failure: bool


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def _getenv_float(name: str, default: float) -> float:
    raw = _getenv(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number (got {raw!r}).") from None
    if value <= 0:
        raise RuntimeError(f"{name} must be greater than zero (got {raw!r}).")
    return value


def _getenv_flag(name: str) -> bool:
    return _getenv(name).lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    env = _getenv("ENV", "development")
    # No localhost fallback in production; create_app refuses to start without a URL.
    api_url_default = "" if env.lower() in ("prod", "production") else "http://localhost:3001"
    return Settings(
        secret_key=_getenv("SECRET_KEY", "change-me"),
        env=env,
        log_level=_getenv("LOG_LEVEL", "INFO").upper(),
        customers_api_url=_getenv("CUSTOMERS_API_URL", api_url_default),
        customers_api_token=_getenv("CUSTOMERS_API_TOKEN", ""),
        customers_api_timeout=_getenv_float("CUSTOMERS_API_TIMEOUT", 10.0),
        reset_pending_on_failure=_getenv_flag("CUSTOMER_FORM_RESET_PENDING_ON_FAILURE"),
    )


def load_config() -> dict:
    s = load_settings()
    is_production = s.env in ("prod", "production")
    return {
        "SECRET_KEY": s.secret_key,
        "ENV": s.env,
        "LOG_LEVEL": s.log_level,
        "CUSTOMERS_API_URL": s.customers_api_url,
        "CUSTOMERS_API_TOKEN": s.customers_api_token,
        "CUSTOMERS_API_TIMEOUT": s.customers_api_timeout,
        # Submit control stays disabled after a failed attempt unless enabled.
        "CUSTOMER_FORM_RESET_PENDING_ON_FAILURE": s.reset_pending_on_failure,
        # security defaults
        "SESSION_COOKIE_HTTPONLY": True,
        "SESSION_COOKIE_SAMESITE": "Lax",
        "SESSION_COOKIE_SECURE": is_production,  # Require HTTPS in production
        # form posts only, no uploads (64KB)
        "MAX_CONTENT_LENGTH": 64 * 1024,
    }
