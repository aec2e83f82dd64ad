"""
parcel_tracker/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

_ALLOWED_BROWSER_MODES = {"local", "remote"}

DEFAULT_TRACKING_URL = "https://ssw.inf.br/2/rastreamento_pf?#"
DEFAULT_REMOTE_ENDPOINT = "wss://chrome.browserless.io"
DEFAULT_NOT_FOUND_PHRASES: tuple[str, ...] = (
    "nenhuma encomenda encontrada",
    "nenhum registro encontrado",
    "nenhuma mercadoria encontrada",
    "não foram encontrad",
    "nao foram encontrad",
    "não localizad",
)


def load_env_files() -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    project_root = Path(__file__).resolve().parents[1]
    for filename in (".env", ".env.local"):
        env_path = project_root / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_float_env(name: str, default: float) -> float:
    """
    Read a float from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_optional_str_env(name: str) -> str | None:
    """
    Read an optional string value from environment variables.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _get_phrases_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = _get_optional_str_env(name)
    if raw is None:
        return default
    phrases = tuple(part.strip().lower() for part in raw.split("|") if part.strip())
    return phrases or default


@dataclass(frozen=True)
class TrackingSettings:
    """
    Target page selectors, per-state timeouts and cache freshness.
    """

    tracking_url: str = DEFAULT_TRACKING_URL
    identifier_selector: str = "#cnpjdest"
    submit_selector: str = "#btn_rastrear"
    result_row_selector: str = "table tbody tr"
    navigation_wait_until: str = "domcontentloaded"
    navigation_timeout_seconds: float = 60.0
    form_timeout_seconds: float = 10.0
    result_timeout_seconds: float = 30.0
    settle_delay_seconds: float = 0.5
    cache_ttl_seconds: float = 300.0
    not_found_phrases: tuple[str, ...] = DEFAULT_NOT_FOUND_PHRASES


@dataclass(frozen=True)
class BrowserSettings:
    """
    How a browser session is acquired: a local process or a remote endpoint.
    """

    mode: str = "local"
    remote_endpoint: str = DEFAULT_REMOTE_ENDPOINT
    remote_token: str | None = None
    executable_path: str | None = None
    headless: bool = True
    launch_args: tuple[str, ...] = ("--no-sandbox", "--disable-setuid-sandbox")


def _resolve_browser_mode() -> str:
    """
    Read BROWSER_MODE, defaulting to 'remote' inside managed hosting (VERCEL set).
    """

    default_mode = "remote" if _get_optional_str_env("VERCEL") else "local"
    mode = _get_str_env("BROWSER_MODE", default_mode).lower()
    if mode not in _ALLOWED_BROWSER_MODES:
        raise RuntimeError(
            f"BROWSER_MODE '{mode}' is not valid. "
            f"Allowed values: {sorted(_ALLOWED_BROWSER_MODES)}."
        )
    return mode


@lru_cache(maxsize=1)
def get_tracking_settings() -> TrackingSettings:
    """
    Return cached tracking settings from environment variables.
    """

    return TrackingSettings(
        tracking_url=_get_str_env("TRACKING_URL", DEFAULT_TRACKING_URL),
        identifier_selector=_get_str_env("TRACKING_IDENTIFIER_SELECTOR", "#cnpjdest"),
        submit_selector=_get_str_env("TRACKING_SUBMIT_SELECTOR", "#btn_rastrear"),
        result_row_selector=_get_str_env("TRACKING_RESULT_ROW_SELECTOR", "table tbody tr"),
        navigation_wait_until=_get_str_env("TRACKING_NAVIGATION_WAIT_UNTIL", "domcontentloaded"),
        navigation_timeout_seconds=max(
            1.0, _get_float_env("TRACKING_NAVIGATION_TIMEOUT_SECONDS", 60.0)
        ),
        form_timeout_seconds=max(1.0, _get_float_env("TRACKING_FORM_TIMEOUT_SECONDS", 10.0)),
        result_timeout_seconds=max(1.0, _get_float_env("TRACKING_RESULT_TIMEOUT_SECONDS", 30.0)),
        settle_delay_seconds=max(0.0, _get_float_env("TRACKING_SETTLE_DELAY_SECONDS", 0.5)),
        cache_ttl_seconds=max(1.0, _get_float_env("TRACKING_CACHE_TTL_SECONDS", 300.0)),
        not_found_phrases=_get_phrases_env("TRACKING_NOT_FOUND_PHRASES", DEFAULT_NOT_FOUND_PHRASES),
    )


@lru_cache(maxsize=1)
def get_browser_settings() -> BrowserSettings:
    """
    Return cached browser acquisition settings.

    The remote token and executable override are optional here; their absence
    only matters when a session is actually acquired.
    """

    return BrowserSettings(
        mode=_resolve_browser_mode(),
        remote_endpoint=_get_str_env("BROWSERLESS_ENDPOINT", DEFAULT_REMOTE_ENDPOINT),
        remote_token=_get_optional_str_env("BROWSERLESS_TOKEN"),
        executable_path=_get_optional_str_env("BROWSER_EXECUTABLE_PATH"),
        headless=_get_bool_env("BROWSER_HEADLESS", True),
    )
