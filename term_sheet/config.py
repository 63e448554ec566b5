"""Configuration loader for the term-sheet extraction service."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_MAX_PDF_BYTES = 50 * 1024 * 1024


def _get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if value is not None:
        value = value.strip()
        if value == "":
            return default
        return value
    return default


def _get_int(key: str, default: int) -> int:
    value = _get_env(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be an integer") from exc


def _get_bool(key: str, default: bool) -> bool:
    value = _get_env(key)
    if value is None:
        return default
    value_lower = value.lower()
    if value_lower in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if value_lower in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(f"Environment variable {key} must be a boolean")


@dataclass(slots=True)
class AppConfig:
    log_level: str = "INFO"
    log_json: bool = True
    max_pdf_bytes: int = DEFAULT_MAX_PDF_BYTES
    service_host: str = "0.0.0.0"
    service_port: int = 8000

    @property
    def max_pdf_megabytes(self) -> int:
        return self.max_pdf_bytes // (1024 * 1024)


def load_config() -> AppConfig:
    log_level = _get_env("LOG_LEVEL", "INFO").upper()
    log_json = _get_bool("LOG_JSON", True)
    max_pdf_bytes = max(1, _get_int("MAX_PDF_BYTES", DEFAULT_MAX_PDF_BYTES))
    service_host = _get_env("SERVICE_HOST", "0.0.0.0")
    service_port = _get_int("SERVICE_PORT", 8000)
    if not 0 < service_port < 65536:
        raise ValueError("Environment variable SERVICE_PORT must be a valid TCP port")

    return AppConfig(
        log_level=log_level,
        log_json=log_json,
        max_pdf_bytes=max_pdf_bytes,
        service_host=service_host,
        service_port=service_port,
    )
