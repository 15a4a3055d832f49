"""Pydantic-based settings loaded from YAML with env-var overrides."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings

from storefront_e2e.exceptions import ConfigurationError


_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_PREFIX = "STOREFRONT_"


class AppSettings(BaseSettings):
    """Suite configuration with YAML + env var support.

    Env vars are prefixed with ``STOREFRONT_``.
    Example: ``STOREFRONT_UI_BASE_URL=http://localhost:8080``
    """

    model_config = {"env_prefix": _ENV_PREFIX}

    env_name: str = "test"

    # --- ui ---
    ui_base_url: str = "https://automationexercise.com"
    ui_timeout: int = 30_000  # ms, navigation and test timeout

    # --- api ---
    api_base_url: str = "https://fakestoreapi.com"
    api_timeout: int = 10_000  # ms

    # --- credentials ---
    test_user_email: str = "testuser@example.com"
    test_user_password: str = "Test@123"

    # --- browser ---
    headless: bool = True
    slow_mo: int = 0  # ms between Playwright actions

    # --- reporting ---
    screenshot_on_failure: bool = False
    video_on_failure: bool = False
    trace_on_failure: bool = False
    artifacts_dir: str = "test-results"
    screenshot_dir: str = "screenshots"

    # --- logging ---
    log_level: str = "INFO"

    @field_validator("ui_base_url", "api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.strip().rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v!r}")
        return level

    @field_validator("ui_timeout", "api_timeout", "slow_mo")
    @classmethod
    def _non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("must be >= 0")
        return v

    # ---- factory ----

    @classmethod
    def from_yaml(cls, path: str | Path | None = None) -> "AppSettings":
        """Load settings from a YAML file, then overlay env vars.

        Env vars (``STOREFRONT_*``) take priority over YAML values.
        """
        if path is None:
            path = _PROJECT_ROOT / "settings.yaml"
        path = Path(path)
        raw: dict[str, Any] = {}
        if path.exists():
            with open(path) as fh:
                raw = yaml.safe_load(fh) or {}
        if not isinstance(raw, dict):
            raise ConfigurationError(f"{path} must contain a mapping at the top level.")

        # Let env vars override YAML: remove YAML keys that have an env override
        for key in list(raw.keys()):
            if f"{_ENV_PREFIX}{key.upper()}" in os.environ:
                del raw[key]

        try:
            return cls(**raw)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid settings in {path}: {exc}") from exc
