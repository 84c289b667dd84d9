"""Configuration loader: YAML files + environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from svgpolicy.core.models import AppConfig, PolicyConfig


def _find_project_root() -> Path:
    """Walk up from cwd to find a directory containing pyproject.toml."""
    cwd = Path.cwd()
    for p in [cwd, *cwd.parents]:
        if (p / "pyproject.toml").exists():
            return p
    return cwd


def _env_list(name: str, default: list[str]) -> list[str]:
    value = os.getenv(name)
    if value is None:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load configuration from YAML + environment variables.

    Priority: env vars > .env file > YAML defaults. Values are validated by
    the pydantic models, so a quoted ``"false"`` in YAML reads as False and an
    unparseable flag raises ``pydantic.ValidationError``.
    """
    root = _find_project_root()
    load_dotenv(root / ".env")

    # Load YAML
    yaml_path = Path(config_path) if config_path else root / "config" / "default.yaml"
    yaml_data: dict = {}
    if yaml_path.exists():
        with open(yaml_path) as f:
            yaml_data = yaml.safe_load(f) or {}

    # Policy config with env overrides
    policy_data = dict(yaml_data.get("policy") or {})
    strip_handlers = os.getenv("SVGPOLICY_STRIP_EVENT_HANDLERS")
    if strip_handlers is not None:
        policy_data["strip_event_handlers"] = strip_handlers.strip()
    policy_data["blocked_elements"] = _env_list(
        "SVGPOLICY_BLOCKED_ELEMENTS",
        list(policy_data.get("blocked_elements") or []),
    )
    policy = PolicyConfig(**policy_data)

    log_level = os.getenv("SVGPOLICY_LOG_LEVEL", yaml_data.get("log_level", "INFO"))

    return AppConfig(policy=policy, log_level=str(log_level).upper())
