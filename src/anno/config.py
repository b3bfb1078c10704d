"""
Configuration loader.

Loads settings from config/settings.yaml and .env,
merges them, and provides a typed Settings object
accessible everywhere via `get_settings()`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv

from anno.utils.log import get_logger

logger = get_logger(__name__)

# Project root = 2 levels up from src/anno/
ROOT = Path(__file__).resolve().parent.parent.parent

COLOR_MODES = ("auto", "always", "never")


def config_dir() -> Path:
    """Directory holding settings.yaml (ANNO_CONFIG_DIR overrides)."""
    override = os.getenv("ANNO_CONFIG_DIR")
    return Path(override) if override else ROOT / "config"


@dataclass
class ProducerSettings:
    command_prefix: str = "anno-"
    max_workers: int = 1  # 1 = run producers one after another


@dataclass
class RenderSettings:
    separator: str = " | "
    emphasis_a: str = "bold red"
    emphasis_b: str = "bold green"
    color: str = "auto"  # "auto", "always", "never"


@dataclass
class Settings:
    """Top-level settings object."""

    producers: ProducerSettings = field(default_factory=ProducerSettings)
    render: RenderSettings = field(default_factory=RenderSettings)
    log_level: str = "WARNING"


# ── Singleton ─────────────────────────────────────────

_settings: Settings | None = None


def _load_yaml() -> dict:
    """Load the YAML config file."""
    settings_file = config_dir() / "settings.yaml"
    if settings_file.exists():
        with open(settings_file, "r") as f:
            return yaml.safe_load(f) or {}
    return {}


def _int_setting(env_name: str, configured, default: int) -> int:
    """Integer from the environment or YAML; unparsable values fall back to ``default``."""
    value = os.getenv(env_name, configured)
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-integer %s=%r, using %d", env_name, value, default)
        return default


def get_settings() -> Settings:
    """Get the global Settings instance (lazy-loaded singleton)."""
    global _settings
    if _settings is not None:
        return _settings

    # Load .env
    load_dotenv(ROOT / ".env")

    # Load YAML
    raw = _load_yaml()

    prod_raw = raw.get("producers", {})
    producers = ProducerSettings(
        command_prefix=os.getenv("ANNO_COMMAND_PREFIX", prod_raw.get("command_prefix", "anno-")),
        max_workers=max(1, _int_setting("ANNO_MAX_WORKERS", prod_raw.get("max_workers", 1), default=1)),
    )

    render_raw = raw.get("render", {})
    color = str(render_raw.get("color", "auto")).lower()
    render = RenderSettings(
        separator=render_raw.get("separator", " | "),
        emphasis_a=render_raw.get("emphasis_a", "bold red"),
        emphasis_b=render_raw.get("emphasis_b", "bold green"),
        color=color if color in COLOR_MODES else "auto",
    )

    log_raw = raw.get("logging", {})

    _settings = Settings(
        producers=producers,
        render=render,
        log_level=os.getenv("ANNO_LOG_LEVEL", log_raw.get("level", "WARNING")),
    )

    return _settings


def reload_settings() -> Settings:
    """Force reload of settings (clears cache)."""
    global _settings
    _settings = None
    return get_settings()
