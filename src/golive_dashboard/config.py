"""Configuration loading, persistence and logging bootstrap."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import List

from dotenv import dotenv_values
from pydantic import BaseModel

logger = logging.getLogger(__name__)


def _runtime_home() -> Path:
    override = str(os.getenv("GOLIVE_DASHBOARD_HOME", "") or "").strip()
    if override:
        return Path(override).expanduser().resolve()
    return Path(__file__).resolve().parents[2]


DEFAULT_CONFIG_HOME = _runtime_home()
ENV_PATH = DEFAULT_CONFIG_HOME / ".env"
ENV_EXAMPLE_PATH = DEFAULT_CONFIG_HOME / ".env.example"

DEFAULT_ROCKETLANE_BASE_URL = "https://api.rocketlane.com/api/1.0"

# Keys that may also come from the process environment (deploy secrets).
_PROCESS_ENV_KEYS = ("ROCKETLANE_API_KEY", "ROCKETLANE_BASE_URL", "LOG_LEVEL")


def _candidate_env_example_paths() -> List[Path]:
    out: List[Path] = [ENV_EXAMPLE_PATH]
    try:
        out.append(Path.cwd() / ".env.example")
    except OSError:
        pass

    seen: set[str] = set()
    uniq: List[Path] = []
    for path in out:
        key = str(path)
        if key in seen:
            continue
        seen.add(key)
        uniq.append(path)
    return uniq


def _strip_legacy_inline_comment(value: object) -> str:
    """
    Strip inline comments like `LOG_LEVEL=INFO  # DEBUG|INFO`.

    python-dotenv may keep the comment as part of an unquoted value.
    """
    txt = str(value or "").strip()
    if " #" in txt:
        txt = txt.split(" #", 1)[0].strip()
    return txt


def _coerce_str(value: object) -> str:
    return str(value or "").strip()


class Settings(BaseModel):
    APP_TITLE: str = "Go-Live Dashboard"
    LOG_LEVEL: str = "INFO"

    # -------------------------
    # ROCKETLANE
    # -------------------------
    ROCKETLANE_BASE_URL: str = DEFAULT_ROCKETLANE_BASE_URL
    ROCKETLANE_API_KEY: str = ""


def ensure_env() -> None:
    ENV_PATH.parent.mkdir(parents=True, exist_ok=True)
    if not ENV_PATH.exists():
        example_path = next((p for p in _candidate_env_example_paths() if p.exists()), None)
        if example_path is not None:
            ENV_PATH.write_text(example_path.read_text(encoding="utf-8"), encoding="utf-8")
            return
        ENV_PATH.write_text("", encoding="utf-8")


def load_settings() -> Settings:
    vals = {k: v for k, v in dotenv_values(ENV_PATH).items() if v is not None}

    for key in _PROCESS_ENV_KEYS:
        env_value = _coerce_str(os.getenv(key))
        if env_value:
            vals[key] = env_value

    if "LOG_LEVEL" in vals:
        vals["LOG_LEVEL"] = _strip_legacy_inline_comment(vals["LOG_LEVEL"]).upper()
    if "ROCKETLANE_BASE_URL" in vals:
        vals["ROCKETLANE_BASE_URL"] = (
            _coerce_str(vals["ROCKETLANE_BASE_URL"]).rstrip("/") or DEFAULT_ROCKETLANE_BASE_URL
        )
    return Settings.model_validate(vals)


def save_settings(settings: Settings) -> None:
    ENV_PATH.parent.mkdir(parents=True, exist_ok=True)
    lines = [f"{k}={v}" for k, v in settings.model_dump().items()]
    ENV_PATH.write_text("\n".join(lines) + "\n", encoding="utf-8")


def configure_logging(settings: Settings) -> None:
    level_name = _coerce_str(settings.LOG_LEVEL).upper() or "INFO"
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger().setLevel(level)
    logger.debug("Logging configured at %s", logging.getLevelName(level))
