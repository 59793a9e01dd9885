"""User settings shared by the command line and library callers."""

from __future__ import annotations

import codecs
import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import config
from .timecode import Dialect

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmodSettings:
    encoding: str = config.DEFAULT_READ_ENCODING
    keep_original: bool = False
    convert: Optional[Dialect] = None


def _coerce_bool(value: object, fallback: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off"}:
            return False
    return fallback


def _coerce_dialect(value: object) -> Optional[Dialect]:
    if not isinstance(value, str):
        return None
    try:
        return Dialect(value.strip().lower().lstrip("."))
    except ValueError:
        return None


def _coerce_encoding(value: object, fallback: str) -> str:
    if not isinstance(value, str) or not value.strip():
        return fallback
    try:
        codecs.lookup(value.strip())
    except LookupError:
        logger.warning("Unknown encoding %r in settings, using %s", value, fallback)
        return fallback
    return value.strip()


def load_settings(path: str | Path | None = None) -> SubmodSettings:
    """
    Load settings from a TOML file, falling back to defaults.

    Order of precedence:
    1. Explicit ``path`` argument
    2. ``SUBMOD_SETTINGS_FILE`` environment variable
    3. ``~/.config/submod/settings.toml``
    """
    candidate = Path(path) if path else None
    if not candidate:
        env_override = os.getenv(config.SETTINGS_ENV_VAR)
        candidate = Path(env_override) if env_override else config.DEFAULT_SETTINGS_PATH

    if not candidate.exists():
        return SubmodSettings()

    try:
        data = tomllib.loads(candidate.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", candidate, exc)
        return SubmodSettings()

    io = data.get("io", {}) if isinstance(data.get("io"), dict) else {}
    output = data.get("output", {}) if isinstance(data.get("output"), dict) else {}

    return SubmodSettings(
        encoding=_coerce_encoding(io.get("encoding"), config.DEFAULT_READ_ENCODING),
        keep_original=_coerce_bool(output.get("keep_original"), False),
        convert=_coerce_dialect(output.get("convert")),
    )
