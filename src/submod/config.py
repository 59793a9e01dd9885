"""Configuration constants for the subtitle time shifter."""

from pathlib import Path

# Timestamp grammar shared by both dialects
SRT_MS_SEPARATOR = ","
VTT_MS_SEPARATOR = "."
TIMING_ARROW = "-->"

VTT_HEADER = "WEBVTT"

SUPPORTED_SUFFIXES = (".srt", ".vtt")

# Output naming
TAG_TEMPLATE = "__[{seconds}_Sec{marker}]"
FULL_SHIFT_MARKER = "+"
PARTIAL_SHIFT_MARKER = "-"
BACKUP_TAG = "__[Original]"

# I/O defaults
DEFAULT_READ_ENCODING = "utf-8-sig"  # tolerate a BOM on input
WRITE_ENCODING = "utf-8"

# User settings
SETTINGS_ENV_VAR = "SUBMOD_SETTINGS_FILE"
DEFAULT_SETTINGS_PATH = Path.home() / ".config" / "submod" / "settings.toml"

LOG_LEVEL_ENV_VAR = "SUBMOD_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
