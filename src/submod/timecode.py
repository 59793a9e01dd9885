"""Millisecond timecodes and the two textual subtitle dialects."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from . import config
from .errors import InvalidPath, MalformedTimestamp

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE


class Dialect(StrEnum):
    SRT = "srt"
    VTT = "vtt"

    @property
    def separator(self) -> str:
        if self is Dialect.SRT:
            return config.SRT_MS_SEPARATOR
        return config.VTT_MS_SEPARATOR

    @property
    def suffix(self) -> str:
        return f".{self.value}"

    @classmethod
    def from_path(cls, path: str | Path) -> "Dialect":
        suffix = Path(path).suffix.lower()
        for dialect in cls:
            if dialect.suffix == suffix:
                return dialect
        raise InvalidPath(path, "only .srt or .vtt files are supported")


_TIMESTAMP_PATTERNS = {
    dialect: re.compile(
        r"^(?P<h>\d{2,}):(?P<m>\d{2}):(?P<s>\d{2})"
        + re.escape(dialect.separator)
        + r"(?P<ms>\d{3})$"
    )
    for dialect in Dialect
}


@dataclass(frozen=True, order=True)
class TimeCode:
    """An instant on the subtitle timeline, in whole milliseconds."""

    total_ms: int

    @classmethod
    def parse(cls, text: str, dialect: Dialect) -> "TimeCode":
        """
        Parse a fixed-width ``hh:mm:ss,mmm`` (SRT) or ``hh:mm:ss.mmm`` (VTT) stamp.

        Only the separator of ``dialect`` is accepted.
        """
        match = _TIMESTAMP_PATTERNS[dialect].match(text.strip())
        if not match:
            raise MalformedTimestamp(text, f"hh:mm:ss{dialect.separator}mmm")
        hours, minutes, seconds, millis = (
            int(match.group(name)) for name in ("h", "m", "s", "ms")
        )
        if minutes > 59 or seconds > 59:
            raise MalformedTimestamp(text, "minutes and seconds between 00 and 59")
        return cls(
            hours * _MS_PER_HOUR
            + minutes * _MS_PER_MINUTE
            + seconds * _MS_PER_SECOND
            + millis
        )

    @classmethod
    def from_seconds(cls, seconds: float) -> "TimeCode":
        return cls(int(round(seconds * _MS_PER_SECOND)))

    @classmethod
    def from_clock(cls, text: str) -> "TimeCode":
        """
        Parse the command line window grammar: ``hh:mm:ss``, ``mm:ss`` or ``ss``.

        The rightmost component is seconds and may carry a fraction.
        """
        parts = text.strip().split(":")
        if not parts or len(parts) > 3:
            raise MalformedTimestamp(text, "hh:mm:ss, mm:ss or ss")
        total = 0.0
        for weight, part in zip((1, 60, 3600), reversed(parts)):
            try:
                value = float(part)
            except ValueError:
                raise MalformedTimestamp(text, "hh:mm:ss, mm:ss or ss") from None
            if value < 0 or not math.isfinite(value):
                raise MalformedTimestamp(text, "non-negative hours, minutes and seconds")
            total += value * weight
        return cls.from_seconds(total)

    @property
    def seconds(self) -> float:
        return self.total_ms / _MS_PER_SECOND

    def shift(self, delta_ms: int) -> "TimeCode":
        return TimeCode(self.total_ms + delta_ms)

    def format(self, dialect: Dialect) -> str:
        if self.total_ms < 0:
            raise ValueError(f"cannot format negative timecode ({self.total_ms} ms)")
        hours, rest = divmod(self.total_ms, _MS_PER_HOUR)
        minutes, rest = divmod(rest, _MS_PER_MINUTE)
        seconds, millis = divmod(rest, _MS_PER_SECOND)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}{dialect.separator}{millis:03d}"
