"""Default output names that record the cumulative shift.

A shifted file is named ``<stem>__[<+|-><seconds>_Sec<marker>]<suffix>``, where the
marker is ``+`` for a full-file shift and ``-`` for a windowed one. Feeding such a
file back in replaces the tag instead of stacking a second one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import PurePath
from typing import Optional

from . import config

# The marker is optional so names written before partial shifts existed still match.
TAG_PATTERN = re.compile(r"__\[(?P<seconds>[+-]\d+\.\d+)_Sec(?P<marker>[+-]?)\]")


@dataclass(frozen=True)
class NameTag:
    seconds: float
    partial: bool


def parse_tag(name: str) -> Optional[NameTag]:
    match = TAG_PATTERN.search(name)
    if not match:
        return None
    return NameTag(
        seconds=float(match.group("seconds")),
        partial=match.group("marker") == config.PARTIAL_SHIFT_MARKER,
    )


def format_tag(seconds: float, partial: bool = False) -> str:
    seconds = round(seconds, 2)
    if seconds == 0:
        seconds = 0.0  # no "-0.00"
    marker = config.PARTIAL_SHIFT_MARKER if partial else config.FULL_SHIFT_MARKER
    return config.TAG_TEMPLATE.format(seconds=f"{seconds:+.2f}", marker=marker)


def smart_name(filename: str, seconds: float, partial: bool = False) -> str:
    """
    Name the output of shifting ``filename`` by ``seconds``.

    >>> smart_name("movie.srt", 1.5)
    'movie__[+1.50_Sec+].srt'
    >>> smart_name("movie__[+1.50_Sec+].srt", -0.5, partial=True)
    'movie__[+1.00_Sec-].srt'
    """
    path = PurePath(filename)
    stem, suffix = path.stem, path.suffix

    total = seconds
    previous = parse_tag(stem)
    if previous is not None:
        total += previous.seconds
        stem = TAG_PATTERN.sub("", stem, count=1)

    return f"{stem}{format_tag(total, partial)}{suffix}"
