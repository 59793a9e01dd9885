"""Split subtitle text into cues."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from . import config
from .errors import MalformedCue, MalformedTimestamp
from .timecode import Dialect, TimeCode

logger = logging.getLogger(__name__)

_BLOCK_SPLIT = re.compile(r"\n[ \t]*\n")
_INDEX_LINE = re.compile(r"^\d+$")


@dataclass
class Cue:
    start: TimeCode
    end: TimeCode
    lines: List[str] = field(default_factory=list)
    index: Optional[int] = None


@dataclass
class Document:
    """Ordered cues of one subtitle file, tagged with the dialect they were read in."""

    dialect: Dialect
    cues: List[Cue] = field(default_factory=list)
    header: Optional[str] = None  # VTT header block, kept verbatim


def _normalize_newlines(text: str) -> str:
    text = text.lstrip("\ufeff")
    return text.replace("\r\n", "\n").replace("\r", "\n")


def detect_dialect(text: str, fallback: Dialect = Dialect.SRT) -> Dialect:
    """
    Report VTT when the text opens with the ``WEBVTT`` sentinel.

    Without the sentinel the dialect is ``fallback``.
    """
    first_line = _normalize_newlines(text).lstrip("\n").split("\n", 1)[0]
    if first_line.startswith(config.VTT_HEADER):
        return Dialect.VTT
    return fallback


def _parse_timing(line: str, dialect: Dialect) -> tuple[TimeCode, TimeCode]:
    start_text, arrow, end_text = line.partition(config.TIMING_ARROW)
    if not arrow:
        raise ValueError(f"expected '<start> {config.TIMING_ARROW} <end>', got {line!r}")
    return TimeCode.parse(start_text, dialect), TimeCode.parse(end_text, dialect)


def _parse_block(block: str, position: int, dialect: Dialect) -> Cue:
    lines = [line for line in block.split("\n") if line.strip()]
    index: Optional[int] = None
    if _INDEX_LINE.match(lines[0].strip()):
        index = int(lines[0].strip())
        lines = lines[1:]
    if not lines:
        raise MalformedCue(position, "missing timing line")

    try:
        start, end = _parse_timing(lines[0], dialect)
    except MalformedTimestamp as exc:
        raise MalformedCue(position, str(exc)) from exc
    except ValueError as exc:
        raise MalformedCue(position, str(exc)) from None
    if end < start:
        raise MalformedCue(position, "cue ends before it starts")

    return Cue(start=start, end=end, lines=lines[1:], index=index)


def parse_document(text: str, dialect: Dialect | None = None) -> Document:
    """
    Parse the full text of an SRT or VTT file.

    Blocks are separated by blank lines. A block starts with an optional bare
    integer index, then the timing line, then the cue text. Any unparsable block
    fails the whole document with ``MalformedCue``.
    """
    text = _normalize_newlines(text)
    if dialect is None:
        dialect = detect_dialect(text)

    blocks = [block for block in _BLOCK_SPLIT.split(text.strip("\n")) if block.strip()]
    header: Optional[str] = None
    if blocks and blocks[0].lstrip().startswith(config.VTT_HEADER):
        if dialect is not Dialect.VTT:
            raise MalformedCue(1, f"unexpected {config.VTT_HEADER} header in {dialect} text")
        header = "\n".join(line.rstrip() for line in blocks[0].strip().split("\n"))
        blocks = blocks[1:]

    cues = [
        _parse_block(block, position, dialect)
        for position, block in enumerate(blocks, start=1)
    ]
    logger.debug("Parsed %d cues", len(cues), extra={"data": {"dialect": str(dialect)}})
    return Document(dialect=dialect, cues=cues, header=header)
