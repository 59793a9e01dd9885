"""Render cues back to SRT or VTT text."""

from __future__ import annotations

from typing import List

from . import config
from .parser import Cue, Document
from .timecode import Dialect


def _format_timing(cue: Cue, dialect: Dialect) -> str:
    return f"{cue.start.format(dialect)} {config.TIMING_ARROW} {cue.end.format(dialect)}"


def render_cue(cue: Cue, position: int, dialect: Dialect) -> str:
    lines: List[str] = []
    if dialect is Dialect.SRT:
        lines.append(str(position))
    lines.append(_format_timing(cue, dialect))
    lines.extend(cue.lines)
    return "\n".join(lines)


def render_document(document: Document, dialect: Dialect | None = None) -> str:
    """
    Serialize ``document`` in ``dialect`` (defaults to the document's own).

    VTT output always opens with a header, synthesized when the source had none.
    Cues are numbered 1..N for SRT and unnumbered for VTT. Every block, the last
    one included, is followed by a single blank line.
    """
    target = dialect or document.dialect
    blocks: List[str] = []
    if target is Dialect.VTT:
        blocks.append(document.header or config.VTT_HEADER)
    blocks.extend(
        render_cue(cue, position, target)
        for position, cue in enumerate(document.cues, start=1)
    )
    return "".join(f"{block}\n\n" for block in blocks)
