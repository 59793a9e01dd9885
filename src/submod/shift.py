"""Apply a signed offset to the cues of a document."""

from __future__ import annotations

import logging
from typing import Optional

from .parser import Cue, Document
from .timecode import TimeCode

logger = logging.getLogger(__name__)

_ORIGIN = TimeCode(0)


def is_eligible(
    cue: Cue,
    window_start: Optional[TimeCode] = None,
    window_stop: Optional[TimeCode] = None,
) -> bool:
    """Whether the cue's original start lies in the inclusive window."""
    if window_start is not None and cue.start < window_start:
        return False
    if window_stop is not None and cue.start > window_stop:
        return False
    return True


def shift_document(
    document: Document,
    delta_ms: int,
    window_start: Optional[TimeCode] = None,
    window_stop: Optional[TimeCode] = None,
) -> int:
    """
    Shift eligible cues by ``delta_ms`` in place and return how many were deleted.

    A shifted cue that ends before zero is removed; one that merely starts before
    zero keeps its end and has its start clamped to zero. Cues outside the window
    are left untouched. Survivors are renumbered 1..N in their original order.
    """
    if window_start is not None and window_stop is not None and window_start > window_stop:
        logger.warning(
            "Window start %s lies after window stop %s; no cue will be shifted",
            window_start.seconds,
            window_stop.seconds,
        )

    kept: list[Cue] = []
    shifted = 0
    for cue in document.cues:
        if not is_eligible(cue, window_start, window_stop):
            kept.append(cue)
            continue

        shifted += 1
        cue.start = cue.start.shift(delta_ms)
        cue.end = cue.end.shift(delta_ms)
        if cue.end < _ORIGIN:
            continue
        if cue.start < _ORIGIN:
            cue.start = _ORIGIN
        kept.append(cue)

    deleted_count = len(document.cues) - len(kept)
    for index, cue in enumerate(kept, start=1):
        cue.index = index
    document.cues = kept

    logger.debug(
        "Shifted %d cues by %d ms",
        shifted,
        delta_ms,
        extra={"data": {"deleted": deleted_count, "kept": len(kept)}},
    )
    return deleted_count
