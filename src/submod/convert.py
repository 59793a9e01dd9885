"""Read, shift, convert and write one subtitle file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from . import config
from .errors import IOFailure
from .parser import detect_dialect, parse_document
from .paths import ResolvedPaths
from .serializer import render_document
from .shift import shift_document
from .timecode import Dialect, TimeCode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    output_path: Path
    backup_path: Optional[Path]
    deleted_count: int


def shift_text(
    text: str,
    delta_ms: int,
    *,
    target: Dialect | None = None,
    source_hint: Dialect = Dialect.SRT,
    window_start: TimeCode | None = None,
    window_stop: TimeCode | None = None,
) -> Tuple[str, int]:
    """
    Shift subtitle text in memory and return ``(rendered_text, deleted_count)``.

    ``source_hint`` is the dialect assumed when the text has no VTT header.
    """
    document = parse_document(text, detect_dialect(text, fallback=source_hint))
    deleted = shift_document(document, delta_ms, window_start, window_stop)
    return render_document(document, target), deleted


def _read(path: Path, encoding: str) -> str:
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise IOFailure(path, "read", str(exc)) from exc


def shift_subtitle_file(
    paths: ResolvedPaths,
    delta_ms: int,
    *,
    window_start: TimeCode | None = None,
    window_stop: TimeCode | None = None,
    encoding: str = config.DEFAULT_READ_ENCODING,
) -> ConversionResult:
    """
    Shift ``paths.input_path`` into ``paths.output_path``.

    The whole document is parsed and shifted before anything is written. When a
    backup path is set the original is renamed to it before the output is written,
    which keeps in-place runs from clobbering the source. An existing backup is
    never replaced.
    """
    target = paths.target_dialect
    source_hint = Dialect.from_path(paths.input_path)
    if paths.backup_path is not None and paths.backup_path.exists():
        raise IOFailure(paths.backup_path, "back up original to", "backup already exists")
    text = _read(paths.input_path, encoding)
    rendered, deleted = shift_text(
        text,
        delta_ms,
        target=target,
        source_hint=source_hint,
        window_start=window_start,
        window_stop=window_stop,
    )

    if paths.backup_path is not None:
        try:
            paths.input_path.rename(paths.backup_path)
        except OSError as exc:
            raise IOFailure(paths.backup_path, "back up original to", str(exc)) from exc
        logger.info("Moved original to %s", paths.backup_path)
    elif paths.in_place:
        logger.info("Overwriting %s in place", paths.input_path)

    try:
        with paths.output_path.open("w", encoding=config.WRITE_ENCODING, newline="\n") as fh:
            fh.write(rendered)
    except OSError as exc:
        raise IOFailure(paths.output_path, "write", str(exc)) from exc

    logger.info(
        "Wrote %s",
        paths.output_path,
        extra={"data": {"delta_ms": delta_ms, "deleted": deleted}},
    )
    return ConversionResult(paths.output_path, paths.backup_path, deleted)
