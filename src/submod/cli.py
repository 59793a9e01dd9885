import math
from pathlib import Path
from typing import Optional

import typer

from . import __version__, config
from .convert import shift_subtitle_file
from .errors import MalformedTimestamp, SubmodError
from .logging import setup_logging
from .paths import resolve_paths
from .settings import load_settings
from .timecode import Dialect, TimeCode

app = typer.Typer(help="Modify the time encoding of movie subtitles (UTF-8 .srt or .vtt files).")


def _subtitle_path(value: Optional[Path]) -> Optional[Path]:
    if value is not None and value.suffix.lower() not in config.SUPPORTED_SUFFIXES:
        raise typer.BadParameter("only .srt or .vtt files are allowed")
    return value


def _finite(value: float) -> float:
    if not math.isfinite(value):
        raise typer.BadParameter("must be a finite number of seconds")
    return value


def _timing(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    try:
        TimeCode.from_clock(value)
    except MalformedTimestamp:
        raise typer.BadParameter(
            "use ':' to separate hours, minutes and seconds (hh:mm:ss, mm:ss or ss)"
        ) from None
    return value


def _version(value: bool) -> None:
    if value:
        typer.echo(f"submod {__version__}")
        raise typer.Exit()


def _report_success(output_path: Path, backup_path: Optional[Path], deleted: int) -> None:
    typer.secho("Success.", fg=typer.colors.GREEN, bold=True)
    if deleted == 1:
        typer.echo("    One subtitle was deleted at the beginning of the file.")
    elif deleted > 1:
        typer.echo(f"    {deleted} subtitles were deleted at the beginning of the file.")
    typer.echo(f" Output: {output_path}")
    if backup_path is not None:
        typer.echo(f" Original: {backup_path}")


@app.command("shift", context_settings={"ignore_unknown_options": True})
def shift(
    input_file: Path = typer.Argument(
        ...,
        metavar="INPUT",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        callback=_subtitle_path,
        help="(Path to) .srt or .vtt subtitle file to shift.",
    ),
    seconds: float = typer.Argument(
        ...,
        metavar="SECONDS",
        callback=_finite,
        help="Seconds to add to (or, when negative, subtract from) every timestamp.",
    ),
    start: Optional[str] = typer.Option(
        None,
        "--start",
        "-s",
        callback=_timing,
        help="Only shift subtitles starting at or after this time (hh:mm:ss, mm:ss or ss).",
    ),
    stop: Optional[str] = typer.Option(
        None,
        "--stop",
        "-S",
        callback=_timing,
        help="Only shift subtitles starting at or before this time (hh:mm:ss, mm:ss or ss).",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        dir_okay=False,
        callback=_subtitle_path,
        help="Explicit output file; its extension selects the output format.",
    ),
    convert: Optional[Dialect] = typer.Option(
        None,
        "--convert",
        "-c",
        case_sensitive=False,
        help="Convert to another subtitle format.",
    ),
    keep_original: Optional[bool] = typer.Option(
        None,
        "--keep-original/--no-keep-original",
        "-k",
        help="Rename the input to '<name>__[Original]' before writing the output.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Log progress to stderr."),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Shift subtitle timings by SECONDS and write the result next to INPUT."""
    setup_logging("DEBUG" if verbose else None)
    if out is not None and convert is not None:
        raise typer.BadParameter("--convert cannot be combined with --out", param_hint="--convert")

    settings = load_settings()
    if out is None and convert is None:
        convert = settings.convert

    window_start = TimeCode.from_clock(start) if start is not None else None
    window_stop = TimeCode.from_clock(stop) if stop is not None else None
    partial = window_start is not None or window_stop is not None

    try:
        paths = resolve_paths(
            input_file,
            seconds,
            partial=partial,
            output=out,
            convert=convert,
            keep_original=settings.keep_original if keep_original is None else keep_original,
        )
        result = shift_subtitle_file(
            paths,
            TimeCode.from_seconds(seconds).total_ms,
            window_start=window_start,
            window_stop=window_stop,
            encoding=settings.encoding,
        )
    except SubmodError as exc:
        typer.secho(f"Error: {exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    _report_success(result.output_path, result.backup_path, result.deleted_count)


def main() -> None:
    """Entry point for the ``submod`` console script."""
    app()


if __name__ == "__main__":
    main()
