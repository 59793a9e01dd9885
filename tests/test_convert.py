from pathlib import Path

import pytest

from submod.convert import shift_subtitle_file, shift_text
from submod.errors import InvalidPath, IOFailure, MalformedCue
from submod.paths import ResolvedPaths, resolve_paths
from submod.timecode import Dialect, TimeCode

SRT_TEXT = (
    "1\n00:00:01,000 --> 00:00:03,000\nA\n\n"
    "2\n00:00:10,000 --> 00:00:12,000\nB\n\n"
)


def test_shift_text_deletes_and_renumbers() -> None:
    rendered, deleted = shift_text(SRT_TEXT, -5000)

    assert deleted == 1
    assert rendered == "1\n00:00:05,000 --> 00:00:07,000\nB\n\n"


def test_shift_text_converts_with_window() -> None:
    rendered, deleted = shift_text(
        SRT_TEXT, 500, target=Dialect.VTT, window_start=TimeCode(5000)
    )

    assert deleted == 0
    assert rendered == (
        "WEBVTT\n\n"
        "00:00:01.000 --> 00:00:03.000\nA\n\n"
        "00:00:10.500 --> 00:00:12.500\nB\n\n"
    )


def test_shift_text_uses_hint_for_headerless_vtt() -> None:
    rendered, _ = shift_text("00:00:01.000 --> 00:00:02.000\nA\n", 1000, source_hint=Dialect.VTT)

    assert rendered == "WEBVTT\n\n00:00:02.000 --> 00:00:03.000\nA\n\n"


def test_shift_subtitle_file_writes_tagged_output(tmp_path: Path) -> None:
    source = tmp_path / "movie.srt"
    source.write_text(SRT_TEXT, encoding="utf-8")
    paths = resolve_paths(source, -2.0)

    result = shift_subtitle_file(paths, -2000)

    assert result.output_path == tmp_path / "movie__[-2.00_Sec+].srt"
    assert result.deleted_count == 0
    assert result.backup_path is None
    assert source.read_text(encoding="utf-8") == SRT_TEXT
    assert result.output_path.read_text(encoding="utf-8") == (
        "1\n00:00:00,000 --> 00:00:01,000\nA\n\n"
        "2\n00:00:08,000 --> 00:00:10,000\nB\n\n"
    )


def test_in_place_with_backup_keeps_original(tmp_path: Path) -> None:
    source = tmp_path / "movie.srt"
    source.write_text(SRT_TEXT, encoding="utf-8")
    paths = resolve_paths(source, 1.0, output=source, keep_original=True)

    result = shift_subtitle_file(paths, 1000)

    assert result.backup_path == tmp_path / "movie__[Original].srt"
    assert result.backup_path.read_text(encoding="utf-8") == SRT_TEXT
    assert source.read_text(encoding="utf-8").startswith("1\n00:00:02,000 --> 00:00:04,000\n")


def test_bom_and_crlf_input(tmp_path: Path) -> None:
    source = tmp_path / "movie.srt"
    source.write_bytes(("\ufeff" + SRT_TEXT.replace("\n", "\r\n")).encode("utf-8"))

    result = shift_subtitle_file(resolve_paths(source, 0.0), 0)

    assert result.output_path.read_bytes() == SRT_TEXT.encode("utf-8")


def test_malformed_input_writes_nothing(tmp_path: Path) -> None:
    source = tmp_path / "broken.srt"
    source.write_text("1\nnonsense\nA\n", encoding="utf-8")
    paths = resolve_paths(source, 1.0, keep_original=True)

    with pytest.raises(MalformedCue):
        shift_subtitle_file(paths, 1000)

    assert sorted(p.name for p in tmp_path.iterdir()) == ["broken.srt"]


def test_missing_input_is_io_failure(tmp_path: Path) -> None:
    paths = resolve_paths(tmp_path / "missing.srt", 1.0)

    with pytest.raises(IOFailure) as excinfo:
        shift_subtitle_file(paths, 1000)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_unwritable_output_is_io_failure(tmp_path: Path) -> None:
    source = tmp_path / "movie.srt"
    source.write_text(SRT_TEXT, encoding="utf-8")
    paths = resolve_paths(source, 1.0, output=tmp_path / "no" / "such" / "dir.srt")

    with pytest.raises(IOFailure):
        shift_subtitle_file(paths, 1000)


def test_unsupported_output_extension(tmp_path: Path) -> None:
    source = tmp_path / "movie.srt"
    source.write_text(SRT_TEXT, encoding="utf-8")

    with pytest.raises(InvalidPath):
        shift_subtitle_file(ResolvedPaths(source, tmp_path / "movie.ass"), 1000)


def test_second_in_place_run_keeps_first_backup(tmp_path: Path) -> None:
    source = tmp_path / "movie.srt"
    source.write_text(SRT_TEXT, encoding="utf-8")
    paths = resolve_paths(source, 1.0, output=source, keep_original=True)
    shift_subtitle_file(paths, 1000)
    shifted_once = source.read_text(encoding="utf-8")

    with pytest.raises(IOFailure) as excinfo:
        shift_subtitle_file(paths, 1000)

    assert "backup already exists" in str(excinfo.value)
    assert (tmp_path / "movie__[Original].srt").read_text(encoding="utf-8") == SRT_TEXT
    assert source.read_text(encoding="utf-8") == shifted_once


def test_unknown_encoding_is_io_failure(tmp_path: Path) -> None:
    source = tmp_path / "movie.srt"
    source.write_text(SRT_TEXT, encoding="utf-8")

    with pytest.raises(IOFailure) as excinfo:
        shift_subtitle_file(resolve_paths(source, 1.0), 1000, encoding="no-such-codec")
    assert isinstance(excinfo.value.__cause__, LookupError)
    assert not (tmp_path / "movie__[+1.00_Sec+].srt").exists()


def test_in_place_without_backup_overwrites_and_logs(tmp_path: Path, caplog) -> None:
    source = tmp_path / "movie.srt"
    source.write_text(SRT_TEXT, encoding="utf-8")

    with caplog.at_level("INFO", logger="submod.convert"):
        result = shift_subtitle_file(resolve_paths(source, 1.0, output=source), 1000)

    assert result.backup_path is None
    assert source.read_text(encoding="utf-8").startswith("1\n00:00:02,000 --> 00:00:04,000\n")
    assert "in place" in caplog.text
