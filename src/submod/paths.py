"""Work out the input, output and backup paths of one run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import config
from .errors import InvalidPath
from .naming import smart_name
from .timecode import Dialect


@dataclass(frozen=True)
class ResolvedPaths:
    input_path: Path
    output_path: Path
    backup_path: Optional[Path] = None

    @property
    def target_dialect(self) -> Dialect:
        return Dialect.from_path(self.output_path)

    @property
    def in_place(self) -> bool:
        return self.input_path.absolute() == self.output_path.absolute()


def backup_name(input_path: Path) -> str:
    return f"{input_path.stem}{config.BACKUP_TAG}{input_path.suffix}"


def resolve_paths(
    input: str | Path,
    seconds: float,
    *,
    partial: bool = False,
    output: str | Path | None = None,
    convert: Dialect | None = None,
    keep_original: bool = False,
) -> ResolvedPaths:
    """
    Resolve where the shifted subtitles go.

    An explicit ``output`` is taken as is. Otherwise the output sits next to the
    input, with its suffix swapped for ``convert`` when given, under the tagged
    name from :func:`submod.naming.smart_name`. With ``keep_original`` a backup
    path ``<stem>__[Original]<suffix>`` is added beside the input.
    """
    if not str(input).strip():
        raise InvalidPath(input, "empty path")
    input_path = Path(input)
    if not input_path.name:
        raise InvalidPath(input, "no file name")

    parent = input_path.parent
    if output is not None:
        output_path = Path(output)
    else:
        name = input_path.name
        if convert is not None:
            name = input_path.with_suffix(convert.suffix).name
        output_path = parent / smart_name(name, seconds, partial)

    backup_path = parent / backup_name(input_path) if keep_original else None
    return ResolvedPaths(input_path, output_path, backup_path)
