from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, Iterator, Tuple

import structlog

from .subs_io import SubtitleFormat

log = structlog.get_logger(__name__)


def _walk_error(error: OSError) -> None:
    log.warning("walk_error", path=getattr(error, "filename", None), error=str(error))


def iter_subtitle_files(root: Path, extensions: Iterable[str], follow_symlinks: bool = False) -> Iterator[Tuple[Path, SubtitleFormat]]:
    """Yield supported files below ``root`` with their format.

    Files are matched by extension only (case-insensitive); nothing is opened.
    """
    wanted = {SubtitleFormat(ext.lower().lstrip(".")) for ext in extensions}
    for dirpath, dirnames, filenames in os.walk(root, onerror=_walk_error, followlinks=follow_symlinks):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(dirpath) / name
            fmt = SubtitleFormat.from_path(path)
            if fmt is None or fmt not in wanted:
                continue
            if not path.is_file():
                continue
            yield path, fmt
