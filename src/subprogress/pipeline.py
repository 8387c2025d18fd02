"""Directory scan: decode -> extract -> clean -> classify -> tally."""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import structlog

from .config import ScanConfig
from .decoding import decode_bytes
from .errors import ScanRootError
from .language_detect import LanguageClassifier, LanguageLabel
from .metrics import LanguageTally
from .paths import iter_subtitle_files
from .subs_clean import clean_text
from .subs_io import SubtitleFormat, extract_cues

log = structlog.get_logger(__name__)


@dataclass
class FileReport:
    """Outcome of processing a single file."""
    path: Path
    fmt: SubtitleFormat
    labels: List[LanguageLabel] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def cue_count(self) -> int:
        return len(self.labels)


def process_file(path: Path, fmt: SubtitleFormat, tally: LanguageTally, classifier: LanguageClassifier) -> FileReport:
    report = FileReport(path=path, fmt=fmt)
    try:
        data = path.read_bytes()
    except OSError as e:
        log.warning("file_read_failed", path=str(path), error=str(e))
        report.error = str(e)
        return report

    decoded = decode_bytes(data)
    if decoded.had_errors:
        log.warning("decode_lossy", path=str(path), encoding=decoded.encoding)

    result = extract_cues(decoded.text, fmt)
    if not result.ok:
        log.warning("parse_failed", fmt=fmt.name, path=str(path), error=result.error)
        report.error = result.error
        return report

    for cue in result.cues:
        label = classifier.classify(clean_text(cue))
        tally.record(label)
        report.labels.append(label)
    log.debug("file_processed", path=str(path), fmt=fmt.name, cues=report.cue_count)
    return report


def scan_directory(root: Path, config: Optional[ScanConfig] = None, classifier: Optional[LanguageClassifier] = None) -> LanguageTally:
    """Tally the Chinese and Japanese cues of every supported file under ``root``.

    Only a missing or non-directory root is fatal; every per-file failure is
    logged and the file counts as zero cues.
    """
    config = config or ScanConfig()
    classifier = classifier or LanguageClassifier(seed=config.detector_seed)
    if not root.exists():
        raise ScanRootError(f"Path does not exist: {root}")
    if not root.is_dir():
        raise ScanRootError(f"Path is not a directory: {root}")

    tally = LanguageTally()
    for path, fmt in iter_subtitle_files(root, config.extensions, follow_symlinks=config.follow_symlinks):
        report = process_file(path, fmt, tally, classifier)
        tally.files_scanned += 1
        if report.error:
            tally.files_failed += 1
    log.info(
        "scan_complete",
        root=str(root),
        files=tally.files_scanned,
        failed=tally.files_failed,
        chinese=tally.chinese,
        japanese=tally.japanese,
        other=tally.other,
    )
    return tally
