"""Cue extraction for the supported subtitle and lyric formats."""

from __future__ import annotations
import io
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional

import pysubs2
import webvtt

from .errors import CueExtractionError
from .lyrics import parse_lrc


class SubtitleFormat(str, Enum):
    ASS = "ass"
    SRT = "srt"
    VTT = "vtt"
    LRC = "lrc"

    @property
    def kind(self) -> str:
        if self in (SubtitleFormat.ASS, SubtitleFormat.SRT):
            return "dialogue"
        if self is SubtitleFormat.VTT:
            return "caption"
        return "lyric"

    @classmethod
    def from_path(cls, path: Path) -> Optional["SubtitleFormat"]:
        ext = path.suffix.lower().lstrip(".")
        try:
            return cls(ext)
        except ValueError:
            return None


@dataclass
class ExtractionResult:
    cues: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _extract_dialogue_cues(contents: str, format_: str) -> List[str]:
    try:
        subs = pysubs2.SSAFile.from_string(contents, format_=format_)
    except Exception as e:
        raise CueExtractionError(str(e)) from e
    # pysubs2 returns an empty file instead of raising when nothing matches the format
    if contents.strip() and not subs.events:
        raise CueExtractionError(f"No {format_.upper()} events found")
    return [event.text for event in subs.events]


def extract_ass_cues(contents: str) -> List[str]:
    return _extract_dialogue_cues(contents, "ass")


def extract_srt_cues(contents: str) -> List[str]:
    return _extract_dialogue_cues(contents, "srt")


def extract_vtt_cues(contents: str) -> List[str]:
    try:
        vtt = webvtt.WebVTT.from_buffer(io.StringIO(contents))
    except Exception as e:
        raise CueExtractionError(str(e)) from e
    return [caption.text for caption in vtt.captions]


def extract_lrc_cues(contents: str) -> List[str]:
    # Instrumental breaks are time tags without lyric text
    return [text for _, text in parse_lrc(contents).timed_lines() if text.strip()]


EXTRACTORS: Dict[SubtitleFormat, Callable[[str], List[str]]] = {
    SubtitleFormat.ASS: extract_ass_cues,
    SubtitleFormat.SRT: extract_srt_cues,
    SubtitleFormat.VTT: extract_vtt_cues,
    SubtitleFormat.LRC: extract_lrc_cues,
}


def extract_cues(contents: str, fmt: SubtitleFormat) -> ExtractionResult:
    """Extract raw cue texts in source order.

    A document that fails to parse yields an empty result carrying the error
    message instead of raising, so one bad file never stops a scan.
    """
    try:
        return ExtractionResult(cues=EXTRACTORS[fmt](contents))
    except CueExtractionError as e:
        return ExtractionResult(error=f"Failed to parse {fmt.name} file: {e}")
