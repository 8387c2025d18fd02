"""
Timed-lyric (LRC) parsing.

Supports the common LRC layout:
- [mm:ss.xx]Lyric text
- [mm:ss.xx][mm:ss.xx]Repeated lyric text
- [ti:Title] / [ar:Artist] / [offset:+250] and other ID tags
- Enhanced word timing (<mm:ss.xx>) is kept in the lyric text
"""

from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import structlog

from .errors import LyricParseError

log = structlog.get_logger(__name__)

_TIME_TAG = r"\[(\d+):(\d{1,2})(?:[.:](\d{1,3}))?\]"
TIME_TAG_RE = re.compile(_TIME_TAG)
TIMED_LINE_RE = re.compile(rf"^(?P<tags>(?:{_TIME_TAG}\s*)+)(?P<text>.*)$")
ID_TAG_RE = re.compile(r"^\[([\w#-]+):([^\]]*)\]$")


@dataclass
class LyricLine:
    timestamp_ms: int
    text: str


@dataclass
class LyricDocument:
    """Parsed LRC document: ID tags plus one line per time tag."""
    tags: Dict[str, str] = field(default_factory=dict)
    lines: List[LyricLine] = field(default_factory=list)

    @property
    def offset_ms(self) -> int:
        return int(self.tags.get("offset", "0"))

    def timed_lines(self) -> List[Tuple[int, str]]:
        offset = self.offset_ms
        shifted = [(max(0, line.timestamp_ms - offset), line.text) for line in self.lines]
        return sorted(shifted, key=lambda item: item[0])


def _tag_to_ms(minutes: str, seconds: str, fraction: str | None) -> int:
    ms = (int(minutes) * 60 + int(seconds)) * 1000
    if fraction:
        # .x = tenths, .xx = hundredths, .xxx = milliseconds
        ms += int(fraction.ljust(3, "0"))
    return ms


def parse_lrc(contents: str) -> LyricDocument:
    """Parse LRC text, skipping lines that are neither timed lyrics nor ID tags.

    Raises LyricParseError only when the text has content but no line is
    recognizable as LRC.
    """
    doc = LyricDocument()
    recognized = False
    seen_content = False
    for lineno, raw in enumerate(contents.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        seen_content = True

        m = TIMED_LINE_RE.match(line)
        if m:
            tags = TIME_TAG_RE.findall(m.group("tags"))
            if any(int(seconds) >= 60 for _, seconds, _ in tags):
                log.debug("lrc_invalid_time_tag", lineno=lineno, line=raw)
                continue
            text = m.group("text")
            for minutes, seconds, fraction in tags:
                doc.lines.append(LyricLine(_tag_to_ms(minutes, seconds, fraction), text))
            recognized = True
            continue

        m = ID_TAG_RE.match(line)
        if m:
            key, value = m.group(1).lower(), m.group(2).strip()
            recognized = True
            if key == "offset" and not re.fullmatch(r"[+-]?\d+", value):
                log.debug("lrc_invalid_offset", lineno=lineno, value=value)
                continue
            doc.tags[key] = value
            continue

        log.debug("lrc_line_skipped", lineno=lineno, line=raw)

    if seen_content and not recognized:
        raise LyricParseError("No LRC time or ID tags found")
    return doc
