"""Shared fixtures for subprogress tests."""

import re

import pytest
import structlog
from langdetect import LangDetectException

from subprogress.language_detect import LanguageClassifier

KANA_RE = re.compile(r"[\u3040-\u30ff]")
HAN_RE = re.compile(r"[\u4e00-\u9fff]")


def script_detect(text: str) -> str:
    """Deterministic stand-in for langdetect: kana -> ja, Han only -> zh-cn."""
    if KANA_RE.search(text):
        return "ja"
    if HAN_RE.search(text):
        return "zh-cn"
    if re.search(r"[A-Za-z]", text):
        return "en"
    raise LangDetectException(0, "No features in text.")


ASS_SAMPLE = """[Script Info]
ScriptType: v4.00+

[V4+ Styles]
Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding
Style: Default,Arial,20,&H00FFFFFF,&H000000FF,&H00000000,&H00000000,0,0,0,0,100,100,0,0,1,2,2,2,10,10,10,1

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,{\\i1}碧蓝档案{\\i0}
Dialogue: 0,0:00:03.00,0:00:04.00,Default,,0,0,0,,ブルーアーカイブ
Dialogue: 0,0:00:05.00,0:00:06.00,Default,,0,0,0,,
"""

SRT_SAMPLE = """1
00:00:01,000 --> 00:00:02,000
<i>你好世界</i>

2
00:00:03,000 --> 00:00:04,000
こんにちは
"""

VTT_SAMPLE = """WEBVTT

00:00:01.000 --> 00:00:02.000
<i>碧蓝档案</i>

00:00:03.000 --> 00:00:04.000
ブルーアーカイブ

00:00:05.000 --> 00:00:06.000
老师，早上好
"""

LRC_SAMPLE = """[ti:青空]
[ar:Someone]
[00:01.00]晴れた空の下で
[00:05.50]
[00:09.20]我们一起走吧
"""


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def classifier():
    return LanguageClassifier(detect_fn=script_detect)


@pytest.fixture
def write_file(tmp_path):
    def _write(relative: str, contents, encoding: str = "utf-8"):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(contents, bytes):
            path.write_bytes(contents)
        else:
            path.write_text(contents, encoding=encoding)
        return path
    return _write
