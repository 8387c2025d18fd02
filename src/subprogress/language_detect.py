"""Chinese / Japanese classification of cleaned cue text."""

from __future__ import annotations
from enum import Enum
from typing import Callable, Optional

import langcodes
import structlog
from langdetect import detect, DetectorFactory

log = structlog.get_logger(__name__)


class LanguageLabel(str, Enum):
    CHINESE = "chinese"
    JAPANESE = "japanese"
    OTHER = "other"


# Base language subtags after langcodes standardization (cmn -> zh, jpn -> ja)
TARGET_LANGUAGES = {
    "zh": LanguageLabel.CHINESE,
    "ja": LanguageLabel.JAPANESE,
}


def label_for_tag(tag: Optional[str]) -> LanguageLabel:
    """Map a detector language tag such as ``zh-cn`` or ``ja`` onto a label."""
    if not tag:
        return LanguageLabel.OTHER
    try:
        # macro=True folds macrolanguage members such as cmn into zh
        language = langcodes.Language.get(langcodes.standardize_tag(tag, macro=True)).language
    except ValueError:
        return LanguageLabel.OTHER
    return TARGET_LANGUAGES.get(language, LanguageLabel.OTHER)


class LanguageClassifier:
    """Wraps a text -> language tag function.

    ``detect_fn`` defaults to langdetect's ``detect``; the seed makes its
    results reproducible between runs.
    """

    def __init__(self, detect_fn: Optional[Callable[[str], str]] = None, seed: int = 0):
        if detect_fn is None:
            DetectorFactory.seed = seed
            detect_fn = detect
        self._detect = detect_fn

    def classify(self, text: str) -> LanguageLabel:
        if not text.strip():
            return LanguageLabel.OTHER
        try:
            tag = self._detect(text)
        except Exception as e:
            # langdetect raises on text without usable features (digits, punctuation)
            log.debug("language_detect_failed", text=text[:40], error=str(e))
            return LanguageLabel.OTHER
        return label_for_tag(tag)
