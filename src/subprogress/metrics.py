from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .language_detect import LanguageLabel


@dataclass
class LanguageTally:
    """Run-scoped cue counters.

    Only ``chinese`` and ``japanese`` feed the progress ratio; the other
    fields are diagnostics.
    """
    chinese: int = 0
    japanese: int = 0
    other: int = 0
    files_scanned: int = 0
    files_failed: int = 0

    def record(self, label: LanguageLabel) -> None:
        if label is LanguageLabel.CHINESE:
            self.chinese += 1
        elif label is LanguageLabel.JAPANESE:
            self.japanese += 1
        else:
            self.other += 1

    def ratio(self) -> Optional[float]:
        """Chinese share of the Chinese + Japanese cues, or None when there are none."""
        total = self.chinese + self.japanese
        if total == 0:
            return None
        return self.chinese / total

    def merge(self, other: LanguageTally) -> LanguageTally:
        return LanguageTally(
            chinese=self.chinese + other.chinese,
            japanese=self.japanese + other.japanese,
            other=self.other + other.other,
            files_scanned=self.files_scanned + other.files_scanned,
            files_failed=self.files_failed + other.files_failed,
        )
