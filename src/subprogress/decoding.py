from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from charset_normalizer import from_bytes

REPLACEMENT_CHAR = "\ufffd"

# Unicode plus the Chinese and Japanese legacy encodings
CANDIDATE_ENCODINGS = [
    "utf_8",
    "utf_16",
    "utf_32",
    "gb18030",
    "big5",
    "shift_jis",
    "cp932",
    "euc_jp",
]


@dataclass
class DecodedText:
    text: str
    encoding: Optional[str]
    had_errors: bool = False


def decode_bytes(data: bytes) -> DecodedText:
    """Best-effort decode of a subtitle file.

    Only CANDIDATE_ENCODINGS are considered. Falls back to lossy UTF-8 when
    none of them fits; ``had_errors`` is set whenever the text carries
    replacement characters.
    """
    if not data:
        return DecodedText(text="", encoding="utf_8")
    match = from_bytes(data, cp_isolation=CANDIDATE_ENCODINGS).best()
    if match is not None:
        text = str(match)
        encoding = match.encoding
    else:
        text = data.decode("utf-8", errors="replace")
        encoding = None
    text = text.lstrip("\ufeff")
    return DecodedText(text=text, encoding=encoding, had_errors=encoding is None or REPLACEMENT_CHAR in text)
