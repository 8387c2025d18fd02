from typing import List
from pydantic import BaseModel, Field, field_validator

SUPPORTED_EXTENSIONS = ("ass", "srt", "vtt", "lrc")


class ScanConfig(BaseModel):
    extensions: List[str] = Field(default_factory=lambda: list(SUPPORTED_EXTENSIONS))
    follow_symlinks: bool = False
    detector_seed: int = 0  # langdetect is non-deterministic without a seed
    log_level: str = "INFO"

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: List[str]) -> List[str]:
        normalized = []
        for ext in value:
            ext = ext.lower().lstrip(".")
            if ext not in SUPPORTED_EXTENSIONS:
                raise ValueError(f"Unsupported subtitle extension: {ext}")
            if ext not in normalized:
                normalized.append(ext)
        return normalized
