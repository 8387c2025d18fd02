import json
from typing import Optional


def format_progress(ratio: Optional[float]) -> str:
    # An undefined ratio (no Chinese or Japanese cues) is emitted as null
    return json.dumps({"progress": ratio})
