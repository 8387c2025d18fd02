import re

ASS_TAGS = re.compile(r"\{[^}]*\}")
HTML_TAGS = re.compile(r"<[^>]+>")


def clean_text(text: str) -> str:
    """Strip style overrides and inline tags from a cue.

    Entities such as ``&amp;`` are not unescaped.
    """
    text = ASS_TAGS.sub("", text)
    text = HTML_TAGS.sub("", text)
    return text.strip()
