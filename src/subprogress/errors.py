class SubProgressError(Exception):
    """Base exception for subprogress."""


class ScanRootError(SubProgressError):
    pass


class CueExtractionError(SubProgressError):
    """A subtitle or lyric document does not conform to its format's grammar."""


class LyricParseError(CueExtractionError):
    pass
