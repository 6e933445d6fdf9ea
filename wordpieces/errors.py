"""
Error taxonomy for word piece segmentation.

The segmentation engine itself never raises; every error below is raised at a
construction or I/O boundary and propagated to the command-line entry point,
which reports it and exits with status 1.
"""
from pathlib import Path
from typing import Optional, Union


class WordPiecesError(Exception):
    """Base class for all errors raised by this package."""


class MalformedVocabulary(WordPiecesError, ValueError):
    """A vocabulary contains an invalid entry (e.g. an empty piece)."""


class UnreadableSource(WordPiecesError, OSError):
    """A vocabulary or corpus file could not be opened or read."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        message = f"Cannot read {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


class CorpusParseError(WordPiecesError, ValueError):
    """A sentence in the corpus could not be parsed."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None, line_no: Optional[int] = None):
        self.path = Path(path) if path is not None else None
        self.line_no = line_no
        location = ""
        if self.path is not None:
            location = f"{self.path}"
            if line_no is not None:
                location += f":{line_no}"
            location += ": "
        super().__init__(f"{location}{message}")


class UnwritableOutput(WordPiecesError, OSError):
    """An output file could not be created or written."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        message = f"Cannot write {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]
