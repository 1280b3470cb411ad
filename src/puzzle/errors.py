"""Exceptions raised by the word-search engine."""


class WordSearchError(Exception):
    """Base class for word-search errors."""


class PuzzleGenerationError(WordSearchError):
    """Raised when not a single word could be placed on the grid."""

    def __init__(self, message: str, words: list[str] | None = None, size: int | None = None):
        super().__init__(message)
        self.words = words or []
        self.size = size
