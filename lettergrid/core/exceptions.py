"""Custom exception hierarchy for letter grid generation."""


class LetterGridError(Exception):
    """Base exception for board generation failures."""


class InvalidBoardDimensionsError(LetterGridError, ValueError):
    """Raised when a board is requested with non-positive rows or columns."""
