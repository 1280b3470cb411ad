"""Word-search puzzle engine: generation, selection and offline words."""

from .models import Cell, DIRECTIONS, PlacementRecord, GeneratedGrid, GridGeometry, compute_path, is_straight_line
from .errors import WordSearchError, PuzzleGenerationError
from .sanitize import sanitize_word, sanitize_words
from .grid import generate_grid, build_puzzle, render_grid, ALPHABET, MAX_ATTEMPTS
from .selection import SelectionTracker, match_selection
from .data import get_offline_words, theme_pool, WORD_LISTS, RANDOM_THEME

__all__ = [
    # Models
    "Cell",
    "DIRECTIONS",
    "PlacementRecord",
    "GeneratedGrid",
    "GridGeometry",
    "compute_path",
    "is_straight_line",
    # Errors
    "WordSearchError",
    "PuzzleGenerationError",
    # Sanitization
    "sanitize_word",
    "sanitize_words",
    # Grid
    "generate_grid",
    "build_puzzle",
    "render_grid",
    "ALPHABET",
    "MAX_ATTEMPTS",
    # Selection
    "SelectionTracker",
    "match_selection",
    # Offline words
    "get_offline_words",
    "theme_pool",
    "WORD_LISTS",
    "RANDOM_THEME",
]
