"""Grid generation and rendering utilities."""

import logging
import random
import string
from typing import Dict, List, Optional

from .errors import PuzzleGenerationError
from .models import Cell, DIRECTIONS, GeneratedGrid, PlacementRecord
from .sanitize import sanitize_word

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_uppercase
MAX_ATTEMPTS = 100


def _fits(grid: List[List[str]], word: str, start: Cell, direction: tuple[int, int]) -> bool:
    """Check every covered cell is empty or already holds the same letter."""
    r0, c0 = start
    d_r, d_c = direction
    for i, letter in enumerate(word):
        existing = grid[r0 + i * d_r][c0 + i * d_c]
        if existing and existing != letter:
            return False
    return True


def _try_place(
    grid: List[List[str]],
    word: str,
    size: int,
    rng: random.Random,
    max_attempts: int,
) -> Optional[PlacementRecord]:
    """Attempt up to max_attempts random placements of a single word."""
    for _ in range(max_attempts):
        d_r, d_c = rng.choice(DIRECTIONS)
        r_start = rng.randrange(size)
        c_start = rng.randrange(size)
        r_end = r_start + (len(word) - 1) * d_r
        c_end = c_start + (len(word) - 1) * d_c

        if not (0 <= r_end < size and 0 <= c_end < size):
            continue

        if not _fits(grid, word, (r_start, c_start), (d_r, d_c)):
            continue

        for i, letter in enumerate(word):
            grid[r_start + i * d_r][c_start + i * d_c] = letter
        return PlacementRecord(word=word, start=(r_start, c_start), end=(r_end, c_end))

    return None


def generate_grid(
    words: List[str],
    size: int,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> GeneratedGrid:
    """
    Place a list of words into a size x size letter grid.

    Words are sanitized, filtered to lengths 2..size and placed longest
    first. Each word gets up to max_attempts random placements in one of
    four directions; intersections are allowed only where letters agree.
    Words that never fit are dropped. Remaining cells are filled with
    random letters.

    Args:
        words: Candidate words (any case, accents allowed)
        size: Grid side length
        rng: Random generator (defaults to a fresh unseeded one)
        max_attempts: Placement attempts per word

    Returns:
        GeneratedGrid with the filled grid, placements and placed words
    """
    if size < 1:
        raise ValueError(f"Grid size must be positive, got {size}")

    rng = rng or random.Random()
    grid: List[List[str]] = [["" for _ in range(size)] for _ in range(size)]
    placements: List[PlacementRecord] = []
    placed_words: List[str] = []
    dropped_words: List[str] = []

    candidates = []
    for word in words:
        clean = sanitize_word(word)
        if len(clean) < 2 or len(clean) > size:
            dropped_words.append(clean or word)
            continue
        if clean in candidates:
            continue
        candidates.append(clean)

    # Longest first; stable sort keeps input order among equal lengths
    candidates.sort(key=len, reverse=True)

    for word in candidates:
        placement = _try_place(grid, word, size, rng, max_attempts)
        if placement is None:
            logger.debug(f"Could not place {word} after {max_attempts} attempts")
            dropped_words.append(word)
            continue
        placements.append(placement)
        placed_words.append(word)

    for r in range(size):
        for c in range(size):
            if not grid[r][c]:
                grid[r][c] = rng.choice(ALPHABET)

    return GeneratedGrid(
        size=size,
        grid=grid,
        placements=placements,
        placed_words=placed_words,
        dropped_words=dropped_words,
    )


def build_puzzle(
    words: List[str],
    size: int,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> GeneratedGrid:
    """
    Generate a grid and require at least one placed word.

    Raises:
        PuzzleGenerationError: If no word could be placed
    """
    result = generate_grid(words, size, rng=rng, max_attempts=max_attempts)
    if not result.placed_words:
        raise PuzzleGenerationError(
            f"Could not place any of {len(words)} words on a {size}x{size} grid",
            words=list(words),
            size=size,
        )
    return result


def render_grid(
    grid: List[List[str]],
    marks: Optional[Dict[Cell, str]] = None,
) -> str:
    """
    Render the grid to a string with row and column indices.

    Cells present in marks are rendered as the mark string wrapped around
    the letter, e.g. {(0, 0): "*"} renders "*A*".
    """
    if not grid:
        return ""

    marks = marks or {}
    size = len(grid)
    width = len(str(size - 1))

    header = " " * (width + 1) + "".join(f" {c:>{width}} " for c in range(len(grid[0])))
    lines = [header]
    for r, row in enumerate(grid):
        cells = []
        for c, letter in enumerate(row):
            mark = marks.get((r, c))
            if mark:
                cells.append(f"{mark}{letter:>{width}}{mark}")
            else:
                cells.append(f" {letter:>{width}} ")
        lines.append(f"{r:>{width}} " + "".join(cells))

    return "\n".join(lines)
