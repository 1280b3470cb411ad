"""Data models for puzzle generation and selection."""

from typing import List, Optional, Tuple
from pydantic import BaseModel, Field


Cell = Tuple[int, int]

# (row delta, column delta) for the four placement directions:
# right, down, down-right, down-left
DIRECTIONS: List[Tuple[int, int]] = [(0, 1), (1, 0), (1, 1), (1, -1)]


def compute_path(start: Cell, end: Cell) -> List[Cell]:
    """
    Compute the straight line of cells from start to end, inclusive.

    Steps by the sign of the row and column deltas, so the caller must
    ensure the two cells are aligned horizontally, vertically or on an
    equal-magnitude diagonal.
    """
    r1, c1 = start
    r2, c2 = end
    d_r = (r2 > r1) - (r2 < r1)
    d_c = (c2 > c1) - (c2 < c1)
    steps = max(abs(r2 - r1), abs(c2 - c1))
    return [(r1 + i * d_r, c1 + i * d_c) for i in range(steps + 1)]


def is_straight_line(start: Cell, end: Cell) -> bool:
    """True if end is reachable from start horizontally, vertically or diagonally."""
    d_r = end[0] - start[0]
    d_c = end[1] - start[1]
    return d_r == 0 or d_c == 0 or abs(d_r) == abs(d_c)


class PlacementRecord(BaseModel):
    """Straight line a placed word occupies on the grid."""
    word: str = Field(..., min_length=2, pattern=r'^[A-Z]+$')
    start: Cell
    end: Cell

    @property
    def path(self) -> List[Cell]:
        """Cells covered by the word, start to end."""
        return compute_path(self.start, self.end)


class GeneratedGrid(BaseModel):
    """Result of laying a word list into a letter grid."""
    size: int = Field(..., ge=1)
    grid: List[List[str]] = Field(default_factory=list)
    placements: List[PlacementRecord] = Field(default_factory=list)
    placed_words: List[str] = Field(default_factory=list)
    dropped_words: List[str] = Field(default_factory=list)

    def letter_at(self, cell: Cell) -> str:
        """Letter at (row, col)."""
        r, c = cell
        return self.grid[r][c]

    def read(self, path: List[Cell]) -> str:
        """Concatenate the letters along a path."""
        return "".join(self.letter_at(cell) for cell in path)

    def placement_for(self, word: str) -> Optional[PlacementRecord]:
        """Find the placement record of a placed word."""
        for placement in self.placements:
            if placement.word == word:
                return placement
        return None

    def contains(self, cell: Cell) -> bool:
        """Check whether a cell lies inside the grid."""
        r, c = cell
        return 0 <= r < self.size and 0 <= c < self.size


class GridGeometry(BaseModel):
    """
    Screen geometry of a rendered grid, used to hit-test touch points.

    Attributes:
        origin_x: X coordinate of the grid's top-left corner
        origin_y: Y coordinate of the grid's top-left corner
        cell_size: Width and height of a single cell
        size: Number of rows/columns
    """
    origin_x: float = 0.0
    origin_y: float = 0.0
    cell_size: float = Field(..., gt=0)
    size: int = Field(..., ge=1)

    def cell_at(self, x: float, y: float) -> Optional[Cell]:
        """Return the (row, col) under a point, or None if the point is off-grid."""
        col = int((x - self.origin_x) // self.cell_size)
        row = int((y - self.origin_y) // self.cell_size)
        if 0 <= row < self.size and 0 <= col < self.size:
            return (row, col)
        return None
