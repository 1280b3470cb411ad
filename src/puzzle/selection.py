"""
Drag-gesture tracking and match validation.

A SelectionTracker turns pointer events (press, move, release) into a
straight, gap-free line of cells anchored on the first cell pressed.
match_selection checks a finished path against the placed words.
"""

from typing import Callable, Iterable, List, Optional

from .models import Cell, GeneratedGrid, GridGeometry, compute_path, is_straight_line


class SelectionTracker:
    """
    Stateful tracker for a single drag gesture.

    Args:
        size: Grid side length; cells outside the grid are ignored
        is_active: Gate checked on start(); defaults to always active
    """

    def __init__(self, size: int, is_active: Optional[Callable[[], bool]] = None):
        self.size = size
        self._is_active = is_active or (lambda: True)
        self.selecting = False
        self.path: List[Cell] = []

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def start(self, row: int, col: int) -> None:
        """Seed a new path; abandons any unreleased one."""
        if not self._is_active() or not self._in_bounds(row, col):
            return
        self.selecting = True
        self.path = [(row, col)]

    def extend(self, row: int, col: int) -> None:
        """
        Extend the path to (row, col).

        Direction is judged against the first cell, and the path is
        recomputed in full, so it never bends. Cells that are not in a
        straight line from the first cell are ignored.
        """
        if not self.selecting or not self.path or not self._in_bounds(row, col):
            return

        if self.path[-1] == (row, col):
            return

        first = self.path[0]
        if not is_straight_line(first, (row, col)):
            return

        self.path = compute_path(first, (row, col))

    def touch_move(self, x: float, y: float, geometry: GridGeometry) -> None:
        """Map a touch point to the cell under it and extend to it."""
        cell = geometry.cell_at(x, y)
        if cell is None:
            return
        self.extend(*cell)

    def release(self) -> List[Cell]:
        """Close the gesture and return the final path; the tracker is cleared."""
        path = self.path if self.selecting else []
        self.selecting = False
        self.path = []
        return path

    def cancel(self) -> None:
        """Drop any in-progress path without returning it."""
        self.selecting = False
        self.path = []


def match_selection(
    path: List[Cell],
    puzzle: GeneratedGrid,
    found: Iterable[str],
) -> Optional[str]:
    """
    Return the placed, not-yet-found word spelled by the path in either
    direction, or None.

    Paths shorter than two cells never match.
    """
    if len(path) < 2:
        return None

    if not all(puzzle.contains(cell) for cell in path):
        return None

    forward = puzzle.read(path)
    backward = forward[::-1]
    found = set(found)

    for word in puzzle.placed_words:
        if word in found:
            continue
        if word == forward or word == backward:
            return word

    return None
