"""
Board geometry and food placement helpers.
"""

from typing import Iterable, List, Set, Tuple

from .constants import OFFSETS, MAX_PLACEMENT_ATTEMPTS, DENSE_BOARD_RATIO
from .errors import BoardFullError
from .random_source import RandomSource

Cell = Tuple[int, int]


def in_bounds(cell: Cell, width: int, height: int) -> bool:
    """Check whether a cell lies on a width x height board."""
    x, y = cell
    return 0 <= x < width and 0 <= y < height


def step(cell: Cell, heading: str) -> Cell:
    """Return the cell one unit away from ``cell`` in ``heading``; may be off the board."""
    dx, dy = OFFSETS[heading]
    return (cell[0] + dx, cell[1] + dy)


def free_cells(occupied: Set[Cell], width: int, height: int) -> List[Cell]:
    """All cells not in ``occupied``, in row-major order."""
    return [
        (x, y)
        for y in range(height)
        for x in range(width)
        if (x, y) not in occupied
    ]


def place_food(occupied_cells: Iterable[Cell], width: int, height: int, rng: RandomSource) -> Cell:
    """
    Pick a uniformly random cell that is not occupied.

    On a sparse board we sample (x, y) pairs and reject occupied ones, bounded
    by MAX_PLACEMENT_ATTEMPTS. On a dense board, or once the attempts run out,
    we list the free cells and pick one of them directly.

    Raises:
        BoardFullError: if every cell is occupied
    """
    occupied = set(occupied_cells)
    total = width * height

    if len(occupied) >= total:
        raise BoardFullError(f"No free cell left on the {width}x{height} board.")

    if len(occupied) < total * DENSE_BOARD_RATIO:
        for _ in range(MAX_PLACEMENT_ATTEMPTS):
            x = rng.uniform_in_range(0, width - 1)
            y = rng.uniform_in_range(0, height - 1)
            if (x, y) not in occupied:
                return (x, y)

    candidates = free_cells(occupied, width, height)
    return candidates[rng.uniform_in_range(0, len(candidates) - 1)]
