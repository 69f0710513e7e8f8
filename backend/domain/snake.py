"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: List[Tuple[int, int]]):
        if len(positions) < 2:
            raise ValueError("A snake needs at least two cells.")
        self.positions = deque(positions)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        return self.positions[-1]

    def __len__(self):
        return len(self.positions)

    def __contains__(self, cell):
        return cell in self.positions

    def move_head(self, cell: Tuple[int, int]) -> Tuple[int, int]:
        """Put the head on ``cell`` without shifting the body. Returns the old head."""
        previous = self.positions[0]
        self.positions[0] = cell
        return previous

    def occurrences(self, cell: Tuple[int, int]) -> int:
        return self.positions.count(cell)

    def follow(self, previous_head: Tuple[int, int]) -> Tuple[int, int]:
        """
        Ripple the body behind an already moved head.

        Every segment after the head takes the position its predecessor held
        before the turn. Returns the cell that fell off the tail.
        """
        held = previous_head
        for i in range(1, len(self.positions)):
            self.positions[i], held = held, self.positions[i]
        return held

    def grow(self, cell: Tuple[int, int]) -> None:
        """Append a new tail segment."""
        self.positions.append(cell)

    def cells(self) -> List[Tuple[int, int]]:
        return list(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head} length={len(self)}>"
