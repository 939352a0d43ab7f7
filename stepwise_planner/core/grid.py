"""Row-major grid of opaque cell values."""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple


Coord = Tuple[int, int]


class Grid:
    """``width`` x ``height`` cells stored row-major in ``cells``.

    The grid never interprets its values; callers decide what they mean.
    """

    def __init__(self, width: int, height: int, cells: Sequence[Any] | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        if cells is None:
            cells = [0] * (width * height)
        if len(cells) != width * height:
            raise ValueError(
                f"Expected {width * height} cells for a {width}x{height} grid, got {len(cells)}"
            )
        self.width = width
        self.height = height
        self.cells: List[Any] = list(cells)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> "Grid":
        """Build a grid from ``rows[y][x]``."""

        if not rows:
            raise ValueError("Grid needs at least one row")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have the same length")
        return cls(width, len(rows), [value for row in rows for value in row])

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def in_bounds(self, coord: Coord) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def value_at(self, coord: Coord) -> Any:
        x, y = coord
        if not self.in_bounds(coord):
            raise IndexError(f"{coord} is outside the {self.width}x{self.height} grid")
        return self.cells[y * self.width + x]

    def set_value(self, coord: Coord, value: Any) -> None:
        x, y = coord
        if not self.in_bounds(coord):
            raise IndexError(f"{coord} is outside the {self.width}x{self.height} grid")
        self.cells[y * self.width + x] = value

    def to_rows(self) -> List[List[Any]]:
        w = self.width
        return [self.cells[y * w:(y + 1) * w] for y in range(self.height)]

    def copy(self) -> "Grid":
        return Grid(self.width, self.height, self.cells)

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"


__all__ = ["Coord", "Grid"]
