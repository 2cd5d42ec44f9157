"""Perfect maze generator that carves a spanning tree directly into pixel space."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, NamedTuple, Optional, Tuple

import numpy as np

WALL = 1
PATH = 0

UP, LEFT, DOWN, RIGHT = range(4)
DIRECTION_OFFSETS = {
    UP: (-1, 0),
    LEFT: (0, -1),
    DOWN: (1, 0),
    RIGHT: (0, 1),
}

SEED_LIMIT = 1 << 64


class InvalidDimensionError(ValueError):
    """Raised when a maze is configured with an unusable dimension."""

    def __init__(self, name: str, value: object, requirement: str) -> None:
        super().__init__(f"{name} must be {requirement}, got {value!r}")
        self.name = name
        self.value = value


class MazeSize(NamedTuple):
    width: int
    height: int


def _is_integer(value: object) -> bool:
    return not isinstance(value, bool) and isinstance(value, (int, np.integer))


def validate_dimensions(
    cols: int,
    rows: int,
    cell_size: int,
    wall_thickness: int,
    *,
    names: Tuple[str, str] = ("cols", "rows"),
) -> None:
    """Check maze dimensions; ``names`` labels the two cell counts in errors."""

    cols_name, rows_name = names
    for name, value, minimum in (
        (cols_name, cols, 1),
        (rows_name, rows, 1),
        ("cell_size", cell_size, 1),
        ("wall_thickness", wall_thickness, 0),
    ):
        if not _is_integer(value):
            raise InvalidDimensionError(name, value, "an integer")
        if value < minimum:
            requirement = "positive" if minimum > 0 else "non-negative"
            raise InvalidDimensionError(name, value, requirement)


class MazeGenerator:
    """Generate perfect mazes on a pixel grid of ``0`` (path) and ``1`` (wall).

    The grid and the visited matrix are allocated once and overwritten on every
    call to :meth:`generate`, so one instance can produce many mazes. The same
    seed pair always yields the same grid.
    """

    def __init__(
        self,
        cols: int,
        rows: int,
        cell_size: int,
        wall_thickness: int,
        *,
        dtype: np.dtype = np.uint8,
    ) -> None:
        validate_dimensions(cols, rows, cell_size, wall_thickness)
        if not np.issubdtype(np.dtype(dtype), np.integer):
            raise TypeError(f"Grid dtype must be an integer type, got {np.dtype(dtype)}")
        self.cols = int(cols)
        self.rows = int(rows)
        self.cell_size = int(cell_size)
        self.wall_thickness = int(wall_thickness)

        width, height = self.size()
        self.grid = np.ones((height, width), dtype=dtype)
        self.visited = np.zeros((self.rows, self.cols), dtype=bool)
        self._rng: Optional[np.random.Generator] = None

    def size(self) -> MazeSize:
        """Return the maze size in pixels, walls around the border included."""

        return MazeSize(
            self.cols * self.cell_size + (self.cols + 1) * self.wall_thickness,
            self.rows * self.cell_size + (self.rows + 1) * self.wall_thickness,
        )

    def cell_origin(self, row: int, col: int) -> Tuple[int, int]:
        """Top-left pixel ``(y, x)`` of the open block belonging to a cell."""

        step = self.cell_size + self.wall_thickness
        return self.wall_thickness + row * step, self.wall_thickness + col * step

    def generate(self, seed1: int, seed2: int) -> np.ndarray:
        """Carve a new maze for the seed pair and return the occupancy grid."""

        self._rng = self._seeded_rng(seed1, seed2)
        self.grid.fill(WALL)
        self.visited.fill(False)
        self._carve_from(0, 0)
        return self.grid

    # ------------------------------------------------------------------

    @staticmethod
    def _seeded_rng(seed1: int, seed2: int) -> np.random.Generator:
        for name, seed in (("seed1", seed1), ("seed2", seed2)):
            if not _is_integer(seed):
                raise TypeError(f"{name} must be an integer, got {type(seed).__name__}")
            if not 0 <= int(seed) < SEED_LIMIT:
                raise ValueError(f"{name} must be an unsigned 64-bit integer, got {seed!r}")
        sequence = np.random.SeedSequence([int(seed1), int(seed2)])
        return np.random.Generator(np.random.PCG64DXSM(sequence))

    def _carve_from(self, row: int, col: int) -> None:
        # Frames are (row, col, direction order, index of next direction to try).
        stack: List[List] = [self._visit(row, col)]
        while stack:
            frame = stack[-1]
            r, c, directions, index = frame
            if index == len(directions):
                stack.pop()
                continue
            frame[3] = index + 1
            direction = int(directions[index])
            dr, dc = DIRECTION_OFFSETS[direction]
            nr, nc = r + dr, c + dc
            if 0 <= nr < self.rows and 0 <= nc < self.cols and not self.visited[nr, nc]:
                self._open_wall(r, c, direction)
                stack.append(self._visit(nr, nc))

    def _visit(self, row: int, col: int) -> List:
        self.visited[row, col] = True
        start_y, start_x = self.cell_origin(row, col)
        self._fill(start_y, start_x, self.cell_size, self.cell_size)
        return [row, col, self._rng.permutation(4), 0]

    def _open_wall(self, row: int, col: int, direction: int) -> None:
        start_y, start_x = self.cell_origin(row, col)
        cs, wt = self.cell_size, self.wall_thickness
        if direction == UP:
            self._fill(start_y - wt, start_x, wt, cs)
        elif direction == LEFT:
            self._fill(start_y, start_x - wt, cs, wt)
        elif direction == DOWN:
            self._fill(start_y + cs, start_x, wt, cs)
        else:
            self._fill(start_y, start_x + cs, cs, wt)

    def _fill(self, top: int, left: int, height: int, width: int) -> None:
        grid_height, grid_width = self.grid.shape
        y0, y1 = max(top, 0), min(top + height, grid_height)
        x0, x1 = max(left, 0), min(left + width, grid_width)
        if y0 < y1 and x0 < x1:
            self.grid[y0:y1, x0:x1] = PATH


__all__ = [
    "MazeGenerator",
    "MazeSize",
    "InvalidDimensionError",
    "validate_dimensions",
    "WALL",
    "PATH",
]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a perfect maze and save it as a PNG")
    parser.add_argument("cols", type=int, nargs="?", default=9, help="Number of cells horizontally")
    parser.add_argument("rows", type=int, nargs="?", default=5, help="Number of cells vertically")
    parser.add_argument("--cell-size", type=int, default=32, help="Path width in pixels")
    parser.add_argument("--wall-thickness", type=int, default=3, help="Wall thickness in pixels")
    parser.add_argument("--seed1", type=int, default=0)
    parser.add_argument("--seed2", type=int, default=1)
    parser.add_argument("--output", type=Path, default=Path("maze.png"), help="Where to save the image")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    from .render import write_png

    args = _parse_args(argv)
    try:
        generator = MazeGenerator(args.cols, args.rows, args.cell_size, args.wall_thickness)
        grid = generator.generate(args.seed1, args.seed2)
    except ValueError as exc:
        raise SystemExit(f"error: {exc}") from exc
    output_path = write_png(grid, args.output)
    width, height = generator.size()
    print(f"Wrote {width}x{height} maze to {output_path}")


if __name__ == "__main__":
    main()
