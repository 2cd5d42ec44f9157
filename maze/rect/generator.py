"""Maze generator that emits walls as pixel rectangles."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from PIL import Image, ImageDraw

from ..generator import MazeSize, validate_dimensions

Rect = Tuple[int, int, int, int]
Color = Tuple[int, int, int]


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}

# (dx, dy) per direction, in the order neighbors are collected.
NEIGHBOR_OFFSETS = (
    (0, -1, Direction.NORTH),
    (1, 0, Direction.EAST),
    (0, 1, Direction.SOUTH),
    (-1, 0, Direction.WEST),
)


@dataclass
class Cell:
    x: int
    y: int
    visited: bool = False
    walls: List[bool] = field(default_factory=lambda: [True, True, True, True])


class RectMazeGenerator:
    """Depth-first maze over logical cells whose walls become rectangles."""

    def __init__(
        self,
        width: int,
        height: int,
        cell_size: int,
        wall_thickness: int,
        *,
        seed: Optional[int] = None,
    ) -> None:
        validate_dimensions(width, height, cell_size, wall_thickness, names=("width", "height"))
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.wall_thickness = wall_thickness
        self.grid = [[Cell(x, y) for x in range(width)] for y in range(height)]
        self._rng = random.Random(seed)

    def size(self) -> MazeSize:
        return MazeSize(
            self.width * self.cell_size + self.wall_thickness,
            self.height * self.cell_size + self.wall_thickness,
        )

    def generate_maze(self) -> List[Rect]:
        start = self.grid[0][0]
        start.visited = True
        stack = [start]
        while stack:
            current = stack[-1]
            neighbors = self._unvisited_neighbors(current)
            if neighbors:
                following, direction = neighbors[self._rng.randrange(len(neighbors))]
                current.walls[direction] = False
                following.walls[OPPOSITE[direction]] = False
                following.visited = True
                stack.append(following)
            else:
                stack.pop()
        return self.wall_rectangles()

    def _unvisited_neighbors(self, cell: Cell) -> List[Tuple[Cell, Direction]]:
        neighbors = []
        for dx, dy, direction in NEIGHBOR_OFFSETS:
            nx, ny = cell.x + dx, cell.y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height and not self.grid[ny][nx].visited:
                neighbors.append((self.grid[ny][nx], direction))
        return neighbors

    def wall_rectangles(self) -> List[Rect]:
        """Convert the remaining walls to ``(x0, y0, x1, y1)`` half-open boxes."""

        cs, wt = self.cell_size, self.wall_thickness
        walls: List[Rect] = []
        for row in self.grid:
            for cell in row:
                cx, cy = cell.x * cs, cell.y * cs
                # Horizontal walls span the corners on the right.
                if cell.walls[Direction.NORTH]:
                    walls.append((cx, cy, cx + cs + wt, cy + wt))
                if cell.walls[Direction.EAST]:
                    walls.append((cx + cs, cy, cx + cs + wt, cy + cs + wt))
                if cell.walls[Direction.SOUTH]:
                    walls.append((cx, cy + cs, cx + cs + wt, cy + cs + wt))
                if cell.walls[Direction.WEST]:
                    walls.append((cx, cy, cx + wt, cy + cs + wt))
        return walls


def clip_rectangle(rect: Rect, bounds: Tuple[int, int]) -> Optional[Rect]:
    """Intersect ``rect`` with an image of ``(width, height)``; ``None`` if empty."""

    width, height = bounds
    x0, y0, x1, y1 = rect
    x0, y0 = max(x0, 0), max(y0, 0)
    x1, y1 = min(x1, width), min(y1, height)
    if x0 >= x1 or y0 >= y1:
        return None
    return x0, y0, x1, y1


def fill_rectangle(image: Image.Image, rect: Rect, color: Color) -> None:
    clipped = clip_rectangle(rect, image.size)
    if clipped is None:
        return
    x0, y0, x1, y1 = clipped
    # ImageDraw rectangles include their bottom-right corner.
    ImageDraw.Draw(image).rectangle((x0, y0, x1 - 1, y1 - 1), fill=color)


def draw_walls_to_image(
    walls: Iterable[Rect],
    image: Image.Image,
    color: Color = (255, 255, 255),
) -> None:
    for wall in walls:
        fill_rectangle(image, wall, color)


__all__ = [
    "RectMazeGenerator",
    "Cell",
    "Direction",
    "Rect",
    "clip_rectangle",
    "fill_rectangle",
    "draw_walls_to_image",
]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a maze drawn from wall rectangles")
    parser.add_argument("width", type=int, nargs="?", default=7, help="Number of cells horizontally")
    parser.add_argument("height", type=int, nargs="?", default=5, help="Number of cells vertically")
    parser.add_argument("--cell-size", type=int, default=64)
    parser.add_argument("--wall-thickness", type=int, default=9)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", type=Path, default=Path("rect.png"), help="Where to save the image")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    try:
        generator = RectMazeGenerator(
            args.width,
            args.height,
            args.cell_size,
            args.wall_thickness,
            seed=args.seed,
        )
    except ValueError as exc:
        raise SystemExit(f"error: {exc}") from exc
    walls = generator.generate_maze()
    image = Image.new("RGB", generator.size(), (0, 0, 0))
    draw_walls_to_image(walls, image)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    image.save(args.output)
    print(f"Wrote {len(walls)} walls ({image.width}x{image.height}) to {args.output}")


if __name__ == "__main__":
    main()
