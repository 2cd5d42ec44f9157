"""Perfect maze generation and rendering toolkit."""

__all__ = [
    "MazeGenerator",
    "MazeSize",
    "InvalidDimensionError",
    "MazeDatasetGenerator",
    "MazeRecord",
    "RectMazeGenerator",
    "render_grid",
    "write_png",
    "WALL",
    "PATH",
]

from .generator import MazeGenerator, MazeSize, InvalidDimensionError, WALL, PATH
from .render import render_grid, write_png
from .dataset import MazeDatasetGenerator, MazeRecord
from .rect import RectMazeGenerator
