"""Rectangle-wall maze generation."""

__all__ = [
    "RectMazeGenerator",
    "Cell",
    "Direction",
    "Rect",
    "clip_rectangle",
    "fill_rectangle",
    "draw_walls_to_image",
]

from .generator import (
    RectMazeGenerator,
    Cell,
    Direction,
    Rect,
    clip_rectangle,
    fill_rectangle,
    draw_walls_to_image,
)
