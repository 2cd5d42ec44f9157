"""Render occupancy grids to images."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Tuple, Union

import numpy as np
from PIL import Image

from .generator import WALL

Color = Tuple[int, int, int]
PathLike = Union[str, Path]

WALL_COLOR: Color = (0, 0, 255)
PATH_COLOR: Color = (30, 30, 30)


def render_grid(
    grid: Union[np.ndarray, Sequence[Sequence[int]]],
    *,
    wall_color: Color = WALL_COLOR,
    path_color: Color = PATH_COLOR,
) -> Image.Image:
    """Map wall pixels to ``wall_color`` and everything else to ``path_color``."""

    arr = np.asarray(grid)
    if arr.ndim != 2 or arr.size == 0:
        raise ValueError(f"Expected a non-empty 2D grid, got shape {arr.shape}")
    palette = np.array([path_color, wall_color], dtype=np.uint8)
    pixels = palette[(arr == WALL).astype(np.intp)]
    return Image.fromarray(pixels)


def write_png(
    grid: Union[np.ndarray, Sequence[Sequence[int]]],
    path: PathLike,
    *,
    wall_color: Color = WALL_COLOR,
    path_color: Color = PATH_COLOR,
) -> Path:
    """Render ``grid`` and save it as a PNG file, returning the written path."""

    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image = render_grid(grid, wall_color=wall_color, path_color=path_color)
    image.save(output_path, format="PNG")
    return output_path


__all__ = ["render_grid", "write_png", "WALL_COLOR", "PATH_COLOR"]
