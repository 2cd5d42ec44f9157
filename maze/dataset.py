"""Batch generation of seeded maze images with JSON metadata."""

from __future__ import annotations

import json
import random
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .generator import SEED_LIMIT, MazeGenerator
from .render import PATH_COLOR, WALL_COLOR, Color, PathLike, write_png


@dataclass
class MazeRecord:
    id: str
    seed: Tuple[int, int]
    grid_size: Tuple[int, int]
    cell_size: int
    wall_thickness: int
    image_size: Tuple[int, int]
    image_path: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "seed": list(self.seed),
            "grid_size": list(self.grid_size),
            "cell_size": self.cell_size,
            "wall_thickness": self.wall_thickness,
            "image_size": list(self.image_size),
            "image_path": self.image_path,
        }


class MazeDatasetGenerator:
    """Write perfect maze PNGs, one per seed pair, under ``output_dir/mazes``.

    All mazes of a dataset share one configuration; only the seed pair varies.
    Seed pairs for :meth:`create_random_maze` come from a master
    ``random.Random`` so a dataset can be rebuilt from its master seed.
    """

    def __init__(
        self,
        output_dir: PathLike = "data/maze",
        *,
        cols: int = 9,
        rows: int = 5,
        cell_size: int = 32,
        wall_thickness: int = 3,
        wall_color: Color = WALL_COLOR,
        path_color: Color = PATH_COLOR,
        seed: Optional[int] = None,
    ) -> None:
        # Validate before touching the filesystem.
        self._maze = MazeGenerator(cols, rows, cell_size, wall_thickness)
        self.wall_color = wall_color
        self.path_color = path_color
        self._rng = random.Random(seed)

        self.output_dir = Path(output_dir)
        self.maze_dir = self.output_dir / "mazes"
        self.maze_dir.mkdir(parents=True, exist_ok=True)

    def create_maze(self, seed1: int, seed2: int, *, maze_id: Optional[str] = None) -> MazeRecord:
        maze_uuid = maze_id or str(uuid.uuid4())
        grid = self._maze.generate(seed1, seed2)
        image_path = write_png(
            grid,
            self.maze_dir / f"{maze_uuid}.png",
            wall_color=self.wall_color,
            path_color=self.path_color,
        )
        return MazeRecord(
            id=maze_uuid,
            seed=(int(seed1), int(seed2)),
            grid_size=(self._maze.rows, self._maze.cols),
            cell_size=self._maze.cell_size,
            wall_thickness=self._maze.wall_thickness,
            image_size=tuple(self._maze.size()),
            image_path=self._relative_image_path(image_path),
        )

    def create_random_maze(self) -> MazeRecord:
        seed1 = self._rng.randrange(SEED_LIMIT)
        seed2 = self._rng.randrange(SEED_LIMIT)
        return self.create_maze(seed1, seed2)

    def generate_dataset(
        self,
        count: int,
        *,
        metadata_path: Optional[PathLike] = None,
        append: bool = True,
    ) -> List[MazeRecord]:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        records = [self.create_random_maze() for _ in range(count)]
        if metadata_path is not None:
            self.write_metadata(records, metadata_path, append=append)
        return records

    def write_metadata(
        self,
        records: Iterable[MazeRecord],
        metadata_path: PathLike,
        *,
        append: bool = True,
    ) -> Path:
        """Write records as a JSON list, after any records already in the file."""

        path = Path(metadata_path)
        existing: List[Dict[str, Any]] = []
        if append and path.exists():
            existing = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(existing, list):
                raise ValueError(f"Maze metadata must be a list of records: {path}")
        payload = []
        for record in records:
            if not isinstance(record, MazeRecord):
                raise TypeError(f"Expected MazeRecord, got {type(record).__name__}")
            payload.append(record.to_dict())
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(existing + payload, indent=2), encoding="utf-8")
        return path

    def _relative_image_path(self, path: Path) -> str:
        # Image paths in metadata are relative to the output directory.
        try:
            return path.relative_to(self.output_dir).as_posix()
        except ValueError:
            return path.as_posix()


__all__ = ["MazeDatasetGenerator", "MazeRecord"]
