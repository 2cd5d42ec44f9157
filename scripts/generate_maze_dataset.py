#!/usr/bin/env python3
"""Generate a batch of seeded perfect mazes and write their metadata."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from maze import InvalidDimensionError, MazeDatasetGenerator


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("count", type=int, help="Number of mazes to generate")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("data/maze"),
        help="Directory to write maze images",
    )
    parser.add_argument(
        "--metadata",
        type=Path,
        default=None,
        help="Optional path for the metadata JSON (defaults to <output-dir>/mazes.json)",
    )
    parser.add_argument("--cols", type=int, default=9)
    parser.add_argument("--rows", type=int, default=5)
    parser.add_argument("--cell-size", type=int, default=32)
    parser.add_argument("--wall-thickness", type=int, default=3)
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Optional master seed used to draw the per-maze seed pairs",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace existing metadata instead of appending to it",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    if args.count < 0:
        raise SystemExit(f"error: count must be non-negative, got {args.count}")
    try:
        generator = MazeDatasetGenerator(
            output_dir=args.output_dir,
            cols=args.cols,
            rows=args.rows,
            cell_size=args.cell_size,
            wall_thickness=args.wall_thickness,
            seed=args.seed,
        )
    except InvalidDimensionError as exc:
        raise SystemExit(f"error: {exc}") from exc

    metadata_path = args.metadata or (generator.output_dir / "mazes.json")

    records = []
    for index in range(1, args.count + 1):
        record = generator.create_random_maze()
        records.append(record)
        seed1, seed2 = record.seed
        print(f"[{index}/{args.count}] generated {record.id} (seed={seed1},{seed2})")

    generator.write_metadata(records, metadata_path, append=not args.overwrite)
    print(f"Wrote {len(records)} mazes to {metadata_path}")


if __name__ == "__main__":
    main()
