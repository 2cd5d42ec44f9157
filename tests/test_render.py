import tempfile
import unittest
from pathlib import Path

import numpy as np
from PIL import Image

from maze import MazeGenerator, render_grid, write_png
from maze.render import PATH_COLOR, WALL_COLOR


class RenderTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def test_colors_follow_occupancy(self) -> None:
        grid = [[1, 0, 1], [0, 0, 1]]
        image = render_grid(grid)
        self.assertEqual(image.mode, "RGB")
        self.assertEqual(image.size, (3, 2))
        self.assertEqual(image.getpixel((0, 0)), WALL_COLOR)
        self.assertEqual(image.getpixel((1, 0)), PATH_COLOR)
        self.assertEqual(image.getpixel((2, 1)), WALL_COLOR)
        self.assertEqual(image.getpixel((0, 1)), PATH_COLOR)

    def test_custom_colors(self) -> None:
        image = render_grid(np.array([[0, 1]], dtype=np.int64), wall_color=(0, 0, 0), path_color=(255, 255, 255))
        self.assertEqual(image.getpixel((0, 0)), (255, 255, 255))
        self.assertEqual(image.getpixel((1, 0)), (0, 0, 0))

    def test_empty_grid_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            render_grid([])
        with self.assertRaises(ValueError):
            render_grid(np.zeros((2, 2, 2), dtype=np.uint8))

    def test_write_png_round_trips_generated_maze(self) -> None:
        generator = MazeGenerator(9, 5, 8, 3)
        grid = generator.generate(0, 1)
        output_path = Path(self.tmp.name) / "nested" / "maze.png"

        written = write_png(grid, output_path)

        self.assertEqual(written, output_path)
        with Image.open(output_path) as image:
            self.assertEqual(image.format, "PNG")
            self.assertEqual(image.size, tuple(generator.size()))
            pixels = np.asarray(image.convert("RGB"))
        walls = np.all(pixels == np.array(WALL_COLOR, dtype=np.uint8), axis=2)
        np.testing.assert_array_equal(walls, grid == 1)


if __name__ == "__main__":
    unittest.main()
