import importlib.util
import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from PIL import Image

from maze import generator as maze_cli
from maze.rect import generator as rect_cli

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "generate_maze_dataset.py"


def _load_script(path: Path):
    spec = importlib.util.spec_from_file_location(path.stem, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


dataset_cli = _load_script(SCRIPT_PATH)


class CommandLineTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def test_maze_cli_writes_png(self) -> None:
        output = self.root / "maze1.png"
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            maze_cli.main(["9", "5", "--cell-size", "8", "--wall-thickness", "3", "--output", str(output)])

        with Image.open(output) as image:
            self.assertEqual(image.size, (9 * 8 + 10 * 3, 5 * 8 + 6 * 3))
        self.assertIn(str(output), buffer.getvalue())

    def test_maze_cli_rejects_invalid_dimensions(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            maze_cli.main(["0", "5", "--output", str(self.root / "bad.png")])
        self.assertIn("cols", str(ctx.exception.code))
        self.assertFalse((self.root / "bad.png").exists())

    def test_rect_cli_writes_png(self) -> None:
        output = self.root / "rect.png"
        with redirect_stdout(io.StringIO()):
            rect_cli.main(["--seed", "1", "--output", str(output)])
        with Image.open(output) as image:
            self.assertEqual(image.size, (7 * 64 + 9, 5 * 64 + 9))

    def test_dataset_script_reports_progress_and_writes_metadata(self) -> None:
        output_dir = self.root / "dataset"
        argv = [
            "3",
            "--output-dir", str(output_dir),
            "--cols", "4",
            "--rows", "3",
            "--cell-size", "4",
            "--wall-thickness", "1",
            "--seed", "7",
        ]
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            dataset_cli.main(argv)

        lines = buffer.getvalue().splitlines()
        metadata_path = output_dir / "mazes.json"
        self.assertEqual(len(lines), 4)
        for index, line in enumerate(lines[:3], start=1):
            self.assertTrue(line.startswith(f"[{index}/3] generated "))
        self.assertEqual(lines[-1], f"Wrote 3 mazes to {metadata_path}")

        payload = json.loads(metadata_path.read_text(encoding="utf-8"))
        self.assertEqual(len(payload), 3)
        for item in payload:
            self.assertTrue((output_dir / item["image_path"]).exists())

        with redirect_stdout(io.StringIO()):
            dataset_cli.main(argv + ["--seed", "8"])
        self.assertEqual(len(json.loads(metadata_path.read_text(encoding="utf-8"))), 6)

        with redirect_stdout(io.StringIO()):
            dataset_cli.main(["2"] + argv[1:] + ["--overwrite"])
        self.assertEqual(len(json.loads(metadata_path.read_text(encoding="utf-8"))), 2)

    def test_dataset_script_honours_metadata_path(self) -> None:
        metadata_path = self.root / "meta" / "custom.json"
        with redirect_stdout(io.StringIO()):
            dataset_cli.main([
                "1",
                "--output-dir", str(self.root / "dataset"),
                "--metadata", str(metadata_path),
                "--cols", "2",
                "--rows", "2",
            ])
        self.assertEqual(len(json.loads(metadata_path.read_text(encoding="utf-8"))), 1)
        self.assertFalse((self.root / "dataset" / "mazes.json").exists())

    def test_dataset_script_rejects_bad_arguments(self) -> None:
        output_dir = self.root / "rejected"
        with self.assertRaises(SystemExit) as ctx:
            dataset_cli.main(["2", "--output-dir", str(output_dir), "--cell-size", "0"])
        self.assertIn("cell_size", str(ctx.exception.code))
        self.assertFalse(output_dir.exists())

        with self.assertRaises(SystemExit) as ctx:
            dataset_cli.main(["-1", "--output-dir", str(output_dir)])
        self.assertIn("count", str(ctx.exception.code))
        self.assertFalse(output_dir.exists())


if __name__ == "__main__":
    unittest.main()
