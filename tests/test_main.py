"""
Tests for the command line entry point.
"""

import numpy as np
import pytest
from PIL import Image

from errors import UsageError
from main import build_parser, encode_grid, main
from quad_tree import parse_encoding, serialize
from utils.grid import Grid


@pytest.fixture
def black_png(tmp_path):
    path = tmp_path / "black.png"
    Image.new("L", (128, 128), color=0).save(path)
    return str(path)


@pytest.fixture
def halves_png(tmp_path):
    samples = np.zeros((64, 64), dtype=np.uint8)
    samples[:, 32:] = 200
    path = tmp_path / "halves.png"
    Image.fromarray(samples).save(path)
    return str(path)


@pytest.fixture
def checkerboard_png(tmp_path):
    ys, xs = np.indices((64, 64))
    path = tmp_path / "checkerboard.png"
    Image.fromarray((((xs + ys) % 2) * 255).astype(np.uint8)).save(path)
    return str(path)


class TestMain:
    def test_uniform_image(self, black_png, capsys):
        assert main([black_png]) == 0
        assert capsys.readouterr().out == ".\n"

    def test_cell_size_argument(self, halves_png, capsys):
        assert main([halves_png, "32"]) == 0
        assert capsys.readouterr().out == "(.#.#)\n"

    def test_default_cell_size(self, halves_png, capsys):
        # 64x64 with cells of 64 pixels is a single leaf, sampled at (0, 0)
        assert main([halves_png]) == 0
        assert capsys.readouterr().out == ".\n"

    def test_seeded_runs_are_reproducible(self, tmp_path, capsys):
        rng = np.random.default_rng(7)
        samples = np.kron(rng.integers(0, 256, (4, 4)), np.ones((8, 8))).astype(np.uint8)
        path = tmp_path / "blocks.png"
        Image.fromarray(samples).save(path)

        assert main([str(path), "4", "--seed", "3"]) == 0
        first = capsys.readouterr().out
        assert main([str(path), "4", "--seed", "3"]) == 0
        assert capsys.readouterr().out == first
        assert serialize(parse_encoding(first)) == first.strip()

    @pytest.mark.parametrize(
        "argv",
        [
            [],
            ["a.png", "8", "extra"],
            ["a.png", "eight"],
            ["a.png", "0"],
            ["a.png", "-4"],
            ["a.png", "--seed", "x"],
        ],
    )
    def test_usage_errors(self, argv, capsys):
        assert main(argv) == 1
        assert capsys.readouterr().out == ""

    def test_missing_image(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.png")]) == 1
        assert capsys.readouterr().out == ""

    def test_budget_unreachable(self, checkerboard_png, capsys, caplog):
        assert main([checkerboard_png, "1", "--seed", "0"]) == 1
        assert capsys.readouterr().out == ""
        assert "too complex" in caplog.text


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args(["image.png"])
        assert args.filename == "image.png"
        assert args.minimum_cell_size == 64
        assert args.seed is None
        assert not args.debug

    def test_explicit_values(self):
        args = build_parser().parse_args(["image.png", "16", "--seed", "9", "--debug"])
        assert args.minimum_cell_size == 16
        assert args.seed == 9
        assert args.debug


def test_encode_grid_pads_before_building():
    grid = Grid.from_rows([[255] * 3] * 3)
    # 3x3 becomes 4x4: the white source fills it entirely
    assert encode_grid(grid, minimum_cell_size=1) == "#"


@pytest.mark.parametrize("cell", [0, -1, 1.5])
def test_encode_grid_rejects_bad_cell_size(cell):
    with pytest.raises(UsageError):
        encode_grid(Grid.from_rows([[0, 0], [0, 0]]), minimum_cell_size=cell)
