# -*- coding: utf-8 -*-
"""Tests for the cannyedge tooling: config, metrics, shapes, image I/O and CLI."""

import json
import sys
from pathlib import Path

# Allow imports from src/
_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(_ROOT / "src"))

import numpy as np
import pytest

from cannyedge.array import Dense2DArray
from cannyedge.border import BorderType
from cannyedge.cli import main
from cannyedge.config import PRESETS, border_from_name, load_config
from cannyedge.io import read_image, write_image
from cannyedge.metrics import edge_metrics_symmetric, gt_edges_from_binary
from cannyedge.shapes import SHAPES, make_circle, make_rgb, make_step


# ============================================================
# config.py
# ============================================================

class TestConfig:
    def test_default_preset(self):
        cfg = load_config()
        assert cfg == PRESETS["default"]
        assert cfg is not PRESETS["default"]

    def test_json_override(self, tmp_path):
        path = tmp_path / "local.json"
        path.write_text(json.dumps({"high_ratio": 0.9, "extra": {"a": 1}}), encoding="utf-8")
        cfg = load_config(path, preset="strict")
        assert cfg["high_ratio"] == 0.9
        assert cfg["low_ratio"] == PRESETS["strict"]["low_ratio"]
        assert cfg["extra"] == {"a": 1}
        assert PRESETS["strict"]["high_ratio"] == 0.7

    def test_unknown_preset(self):
        with pytest.raises(KeyError):
            load_config(preset="nope")

    def test_border_names(self):
        assert border_from_name("reflect") is BorderType.REFLECT
        assert border_from_name("ZERO") is BorderType.ZERO
        assert border_from_name(BorderType.REPLICATE) is BorderType.REPLICATE
        with pytest.raises(ValueError):
            border_from_name("wrap")


# ============================================================
# metrics.py
# ============================================================

class TestMetrics:
    def test_perfect_match(self):
        pred = np.zeros((16, 16), dtype=bool)
        pred[8, 2:14] = True
        m = edge_metrics_symmetric(pred, pred.copy(), tol_px=1)
        assert m["f1"] == pytest.approx(1.0)

    def test_offset_within_tolerance(self):
        gt = np.zeros((16, 16), dtype=bool)
        gt[8, 2:14] = True
        pred = np.roll(gt, 1, axis=0)
        assert edge_metrics_symmetric(pred, gt, tol_px=1)["f1"] == pytest.approx(1.0)
        assert edge_metrics_symmetric(pred, gt, tol_px=0)["f1"] == 0.0

    def test_empty_cases(self):
        empty = np.zeros((8, 8), dtype=bool)
        full = np.ones((8, 8), dtype=bool)
        assert edge_metrics_symmetric(empty, empty)["f1"] == 1.0
        assert edge_metrics_symmetric(empty, full)["FN"] == 64
        assert edge_metrics_symmetric(full, empty)["FP"] == 64

    def test_accepts_edge_maps(self):
        e = Dense2DArray.filled(4, 4)
        e.set(1, 1, 1.0)
        assert edge_metrics_symmetric(e, e)["TP"] == 1

    def test_gt_boundary(self):
        gt = gt_edges_from_binary(make_step(4, 6, 0.0, 1.0, split=3))
        assert gt[:, 3].all()
        assert gt.sum() == 4

    def test_gt_uniform(self):
        assert not gt_edges_from_binary(Dense2DArray.filled(5, 5, value=1.0)).any()


# ============================================================
# shapes.py
# ============================================================

class TestShapes:
    @pytest.mark.parametrize("name", sorted(SHAPES))
    def test_registry(self, name):
        img = SHAPES[name]()
        assert img.channels == 1
        assert img.buffer.min() >= 0.0 and img.buffer.max() <= 1.0

    def test_step_default_split(self):
        img = make_step()
        assert img.plane()[0].tolist() == [0.0, 0.0, 100.0, 100.0, 100.0]

    def test_circle_symmetric(self):
        p = make_circle(21).plane()
        np.testing.assert_array_equal(p, p.T)
        np.testing.assert_array_equal(p, p[::-1, :])

    def test_make_rgb(self):
        rgb = make_rgb(make_step())
        assert rgb.channels == 3
        np.testing.assert_array_equal(rgb.plane(0), rgb.plane(2))


# ============================================================
# io.py
# ============================================================

class TestImageIO:
    def test_gray_round_trip(self, tmp_path):
        img = make_circle(16)
        path = tmp_path / "circle.png"
        write_image(img, path)
        back = read_image(path, gray=True)
        assert back.shape == (16, 16, 1)
        np.testing.assert_array_equal(back.plane(), img.plane())

    def test_rgb_channel_order(self, tmp_path):
        data = np.zeros((2, 2, 3))
        data[:, :, 0] = 1.0
        path = tmp_path / "red.png"
        write_image(Dense2DArray.from_numpy(data), path)
        back = read_image(path)
        assert back.get(0, 0, 0) == 1.0
        assert back.get(0, 0, 2) == 0.0

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "sub" / "edges.xyz"
        with pytest.raises(OSError):
            write_image(make_step(), path)
        assert not path.parent.exists()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_image(tmp_path / "missing.png")


# ============================================================
# cli.py
# ============================================================

class TestCLI:
    def test_demo(self, tmp_path):
        out = tmp_path / "edges.png"
        assert main(["--demo", "square", str(out)]) == 0
        edges = read_image(out, gray=True)
        assert set(np.unique(edges.buffer)).issubset({0.0, 1.0})
        assert edges.buffer.sum() > 0

    def test_file_input(self, tmp_path):
        src = tmp_path / "in.png"
        write_image(make_rgb(make_circle(24)), src)
        out = tmp_path / "out" / "edges.png"
        assert main([str(src), str(out), "--border", "replicate", "--high", "0.4",
                     "--low", "0.1"]) == 0
        assert out.exists()

    def test_invalid_ratios_exit_code(self, tmp_path):
        out = tmp_path / "edges.png"
        assert main(["--demo", "step", str(out), "--high", "0.1", "--low", "0.5"]) == 1
        assert not out.exists()

    def test_unsupported_output_exit_code(self, tmp_path):
        out = tmp_path / "edges.xyz"
        assert main(["--demo", "square", str(out)]) == 1
        assert not out.exists()

    def test_missing_input_exit_code(self, tmp_path):
        assert main([str(tmp_path / "nope.png"), str(tmp_path / "o.png")]) == 1

    def test_requires_input_or_demo(self, tmp_path):
        with pytest.raises(SystemExit):
            main([str(tmp_path / "o.png")])
