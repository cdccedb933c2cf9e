# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Command-line entry point: run the Canny detector on an image file."""

import argparse
import logging
import sys
import time
from typing import List, Optional

from .border import BorderType
from .canny import canny_stages, edge_ratio
from .config import PRESETS, border_from_name, load_config
from .errors import CannyEdgeError
from .io import read_image, write_image
from .shapes import SHAPES
from .utils import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cannyedge", description="Canny edge detection on an image file")
    parser.add_argument("input", nargs="?", help="input image (omit with --demo)")
    parser.add_argument("output", help="where to write the edge map")
    parser.add_argument("--high", type=float, default=None,
                        help="strong-edge threshold as a fraction of the peak gradient")
    parser.add_argument("--low", type=float, default=None,
                        help="weak-edge threshold as a fraction of the peak gradient")
    parser.add_argument("--border", choices=[b.value for b in BorderType], default=None)
    parser.add_argument("--no-smooth", action="store_true",
                        help="skip the 5x5 Gaussian before differentiating")
    parser.add_argument("--preset", choices=sorted(PRESETS), default="default")
    parser.add_argument("--config", default=None, help="JSON file overriding the preset")
    parser.add_argument("--demo", choices=sorted(SHAPES), default=None,
                        help="use a synthetic image instead of INPUT")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.input is None and args.demo is None:
        parser.error("INPUT is required unless --demo is given")

    logger = setup_logger("cannyedge", getattr(logging, args.log_level))

    try:
        cfg = load_config(args.config, args.preset)
        if args.high is not None:
            cfg["high_ratio"] = args.high
        if args.low is not None:
            cfg["low_ratio"] = args.low
        if args.border is not None:
            cfg["border"] = args.border
        if args.no_smooth:
            cfg["smooth"] = False
        border = border_from_name(cfg["border"])

        if args.demo is not None:
            image = SHAPES[args.demo]()
            source = f"demo:{args.demo}"
        else:
            image = read_image(args.input)
            source = args.input
        logger.info("%s: %dx%d, %d channel(s)", source, image.rows, image.cols, image.channels)

        t0 = time.time()
        stages = canny_stages(image, float(cfg["high_ratio"]), float(cfg["low_ratio"]),
                              border, bool(cfg["smooth"]))
        dt = time.time() - t0
        logger.info("thresholds low=%.4g high=%.4g, %.2f%% edge pixels, %.3fs",
                    stages.low, stages.high, 100.0 * edge_ratio(stages.edges), dt)

        write_image(stages.edges, args.output)
        logger.info("edge map saved -> %s", args.output)
    except (CannyEdgeError, OSError, KeyError, ValueError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
