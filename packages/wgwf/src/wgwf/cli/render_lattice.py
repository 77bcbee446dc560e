from __future__ import annotations
import argparse, io, logging, sys
from pathlib import Path

import numpy as np

from .common import setup_logging
from ..api import atomic_write, chunk_name
from wgcore.errors import WorldgenError
from wgviz import lattice_image
from wgworld import WorldConfig, default_world

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="worldgen - render a lattice chunk (PNG and/or ASCII world)")
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--width", type=int, default=80)
    p.add_argument("--height", type=int, default=50)
    p.add_argument("--chunk", type=int, nargs=2, default=(0, 0), metavar=("CX", "CY"))
    p.add_argument("--png", default=None,
                   help="PNG output file, or a directory (file named after seed/chunk/size)")
    p.add_argument("--scale", type=int, default=4, help="pixels per lattice cell in the PNG")
    p.add_argument("--ascii", action="store_true", help="print the default tile world to stdout")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)

def _png_path(arg: str, cfg: WorldConfig, cx: int, cy: int) -> Path:
    out = Path(arg)
    if out.suffix.lower() != ".png":
        out = out / chunk_name(cfg.seed, cx, cy, cfg.width, cfg.height)
    return out

def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)

    try:
        cfg = WorldConfig(width=args.width, height=args.height, seed=args.seed)
    except ValueError as e:
        logging.error("Invalid configuration: %s", e)
        return 2
    if args.scale < 1:
        logging.error("--scale must be >= 1")
        return 2
    cx, cy = args.chunk
    world = default_world(cfg)

    try:
        if args.png:
            xs, ys = world.coords(cx, cy)
            values = np.broadcast_to(world.source.sample(xs, ys), (cfg.height, cfg.width))
            buf = io.BytesIO()
            lattice_image(values, scale=args.scale).save(buf, format="PNG")
            out = _png_path(args.png, cfg, cx, cy)
            atomic_write(out, buf.getvalue())
            logging.info("PNG: %s (min=%.4f max=%.4f mean=%.4f)",
                         out, float(values.min()), float(values.max()), float(values.mean()))
        if args.ascii or not args.png:
            sys.stdout.write(world.render_ascii(cx, cy) + "\n")
    except WorldgenError:
        logging.exception("Chunk (%d, %d) failed", cx, cy)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
