#!/usr/bin/env python3
# Render seeded mazes to PNGs using Pillow.

import argparse
import os

from mazerun.mapgen.generator import generate_seeded
from mazerun.render.snapshot import save_maze_png


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, required=True, help="First seed")
    ap.add_argument("--count", type=int, default=1, help="How many consecutive seeds to render")
    ap.add_argument("--width", type=int, default=15)
    ap.add_argument("--height", type=int, default=10)
    ap.add_argument("--cell", type=int, default=50, help="Cell size in pixels")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    args = ap.parse_args()

    if args.width < 1 or args.height < 1 or args.cell <= 0:
        raise SystemExit("width, height and cell must be positive")

    for seed in range(args.seed, args.seed + args.count):
        grid = generate_seeded(args.width, args.height, args.cell, seed)
        save_maze_png(grid, os.path.join(args.outdir, f"maze_{seed}.png"))
    print(f"Wrote {args.count} PNG(s) to {args.outdir}")


if __name__ == "__main__":
    main()
