#!/usr/bin/env python3
import argparse, os
from mazerun.mapgen.generator import generate_seeded

def write_text(lines, path):
    with open(path, 'w', encoding='utf-8') as f:
        f.write("\n".join(lines) + "\n")

def checked_grid(width, height, seed):
    grid = generate_seeded(width, height, 1, seed)
    if not grid.boundary_intact():
        raise ValueError(f"seed {seed}: outer wall was carved")
    return grid

def cmd_emit(args):
    grid = checked_grid(args.width, args.height, args.seed)
    lines = grid.as_text()
    if args.out:
        write_text(lines, args.out)
        print(f"Wrote {args.out}")
    else:
        print("\n".join(lines))

def cmd_golden(args):
    os.makedirs(args.outdir, exist_ok=True)
    for seed in range(args.first, args.first + args.count):
        grid = checked_grid(args.width, args.height, seed)
        write_text(grid.as_text(), os.path.join(args.outdir, f"{seed:04d}.txt"))
    print(f"Wrote golden pack to {args.outdir}")

def main():
    p = argparse.ArgumentParser()
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--seed', type=int, required=True)
    p1.add_argument('--width', type=int, default=15)
    p1.add_argument('--height', type=int, default=10)
    p1.add_argument('--out', type=str, default=None)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('golden')
    p2.add_argument('--first', type=int, default=1)
    p2.add_argument('--count', type=int, default=10)
    p2.add_argument('--width', type=int, default=15)
    p2.add_argument('--height', type=int, default=10)
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_golden)
    args = p.parse_args()
    try:
        args.func(args)
    except ValueError as e:
        raise SystemExit(str(e))

if __name__ == '__main__':
    main()
