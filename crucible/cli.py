# crucible/cli.py
from __future__ import annotations
import argparse, csv, os, os.path
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .types import Coord
from .grid import Grid
from .search import ConfigurationError, RunLimits, SearchResult, VARIANTS, search
from .viz import draw_grid_png

@dataclass
class RunStats:
    name: str
    limits: RunLimits
    result: SearchResult

def format_stats(s: RunStats) -> str:
    r = s.result
    cost = str(r.cost) if r.reached else "unreachable"
    return (f"{s.name:12s} | runs={s.limits.min_run:2d}..{s.limits.max_run:<3d} | "
            f"cost={cost:>11s} | pops={r.pops:7d} | expanded={len(r.expanded):6d} | "
            f"time={r.elapsed_sec*1000:7.1f} ms")

def parse_coord(text: str) -> Coord:
    try:
        r, c = (int(v) for v in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ROW,COL, got {text!r}")
    return (r, c)

def run_variants(grid: Grid,
                 variants: Sequence[Tuple[str, RunLimits]],
                 start: Optional[Coord] = None,
                 goal: Optional[Coord] = None,
                 out_dir: str | None = None,
                 base_tag: str = "run") -> List[RunStats]:
    start = grid.start if start is None else start
    goal = grid.goal if goal is None else goal
    results: List[RunStats] = []
    for name, limits in variants:
        res = search(grid, start, goal, limits.min_run, limits.max_run)
        results.append(RunStats(name, limits, res))
        if out_dir:
            draw_grid_png(grid, res.expanded, os.path.join(out_dir, f"{base_tag}_{name}.png"),
                          start=start, goal=goal)
    return results

BENCH_FIELDS = ["grid", "variant", "min_run", "max_run", "reached", "cost", "pops", "expanded", "time_sec"]

# -------- subcommands --------

def cmd_gen(args: argparse.Namespace) -> None:
    os.makedirs(args.out, exist_ok=True)
    for i in range(args.count):
        grid = Grid.random(rows=args.rows, cols=args.cols, p_blocked=args.p,
                           seed=(args.seed + i) if args.seed is not None else None)
        path = os.path.join(args.out, f"grid_{i:03d}.txt")
        grid.save(path)
        print("wrote", path)

def cmd_solve(args: argparse.Namespace) -> None:
    grid = Grid.load(args.grid)
    if args.min_run is not None or args.max_run is not None:
        if args.min_run is None or args.max_run is None:
            raise ConfigurationError("--min-run and --max-run must be given together")
        variants = [("custom", RunLimits(args.min_run, args.max_run))]
    else:
        variants = VARIANTS
    results = run_variants(grid, variants, start=args.start, goal=args.goal)
    for st in results:
        print(format_stats(st))
    if args.png:
        # one image per run, suffixed when more than one variant ran
        base, ext = os.path.splitext(args.png)
        for st in results:
            path = args.png if len(results) == 1 else f"{base}_{st.name}{ext or '.png'}"
            draw_grid_png(grid, st.result.expanded, path, start=args.start, goal=args.goal)
            print("wrote", path)

def cmd_bench(args: argparse.Namespace) -> None:
    grids = sorted(p for p in os.listdir(args.griddir) if p.endswith(".txt"))
    if args.out:
        os.makedirs(args.out, exist_ok=True)
    rows: List[dict] = []
    for fname in grids:
        fpath = os.path.join(args.griddir, fname)
        grid = Grid.load(fpath)
        base = os.path.splitext(fname)[0]
        results = run_variants(grid, VARIANTS, out_dir=args.out or None, base_tag=base)
        for st in results:
            print(f"{fname} :: {format_stats(st)}")
            rows.append({
                "grid": fname,
                "variant": st.name,
                "min_run": st.limits.min_run,
                "max_run": st.limits.max_run,
                "reached": st.result.reached,
                "cost": st.result.cost if st.result.reached else "",
                "pops": st.result.pops,
                "expanded": len(st.result.expanded),
                "time_sec": round(st.result.elapsed_sec, 6),
            })
    if not grids:
        print("no .txt grids in", args.griddir)
    if args.csv:
        with open(args.csv, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=BENCH_FIELDS)
            writer.writeheader()
            writer.writerows(rows)
        print("wrote CSV:", args.csv)

def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Least-cost grid search under momentum constraints")
    sub = p.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("gen", help="generate random digit grids")
    g.add_argument("--count", type=int, default=10)
    g.add_argument("--rows", type=int, default=13)
    g.add_argument("--cols", type=int, default=13)
    g.add_argument("--p", type=float, default=0.0, help="probability of a blocked cell")
    g.add_argument("--out", type=str, default="grids")
    g.add_argument("--seed", type=int, default=None)
    g.set_defaults(func=cmd_gen)

    s = sub.add_parser("solve", help="minimal cost on one grid (both standard variants by default)")
    s.add_argument("--grid", type=str, required=True)
    s.add_argument("--min-run", type=int, default=None)
    s.add_argument("--max-run", type=int, default=None)
    s.add_argument("--start", type=parse_coord, default=None, help="ROW,COL")
    s.add_argument("--goal", type=parse_coord, default=None, help="ROW,COL")
    s.add_argument("--png", type=str, default="")
    s.set_defaults(func=cmd_solve)

    b = sub.add_parser("bench", help="run both variants on every .txt in a folder")
    b.add_argument("--griddir", type=str, required=True)
    b.add_argument("--out", type=str, default="", help="folder for PNGs")
    b.add_argument("--csv", type=str, default="")
    b.set_defaults(func=cmd_bench)

    return p

def main(argv: Optional[Sequence[str]] = None) -> None:
    ap = build_argparser()
    args = ap.parse_args(argv)
    try:
        args.func(args)
    except ValueError as e:  # includes ConfigurationError
        ap.error(str(e))
