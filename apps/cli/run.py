# apps/cli/run.py
"""
CLI entry point for pitting scripted solvers against the adversary.

This script:
  1) Validates the dictionary for the requested length (counts + SHA).
  2) Loads the dictionary and instantiates the requested solver(s).
  3) Plays a batch of seeded games per solver with a progress bar and writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with config, dictionary hash, git commit, etc.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from statistics import mean

from tqdm import tqdm

from absurdle.datasets import load_dictionary, validate_dictionary, pretty_summary
from absurdle.harness import run_case
from absurdle.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from absurdle.solvers import create_solver, get_solver_ids


def main(argv=None):
    """
    Parse CLI args, validate the dictionary, run the batch, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="absurdle: run solvers against the adversary")
    ap.add_argument("--solver", action="append",
                    help=f"solver id, repeatable (default: all of {solver_choices})")
    ap.add_argument("--dict", dest="dict_path", required=True, help="dictionary file")
    ap.add_argument("--length", type=int, default=5, help="word length")
    ap.add_argument("--games", type=int, default=10, help="seeded games per solver")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--max-turns", type=int, help="optional safety cap on guesses per game")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar",
                    help="show a progress bar on stderr")
    args = ap.parse_args(argv)

    # 1) Validate and summarize
    rep = validate_dictionary(args.length, args.dict_path)
    print(pretty_summary(rep))
    if not rep["passed"]:
        ap.error("; ".join(rep["issues"]))

    words = load_dictionary(args.dict_path)
    solver_ids = args.solver or get_solver_ids()
    try:
        solvers = [create_solver(sid) for sid in solver_ids]
    except ValueError as e:
        ap.error(str(e))

    # 2) Play
    results = []
    jobs = [(s, idx) for s in solvers for idx in range(1, args.games + 1)]
    for solver, idx in tqdm(jobs, ncols=80, desc="Running", unit="game",
                            disable=args.progress == "off"):
        r = run_case(solver, words=words, N=args.length,
                     max_turns=args.max_turns, seed=args.seed + idx)
        r["solver_id"] = solver.id
        results.append(r)

    for solver in solvers:
        mine = [r for r in results if r["solver_id"] == solver.id]
        won = [r["guesses"] for r in mine if r["success"]]
        avg = f"{mean(won):.2f}" if won else "n/a"
        print(f"{solver.id}: won {len(won)}/{len(mine)} | mean guesses {avg}")

    # 3) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), N=args.length)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "num_cases": len(results),
        "solver_ids": [s.id for s in solvers],
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
