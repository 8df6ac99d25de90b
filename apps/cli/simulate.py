# apps/cli/simulate.py
"""
CLI entry point for self-play benchmarks.

This script:
  1) Validates the corpus (prints counts + SHA).
  2) Loads it, instantiates the requested strategy and builds its opening
     cache once for the whole batch.
  3) Plays every answer (or a seeded sample) with a live progress indicator
     and writes:
       - CSV:  one row per game, one "guess pattern" cell per round
       - JSON: run config, corpus hash and the batch summary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from dataclasses import asdict

from rich.console import Console
from tqdm import tqdm

from apps.cli.assist import config_from_args, setup_logging
from wordle_assist.datasets import load_corpus, pretty_summary, validate_wordlist
from wordle_assist.engine.errors import CorpusEmptyError
from wordle_assist.engine.feedback import WORD_LENGTH
from wordle_assist.session import run_batch, summarize, write_report
from wordle_assist.solvers import DEFAULT_SOLVER, create_solver, get_solver_ids

log = logging.getLogger("wordle_assist.cli")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordle-assist — self-play benchmark")
    ap.add_argument("--words", default="words.txt", help="corpus (guess and candidate pool)")
    ap.add_argument("--answers", help="hidden words to play (default: the corpus)")
    ap.add_argument("--solver", default=DEFAULT_SOLVER,
                    help=f"strategy id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--sample", type=int, help="play only a seeded subset of answers")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--max-attempts", type=int, help="attempt budget (default 6)")
    ap.add_argument("--sample-size", type=int, help="random guesses scored per entropy pass")
    ap.add_argument("--sample-threshold", type=int,
                    help="pools larger than this use entropy sampling")
    ap.add_argument("--opener", action="append", dest="openers",
                    help="opening shortlist word (repeatable; replaces the defaults)")
    ap.add_argument("--no-opening-cache", action="store_true",
                    help="skip the precomputed opening move")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="log solver decisions")
    return ap


def main(argv=None, *, console: Console | None = None) -> int:
    """
    Parse CLI args, validate the corpus, run the batch with progress, and write outputs.
    """
    args = build_parser().parse_args(argv)
    console = console or Console(highlight=False)
    setup_logging(args.verbose, logging.INFO)

    # 1) Validate corpus and print a one-liner summary
    rep = validate_wordlist(WORD_LENGTH, args.words)
    console.print(pretty_summary(rep))

    # 2) Load corpus and answers, instantiate the strategy
    try:
        config = config_from_args(args)
        corpus = load_corpus(args.words, config.word_length)
        answers = load_corpus(args.answers, config.word_length) if args.answers else list(corpus)
        solver = create_solver(args.solver, config)
    except (FileNotFoundError, CorpusEmptyError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1

    # 3) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(answers):
        pool = list(answers)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(answers)
    total = len(cases)

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    start = time.time()
    last_print = [0.0]

    def plain_progress(idx: int, _case) -> None:
        now = time.time()
        if (now - last_print[0] >= 1.0) or (idx == total):
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {now - start:6.1f}s")
            sys.stderr.flush()
            last_print[0] = now

    iterator = tqdm(cases, ncols=80, desc="Playing", unit="game") if mode == "bar" else cases

    # 5) Run batch (opening cache is built once inside run_batch)
    results = run_batch(solver, iterator, corpus=corpus, seed=args.seed,
                        on_case=plain_progress if mode == "plain" else None)
    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 6) Write outputs (CSV + JSON summary)
    csv_path, json_path = write_report(results, args.outdir, max_attempts=config.max_attempts,
                                       metadata={
                                           "config": vars(args),
                                           "solver_config": asdict(config),
                                           "corpus": rep,
                                           "solver_id": solver.id,
                                       })
    summary = summarize(results, config.max_attempts)
    log.info("outcomes: %s", summary["outcomes"])

    console.print(f"Solved {summary['solved']}/{summary['games']} "
                  f"| mean guesses {summary['mean_guesses']:.3f}")
    console.print(f"Wrote: {csv_path}")
    console.print(f"Wrote: {json_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
