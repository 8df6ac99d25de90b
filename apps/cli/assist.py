# apps/cli/assist.py
"""
Interactive Wordle assistant.

This script:
  1) Loads the corpus (default: words.txt) and builds the opening cache.
  2) Each round suggests a guess, reads the colors the game showed you
     (e.g. "20012" or "G--YG"), and narrows the candidates.
  3) Stops when solved, when no word fits, or after the attempt budget.

Usage:
    python -m apps.cli.assist --words words.txt
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from wordle_assist.config import SolverConfig
from wordle_assist.datasets import load_corpus
from wordle_assist.engine.errors import CorpusEmptyError
from wordle_assist.session import SolveSession, play
from wordle_assist.solvers import DEFAULT_SOLVER, create_solver, get_solver_ids
from wordle_assist.ui import ConsoleDisplay


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Wordle assistant: suggests information-rich guesses")
    ap.add_argument("--words", default="words.txt", help="newline-separated 5-letter word list")
    ap.add_argument("--solver", default=DEFAULT_SOLVER,
                    help=f"strategy id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--max-attempts", type=int, help="attempt budget (default 6)")
    ap.add_argument("--sample-size", type=int, help="random guesses scored per entropy pass")
    ap.add_argument("--sample-threshold", type=int,
                    help="pools larger than this use entropy sampling")
    ap.add_argument("--opener", action="append", dest="openers",
                    help="opening shortlist word (repeatable; replaces the defaults)")
    ap.add_argument("--no-opening-cache", action="store_true",
                    help="skip the precomputed opening move")
    ap.add_argument("--seed", type=int, help="RNG seed for reproducible sampling")
    ap.add_argument("-v", "--verbose", action="store_true", help="log solver decisions")
    return ap


def config_from_args(args: argparse.Namespace) -> SolverConfig:
    return SolverConfig().with_overrides(
        max_attempts=args.max_attempts,
        sample_size=args.sample_size,
        sample_threshold=args.sample_threshold,
        opening_shortlist=tuple(args.openers) if args.openers else None,
        use_opening_cache=False if args.no_opening_cache else None,
    )


def setup_logging(verbose: bool, default: int, console: Console | None = None) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else default,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or Console(stderr=True), show_path=False)],
        force=True,
    )


def main(argv=None, *, console: Console | None = None, stream=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, logging.WARNING)
    display = ConsoleDisplay(console, stream=stream)

    try:
        config = config_from_args(args)
        corpus = load_corpus(args.words, config.word_length)
        selector = create_solver(args.solver, config)
    except (FileNotFoundError, CorpusEmptyError, ValueError) as e:
        display.console.print(f"[red]Error:[/red] {e}")
        return 1

    selector.reset(corpus=corpus, seed=args.seed)
    session = SolveSession(corpus, selector, config=config)

    display.banner()
    try:
        play(
            session,
            display.read_feedback,
            on_suggest=display.show_suggestion,
            on_round=display.show_round,
            on_invalid=display.show_invalid,
        )
    except (EOFError, KeyboardInterrupt):
        display.console.print("\nAborted.")
        return 130

    display.show_outcome(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
