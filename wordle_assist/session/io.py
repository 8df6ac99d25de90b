"""
Simulation reports.

- case_row:     one flat CSV row per self-played game.
- summarize:    solve rate, mean guesses, guess-count histogram, end reasons.
- write_report: the CSV plus a JSON file holding the summary and run metadata.

Each round is written as a single "guess pattern" cell ("crate 00120"),
so spreadsheets keep the pattern's leading zeros.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
from collections import Counter
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from wordle_assist.engine.feedback import format_pattern
from .core import CaseResult, TerminalReason

FAILED = "failed"


def run_stamp() -> str:
    """Compact UTC timestamp for report filenames, e.g. 20260819T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def case_row(case: CaseResult, max_attempts: int) -> Dict[str, object]:
    row: Dict[str, object] = {
        "answer": case.answer,
        "solver": case.solver_id,
        "outcome": case.reason.name.lower(),
        "guesses": case.guesses,
        "remaining": case.remaining,
        "time_ms": round(case.time_ms, 3),
    }
    for i in range(max_attempts):
        r = case.rounds[i] if i < len(case.rounds) else None
        row[f"round_{i + 1}"] = f"{r.guess} {format_pattern(r.pattern)}" if r else ""
    return row


def summarize(results: Sequence[CaseResult], max_attempts: int) -> Dict[str, object]:
    """
    Aggregate a batch. `distribution` maps "1".."max_attempts" and "failed"
    to game counts; `outcomes` counts every TerminalReason by name.
    """
    solved = [c for c in results if c.success]
    dist = Counter(str(c.guesses) if c.success else FAILED for c in results)
    reasons = Counter(c.reason.name.lower() for c in results)
    return {
        "games": len(results),
        "solved": len(solved),
        "solve_rate": len(solved) / len(results) if results else 0.0,
        "mean_guesses": sum(c.guesses for c in solved) / len(solved) if solved else 0.0,
        "distribution": {k: dist.get(k, 0)
                         for k in [str(n) for n in range(1, max_attempts + 1)] + [FAILED]},
        "outcomes": {r.name.lower(): reasons.get(r.name.lower(), 0) for r in TerminalReason},
    }


def write_report(results: List[CaseResult], outdir: Path | str, *, max_attempts: int,
                 metadata: Dict[str, object] | None = None,
                 run_id: str | None = None) -> Tuple[Path, Path]:
    """
    Write <outdir>/run_<id>.csv and <outdir>/run_<id>.json.

    Returns:
      (csv_path, json_path)
    """
    run_id = run_id or run_stamp()
    out = Path(outdir)
    out.mkdir(parents=True, exist_ok=True)
    csv_path = out / f"run_{run_id}.csv"
    json_path = out / f"run_{run_id}.json"

    rows = [case_row(c, max_attempts) for c in results]
    fields = ["answer", "solver", "outcome", "guesses", "remaining", "time_ms"]
    fields += [f"round_{i}" for i in range(1, max_attempts + 1)]
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        w.writerows(rows)

    report = {"run_id": run_id, **(metadata or {}), "summary": summarize(results, max_attempts)}
    json_path.write_text(json.dumps(report, indent=2, default=str), encoding="utf-8")
    return csv_path, json_path
