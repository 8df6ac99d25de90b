from .core import (
    SessionState,
    TerminalReason,
    RoundResult,
    CaseResult,
    SolveSession,
    play,
    run_case,
    run_batch,
)
from .io import summarize, write_report

__all__ = ["SessionState", "TerminalReason", "RoundResult", "CaseResult", "SolveSession",
           "play", "run_case", "run_batch", "summarize", "write_report"]
