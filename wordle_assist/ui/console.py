"""
Terminal display and feedback input, built on rich.

The solving core never prints; the CLI wires these callbacks into
wordle_assist.session.play.
"""

from __future__ import annotations

from typing import IO, Iterable, Optional

from rich.console import Console
from rich.text import Text

from wordle_assist.engine.errors import InvalidFeedbackError
from wordle_assist.engine.feedback import GRAY, GREEN, YELLOW, Pattern, format_pattern, parse_pattern
from wordle_assist.session.core import RoundResult, SolveSession, TerminalReason

TILE_STYLES = {
    GRAY: "bold bright_black",
    YELLOW: "bold bright_yellow",
    GREEN: "bold bright_green",
}

WORDS_PER_LINE = 8


def render_guess(guess: str, pattern: Optional[Iterable[int]] = None) -> Text:
    """Upper-case letters, space separated; colored by feedback when given."""
    text = Text()
    digits = list(pattern) if pattern is not None else [None] * len(guess)
    for ch, d in zip(guess, digits):
        text.append(ch.upper(), style=TILE_STYLES.get(d, "bold"))
        text.append(" ")
    return text


class ConsoleDisplay:
    def __init__(self, console: Console | None = None, *, stream: IO[str] | None = None):
        self.console = console or Console(highlight=False)
        self.stream = stream  # read feedback from here instead of stdin

    def banner(self) -> None:
        self.console.print("\n[bold]Wordle Solver[/bold]")
        self.console.print("-------------")

    def read_feedback(self, guess: str) -> Pattern:
        """One prompt; raises InvalidFeedbackError on bad input."""
        self.console.print(Text("Current guess: ").append_text(render_guess(guess)))
        line = self.console.input(
            "Enter feedback [dim](0=gray, 1=yellow, 2=green)[/dim]: ", stream=self.stream)
        if self.stream is not None and not line:
            raise EOFError
        return parse_pattern(line)

    def show_invalid(self, err: InvalidFeedbackError) -> None:
        self.console.print(f"[red]Invalid feedback:[/red] {err}")

    def show_suggestion(self, session: SolveSession, guess: str) -> None:
        self.console.print(f"\nAttempt {session.attempt + 1}/{session.config.max_attempts}")
        self.console.print(Text("Suggested guess: ").append_text(render_guess(guess)))

    def show_round(self, session: SolveSession, result: RoundResult) -> None:
        self.console.print(Text("\nFeedback: ").append_text(render_guess(result.guess, result.pattern)))
        self.console.print(f"Codes:    {' '.join(format_pattern(result.pattern))}")
        if session.is_finished:
            return
        self.console.print(f"Remaining possible words: {result.remaining}")
        if result.candidates:
            self.console.print("Possible solutions:")
            for i in range(0, len(result.candidates), WORDS_PER_LINE):
                self.console.print(" ".join(result.candidates[i:i + WORDS_PER_LINE]))

    def show_outcome(self, session: SolveSession) -> None:
        reason = session.reason
        if reason is TerminalReason.SOLVED:
            self.console.print(f"[bold green]Solved in {session.attempt} attempts![/bold green]")
        elif reason is TerminalReason.CONTRADICTION:
            self.console.print("[red]No more possible words. "
                               "Check the feedback you entered for mistakes.[/red]")
        elif reason is TerminalReason.NO_CANDIDATES:
            self.console.print("[red]No possible words remaining![/red]")
        elif reason is TerminalReason.OUT_OF_ATTEMPTS:
            self.console.print(f"[yellow]Out of attempts with {session.store.count()} "
                               f"word(s) left.[/yellow]")
            cap = session.config.display_cap
            words = list(session.store.words[:cap])
            if words:
                more = " ..." if session.store.count() > cap else ""
                self.console.print("Possible solutions: " + " ".join(words) + more)
