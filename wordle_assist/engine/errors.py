"""
Error taxonomy for the assistant.

- NoCandidatesError:    a guess was requested from an empty pool.
- InvalidFeedbackError: a feedback pattern is malformed (recoverable, re-ask).
- CorpusEmptyError:     the word corpus holds no valid words (fatal at startup).
- SessionStateError:    a session method was called out of order.
"""


class WordleAssistError(Exception):
    """Base class for all assistant errors."""


class NoCandidatesError(WordleAssistError):
    """No word is consistent with the feedback supplied so far."""

    def __init__(self, message: str = "no candidate words remain"):
        super().__init__(message)


class InvalidFeedbackError(WordleAssistError, ValueError):
    """A feedback pattern has the wrong length or a digit outside {0, 1, 2}."""


class CorpusEmptyError(WordleAssistError):
    """The corpus supplied at startup contains zero valid words."""


class SessionStateError(WordleAssistError):
    pass
