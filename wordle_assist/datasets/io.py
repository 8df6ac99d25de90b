from __future__ import annotations
import logging
from pathlib import Path
from typing import List

from wordle_assist.engine.errors import CorpusEmptyError
from wordle_assist.engine.feedback import WORD_LENGTH
from wordle_assist.engine.validation import is_valid_word

log = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_corpus(p: Path | str, N: int = WORD_LENGTH) -> List[str]:
    """
    Load a newline-separated word list as the solving corpus.

    Lines are stripped and lowercased; anything that is not exactly N letters
    a-z is dropped. File order is kept and duplicates are not removed.

    Raises:
      FileNotFoundError if the file is missing.
      CorpusEmptyError if no valid word survives.
    """
    words: List[str] = []
    skipped = 0
    for line in read_lines(p):
        w = line.strip().lower()
        if is_valid_word(w, N):
            words.append(w)
        elif w:
            skipped += 1

    if skipped:
        log.info("skipped %d malformed line(s) in %s", skipped, p)
    if not words:
        raise CorpusEmptyError(f"no valid {N}-letter words found in {p}")
    log.info("loaded %d words from %s", len(words), p)
    return words
