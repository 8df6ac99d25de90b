"""
Word shape check shared by the corpus loader, the corpus validator and the
opening cache.

A word is valid iff it is a string of exactly N lowercase letters a-z.
"""

from .feedback import WORD_LENGTH


def is_valid_word(word: object, N: int = WORD_LENGTH) -> bool:
    if not isinstance(word, str):
        return False
    return len(word) == N and word.isascii() and word.isalpha() and word.islower()
