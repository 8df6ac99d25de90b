from .feedback import (
    compute_feedback,
    feedback_code,
    encode_pattern,
    decode_pattern,
    is_solved,
    validate_pattern,
    parse_pattern,
    format_pattern,
)
from .constraints import filter_candidates, is_consistent
from .store import CandidateStore
from .validation import is_valid_word

__all__ = [
    "compute_feedback", "feedback_code", "encode_pattern", "decode_pattern",
    "is_solved", "validate_pattern", "parse_pattern", "format_pattern",
    "filter_candidates", "is_consistent", "CandidateStore",
    "is_valid_word",
]
