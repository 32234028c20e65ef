# wordlehelper/__init__.py
"""
Wordle Helper: narrows a word list from known, misplaced and excluded
letters and ranks the survivors by letter diversity. GUI built on PyQt6.
"""

__version__ = "0.1.0"

from .constraints import (ConstraintSet, WORD_LENGTH, WordleHelperError,
    InvalidWordLength, ConstraintError, check_word_length
)
from .engine import filter_words, rank, candidates, distinct_letters
from .session import Session, CandidateList, Event
from .word_list import load_word_list, parse_word_list

__all__ = [
    "ConstraintSet",
    "WORD_LENGTH",
    "WordleHelperError",
    "InvalidWordLength",
    "ConstraintError",
    "check_word_length",
    "filter_words",
    "rank",
    "candidates",
    "distinct_letters",
    "Session",
    "CandidateList",
    "Event",
    "load_word_list",
    "parse_word_list",
]
