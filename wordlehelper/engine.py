"""
Candidate filtering and ranking.

Both operations are pure: they read a word sequence and a ConstraintSet and
return a new tuple. Ranking orders words by how many distinct letters they
contain, most first, so that more informative guesses surface at the top.
"""

from typing import Iterable, Sequence, Tuple
import logging
import numpy as np
from .constraints import ConstraintSet

logger = logging.getLogger(__name__)


def filter_words(words: Iterable[str], constraints: ConstraintSet) -> Tuple[str, ...]:
    """Words consistent with constraints, in their original order"""
    return tuple(word for word in words if constraints.matches(word))


def distinct_letters(word: str) -> int:
    return len(set(word))


def rank(words: Sequence[str]) -> Tuple[str, ...]:
    """Sort by distinct letter count, descending. Ties keep their input order."""
    words = tuple(words)
    if not words:
        return ()
    counts = np.fromiter((distinct_letters(w) for w in words), dtype=np.int64, count=len(words))
    order = np.argsort(-counts, kind='stable')
    return tuple(words[i] for i in order)


def candidates(words: Iterable[str], constraints: ConstraintSet) -> Tuple[str, ...]:
    ranked = rank(filter_words(words, constraints))
    logger.debug(f"candidates: {len(ranked)} words for {constraints}")
    return ranked
