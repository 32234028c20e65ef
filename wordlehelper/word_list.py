import logging
from pathlib import Path
from typing import Iterable, Tuple
from .constraints import WORD_LENGTH, InvalidWordLength, check_word_length

logger = logging.getLogger(__name__)


def is_valid_word(word: str, length: int = WORD_LENGTH) -> bool:
    try:
        check_word_length(word, length)
    except InvalidWordLength:
        return False
    return word.isalpha()


def parse_word_list(lines: Iterable[str], *, lowercase=True, drop_invalid=True) -> Tuple[str, ...]:
    """Turn raw lines into a word tuple. Blank lines are always skipped;
    malformed entries are dropped only if drop_invalid is set."""

    words = (line.strip() for line in lines)
    words = [word.lower() if lowercase else word for word in words if word]

    if drop_invalid:
        valid = [word for word in words if is_valid_word(word)]
        dropped = len(words) - len(valid)
        if dropped:
            logger.warning(f"Dropped {dropped} entries that are not {WORD_LENGTH} letters long")
        words = valid

    return tuple(words)


def load_word_list(path, *, lowercase=True, drop_invalid=True) -> Tuple[str, ...]:
    """Read a newline-delimited word file. OSError and UnicodeDecodeError
    are left to the caller."""

    path = Path(path)
    with path.open(encoding='utf-8') as file:
        words = parse_word_list(file, lowercase=lowercase, drop_invalid=drop_invalid)
    logger.info(f"Loaded {len(words)} words from {path}")
    return words
