from typing import List, Optional, Set, Iterable
import logging

logger = logging.getLogger(__name__)

WORD_LENGTH = 5


class WordleHelperError(Exception):
    pass


class InvalidWordLength(WordleHelperError, ValueError):
    def __init__(self, word, length=WORD_LENGTH):
        super().__init__(f"{word!r} has length {len(word)}, expected {length}")
        self.word = word
        self.length = length


class ConstraintError(WordleHelperError, ValueError):
    pass


def check_word_length(word: str, length: int = WORD_LENGTH) -> str:
    """Return word unchanged, or raise InvalidWordLength"""
    if len(word) != length:
        raise InvalidWordLength(word, length)
    return word


class ConstraintSet:
    """What the player knows about the target word.

    known_letters[i] is the letter confirmed at position i (or None),
    misplaced_letters[i] holds letters present in the word but not at i, and
    excluded_letters are absent everywhere. A slot's known letter is never
    kept in that same slot's misplaced set; the mutators below drop it.
    """

    def __init__(self):
        self.known_letters: List[Optional[str]] = [None] * WORD_LENGTH
        self.misplaced_letters: List[Set[str]] = [set() for _ in range(WORD_LENGTH)]
        self.excluded_letters: str = ''

    def __repr__(self):
        known = ''.join(c or '_' for c in self.known_letters)
        misplaced = [''.join(sorted(s)) for s in self.misplaced_letters]
        return f"ConstraintSet(known={known!r}, misplaced={misplaced}, excluded={self.excluded_letters!r})"

    def __eq__(self, other):
        if isinstance(other, ConstraintSet):
            return (self.known_letters == other.known_letters
                    and self.misplaced_letters == other.misplaced_letters
                    and set(self.excluded_letters) == set(other.excluded_letters))
        return NotImplemented

    @staticmethod
    def _check_index(index):
        if not 0 <= index < WORD_LENGTH:
            raise ConstraintError(f"Slot index {index} outside 0..{WORD_LENGTH - 1}")

    def set_known(self, index: int, letter: Optional[str]):
        self._check_index(index)
        if not letter:
            letter = None
        elif len(letter) != 1:
            raise ConstraintError(f"Known letter must be a single character, got {letter!r}")
        self.known_letters[index] = letter
        if letter is not None:
            self.misplaced_letters[index].discard(letter)
        logger.debug(f"set_known: slot {index} -> {letter!r}")

    def set_misplaced(self, index: int, letters: Iterable[str]):
        self._check_index(index)
        self.misplaced_letters[index] = set(letters) - {self.known_letters[index]}
        logger.debug(f"set_misplaced: slot {index} -> {sorted(self.misplaced_letters[index])}")

    def add_misplaced(self, index: int, letter: str):
        self._check_index(index)
        if len(letter) != 1:
            raise ConstraintError(f"Misplaced letter must be a single character, got {letter!r}")
        if letter == self.known_letters[index]:
            logger.debug(f"add_misplaced: '{letter}' is already known at slot {index}, ignored")
            return
        self.misplaced_letters[index].add(letter)

    def set_excluded(self, letters: Iterable[str]):
        self.excluded_letters = ''.join(letters)
        logger.debug(f"set_excluded: {self.excluded_letters!r}")

    def add_excluded(self, letter: str):
        if len(letter) != 1:
            raise ConstraintError(f"Excluded letter must be a single character, got {letter!r}")
        if letter not in self.excluded_letters:
            self.excluded_letters += letter

    def reset(self):
        self.known_letters[:] = [None] * WORD_LENGTH
        for letters in self.misplaced_letters:
            letters.clear()
        self.excluded_letters = ''

    def is_empty(self) -> bool:
        return (not any(self.known_letters) and not any(self.misplaced_letters)
                and not self.excluded_letters)

    def matches(self, word: str) -> bool:
        """True if word is consistent with every known, excluded and
        misplaced letter. Words of the wrong length never match."""

        if len(word) != WORD_LENGTH:
            return False

        for i, letter in enumerate(self.known_letters):
            if letter is not None and word[i] != letter:
                return False

        if any(letter in word for letter in self.excluded_letters):
            return False

        for i, letters in enumerate(self.misplaced_letters):
            if any(word[i] == c or c not in word for c in letters):
                return False

        return True
