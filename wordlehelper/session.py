from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple
import logging
from .constraints import ConstraintSet
from . import engine

logger = logging.getLogger(__name__)


class Event(Enum):
    CONSTRAINT_CHANGED = "constraint changed"
    WORD_LIST_RELOADED = "word list reloaded"


@dataclass(frozen=True)
class CandidateList:
    words: Tuple[str, ...] = ()
    event: Optional[Event] = None

    def __len__(self):
        return len(self.words)

    def __iter__(self):
        return iter(self.words)

    def __getitem__(self, index):
        return self.words[index]


class Session:
    """Owns the constraints and word list for one run of the helper.

    Every mutation ends in an event that recomputes the candidates from the
    full word list and hands the new CandidateList to each listener.
    """

    def __init__(self, words: Iterable[str] = (), constraints: Optional[ConstraintSet] = None):
        self.words: Tuple[str, ...] = tuple(words)
        self.constraints = constraints if constraints is not None else ConstraintSet()
        self._listeners: List[Callable[[CandidateList], None]] = []
        self.candidates = CandidateList(engine.candidates(self.words, self.constraints))

    def add_listener(self, callback: Callable[[CandidateList], None]):
        self._listeners.append(callback)

    def remove_listener(self, callback):
        self._listeners.remove(callback)

    def _dispatch(self, event: Event) -> CandidateList:
        self.candidates = CandidateList(engine.candidates(self.words, self.constraints), event)
        logger.debug(f"{event.value}: {len(self.candidates)} of {len(self.words)} words remain")
        for callback in tuple(self._listeners):
            callback(self.candidates)
        return self.candidates

    def set_known(self, index: int, letter: Optional[str]) -> CandidateList:
        self.constraints.set_known(index, letter)
        return self._dispatch(Event.CONSTRAINT_CHANGED)

    def set_misplaced(self, index: int, letters: str) -> CandidateList:
        self.constraints.set_misplaced(index, letters)
        return self._dispatch(Event.CONSTRAINT_CHANGED)

    def set_excluded(self, letters: str) -> CandidateList:
        self.constraints.set_excluded(letters)
        return self._dispatch(Event.CONSTRAINT_CHANGED)

    def reset(self) -> CandidateList:
        self.constraints.reset()
        return self._dispatch(Event.CONSTRAINT_CHANGED)

    def load_words(self, words: Iterable[str]) -> CandidateList:
        self.words = tuple(words)
        return self._dispatch(Event.WORD_LIST_RELOADED)
