from __future__ import annotations
import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple
from .candidates import filter_candidates
from .chain import build_chain, regenerate_suffix, uncovered_letters
from .classify import all_letters, classify
from .config import settings
from .dictionary import DictionaryProvider
from .types import (
    Candidate,
    ChainOutcome,
    Classification,
    Letter,
    OutcomeStatus,
    Word,
)

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Puzzle:
    # Everything derived from one set of groups; built once per submit
    groups: Tuple[str, ...]
    classification: Classification
    letters: Tuple[Letter, ...]
    pool: Tuple[Candidate, ...]

class Session:
    """
    One user's solving session: the current puzzle, the current word sequence
    and the words the user has rejected so far.

    The dictionary itself belongs to the provider, which may be shared by many
    sessions and is never cleared by a session. Actions on one session run one
    at a time; an overlapping request waits for the previous one to finish.
    """

    def __init__(self, provider: DictionaryProvider, max_word_length: Optional[int] = None) -> None:
        self.provider = provider
        self.max_word_length = settings.max_word_length if max_word_length is None else max_word_length
        self.puzzle: Optional[Puzzle] = None
        self.sequence: List[Candidate] = []
        self.discarded: Set[Word] = set()
        self._lock = threading.Lock()

    @property
    def words(self) -> List[Word]:
        return [c.word for c in self.sequence]

    def uncovered(self) -> List[Letter]:
        if self.puzzle is None:
            return []
        return uncovered_letters(self.puzzle.letters, self.sequence)

    def submit(self, groups: Sequence[str]) -> ChainOutcome:
        """
        Start a fresh chain for these groups.
        Raises DictionaryLoadError if the word list cannot be loaded; the
        session is left as it was in that case.
        """
        groups = tuple(g.strip().upper() for g in groups)
        with self._lock:
            words = self.provider.words()

            classification = classify(groups)
            pool = filter_candidates(words, classification, self.max_word_length)
            logger.debug("%d candidate words for %s", len(pool), " ".join(groups))

            self.puzzle = Puzzle(
                groups=groups,
                classification=classification,
                letters=tuple(all_letters(groups)),
                pool=tuple(pool),
            )
            self.sequence = build_chain(self.puzzle.pool, self.puzzle.letters, self.discarded)

            if not self.sequence:
                return ChainOutcome(status=OutcomeStatus.NO_SOLUTION, uncovered=list(self.puzzle.letters))
            return self._outcome()

    def discard_and_regenerate(self, index: int) -> ChainOutcome:
        """
        Reject the word at `index` for the rest of the session and rebuild the
        chain from that position. The words before `index` are kept as they are.
        If nothing can replace the suffix, the sequence is left unchanged.
        """
        with self._lock:
            if self.puzzle is None or not 0 <= index < len(self.sequence):
                raise IndexError(f"No word at position {index}; sequence has {len(self.sequence)} word(s).")

            word = self.sequence[index].word
            self.discarded.add(word)
            logger.info("Discarded %s at position %d", word, index)

            suffix = regenerate_suffix(
                self.puzzle.pool, self.puzzle.letters, self.sequence, index, self.discarded
            )
            if not suffix:
                return ChainOutcome(
                    status=OutcomeStatus.NO_ALTERNATIVE,
                    words=self.words,
                    uncovered=self.uncovered(),
                    discarded=word,
                )

            self.sequence = self.sequence[:index] + suffix
            return self._outcome(discarded=word)

    def reset(self) -> None:
        with self._lock:
            self.puzzle = None
            self.sequence = []
            self.discarded.clear()

    def _outcome(self, discarded: Optional[Word] = None) -> ChainOutcome:
        uncovered = self.uncovered()
        return ChainOutcome(
            status=OutcomeStatus.PARTIAL if uncovered else OutcomeStatus.SOLVED,
            words=self.words,
            uncovered=uncovered,
            discarded=discarded,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "groups": list(self.puzzle.groups) if self.puzzle else [],
            "words": self.words,
            "uncovered": self.uncovered(),
            "discarded": sorted(self.discarded),
            "candidates": len(self.puzzle.pool) if self.puzzle else 0,
        }
