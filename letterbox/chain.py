from __future__ import annotations
import logging
from typing import AbstractSet, Iterable, List, Optional, Sequence, Set
from .types import Candidate, Letter, Word

logger = logging.getLogger(__name__)

def pick_best(usable: Sequence[Candidate], uncovered: AbstractSet[Letter]) -> Candidate:
    """
    Return the candidate covering the most uncovered letters.
    Ties go to the earliest candidate in pool order. When nothing adds
    coverage, the first usable candidate is returned so the chain can go on.
    """
    best = usable[0]
    best_gain = 0
    for cand in usable:
        gain = len(cand.coverage & uncovered)
        if gain > best_gain:
            best, best_gain = cand, gain
    return best

def build_chain(
    pool: Sequence[Candidate],
    uncovered: Iterable[Letter],
    banned: Iterable[Word] = (),
    start_last: Optional[Letter] = None,
) -> List[Candidate]:
    """
    Greedily chain words from the pool until every letter in `uncovered`
    is used or no word can follow the last one.

    Each emitted word is banned for the rest of the build, which bounds the
    loop by the pool size. The caller's `uncovered` and `banned` are not modified.
    """
    remaining: Set[Letter] = set(uncovered)
    used: Set[Word] = set(banned)
    chain: List[Candidate] = []
    last = start_last

    while remaining:
        usable = [
            c for c in pool
            if c.word not in used and (last is None or c.first == last)
        ]
        if not usable:
            logger.debug("No word starts with %s; stopping with %d letters left", last, len(remaining))
            break

        chosen = pick_best(usable, remaining)
        chain.append(chosen)
        used.add(chosen.word)
        remaining -= chosen.coverage
        last = chosen.last
        logger.debug("Picked %s (%d letters left)", chosen.word, len(remaining))

    return chain

def regenerate_suffix(
    pool: Sequence[Candidate],
    letters: Iterable[Letter],
    sequence: Sequence[Candidate],
    index: int,
    discarded: Iterable[Word] = (),
) -> List[Candidate]:
    """
    Rebuild the chain from position `index` onwards, keeping sequence[:index].
    Returns only the new suffix; an empty list means there is no alternative.
    """
    prefix = sequence[:index]

    covered: Set[Letter] = set()
    for cand in prefix:
        covered |= cand.coverage
    uncovered = [ch for ch in letters if ch not in covered]

    start_last = prefix[-1].last if prefix else None
    banned = {c.word for c in prefix}
    banned.add(sequence[index].word)
    banned.update(discarded)

    return build_chain(pool, uncovered, banned, start_last)

def uncovered_letters(letters: Iterable[Letter], chain: Iterable[Candidate]) -> List[Letter]:
    covered: Set[Letter] = set()
    for cand in chain:
        covered |= cand.coverage
    return [ch for ch in letters if ch not in covered]
