from __future__ import annotations
from typing import Iterable, List, Optional
from .types import Candidate, Classification, Word

def make_candidate(word: Word, classification: Classification) -> Optional[Candidate]:
    """
    Build a Candidate for a word, or None when the word breaks the board rules:
    - every letter must belong to one of the groups
    - no two adjacent letters may come from the same group (so no doubled letters)
    """
    upper = word.upper()
    if not upper:
        return None

    groups: List[int] = []
    for ch in upper:
        idx = classification.get(ch)
        if idx is None:
            return None
        if groups and groups[-1] == idx:
            return None
        groups.append(idx)

    return Candidate(
        word=upper,
        first=upper[0],
        last=upper[-1],
        coverage=frozenset(upper),
    )

def sort_candidates(candidates: Iterable[Candidate]) -> List[Candidate]:
    # Most distinct letters first, then longest. Stable, so ties keep dictionary order.
    return sorted(candidates, key=lambda c: (len(c.coverage), len(c.word)), reverse=True)

def filter_candidates(words: Iterable[Word], classification: Classification, max_length: int = 12) -> List[Candidate]:
    """
    Scan the dictionary once and keep the words playable on this board,
    ranked for the chain builder.
    """
    candidates: List[Candidate] = []
    for w in words:
        if len(w) == 0 or len(w) > max_length:
            continue
        cand = make_candidate(w, classification)
        if cand is not None:
            candidates.append(cand)
    return sort_candidates(candidates)
