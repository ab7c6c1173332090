from __future__ import annotations
from types import MappingProxyType
from typing import Dict, List, Sequence
from .types import Classification, Letter

def classify(groups: Sequence[str]) -> Classification:
    """
    Map every letter to the index of the group it belongs to.
    A letter listed in more than one group keeps its first group.
    """
    mapping: Dict[Letter, int] = {}
    for idx, group in enumerate(groups):
        for ch in group.upper():
            if ch not in mapping:
                mapping[ch] = idx
    return MappingProxyType(mapping)

def all_letters(groups: Sequence[str]) -> List[Letter]:
    # Distinct letters in first-seen order
    return list(dict.fromkeys(ch for group in groups for ch in group.upper()))
