from __future__ import annotations
from typing import List
import pytest
from letterbox.dictionary import DictionaryProvider

GROUPS = ["ABC", "DEF", "GHI", "JKL"]

# Made-up words that chain ADGJ -> JBEH -> HCFK -> KIL and cover all twelve letters.
# JCEH is an alternative second word; it ties with JBEH and comes later in the list.
CHAIN_WORDS = ["ADGJ", "JBEH", "HCFK", "JCEH", "KIL"]

class CountingFetch:
    def __init__(self, words: List[str]) -> None:
        self.text = "\n".join(words)
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return self.text

@pytest.fixture
def groups() -> List[str]:
    return list(GROUPS)

@pytest.fixture
def make_provider():
    def _make(words: List[str]):
        fetch = CountingFetch(words)
        return DictionaryProvider(fetch), fetch
    return _make
