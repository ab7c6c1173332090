from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

Letter = str
Word = str
Classification = Mapping[Letter, int]

class OutcomeStatus(Enum):
    SOLVED = "solved"
    PARTIAL = "partial"
    NO_SOLUTION = "no_solution"
    NO_ALTERNATIVE = "no_alternative"

@dataclass(frozen=True)
class Candidate:
    word: Word
    first: Letter
    last: Letter
    coverage: FrozenSet[Letter]

@dataclass
class ChainOutcome:
    """
    Result of a generate or regenerate action.
    Empty or incomplete chains are reported here, never raised.
    """
    status: OutcomeStatus
    words: List[Word] = field(default_factory=list)
    uncovered: List[Letter] = field(default_factory=list)
    discarded: Optional[Word] = None

    @property
    def ok(self) -> bool:
        return self.status in (OutcomeStatus.SOLVED, OutcomeStatus.PARTIAL)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "status": self.status.value,
            "words": list(self.words),
            "uncovered": list(self.uncovered),
            "discarded": self.discarded,
        }
