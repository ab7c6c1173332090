from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List
from .config import settings
from .dictionary import DictionaryProvider
from .io_utils import validate_groups
from .session import Session

@dataclass
class SolveParams:
    max_length: int = settings.max_word_length

def solve_letter_boxed(groups: List[str], params: SolveParams, provider: DictionaryProvider) -> Dict[str, Any]:
    # Core solver entrypoint for BOTH CLI and Web

    groups = [g.strip().upper() for g in groups]

    ok, msg = validate_groups(groups)
    if not ok:
        return {"ok": False, "error": msg}

    # DictionaryLoadError propagates to the caller
    session = Session(provider, max_word_length=params.max_length)
    outcome = session.submit(groups)

    resp: Dict[str, Any] = outcome.to_dict()
    resp.update({
        "groups": groups,
        "params": {
            "max_length": params.max_length,
        },
        "candidate_stats": {
            "dictionary_size": len(provider.words()),
            "candidates": len(session.puzzle.pool),
        },
    })

    if not outcome.ok:
        resp["error"] = "No suitable words found for these letters. Try different combinations."
    return resp
