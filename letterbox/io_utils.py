from __future__ import annotations
import re
from typing import List, Tuple

_GROUP_RE = re.compile(r"^[A-Z]{3}$")

def parse_groups(text: str) -> List[str]:
    """
    Parse the four letter groups from raw text
    Rules:
    - Groups may be separated by whitespace, commas or newlines
    - Normalize by stripping and uppercasing
    """
    parts = re.split(r"[\s,]+", text.strip())
    return [p.upper() for p in parts if p]

def validate_groups(groups: List[str]) -> Tuple[bool, str]:
    if len(groups) != 4:
        return False, f"Expected 4 groups, got {len(groups)}."

    if not all(_GROUP_RE.match(g) for g in groups):
        return False, "All four groups must contain exactly three letters A-Z."
    return True, ""
