from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, FrozenSet

# -----------------------
# Aliases
# -----------------------
SeparatorSet = FrozenSet[str]
WordCounts = Dict[str, int]  # word (case kept) -> occurrences, always >= 1

# -----------------------
# Core data types
# -----------------------

@dataclass(frozen=True)
class Token:
    """One maximal run of either word or separator characters within a line."""
    text: str
    start: int  # inclusive char index in the line
    end: int    # exclusive char index in the line
    is_separator: bool = False


@dataclass(frozen=True)
class RunSummary:
    """
    Outcome of one counting run.
    Fields:
      input_path / output_path: as given by the caller (not resolved)
      distinct_words: number of keys in the word-count table
      total_words: sum of all counts (= number of word tokens seen)
      lines_read: lines consumed from the input
      timings: stage -> seconds
    """
    input_path: str
    output_path: str
    distinct_words: int
    total_words: int
    lines_read: int
    timings: dict[str, float] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        out = asdict(self)
        out["timings"] = {k: float(v) for k, v in self.timings.items()}
        return out
