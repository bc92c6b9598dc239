from __future__ import annotations

from typing import List, Mapping, Tuple


def order_key(word: str) -> Tuple[str, str]:
    # case-insensitive first; exact string breaks ties ("Cat" < "cat")
    return (word.lower(), word)


def ordered_keys(counts: Mapping[str, int]) -> List[str]:
    """Distinct words of ``counts`` in case-insensitive alphabetical order. ``counts`` is not touched."""
    return sorted(counts.keys(), key=order_key)
