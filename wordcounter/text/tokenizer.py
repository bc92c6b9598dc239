from __future__ import annotations

from typing import AbstractSet, List

from wordcounter.types import Token

# Word / separator scanner.
# Rules:
# - A "word" is a maximal run of chars NOT in the separator set.
# - A "separator run" is a maximal run of chars IN the separator set.
# - Runs never mix classes; the class is decided by the first char.
# - Offsets are the source of truth: line[start:end] == token text, end exclusive.
# - No normalization (case, trimming). Concatenating the runs of a line gives the line back.
# - Separator set is caller-supplied; membership is the only operation used.

DEFAULT_SEPARATORS = frozenset({" ", ",", ".", "-"})


def _is_sep(ch: str, separators: AbstractSet[str]) -> bool:
    return ch in separators


def next_word_or_separator(text: str, position: int, separators: AbstractSet[str]) -> str:
    """
    Return the first word or separator run in ``text`` starting at ``position``.

    If ``text[position]`` is a separator the result is the maximal run of
    separators from there; otherwise it is the maximal run of non-separators.
    The result is never empty.

    Requires 0 <= position < len(text). Violations raise immediately.
    """
    if text is None or not isinstance(text, str):
        raise TypeError("Violation of: text is a str")
    if separators is None:
        raise TypeError("Violation of: separators is not None")
    if position < 0:
        raise ValueError(f"Violation of: 0 <= position (got {position})")
    n = len(text)
    if position >= n:
        raise ValueError(f"Violation of: position < |text| (got {position}, |text|={n})")

    want_sep = _is_sep(text[position], separators)
    j = position + 1
    while j < n and _is_sep(text[j], separators) == want_sep:
        j += 1
    return text[position:j]


def is_separator_run(token: str, separators: AbstractSet[str]) -> bool:
    # homogeneity makes the first char representative
    return bool(token) and _is_sep(token[0], separators)


def tokenize_line(line: str, separators: AbstractSet[str]) -> List[Token]:
    # Library helper: full run list with offsets. The counter walks runs itself.
    # Same argument contract as next_word_or_separator (separators required).
    if separators is None:
        raise TypeError("Violation of: separators is not None")
    tokens: List[Token] = []
    i = 0
    n = len(line)
    while i < n:
        run = next_word_or_separator(line, i, separators)
        j = i + len(run)
        tokens.append(Token(text=run, start=i, end=j, is_separator=is_separator_run(run, separators)))
        i = j
    return tokens
