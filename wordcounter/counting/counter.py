"""
Word-count table construction.

``word_counts_from_lines`` is the core loop and is what the pipeline drives
(it wraps the line reader to tally lines). ``word_counts_from_file`` is the
library entry point for callers that only want the table for a path.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import AbstractSet, Iterable, Union

from wordcounter.io.lines import read_lines
from wordcounter.text.tokenizer import is_separator_run, next_word_or_separator
from wordcounter.types import WordCounts

_LOGGER = logging.getLogger("wordcounter.counting.counter")


def word_counts_from_lines(lines: Iterable[str], separators: AbstractSet[str]) -> WordCounts:
    """
    Build a fresh word -> count table from ``lines``.

    Lines are consumed in order, each scanned left to right with
    ``next_word_or_separator``. Separator runs are dropped. Keys keep their
    case exactly as seen, so "The" and "the" are counted apart.
    """
    counts: WordCounts = {}
    for line in lines:
        pos = 0
        while pos < len(line):
            word = next_word_or_separator(line, pos, separators)
            pos += len(word)
            if is_separator_run(word, separators):
                continue
            if word in counts:
                counts[word] += 1
            else:
                counts[word] = 1
    _LOGGER.debug("counted %d distinct words (%d total)", len(counts), sum(counts.values()))
    return counts


def word_counts_from_file(
    path: Union[str, Path],
    separators: AbstractSet[str],
    *,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> WordCounts:
    return word_counts_from_lines(read_lines(path, encoding=encoding, errors=errors), separators)
