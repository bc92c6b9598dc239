# wordcounter/pipeline.py
"""
Does:
    One full run: read input -> tokenize/count -> order -> render/write HTML.
Inputs:
    input_path, output_path, optional Config (defaults from configs/default.yaml)
Outputs:
    The HTML report at output_path, and a RunSummary.
Notes:
    - Each phase hands a fresh value to the next; nothing is mutated across phases.
    - Counting finishes before output_path is opened, so a failure while
      reading leaves no partial file behind.
    - I/O errors propagate unchanged.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Union

from wordcounter.config import Config, load_config
from wordcounter.counting.counter import word_counts_from_lines
from wordcounter.counting.order import ordered_keys
from wordcounter.io.lines import read_lines
from wordcounter.report.html import write_report
from wordcounter.types import RunSummary
from wordcounter.utils.timing import StageTimer

_LOGGER = logging.getLogger("wordcounter.pipeline")


class _LineTally:
    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = lines
        self.n = 0

    def __iter__(self) -> Iterator[str]:
        for line in self._lines:
            self.n += 1
            yield line


def count_words_to_html(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    cfg: Config | None = None,
) -> RunSummary:
    if cfg is None:
        cfg = load_config()
    separators = cfg.tokenizer.separator_set()
    timer = StageTimer()

    tally = _LineTally(read_lines(input_path, encoding=cfg.input.encoding, errors=cfg.input.errors))
    with timer.stage("count"):
        counts = word_counts_from_lines(tally, separators)

    with timer.stage("order"):
        ordered = ordered_keys(counts)

    with timer.stage("write"):
        with open(output_path, "w", encoding=cfg.report.encoding, newline="\n") as out:
            write_report(out, counts, ordered, str(input_path), escape=cfg.report.escape_html)

    summary = RunSummary(
        input_path=str(input_path),
        output_path=str(output_path),
        distinct_words=len(counts),
        total_words=sum(counts.values()),
        lines_read=tally.n,
        timings=timer.as_dict(),
    )
    _LOGGER.info(
        "counted %s: lines=%d words=%d distinct=%d -> %s (%.3fs)",
        summary.input_path, summary.lines_read, summary.total_words,
        summary.distinct_words, summary.output_path, timer.total(),
    )
    return summary
