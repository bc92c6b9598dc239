from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Union

_LOGGER = logging.getLogger("wordcounter.io.lines")


def read_lines(
    path: Union[str, Path],
    *,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> Iterator[str]:
    """
    Yield each line of ``path`` without its terminator.

    Universal newlines: "\\n", "\\r\\n" and a lone "\\r" all end a line.
    An empty file yields nothing; a last line lacking a terminator is still yielded.
    Undecodable bytes are handled per ``errors`` ("replace" by default), so a
    stray non-UTF-8 byte becomes U+FFFD instead of ending the run.
    File-level exceptions propagate.
    """
    n = 0
    with open(path, "r", encoding=encoding, errors=errors, newline=None) as f:
        for line in f:
            n += 1
            yield line[:-1] if line.endswith("\n") else line
    _LOGGER.debug("read %d lines from %s", n, path)
