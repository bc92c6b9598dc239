# wordcounter/report/html.py
"""
Does:
    Renders the word-count table as a fixed-structure HTML document.
Inputs:
    - counts: word -> count (read only)
    - ordered: the words to emit, in display order (each must be a key of counts)
    - input_name: shown in <title> and <h2>, verbatim
Outputs:
    - list of lines (no trailing newlines) or lines written to a text writer
Notes:
    - Markup is an external interface: whitespace and attribute spacing are
      reproduced exactly, including the space before '>' in <table border="1" >.
    - No escaping unless escape=True; the historical output is raw.
"""

from __future__ import annotations

import html
from typing import Iterable, Iterator, List, Mapping, TextIO


def _text(s: str, escape: bool) -> str:
    return html.escape(s, quote=False) if escape else s


def render_header(input_name: str, *, escape: bool = False) -> List[str]:
    name = _text(input_name, escape)
    return [
        "<html>",
        f"<head> <title> Words Counted in {name}</title> </head>",
        "<body>",
        f"<h2> Words Counted in {name}</h2>",
        "<hr />",
        '<table border="1" >',
        "<tr>",
        "<th> Words </th>",
        "<th> Counts </th>",
        "</tr>",
    ]


def render_rows(counts: Mapping[str, int], ordered: Iterable[str], *, escape: bool = False) -> Iterator[str]:
    for word in ordered:
        count = counts[word]
        yield "<tr>"
        yield f"<td> {_text(word, escape)} </td>"
        yield f"<td> {count} </td>"
        yield "</tr>"


def render_footer() -> List[str]:
    return [
        "</table>",
        "</body>",
        "</html>",
    ]


def render_report(
    counts: Mapping[str, int],
    ordered: Iterable[str],
    input_name: str,
    *,
    escape: bool = False,
) -> List[str]:
    lines = render_header(input_name, escape=escape)
    lines.extend(render_rows(counts, ordered, escape=escape))
    lines.extend(render_footer())
    return lines


def write_report(
    out: TextIO,
    counts: Mapping[str, int],
    ordered: Iterable[str],
    input_name: str,
    *,
    escape: bool = False,
) -> int:
    """Write the full document to ``out``, one line per call. Returns number of lines written."""
    n = 0
    for line in render_report(counts, ordered, input_name, escape=escape):
        out.write(line + "\n")
        n += 1
    return n
