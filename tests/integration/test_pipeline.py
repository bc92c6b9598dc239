from __future__ import annotations

import pytest

from wordcounter.config import Config, TokenizerCfg
from wordcounter.pipeline import count_words_to_html

HEADER = [
    "<html>",
    None,  # title line, checked separately
    "<body>",
    None,  # h2 line
    "<hr />",
    '<table border="1" >',
    "<tr>",
    "<th> Words </th>",
    "<th> Counts </th>",
    "</tr>",
]
FOOTER = ["</table>", "</body>", "</html>"]


def _read(path):
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _rows(lines):
    body = lines[len(HEADER):-len(FOOTER)]
    assert len(body) % 4 == 0
    out = []
    for i in range(0, len(body), 4):
        tr, w, c, end = body[i:i + 4]
        assert (tr, end) == ("<tr>", "</tr>")
        out.append((w[len("<td> "):-len(" </td>")], int(c[len("<td> "):-len(" </td>")])))
    return out


def test_end_to_end_scenario(text_file, tmp_path):
    src = text_file("The cat sat, the Cat ran.\n")
    dst = str(tmp_path / "out.html")
    summary = count_words_to_html(src, dst, Config())

    text = _read(dst)
    assert text.endswith("</html>\n")
    assert "\r" not in text
    lines = text.split("\n")[:-1]
    assert lines[1] == f"<head> <title> Words Counted in {src}</title> </head>"
    assert lines[3] == f"<h2> Words Counted in {src}</h2>"
    assert lines[-3:] == FOOTER
    assert _rows(lines) == [("Cat", 1), ("cat", 1), ("ran", 1), ("sat", 1), ("The", 1), ("the", 1)]

    assert summary.distinct_words == 6
    assert summary.total_words == 6
    assert summary.lines_read == 1
    assert set(summary.timings) == {"count", "order", "write"}


def test_empty_input_gives_header_and_footer(text_file, tmp_path):
    src = text_file("")
    dst = str(tmp_path / "out.html")
    summary = count_words_to_html(src, dst, Config())
    lines = _read(dst).split("\n")[:-1]
    assert len(lines) == len(HEADER) + len(FOOTER)
    assert _rows(lines) == []
    assert (summary.distinct_words, summary.total_words, summary.lines_read) == (0, 0, 0)


def test_multiline_counts_and_custom_separators(text_file, tmp_path):
    src = text_file("b;a;b\r\nB;;a\n;\n")
    dst = str(tmp_path / "out.html")
    cfg = Config(tokenizer=TokenizerCfg(separators=[";"]))
    summary = count_words_to_html(src, dst, cfg)
    assert _rows(_read(dst).split("\n")[:-1]) == [("a", 2), ("B", 1), ("b", 2)]
    assert summary.lines_read == 3
    assert summary.total_words == 5


def test_rerun_is_byte_identical(text_file, tmp_path):
    src = text_file("one two two three three three\n")
    a, b = str(tmp_path / "a.html"), str(tmp_path / "b.html")
    count_words_to_html(src, a, Config())
    count_words_to_html(src, b, Config())
    assert _read(a) == _read(b)


def test_missing_input_propagates_and_writes_nothing(tmp_path):
    dst = tmp_path / "out.html"
    with pytest.raises(FileNotFoundError):
        count_words_to_html(str(tmp_path / "missing.txt"), str(dst), Config())
    assert not dst.exists()


def test_unwritable_output_propagates(text_file, tmp_path):
    src = text_file("x\n")
    with pytest.raises(OSError):
        count_words_to_html(src, str(tmp_path / "no" / "such" / "dir" / "out.html"), Config())


def test_escape_html_flag(text_file, tmp_path):
    src = text_file("<i> & <i>\n")
    dst = str(tmp_path / "out.html")
    cfg = Config()
    cfg.report.escape_html = True
    count_words_to_html(src, dst, cfg)
    text = _read(dst)
    assert "<td> &lt;i&gt; </td>" in text
    assert "<td> &amp; </td>" in text
