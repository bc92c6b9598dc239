# scripts/count_words.py
"""
Interactive word counter:
- Prompts for the input text file and the output HTML file (unless given as flags)
- Counts words (case-sensitive), lists them case-insensitively sorted in an HTML table
- Config from YAML (--config) + WC_* env overrides; --separators wins over both
- Optional run-summary trace row (JSONL) with --trace / --trace_out
- Prints "Done." when finished
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Sequence

from wordcounter.config import TokenizerCfg, apply_env_overrides, load_config, validate_config
from wordcounter.logging.traces import emit_trace
from wordcounter.pipeline import count_words_to_html

# ---------------- logging config ----------------
logging.basicConfig(
    level=os.environ.get("WC_LOGLEVEL", "WARNING"),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)

INPUT_PROMPT = "Enter name of inputFile: "
OUTPUT_PROMPT = "Enter name of output HTML file: "


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Count words in a text file and write an HTML table.")
    ap.add_argument("--input", type=str, default=None, help="Input text file (prompted if omitted)")
    ap.add_argument("--output", type=str, default=None, help="Output HTML file (prompted if omitted)")
    ap.add_argument("--config", type=str, default="configs/default.yaml")
    ap.add_argument("--separators", type=str, default=None,
                    help="Every character of this string is a separator (overrides config)")
    ap.add_argument("--trace", action="store_true", help="Append a run summary to <logs_dir>/runs.jsonl")
    ap.add_argument("--trace_out", type=str, default=None, help="Append a run summary to this JSONL file")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    log = logging.getLogger("wordcounter.cli")

    cfg = load_config(args.config)
    apply_env_overrides(cfg)
    if args.separators is not None:
        cfg.tokenizer = TokenizerCfg(separators=list(args.separators))
    validate_config(cfg)
    log.debug("CONFIG separators=%r input.encoding=%s input.errors=%s report.encoding=%s escape_html=%s",
              cfg.tokenizer.separators, cfg.input.encoding, cfg.input.errors, cfg.report.encoding, cfg.report.escape_html)

    input_path = args.input if args.input is not None else input(INPUT_PROMPT)
    output_path = args.output if args.output is not None else input(OUTPUT_PROMPT)

    summary = count_words_to_html(input_path, output_path, cfg)

    trace_out = args.trace_out
    if trace_out is None and args.trace:
        cfg.paths.ensure()
        trace_out = str(cfg.paths.logs_dir / "runs.jsonl")
    if trace_out:
        emit_trace(summary.as_dict(), trace_out)
        log.info("trace appended to %s", trace_out)

    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
