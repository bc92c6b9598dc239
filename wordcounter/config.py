# wordcounter/config.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

_LOGGER = logging.getLogger("wordcounter.config")

_LINE_TERMINATORS = {"\n", "\r"}


class TokenizerCfg(BaseModel):
    separators: list[str] = Field(
        default_factory=lambda: [" ", ",", ".", "-"],
        description="characters that split words; each entry is one char",
    )

    model_config = ConfigDict(extra="ignore")

    @field_validator("separators")
    @classmethod
    def _single_chars(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("separators must not be empty")
        out: list[str] = []
        for ch in v:
            if not isinstance(ch, str) or len(ch) != 1:
                raise ValueError(f"separator must be exactly one character, got {ch!r}")
            if ch not in out:
                out.append(ch)
        return out

    def separator_set(self) -> frozenset[str]:
        return frozenset(self.separators)


class InputCfg(BaseModel):
    encoding: str = "utf-8"
    errors: str = "replace"  # codec error handler for undecodable input bytes

    model_config = ConfigDict(extra="ignore")

    @field_validator("encoding", "errors")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("value must be non-empty")
        return v.strip()


class ReportCfg(BaseModel):
    encoding: str = "utf-8"
    escape_html: bool = False  # raw words by default (historical output)

    model_config = ConfigDict(extra="ignore")

    @field_validator("encoding")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("encoding must be non-empty")
        return v.strip()


class PathsCfg(BaseModel):
    logs_dir: Path = Path("artifacts/logs")

    model_config = ConfigDict(extra="ignore")

    def ensure(self) -> None:
        self.logs_dir.mkdir(parents=True, exist_ok=True)


class Config(BaseModel):
    tokenizer: TokenizerCfg = TokenizerCfg()
    input: InputCfg = InputCfg()
    report: ReportCfg = ReportCfg()
    paths: PathsCfg = PathsCfg()
    model_config = ConfigDict(extra="ignore")


# --- Back-compat for flat YAML ---
_FLAT_KEYS = {"separators"}


def _normalize_data(data: dict[str, Any]) -> dict[str, Any]:
    if not data:
        return {}
    data = dict(data)
    flat = {k: data.pop(k) for k in list(data.keys()) if k in _FLAT_KEYS}
    if flat:
        data.setdefault("tokenizer", {}).update(flat)
    return data


def load_config(path: str | None = "configs/default.yaml") -> Config:
    data: dict[str, Any] = {}
    if path:
        p = Path(path)
        if p.exists():
            try:
                with p.open("r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise RuntimeError(f"Failed to parse YAML at {path}: {e}") from e
        else:
            _LOGGER.debug("config %s not found; using defaults", path)
    data = _normalize_data(data)
    return Config(**data)


# --- env overrides + validation ---

def _cast_bool(val: str) -> bool:
    s = str(val).strip().lower()
    if s in ("1", "true", "yes", "y", "on"):
        return True
    if s in ("0", "false", "no", "n", "off"):
        return False
    raise ValueError(f"not a boolean: {val!r}")


def apply_env_overrides(cfg: Config) -> None:
    """
    Override knobs from environment variables.
    Supported:
      WC_SEPARATORS       every char of the value becomes a separator (e.g. " ,.-;")
      WC_INPUT_ENCODING   encoding used to read the input file
      WC_INPUT_ERRORS     codec error handler for the input (replace, ignore, strict, ...)
      WC_REPORT_ENCODING  encoding used to write the HTML report
      WC_ESCAPE_HTML      1/0, true/false, yes/no: escape words in the report
    A value that does not validate is logged and skipped.
    """
    import os

    raw = os.getenv("WC_SEPARATORS")
    if raw is not None:
        try:
            cfg.tokenizer = TokenizerCfg(separators=list(raw))
        except ValidationError as e:
            _LOGGER.warning("Ignoring WC_SEPARATORS=%r: %s", raw, e)

    raw = os.getenv("WC_INPUT_ENCODING")
    if raw is not None:
        try:
            cfg.input = InputCfg(encoding=raw, errors=cfg.input.errors)
        except ValidationError as e:
            _LOGGER.warning("Ignoring WC_INPUT_ENCODING=%r: %s", raw, e)

    raw = os.getenv("WC_INPUT_ERRORS")
    if raw is not None:
        try:
            cfg.input = InputCfg(encoding=cfg.input.encoding, errors=raw)
        except ValidationError as e:
            _LOGGER.warning("Ignoring WC_INPUT_ERRORS=%r: %s", raw, e)

    raw = os.getenv("WC_REPORT_ENCODING")
    if raw is not None:
        try:
            cfg.report = ReportCfg(encoding=raw, escape_html=cfg.report.escape_html)
        except ValidationError as e:
            _LOGGER.warning("Ignoring WC_REPORT_ENCODING=%r: %s", raw, e)

    raw = os.getenv("WC_ESCAPE_HTML")
    if raw is not None:
        try:
            cfg.report.escape_html = _cast_bool(raw)
        except ValueError as e:
            _LOGGER.warning("Ignoring WC_ESCAPE_HTML: %s", e)


def validate_config(cfg: Config) -> None:
    """
    Sanity checks:
      - at least one separator survives line splitting (terminators never reach the tokenizer)
      - encodings are known to the codec registry
      - input.errors names a registered codec error handler
    Raises ValueError with a precise message if violated.
    """
    import codecs

    usable = set(cfg.tokenizer.separators) - _LINE_TERMINATORS
    if not usable:
        raise ValueError(
            f"Config invalid: separators {cfg.tokenizer.separators!r} contain only line terminators"
        )
    for section, enc in (("input", cfg.input.encoding), ("report", cfg.report.encoding)):
        try:
            codecs.lookup(enc)
        except LookupError:
            raise ValueError(f"Config invalid: {section}.encoding={enc!r} is not a known codec") from None
    try:
        codecs.lookup_error(cfg.input.errors)
    except LookupError:
        raise ValueError(f"Config invalid: input.errors={cfg.input.errors!r} is not a known error handler") from None
