# cloudpack/core/io.py
"""
Load word lists from JSON or CSV.
JSON: a list of {"text", "value", "color"?} objects, or a {text: value} mapping.
CSV: header with text and value columns (color optional).
Non-numeric values become 0; blank texts are skipped.
"""

from __future__ import annotations

import csv
import json
import math
import re
from pathlib import Path
from typing import Any, Iterable

from cloudpack.core.types import WordInput

_TOKEN_RE = re.compile(r"\w+", re.UNICODE)


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def coerce_value(raw: Any) -> float:
    """float(raw), or 0.0 when raw is missing, non-numeric or not finite."""
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


def _word_from_record(record: Any) -> WordInput | None:
    if not isinstance(record, dict):
        raise ValueError(f"Expected an object with text and value, got {type(record).__name__}")
    text = str(record.get("text") or "").strip()
    if not text:
        return None
    color = record.get("color") or None
    return WordInput(text=text, value=coerce_value(record.get("value")), color=color)


def parse_words_json(data: Any) -> list[WordInput]:
    """Words from parsed JSON: list of records or {text: value} mapping."""
    if isinstance(data, dict):
        items = [{"text": k, "value": v} for k, v in data.items()]
    elif isinstance(data, list):
        items = data
    else:
        raise ValueError("Word JSON must be a list of objects or a text->value mapping")
    out: list[WordInput] = []
    for record in items:
        word = _word_from_record(record)
        if word is not None:
            out.append(word)
    return out


def parse_words_csv(lines: Iterable[str]) -> list[WordInput]:
    """Words from CSV lines with a header containing text and value."""
    reader = csv.DictReader(lines)
    fields = [f.strip().lower() for f in (reader.fieldnames or [])]
    if "text" not in fields or "value" not in fields:
        raise ValueError("Word CSV needs 'text' and 'value' columns")
    out: list[WordInput] = []
    for row in reader:
        record = {(k or "").strip().lower(): v for k, v in row.items()}
        word = _word_from_record(record)
        if word is not None:
            out.append(word)
    return out


def tokenize_words(words: Iterable[WordInput]) -> list[WordInput]:
    """
    Split each text into lower-cased word tokens and sum values per token,
    keeping first-seen order. A token keeps the colour of its first occurrence.
    """
    totals: dict[str, float] = {}
    colors: dict[str, str | None] = {}
    for word in words:
        for token in _TOKEN_RE.findall(word.text.lower()):
            totals[token] = totals.get(token, 0.0) + word.value
            colors.setdefault(token, word.color)
    return [WordInput(text=t, value=v, color=colors[t]) for t, v in totals.items()]


def load_words(
    path: str | Path,
    repo_root: Path | None = None,
    tokenize: bool = False,
) -> list[WordInput]:
    """
    Load words from a .json or .csv file.
    Raises FileNotFoundError if path is missing, ValueError if content is invalid.
    """
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Word file not found: {resolved}")
    suffix = resolved.suffix.lower()
    if suffix == ".json":
        try:
            data = json.loads(resolved.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {resolved}: {e}") from e
        words = parse_words_json(data)
    elif suffix == ".csv":
        with open(resolved, newline="", encoding="utf-8") as f:
            words = parse_words_csv(f)
    else:
        raise ValueError(f"Unsupported word file type: {suffix or '(none)'}")
    return tokenize_words(words) if tokenize else words
