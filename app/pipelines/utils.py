"""
Shared helpers for the landscape aggregators.
app/pipelines/utils.py
"""

from __future__ import annotations

import os
import re
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, TypeVar

MIN_YEAR = int(os.getenv("PATENT_MIN_YEAR", "2000"))
MAX_YEAR = int(os.getenv("PATENT_MAX_YEAR", "2030"))

# Owner labels that mean "no owner recorded"
MISSING_LABELS = {"", "none", "null", "unknown", "nan", "n/a"}

_QUOTES_RE = re.compile(r"""^["']+|["']+$""")
_NUMBER_NOISE_RE = re.compile(r"""[,"'\s]""")
_LEADING_INT_RE = re.compile(r"^[+-]?\d+")

T = TypeVar("T")


def clean_label(value: Any) -> str:
    """Trim and strip surrounding quotes from an owner/assignee/inventor label."""
    if value is None:
        return ""
    return _QUOTES_RE.sub("", str(value).strip()).strip()


def clean_classification_code(value: Any) -> str:
    """
    Keep only the code part of a classification label.

    'G06F: Electric digital data processing' -> 'G06F'
    """
    cleaned = clean_label(value)
    if ":" in cleaned:
        return cleaned.split(":", 1)[0].strip()
    return cleaned


def parse_count(value: Any) -> int:
    """
    Parse an exported count cell into a non-negative int.

    Thousands separators and quotes are ignored; trailing text after the
    leading integer is dropped ('12.0' -> 12). Anything unparseable is 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        return max(int(value), 0) if value == value else 0

    text = _NUMBER_NOISE_RE.sub("", str(value))
    match = _LEADING_INT_RE.match(text)
    if not match:
        return 0
    return max(int(match.group(0)), 0)


def parse_year(value: Any, min_year: int = MIN_YEAR, max_year: int = MAX_YEAR) -> Optional[int]:
    """Return the value as a year if it is an integer inside [min_year, max_year]."""
    text = str(value).strip() if value is not None else ""
    if not re.fullmatch(r"\d{4}(\.0+)?", text):
        return None
    year = int(text.split(".", 1)[0])
    if min_year <= year <= max_year:
        return year
    return None


def is_missing_label(label: str) -> bool:
    return label.strip().lower() in MISSING_LABELS


def get_field(row: Mapping[str, Any], *names: str, default: str = "") -> str:
    """
    Case-insensitive column lookup.

    get_field(row, "Assignee") matches 'Assignee', 'assignee' or 'ASSIGNEE'.
    The first name that matches wins.
    """
    lowered = {str(k).strip().lower(): k for k in row.keys()}
    for name in names:
        key = lowered.get(name.lower())
        if key is not None:
            value = row[key]
            return "" if value is None else str(value)
    return default


def find_column(keys: Sequence[str], candidates: Iterable[str], fallback_index: Optional[int] = None) -> Optional[str]:
    """
    Pick the first key that equals (case-insensitive) one of the candidates,
    then the first key containing one, then keys[fallback_index].
    """
    candidates = [c.lower() for c in candidates]
    lowered = [(k, k.strip().lower()) for k in keys]

    for candidate in candidates:
        for key, low in lowered:
            if low == candidate:
                return key
    for candidate in candidates:
        for key, low in lowered:
            if candidate in low:
                return key

    if fallback_index is not None and len(keys) > fallback_index:
        return keys[fallback_index]
    return None


def rank_desc(items: List[Tuple[T, int]]) -> List[Tuple[T, int]]:
    """Sort (item, total) pairs by total descending; ties keep input order."""
    return sorted(items, key=lambda pair: pair[1], reverse=True)
