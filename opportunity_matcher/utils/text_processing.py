"""Skill normalization, list parsing, and small text/number utilities."""

import math
from typing import Iterable, Optional


def normalize_skill(skill: str) -> str:
    """Normalize a skill string for comparison (trimmed, lowercase)."""
    return skill.strip().lower()


def split_skills_text(text: Optional[str]) -> list[str]:
    """Split a comma-separated skills string into normalized, non-empty tokens."""
    if not text:
        return []
    tokens = (normalize_skill(part) for part in text.split(","))
    return [token for token in tokens if token]


def clean_text(value: Optional[str]) -> Optional[str]:
    """Trim a string, returning None for empty or whitespace-only values."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def dedupe_preserving_order(items: Iterable[str]) -> list[str]:
    """Drop case-insensitive duplicates, keeping the first occurrence."""
    seen: set[str] = set()
    result = []
    for item in items:
        key = normalize_skill(item)
        if key and key not in seen:
            seen.add(key)
            result.append(item)
    return result


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero (68.5 -> 69, -0.5 -> -1).

    Python's round() uses banker's rounding, which would score 62.5 as 62.
    """
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def summarize_list(items: list[str], limit: int = 3) -> str:
    """Join the first ``limit`` items, noting how many were left out."""
    text = ", ".join(items[:limit])
    if len(items) > limit:
        text += f", +{len(items) - limit} more"
    return text


def pluralize(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"
