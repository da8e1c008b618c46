"""Filename cleaning for published assets."""

import re
from pathlib import Path


OUTPUT_EXTENSION = ".webp"

# Unicode spaces and BOM; \x1c-\x1f are not separators
_WHITESPACE = "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

# Applied in order
_STRIP_PUNCTUATION = re.compile(r"['\"’`()%&?]")
_SEPARATORS = re.compile(f"[{_WHITESPACE}_]+")
_DISALLOWED = re.compile(r"[^a-zA-Z0-9\-.]")
_HYPHEN_RUNS = re.compile(r"-+")


def clean_filename(stem: str) -> str:
    """Turn an arbitrary file stem into a URL-safe one.

    Quotes, backticks, parentheses, ``%``, ``&`` and ``?`` are dropped,
    whitespace and underscores become hyphens, anything outside
    ``[a-zA-Z0-9.-]`` is removed, and hyphen runs are collapsed and trimmed.

    Args:
        stem: Filename without its extension.

    Returns:
        Cleaned stem. May be empty if nothing usable remains.
    """
    cleaned = _STRIP_PUNCTUATION.sub("", stem)
    cleaned = _SEPARATORS.sub("-", cleaned)
    cleaned = _DISALLOWED.sub("", cleaned)
    cleaned = _HYPHEN_RUNS.sub("-", cleaned)
    return cleaned.strip("-")


def output_filename(source: Path) -> str:
    """WebP filename for a source image, regardless of its extension."""
    return f"{clean_filename(source.stem)}{OUTPUT_EXTENSION}"
