"""Normalization of model-written text before it reaches readers."""

import re

_DASHES = re.compile("[\u2013\u2014]")  # en dash, em dash

_CATEGORY_PREFIXES = (
    re.compile(r"^\[.*?\]\s*"),  # [Real Estate Weekly]
    re.compile(r"^[\w\s]*DAILY BRIEF:\s*", re.IGNORECASE),  # Tribeca DAILY BRIEF:
    re.compile(r"^News Brief:\s*", re.IGNORECASE),
)


def strip_dashes(text: str) -> str:
    """Replace em and en dashes with a plain hyphen."""
    return _DASHES.sub("-", text)


def _has_prefix(text: str) -> bool:
    return any(pattern.match(text) for pattern in _CATEGORY_PREFIXES)


def _strip_one_prefix(text: str) -> str:
    for pattern in _CATEGORY_PREFIXES:
        if pattern.match(text):
            return pattern.sub("", text, count=1)
    return text


def strip_category_prefix(headline: str) -> str:
    """Remove leading category labels, e.g. "[Real Estate Weekly] Tribeca..." -> "Tribeca...".

    Stacked prefixes are removed until none remain. Headlines without a
    prefix are returned untouched.
    """
    current = headline.lstrip()
    if not _has_prefix(current):
        return headline
    while _has_prefix(current):
        current = _strip_one_prefix(current).strip()
    return current


def clean_headline(headline: str) -> str:
    return strip_category_prefix(strip_dashes(headline))
