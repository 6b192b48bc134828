"""
Configuration of non-teaching labels.

Users type the labels as one comma-separated string, e.g. "Prep, Lunch, Duty".
The parsed form is an ordered tuple of lowercase labels: the order matters
because typo detection reports the first label that is close enough.
"""

from __future__ import annotations

from typing import Iterable, Optional

DEFAULT_NON_TEACHING_LABELS = "Prep, Lunch, Duty"


def clean_labels(labels: Iterable[str]) -> tuple[str, ...]:
    """
    Trim and lowercase labels, dropping empty and repeated ones (first position kept).
    """
    out: list[str] = []
    for raw in labels:
        label = raw.strip().lower()
        if label and label not in out:
            out.append(label)
    return tuple(out)


def parse_non_teaching_labels(text: Optional[str]) -> tuple[str, ...]:
    """
    Split a comma-separated label string into cleaned labels.

    Empty entries (e.g. from a trailing comma) are dropped.
    """
    return clean_labels((text or "").split(","))
