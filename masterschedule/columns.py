"""
Column mapping.

Header names in uploaded schedules are free text, so the teacher and
department columns are located through alias lists (first alias that
matches wins), and period columns by the word "period" anywhere in the header.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from masterschedule.model import PeriodColumn


TEACHER_COLUMN_ALIASES = ("Teacher Name", "Teacher", "Name", "Staff", "Staff Name", "Instructor")
DEPARTMENT_COLUMN_ALIASES = ("Department", "Dept", "Subject", "Subject Area")


def _key(text: str) -> str:
    return text.strip().lower()


def find_column(headers: Iterable[str], candidate_names: Sequence[str]) -> Optional[str]:
    """
    Return the original header matching the first candidate (case-insensitive,
    trimmed), or None.
    """
    by_key: dict[str, str] = {}
    for h in headers:
        # later header wins if two normalize to the same key
        by_key[_key(h)] = h

    for name in candidate_names:
        match = by_key.get(_key(name))
        if match is not None:
            return match
    return None


def find_period_columns(headers: Iterable[str]) -> List[PeriodColumn]:
    """
    All headers containing "period" (any case), in source column order.
    """
    return [PeriodColumn(raw_header=h) for h in headers if "period" in h.lower()]
