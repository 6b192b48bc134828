"""
Validation of a normalized schedule.

Checks (all collected, never short-circuited):
- missing teacher name                (error)
- duplicate teacher, case-insensitive (warning, 2nd+ occurrence)
- all-prep schedule                   (warning)
- possible typo of a non-teaching label, Levenshtein distance 1..2
  (warning, at most once per distinct cell text)

Any error blocks the CSV export; warnings are informational.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence

from masterschedule.config import clean_labels
from masterschedule.model import PREP, SEVERITY_ERROR, SEVERITY_WARNING, Issue, TeacherRow


ROOM_MARKER = "(Room:"
MAX_TYPO_DISTANCE = 2


def levenshtein(a: str, b: str) -> int:
    """
    Edit distance with unit-cost insert, delete and substitute.
    """
    # dp[i][j] = distance between a[:i] and b[:j]
    dp = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        dp[i][0] = i
    for j in range(len(b) + 1):
        dp[0][j] = j

    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,
                dp[i][j - 1] + 1,
                dp[i - 1][j - 1] + cost,
            )

    return dp[len(a)][len(b)]


def _is_all_prep(row: TeacherRow) -> bool:
    if any(ROOM_MARKER.lower() in c.lower() for c in row.data):
        return False
    return all(c == PREP or c == "" for c in row.cells)


def _typo_candidates(rows: Sequence[TeacherRow]) -> List[str]:
    """Distinct cell texts without a room that are not Prep, first-seen order."""
    seen: dict[str, None] = {}
    for row in rows:
        for cell in row.cells:
            if cell and ROOM_MARKER not in cell and cell != PREP:
                seen.setdefault(cell, None)
    return list(seen)


def find_label_typo(text: str, labels: Sequence[str]) -> str | None:
    """
    Return the first label within typo distance of text, or None.

    Distance 0 means the text is the label itself, which is not a typo.
    """
    lowered = text.lower()
    for label in labels:
        dist = levenshtein(lowered, label)
        if 0 < dist <= MAX_TYPO_DISTANCE:
            return label
    return None


def validate(rows: Sequence[TeacherRow], non_teaching_labels: Iterable[str]) -> List[Issue]:
    """
    Collect all issues of a normalized schedule, row checks first, then typos.

    Labels are cleaned the same way as the configured label string, so an
    empty label never turns short course names into typos.
    """
    issues: List[Issue] = []
    labels = clean_labels(non_teaching_labels)

    seen_teachers: set[str] = set()
    for row in rows:
        if not row.name or not row.name.strip():
            issues.append(Issue(SEVERITY_ERROR, "Missing teacher name in one row"))

        name_key = (row.name or "").lower()
        if name_key in seen_teachers:
            issues.append(Issue(SEVERITY_WARNING, f"Duplicate teacher: {row.name}"))
        seen_teachers.add(name_key)

        if _is_all_prep(row):
            issues.append(Issue(SEVERITY_WARNING, f"All-prep schedule: {row.name}"))

    for cell in _typo_candidates(rows):
        label = find_label_typo(cell, labels)
        if label is not None:
            issues.append(Issue(SEVERITY_WARNING, f'Possible typo: "{cell}" (similar to "{label}")'))

    return issues


def has_errors(issues: Iterable[Issue]) -> bool:
    """True if any issue blocks the export."""
    return any(i.severity == SEVERITY_ERROR for i in issues)


def count_by_severity(issues: Iterable[Issue]) -> Counter:
    return Counter(i.severity for i in issues)
