"""
Parsing (multi-line period cell -> A/B day assignments).

A period cell exported from the master schedule looks like:

    AP Statistics
          FY  Room:B208  Days:A
    Geometry
          FY  Room:B208  Days:B

Rules:
- a line followed by a line containing "Room:" or "Days:" is a course name,
  the next line holds its details (room, term type, day flag)
- a line without a details line is a course on both days
- no day flag means the course runs on both A and B days
- malformed cells never raise; missing details fall back to defaults
"""

from __future__ import annotations

import re
from typing import List, Optional

from masterschedule.model import DEFAULT_TERM_TYPE, ClassAssignment, DayAssignments


# ---------------------------------------------------------------------------
# Detail line patterns
# ---------------------------------------------------------------------------

_ROOM_RE = re.compile(r"Room:(\S+)")
_TERM_RE = re.compile(r"\b(FY|S1|S2|Q1|Q2|Q3|Q4)\b")
_DAYS_RE = re.compile(r"Days:\s*([AB])")

_DETAIL_MARKERS = ("Room:", "Days:")


def _is_details_line(line: str) -> bool:
    return any(marker in line for marker in _DETAIL_MARKERS)


def parse_details_line(course: str, details: str) -> tuple[ClassAssignment, Optional[str]]:
    """
    Parse a details line into an assignment plus its day flag ("A", "B" or None).

    Tokens are searched independently, so their order on the line does not matter.
    """
    room_match = _ROOM_RE.search(details)
    term_match = _TERM_RE.search(details)
    days_match = _DAYS_RE.search(details)

    assignment = ClassAssignment(
        course=course,
        room=room_match.group(1) if room_match else "",
        term_type=term_match.group(1) if term_match else DEFAULT_TERM_TYPE,
    )
    return assignment, days_match.group(1) if days_match else None


# ---------------------------------------------------------------------------
# Cell parsing (CORE LOGIC)
# ---------------------------------------------------------------------------


def parse_period_cell(cell_text: Optional[str]) -> DayAssignments:
    """
    Parse one raw period cell into A-day and B-day assignment lists.
    """
    result = DayAssignments()
    if not cell_text or not cell_text.strip():
        return result

    lines = cell_text.split("\n")

    i = 0
    while i < len(lines):
        line = lines[i]

        if i + 1 < len(lines) and _is_details_line(lines[i + 1]):
            assignment, day = parse_details_line(line.strip(), lines[i + 1])

            if day == "A":
                result.a_day.append(assignment)
            elif day == "B":
                result.b_day.append(assignment)
            else:
                result.a_day.append(assignment)
                result.b_day.append(assignment)
            i += 2
            continue

        course = line.strip()
        if course:
            assignment = ClassAssignment(course=course)
            result.a_day.append(assignment)
            result.b_day.append(assignment)
        i += 1

    return result


def format_day(assignments: List[ClassAssignment]) -> str:
    """
    Format a day track for export.

    Only the first assignment is kept: exported schedules hold one course
    per period-day cell. Returns "" for an empty track.
    """
    if not assignments:
        return ""

    first = assignments[0]
    if first.room:
        return f"{first.course} (Room: {first.room})"
    return first.course
