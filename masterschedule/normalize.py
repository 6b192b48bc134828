"""
Schedule normalization.

Turns loaded spreadsheet rows (one dict per teacher, header -> cell value) into
the canonical wide table:

    Department, Teacher, <Period> A Day, <Period> B Day, ...

Each detected period column expands into an A Day and a B Day column, in the
same left-to-right order as the source sheet.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Sequence

from masterschedule.columns import (
    DEPARTMENT_COLUMN_ALIASES,
    TEACHER_COLUMN_ALIASES,
    find_column,
    find_period_columns,
)
from masterschedule.config import clean_labels
from masterschedule.model import PREP, NormalizedSchedule, PeriodColumn, TeacherRow
from masterschedule.parse import format_day, parse_period_cell


BASE_HEADERS = ["Department", "Teacher"]


def _cell_text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def output_headers(period_columns: Iterable[PeriodColumn]) -> List[str]:
    headers = list(BASE_HEADERS)
    for col in period_columns:
        headers.append(col.output_header_a)
        headers.append(col.output_header_b)
    return headers


def normalize_cell(cell_value: Any, non_teaching: set[str] | frozenset[str]) -> tuple[str, str]:
    """
    Return the (A day, B day) strings for one period cell.
    """
    text = _cell_text(cell_value)

    # Whole cell is a non-teaching label -> skip the parser
    if text.lower() in non_teaching:
        return PREP, PREP

    days = parse_period_cell(text)
    return format_day(days.a_day) or PREP, format_day(days.b_day) or PREP


def normalize(
    table: Sequence[Mapping[str, Any]],
    non_teaching_labels: Iterable[str],
) -> NormalizedSchedule:
    """
    Normalize a loaded sheet into one TeacherRow per teacher.

    Rows without a teacher name are dropped silently.
    """
    if not table:
        return NormalizedSchedule(headers=list(BASE_HEADERS), rows=[], period_columns=[])

    non_teaching = frozenset(clean_labels(non_teaching_labels))

    headers = [str(h) for h in table[0].keys()]
    teacher_col = find_column(headers, TEACHER_COLUMN_ALIASES)
    dept_col = find_column(headers, DEPARTMENT_COLUMN_ALIASES)
    period_columns = find_period_columns(headers)

    rows: List[TeacherRow] = []
    for record in table:
        name = _cell_text(record.get(teacher_col)) if teacher_col else ""
        if not name:
            continue
        dept = _cell_text(record.get(dept_col)) if dept_col else ""

        cells: List[str] = []
        for col in period_columns:
            a_day, b_day = normalize_cell(record.get(col.raw_header), non_teaching)
            cells.append(a_day)
            cells.append(b_day)

        rows.append(TeacherRow(name=name, department=dept, cells=cells))

    return NormalizedSchedule(headers=output_headers(period_columns), rows=rows, period_columns=period_columns)
