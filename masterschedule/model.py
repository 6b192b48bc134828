"""
Central data model definitions used across the project.

This module defines the canonical structures that flow through the pipeline:

    raw rows -> ClassAssignment / DayAssignments -> TeacherRow -> Issue

so that the parser, normalizer, validator and CSV export share the same
field names.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

# Portion of the school year a course occupies (full year, semesters, quarters)
TERM_TYPES = ("FY", "S1", "S2", "Q1", "Q2", "Q3", "Q4")
DEFAULT_TERM_TYPE = "FY"

PREP = "Prep"

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"


@dataclass(frozen=True)
class ClassAssignment:
    """
    One course occupying one day-track of one period for one teacher.
    """

    course: str
    room: str = ""
    term_type: str = DEFAULT_TERM_TYPE


@dataclass
class DayAssignments:
    """
    Result of parsing one period cell.

    A course without a day flag is stored in both lists.
    """

    a_day: List[ClassAssignment] = field(default_factory=list)
    b_day: List[ClassAssignment] = field(default_factory=list)


@dataclass(frozen=True)
class PeriodColumn:
    raw_header: str

    @property
    def output_header_a(self) -> str:
        return f"{self.raw_header} A Day"

    @property
    def output_header_b(self) -> str:
        return f"{self.raw_header} B Day"


@dataclass
class TeacherRow:
    """
    One normalized teacher line: two formatted cells (A, B) per period column.
    """

    name: str
    department: str
    cells: List[str] = field(default_factory=list)

    @property
    def data(self) -> List[str]:
        """Row as exported: Department, Teacher, then the period cells."""
        return [self.department, self.name, *self.cells]


@dataclass(frozen=True)
class Issue:
    severity: str
    message: str


@dataclass
class NormalizedSchedule:
    headers: List[str]
    rows: List[TeacherRow]
    period_columns: List[PeriodColumn] = field(default_factory=list)
