"""
CSV export.

Writes the normalized schedule as:

    Department,Teacher,Period 1 A Day,Period 1 B Day,...
    Math,"Lee, Anna",Algebra I (Room: 204),Geometry (Room: 204),...

Minimal RFC 4180 escaping: a field is quoted only if it contains a comma,
a double quote or a line break; quotes inside are doubled. Lines are joined
with "\\n" and the text has no trailing newline.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from masterschedule.model import TeacherRow


def escape_csv_field(value: str) -> str:
    if any(ch in value for ch in (",", '"', "\n", "\r")):
        return '"' + value.replace('"', '""') + '"'
    return value


def _csv_line(fields: Sequence[str]) -> str:
    return ",".join(escape_csv_field(str(f)) for f in fields)


def to_csv(headers: Sequence[str], rows: Sequence[TeacherRow]) -> str:
    lines = [_csv_line(headers)]
    for row in rows:
        lines.append(_csv_line(row.data))
    return "\n".join(lines)


def write_csv(headers: Sequence[str], rows: Sequence[TeacherRow], out_path: str | Path) -> int:
    """
    Write the schedule to a CSV file. Returns number of teacher rows written.
    """
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    # newline="" keeps "\n" as-is on every platform
    with out.open("w", encoding="utf-8", newline="") as fh:
        fh.write(to_csv(headers, rows))
    return len(rows)
