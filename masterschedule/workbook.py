"""
Spreadsheet loading (.xlsx / .csv -> list of row dicts).

The first row of a sheet is the header row. Every data row becomes a dict
with one entry per header, so downstream code can look up cells by header:

- blank header cells are named "__EMPTY", "__EMPTY_1", ...
- repeated headers get a suffix: "Period 1", "Period 1_1", ...
- missing cells default to ""
- fully blank rows are skipped
"""

from __future__ import annotations

import csv
import zipfile
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException


EXCEL_SUFFIXES = (".xlsx", ".xlsm")
CSV_SUFFIXES = (".csv",)


class WorkbookError(Exception):
    """Raised when a schedule file cannot be opened or read."""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _cell_to_str(value: Any) -> str:
    if value is None:
        return ""
    # 204.0 -> "204" (room numbers typed as numbers in Excel)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _unique_headers(raw: Sequence[Any]) -> List[str]:
    headers: List[str] = []
    seen: dict[str, int] = {}
    for value in raw:
        base = _cell_to_str(value).strip() or "__EMPTY"
        count = seen.get(base, 0)
        seen[base] = count + 1
        headers.append(base if count == 0 else f"{base}_{count}")
    return headers


def rows_to_records(rows: Iterable[Sequence[Any]]) -> List[dict[str, str]]:
    """
    Convert raw sheet rows (first row = header) into header -> text dicts.
    """
    it = iter(rows)
    header_row = next(it, None)
    if header_row is None:
        return []
    headers = _unique_headers(header_row)

    records: List[dict[str, str]] = []
    for row in it:
        values = [_cell_to_str(v) for v in (row or ())]
        if not any(v.strip() for v in values):
            continue
        values += [""] * (len(headers) - len(values))
        records.append({h: values[i] for i, h in enumerate(headers)})
    return records


def _check_exists(path: Path) -> None:
    if not path.exists():
        raise WorkbookError(f"File not found: {path}")


def _open_workbook(path: Path):
    _check_exists(path)
    try:
        return openpyxl.load_workbook(str(path), read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, OSError, KeyError, ValueError) as e:
        raise WorkbookError(f"Error reading workbook {path.name}: {e}") from e


def _suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in EXCEL_SUFFIXES + CSV_SUFFIXES:
        raise WorkbookError(f"Unsupported file type: {path.suffix or '(none)'} (expected .xlsx or .csv)")
    return suffix


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def list_sheets(path: str | Path) -> List[str]:
    """
    Sheet names of a workbook. A CSV file has one sheet named after the file.
    """
    p = Path(path)
    if _suffix(p) in CSV_SUFFIXES:
        _check_exists(p)
        return [p.stem]

    wb = _open_workbook(p)
    try:
        return list(wb.sheetnames)
    finally:
        wb.close()


def load_rows(path: str | Path, sheet: Optional[str] = None) -> List[dict[str, str]]:
    """
    Load one sheet (default: the first) as a list of row dicts.
    """
    p = Path(path)
    if _suffix(p) in CSV_SUFFIXES:
        _check_exists(p)
        if sheet is not None and sheet != p.stem:
            raise WorkbookError(f"Sheet not found: {sheet!r} (available: {p.stem!r})")
        try:
            with p.open(encoding="utf-8-sig", newline="") as fh:
                return rows_to_records(csv.reader(fh))
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise WorkbookError(f"Error reading CSV {p.name}: {e}") from e

    wb = _open_workbook(p)
    try:
        if sheet is None:
            ws = wb.worksheets[0]
        elif sheet in wb.sheetnames:
            ws = wb[sheet]
        else:
            available = ", ".join(repr(n) for n in wb.sheetnames)
            raise WorkbookError(f"Sheet not found: {sheet!r} (available: {available})")
        return rows_to_records(ws.iter_rows(values_only=True))
    finally:
        wb.close()
