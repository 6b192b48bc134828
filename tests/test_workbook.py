"""
Tests for spreadsheet loading.

Workbooks are built on the fly with openpyxl inside a temporary directory.
"""

import tempfile
import unittest
from pathlib import Path

import openpyxl

from masterschedule.workbook import WorkbookError, list_sheets, load_rows, rows_to_records


def _write_workbook(path: Path, sheets: dict) -> None:
    wb = openpyxl.Workbook()
    wb.remove(wb.active)
    for name, rows in sheets.items():
        ws = wb.create_sheet(name)
        for row in rows:
            ws.append(row)
    wb.save(path)


class TestRowsToRecords(unittest.TestCase):
    def test_blank_and_duplicate_headers(self) -> None:
        records = rows_to_records([["Teacher", None, "Period 1", "Period 1"], ["Lee", "x", "Art", "Band"]])
        self.assertEqual(
            records,
            [{"Teacher": "Lee", "__EMPTY": "x", "Period 1": "Art", "Period 1_1": "Band"}],
        )

    def test_short_rows_are_padded_and_blank_rows_skipped(self) -> None:
        records = rows_to_records([("Teacher", "Period 1"), ("Lee",), (None, ""), ()])
        self.assertEqual(records, [{"Teacher": "Lee", "Period 1": ""}])

    def test_integral_floats_lose_decimal(self) -> None:
        records = rows_to_records([("Teacher", "Room"), ("Lee", 204.0)])
        self.assertEqual(records[0]["Room"], "204")

    def test_empty_input(self) -> None:
        self.assertEqual(rows_to_records([]), [])


class TestLoadWorkbook(unittest.TestCase):
    def test_xlsx_first_sheet_by_default(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "schedule.xlsx"
            _write_workbook(
                p,
                {
                    "Master": [
                        ["Department", "Teacher", "Period 1"],
                        ["Math", "Lee, Anna", "Algebra I\n  FY  Room:204  Days:A"],
                    ],
                    "Other": [["Teacher"], ["Kim, Jo"]],
                },
            )
            self.assertEqual(list_sheets(p), ["Master", "Other"])

            rows = load_rows(p)
            self.assertEqual(rows[0]["Teacher"], "Lee, Anna")
            self.assertEqual(rows[0]["Period 1"], "Algebra I\n  FY  Room:204  Days:A")

            self.assertEqual(load_rows(p, "Other"), [{"Teacher": "Kim, Jo"}])

    def test_unknown_sheet(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "schedule.xlsx"
            _write_workbook(p, {"Master": [["Teacher"]]})
            with self.assertRaises(WorkbookError):
                load_rows(p, "Nope")

    def test_csv_input(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "export.csv"
            p.write_text('Teacher,Period 1\n"Lee, Anna","Art I\n FY Room:701"\n', encoding="utf-8")
            self.assertEqual(list_sheets(p), ["export"])
            self.assertEqual(load_rows(p), [{"Teacher": "Lee, Anna", "Period 1": "Art I\n FY Room:701"}])

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(WorkbookError):
                load_rows(Path(d) / "missing.xlsx")

    def test_unsupported_extension(self) -> None:
        with self.assertRaises(WorkbookError):
            list_sheets("schedule.pdf")


if __name__ == "__main__":
    unittest.main()
