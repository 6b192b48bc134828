import csv
import io
import tempfile
import unittest
from pathlib import Path

from masterschedule.export_csv import escape_csv_field, to_csv, write_csv
from masterschedule.model import TeacherRow


class TestEscapeCsvField(unittest.TestCase):
    def test_plain_field_is_bare(self) -> None:
        self.assertEqual(escape_csv_field("Algebra I (Room: 204)"), "Algebra I (Room: 204)")

    def test_quotes_and_commas(self) -> None:
        self.assertEqual(escape_csv_field('He said "hi", ok'), '"He said ""hi"", ok"')

    def test_newline_is_quoted(self) -> None:
        self.assertEqual(escape_csv_field("a\nb"), '"a\nb"')

    def test_csv_reader_recovers_original(self) -> None:
        original = 'He said "hi", ok'
        line = ",".join([escape_csv_field(original), "x"])
        parsed = next(csv.reader(io.StringIO(line)))
        self.assertEqual(parsed, [original, "x"])


class TestToCsv(unittest.TestCase):
    def test_header_and_rows_without_trailing_newline(self) -> None:
        headers = ["Department", "Teacher", "Period 1 A Day", "Period 1 B Day"]
        rows = [TeacherRow("Lee, Anna", "Math", ["Algebra I (Room: 204)", "Geometry (Room: 204)"])]
        text = to_csv(headers, rows)

        self.assertEqual(
            text,
            "Department,Teacher,Period 1 A Day,Period 1 B Day\n"
            'Math,"Lee, Anna",Algebra I (Room: 204),Geometry (Room: 204)',
        )
        self.assertFalse(text.endswith("\n"))


class TestWriteCsv(unittest.TestCase):
    def test_write_creates_parent_dirs(self) -> None:
        rows = [TeacherRow("Kim, Jo", "Art", ["Prep", "Prep"])]
        with tempfile.TemporaryDirectory() as d:
            out = Path(d) / "nested" / "master_schedule.csv"
            n = write_csv(["Department", "Teacher", "P1 A Day", "P1 B Day"], rows, out)
            self.assertEqual(n, 1)

            with out.open(encoding="utf-8", newline="") as fh:
                parsed = list(csv.reader(fh))
            self.assertEqual(parsed[1], ["Art", "Kim, Jo", "Prep", "Prep"])


if __name__ == "__main__":
    unittest.main()
