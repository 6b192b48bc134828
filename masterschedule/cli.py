"""
CLI (Command Line Interface).

Commands:

    masterschedule sheets <file.xlsx>
    masterschedule validate <file.xlsx> [--sheet NAME] [--labels "Prep, Lunch"]
    masterschedule parse <file.xlsx> [--sheet NAME] [--labels ...] [--out out.csv] [--force]

`parse` runs the whole pipeline: load -> normalize -> validate -> review -> CSV.
The CSV is only written when validation found no errors (unless --force).
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from masterschedule.config import DEFAULT_NON_TEACHING_LABELS, parse_non_teaching_labels
from masterschedule.export_csv import write_csv
from masterschedule.model import PREP, SEVERITY_ERROR, SEVERITY_WARNING, Issue, NormalizedSchedule
from masterschedule.normalize import normalize
from masterschedule.validate import count_by_severity, has_errors, validate
from masterschedule.workbook import WorkbookError, list_sheets, load_rows


MAX_ISSUES_SHOWN = 20
PREVIEW_ROWS = 15
PREVIEW_COLS = 8
DEFAULT_OUT_NAME = "master_schedule.csv"

console = Console()

_SEVERITY_STYLE = {SEVERITY_ERROR: "bold red", SEVERITY_WARNING: "yellow"}


# ---------------------------------------------------------------------------
# Review output
# ---------------------------------------------------------------------------


def _print_summary(schedule: NormalizedSchedule, issues: Sequence[Issue]) -> None:
    counts = count_by_severity(issues)
    console.print(
        f"Teachers: {len(schedule.rows)} | Periods: {len(schedule.period_columns)} | "
        f"Errors: [red]{counts[SEVERITY_ERROR]}[/] | Warnings: [yellow]{counts[SEVERITY_WARNING]}[/]"
    )


def _print_issues(issues: Sequence[Issue]) -> None:
    if not issues:
        console.print("No issues found.")
        return

    for issue in issues[:MAX_ISSUES_SHOWN]:
        style = _SEVERITY_STYLE.get(issue.severity, "")
        # markup=False: teacher and course names may contain [brackets]
        console.print(f"- {issue.severity.upper()}: {issue.message}", style=style, markup=False)
    if len(issues) > MAX_ISSUES_SHOWN:
        console.print(f"... and {len(issues) - MAX_ISSUES_SHOWN} more issues")


def _print_preview(schedule: NormalizedSchedule) -> None:
    if not schedule.rows:
        console.print("No teacher rows found (check the teacher column header).")
        return

    table = Table(title="Preview", box=box.SIMPLE)
    for h in schedule.headers[:PREVIEW_COLS]:
        table.add_column(escape(h))

    for row in schedule.rows[:PREVIEW_ROWS]:
        cells = row.data[:PREVIEW_COLS]
        table.add_row(*[f"[dim]{c}[/]" if c == PREP else escape(c) for c in cells])
    console.print(table)

    notes = []
    if len(schedule.rows) > PREVIEW_ROWS:
        notes.append(f"Showing {PREVIEW_ROWS} of {len(schedule.rows)} teachers.")
    if len(schedule.headers) > PREVIEW_COLS:
        notes.append(f"Showing {PREVIEW_COLS} of {len(schedule.headers)} columns.")
    if notes:
        console.print(" ".join(notes))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _load_and_check(args: argparse.Namespace) -> tuple[NormalizedSchedule, list[Issue]]:
    labels = parse_non_teaching_labels(args.labels)
    records = load_rows(args.file, args.sheet)
    console.print(f"Loaded {len(records)} rows from {escape(Path(args.file).name)}")

    schedule = normalize(records, labels)
    issues = validate(schedule.rows, labels)
    return schedule, issues


def _cmd_sheets(args: argparse.Namespace) -> int:
    for name in list_sheets(args.file):
        console.print(name, markup=False)
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    schedule, issues = _load_and_check(args)
    _print_summary(schedule, issues)
    _print_issues(issues)
    return 1 if has_errors(issues) else 0


def _default_out_path(in_path: Path) -> Path:
    """
    master_schedule.csv next to the input, or <stem>_normalized.csv when the
    input already has that name.
    """
    out_path = in_path.with_name(DEFAULT_OUT_NAME)
    if out_path.resolve() == in_path.resolve():
        out_path = in_path.with_name(f"{in_path.stem}_normalized.csv")
    return out_path


def _cmd_parse(args: argparse.Namespace) -> int:
    schedule, issues = _load_and_check(args)
    _print_summary(schedule, issues)
    _print_issues(issues)
    _print_preview(schedule)

    if has_errors(issues) and not args.force:
        console.print("[bold red]Export blocked:[/] fix the errors above or re-run with --force.")
        return 1

    in_path = Path(args.file)
    out_path = Path(args.out) if args.out else _default_out_path(in_path)
    if out_path.resolve() == in_path.resolve():
        console.print("[bold red]Export blocked:[/] --out points at the input file.")
        return 1

    n = write_csv(schedule.headers, schedule.rows, out_path)
    console.print(f"Exported {n} teachers to: {escape(str(out_path))}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(
        prog="masterschedule",
        description="Normalize Excel master schedules into A/B day CSV",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_sheets = sub.add_parser("sheets", help="List the sheets of a workbook")
    p_sheets.add_argument("file", type=str, help="Workbook path (.xlsx or .csv)")

    def add_input_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("file", type=str, help="Workbook path (.xlsx or .csv)")
        p.add_argument("--sheet", "-s", type=str, default=None, help="Sheet name (default: first sheet)")
        p.add_argument(
            "--labels",
            "-l",
            type=str,
            default=DEFAULT_NON_TEACHING_LABELS,
            help=f'Comma-separated non-teaching labels (default: "{DEFAULT_NON_TEACHING_LABELS}")',
        )

    p_validate = sub.add_parser("validate", help="Parse and report issues without exporting")
    add_input_args(p_validate)

    p_parse = sub.add_parser("parse", help="Parse, validate and export to CSV")
    add_input_args(p_parse)
    p_parse.add_argument("--out", "-o", type=str, default=None, help=f"Output CSV (default: {DEFAULT_OUT_NAME})")
    p_parse.add_argument("--force", action="store_true", help="Export even if validation found errors")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    handlers = {
        "sheets": _cmd_sheets,
        "validate": _cmd_validate,
        "parse": _cmd_parse,
    }
    handler = handlers.get(args.command)
    if handler is None:
        raise SystemExit(2)

    try:
        raise SystemExit(handler(args))
    except WorkbookError as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))}", highlight=False)
        raise SystemExit(1)
