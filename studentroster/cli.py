"""
CLI (Command Line Interface).

Quick terminal commands over a roster, e.g.:

    studentroster demo
    studentroster average --major Informatika
    studentroster top 3
    studentroster good
    studentroster export students.xml
    studentroster inspect students.xml

Every command works on the demo roster unless --roster points to a JSON
roster file (see studentroster/storage.py for the layout).
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from studentroster.demo import build_demo_roster, print_course_added
from studentroster.inspect_xml import read_exported_students
from studentroster.manager import StudentManager
from studentroster.storage import RosterFileError, load_roster


DEFAULT_EXPORT_NAME = "students.xml"
DEMO_MAJOR = "Informatika"

console = Console()


def _fmt_grade(value: Optional[float]) -> str:
    return "-" if value is None else f"{value:.2f}"


def _load(args: argparse.Namespace) -> StudentManager:
    if args.roster:
        return load_roster(args.roster)
    return build_demo_roster()


def _export(manager: StudentManager, out_path: str, verbose: bool = False) -> int:
    try:
        manager.export_to_xml(out_path)
    except OSError as exc:
        print(f"Export failed: {exc}")
        return 1
    # with -v the manager's INFO record already reports it
    if not verbose:
        print(f"Data exported to {out_path}")
    return 0


def _cmd_demo(args: argparse.Namespace) -> int:
    """
    The full demonstration flow: build, notify, export, report.
    """
    manager = build_demo_roster(on_course_added=print_course_added)

    rc = _export(manager, args.out, args.verbose)
    if rc != 0:
        return rc

    print(f"Average performance (all): {manager.average_performance()}")
    print(f"Average performance ({DEMO_MAJOR}): {manager.average_performance(DEMO_MAJOR)}")

    print("Top performer:")
    for s in manager.top_performers(1):
        print(s.name)

    print("Consistently good students:")
    for s in manager.consistently_good_students():
        print(s.name)
    return 0


def _cmd_average(args: argparse.Namespace, manager: StudentManager) -> int:
    major = (args.major or "").strip() or None
    label = major if major else "all"
    print(f"Average performance ({label}): {manager.average_performance(major)}")
    return 0


def _cmd_top(args: argparse.Namespace, manager: StudentManager) -> int:
    top = manager.top_performers(args.count)
    if not top:
        print("No students.")
        return 0

    for rank, s in enumerate(top, start=1):
        print(f"{rank}. {s.name} ({_fmt_grade(s.mean_grade())})")
    return 0


def _cmd_good(args: argparse.Namespace, manager: StudentManager) -> int:
    good = manager.consistently_good_students()
    if not good:
        print("No consistently good students.")
        return 0

    print("Consistently good students:")
    for s in good:
        print(s.name)
    return 0


def _cmd_export(args: argparse.Namespace, manager: StudentManager) -> int:
    out_path = (args.out or "").strip()
    if not out_path:
        print("Please provide output .xml path.")
        return 1
    return _export(manager, out_path, args.verbose)


def _cmd_inspect(args: argparse.Namespace) -> int:
    """
    Show the students stored in an export file.
    """
    try:
        students = read_exported_students(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Cannot read {args.file}: {exc}")
        return 1

    if not students:
        print("No students in file.")
        return 0

    table = Table(title=str(args.file), box=box.SIMPLE)
    table.add_column("Name")
    table.add_column("Age", justify="right")
    table.add_column("Major")
    table.add_column("Courses")

    for st in students:
        courses = ", ".join(
            f"{c['name']} ({c['grade']}{', optional' if c['is_optional'] else ''})" for c in st["courses"]
        )
        age = "" if st["age"] is None else str(st["age"])
        table.add_row(st["name"], age, st["major"] or "-", courses or "-")

    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="studentroster", description="Student roster reports and XML export")
    parser.add_argument(
        "--roster",
        type=str,
        default=None,
        help="Roster JSON file for average/top/good/export (default: built-in demo roster)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show log messages")
    sub = parser.add_subparsers(dest="command", required=True)

    p_demo = sub.add_parser("demo", help="Run the demonstration flow")
    p_demo.add_argument("--out", type=str, default=DEFAULT_EXPORT_NAME, help="Export file path")

    p_avg = sub.add_parser("average", help="Average grade, optionally for one major")
    p_avg.add_argument("--major", type=str, default=None, help="Only students of this major")

    p_top = sub.add_parser("top", help="Top performers by mean grade")
    p_top.add_argument("count", type=int, help="Number of students to show")

    sub.add_parser("good", help="Students with all mandatory grades >= 60")

    p_export = sub.add_parser("export", help="Export the roster to XML")
    p_export.add_argument("out", type=str, help="Output file path (e.g. students.xml)")

    p_inspect = sub.add_parser("inspect", help="Show the contents of an XML export")
    p_inspect.add_argument("file", type=str, help="Exported .xml file")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.roster and args.command in ("demo", "inspect"):
        parser.error(f"--roster cannot be used with {args.command}")

    if args.command == "demo":
        raise SystemExit(_cmd_demo(args))
    if args.command == "inspect":
        raise SystemExit(_cmd_inspect(args))

    try:
        manager = _load(args)
    except RosterFileError as exc:
        print(f"Cannot load roster: {exc}")
        raise SystemExit(1)

    if args.command == "average":
        raise SystemExit(_cmd_average(args, manager))
    if args.command == "top":
        raise SystemExit(_cmd_top(args, manager))
    if args.command == "good":
        raise SystemExit(_cmd_good(args, manager))
    if args.command == "export":
        raise SystemExit(_cmd_export(args, manager))

    raise SystemExit(2)
