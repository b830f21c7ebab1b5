"""
Loading a roster from a JSON file.

Expected file layout:

    {"students": [
        {"name": "Anna", "age": 21, "major": "Informatika",
         "courses": [{"name": "...", "instructor": "...", "grade": 85, "is_optional": false}]}
    ]}

The roster file is input only; this module never writes it.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from studentroster.manager import StudentManager
from studentroster.model import Course, CourseAddedListener, Student


class RosterFileError(ValueError):
    """
    Raised when a roster file is missing, unreadable or has the wrong shape.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def _as_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_bool(value: Any) -> bool:
    # JSON booleans, or the strings "true" / "false"
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def _course_from_dict(data: dict[str, Any]) -> Course:
    return Course(
        name=str(data.get("name", "") or "").strip(),
        instructor=str(data.get("instructor", "") or "").strip(),
        grade=_as_int(data.get("grade")),
        is_optional=_as_bool(data.get("is_optional")),
    )


def _student_from_dict(data: dict[str, Any], on_course_added: Optional[CourseAddedListener]) -> Student:
    student = Student(
        name=str(data.get("name", "") or "").strip(),
        age=_as_int(data.get("age")),
        major=str(data.get("major", "") or "").strip(),
    )
    if on_course_added is not None:
        student.subscribe(on_course_added)

    courses = data.get("courses", [])
    if isinstance(courses, list):
        for c in courses:
            # skip junk entries instead of failing the whole file
            if isinstance(c, dict):
                student.add_course(_course_from_dict(c))
    return student


def load_roster(path: str | Path, on_course_added: Optional[CourseAddedListener] = None) -> StudentManager:
    """
    Load a StudentManager from a roster JSON file.

    If `on_course_added` is given it is subscribed on every student before
    their courses are added.
    """
    roster_path = Path(path)

    try:
        data = json.loads(roster_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise RosterFileError(roster_path, "file not found") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise RosterFileError(roster_path, f"cannot read file ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise RosterFileError(roster_path, f"invalid JSON ({exc.msg}, line {exc.lineno})") from exc

    students = data.get("students") if isinstance(data, dict) else None
    if not isinstance(students, list):
        raise RosterFileError(roster_path, 'expected an object with a "students" list')

    manager = StudentManager()
    for s in students:
        if isinstance(s, dict):
            manager.add_student(_student_from_dict(s, on_course_added))
    return manager
