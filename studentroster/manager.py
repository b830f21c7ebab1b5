"""
StudentManager: the roster plus the reporting queries over it.

All queries are read-only and never raise; empty inputs fall back to
defined values (0.0 average, empty lists).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

from studentroster.export_xml import export_students_to_xml
from studentroster.model import Student, mean_grade


logger = logging.getLogger(__name__)

GOOD_GRADE = 60


def _ranking_key(student: Student) -> tuple[int, float]:
    # students without courses rank below everyone who has a grade
    avg = student.mean_grade()
    if avg is None:
        return (0, 0.0)
    return (1, avg)


class StudentManager:
    def __init__(self, students: Optional[Iterable[Student]] = None) -> None:
        self.students: list[Student] = list(students) if students is not None else []

    def __len__(self) -> int:
        return len(self.students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self.students)

    def add_student(self, student: Student) -> None:
        self.students.append(student)

    def average_performance(self, major: Optional[str] = None) -> float:
        """
        Mean grade over all courses of all students (or only students of `major`).

        Returns 0.0 if no course is left after filtering.
        """
        courses = [
            c
            for s in self.students
            if major is None or s.major == major
            for c in s.courses
        ]
        avg = mean_grade(courses)
        return 0.0 if avg is None else avg

    def top_performers(self, count: int) -> list[Student]:
        """
        Students ranked by their own mean grade, best first.

        Students without courses come last. Ties keep roster order.
        """
        if count <= 0:
            return []
        # sorted() is stable, also with reverse=True
        ranked = sorted(self.students, key=_ranking_key, reverse=True)
        return ranked[:count]

    def consistently_good_students(self) -> list[Student]:
        """
        Students whose mandatory courses are all graded GOOD_GRADE or better.

        Optional courses do not count. A student without mandatory courses
        qualifies.
        """
        return [s for s in self.students if all(c.grade >= GOOD_GRADE for c in s.mandatory_courses())]

    def export_to_xml(self, file_path: str | Path) -> None:
        export_students_to_xml(self.students, file_path)
        logger.info("Data exported to %s", file_path)
