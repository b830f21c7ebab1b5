"""
Demo roster used by `studentroster demo` and whenever no --roster file is given.
"""

from __future__ import annotations

from typing import Optional

from studentroster.manager import StudentManager
from studentroster.model import Course, CourseAddedListener, Student


def print_course_added(student: Student, course: Course) -> None:
    print(f"New course added: {student.name}, {course.name}, {course.instructor}")


def build_demo_roster(on_course_added: Optional[CourseAddedListener] = None) -> StudentManager:
    """
    Two students; only Anna has the listener attached (before her courses are added).
    """
    anna = Student(name="Anna", age=21, major="Informatika")
    if on_course_added is not None:
        anna.subscribe(on_course_added)
    anna.add_course(Course("Adatbázisok", "Dr. Nagy", 85, is_optional=False))
    anna.add_course(Course("Analízis", "Dr. Kiss", 92, is_optional=True))

    bela = Student(name="Béla", age=19, major="Matematika")
    bela.add_course(Course("Adatbázisok", "Dr. Nagy", 70, is_optional=False))

    manager = StudentManager()
    manager.add_student(anna)
    manager.add_student(bela)
    return manager
