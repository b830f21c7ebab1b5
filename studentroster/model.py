"""
Central data model definitions used across the project.

Two records live here:
- Course: a value record (name, instructor, grade, optional flag)
- Student: an entity with a stable id and an append-only list of courses

Students notify their listeners synchronously whenever a course is added.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional


CourseAddedListener = Callable[["Student", "Course"], None]


@dataclass(frozen=True)
class Course:
    """
    One enrolled course with its final grade.
    """

    name: str
    instructor: str
    grade: int
    is_optional: bool = False


def mean_grade(courses: Iterable[Course]) -> Optional[float]:
    """
    Arithmetic mean of the grades, or None if there are no courses.
    """
    grades = [c.grade for c in courses]
    if not grades:
        return None
    return sum(grades) / len(grades)


@dataclass(eq=False)
class Student:
    """
    Represents one student and the courses they are enrolled in.

    Students compare by identity (their id), not by field values.
    """

    name: str
    age: int
    major: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    courses: List[Course] = field(default_factory=list)
    _listeners: List[CourseAddedListener] = field(default_factory=list, init=False, repr=False)

    def subscribe(self, listener: CourseAddedListener) -> CourseAddedListener:
        """
        Register a callable(student, course) that runs after every add_course().

        Returns the listener, so this also works as a decorator.
        """
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: CourseAddedListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def add_course(self, course: Course) -> None:
        """
        Append a course, then notify listeners in registration order.
        """
        self.courses.append(course)
        # copy: a listener may unsubscribe itself while we iterate
        for listener in list(self._listeners):
            listener(self, course)

    def mandatory_courses(self) -> list[Course]:
        return [c for c in self.courses if not c.is_optional]

    def mean_grade(self) -> Optional[float]:
        return mean_grade(self.courses)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
