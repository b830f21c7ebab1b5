"""
Student roster: courses, students, reports and XML export.
"""

from studentroster.manager import StudentManager
from studentroster.model import Course, Student

__all__ = ["Course", "Student", "StudentManager"]
