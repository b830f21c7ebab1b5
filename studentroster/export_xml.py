"""
XML export of the roster.

Visibility rules applied while exporting:
- <Major> is written only for students aged 20 or older
- optional courses are written only if their grade is above 50
- mandatory courses are always written
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable

from studentroster.model import Course, Student


MAJOR_MIN_AGE = 20
OPTIONAL_MIN_GRADE = 50


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def _is_major_visible(student: Student) -> bool:
    return student.age >= MAJOR_MIN_AGE


def _is_course_visible(course: Course) -> bool:
    # strictly above the threshold: an optional 50 is hidden
    return not course.is_optional or course.grade > OPTIONAL_MIN_GRADE


def _text_child(parent: ET.Element, tag: str, value: object) -> ET.Element:
    child = ET.SubElement(parent, tag)
    child.text = str(value)
    return child


def _course_element(parent: ET.Element, course: Course) -> ET.Element:
    el = ET.SubElement(parent, "Course")
    _text_child(el, "Name", course.name)
    _text_child(el, "Instructor", course.instructor)
    _text_child(el, "Grade", course.grade)
    _text_child(el, "IsOptional", _bool_text(course.is_optional))
    return el


def build_roster_element(students: Iterable[Student]) -> ET.Element:
    """
    Build the <Students> tree in roster order.
    """
    root = ET.Element("Students")
    for student in students:
        st = ET.SubElement(root, "Student", {"Id": str(student.id)})
        _text_child(st, "Name", student.name)
        _text_child(st, "Age", student.age)
        if _is_major_visible(student):
            _text_child(st, "Major", student.major)

        courses = ET.SubElement(st, "Courses")
        for course in student.courses:
            if _is_course_visible(course):
                _course_element(courses, course)
    return root


def export_students_to_xml(students: Iterable[Student], out_path: str | Path) -> None:
    """
    Write the roster to an XML file.

    The file is closed before returning, also when writing fails.
    Write errors (OSError) are passed on to the caller.
    """
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    tree = ET.ElementTree(build_roster_element(students))
    ET.indent(tree, space="  ")

    with out.open("wb") as fh:
        tree.write(fh, encoding="utf-8", xml_declaration=True)
