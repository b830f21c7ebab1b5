"""
Reading an XML export back into plain dicts.

Used by `studentroster inspect` to show what an export file really contains
(hidden majors and filtered courses are simply absent).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from bs4 import BeautifulSoup


def _child_text(tag: Any, name: str) -> Optional[str]:
    # recursive=False: <Name> also appears inside <Course>
    child = tag.find(name, recursive=False)
    if child is None:
        return None
    return child.get_text(strip=True)


def _to_int(text: Optional[str]) -> Optional[int]:
    if text is None:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def read_exported_students(path: str | Path) -> list[dict[str, Any]]:
    """
    Parse an export file and return one dict per <Student>, in file order.

    Parsed with the lxml XML builder, so tag names keep their case.
    """
    data = Path(path).read_bytes()
    soup = BeautifulSoup(data, features="xml")

    out: list[dict[str, Any]] = []
    for st in soup.find_all("Student"):
        courses: list[dict[str, Any]] = []
        courses_tag = st.find("Courses", recursive=False)
        if courses_tag is not None:
            for c in courses_tag.find_all("Course", recursive=False):
                courses.append(
                    {
                        "name": _child_text(c, "Name") or "",
                        "instructor": _child_text(c, "Instructor") or "",
                        "grade": _to_int(_child_text(c, "Grade")),
                        "is_optional": (_child_text(c, "IsOptional") or "").lower() == "true",
                    }
                )

        out.append(
            {
                "id": st.get("Id", ""),
                "name": _child_text(st, "Name") or "",
                "age": _to_int(_child_text(st, "Age")),
                "major": _child_text(st, "Major"),
                "courses": courses,
            }
        )
    return out
