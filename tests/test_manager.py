"""
Unit tests for the StudentManager queries.

Thresholds:
- consistently good: every mandatory grade >= 60 (optional courses ignored)
- top performers: students without courses rank last, ties keep roster order
- average: 0.0 when there is nothing to average
"""

import unittest

from studentroster.manager import StudentManager
from studentroster.model import Course, Student


def _student(name: str, major: str, grades: list[int], age: int = 21, optional: bool = False) -> Student:
    s = Student(name, age, major)
    for i, g in enumerate(grades):
        s.add_course(Course(f"{name}-{i}", "Dr. Nagy", g, is_optional=optional))
    return s


class TestAveragePerformance(unittest.TestCase):
    def test_empty_roster_is_zero(self) -> None:
        self.assertEqual(StudentManager().average_performance(), 0)

    def test_roster_without_courses_is_zero(self) -> None:
        m = StudentManager([Student("Anna", 21, "Informatika")])
        self.assertEqual(m.average_performance(), 0)
        self.assertEqual(m.average_performance("Informatika"), 0)

    def test_all_courses(self) -> None:
        m = StudentManager([_student("Anna", "Informatika", [85, 92]), _student("Béla", "Matematika", [70])])
        self.assertAlmostEqual(m.average_performance(), (85 + 92 + 70) / 3)

    def test_filter_by_major(self) -> None:
        m = StudentManager(
            [
                _student("Anna", "Informatika", [85, 92]),
                _student("Béla", "Matematika", [70]),
                _student("Cili", "Informatika", [60]),
            ]
        )
        self.assertAlmostEqual(m.average_performance("Informatika"), (85 + 92 + 60) / 3)
        self.assertEqual(m.average_performance("Matematika"), 70)

    def test_major_must_match_exactly(self) -> None:
        m = StudentManager([_student("Anna", "Informatika", [85])])
        self.assertEqual(m.average_performance("informatika"), 0)
        self.assertEqual(m.average_performance("Fizika"), 0)


class TestTopPerformers(unittest.TestCase):
    def setUp(self) -> None:
        self.low = _student("Low", "M", [50, 60])
        self.high = _student("High", "M", [90, 100])
        self.mid = _student("Mid", "M", [75])
        self.manager = StudentManager([self.low, self.high, self.mid])

    def test_sorted_descending(self) -> None:
        self.assertEqual(self.manager.top_performers(3), [self.high, self.mid, self.low])
        self.assertEqual(self.manager.top_performers(1), [self.high])

    def test_zero_or_negative_count(self) -> None:
        self.assertEqual(self.manager.top_performers(0), [])
        self.assertEqual(self.manager.top_performers(-2), [])

    def test_count_larger_than_roster(self) -> None:
        self.assertEqual(self.manager.top_performers(10), [self.high, self.mid, self.low])

    def test_students_without_courses_rank_last(self) -> None:
        empty = Student("Empty", 20, "M")
        zero = _student("Zero", "M", [0])
        m = StudentManager([empty, zero, self.mid])
        self.assertEqual(m.top_performers(3), [self.mid, zero, empty])

    def test_ties_keep_roster_order(self) -> None:
        a = _student("A", "M", [80])
        b = _student("B", "M", [70, 90])
        e1 = Student("E1", 20, "M")
        e2 = Student("E2", 20, "M")
        m = StudentManager([e1, a, e2, b])
        self.assertEqual(m.top_performers(4), [a, b, e1, e2])


class TestConsistentlyGood(unittest.TestCase):
    def test_vacuous_truth_for_no_mandatory_courses(self) -> None:
        only_optional = _student("Opt", "M", [10, 20], optional=True)
        no_courses = Student("None", 20, "M")
        m = StudentManager([only_optional, no_courses])
        self.assertEqual(m.consistently_good_students(), [only_optional, no_courses])

    def test_one_mandatory_below_60_excludes(self) -> None:
        s = _student("Bad", "M", [95, 59])
        m = StudentManager([s])
        self.assertEqual(m.consistently_good_students(), [])

    def test_exactly_60_is_good_and_optional_ignored(self) -> None:
        s = _student("Edge", "M", [60])
        s.add_course(Course("Opt", "Dr. Kiss", 5, is_optional=True))
        m = StudentManager([s])
        self.assertEqual(m.consistently_good_students(), [s])

    def test_roster_order(self) -> None:
        a = _student("A", "M", [70])
        bad = _student("Bad", "M", [30])
        b = _student("B", "M", [99])
        m = StudentManager([a, bad, b])
        self.assertEqual(m.consistently_good_students(), [a, b])


class TestRoster(unittest.TestCase):
    def test_add_student_keeps_order(self) -> None:
        m = StudentManager()
        a = Student("A", 20, "M")
        b = Student("B", 20, "M")
        m.add_student(a)
        m.add_student(b)
        self.assertEqual(len(m), 2)
        self.assertEqual(list(m), [a, b])


if __name__ == "__main__":
    unittest.main()
