import pytest

from models import Classroom, Course, Student


def build_course(code, count, title=None, semester=3, branch="CSE"):
    students = [Student(f"{code}{i:03d}", f"Student {code}{i}") for i in range(1, count + 1)]
    return Course(code, title or f"Course {code}", semester, branch, students)


def build_room(room_id, rows, columns, capacity=None, unavailable=None):
    return Classroom(
        id=room_id,
        name=room_id,
        capacity=rows * columns if capacity is None else capacity,
        rows=rows,
        columns=columns,
        unavailable_seats=unavailable or [],
    )


@pytest.fixture
def make_course():
    return build_course


@pytest.fixture
def make_room():
    return build_room


@pytest.fixture
def two_course_exam():
    """Courses A (5 students) and B (3 students)."""
    return [build_course("A", 5), build_course("B", 3)]
