"""
tests/test_rosters.py

Roster building and roster cursors.
"""
import pytest

from errors import EmptyRequest
from models import Course, Student
from rosters import RosterCursor, build_rosters, courses_from_records


def test_rosters_are_sorted_by_roll_number():
    course = Course("CS201", "Algorithms", 3, "CSE", [
        Student("BT22CSE010", "Chitra"),
        Student("BT22CSE002", "Arun"),
        Student("BT22CSE007", "Bala"),
    ])

    rosters = build_rosters([course])

    assert [s.roll_number for s in rosters["CS201"]] == ["BT22CSE002", "BT22CSE007", "BT22CSE010"]
    # the course itself is left in its original order
    assert course.students[0].roll_number == "BT22CSE010"


def test_duplicate_roll_numbers_pass_through():
    course = Course("CS201", "Algorithms", 3, "CSE", [
        Student("R2", "Two"), Student("R1", "One"), Student("R1", "Again"),
    ])

    roster = build_rosters([course])["CS201"]

    assert [s.roll_number for s in roster] == ["R1", "R1", "R2"]


def test_empty_course_list_is_rejected():
    with pytest.raises(EmptyRequest):
        build_rosters([])


def test_rosters_keep_course_order(make_course):
    rosters = build_rosters([make_course("Z", 1), make_course("A", 2)])
    assert list(rosters) == ["Z", "A"]


def test_courses_from_records_groups_rows():
    records = [
        {"course_code": "MA101", "course_title": "Calculus", "semester": 1, "branch": "ECE",
         "roll_number": "BT23ECE002", "name": "Divya"},
        {"course_code": "CS101", "course_title": "Programming", "semester": 1, "branch": "CSE",
         "roll_number": "BT23CSE001", "name": "Esha"},
        {"course_code": "MA101", "course_title": "Calculus", "semester": 1, "branch": "ECE",
         "roll_number": " BT23ECE001 ", "name": "Farhan"},
    ]

    courses = courses_from_records(records)

    assert [c.course_code for c in courses] == ["MA101", "CS101"]
    assert courses[0].course_title == "Calculus"
    assert courses[0].semester == 1
    assert [s.roll_number for s in courses[0].students] == ["BT23ECE002", "BT23ECE001"]


def test_courses_from_records_fills_missing_course_details():
    courses = courses_from_records([{"course_code": "X1", "roll_number": "R1", "name": "N"}])

    assert courses[0].course_title == ""
    assert courses[0].semester == 0
    assert courses[0].branch == ""


def test_courses_from_no_records():
    assert courses_from_records([]) == []


def test_roster_cursor_reads_without_consuming(make_course):
    students = make_course("A", 3).students
    cursor = RosterCursor("A", students)

    assert cursor.remaining == 3
    assert cursor.take().roll_number == "A001"
    assert cursor.take().roll_number == "A002"
    assert cursor.remaining == 1
    assert len(students) == 3
