import logging

import pandas as pd

from errors import EmptyRequest
from models import Course, Student

logger = logging.getLogger(__name__)

COURSE_COLUMNS = ["course_code", "course_title", "semester", "branch"]


def build_rosters(courses):
    """Map each course code to its students sorted by roll number.

    Duplicate roll numbers are kept as given. A later course with the same
    code replaces an earlier one.
    """
    if not courses:
        raise EmptyRequest()

    rosters = {}
    for course in courses:
        rosters[course.course_code] = sorted(course.students, key=lambda s: s.roll_number)

    logger.info(
        "Built %d rosters with %d students",
        len(rosters), sum(len(r) for r in rosters.values())
    )
    return rosters


def courses_from_records(records):
    """Group flat student rows into courses, keeping first-seen course order.

    Each record needs course_code, roll_number and name; course_title,
    semester and branch are taken from the first row of each course.
    """
    df = pd.DataFrame(list(records))
    if df.empty:
        return []

    for col in COURSE_COLUMNS:
        if col not in df.columns:
            df[col] = "" if col != "semester" else 0
    df["semester"] = pd.to_numeric(df["semester"], errors="coerce").fillna(0).astype(int)
    df[["course_title", "branch"]] = df[["course_title", "branch"]].fillna("")

    courses = []
    for code, group in df.groupby("course_code", sort=False):
        first = group.iloc[0]
        courses.append(
            Course(
                course_code=str(code),
                course_title=str(first["course_title"]),
                semester=int(first["semester"]),
                branch=str(first["branch"]),
                students=[
                    Student(roll_number=str(row["roll_number"]).strip(), name=str(row["name"]).strip())
                    for _, row in group.iterrows()
                ],
            )
        )
    return courses


class RosterCursor:
    """Reads a sorted roster front to back without consuming it."""

    def __init__(self, course_code, students):
        self.course_code = course_code
        self.students = tuple(students)
        self.position = 0

    @property
    def remaining(self):
        return len(self.students) - self.position

    def take(self):
        student = self.students[self.position]
        self.position += 1
        return student

    def __repr__(self):
        return f"RosterCursor({self.course_code}, {self.remaining}/{len(self.students)})"
