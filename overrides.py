"""Manual edits and lookups on a generated seating plan."""
import logging

from errors import InvalidStatus, PlanLocked
from models import PLAN_STATUSES, PUBLISHED, SeatedStudent
from plan_stats import compute_statistics

logger = logging.getLogger(__name__)

EMPTY = "empty"
UNAVAILABLE = "unavailable"
STUDENT = "student"
SEAT_STATES = (EMPTY, UNAVAILABLE, STUDENT)


class SeatRef:
    def __init__(self, classroom_id, row, column):
        self.classroom_id = classroom_id
        self.row = row
        self.column = column

    def __repr__(self):
        return f"SeatRef({self.classroom_id}, {self.row}, {self.column})"


def _ensure_editable(plan):
    if plan.status == PUBLISHED:
        raise PlanLocked()


def _locate(plan, ref):
    allocation = plan.allocation_for(ref.classroom_id)
    if allocation is None:
        logger.debug("Unknown classroom in %r", ref)
        return None
    seat = allocation.seat_at(ref.row, ref.column)
    if seat is None:
        logger.debug("Seat %r is outside the room grid", ref)
    return seat


def refresh_statistics(plan):
    plan.statistics = compute_statistics(plan.course_counts, plan.classroom_allocations)
    return plan.statistics


def swap_seats(plan, first, second):
    """
    Exchange the students of two seats, possibly in different rooms.

    Only the student fields move; occupied flags stay where they were, so a
    student moved onto an unavailable seat leaves it marked occupied.
    Unknown rooms or out-of-range seats leave the plan unchanged.
    """
    _ensure_editable(plan)

    seat_a = _locate(plan, first)
    seat_b = _locate(plan, second)
    if seat_a is None or seat_b is None:
        return plan

    seat_a.student, seat_b.student = seat_b.student, seat_a.student
    logger.info("Swapped seats %r and %r", first, second)
    refresh_statistics(plan)
    return plan


def update_seat(plan, ref, state, student=None):
    _ensure_editable(plan)
    if state not in SEAT_STATES:
        raise ValueError(f"Unknown seat state {state!r}")
    if state == STUDENT and student is None:
        raise ValueError("A student is required to fill a seat")

    seat = _locate(plan, ref)
    if seat is None:
        return plan

    if state == EMPTY:
        seat.occupied, seat.student = False, None
    elif state == UNAVAILABLE:
        seat.occupied, seat.student = True, None
    else:
        seat.occupied = True
        seat.student = SeatedStudent(student.roll_number, student.name, student.course_code)

    refresh_statistics(plan)
    return plan


def replace_allocations(plan, classroom_allocations):
    _ensure_editable(plan)
    plan.classroom_allocations = list(classroom_allocations)
    refresh_statistics(plan)
    return plan


def set_status(plan, status):
    if status not in PLAN_STATUSES:
        raise InvalidStatus(status)
    plan.status = status
    return plan


def find_students(plan, query):
    """Seats whose student roll number or name contains query (any case)."""
    needle = query.lower()
    results = []
    for allocation in plan.classroom_allocations:
        for row_index, row in enumerate(allocation.seat_matrix):
            for col_index, seat in enumerate(row):
                student = seat.student
                if student is None:
                    continue
                if needle in student.roll_number.lower() or needle in student.name.lower():
                    results.append({
                        "classroom": allocation.classroom.name,
                        "classroom_id": allocation.classroom.id,
                        "row": row_index,
                        "column": col_index,
                        "student": student.to_dict(),
                    })
    return results


def room_course_summary(plan, courses):
    """Per room and course: seated count and the first/last roll number."""
    by_code = {course.course_code: course for course in courses}
    summary = []

    for allocation in plan.classroom_allocations:
        groups = {}
        for seat in allocation.seats():
            if seat.occupied and seat.student:
                groups.setdefault(seat.student.course_code, []).append(seat.student.roll_number)

        for code, rolls in groups.items():
            course = by_code.get(code)
            if course is None:
                continue
            rolls.sort()
            summary.append({
                "serial": len(summary) + 1,
                "classroom": allocation.classroom.name,
                "course": f"{code} - {course.course_title}",
                "roll_number_range": f"{rolls[0]} - {rolls[-1]}",
                "semester": course.semester,
                "branch": course.branch,
                "total_students": len(rolls),
            })

    return summary
