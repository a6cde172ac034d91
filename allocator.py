"""
Lane allocation engine.

Courses are ordered largest first and seated column by column. Even columns
draw from lane A, odd columns from lane B, so neighbouring columns normally
hold different courses. Each lane is just a course index; the pair of lane
indices is carried from one room into the next.
"""
import logging

from errors import InsufficientCapacity
from layouts import free_seats_in_column, generate_seat_matrix
from models import ClassroomAllocation, SeatedStudent, SeatingPlan
from pairing import optimize_course_pairs
from plan_stats import compute_statistics
from rosters import RosterCursor, build_rosters

logger = logging.getLogger(__name__)

NO_COURSE = -1


def find_closest_course(cursors, free_seats, current_index):
    """Index of the course whose remaining roster best fits free_seats."""
    best_difference = None
    best_index = NO_COURSE

    for index, cursor in enumerate(cursors):
        if index == current_index or cursor.remaining == 0:
            continue

        difference = abs(cursor.remaining - free_seats)
        if best_difference is None or difference < best_difference:
            best_difference = difference
            best_index = index

        if difference == 0:
            break

    return best_index


def advance_lane(lanes, side, cursors):
    index = (lanes[side] + 1) % len(cursors)
    courses_left = sum(1 for cursor in cursors if cursor.remaining)
    if index == lanes[1 - side] and courses_left > 1:
        index = (index + 1) % len(cursors)
    return index


def _seat_student(seat, cursor):
    student = cursor.take()
    seat.occupied = True
    seat.student = SeatedStudent(student.roll_number, student.name, cursor.course_code)


def allocate_classroom(classroom, cursors, lanes):
    """
    Fill one classroom and return (allocation, lanes).

    lanes is the (lane_a, lane_b) pair left by the previous classroom; the
    returned pair is what the next classroom starts from.
    """
    lanes = list(lanes)
    seat_matrix = generate_seat_matrix(classroom)

    for column in range(classroom.columns):
        side = column % 2
        if not 0 <= lanes[side] < len(cursors):
            continue

        free_seats = free_seats_in_column(seat_matrix, column)
        if cursors[lanes[side]].remaining < free_seats and len(cursors) > 2:
            better = find_closest_course(cursors, free_seats, lanes[side])
            if better != NO_COURSE:
                lanes[side] = better

        for row in range(classroom.rows):
            seat = seat_matrix[row][column]
            if seat.occupied:
                continue

            if cursors[lanes[side]].remaining:
                _seat_student(seat, cursors[lanes[side]])
                continue

            # single lookahead: one try from the next course, then leave it free
            lanes[side] = advance_lane(lanes, side, cursors)
            if cursors[lanes[side]].remaining:
                _seat_student(seat, cursors[lanes[side]])

    allocation = ClassroomAllocation(classroom=classroom, seat_matrix=seat_matrix)
    logger.info(
        "Room %s: seated %d of capacity %d",
        classroom.name, allocation.seated_count(), classroom.capacity
    )
    return allocation, tuple(lanes)


def allocate_seating(courses, classrooms, exam_id=None):
    """
    Seat every student of the exam's courses into the given classrooms.

    Classrooms are filled in the order given. Raises EmptyRequest when there
    are no courses and InsufficientCapacity when the declared capacities
    cannot hold every student.
    """
    rosters = build_rosters(courses)
    course_counts = {code: len(students) for code, students in rosters.items()}

    total_students = sum(course_counts.values())
    total_seats = sum(classroom.capacity for classroom in classrooms)
    if total_students > total_seats:
        raise InsufficientCapacity(total_students, total_seats)

    # sorted() is stable, equal sizes keep their exam order
    ordered_codes = sorted(rosters, key=lambda code: len(rosters[code]), reverse=True)
    cursors = [RosterCursor(code, rosters[code]) for code in ordered_codes]

    pairs = optimize_course_pairs([cursor.remaining for cursor in cursors])
    lanes = (0, pairs[0] or 1)

    logger.info(
        "Allocating %d students from %d courses into %d rooms (%d seats)",
        total_students, len(cursors), len(classrooms), total_seats
    )

    classroom_allocations = []
    for classroom in classrooms:
        allocation, lanes = allocate_classroom(classroom, cursors, lanes)
        classroom_allocations.append(allocation)

    unseated = sum(cursor.remaining for cursor in cursors)
    if unseated:
        logger.warning("%d students could not be seated", unseated)

    return SeatingPlan(
        exam_id=exam_id,
        classroom_allocations=classroom_allocations,
        statistics=compute_statistics(course_counts, classroom_allocations),
    )
