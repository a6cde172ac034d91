import argparse
import json
import logging
import sys

import pandas as pd

from allocator import allocate_seating
from errors import SeatAllocationError
from models import Classroom, Course
from rosters import courses_from_records
from settings import setup_logging

logger = logging.getLogger("seat_allocator")


def seat_table(allocation):
    rows = []
    for row in allocation.seat_matrix:
        cells = []
        for seat in row:
            if seat.student:
                cells.append(seat.student.roll_number)
            elif seat.unavailable:
                cells.append("X")
            else:
                cells.append("")
        rows.append(cells)

    return pd.DataFrame(
        rows,
        index=[f"Row {i + 1}" for i in range(len(rows))],
        columns=[f"Column {j + 1}" for j in range(allocation.classroom.columns)],
    )


def load_request(path):
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)

    if "courses" in data:
        courses = [Course.from_dict(c) for c in data["courses"]]
    else:
        courses = courses_from_records(data.get("students", []))
    classrooms = [Classroom.from_dict(c) for c in data["classrooms"]]
    return data.get("exam_id"), courses, classrooms


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate an exam seating plan")
    parser.add_argument("request", help="JSON file with courses (or students) and classrooms")
    parser.add_argument("--output", help="write the generated plan as JSON to this file")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    exam_id, courses, classrooms = load_request(args.request)
    try:
        plan = allocate_seating(courses, classrooms, exam_id=exam_id)
    except SeatAllocationError as e:
        logger.error("Seat allocation failed: %s", e)
        return 1

    print("\n--- Seat Allocation ---")
    for allocation in plan.classroom_allocations:
        room = allocation.classroom
        print(f"\n{room.building} - Room {room.name} (capacity {room.capacity})")
        print(seat_table(allocation).to_string())

    stats = plan.statistics
    print(f"\nStudents seated: {stats.total_students} / seats: {stats.total_seats}")
    for entry in stats.classroom_utilization:
        print(f"  {entry['classroom']}: {entry['utilization']}%")

    if args.output:
        with open(args.output, "w", encoding="utf-8") as fh:
            json.dump(plan.to_dict(), fh, indent=2)
        logger.info("Plan written to %s", args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
