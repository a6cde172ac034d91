from models import Statistics


def utilization_percent(occupied, capacity):
    # round half up with integers only
    if capacity <= 0:
        return 0
    return (occupied * 200 + capacity) // (2 * capacity)


def compute_statistics(course_counts, classroom_allocations):
    """
    Derive plan statistics from the current seat matrices.

    course_counts are the original roster sizes and are reported unchanged;
    students are counted from seats that are occupied and hold a student.
    """
    total_students = 0
    total_seats = 0
    classroom_utilization = []

    for allocation in classroom_allocations:
        seated = allocation.seated_count()
        total_students += seated
        total_seats += allocation.classroom.capacity
        classroom_utilization.append({
            "classroom": allocation.classroom.name,
            "utilization": utilization_percent(seated, allocation.classroom.capacity),
        })

    return Statistics(
        total_students=total_students,
        total_seats=total_seats,
        course_counts=dict(course_counts),
        classroom_utilization=classroom_utilization,
    )
