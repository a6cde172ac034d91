import logging

from models import Seat

logger = logging.getLogger(__name__)


def generate_seat_matrix(classroom):
    seat_matrix = [
        [Seat() for _ in range(classroom.columns)]
        for _ in range(classroom.rows)
    ]

    for row, column in sorted(classroom.unavailable_seats):
        if 0 <= row < classroom.rows and 0 <= column < classroom.columns:
            seat_matrix[row][column].occupied = True
        else:
            logger.debug(
                "Ignoring unavailable seat (%s, %s) outside %dx%d room %s",
                row, column, classroom.rows, classroom.columns, classroom.name
            )

    return seat_matrix


def free_seats_in_column(seat_matrix, column):
    return sum(1 for row in seat_matrix if not row[column].occupied)
