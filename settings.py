"""Runtime settings for the seat allocator, read from the environment."""
import logging
import os
import sys

API_TITLE = os.environ.get("SEAT_ALLOCATOR_API_TITLE", "Seat Allocator API")
LOG_LEVEL = os.environ.get("SEAT_ALLOCATOR_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Default exam halls: name, building, floor, rows, columns, capacity
DEFAULT_CLASSROOMS = [
    {"name": "SH", "building": "Main Building", "floor": 1, "rows": 10, "columns": 6, "capacity": 60},
    {"name": "H1", "building": "Main Building", "floor": 1, "rows": 16, "columns": 6, "capacity": 96},
    {"name": "H2", "building": "Main Building", "floor": 1, "rows": 16, "columns": 6, "capacity": 96},
    {"name": "201", "building": "Main Building", "floor": 2, "rows": 12, "columns": 6, "capacity": 72},
    {"name": "202", "building": "Main Building", "floor": 2, "rows": 12, "columns": 6, "capacity": 72},
    {"name": "203", "building": "Main Building", "floor": 2, "rows": 12, "columns": 6, "capacity": 72},
    {"name": "204", "building": "Main Building", "floor": 2, "rows": 12, "columns": 6, "capacity": 72},
    {"name": "001", "building": "Main Building", "floor": 0, "rows": 10, "columns": 6, "capacity": 60},
    {"name": "002", "building": "Main Building", "floor": 0, "rows": 10, "columns": 6, "capacity": 60},
    {"name": "101", "building": "Main Building", "floor": 1, "rows": 10, "columns": 5, "capacity": 50},
    {"name": "102", "building": "Main Building", "floor": 1, "rows": 10, "columns": 5, "capacity": 50},
    {"name": "CRE", "building": "Main Building", "floor": 1, "rows": 8, "columns": 4, "capacity": 32},
    {"name": "LAB-1", "building": "Lab Complex", "floor": 1, "rows": 8, "columns": 8, "capacity": 64},
    {"name": "LAB-2", "building": "Lab Complex", "floor": 1, "rows": 8, "columns": 8, "capacity": 64},
    {"name": "LAB-3", "building": "Lab Complex", "floor": 1, "rows": 8, "columns": 8, "capacity": 64},
    {"name": "LAB-4", "building": "Lab Complex", "floor": 1, "rows": 8, "columns": 8, "capacity": 64},
    {"name": "LAB-5", "building": "Lab Complex", "floor": 1, "rows": 8, "columns": 8, "capacity": 64},
]


def setup_logging(level=None):
    logger = logging.getLogger()
    logger.setLevel(level or LOG_LEVEL)

    # Avoid duplicate handlers if called more than once
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
