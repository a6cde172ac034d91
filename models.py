DRAFT = "draft"
FINALIZED = "finalized"
PUBLISHED = "published"
PLAN_STATUSES = (DRAFT, FINALIZED, PUBLISHED)


class Student:
    def __init__(self, roll_number, name):
        self.roll_number = roll_number
        self.name = name

    def to_dict(self):
        return {"roll_number": self.roll_number, "name": self.name}

    @classmethod
    def from_dict(cls, data):
        return cls(roll_number=str(data["roll_number"]), name=str(data["name"]))


class Course:
    def __init__(self, course_code, course_title, semester, branch, students=None):
        self.course_code = course_code
        self.course_title = course_title
        self.semester = semester
        self.branch = branch
        self.students = list(students or [])

    def to_dict(self):
        return {
            "course_code": self.course_code,
            "course_title": self.course_title,
            "semester": self.semester,
            "branch": self.branch,
            "students": [s.to_dict() for s in self.students],
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            course_code=data["course_code"],
            course_title=data.get("course_title", ""),
            semester=data.get("semester", 0),
            branch=data.get("branch", ""),
            students=[Student.from_dict(s) for s in data.get("students", [])],
        )


class Classroom:
    def __init__(self, id, name, capacity, rows, columns,
                 building="Main Building", floor=1, unavailable_seats=None):
        self.id = id
        self.name = name
        self.building = building
        self.floor = floor
        self.capacity = capacity
        self.rows = rows
        self.columns = columns
        # (row, column) pairs, zero-based
        self.unavailable_seats = {tuple(seat) for seat in (unavailable_seats or [])}

    @property
    def available_seats(self):
        return self.capacity - len(self.unavailable_seats)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "building": self.building,
            "floor": self.floor,
            "capacity": self.capacity,
            "rows": self.rows,
            "columns": self.columns,
            "unavailable_seats": [list(seat) for seat in sorted(self.unavailable_seats)],
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data["id"],
            name=data.get("name", str(data["id"])),
            building=data.get("building", "Main Building"),
            floor=data.get("floor", 1),
            capacity=data["capacity"],
            rows=data["rows"],
            columns=data["columns"],
            unavailable_seats=data.get("unavailable_seats", []),
        )


class SeatedStudent:
    def __init__(self, roll_number, name, course_code):
        self.roll_number = roll_number
        self.name = name
        self.course_code = course_code

    def to_dict(self):
        return {
            "roll_number": self.roll_number,
            "name": self.name,
            "course_code": self.course_code,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(data["roll_number"], data["name"], data["course_code"])


class Seat:
    def __init__(self, occupied=False, student=None):
        self.occupied = occupied
        self.student = student

    @property
    def unavailable(self):
        return self.occupied and self.student is None

    def to_dict(self):
        return {
            "occupied": self.occupied,
            "student": self.student.to_dict() if self.student else None,
        }

    @classmethod
    def from_dict(cls, data):
        student = data.get("student")
        return cls(
            occupied=bool(data.get("occupied", False)),
            student=SeatedStudent.from_dict(student) if student else None,
        )


class ClassroomAllocation:
    def __init__(self, classroom, seat_matrix):
        self.classroom = classroom
        self.seat_matrix = seat_matrix

    def seats(self):
        for row in self.seat_matrix:
            yield from row

    def seat_at(self, row, column):
        if 0 <= row < len(self.seat_matrix) and 0 <= column < len(self.seat_matrix[row]):
            return self.seat_matrix[row][column]
        return None

    def seated_count(self):
        return sum(1 for seat in self.seats() if seat.occupied and seat.student)

    def to_dict(self):
        return {
            "classroom": self.classroom.to_dict(),
            "seat_matrix": [[seat.to_dict() for seat in row] for row in self.seat_matrix],
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            classroom=Classroom.from_dict(data["classroom"]),
            seat_matrix=[[Seat.from_dict(s) for s in row] for row in data["seat_matrix"]],
        )


class Statistics:
    def __init__(self, total_students, total_seats, course_counts, classroom_utilization):
        self.total_students = total_students
        self.total_seats = total_seats
        self.course_counts = course_counts
        # [{"classroom": name, "utilization": percent}, ...] in allocation order
        self.classroom_utilization = classroom_utilization

    def to_dict(self):
        return {
            "total_students": self.total_students,
            "total_seats": self.total_seats,
            "course_counts": dict(self.course_counts),
            "classroom_utilization": [dict(entry) for entry in self.classroom_utilization],
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            total_students=data["total_students"],
            total_seats=data["total_seats"],
            course_counts=dict(data["course_counts"]),
            classroom_utilization=[dict(e) for e in data["classroom_utilization"]],
        )


class SeatingPlan:
    def __init__(self, exam_id, classroom_allocations, statistics, status=DRAFT):
        self.exam_id = exam_id
        self.classroom_allocations = classroom_allocations
        self.statistics = statistics
        self.status = status

    @property
    def course_counts(self):
        return self.statistics.course_counts

    def allocation_for(self, classroom_id):
        for allocation in self.classroom_allocations:
            if allocation.classroom.id == classroom_id:
                return allocation
        return None

    def to_dict(self):
        return {
            "exam_id": self.exam_id,
            "status": self.status,
            "classroom_allocations": [a.to_dict() for a in self.classroom_allocations],
            "statistics": self.statistics.to_dict(),
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            exam_id=data.get("exam_id"),
            classroom_allocations=[ClassroomAllocation.from_dict(a) for a in data["classroom_allocations"]],
            statistics=Statistics.from_dict(data["statistics"]),
            status=data.get("status", DRAFT),
        )
