import logging
from typing import List, Literal, Optional, Tuple

from fastapi import Body, FastAPI, HTTPException
from pydantic import BaseModel, Field

from allocator import allocate_seating
from errors import SeatAllocationError
from models import PLAN_STATUSES, Classroom, Course, SeatingPlan, Student
from overrides import (
    SEAT_STATES,
    SeatRef,
    find_students,
    refresh_statistics,
    room_course_summary,
    set_status,
    swap_seats,
    update_seat,
)
from settings import API_TITLE, DEFAULT_CLASSROOMS, setup_logging

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=API_TITLE)


class StudentIn(BaseModel):
    roll_number: str
    name: str


class CourseIn(BaseModel):
    course_code: str
    course_title: str = ""
    semester: int = 0
    branch: str = ""
    students: List[StudentIn] = []


class ClassroomIn(BaseModel):
    id: str
    name: str
    building: str = "Main Building"
    floor: int = 1
    capacity: int = Field(..., ge=1)
    rows: int = Field(..., ge=1)
    columns: int = Field(..., ge=1)
    unavailable_seats: List[Tuple[int, int]] = []


class GenerateRequest(BaseModel):
    exam_id: Optional[str] = None
    courses: List[CourseIn]
    classrooms: List[ClassroomIn] = Field(..., min_length=1)


class SeatRefIn(BaseModel):
    classroom_id: str
    row: int
    column: int


class SwapRequest(BaseModel):
    plan: dict
    first: SeatRefIn
    second: SeatRefIn


class SeatedStudentIn(BaseModel):
    roll_number: str
    name: str
    course_code: str


class SeatUpdateRequest(BaseModel):
    plan: dict
    seat: SeatRefIn
    state: Literal[SEAT_STATES]
    student: Optional[SeatedStudentIn] = None


class StatusRequest(BaseModel):
    plan: dict
    status: Literal[PLAN_STATUSES]


class SearchRequest(BaseModel):
    plan: dict
    query: str = Field(..., min_length=1)


class SummaryRequest(BaseModel):
    plan: dict
    courses: List[CourseIn]


def _course(data):
    return Course(
        course_code=data.course_code,
        course_title=data.course_title,
        semester=data.semester,
        branch=data.branch,
        students=[Student(s.roll_number, s.name) for s in data.students],
    )


def _load_plan(data):
    try:
        return SeatingPlan.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid seating plan: {str(e)}")


def _seat_ref(data):
    return SeatRef(data.classroom_id, data.row, data.column)


@app.get("/")
def root():
    return {"message": "Seat Allocator API is running !"}


@app.get("/classrooms/defaults")
def get_default_classrooms():
    return DEFAULT_CLASSROOMS


@app.post("/seating-plans/generate", status_code=201)
def generate_seating_plan(req: GenerateRequest):
    courses = [_course(c) for c in req.courses]
    classrooms = [Classroom(**c.model_dump()) for c in req.classrooms]

    try:
        plan = allocate_seating(courses, classrooms, exam_id=req.exam_id)
    except SeatAllocationError as e:
        logger.info("Rejected seating plan request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return plan.to_dict()


@app.post("/seating-plans/swap")
def swap_plan_seats(req: SwapRequest):
    plan = _load_plan(req.plan)
    try:
        swap_seats(plan, _seat_ref(req.first), _seat_ref(req.second))
    except SeatAllocationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return plan.to_dict()


@app.post("/seating-plans/seat")
def update_plan_seat(req: SeatUpdateRequest):
    plan = _load_plan(req.plan)
    try:
        update_seat(plan, _seat_ref(req.seat), req.state, req.student)
    except (SeatAllocationError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return plan.to_dict()


@app.patch("/seating-plans/status")
def update_plan_status(req: StatusRequest):
    plan = _load_plan(req.plan)
    try:
        set_status(plan, req.status)
    except SeatAllocationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return plan.to_dict()


@app.post("/seating-plans/statistics")
def plan_statistics(plan: dict = Body(..., embed=True)):
    return refresh_statistics(_load_plan(plan)).to_dict()


@app.post("/seating-plans/search")
def search_plan(req: SearchRequest):
    return find_students(_load_plan(req.plan), req.query)


@app.post("/seating-plans/summary")
def summarize_plan(req: SummaryRequest):
    plan = _load_plan(req.plan)
    return room_course_summary(plan, [_course(c) for c in req.courses])
