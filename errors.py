class SeatAllocationError(Exception):
    pass


class EmptyRequest(SeatAllocationError):
    def __init__(self, message="No courses supplied for seat allocation"):
        super().__init__(message)


class InsufficientCapacity(SeatAllocationError):
    def __init__(self, required, available):
        self.required = required
        self.available = available
        super().__init__(
            f"Not enough seats for all students. Need {required} seats "
            f"but only have {available}."
        )

    @property
    def shortfall(self):
        return self.required - self.available


class PlanLocked(SeatAllocationError):
    def __init__(self, message="Cannot modify a published seating plan"):
        super().__init__(message)


class InvalidStatus(SeatAllocationError):
    def __init__(self, status):
        self.status = status
        super().__init__(f"Valid status is required, got {status!r}")
