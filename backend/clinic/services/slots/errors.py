# backend/clinic/services/slots/errors.py


class ScheduleError(Exception):
    """Base error for schedule authoring."""


class DuplicateTimeSlotError(ScheduleError):
    def __init__(self, time: str, date: str):
        super().__init__(f"Time slot {time} ({date}) already exists")
        self.time = time
        self.date = date


class ScheduleNotFoundError(ScheduleError):
    pass


class TimeSlotNotFoundError(ScheduleError):
    pass
