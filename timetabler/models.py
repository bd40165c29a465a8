#!/usr/bin/env python3
"""
Domain model for timetable generation.

Courses, rooms and instructors are read-only inputs loaded once per
generation run. Sessions and the Timetable that holds them are created
fresh by each run and handed back to the caller.
"""

import random
import uuid
from collections import Counter
from dataclasses import dataclass, field, asdict
from typing import Dict, Iterator, List, Optional, Tuple

import pandas as pd

from .utils import DAYS_OF_WEEK, end_label, hour_label


@dataclass(frozen=True)
class Course:
    id: str
    name: str
    code: str = ""
    department: str = ""
    required_sessions_per_week: int = 1
    required_room_type: Optional[str] = None
    instructor_id: Optional[str] = None
    room_id: Optional[str] = None
    preferred_instructor_ids: Tuple[str, ...] = ()
    credit_hours: int = 0

    @property
    def sessions_needed(self) -> int:
        """Required weekly sessions, never less than one."""
        return max(1, self.required_sessions_per_week)

    @property
    def room_type(self) -> Optional[str]:
        """
        Required room type (e.g. "LAB", "LECTURE_HALL").

        Falls back to the department when no explicit type is set.
        """
        if self.required_room_type:
            return self.required_room_type
        return self.department or None

    @property
    def session_type(self) -> str:
        return self.code if self.code else "LECTURE"

    @property
    def typical_session_duration(self) -> int:
        """Typical session length in minutes: (credit hours * 60) / sessions per week."""
        return (self.credit_hours * 60) // self.sessions_needed


@dataclass(frozen=True)
class Resource:
    """A bookable room."""
    id: str
    name: str
    type: str = ""
    capacity: int = 0
    available: bool = True
    admin_id: Optional[str] = None
    location: str = ""


@dataclass(frozen=True)
class Instructor:
    id: str
    name: str
    contact: str = ""
    preferred_days: Tuple[str, ...] = ()
    preferred_hours: Optional[str] = None  # "HH:MM-HH:MM"


@dataclass(frozen=True)
class Booking:
    """A session pinned by hand outside the generator."""
    resource_id: Optional[str]
    instructor_id: Optional[str]
    days: Tuple[str, ...]
    start_time: str
    end_time: str
    course_id: Optional[str] = None


# Stages that can produce a session
ORIGIN_GREEDY = "greedy"
ORIGIN_SOLVER = "solver"
ORIGIN_FALLBACK = "fallback"
ORIGIN_REPAIR = "repair"


@dataclass
class Session:
    course_id: str
    course_name: str
    day_of_week: str
    start_time: str
    end_time: str
    resource_id: str
    resource_name: str
    instructor_id: str
    instructor_name: str
    session_type: str = "LECTURE"
    origin: str = ORIGIN_GREEDY
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def slot(self) -> Tuple[str, str]:
        return (self.day_of_week, self.start_time)


def new_session_id(rng: Optional[random.Random] = None) -> str:
    """Generate a session id, reproducible when a seeded rng is given."""
    if rng is None:
        return str(uuid.uuid4())
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))


class Timetable:
    """An unordered collection of scheduled sessions."""

    def __init__(self, sessions: Optional[List[Session]] = None):
        self.sessions: List[Session] = list(sessions) if sessions else []

    def add_session(self, session: Session):
        self.sessions.append(session)

    def __iter__(self) -> Iterator[Session]:
        return iter(self.sessions)

    def __len__(self) -> int:
        return len(self.sessions)

    def __repr__(self):
        return f"Timetable({len(self.sessions)} sessions)"

    def sessions_for(self, course_id: str) -> List[Session]:
        return [s for s in self.sessions if s.course_id == course_id]

    def count_by_course(self) -> Dict[str, int]:
        return dict(Counter(s.course_id for s in self.sessions))

    def count_by_origin(self) -> Dict[str, int]:
        return dict(Counter(s.origin for s in self.sessions))

    def has_conflicts(self) -> bool:
        from .conflicts import has_conflicts
        return has_conflicts(self)

    def to_dataframe(self) -> pd.DataFrame:
        """One row per session, columns named after the Session fields."""
        columns = [f for f in Session.__dataclass_fields__]
        return pd.DataFrame([asdict(s) for s in self.sessions], columns=columns)


def make_session(
    course: Course,
    resource: Resource,
    instructor: Instructor,
    day: int,
    hour: int,
    origin: str,
    rng: Optional[random.Random] = None,
) -> Session:
    """Build a one-hour session at grid position (day, hour)."""
    return Session(
        id=new_session_id(rng),
        course_id=course.id,
        course_name=course.name,
        day_of_week=DAYS_OF_WEEK[day],
        start_time=hour_label(hour),
        end_time=end_label(hour),
        resource_id=resource.id,
        resource_name=resource.name,
        instructor_id=instructor.id,
        instructor_name=instructor.name,
        session_type=course.session_type,
        origin=origin,
    )
