#!/usr/bin/env python3
"""
Completeness repair pass.

Runs after either scheduler. Every course must end up with exactly its
required number of sessions, even at the cost of a double booking: the
synthesized sessions are tagged and logged so callers can audit how much of
a timetable is filler rather than optimization output.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, Optional

from .candidates import ScheduleInput, find_index
from .models import ORIGIN_REPAIR, Timetable, make_session
from .utils import DAYS_OF_WEEK, DAYS_PER_WEEK, HOURS_PER_DAY

logger = logging.getLogger(__name__)


@dataclass
class RepairReport:
    synthesized: Dict[str, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.synthesized.values())

    def __bool__(self):
        return self.total > 0


def repair_slot(i: int, already_scheduled: int):
    """Round-robin (day, hour) for the i-th session, offset by what the course already has."""
    day = (i % DAYS_PER_WEEK + already_scheduled) % DAYS_PER_WEEK
    hour = ((i // DAYS_PER_WEEK) % HOURS_PER_DAY + already_scheduled) % HOURS_PER_DAY
    return day, hour


def ensure_complete(
    timetable: Timetable,
    prepared: ScheduleInput,
    rng: Optional[random.Random] = None,
) -> RepairReport:
    """
    Append sessions for every course that is short of its required count.

    Modifies timetable in place and returns what was added.
    """
    report = RepairReport()
    if prepared.is_empty:
        return report

    counts = timetable.count_by_course()
    for course in prepared.courses:
        have = counts.get(course.id, 0)
        required = course.sessions_needed
        if have >= required:
            continue

        logger.warning(
            f"Course {course.name} is missing {required - have} sessions - adding manually"
        )
        room_idx = find_index(prepared.rooms, course.room_id)
        instructor_idx = find_index(prepared.instructors, course.instructor_id)
        room = prepared.rooms[room_idx if room_idx is not None else 0]
        instructor = prepared.instructors[instructor_idx if instructor_idx is not None else 0]

        for i in range(have, required):
            day, hour = repair_slot(i, have)
            session = make_session(course, room, instructor, day, hour, ORIGIN_REPAIR, rng)
            timetable.add_session(session)
            logger.warning(
                f"[repair] Synthesized session {i + 1}/{required} for {course.name} "
                f"on {DAYS_OF_WEEK[day]} at {session.start_time} in {room.name} "
                f"with {instructor.name}"
            )
        report.synthesized[course.id] = required - have

    if report:
        logger.warning(f"Repair pass synthesized {report.total} session(s)")
    return report
