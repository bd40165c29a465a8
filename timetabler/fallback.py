#!/usr/bin/env python3
"""
Manual placement used when the solver cannot produce a timetable.

Sessions are laid out round-robin over the week. Collisions with already
placed sessions are avoided by scanning the other hours of the day, then the
other days; when the week is full the session is force-placed anyway.
"""

import logging
import random
from collections import defaultdict
from typing import Optional

from .candidates import ScheduleInput, candidate_instructors, candidate_rooms
from .models import ORIGIN_FALLBACK, Timetable, make_session
from .utils import DAYS_OF_WEEK, DAYS_PER_WEEK, HOURS_PER_DAY, hour_label

logger = logging.getLogger(__name__)


class _SlotBook:
    """Rooms and instructors already used per (day, hour)."""

    def __init__(self):
        self.rooms = defaultdict(set)
        self.instructors = defaultdict(set)

    def collides(self, day, hour, room_id, instructor_id) -> bool:
        return (room_id in self.rooms[(day, hour)]
                or instructor_id in self.instructors[(day, hour)])

    def book(self, day, hour, room_id, instructor_id):
        self.rooms[(day, hour)].add(room_id)
        self.instructors[(day, hour)].add(instructor_id)


def _find_free_slot(book: _SlotBook, day: int, hour: int, room_id: str, instructor_id: str):
    if not book.collides(day, hour, room_id, instructor_id):
        return day, hour
    # Other hours on the same day first
    for h in range(HOURS_PER_DAY):
        if h != hour and not book.collides(day, h, room_id, instructor_id):
            return day, h
    for offset in range(1, DAYS_PER_WEEK):
        d = (day + offset) % DAYS_PER_WEEK
        for h in range(HOURS_PER_DAY):
            if not book.collides(d, h, room_id, instructor_id):
                return d, h
    return None


def manual_timetable(prepared: ScheduleInput, rng: Optional[random.Random] = None) -> Timetable:
    """Build a best-effort timetable without the solver."""
    logger.info("Creating manual timetable as fallback")
    timetable = Timetable()
    if prepared.is_empty:
        return timetable

    book = _SlotBook()
    counter = 0
    forced = 0
    for course in prepared.courses:
        room = prepared.rooms[candidate_rooms(course, prepared.rooms)[0]]
        instructor = prepared.instructors[candidate_instructors(course, prepared.instructors)[0]]

        for _ in range(course.sessions_needed):
            day = counter % DAYS_PER_WEEK
            hour = (counter // DAYS_PER_WEEK) % HOURS_PER_DAY
            counter += 1

            slot = _find_free_slot(book, day, hour, room.id, instructor.id)
            if slot is None:
                forced += 1
                logger.warning(
                    f"No free slot for {course.name} with {instructor.name} in {room.name} - "
                    f"force-placing on {DAYS_OF_WEEK[day]} at {hour_label(hour)}"
                )
            else:
                day, hour = slot

            book.book(day, hour, room.id, instructor.id)
            timetable.add_session(
                make_session(course, room, instructor, day, hour, ORIGIN_FALLBACK, rng)
            )
            logger.debug(f"Added fallback session for {course.name} on {DAYS_OF_WEEK[day]} at {hour_label(hour)}")

    logger.info(f"Manual timetable placed {len(timetable)} sessions ({forced} forced)")
    return timetable
