#!/usr/bin/env python3
"""
Input validation and candidate selection shared by all schedulers.
"""

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

from .models import Course, Instructor, Resource
from .options import GeneratorOptions

logger = logging.getLogger(__name__)


@dataclass
class ScheduleInput:
    """Validated inputs for one generation run."""
    rooms: List[Resource]
    instructors: List[Instructor]
    courses: List[Course]
    options: GeneratorOptions

    @property
    def is_empty(self) -> bool:
        return not (self.rooms and self.instructors and self.courses)

    @property
    def total_sessions(self) -> int:
        return sum(c.sessions_needed for c in self.courses)


def usable_rooms(rooms: Sequence[Resource], options: GeneratorOptions) -> List[Resource]:
    """Drop rooms flagged unavailable or on the excluded-names list."""
    kept = []
    for room in rooms:
        if not room.available:
            logger.debug(f"Filtering out unavailable room: {room.name}")
            continue
        if options.is_excluded(room.name):
            logger.debug(f"Filtering out excluded room: {room.name}")
            continue
        kept.append(room)
    return kept


def validate_courses(courses: Sequence[Course]) -> List[Course]:
    """
    Keep courses that can be scheduled.

    Courses without an id or name are skipped, duplicate names
    (case-insensitive) keep the first instance, and non-positive session
    counts are coerced to 1.
    """
    valid = []
    seen_names = {}
    for course in courses:
        if not course.id:
            logger.warning(f"Course missing ID: {course.name!r} - skipping")
            continue
        if not course.name:
            logger.warning(f"Course missing name, ID: {course.id} - skipping")
            continue
        key = course.name.lower()
        if key in seen_names:
            logger.warning(
                f"Duplicate course name {course.name!r} (ID: {course.id}, "
                f"existing ID: {seen_names[key]}) - keeping first instance"
            )
            continue
        if course.required_sessions_per_week <= 0:
            logger.warning(f"Course has no required sessions, setting to 1: {course.name}")
            course = replace(course, required_sessions_per_week=1)
        seen_names[key] = course.id
        valid.append(course)
    return valid


def prepare_inputs(
    rooms: Sequence[Resource],
    instructors: Sequence[Instructor],
    courses: Sequence[Course],
    options: Optional[GeneratorOptions] = None,
) -> ScheduleInput:
    options = options or GeneratorOptions()
    prepared = ScheduleInput(
        rooms=usable_rooms(rooms or [], options),
        instructors=list(instructors or []),
        courses=validate_courses(courses or []),
        options=options,
    )
    if rooms and not prepared.rooms:
        logger.error("All rooms were filtered out as unavailable or excluded")
    return prepared


def room_matches(required_type: Optional[str], room_type: Optional[str]) -> bool:
    """
    Does a room of room_type satisfy required_type?

    LAB needs a type containing LAB, LECTURE_HALL accepts HALL or ROOM,
    anything else is a substring match. Comparison ignores case.
    """
    if not required_type:
        return True
    if not room_type:
        return False
    required = required_type.upper()
    offered = room_type.upper()
    if required == "LAB":
        return "LAB" in offered
    if required == "LECTURE_HALL":
        return "HALL" in offered or "ROOM" in offered
    return required in offered


def compatible_rooms(course: Course, rooms: Sequence[Resource]) -> List[int]:
    """Indices of rooms whose type satisfies the course, or all rooms if none do."""
    required = course.room_type
    matches = [j for j, room in enumerate(rooms) if room_matches(required, room.type)]
    if not matches:
        logger.debug(f"No compatible rooms for {course.name} (type {required!r}), using all rooms")
        return list(range(len(rooms)))
    return matches


def find_index(items: Sequence, item_id: Optional[str]) -> Optional[int]:
    if not item_id:
        return None
    for j, item in enumerate(items):
        if item.id == item_id:
            return j
    return None


def candidate_rooms(course: Course, rooms: Sequence[Resource]) -> List[int]:
    """Pinned room if it resolves, else compatible rooms."""
    pinned = find_index(rooms, course.room_id)
    if pinned is not None:
        return [pinned]
    if course.room_id:
        logger.warning(f"Assigned room ID {course.room_id} not found for course: {course.name}")
    return compatible_rooms(course, rooms)


def candidate_instructors(course: Course, instructors: Sequence[Instructor]) -> List[int]:
    """Pinned instructor if it resolves, else the preferred pool, else everyone."""
    pinned = find_index(instructors, course.instructor_id)
    if pinned is not None:
        return [pinned]
    if course.instructor_id:
        logger.warning(
            f"Assigned instructor ID {course.instructor_id} not found for course: "
            f"{course.name} - will use any suitable instructor"
        )
    pool = [find_index(instructors, i) for i in course.preferred_instructor_ids]
    # Repeated ids would give a session two choice variables for one instructor
    pool = list(dict.fromkeys(j for j in pool if j is not None))
    if pool:
        return pool
    return list(range(len(instructors)))
