#!/usr/bin/env python3
"""
Greedy constructive scheduler.

Courses are placed one session at a time in input order: pick a room and an
instructor from the course's candidates, then take the first (day, hour)
where both are free. Sessions that find no slot are left to the repair pass.
"""

import logging
import random
from typing import List, Optional, Sequence

from .availability import AvailabilityTracker
from .candidates import ScheduleInput, candidate_instructors, candidate_rooms
from .conflicts import has_conflicts
from .models import ORIGIN_GREEDY, Course, Instructor, Resource, Timetable, make_session
from .options import GeneratorOptions
from .utils import DAYS_OF_WEEK, DAYS_PER_WEEK, HOURS_PER_DAY, hour_label

logger = logging.getLogger(__name__)


class GreedyScheduler:
    name = "greedy"

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Args:
            seed: Seed for the tie-breaking random source. Ignored if rng is given.
            rng: Random source to use directly.
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def generate(
        self,
        rooms: Sequence[Resource],
        instructors: Sequence[Instructor],
        courses: Sequence[Course],
        options: Optional[GeneratorOptions] = None,
    ) -> Timetable:
        """Schedule, then repair. See timetabler.generator.generate."""
        from .generator import run_strategy
        return run_strategy(self, rooms, instructors, courses, options)

    def has_conflicts(self, timetable: Timetable) -> bool:
        return has_conflicts(timetable)

    def day_order(self, options: GeneratorOptions) -> List[int]:
        days = list(range(DAYS_PER_WEEK))
        if options.prefer_even_distribution:
            self.rng.shuffle(days)
        return days

    def hour_order(self, tracker: AvailabilityTracker, instructor_idx: int, day: int,
                   options: GeneratorOptions) -> List[int]:
        hours = list(range(HOURS_PER_DAY))
        if options.avoid_back_to_back:
            hours.sort(key=lambda h: tracker.back_to_back_score(instructor_idx, day, h))
        else:
            self.rng.shuffle(hours)
        return hours

    def schedule(self, prepared: ScheduleInput) -> Timetable:
        """Place as many sessions as possible. No repair."""
        options = prepared.options
        rooms, instructors = prepared.rooms, prepared.instructors
        timetable = Timetable()
        if prepared.is_empty:
            logger.error("Cannot generate timetable with empty resources, instructors, or courses")
            return timetable

        logger.debug(
            f"Using options: avoid_back_to_back={options.avoid_back_to_back}, "
            f"prefer_even_distribution={options.prefer_even_distribution}, "
            f"max_hours_per_day={options.max_hours_per_day}"
        )
        tracker = AvailabilityTracker(len(rooms), len(instructors))

        for course in prepared.courses:
            suitable_rooms = candidate_rooms(course, rooms)
            suitable_instructors = candidate_instructors(course, instructors)
            needed = course.sessions_needed
            scheduled = 0

            for session_no in range(needed):
                self.rng.shuffle(suitable_rooms)
                self.rng.shuffle(suitable_instructors)
                room_idx = suitable_rooms[0]
                instructor_idx = suitable_instructors[0]

                placed = self._place(course, room_idx, instructor_idx, tracker, prepared, timetable)
                if placed:
                    scheduled += 1
                else:
                    logger.warning(f"Could not schedule session {session_no + 1} for {course.name}")

            logger.debug(f"Scheduled {scheduled}/{needed} sessions for {course.name}")

        logger.info(f"Greedy generation placed {len(timetable)}/{prepared.total_sessions} sessions")
        return timetable

    def _place(self, course, room_idx, instructor_idx, tracker, prepared, timetable) -> bool:
        options = prepared.options
        room = prepared.rooms[room_idx]
        instructor = prepared.instructors[instructor_idx]

        for day in self.day_order(options):
            hours_today = tracker.instructor_hours(instructor_idx, day)
            if hours_today >= options.max_hours_per_day:
                logger.debug(
                    f"Skipping {DAYS_OF_WEEK[day]} - {instructor.name} already has "
                    f"{hours_today} hours (max: {options.max_hours_per_day})"
                )
                continue

            for hour in self.hour_order(tracker, instructor_idx, day, options):
                if not tracker.is_free(room_idx, instructor_idx, day, hour):
                    continue
                tracker.occupy(room_idx, instructor_idx, day, hour)
                timetable.add_session(
                    make_session(course, room, instructor, day, hour, ORIGIN_GREEDY, self.rng)
                )
                logger.debug(
                    f"Scheduled {course.name} on {DAYS_OF_WEEK[day]} at {hour_label(hour)} "
                    f"with {instructor.name} in {room.name}"
                )
                return True
        return False
