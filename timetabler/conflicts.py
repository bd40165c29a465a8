#!/usr/bin/env python3
"""
Conflict detection shared by the generators and by callers that filter
candidate rooms and instructors against hand-pinned bookings.
"""

from collections import defaultdict
from typing import Callable, Iterable, List, Optional, Sequence

from .models import Booking, Instructor, Resource, Timetable
from .utils import MINUTES_PER_DAY, parse_time_range, time_to_minutes


def days_overlap(days_a: Iterable[str], days_b: Iterable[str]) -> bool:
    """True if the two day collections share at least one weekday name."""
    return bool(set(days_a) & set(days_b))


def time_ranges_overlap(start_a: str, end_a: str, start_b: str, end_b: str) -> bool:
    """
    True if [start_a, end_a) and [start_b, end_b) overlap.

    Ranges that merely touch do not overlap:
    09:00-10:00 and 10:00-11:00 are back-to-back, not conflicting.
    """
    a0, a1 = time_to_minutes(start_a), time_to_minutes(end_a)
    b0, b1 = time_to_minutes(start_b), time_to_minutes(end_b)
    return not (a1 <= b0 or b1 <= a0)


def make_overlap_predicate(days: Sequence[str], start: str, end: str) -> Callable[[Booking], bool]:
    """
    Create a predicate that returns True if a booking overlaps the given slot.

    Args:
        days: Weekday names of the requested slot
        start: Requested start time, HH:MM
        end: Requested end time, HH:MM
    """
    def predicate(booking: Booking) -> bool:
        if not days_overlap(booking.days, days):
            return False
        return time_ranges_overlap(start, end, booking.start_time, booking.end_time)

    return predicate


def booking_conflicts(booking: Booking, days: Sequence[str], start: str, end: str) -> bool:
    return make_overlap_predicate(days, start, end)(booking)


def free_resources(
    resources: Iterable[Resource],
    bookings: Iterable[Booking],
    days: Sequence[str],
    start: str,
    end: str,
    keep_resource_id: Optional[str] = None,
) -> List[Resource]:
    """
    Rooms without an overlapping booking for the requested slot.

    Args:
        keep_resource_id: Room of the booking currently being edited; it
                          stays a candidate even though its own booking overlaps.
    """
    overlaps = make_overlap_predicate(days, start, end)
    busy = {b.resource_id for b in bookings if b.resource_id and overlaps(b)}
    busy.discard(keep_resource_id)
    return [r for r in resources if r.available and r.id not in busy]


def free_instructors(
    instructors: Iterable[Instructor],
    bookings: Iterable[Booking],
    days: Sequence[str],
    start: str,
    end: str,
    keep_instructor_id: Optional[str] = None,
) -> List[Instructor]:
    """Instructors without an overlapping booking for the requested slot."""
    overlaps = make_overlap_predicate(days, start, end)
    busy = {b.instructor_id for b in bookings if b.instructor_id and overlaps(b)}
    busy.discard(keep_instructor_id)
    return [i for i in instructors if i.id not in busy]


def _wrapped_difference(time_a: str, time_b: str) -> int:
    diff = time_to_minutes(time_a) - time_to_minutes(time_b)
    if diff < 0:
        diff += MINUTES_PER_DAY
    return diff


def proximity_score(instructor: Instructor, days: Sequence[str], start: str, end: str) -> Optional[int]:
    """
    How closely an instructor's declared hours match a requested slot.

    Sum of the minute differences between requested and preferred start and
    end times, lower is closer. None when the instructor declares no
    matching day or no usable hours.
    """
    if not days_overlap(instructor.preferred_days, days):
        return None
    preferred = parse_time_range(instructor.preferred_hours)
    if preferred is None:
        return None
    preferred_start, preferred_end = preferred
    return (abs(_wrapped_difference(start, preferred_start))
            + abs(_wrapped_difference(end, preferred_end)))


def rank_instructors(
    instructors: Iterable[Instructor],
    days: Sequence[str],
    start: str,
    end: str,
    bookings: Iterable[Booking] = (),
    keep_instructor_id: Optional[str] = None,
) -> List[Instructor]:
    """
    Instructors free for a slot, best proximity first.

    Instructors with an undefined score sort last, in input order.
    """
    candidates = free_instructors(instructors, bookings, days, start, end, keep_instructor_id)
    scored = [(proximity_score(i, days, start, end), n, i) for n, i in enumerate(candidates)]
    scored.sort(key=lambda item: (item[0] is None, item[0] or 0, item[1]))
    return [i for _, _, i in scored]


def has_conflicts(timetable: Timetable) -> bool:
    """
    True if two sessions share (day, start time) and a room or an instructor.

    Read-only; the generators never call it on their own output.
    """
    rooms_used = defaultdict(set)
    instructors_used = defaultdict(set)
    for session in timetable:
        key = session.slot
        if session.resource_id in rooms_used[key]:
            return True
        if session.instructor_id in instructors_used[key]:
            return True
        rooms_used[key].add(session.resource_id)
        instructors_used[key].add(session.instructor_id)
    return False
