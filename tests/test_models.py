#!/usr/bin/env python3
"""
Tests for the domain model and time helpers.
"""

import sys
import os
import random
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from timetabler.conflicts import booking_conflicts
from timetabler.models import Booking, Course, Instructor, Resource, make_session, new_session_id
from timetabler.utils import end_label, hour_label, parse_time_range, time_to_minutes


def test_time_helpers():
    assert time_to_minutes('09:30') == 570
    assert hour_label(0) == '09:00'
    assert hour_label(7) == '16:00'
    assert end_label(7) == '17:00'
    assert end_label(2, duration=2) == '13:00'


def test_parse_time_range():
    assert parse_time_range('09:00-12:00') == ('09:00', '12:00')
    assert parse_time_range(' 13:00 - 14:30 ') == ('13:00', '14:30')
    assert parse_time_range('morning') is None
    assert parse_time_range('9-12') is None
    assert parse_time_range(None) is None


def test_course_derived_properties():
    course = Course('C1', 'Algebra', credit_hours=3, required_sessions_per_week=2)
    assert course.typical_session_duration == 90, 'Three credit hours over two sessions'
    assert course.session_type == 'LECTURE'
    assert Course('C2', 'Logic', required_sessions_per_week=0).sessions_needed == 1
    assert Course('C3', 'Logic', code='PH210').session_type == 'PH210'


def test_seeded_session_ids_repeat():
    first = [new_session_id(random.Random(5)) for _ in range(2)]
    assert first[0] == first[1], 'Same seed, same id'
    assert new_session_id(random.Random(5)) != new_session_id(random.Random(6))
    assert new_session_id() != new_session_id()


def test_make_session():
    course = Course('C1', 'Algebra', code='MATH101')
    session = make_session(course, Resource('R1', 'Main Hall'), Instructor('I1', 'Ada'),
                           day=2, hour=3, origin='solver')
    assert session.day_of_week == 'Wednesday'
    assert (session.start_time, session.end_time) == ('12:00', '13:00')
    assert session.session_type == 'MATH101'
    assert session.slot == ('Wednesday', '12:00')
    assert session.origin == 'solver'


def test_booking_conflicts():
    booking = Booking('R1', 'I1', ('Monday', 'Thursday'), '10:00', '12:00')
    assert booking_conflicts(booking, ['Thursday'], '11:00', '12:00')
    assert not booking_conflicts(booking, ['Thursday'], '12:00', '13:00')
    assert not booking_conflicts(booking, ['Friday'], '11:00', '12:00')
