#!/usr/bin/env python3
"""
Tests for input validation and candidate room/instructor selection.
"""

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from timetabler.candidates import (
    candidate_instructors,
    candidate_rooms,
    compatible_rooms,
    prepare_inputs,
    room_matches,
    validate_courses,
)
from timetabler.models import Course, Instructor, Resource
from timetabler.options import GeneratorOptions


ROOMS = [
    Resource('R1', 'Main Hall', type='LECTURE_HALL'),
    Resource('R2', 'Lab 1', type='COMPUTER_LAB'),
    Resource('R3', 'Seminar', type='SEMINAR_ROOM'),
]
INSTRUCTORS = [Instructor('I1', 'Ada'), Instructor('I2', 'Grace'), Instructor('I3', 'Alan')]


def test_room_matches_named_categories():
    assert room_matches('LAB', 'COMPUTER_LAB')
    assert not room_matches('LAB', 'LECTURE_HALL')
    assert room_matches('LECTURE_HALL', 'LECTURE_HALL')
    assert room_matches('LECTURE_HALL', 'SEMINAR_ROOM'), 'ROOM counts as a lecture hall'
    assert room_matches('SEMINAR', 'SEMINAR_ROOM')
    assert room_matches(None, 'anything')
    assert not room_matches('LAB', '')


def test_compatible_rooms_falls_back_to_all():
    """A type nobody offers widens to every room."""
    course = Course('C1', 'Pottery', required_room_type='KILN')
    assert compatible_rooms(course, ROOMS) == [0, 1, 2]


def test_room_type_defaults_to_department():
    course = Course('C1', 'Robotics', department='LAB')
    assert course.room_type == 'LAB'
    assert compatible_rooms(course, ROOMS) == [1]


def test_pinned_room_collapses_candidates():
    course = Course('C1', 'Robotics', required_room_type='LAB', room_id='R3')
    assert candidate_rooms(course, ROOMS) == [2]


def test_unknown_pinned_room_is_ignored():
    course = Course('C1', 'Robotics', required_room_type='LAB', room_id='missing')
    assert candidate_rooms(course, ROOMS) == [1]


def test_candidate_instructors_pinned_pool_and_all():
    pinned = Course('C1', 'A', instructor_id='I2', preferred_instructor_ids=('I3',))
    pooled = Course('C2', 'B', preferred_instructor_ids=('I3', 'nobody', 'I1'))
    unknown = Course('C3', 'C', instructor_id='nobody')
    anyone = Course('C4', 'D')
    assert candidate_instructors(pinned, INSTRUCTORS) == [1]
    assert candidate_instructors(pooled, INSTRUCTORS) == [2, 0]
    assert candidate_instructors(unknown, INSTRUCTORS) == [0, 1, 2]
    assert candidate_instructors(anyone, INSTRUCTORS) == [0, 1, 2]


def test_validate_courses_skips_and_coerces():
    """Nameless and duplicate-name courses are skipped; session counts below 1 become 1."""
    courses = [
        Course('C1', 'Algebra', required_sessions_per_week=0),
        Course('C2', '', required_sessions_per_week=2),
        Course('C3', 'ALGEBRA', required_sessions_per_week=3),
        Course('', 'Orphan'),
        Course('C4', 'Biology', required_sessions_per_week=-2),
    ]
    valid = validate_courses(courses)
    assert [c.id for c in valid] == ['C1', 'C4'], f'Unexpected courses: {[c.id for c in valid]}'
    assert all(c.required_sessions_per_week == 1 for c in valid)


def test_prepare_inputs_excludes_rooms():
    """Unavailable rooms and deny-listed names never reach the schedulers."""
    rooms = ROOMS + [Resource('R4', ' gy ', type='HALL'), Resource('R5', 'Closed', available=False)]
    options = GeneratorOptions(excluded_room_names=('GY',))
    prepared = prepare_inputs(rooms, INSTRUCTORS, [Course('C1', 'Algebra')], options)
    assert [r.id for r in prepared.rooms] == ['R1', 'R2', 'R3']
    assert not prepared.is_empty
    assert prepared.total_sessions == 1


def test_prepare_inputs_empty():
    prepared = prepare_inputs([], INSTRUCTORS, [Course('C1', 'Algebra')])
    assert prepared.is_empty


def test_candidate_instructors_drops_repeated_pool_ids():
    course = Course('C1', 'A', preferred_instructor_ids=('I3', 'I1', 'I3', 'I1'))
    assert candidate_instructors(course, INSTRUCTORS) == [2, 0]
