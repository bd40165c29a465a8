#!/usr/bin/env python3
"""
Tests for the completeness repair pass and the manual fallback.
"""

import sys
import os
import random
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from timetabler.candidates import prepare_inputs
from timetabler.fallback import manual_timetable
from timetabler.generator import generate
from timetabler.models import Course, Instructor, Resource, Timetable
from timetabler.repair import ensure_complete, repair_slot


ROOMS = [Resource('R1', 'Room 1'), Resource('R2', 'Room 2')]
INSTRUCTORS = [Instructor('I1', 'Ada'), Instructor('I2', 'Grace')]


def test_repair_slot_round_robin():
    """Day and hour are offset by the sessions the course already has."""
    assert repair_slot(0, 0) == (0, 0)
    assert repair_slot(4, 0) == (4, 0)
    assert repair_slot(5, 0) == (0, 1)
    assert repair_slot(6, 2) == (3, 3)
    assert repair_slot(44, 0) == (4, 0), 'Hour wraps after the eighth row'


def test_ensure_complete_fills_missing_sessions():
    courses = [Course('C1', 'Algebra', required_sessions_per_week=3),
               Course('C2', 'Biology', required_sessions_per_week=2)]
    prepared = prepare_inputs(ROOMS, INSTRUCTORS, courses)
    timetable = Timetable()
    report = ensure_complete(timetable, prepared, random.Random(0))

    assert report.synthesized == {'C1': 3, 'C2': 2}
    assert report.total == 5
    assert len(timetable) == 5
    assert timetable.count_by_origin() == {'repair': 5}
    # No pinned resources: first room and first instructor
    assert {s.resource_id for s in timetable} == {'R1'}
    assert {s.instructor_id for s in timetable} == {'I1'}


def test_ensure_complete_uses_pinned_resources():
    course = Course('C1', 'Algebra', room_id='R2', instructor_id='I2', required_sessions_per_week=2)
    prepared = prepare_inputs(ROOMS, INSTRUCTORS, [course])
    timetable = Timetable()
    ensure_complete(timetable, prepared)
    assert {(s.resource_id, s.instructor_id) for s in timetable} == {('R2', 'I2')}


def test_ensure_complete_leaves_full_courses_alone():
    course = Course('C1', 'Algebra', required_sessions_per_week=2)
    prepared = prepare_inputs(ROOMS, INSTRUCTORS, [course])
    timetable = manual_timetable(prepared)
    report = ensure_complete(timetable, prepared)
    assert not report, 'Nothing should be synthesized'
    assert len(timetable) == 2


def test_manual_timetable_avoids_collisions_when_possible():
    """Round-robin placement with one room and one instructor still finds distinct slots."""
    courses = [Course('C1', 'Algebra', required_sessions_per_week=6),
               Course('C2', 'Biology', required_sessions_per_week=6)]
    prepared = prepare_inputs(ROOMS[:1], INSTRUCTORS[:1], courses)
    timetable = manual_timetable(prepared, random.Random(1))
    assert len(timetable) == 12
    assert not timetable.has_conflicts()
    assert timetable.count_by_origin() == {'fallback': 12}


def test_greedy_overflow_is_repaired():
    """41 sessions for one room and one instructor cannot fit 40 slots under a 6 hour cap."""
    course = Course('C1', 'Marathon', required_sessions_per_week=41)
    timetable = generate(ROOMS[:1], INSTRUCTORS[:1], [course], strategy='greedy', seed=0)
    assert len(timetable) == 41
    assert timetable.count_by_origin() == {'greedy': 30, 'repair': 11}
    assert timetable.has_conflicts(), 'Repair may double-book to stay complete'


def test_cp_overflow_uses_fallback():
    course = Course('C1', 'Marathon', required_sessions_per_week=41)
    timetable = generate(ROOMS[:1], INSTRUCTORS[:1], [course], strategy='cp', seed=0, time_limit=5)
    assert len(timetable) == 41
    assert timetable.count_by_origin() == {'fallback': 41}
