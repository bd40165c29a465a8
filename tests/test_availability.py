#!/usr/bin/env python3
"""
Tests for the room/instructor occupancy tracker.
"""

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from timetabler.availability import AvailabilityTracker


def test_all_cells_start_free():
    tracker = AvailabilityTracker(2, 3)
    for d in range(5):
        for h in range(8):
            assert tracker.is_resource_free(1, d, h)
            assert tracker.is_instructor_free(2, d, h)


def test_occupy_marks_room_and_instructor():
    """Occupying a cell blocks both the room and the instructor, nothing else."""
    tracker = AvailabilityTracker(2, 2)
    tracker.occupy(0, 1, 3, 4)
    assert not tracker.is_resource_free(0, 3, 4)
    assert not tracker.is_instructor_free(1, 3, 4)
    assert tracker.is_resource_free(1, 3, 4)
    assert tracker.is_instructor_free(0, 3, 4)
    assert not tracker.is_free(0, 0, 3, 4), 'Room 0 is taken'
    assert not tracker.is_free(1, 1, 3, 4), 'Instructor 1 is taken'
    assert tracker.is_free(1, 0, 3, 4)


def test_instructor_hours_counts_per_day():
    tracker = AvailabilityTracker(3, 1)
    tracker.occupy(0, 0, 2, 0)
    tracker.occupy(1, 0, 2, 5)
    tracker.occupy(2, 0, 4, 1)
    assert tracker.instructor_hours(0, 2) == 2
    assert tracker.instructor_hours(0, 4) == 1
    assert tracker.instructor_hours(0, 0) == 0


def test_back_to_back_score():
    """One point per occupied neighbouring hour."""
    tracker = AvailabilityTracker(1, 1)
    tracker.occupy(0, 0, 0, 2)
    tracker.occupy(0, 0, 0, 4)
    assert tracker.back_to_back_score(0, 0, 3) == 2
    assert tracker.back_to_back_score(0, 0, 1) == 1
    assert tracker.back_to_back_score(0, 0, 5) == 1
    assert tracker.back_to_back_score(0, 0, 7) == 0
    assert tracker.back_to_back_score(0, 1, 3) == 0, 'Other days are unaffected'


def test_back_to_back_score_at_day_edges():
    tracker = AvailabilityTracker(1, 1)
    tracker.occupy(0, 0, 0, 1)
    tracker.occupy(0, 0, 0, 6)
    assert tracker.back_to_back_score(0, 0, 0) == 1
    assert tracker.back_to_back_score(0, 0, 7) == 1
