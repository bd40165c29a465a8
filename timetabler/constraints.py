#!/usr/bin/env python3
"""
Core constraint classes for timetable optimization.

These define the feasibility requirements that all solver output must satisfy.
"""

from pulp import lpSum
from .constraint_base import ConstraintBase


class AssignEverySession(ConstraintBase):
    """Ensures each session gets exactly one slot, one room and one instructor."""

    def __init__(self):
        super().__init__(name="Assign every session")

    def apply(self, scheduler, prefix="") -> int:
        count = 0
        for s, _ in scheduler.sessions:
            scheduler.prob += (
                lpSum(scheduler.x[(s, t)] for t in scheduler.slot_indices) == 1,
                f"{prefix}one_slot_{s}"
            )
            scheduler.prob += (
                lpSum(scheduler.y[(s, r)] for r in scheduler.room_domain[s]) == 1,
                f"{prefix}one_room_{s}"
            )
            scheduler.prob += (
                lpSum(scheduler.z[(s, i)] for i in scheduler.instructor_domain[s]) == 1,
                f"{prefix}one_instructor_{s}"
            )
            count += 3
        return count


class NoRoomOverlap(ConstraintBase):
    """
    Ensures a room hosts at most one session per (day, hour).

    Equivalent to: same day and same hour implies different rooms.
    """

    def __init__(self):
        super().__init__(name="No room overlap")

    def apply(self, scheduler, prefix="") -> int:
        count = 0
        for r in range(len(scheduler.rooms)):
            sharing = [s for s, _ in scheduler.sessions if r in scheduler.room_domain[s]]
            if len(sharing) < 2:
                continue
            for t in scheduler.slot_indices:
                scheduler.prob += (
                    lpSum(scheduler.room_occupancy(s, t, r) for s in sharing) <= 1,
                    f"{prefix}no_room_overlap_{r}_{t}"
                )
                count += 1
        return count


class NoInstructorOverlap(ConstraintBase):
    """
    Ensures an instructor teaches at most one session per (day, hour).

    Equivalent to: same day and same hour implies different instructors.
    """

    def __init__(self):
        super().__init__(name="No instructor overlap")

    def apply(self, scheduler, prefix="") -> int:
        count = 0
        for i in range(len(scheduler.instructors)):
            sharing = [s for s, _ in scheduler.sessions if i in scheduler.instructor_domain[s]]
            if len(sharing) < 2:
                continue
            for t in scheduler.slot_indices:
                scheduler.prob += (
                    lpSum(scheduler.instructor_occupancy(s, t, i) for s in sharing) <= 1,
                    f"{prefix}no_instructor_overlap_{i}_{t}"
                )
                count += 1
        return count
