#!/usr/bin/env python3
"""
Objective classes for timetable optimization.

The balance objectives are min-max fairness terms: they discourage piling
sessions onto one day or one hour without hard-capping any of them.
"""

import math

from .objective_base import ObjectiveBase
from pulp import LpVariable, lpSum
from .utils import DAYS_PER_WEEK, HOURS_PER_DAY

# 11:00 to 14:00
MIDDAY_HOURS = range(2, 6)


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


class BalanceDays(ObjectiveBase):
    """
    Minimize the largest distance between a day's session count and the
    ideal count ceil(total / 5).
    """

    def __init__(self, weight: float = 1.0):
        super().__init__(name="Minimize day imbalance", sense='minimize', weight=weight)

    def targets(self, total: int) -> list[int]:
        ideal = math.ceil(total / DAYS_PER_WEEK)
        return [ideal] * DAYS_PER_WEEK

    def evaluate(self, scheduler, prefix=""):
        total = len(scheduler.sessions)
        max_diff = LpVariable(f"{prefix}max_day_diff", 0, total, cat='Integer')
        for d, target in enumerate(self.targets(total)):
            day_count = LpVariable(f"{prefix}day_count_{d}", 0, total, cat='Integer')
            scheduler.prob += (
                day_count == lpSum(
                    scheduler.x[(s, t)]
                    for s, _ in scheduler.sessions
                    for t in scheduler.slot_indices
                    if scheduler.slot_day(t) == d
                ),
                f"{prefix}count_day_{d}"
            )
            diff = LpVariable(f"{prefix}day_diff_{d}", 0, total, cat='Integer')
            scheduler.prob += diff >= day_count - target, f"{prefix}day_diff_above_{d}"
            scheduler.prob += diff >= target - day_count, f"{prefix}day_diff_below_{d}"
            scheduler.prob += diff <= max_diff, f"{prefix}day_diff_max_{d}"
        return max_diff


class BalanceHours(ObjectiveBase):
    """
    Minimize the largest distance between an hour's session count and its
    target, ceil(total / 8) scaled up by midday_preference for the middle hours.
    """

    def __init__(self, midday_preference: float = 1.2, weight: float = 1.0):
        """
        Args:
            midday_preference: Target multiplier for 11:00-14:00 (1.0 = no preference)
            weight: Multiplier of this term in the combined objective
        """
        if midday_preference <= 0:
            raise ValueError(f"midday_preference must be positive, got {midday_preference}")
        self.midday_preference = midday_preference
        super().__init__(name="Minimize hour imbalance", sense='minimize', weight=weight)

    def targets(self, total: int) -> list[int]:
        ideal = math.ceil(total / HOURS_PER_DAY)
        return [
            round_half_up(ideal * (self.midday_preference if h in MIDDAY_HOURS else 1.0))
            for h in range(HOURS_PER_DAY)
        ]

    def evaluate(self, scheduler, prefix=""):
        total = len(scheduler.sessions)
        max_diff = LpVariable(f"{prefix}max_hour_diff", 0, None, cat='Integer')
        for h, target in enumerate(self.targets(total)):
            hour_count = LpVariable(f"{prefix}hour_count_{h}", 0, total, cat='Integer')
            scheduler.prob += (
                hour_count == lpSum(
                    scheduler.x[(s, t)]
                    for s, _ in scheduler.sessions
                    for t in scheduler.slot_indices
                    if scheduler.slot_hour(t) == h
                ),
                f"{prefix}count_hour_{h}"
            )
            diff = LpVariable(f"{prefix}hour_diff_{h}", 0, None, cat='Integer')
            scheduler.prob += diff >= hour_count - target, f"{prefix}hour_diff_above_{h}"
            scheduler.prob += diff >= target - hour_count, f"{prefix}hour_diff_below_{h}"
            scheduler.prob += diff <= max_diff, f"{prefix}hour_diff_max_{h}"
        return max_diff


class MinimizeInstructorOverload(ObjectiveBase):
    """
    Minimize teaching hours above max_hours_per_day, summed over
    instructors and days.
    """

    def __init__(self, max_hours_per_day: int = 6, weight: float = 1.0):
        self.max_hours_per_day = max_hours_per_day
        super().__init__(
            name=f"Minimize instructor hours over {max_hours_per_day}/day",
            sense='minimize',
            weight=weight
        )

    def evaluate(self, scheduler, prefix=""):
        overloads = []
        for i in range(len(scheduler.instructors)):
            teaching = [s for s, _ in scheduler.sessions if i in scheduler.instructor_domain[s]]
            # Cannot exceed the cap even if every session lands on one day
            if len(teaching) <= self.max_hours_per_day:
                continue
            for d in range(DAYS_PER_WEEK):
                over = LpVariable(f"{prefix}overload_{i}_{d}", 0, None, cat='Integer')
                load = lpSum(
                    scheduler.instructor_occupancy(s, t, i)
                    for s in teaching
                    for t in scheduler.slot_indices
                    if scheduler.slot_day(t) == d
                )
                scheduler.prob += over >= load - self.max_hours_per_day, f"{prefix}overload_{i}_{d}"
                overloads.append(over)
        return lpSum(overloads)
