"""
Occupancy grids over (day, hour) for rooms and instructors.

A tracker lives for the duration of one generation call.
"""

import numpy as np

from .utils import DAYS_PER_WEEK, HOURS_PER_DAY


class AvailabilityTracker:
    def __init__(self, n_resources: int, n_instructors: int,
                 days: int = DAYS_PER_WEEK, hours: int = HOURS_PER_DAY):
        # True means free
        self.resource_free = np.ones((n_resources, days, hours), dtype=bool)
        self.instructor_free = np.ones((n_instructors, days, hours), dtype=bool)
        self.days = days
        self.hours = hours

    def is_resource_free(self, resource_idx: int, day: int, hour: int) -> bool:
        return bool(self.resource_free[resource_idx, day, hour])

    def is_instructor_free(self, instructor_idx: int, day: int, hour: int) -> bool:
        return bool(self.instructor_free[instructor_idx, day, hour])

    def is_free(self, resource_idx: int, instructor_idx: int, day: int, hour: int) -> bool:
        """True if both the room and the instructor are free at (day, hour)."""
        return (self.is_resource_free(resource_idx, day, hour)
                and self.is_instructor_free(instructor_idx, day, hour))

    def occupy(self, resource_idx: int, instructor_idx: int, day: int, hour: int):
        self.resource_free[resource_idx, day, hour] = False
        self.instructor_free[instructor_idx, day, hour] = False

    def instructor_hours(self, instructor_idx: int, day: int) -> int:
        """Hours already allocated to an instructor on a day."""
        return int(self.hours - self.instructor_free[instructor_idx, day].sum())

    def back_to_back_score(self, instructor_idx: int, day: int, hour: int, duration: int = 1) -> int:
        """
        Count occupied neighbours of a block for an instructor.

        One for the hour immediately before the block, one for the hour
        immediately after. Lower is better.
        """
        row = self.instructor_free[instructor_idx, day]
        count = 0
        if hour > 0 and not row[hour - 1]:
            count += 1
        if hour + duration < self.hours and not row[hour + duration]:
            count += 1
        return count
