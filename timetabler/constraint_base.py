#!/usr/bin/env python3
"""
Base class for hard constraints of the timetable model.

Constraints are applied to a built model, in the order they were added,
before the solver runs.
"""

from abc import ABC, abstractmethod


class ConstraintBase(ABC):
    """
    Abstract base class for hard constraints.

    Each constraint has:
    - A name for logging/debugging
    - An apply() method that posts its rows to the scheduler's problem
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def apply(self, scheduler, prefix: str = "") -> int:
        """
        Post this constraint to the scheduler's problem.

        Args:
            scheduler: CPScheduler instance after build_model()
                      Has access to:
                      - scheduler.prob: the PuLP problem
                      - scheduler.sessions: flattened (index, course) list
                      - scheduler.x, y, z: slot, room and instructor choice binaries
                      - scheduler.room_domain, instructor_domain: allowed indices per session
            prefix: Prepended to every constraint name, unique per constraint in a model

        Returns:
            Number of constraint rows added
        """
        pass

    def __repr__(self):
        return f"{self.__class__.__name__}(name='{self.name}')"
