#!/usr/bin/env python3
"""
Base class for soft constraints of the timetable model.

Soft constraints are expressed as terms of a single minimized objective.
Each term is weighted; maximize terms enter the sum negated.
"""

from abc import ABC, abstractmethod
from pulp import LpAffineExpression
from typing import Literal


class ObjectiveBase(ABC):
    """
    Abstract base class for optimization objectives.

    Each objective has:
    - A name for logging/debugging
    - A sense (minimize or maximize)
    - A weight in the combined objective
    - An evaluate() method that returns a PuLP expression
    """

    def __init__(
        self,
        name: str,
        sense: Literal['minimize', 'maximize'] = 'minimize',
        weight: float = 1.0
    ):
        """
        Initialize an optimization objective.

        Args:
            name: Human-readable name for this objective
            sense: 'minimize' or 'maximize'
            weight: Multiplier of this term in the combined objective
        """
        self.name = name
        self.sense = sense
        self.weight = weight

        if sense not in ['minimize', 'maximize']:
            raise ValueError(f"sense must be 'minimize' or 'maximize', got '{sense}'")

        if weight < 0:
            raise ValueError(f"weight must be non-negative, got {weight}")

    @abstractmethod
    def evaluate(self, scheduler, prefix: str = "") -> LpAffineExpression:
        """
        Evaluate this objective for the given scheduler.

        Objectives that need auxiliary counter or distance variables create
        them here and post their defining constraints to scheduler.prob.

        Args:
            scheduler: CPScheduler instance after build_model()
            prefix: Prepended to every variable and constraint name this
                    objective creates, unique per objective in a model

        Returns:
            PuLP expression to optimize (minimize or maximize based on self.sense)
        """
        pass

    def term(self, scheduler, prefix: str = "") -> LpAffineExpression:
        """Contribution of this objective to the minimized sum."""
        expr = self.evaluate(scheduler, prefix)
        if self.sense == 'maximize':
            return -self.weight * expr
        return self.weight * expr

    def __repr__(self):
        return f"{self.__class__.__name__}(name='{self.name}', sense='{self.sense}', weight={self.weight})"
