"""Timetabler - weekly class timetable generation."""

from .models import Course, Resource, Instructor, Booking, Session, Timetable
from .options import GeneratorOptions
from .conflicts import (
    days_overlap,
    time_ranges_overlap,
    has_conflicts,
    free_resources,
    free_instructors,
    proximity_score,
    rank_instructors,
)
from .greedy import GreedyScheduler
from .cp_scheduler import CPScheduler, SolverState
from .generator import generate, SchedulingStrategy
from .repair import ensure_complete

__all__ = [
    "Course",
    "Resource",
    "Instructor",
    "Booking",
    "Session",
    "Timetable",
    "GeneratorOptions",
    "days_overlap",
    "time_ranges_overlap",
    "has_conflicts",
    "free_resources",
    "free_instructors",
    "proximity_score",
    "rank_instructors",
    "GreedyScheduler",
    "CPScheduler",
    "SolverState",
    "generate",
    "SchedulingStrategy",
    "ensure_complete",
]
