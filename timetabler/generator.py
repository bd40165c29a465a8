#!/usr/bin/env python3
"""
Timetable generation entry point.

A strategy places sessions; the repair pass then guarantees every course
its required session count.
"""

import logging
import time
from typing import Optional, Protocol, Sequence, Union

from .candidates import ScheduleInput, prepare_inputs
from .cp_scheduler import CPScheduler
from .greedy import GreedyScheduler
from .models import Course, Instructor, Resource, Timetable
from .options import GeneratorOptions
from .repair import ensure_complete

logger = logging.getLogger(__name__)


class SchedulingStrategy(Protocol):
    name: str

    def schedule(self, prepared: ScheduleInput) -> Timetable:
        """Place sessions for validated inputs, without repair."""
        ...


STRATEGIES = {
    "greedy": GreedyScheduler,
    "cp": CPScheduler,
}


def make_strategy(name: str, seed: Optional[int] = None, **kwargs) -> SchedulingStrategy:
    """
    Instantiate a strategy by name.

    Args:
        name: 'greedy' or 'cp'
        seed: Seed for the strategy's random source
        kwargs: Extra constructor arguments (e.g. time_limit for 'cp')
    """
    if name not in STRATEGIES:
        raise ValueError(f"Unknown strategy '{name}', expected one of {sorted(STRATEGIES)}")
    return STRATEGIES[name](seed=seed, **kwargs)


def run_strategy(
    strategy: SchedulingStrategy,
    rooms: Sequence[Resource],
    instructors: Sequence[Instructor],
    courses: Sequence[Course],
    options: Optional[GeneratorOptions] = None,
) -> Timetable:
    prepared = prepare_inputs(rooms, instructors, courses, options)
    if prepared.is_empty:
        logger.error("Cannot generate timetable with empty resources, instructors, or courses")
        return Timetable()

    logger.info(
        f"Generating timetable with {strategy.name} strategy: {len(prepared.rooms)} rooms, "
        f"{len(prepared.instructors)} instructors, {len(prepared.courses)} courses, "
        f"{prepared.total_sessions} sessions"
    )
    started = time.perf_counter()
    timetable = strategy.schedule(prepared)
    report = ensure_complete(timetable, prepared, getattr(strategy, "rng", None))

    logger.info(
        f"Timetable generation completed with {len(timetable)} sessions "
        f"({report.total} synthesized by repair) in {time.perf_counter() - started:.2f}s"
    )
    return timetable


def generate(
    rooms: Sequence[Resource],
    instructors: Sequence[Instructor],
    courses: Sequence[Course],
    options: Optional[GeneratorOptions] = None,
    strategy: Union[str, SchedulingStrategy] = "greedy",
    seed: Optional[int] = None,
    **strategy_kwargs,
) -> Timetable:
    """
    Generate a weekly timetable.

    Args:
        rooms: Candidate rooms; unavailable and excluded rooms are dropped
        instructors: Candidate instructors
        courses: Courses to schedule, in priority order
        options: Soft-constraint options (defaults if None)
        strategy: 'greedy', 'cp', or a strategy instance
        seed: Seed for a named strategy's random source
        strategy_kwargs: Constructor arguments for a named strategy

    Returns:
        Timetable holding, for every valid course, exactly its required
        number of sessions. Empty if any input is empty.

    Example:
        timetable = generate(rooms, instructors, courses,
                             GeneratorOptions(avoid_back_to_back=True),
                             strategy='cp', time_limit=10)
    """
    if isinstance(strategy, str):
        strategy = make_strategy(strategy, seed=seed, **strategy_kwargs)
    return run_strategy(strategy, rooms, instructors, courses, options)
