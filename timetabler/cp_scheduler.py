#!/usr/bin/env python3
"""
Timetable Scheduling with Integer Linear Programming
Assigns every required session a day, hour, room and instructor at once,
balancing the load across the week.
"""

import logging
import random
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from pulp import (
    LpMinimize,
    LpProblem,
    LpSolutionIntegerFeasible,
    LpSolutionOptimal,
    LpStatus,
    LpStatusInfeasible,
    LpVariable,
    PULP_CBC_CMD,
    PulpSolverError,
    lpSum,
)

from .candidates import ScheduleInput, candidate_instructors, candidate_rooms
from .conflicts import has_conflicts
from .constraint_base import ConstraintBase
from .constraints import AssignEverySession, NoInstructorOverlap, NoRoomOverlap
from .fallback import manual_timetable
from .models import ORIGIN_SOLVER, Course, Instructor, Resource, Timetable, make_session
from .objective_base import ObjectiveBase
from .objectives import BalanceDays, BalanceHours, MinimizeInstructorOverload
from .options import GeneratorOptions
from .utils import DAYS_PER_WEEK, HOURS_PER_DAY

logger = logging.getLogger(__name__)

DEFAULT_TIME_LIMIT = 30  # seconds


class SolverState(Enum):
    NEW = "new"
    BUILT = "built"
    SOLVING = "solving"
    SOLVED = "solved"
    TIMED_OUT = "timed_out"
    INFEASIBLE = "infeasible"
    FAILED = "failed"
    MATERIALIZED = "materialized"


class CPScheduler:
    name = "cp"

    def __init__(
        self,
        time_limit: float = DEFAULT_TIME_LIMIT,
        solver_verbose: bool = False,
        midday_preference: float = 1.2,
        seed: Optional[int] = None,
    ):
        """
        Initialize the constraint scheduler.

        Args:
            time_limit: Seconds allowed for the first search. A failed search
                        is retried once with twice the budget.
            solver_verbose: If True, display solver output during optimization.
                           If False (default), solver runs silently.
            midday_preference: Hour-balance target multiplier for 11:00-14:00.
            seed: Seed for generated session ids.
        """
        if time_limit <= 0:
            raise ValueError(f"time_limit must be positive, got {time_limit}")
        self.time_limit = time_limit
        self.solver_verbose = solver_verbose
        self.midday_preference = midday_preference
        self.rng = random.Random(seed)
        self._constraints: List[ConstraintBase] = []
        self._objectives: List[ObjectiveBase] = []
        self.state = SolverState.NEW
        self.prob = None

    def add_constraints(self, constraints: List[ConstraintBase]):
        """
        Add hard constraints beyond the default set.

        Args:
            constraints: List of ConstraintBase instances to add
        """
        for constraint in constraints:
            if not isinstance(constraint, ConstraintBase):
                raise TypeError(f"Expected ConstraintBase instance, got {type(constraint).__name__}")
            self._constraints.append(constraint)
        logger.debug(f"Added {len(constraints)} constraint(s)")

    def add_objectives(self, objectives: List[ObjectiveBase]):
        """Add soft objectives beyond the default set."""
        for objective in objectives:
            if not isinstance(objective, ObjectiveBase):
                raise TypeError(f"Expected ObjectiveBase instance, got {type(objective).__name__}")
            self._objectives.append(objective)
        logger.debug(f"Added {len(objectives)} objective(s)")

    def default_constraints(self) -> List[ConstraintBase]:
        return [AssignEverySession(), NoRoomOverlap(), NoInstructorOverlap()]

    def default_objectives(self, options: GeneratorOptions) -> List[ObjectiveBase]:
        return [
            BalanceDays(),
            BalanceHours(self.midday_preference),
            MinimizeInstructorOverload(options.max_hours_per_day),
        ]

    def generate(
        self,
        rooms: Sequence[Resource],
        instructors: Sequence[Instructor],
        courses: Sequence[Course],
        options: Optional[GeneratorOptions] = None,
    ) -> Timetable:
        """Schedule, then repair. See timetabler.generator.generate."""
        from .generator import run_strategy
        return run_strategy(self, rooms, instructors, courses, options)

    def has_conflicts(self, timetable: Timetable) -> bool:
        return has_conflicts(timetable)

    # Grid helpers: slot index t encodes (day, hour) as day * HOURS_PER_DAY + hour

    @staticmethod
    def slot_day(t: int) -> int:
        return t // HOURS_PER_DAY

    @staticmethod
    def slot_hour(t: int) -> int:
        return t % HOURS_PER_DAY

    def room_occupancy(self, s: int, t: int, r: int):
        """Expression equal to 1 when session s sits in room r at slot t."""
        return self._occupancy(self._room_occ, self.y, self.room_domain, "u", s, t, r)

    def instructor_occupancy(self, s: int, t: int, i: int):
        """Expression equal to 1 when session s is taught by instructor i at slot t."""
        return self._occupancy(self._instructor_occ, self.z, self.instructor_domain, "v", s, t, i)

    def _occupancy(self, cache, choice, domain, prefix, s, t, k):
        if len(domain[s]) == 1:
            return self.x[(s, t)]
        key = (s, t, k)
        if key not in cache:
            occ = LpVariable(f"{prefix}_{s}_{t}_{k}", cat='Binary')
            self.prob += occ >= self.x[(s, t)] + choice[(s, k)] - 1, f"link_{prefix}_{s}_{t}_{k}"
            cache[key] = occ
        return cache[key]

    def build_model(self, prepared: ScheduleInput):
        """
        Set up the ILP problem with variables, constraints and objective.

        Creates, per session, integer day/hour/room/instructor variables tied
        to one-hot choice binaries, then applies the hard constraints and the
        combined soft objective.
        """
        self.prepared = prepared
        self.rooms = prepared.rooms
        self.instructors = prepared.instructors
        self.prob = LpProblem("Timetable", LpMinimize)
        self._room_occ: Dict[Tuple[int, int, int], LpVariable] = {}
        self._instructor_occ: Dict[Tuple[int, int, int], LpVariable] = {}

        # Flatten every course's required sessions
        self.sessions: List[Tuple[int, Course]] = []
        for course in prepared.courses:
            for _ in range(course.sessions_needed):
                self.sessions.append((len(self.sessions), course))

        self.slot_indices = list(range(DAYS_PER_WEEK * HOURS_PER_DAY))
        self.room_domain: Dict[int, List[int]] = {}
        self.instructor_domain: Dict[int, List[int]] = {}
        self.x, self.y, self.z = {}, {}, {}
        self.day, self.hour, self.room, self.instructor = {}, {}, {}, {}

        domains = {
            course.id: (candidate_rooms(course, self.rooms), candidate_instructors(course, self.instructors))
            for course in prepared.courses
        }
        for s, course in self.sessions:
            self.room_domain[s], self.instructor_domain[s] = domains[course.id]

            for t in self.slot_indices:
                self.x[(s, t)] = LpVariable(f"x_{s}_{t}", cat='Binary')
            for r in self.room_domain[s]:
                self.y[(s, r)] = LpVariable(f"y_{s}_{r}", cat='Binary')
            for i in self.instructor_domain[s]:
                self.z[(s, i)] = LpVariable(f"z_{s}_{i}", cat='Binary')

            self.day[s] = LpVariable(f"day_{s}", 0, DAYS_PER_WEEK - 1, cat='Integer')
            self.hour[s] = LpVariable(f"hour_{s}", 0, HOURS_PER_DAY - 1, cat='Integer')
            self.room[s] = LpVariable(f"room_{s}", min(self.room_domain[s]), max(self.room_domain[s]), cat='Integer')
            self.instructor[s] = LpVariable(
                f"instructor_{s}", min(self.instructor_domain[s]), max(self.instructor_domain[s]), cat='Integer'
            )

            self.prob += self.day[s] == lpSum(self.slot_day(t) * self.x[(s, t)] for t in self.slot_indices), f"def_day_{s}"
            self.prob += self.hour[s] == lpSum(self.slot_hour(t) * self.x[(s, t)] for t in self.slot_indices), f"def_hour_{s}"
            self.prob += self.room[s] == lpSum(r * self.y[(s, r)] for r in self.room_domain[s]), f"def_room_{s}"
            self.prob += (
                self.instructor[s] == lpSum(i * self.z[(s, i)] for i in self.instructor_domain[s]),
                f"def_instructor_{s}"
            )

        # Indexed prefixes keep names distinct when a class is added twice
        total_constraints = 0
        for k, constraint in enumerate(self.default_constraints() + self._constraints):
            count = constraint.apply(self, prefix=f"c{k}_")
            logger.debug(f"  Applied: {constraint.name} ({count} constraints)")
            total_constraints += count

        terms = []
        for k, objective in enumerate(self.default_objectives(prepared.options) + self._objectives):
            terms.append(objective.term(self, prefix=f"o{k}_"))
            logger.debug(f"  Objective: {objective.name}")
        self.prob.setObjective(lpSum(terms))

        logger.info(
            f"Built model: {len(self.sessions)} sessions, {len(self.prob.variables())} variables, "
            f"{total_constraints} hard constraints"
        )
        self.state = SolverState.BUILT

    def solve(self, time_limit: Optional[float] = None) -> bool:
        """Run a bounded search. Returns True if an assignment was found."""
        time_limit = time_limit or self.time_limit
        self.state = SolverState.SOLVING
        solver = PULP_CBC_CMD(msg=1 if self.solver_verbose else 0, timeLimit=time_limit, threads=1)
        try:
            self.prob.solve(solver)
        except PulpSolverError as e:
            logger.error(f"Solver error: {e}")
            self.state = SolverState.FAILED
            return False

        status = LpStatus[self.prob.status]
        if self.prob.sol_status in (LpSolutionOptimal, LpSolutionIntegerFeasible):
            logger.info(f"Solver found a solution in <= {time_limit}s (status: {status})")
            self.state = SolverState.SOLVED
            return True
        if self.prob.status == LpStatusInfeasible:
            logger.warning("Model is infeasible")
            self.state = SolverState.INFEASIBLE
        else:
            logger.warning(f"No solution found within {time_limit}s (status: {status})")
            self.state = SolverState.TIMED_OUT
        return False

    @staticmethod
    def _read_index(var: LpVariable, size: int) -> int:
        """Solved value of an index variable, clamped into [0, size)."""
        raw = var.varValue
        value = int(round(raw)) if raw is not None else 0
        if value < 0 or value >= size:
            logger.warning(f"Value {value} of {var.name} out of range, clamping")
        return min(max(value, 0), size - 1)

    def extract_timetable(self) -> Timetable:
        """Materialize the solved assignment into sessions."""
        timetable = Timetable()
        for s, course in self.sessions:
            day = self._read_index(self.day[s], DAYS_PER_WEEK)
            hour = self._read_index(self.hour[s], HOURS_PER_DAY)
            room = self.rooms[self._read_index(self.room[s], len(self.rooms))]
            instructor = self.instructors[self._read_index(self.instructor[s], len(self.instructors))]
            timetable.add_session(make_session(course, room, instructor, day, hour, ORIGIN_SOLVER, self.rng))
        self.state = SolverState.MATERIALIZED
        return timetable

    def schedule(self, prepared: ScheduleInput) -> Timetable:
        """
        Solve, retry once with a doubled budget, or fall back to manual placement.

        Always returns a timetable. No repair.
        """
        if prepared.is_empty:
            logger.error("Cannot generate timetable with empty resources, instructors, or courses")
            return Timetable()

        self.build_model(prepared)
        if self.solve(self.time_limit):
            return self.extract_timetable()

        if self.state == SolverState.TIMED_OUT:
            logger.warning("Trying with increased time limit")
            if self.solve(self.time_limit * 2):
                return self.extract_timetable()

        self.state = SolverState.FAILED
        logger.error("Solver could not find a solution; using manual placement")
        return manual_timetable(prepared, self.rng)
