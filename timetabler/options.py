"""Options controlling the soft-constraint behaviour of both schedulers."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Tuple

import yaml


@dataclass
class GeneratorOptions:
    avoid_back_to_back: bool = False  # Prefer hours without an occupied neighbour for the instructor
    prefer_even_distribution: bool = False  # Randomize day order to avoid clustering early in the week
    max_hours_per_day: int = 6  # Teaching hours per instructor per day
    excluded_room_names: Tuple[str, ...] = ()  # Rooms never used for scheduling, matched case-insensitively

    def __post_init__(self):
        if self.max_hours_per_day < 1:
            raise ValueError(f"max_hours_per_day must be at least 1, got {self.max_hours_per_day}")
        self.excluded_room_names = tuple(self.excluded_room_names)

    def is_excluded(self, room_name: str) -> bool:
        name = room_name.strip().lower()
        return any(name == excluded.strip().lower() for excluded in self.excluded_room_names)

    @classmethod
    def from_dict(cls, data: dict) -> "GeneratorOptions":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown generator options: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def load(cls, path: str | Path) -> "GeneratorOptions":
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if isinstance(data, dict) and "options" in data:
            data = data["options"] or {}
        if not isinstance(data, dict):
            raise ValueError(f"Generator options in {path} must be a mapping, got {type(data).__name__}")
        return cls.from_dict(data)
