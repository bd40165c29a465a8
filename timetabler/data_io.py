#!/usr/bin/env python3
"""
CSV loading of scheduling inputs and export of generated timetables.

Expected columns (extra columns are ignored, optional ones may be missing):

    rooms.csv        id, name, type, capacity, available, admin_id, location
    instructors.csv  id, name, contact, preferred_days, preferred_hours
    courses.csv      id, name, code, department, required_sessions_per_week,
                     required_room_type, instructor_id, room_id,
                     preferred_instructor_ids, credit_hours

List-valued cells (preferred_days, preferred_instructor_ids) are separated by ';'.
"""

import logging
import os
from typing import List, Optional

import pandas as pd

from .models import Course, Instructor, Resource, Timetable

logger = logging.getLogger(__name__)

TRUE_STRINGS = {"yes", "y", "true", "1"}


def _text(row, column, default=""):
    value = row.get(column, default)
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return default
    return str(value).strip()


def _optional(row, column) -> Optional[str]:
    return _text(row, column) or None


def _int(row, column, default=0) -> int:
    value = row.get(column, default)
    if value is None or pd.isna(value):
        return default
    return int(value)


def _list(row, column) -> tuple:
    text = _text(row, column)
    return tuple(part.strip() for part in text.split(';') if part.strip())


def _flag(row, column, default=True) -> bool:
    text = _text(row, column)
    if not text:
        return default
    return text.lower() in TRUE_STRINGS


def _read_unique(filename: str, what: str) -> Optional[pd.DataFrame]:
    try:
        df = pd.read_csv(filename, dtype=str)
    except FileNotFoundError:
        logger.error(f"{filename} not found")
        return None

    # Check for duplicate ids
    ids = df['id']
    if len(ids) != len(ids.unique()):
        duplicates = ids[ids.duplicated()].unique()
        raise ValueError(f"Duplicate {what} ids found: {list(duplicates)}")

    logger.info(f"Loaded {len(df)} {what} from {filename}")
    return df


def load_rooms(filename: str = 'rooms.csv') -> Optional[List[Resource]]:
    """Load room data from CSV file."""
    df = _read_unique(filename, 'rooms')
    if df is None:
        return None
    return [
        Resource(
            id=_text(row, 'id'),
            name=_text(row, 'name'),
            type=_text(row, 'type'),
            capacity=_int(row, 'capacity'),
            available=_flag(row, 'available'),
            admin_id=_optional(row, 'admin_id'),
            location=_text(row, 'location'),
        )
        for _, row in df.iterrows()
    ]


def load_instructors(filename: str = 'instructors.csv') -> Optional[List[Instructor]]:
    """Load instructor data from CSV file."""
    df = _read_unique(filename, 'instructors')
    if df is None:
        return None
    return [
        Instructor(
            id=_text(row, 'id'),
            name=_text(row, 'name'),
            contact=_text(row, 'contact'),
            preferred_days=_list(row, 'preferred_days'),
            preferred_hours=_optional(row, 'preferred_hours'),
        )
        for _, row in df.iterrows()
    ]


def load_courses(filename: str = 'courses.csv') -> Optional[List[Course]]:
    """Load course data from CSV file."""
    df = _read_unique(filename, 'courses')
    if df is None:
        return None
    return [
        Course(
            id=_text(row, 'id'),
            name=_text(row, 'name'),
            code=_text(row, 'code'),
            department=_text(row, 'department'),
            required_sessions_per_week=_int(row, 'required_sessions_per_week', 1),
            required_room_type=_optional(row, 'required_room_type'),
            instructor_id=_optional(row, 'instructor_id'),
            room_id=_optional(row, 'room_id'),
            preferred_instructor_ids=_list(row, 'preferred_instructor_ids'),
            credit_hours=_int(row, 'credit_hours'),
        )
        for _, row in df.iterrows()
    ]


def save_timetable(timetable: Timetable, filename: str = 'timetable.csv'):
    """Save a timetable to a CSV file, one row per session."""
    dirname = os.path.dirname(filename)
    if dirname:
        os.makedirs(dirname, exist_ok=True)
    timetable.to_dataframe().to_csv(filename, index=False)
    logger.info(f"Timetable saved to {filename}")
