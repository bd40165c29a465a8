#!/usr/bin/env python3
"""
Utility functions and grid constants for the scheduling system.
"""

DAYS_OF_WEEK = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
DAYS_PER_WEEK = len(DAYS_OF_WEEK)
HOURS_PER_DAY = 8  # 9 AM to 5 PM
START_HOUR = 9

MINUTES_PER_DAY = 24 * 60


def time_to_minutes(time_str):
    """Convert time string HH:MM to minutes since midnight."""
    h, m = map(int, time_str.strip().split(':'))
    return h * 60 + m


def hour_label(hour_index):
    """Start time of the hour block at hour_index. 0 -> '09:00'"""
    return f"{START_HOUR + hour_index:02d}:00"


def end_label(hour_index, duration=1):
    """End time of a block starting at hour_index."""
    return f"{START_HOUR + hour_index + duration:02d}:00"


def parse_time_range(range_str):
    """Split 'HH:MM-HH:MM' into (start, end). Returns None if malformed."""
    if not range_str:
        return None
    parts = range_str.split('-')
    if len(parts) != 2:
        return None
    start, end = parts[0].strip(), parts[1].strip()
    try:
        time_to_minutes(start)
        time_to_minutes(end)
    except ValueError:
        return None
    return start, end
