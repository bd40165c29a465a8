#!/usr/bin/env python
"""
CLI entry-point.
Run: timetabler rooms.csv instructors.csv courses.csv [--strategy cp] [--options options.yml]
"""
import argparse
import sys

from .conflicts import has_conflicts
from .generator import STRATEGIES, generate
from .data_io import load_courses, load_instructors, load_rooms, save_timetable
from .log import init_logger
from .options import GeneratorOptions


def main(argv=None):
    parser = argparse.ArgumentParser(description='Generate a weekly timetable')
    parser.add_argument('rooms', help='Path to rooms CSV file')
    parser.add_argument('instructors', help='Path to instructors CSV file')
    parser.add_argument('courses', help='Path to courses CSV file')
    parser.add_argument('--strategy', choices=sorted(STRATEGIES), default='greedy',
                        help='Scheduling strategy (default: greedy)')
    parser.add_argument('--options', default=None,
                        help='Path to generator options YAML file')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for random tie-breaking')
    parser.add_argument('--time-limit', type=float, default=None,
                        help='Solver time limit in seconds (cp strategy only)')
    parser.add_argument('--output', default='timetable.csv',
                        help='Where to write the timetable CSV (default: timetable.csv)')
    parser.add_argument('--log-file', default=None,
                        help='Also write the full debug log to this file')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging (per-session placement output)')

    args = parser.parse_args(argv)
    logger = init_logger(debug=args.debug, log_file=args.log_file)

    options = GeneratorOptions.load(args.options) if args.options else GeneratorOptions()

    rooms = load_rooms(args.rooms)
    instructors = load_instructors(args.instructors)
    courses = load_courses(args.courses)
    if rooms is None or instructors is None or courses is None:
        logger.error("Failed to load required data files")
        return 1

    strategy_kwargs = {}
    if args.time_limit is not None:
        if args.strategy != 'cp':
            parser.error('--time-limit only applies to the cp strategy')
        strategy_kwargs['time_limit'] = args.time_limit

    timetable = generate(rooms, instructors, courses, options,
                         strategy=args.strategy, seed=args.seed, **strategy_kwargs)

    if has_conflicts(timetable):
        logger.warning("Generated timetable contains double bookings")
    logger.info(f"Sessions by origin: {timetable.count_by_origin()}")
    save_timetable(timetable, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
