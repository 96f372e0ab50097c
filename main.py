import argparse
import logging

from examcolor import config
from examcolor.io_utils import load_table, load_timeslots, parse_timeslots, save_schedule_csv
from examcolor.models import InvalidInputError, SearchTimeout
from examcolor.scheduling.evaluation import summary
from examcolor.scheduling.pipeline import schedule_exams


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="ExamColor – conflict-free exam timeslots by exact graph coloring")
    # Inputs
    p.add_argument('--courses', type=str, required=True, help='course file: course_id,student_id,...')
    p.add_argument('--students', type=str, help='student file: student_id,course_id,... (enables roster cleaning)')
    p.add_argument('--timeslots', type=str, help='timeslot file, labels one per line or delimited')
    p.add_argument('--slots', type=str, help='timeslot labels as a delimited list, e.g. "Mon AM,Mon PM"')
    p.add_argument('--delimiter', type=str, default=config.DELIMITER)

    # Search
    p.add_argument('--time_limit', type=float, default=config.DEFAULT_TIME_LIMIT,
                   help='give up after this many seconds (default: run to completion)')

    # Output
    p.add_argument('--out_schedule', type=str, default=config.OUT_SCHEDULE)
    p.add_argument('--log-level', type=str, default='WARNING',
                   choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=config.LOG_FORMAT)

    try:
        if args.timeslots:
            timeslots = load_timeslots(args.timeslots, args.delimiter)
        elif args.slots:
            timeslots = parse_timeslots(args.slots, args.delimiter)
        else:
            raise SystemExit("Provide --timeslots FILE or --slots LIST")

        courses = load_table(args.courses, args.delimiter)
        students = load_table(args.students, args.delimiter) if args.students else None
        run = schedule_exams(courses, timeslots, students=students, time_limit=args.time_limit)
    except InvalidInputError as e:
        raise SystemExit(f"Invalid input: {e}")
    except SearchTimeout as e:
        raise SystemExit(f"Search stopped: {e}")

    print(summary(run.graph, run.timeslots, run.result))
    for row in run.rows:
        print(", ".join(row))

    save_schedule_csv(args.out_schedule, run.rows)
    print(f"Saved: {args.out_schedule}")
    return run


if __name__ == '__main__':
    main()
