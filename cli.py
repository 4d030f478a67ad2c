import argparse
import logging
import sys

from logsieve.config import load_settings
from logsieve.filters import errors_over_severity
from logsieve.ingest import IngestStats, parse_log_file
from logsieve.pipeline import read_log_file
from logsieve.render import show_log_message
from logsieve.sample import SAMPLE_LOG

logger = logging.getLogger("logsieve.cli")


# ---------------- CLI ----------------

def parse_args(argv=None, settings=None):
    settings = settings or load_settings()

    parser = argparse.ArgumentParser(
        description="logsieve: print error logs over a severity level"
    )
    parser.add_argument(
        "--log-file",
        default=settings.log_file,
        help="Log file to read (defaults to the bundled sample log)",
    )
    parser.add_argument(
        "--min-severity",
        type=int,
        default=settings.min_severity,
        help="Only errors strictly above this severity are shown",
    )
    parser.add_argument(
        "--show-all",
        action="store_true",
        help="Print every parsed log instead of filtering errors",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print an ingestion summary after the logs",
    )
    parser.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args(argv)
    args.log_level = "DEBUG" if args.verbose else settings.log_level
    return args


# ---------------- Helpers ----------------

def print_summary(stats: IngestStats):
    print("\nIngestion summary")
    print(f"  Parsed logs : {stats.kept}")
    print(f"    known     : {stats.known}")
    print(f"    unknown   : {stats.unknown}")
    print(f"  Failed logs : {stats.malformed}")


# ---------------- Main ----------------

def main(argv=None) -> int:
    try:
        args = parse_args(argv)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # ---- Read ----
    if args.log_file:
        try:
            content = read_log_file(args.log_file)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("could not read %s: %s", args.log_file, e)
            print(f"error: could not read {args.log_file}", file=sys.stderr)
            return 1
    else:
        logger.debug("no --log-file given, using bundled sample")
        content = SAMPLE_LOG

    # ---- Parse ----
    stats = IngestStats()
    logs = parse_log_file(content, stats)

    # ---- Select ----
    if not args.show_all:
        logs = errors_over_severity(logs, args.min_severity)

    # ---- Report ----
    for log in logs:
        print(show_log_message(log))

    if args.summary:
        print_summary(stats)

    return 0


if __name__ == "__main__":
    sys.exit(main())
