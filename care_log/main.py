"""入口：care-log mood（心情日记）或 care-log pets（宠物护理预约）。"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from care_log import __version__
from care_log.config import DATA_DIR, DEFAULT_LOG_LEVEL, setup_logging
from care_log.mood.cli import MoodTrackerApp
from care_log.mood.journal_file import MoodJournalWriter
from care_log.scheduler.cli import PetCareApp
from care_log.scheduler.persistence import SchedulerFiles


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="care-log", description="Mood journal and pet care scheduler")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--data-dir", type=Path, default=DATA_DIR, help="directory for data files")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL, help="logging level (default: %(default)s)")
    sub = parser.add_subparsers(dest="app", required=True)
    sub.add_parser("mood", help="mood journal")
    sub.add_parser("pets", help="pet care scheduler")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    if args.app == "mood":
        app = MoodTrackerApp(writer=MoodJournalWriter(base_dir=args.data_dir))
    else:
        app = PetCareApp(files=SchedulerFiles(base_dir=args.data_dir))
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
