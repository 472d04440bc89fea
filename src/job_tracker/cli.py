"""Command-line interface for the Job Tracker."""

import argparse
import logging
import sys
from dataclasses import replace

from .config import Config, load_config
from .model import ApplicationList
from .storage import load_applications
from .tracker import JobTracker


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Job Tracker - Track job applications from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  # Interactive mode
  %(prog)s -f applications.yaml             # Load applications from a file
  %(prog)s -f apps.yaml filter t/backend    # Run one command and exit
  %(prog)s -f apps.yaml sort deadline desc  # Sort by deadline, latest first
""",
    )

    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "-f", "--file",
        metavar="FILE",
        help="YAML file with job applications to load",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "command",
        nargs="*",
        help="Command to run once (omit for interactive mode)",
    )

    return parser.parse_args()


def run_interactive(tracker: JobTracker, prompt: str) -> None:
    """Read commands from stdin until ``exit`` or end of input."""
    while True:
        try:
            line = input(prompt)
        except EOFError:
            print()
            return

        if not line.strip():
            continue

        reply = tracker.handle(line)
        print(reply.text)
        if reply.should_exit:
            return


def main() -> int:
    """Main entry point."""
    args = parse_args()
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)

    # Load configuration
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            logger.error(f"Config file not found: {args.config}")
            return 1
    else:
        config = Config()

    # Override config with command line arguments
    if args.file:
        config = replace(config, applications_file=args.file)

    applications = []
    applications_path = config.get_applications_path()
    if applications_path is not None:
        try:
            applications = load_applications(applications_path)
        except FileNotFoundError:
            logger.error(f"Applications file not found: {applications_path}")
            return 1
        except ValueError as e:
            logger.error(f"Failed to load applications: {e}")
            return 1

    tracker = JobTracker(ApplicationList(applications), config)

    if args.command:
        reply = tracker.handle(" ".join(args.command))
        print(reply.text)
        return 1 if reply.is_error else 0

    run_interactive(tracker, config.prompt)
    return 0


if __name__ == "__main__":
    sys.exit(main())
