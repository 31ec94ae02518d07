"""Command line interface for the activity monitor."""

import argparse
import asyncio
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .monitor import ActivityStoppedArgs
from .monitor_logging import get_logger, setup_logging
from .watcher import FileWatcher


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="activity-monitor",
        description="Report when bursts of file activity settle",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    watch = subparsers.add_parser("watch", help="Watch a directory for changes")
    watch.add_argument("path", type=Path, help="Directory to watch")
    watch.add_argument("--timeout", type=int, help="Quiet period in milliseconds")
    watch.add_argument("--config", type=Path, help="JSON configuration file")
    watch.add_argument("--log-file", type=Path, help="Also log to this file")
    verbosity = watch.add_mutually_exclusive_group()
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


async def watch(path: Path, config) -> None:
    """Watch ``path`` until cancelled."""
    logger = get_logger()
    watcher = FileWatcher(path, config)

    def on_activity_stopped(sender, args: ActivityStoppedArgs) -> None:
        activity = args.args
        logger.info(f"Activity stopped: {activity.event_type} {activity.path}")

    watcher.monitor.activity_stopped.connect(on_activity_stopped)
    watcher.start()
    try:
        await asyncio.Event().wait()
    finally:
        await watcher.aclose()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config, timeout=args.timeout)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    setup_logging(
        level=config.log_level,
        quiet=args.quiet,
        verbose=args.verbose,
        log_file=args.log_file,
    )

    if not args.path.is_dir():
        print(f"Error: not a directory: {args.path}", file=sys.stderr)
        return 2

    try:
        asyncio.run(watch(args.path, config))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
