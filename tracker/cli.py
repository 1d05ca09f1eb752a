"""Command-line entry point.

Usage:
    iasi-tracker <username>                 # same as `export <username>`
    iasi-tracker export <username> [-o PATH]
    iasi-tracker run <username> [--host HOST] [--port PORT]
"""
from __future__ import annotations

import argparse
import logging
import sys

from tracker import create_app
from tracker.errors import TrackerError
from tracker.services.export import timeline_csv_path, write_timeline_csv
from tracker.services.timeline_service import TimelineService, get_timeline

logger = logging.getLogger(__name__)

_COMMANDS = ('export', 'run')
# Global options that consume the following argument
_OPTIONS_WITH_VALUE = ('--env',)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='iasi-tracker',
        description='Track full-score infoarena submissions and generate editorials',
    )
    parser.add_argument('--env', default=None, help='Config name (development, production, testing)')
    sub = parser.add_subparsers(dest='command', required=True)

    export_p = sub.add_parser('export', help='Write the accepted-problem timeline to CSV')
    export_p.add_argument('username')
    export_p.add_argument('-o', '--output', help='CSV path (default: DATA_DIR/<username>_timeline.csv)')

    run_p = sub.add_parser('run', help='Serve the timeline and editorial API')
    run_p.add_argument('username')
    run_p.add_argument('--host', default='127.0.0.1')
    run_p.add_argument('--port', type=int, default=8080)
    return parser


def export_timeline(app, username: str, output: str = None) -> int:
    service = TimelineService.from_config(app.config)
    try:
        records = service.fetch(username)
    except TrackerError as e:
        logger.error(f"Error fetching entries: {e}")
        return 1
    if not records:
        print("No entries found for user.")
        return 0

    entries = service.aggregate(records)
    path = output or timeline_csv_path(app.config['DATA_DIR'], username)
    try:
        count = write_timeline_csv(path, entries)
    except OSError as e:
        logger.error(f"Failed to write CSV: {e}")
        return 1
    print(f"Saved {count} entries to {path}")
    return 0


def run_server(app, username: str, host: str, port: int) -> int:
    app.config['TRACKER_USERNAME'] = username
    logger.info(f"Tracker server started for user: {username}")
    try:
        get_timeline(app, username)
    except TrackerError as e:
        logger.error(f"Error fetching entries: {e}")
        return 1
    logger.info(f"API server running at http://{host}:{port}")
    app.run(host=host, port=port)
    return 0


def _with_default_command(argv: list) -> list:
    """Insert `export` before the first positional argument if it is not a command.

    Keeps bare `iasi-tracker [--env NAME] <username>` working as an export.
    """
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in _OPTIONS_WITH_VALUE:
            i += 2
            continue
        if arg.startswith('-'):
            i += 1
            continue
        if arg not in _COMMANDS:
            return argv[:i] + ['export'] + argv[i:]
        break
    return argv


def main(argv=None) -> int:
    argv = _with_default_command(list(sys.argv[1:] if argv is None else argv))
    args = _build_parser().parse_args(argv)

    app = create_app(args.env)
    if args.command == 'run':
        return run_server(app, args.username, args.host, args.port)
    return export_timeline(app, args.username, args.output)


if __name__ == '__main__':
    sys.exit(main())
