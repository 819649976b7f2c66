#!/usr/bin/env python3
"""
clipio CLI entry point: copy, paste and inspect the clipboard command
"""

from __future__ import annotations
import sys
import argparse
import logging
import logging.handlers
import traceback
from pathlib import Path

from clipio.__version__ import __version__
from clipio.clipboard import Clipboard
from clipio.commands import Direction
from clipio.config import load_config, public_config
from clipio.errors import ClipboardError

logger = logging.getLogger('clipio')

_HANDLER_TAG = '_clipio_cli'


def setup_logging(debug: bool = False, log_file: str | None = None) -> logging.Logger:
    """Setup logging to stderr and, optionally, a rotating file

    Args:
        debug: Enable debug level logging
        log_file: Path to log file (no file logging when None)
    """
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    # Drop handlers from a previous call so repeated main() runs don't duplicate output
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)
            handler.close()

    fmt = logging.Formatter(
        '[%(asctime)s] %(levelname)-8s %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_file is not None:
        log_path = Path(log_file).expanduser()
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=1024*1024,  # 1 MB
                backupCount=3
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(fmt)
            setattr(file_handler, _HANDLER_TAG, True)
            logger.addHandler(file_handler)
            # The file gets everything even without --debug
            logger.setLevel(logging.DEBUG)
        except OSError as e:
            print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    console_handler.setFormatter(fmt)
    setattr(console_handler, _HANDLER_TAG, True)
    logger.addHandler(console_handler)

    return logger


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='clipio',
        description='Read and write the system clipboard through native tools',
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug mode with verbose logging'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to config file (default: ~/.config/clipio/config.json)'
    )
    parser.add_argument(
        '--logfile',
        type=str,
        default=None,
        help='Also write logs to this file'
    )
    parser.add_argument(
        '--version',
        action='version',
        version='%(prog)s ' + __version__
    )

    sub = parser.add_subparsers(dest='command', metavar='COMMAND')
    sub.required = True

    copy = sub.add_parser('copy', help='Write text to the clipboard')
    copy.add_argument(
        'text',
        nargs='?',
        default=None,
        help='Text to copy (read from stdin when omitted)'
    )

    sub.add_parser('paste', help='Print the clipboard contents')

    which = sub.add_parser('which', help='Show the command that would be used')
    which.add_argument('direction', choices=[d.value for d in Direction])

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for clipio"""
    args = parse_args(argv)

    config = load_config(args.config)
    if args.debug:
        config['debug'] = True

    log = setup_logging(debug=config['debug'], log_file=args.logfile)

    try:
        clipboard = Clipboard(config=public_config(config))

        if args.command == 'copy':
            text = args.text if args.text is not None else sys.stdin.read()
            clipboard.write_text(text)
        elif args.command == 'paste':
            print(clipboard.read_text())
        elif args.command == 'which':
            command = clipboard.command_for(Direction(args.direction))
            if command is None:
                print("No clipboard tool found", file=sys.stderr)
                return 1
            print(command)
        return 0

    except ClipboardError as e:
        print(f"clipio: {e}", file=sys.stderr)
        if e.__cause__ is not None:
            log.debug("caused by: %r", e.__cause__)
        return 1

    except BrokenPipeError:
        log.debug(traceback.format_exc())
        return 1


if __name__ == '__main__':
    sys.exit(main())
