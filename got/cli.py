"""CLI: argparse and command dispatch."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .errors import GotError
from .log import get_logger, setup_logging
from .repo import Repository

logger = get_logger("cli")

# Options accepted ahead of the command: -v, -vv, -q, --verbose, --quiet
GLOBAL_OPTION = re.compile(r"-[vq]+|--verbose|--quiet")


class UsageError(Exception):
    """Raised by the parser instead of exiting on bad arguments."""

    pass


class GotArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors to main() rather than exiting with 2."""

    def error(self, message: str) -> None:
        raise UsageError(message)


def cmd_init(args: argparse.Namespace) -> int:
    repo = Repository(args.path or Path.cwd())
    got_dir = repo.init()
    print(f"Initialized empty got repository in {got_dir}")
    return 0


HANDLERS: Dict[str, Callable[[argparse.Namespace], int]] = {
    "init": cmd_init,
}


def build_parser() -> argparse.ArgumentParser:
    parser = GotArgumentParser(
        prog="got",
        description="got - A simple version control system",
        add_help=False,
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More log output (-vv for debug)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    sub = parser.add_subparsers(dest="command", title="Available commands", metavar="<command>")

    # init
    p_init = sub.add_parser("init", help="Initialize a new repository")
    p_init.add_argument("path", nargs="?", default=None, help="Directory to initialize (default: current)")

    return parser


def _command_name(argv: List[str]) -> Optional[str]:
    """First argument that is not a global option, i.e. the command asked for."""
    for arg in argv:
        if not GLOBAL_OPTION.fullmatch(arg):
            return arg
    return None


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser()

    name = _command_name(argv)
    if name is None:
        parser.print_help()
        return 1
    if name not in HANDLERS:
        print(f"Unknown command: {name}", file=sys.stderr)
        parser.print_help()
        return 1

    try:
        args, extra = parser.parse_known_args(argv)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        parser.print_help()
        return 1
    setup_logging(verbose=args.verbose, quiet=args.quiet)
    if extra:
        logger.debug("ignoring extra arguments: %s", " ".join(extra))
    handler = HANDLERS[args.command]
    try:
        return handler(args) or 0
    except GotError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
