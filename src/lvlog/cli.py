"""Main CLI entry point for lvlog.

Implements a Docker-style two-pass argument parser:
  1. First pass: extract global flags (--level, --no-color, --build)
  2. Second pass: dispatch to subcommand

Global flags can appear before OR after the subcommand:
  lvlog --level info emit debug hello     # works
  lvlog emit debug hello --level info     # also works

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import dataclasses
import sys

from lvlog._version import VERSION


# ---------------------------------------------------------------------------
# Global flags (Docker-style: can precede the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--level": {"aliases": ["-l"], "metavar": "LEVEL", "default": None,
                "help": "Threshold: verbose/spam, debug, info, warning, "
                        "error, critical/fatal, silent"},
    "--no-color": {"action": "store_true", "default": False,
                   "help": "Disable colored output"},
    "--build": {"choices": ["diagnostic", "optimized"], "default": None,
                "help": "Override the build mode (default: LVLOG_BUILD or "
                        "the interpreter's -O setting)"},
}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        global_parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules."""
    from lvlog.commands import emit, flags, levels
    return [emit, flags, levels]


def _build_parser(commands):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="lvlog",
        description="lvlog — leveled logging facade",
        epilog=(
            "Run 'lvlog <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--level, --no-color, --build) can appear\n"
            "before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"lvlog {VERSION}",
    )

    # Add global flags to main parser too (for --help display)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[])

    return parser


def _init_logging(global_args):
    """Initialize the process-wide logger from global flags + environment."""
    from lvlog.build import BuildMode, resolve_build_flags
    from lvlog.config import resolve_config
    from lvlog.logger import init_logger

    config = resolve_config(global_args)
    flags = resolve_build_flags()
    if global_args.build:
        flags = dataclasses.replace(flags, mode=BuildMode.parse(global_args.build))
    return init_logger(config=config, flags=flags)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for lvlog CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success, 2 = usage error).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    try:
        _init_logging(global_args)
    except ValueError as e:
        print(f"lvlog: error: {e}", file=sys.stderr)
        return 2

    # Pass 2: parse subcommand args
    commands = _discover_commands()
    parser = _build_parser(commands)

    # If no args at all, print help
    if not remaining:
        parser.print_help()
        return 0

    try:
        args = parser.parse_args(remaining)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 2

    # If subcommand selected but no handler, print help
    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
