"""lvlog emit — send one message through the facade."""

from lvlog.logger import get_logger


# Level name -> LevelLogger operation
OPERATIONS = {
    "verbose": "log_verbose",
    "spam": "log_spam",
    "debug": "log",
    "info": "log_info",
    "warning": "log_warning",
    "error": "log_error",
    "critical": "log_critical",
    "fatal": "log_fatal",
}


def register(subparsers, parents):
    """Register the 'emit' subcommand."""
    p = subparsers.add_parser(
        "emit",
        parents=parents,
        help="Log a message at the given level",
        description=(
            "Send MESSAGE through the leveled logger at LEVEL. The message\n"
            "is dropped when the current threshold (--level) is higher."
        ),
        formatter_class=__import__("argparse").RawDescriptionHelpFormatter,
    )
    p.add_argument("emit_level", metavar="LEVEL",
                   type=str.lower, choices=sorted(OPERATIONS),
                   help="One of: " + ", ".join(OPERATIONS))
    p.add_argument("message", nargs="+", metavar="MESSAGE",
                   help="Message words (joined with spaces)")
    p.set_defaults(func=run)


def run(args):
    """Execute the emit command."""
    operation = getattr(get_logger(), OPERATIONS[args.emit_level])
    operation(" ".join(args.message))
    return 0
