"""lvlog flags — report the active build flags."""

from lvlog.logger import get_logger


def register(subparsers, parents):
    """Register the 'flags' subcommand."""
    p = subparsers.add_parser(
        "flags",
        parents=parents,
        help="Show which build flags are active",
        description=(
            "Log the active build flags at DEBUG level, one line per flag.\n"
            "Use --build and the LVLOG_* environment variables to change them."
        ),
        formatter_class=__import__("argparse").RawDescriptionHelpFormatter,
    )
    p.set_defaults(func=run)


def run(args):
    """Execute the flags command."""
    get_logger().compilation_flags()
    return 0
