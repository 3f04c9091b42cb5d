"""lvlog levels — list severity levels."""

from lvlog.levels import Level


def format_level_list():
    """One line per level: value, name, aliases."""
    lines = ["Levels (a message shows when threshold <= level):"]
    for level in Level:
        aliases = Level.aliases(level)
        suffix = f"  (alias: {', '.join(aliases)})" if aliases else ""
        lines.append(f"  {int(level)}  {level.name:<8}{suffix}")
    return "\n".join(lines)


def register(subparsers, parents):
    """Register the 'levels' subcommand."""
    p = subparsers.add_parser(
        "levels",
        parents=parents,
        help="List severity levels and their aliases",
    )
    p.set_defaults(func=run)


def run(args):
    """Execute the levels command."""
    print(format_level_list())
    return 0
