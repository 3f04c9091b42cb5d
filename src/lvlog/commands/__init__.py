"""lvlog subcommands.

Each module exports:
  register(subparsers, parents) — add itself to the subparser
  run(args) — execute the command, returning an exit code
"""
