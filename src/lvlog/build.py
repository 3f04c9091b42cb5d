"""
Build mode flags.

Stands in for compile-time flags: a build is either DIAGNOSTIC (caller
prefixes, exception pre-lines) or OPTIMIZED (bare messages). The mode
and the two capability flags are resolved once at process start and
checked through ordinary branches afterwards.

Environment knobs:
    LVLOG_BUILD       diagnostic | optimized   (default: __debug__)
    LVLOG_ASSERTIONS  1/0, true/false, ...     (default: __debug__)
    LVLOG_RICH_TEXT   1/0, true/false, ...     (default: stderr is a terminal)
"""

import os
import platform
import sys
from dataclasses import dataclass
from enum import Enum
from typing import List, Mapping, Optional

from rich.console import Console

from .config import parse_bool


FLAG_FORMAT = "{0} compiler flag set."

# Oldest interpreter minor the package supports
MIN_PYTHON_MINOR = 10


class BuildMode(Enum):
    DIAGNOSTIC = 'diagnostic'
    OPTIMIZED = 'optimized'

    @classmethod
    def parse(cls, value: str) -> "BuildMode":
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ', '.join(m.value for m in cls)
            raise ValueError(
                f"Unknown build mode {value!r} (expected one of: {choices})"
            ) from None


@dataclass(frozen=True)
class BuildFlags:
    """Capabilities fixed for the lifetime of the process.

    Attributes:
        mode: DIAGNOSTIC keeps caller-scope prefixes and exception
            pre-lines; OPTIMIZED strips them.
        assertions: assert_* and log_assertion* calls are live.
        rich_text: the environment can render color markup.
    """
    mode: BuildMode = BuildMode.DIAGNOSTIC
    assertions: bool = True
    rich_text: bool = False

    @property
    def diagnostic(self) -> bool:
        return self.mode is BuildMode.DIAGNOSTIC

    def active_flags(self) -> List[str]:
        """Names of every active flag, build flags first."""
        flags = [f"{self.mode.name}_BUILD"]
        if self.assertions:
            flags.append('ASSERTIONS')
        if self.rich_text:
            flags.append('RICH_TEXT')
        flags.extend(interpreter_flags())
        return flags


def interpreter_flags() -> List[str]:
    """Facts about the running interpreter, reported alongside build flags."""
    flags = []
    if __debug__:
        flags.append('PYTHON_DEBUG')
    flags.append(f"PLATFORM_{sys.platform.upper()}")
    flags.append(platform.python_implementation().upper())
    major, minor = sys.version_info[:2]
    for m in range(MIN_PYTHON_MINOR, minor + 1):
        flags.append(f"PYTHON_{major}_{m}_OR_NEWER")
    return flags


def format_flag_report(flags: BuildFlags) -> str:
    """One ``"{FLAG} compiler flag set."`` line per active flag."""
    return "\n".join(FLAG_FORMAT.format(name) for name in flags.active_flags())


def _detect_rich_text() -> bool:
    return Console(stderr=True).is_terminal


def resolve_build_flags(env: Optional[Mapping[str, str]] = None) -> BuildFlags:
    """Resolve build flags from the environment.

    Args:
        env: Mapping to read instead of os.environ

    Raises:
        ValueError: if a variable holds an unrecognised value
    """
    if env is None:
        env = os.environ

    raw_mode = env.get('LVLOG_BUILD')
    if raw_mode:
        mode = BuildMode.parse(raw_mode)
    else:
        mode = BuildMode.DIAGNOSTIC if __debug__ else BuildMode.OPTIMIZED

    raw_assertions = env.get('LVLOG_ASSERTIONS')
    if raw_assertions:
        assertions = parse_bool(raw_assertions, 'LVLOG_ASSERTIONS')
    else:
        assertions = __debug__

    raw_rich = env.get('LVLOG_RICH_TEXT')
    if raw_rich:
        rich_text = parse_bool(raw_rich, 'LVLOG_RICH_TEXT')
    else:
        rich_text = _detect_rich_text()

    return BuildFlags(mode=mode, assertions=assertions, rich_text=rich_text)
