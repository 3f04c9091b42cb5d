"""
Severity levels for the leveled logging facade.

Python-style DEBUG/INFO/WARNING/ERROR/CRITICAL plus Android's VERBOSE
(aka SPAM) and FATAL (alias for CRITICAL). SILENT is a threshold
sentinel only: nothing is ever logged at SILENT.

The emit rule is simple:

    threshold <= level  ->  message is shown

    ←── louder ──────────────────────────────── quieter ──→
     0        1      2     3        4      5         6
    verbose  debug  info  warning  error  critical  silent
    (spam)                                (fatal)
"""

from enum import Enum, IntEnum
from typing import Union


class Level(IntEnum):
    """Ordered severity. Aliases share a value and are the same member."""

    VERBOSE = 0
    SPAM = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5
    FATAL = 5
    SILENT = 6

    @classmethod
    def parse(cls, value: Union["Level", int, str]) -> "Level":
        """Coerce a Level, int or (case-insensitive) name into a Level.

        Raises:
            ValueError: for unknown names or out-of-range integers
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f"Unknown log level: {value}") from None
        if isinstance(value, str):
            name = value.strip().upper()
            if name.lstrip('-').isdigit():
                return cls.parse(int(name))
            try:
                return cls[name]
            except KeyError:
                raise ValueError(f"Unknown log level: {value!r}") from None
        raise ValueError(f"Unknown log level: {value!r}")

    @classmethod
    def aliases(cls, level: "Level") -> list:
        """Other names that resolve to ``level`` (e.g. SPAM for VERBOSE)."""
        return [name for name, member in cls.__members__.items()
                if member is level and name != level.name]


class SinkSeverity(Enum):
    """Category the sink receives alongside the rendered text."""

    LOG = 'log'
    WARNING = 'warning'
    ERROR = 'error'
    ASSERT = 'assert'


_SINK_SEVERITY = {
    Level.VERBOSE: SinkSeverity.LOG,
    Level.DEBUG: SinkSeverity.LOG,
    Level.INFO: SinkSeverity.LOG,
    Level.WARNING: SinkSeverity.WARNING,
    Level.ERROR: SinkSeverity.ERROR,
    Level.CRITICAL: SinkSeverity.ERROR,
}


def sink_severity_for(level: Level) -> SinkSeverity:
    """Map a loggable level to its sink category.

    SILENT is not a loggable level and raises ValueError.
    """
    try:
        return _SINK_SEVERITY[Level(level)]
    except KeyError:
        raise ValueError(f"{Level(level).name} is not a loggable level") from None


def is_enabled(threshold: Level, level: Level) -> bool:
    """True when a call at ``level`` passes ``threshold`` (equality passes)."""
    return not threshold > level
