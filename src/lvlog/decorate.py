"""
Message decoration: caller-scope prefix, critical wrapper, color markup.

Colors are written as rich markup (``[#00FFFF]text[/]``), so any sink
that renders through a rich Console shows them. Sinks that are not
rich-text never receive them (see LevelLogger colorize gating).
"""

import re
from types import FrameType
from typing import Any, Optional, Tuple, Union

from rich.markup import escape


INFO_COLOR = "#00FFFF"       # cyan
SPAM_COLOR = "#FFFFFF"       # white
CRITICAL_COLOR = "#FF4500"   # orange-red

CRITICAL_DECORATOR = "!!! {0} !!!"

# What a None message renders as
NULL_PLACEHOLDER = "None"

Scope = Union[str, Tuple[str, str]]


def stringify(message: Any) -> str:
    if message is None:
        return NULL_PLACEHOLDER
    return str(message)


def decorate_critical(message: str) -> str:
    return CRITICAL_DECORATOR.format(message)


def scope_of(frame: FrameType) -> str:
    """Return ``"Type.method"`` for the code running in ``frame``.

    Uses the code object's qualified name (3.11+), dropping ``<locals>``
    segments. Older interpreters fall back to ``self``/``cls`` in the
    frame locals. Plain functions report the module's last segment as
    their type.
    """
    code = frame.f_code
    qualname = getattr(code, "co_qualname", None)
    if qualname:
        parts = [p for p in qualname.split(".") if p != "<locals>"]
        if len(parts) >= 2:
            return f"{parts[-2]}.{parts[-1]}"
    else:
        owner = frame.f_locals.get("self")
        if owner is not None:
            return f"{type(owner).__name__}.{code.co_name}"
        owner = frame.f_locals.get("cls")
        if isinstance(owner, type):
            return f"{owner.__name__}.{code.co_name}"
    module = frame.f_globals.get("__name__", "?")
    return f"{module.rsplit('.', 1)[-1]}.{code.co_name}"


def format_scope(scope: Scope) -> str:
    """Normalise an explicit caller: ``"T.m"`` or ``("T", "m")``."""
    if isinstance(scope, tuple):
        return ".".join(scope)
    return scope


def prefix_scope(message: str, scope: Scope) -> str:
    return f"[{format_scope(scope)}] {message}"


def colorize_string(message: str, color: str) -> str:
    """Wrap message in color markup. The body is markup-escaped."""
    return f"[{color}]{escape(message)}[/]"


def color_style(color: Optional[str]) -> Optional[str]:
    """Normalise a color to the ``#RRGGBB`` form used in markup."""
    if color is None:
        return None
    color = color.strip()
    if not color.startswith("#"):
        color = "#" + color
    if not re.fullmatch(r"#[0-9A-Fa-f]{6}", color):
        raise ValueError(f"Expected a #RRGGBB color, got {color!r}")
    return color.upper()
