"""
Function tracing decorator.

Routes entry/exit lines through the process-wide LevelLogger at
VERBOSE, using the traced function itself as the caller scope.
"""

import functools
from pathlib import Path

from .levels import Level


def _short_repr(value):
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def _scope_for(func):
    parts = [p for p in func.__qualname__.split('.') if p != '<locals>']
    if len(parts) >= 2:
        return parts[-2], parts[-1]
    return func.__module__.rsplit('.', 1)[-1], parts[-1]


def trace(func):
    """Decorator to trace function calls via the process logger.

    Shows function entry/exit with arguments and return values when the
    logger admits VERBOSE. Otherwise the call goes straight through.
    """
    scope = _scope_for(func)
    name = f"{func.__module__}.{func.__name__}"

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .logger import get_logger

        log = get_logger()
        if not log.is_enabled_for(Level.VERBOSE):
            return func(*args, **kwargs)

        shown = [_short_repr(a) for a in args]
        shown.extend(f"{k}={_short_repr(v)}" for k, v in kwargs.items())
        log.log_verbose(f">> {name}({', '.join(shown)})", caller=scope)

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            log.log_verbose(f"!! {name} raised: {type(e).__name__}: {e}",
                            caller=scope)
            raise

        if result is not None:
            log.log_verbose(f"<< {name} returned: {_short_repr(result)}",
                            caller=scope)
        return result

    return wrapper
