"""
LevelLogger — the leveled logging facade.

Central coordinator for threshold-gated, decorated output. The emit
rule is: a call at level L shows when threshold <= L. A suppressed call
returns before any formatting or stack inspection, so disabled log
statements stay cheap.

Pipeline for an enabled call:
    render (str() or str.format) -> critical wrap -> caller-scope
    prefix (diagnostic builds) -> color markup (when colorize, the
    build and the sink all allow it) -> sink

    ←── louder ──────────────────────────────── quieter ──→
     0        1      2     3        4      5         6
    verbose  debug  info  warning  error  critical  silent
"""

import inspect
import sys
from contextlib import contextmanager
from typing import Any, Optional

from .build import BuildFlags, format_flag_report, resolve_build_flags
from .config import LoggerConfig, resolve_config
from .decorate import (
    CRITICAL_COLOR, INFO_COLOR, SPAM_COLOR,
    Scope, color_style, colorize_string, decorate_critical, prefix_scope,
    scope_of, stringify,
)
from .levels import Level, SinkSeverity
from .sinks import RichSink, Sink, StreamSink


ASSERTION_FAILED = "Assertion failed"
EXCEPTION_FORMAT = "An exception occurred: {0}"


class LevelLogger:
    """Process-wide leveled logging facade.

    Usage::

        log = LevelLogger(sink=MemorySink())
        log.threshold = Level.INFO
        log.log_info("Loaded {0} items".format(42))
        log.log_warning_format("{0} retries left", 3)
        log.log_critical("Out of memory")       # "!!! Out of memory !!!"
        log.bind(player).log_error("Bad state")  # context travels to the sink

    Every operation accepts ``caller=`` to name the scope explicitly
    ("Type.method" or a (type, method) tuple) and ``stacklevel=`` for
    wrappers that want the prefix to name their own caller.
    """

    def __init__(self, sink: Sink = None, config: LoggerConfig = None,
                 flags: BuildFlags = None):
        self._flags = flags if flags is not None else resolve_build_flags()
        if sink is None:
            sink = RichSink() if self._flags.rich_text else StreamSink()
        self._sink = sink
        self.config = config if config is not None else LoggerConfig()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def threshold(self) -> Level:
        return self.config.threshold

    @threshold.setter
    def threshold(self, value):
        self.config.threshold = Level.parse(value)

    @property
    def colorize(self) -> bool:
        return self.config.colorize

    @colorize.setter
    def colorize(self, value: bool):
        self.config.colorize = bool(value)

    @property
    def sink(self) -> Sink:
        return self._sink

    @sink.setter
    def sink(self, value: Sink):
        self._sink = value

    @property
    def flags(self) -> BuildFlags:
        return self._flags

    @property
    def is_debug_build(self) -> bool:
        return self._flags.diagnostic

    def is_enabled_for(self, level) -> bool:
        """True when a call at ``level`` would currently be emitted."""
        return not self.config.threshold > Level.parse(level)

    def snapshot(self) -> LoggerConfig:
        """Copy of the current configuration for a later restore()."""
        return self.config.copy()

    def restore(self, saved: LoggerConfig) -> None:
        """Apply a snapshot in place (existing references see the change)."""
        self.config.threshold = saved.threshold
        self.config.colorize = saved.colorize

    @contextmanager
    def configured(self, threshold=None, colorize: Optional[bool] = None):
        """Temporarily override threshold and/or colorize.

        The previous configuration is restored on exit, even on error.
        """
        saved = self.snapshot()
        try:
            if threshold is not None:
                self.threshold = threshold
            if colorize is not None:
                self.colorize = colorize
            yield self
        finally:
            self.restore(saved)

    def bind(self, context: Any) -> "BoundLogger":
        """Logger handle that passes ``context`` with every call."""
        return BoundLogger(self, context)

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------
    def _emit(self, level, severity, message, args, kwargs, context,
              caller, stacklevel, color=None, critical=False):
        if self.config.threshold > level:
            return
        if args is None:
            text = stringify(message)
        else:
            text = message.format(*args, **kwargs)
        if critical:
            text = decorate_critical(text)
        # _prefixed <- _emit <- public operation <- caller
        text = self._prefixed(text, caller, stacklevel + 2)
        if color is not None:
            color = color_style(color)
        markup = color is not None and self._markup_enabled()
        if markup:
            text = colorize_string(text, color)
        self._sink.log(severity, text, context, markup=markup)

    def _prefixed(self, text: str, caller: Optional[Scope], depth: int) -> str:
        if not self._flags.diagnostic:
            return text
        if caller is None:
            caller = scope_of(sys._getframe(depth))
        return prefix_scope(text, caller)

    def _markup_enabled(self) -> bool:
        return (self.config.colorize and self._flags.rich_text
                and getattr(self._sink, "rich_text", False))

    # ------------------------------------------------------------------
    # VERBOSE (aka SPAM)
    # ------------------------------------------------------------------
    def log_verbose(self, message, context=None, *, caller=None, stacklevel=1):
        """Log at VERBOSE: chatty detail, colored with the spam color."""
        self._emit(Level.VERBOSE, SinkSeverity.LOG, message, None, None,
                   context, caller, stacklevel, color=SPAM_COLOR)

    def log_verbose_format(self, format_string, *args, context=None,
                           caller=None, stacklevel=1, **kwargs):
        self._emit(Level.VERBOSE, SinkSeverity.LOG, format_string, args, kwargs,
                   context, caller, stacklevel, color=SPAM_COLOR)

    log_spam = log_verbose
    log_spam_format = log_verbose_format

    # ------------------------------------------------------------------
    # DEBUG
    # ------------------------------------------------------------------
    def log(self, message, context=None, *, color=None, caller=None,
            stacklevel=1):
        """Log at DEBUG.

        Args:
            message: Any object; None renders as "None"
            context: Opaque handle passed through to the sink
            color: Optional "#RRGGBB" color for the message
        """
        self._emit(Level.DEBUG, SinkSeverity.LOG, message, None, None,
                   context, caller, stacklevel, color=color)

    def log_format(self, format_string, *args, context=None, color=None,
                   caller=None, stacklevel=1, **kwargs):
        """Log at DEBUG, building the message with str.format.

        Formatting errors (IndexError, KeyError, ValueError) propagate
        to the caller. Suppressed calls never format.
        """
        self._emit(Level.DEBUG, SinkSeverity.LOG, format_string, args, kwargs,
                   context, caller, stacklevel, color=color)

    log_debug = log
    log_debug_format = log_format

    # ------------------------------------------------------------------
    # INFO
    # ------------------------------------------------------------------
    def log_info(self, message, context=None, *, caller=None, stacklevel=1):
        self._emit(Level.INFO, SinkSeverity.LOG, message, None, None,
                   context, caller, stacklevel, color=INFO_COLOR)

    def log_info_format(self, format_string, *args, context=None,
                        caller=None, stacklevel=1, **kwargs):
        self._emit(Level.INFO, SinkSeverity.LOG, format_string, args, kwargs,
                   context, caller, stacklevel, color=INFO_COLOR)

    # ------------------------------------------------------------------
    # WARNING
    # ------------------------------------------------------------------
    def log_warning(self, message, context=None, *, caller=None, stacklevel=1):
        self._emit(Level.WARNING, SinkSeverity.WARNING, message, None, None,
                   context, caller, stacklevel)

    def log_warning_format(self, format_string, *args, context=None,
                           caller=None, stacklevel=1, **kwargs):
        self._emit(Level.WARNING, SinkSeverity.WARNING, format_string, args,
                   kwargs, context, caller, stacklevel)

    # ------------------------------------------------------------------
    # ERROR
    # ------------------------------------------------------------------
    def log_error(self, message, context=None, *, caller=None, stacklevel=1):
        self._emit(Level.ERROR, SinkSeverity.ERROR, message, None, None,
                   context, caller, stacklevel)

    def log_error_format(self, format_string, *args, context=None,
                         caller=None, stacklevel=1, **kwargs):
        self._emit(Level.ERROR, SinkSeverity.ERROR, format_string, args,
                   kwargs, context, caller, stacklevel)

    # ------------------------------------------------------------------
    # CRITICAL (aka FATAL) and exceptions
    # ------------------------------------------------------------------
    def log_critical(self, message, context=None, *, caller=None, stacklevel=1):
        """Log at CRITICAL: the app will crash or should be closed.

        The message is wrapped as "!!! message !!!" before the scope
        prefix and colored with the critical color.
        """
        self._emit(Level.CRITICAL, SinkSeverity.ERROR, message, None, None,
                   context, caller, stacklevel, color=CRITICAL_COLOR,
                   critical=True)

    def log_critical_format(self, format_string, *args, context=None,
                            caller=None, stacklevel=1, **kwargs):
        self._emit(Level.CRITICAL, SinkSeverity.ERROR, format_string, args,
                   kwargs, context, caller, stacklevel, color=CRITICAL_COLOR,
                   critical=True)

    log_fatal = log_critical
    log_fatal_format = log_critical_format

    def log_exception(self, exception: BaseException, context=None, *,
                      caller=None, stacklevel=1):
        """Hand an exception to the sink's exception path.

        Gated at CRITICAL, so only a SILENT threshold suppresses it.
        Diagnostic builds first log "An exception occurred: <Kind>" at
        ERROR severity; every build then calls sink.log_exception().
        """
        if self.config.threshold > Level.CRITICAL:
            return
        if self._flags.diagnostic:
            text = EXCEPTION_FORMAT.format(type(exception).__name__)
            text = self._prefixed(text, caller, stacklevel + 1)
            self._sink.log(SinkSeverity.ERROR, text, context)
        self._sink.log_exception(exception, context)

    # ------------------------------------------------------------------
    # Assertions
    # ------------------------------------------------------------------
    def assert_(self, condition, message=None, context=None, *, caller=None,
                stacklevel=1):
        """Log ``message`` at ASSERT severity when ``condition`` is false.

        No-op when assertions are compiled out (build flags), when the
        condition holds, or when threshold is above WARNING. Omitting
        the message logs "Assertion failed".
        """
        if not self._flags.assertions or condition:
            return
        if message is None:
            message = ASSERTION_FAILED
        self._emit(Level.WARNING, SinkSeverity.ASSERT, message, None, None,
                   context, caller, stacklevel)

    def assert_format(self, condition, format_string, *args, context=None,
                      caller=None, stacklevel=1, **kwargs):
        if not self._flags.assertions or condition:
            return
        self._emit(Level.WARNING, SinkSeverity.ASSERT, format_string, args,
                   kwargs, context, caller, stacklevel)

    def log_assertion(self, message, context=None, *, caller=None,
                      stacklevel=1):
        """Log an assertion message unconditionally (still level-gated)."""
        if not self._flags.assertions:
            return
        self._emit(Level.WARNING, SinkSeverity.ASSERT, message, None, None,
                   context, caller, stacklevel)

    def log_assertion_format(self, format_string, *args, context=None,
                             caller=None, stacklevel=1, **kwargs):
        if not self._flags.assertions:
            return
        self._emit(Level.WARNING, SinkSeverity.ASSERT, format_string, args,
                   kwargs, context, caller, stacklevel)

    # ------------------------------------------------------------------
    # Startup diagnostics
    # ------------------------------------------------------------------
    def compilation_flags(self, *, stacklevel=1) -> str:
        """Log the active build flags at DEBUG, one line per flag.

        Returns the report text whether or not DEBUG is enabled.
        """
        report = format_flag_report(self._flags)
        self.log(report, stacklevel=stacklevel + 1)
        return report


# =============================================================================
# Bound handles
# =============================================================================

_BOUND_OPERATIONS = (
    'log_verbose', 'log_verbose_format', 'log_spam', 'log_spam_format',
    'log', 'log_format', 'log_debug', 'log_debug_format',
    'log_info', 'log_info_format',
    'log_warning', 'log_warning_format',
    'log_error', 'log_error_format',
    'log_critical', 'log_critical_format', 'log_fatal', 'log_fatal_format',
    'log_exception',
    'assert_', 'assert_format', 'log_assertion', 'log_assertion_format',
)


def _context_slot(name):
    """Positional index of the context parameter, or None if keyword-only."""
    params = list(inspect.signature(getattr(LevelLogger, name)).parameters.values())
    for index, param in enumerate(params[1:]):
        if param.name == 'context':
            if param.kind is param.POSITIONAL_OR_KEYWORD:
                return index
            return None
    return None


def _forward(name):
    slot = _context_slot(name)

    def operation(self, *args, stacklevel=1, **kwargs):
        # a positional context wins over the bound one
        if slot is None or len(args) <= slot:
            kwargs.setdefault('context', self.context)
        return getattr(self.logger, name)(*args, stacklevel=stacklevel + 1,
                                          **kwargs)
    operation.__name__ = name
    operation.__qualname__ = f"BoundLogger.{name}"
    operation.__doc__ = f"LevelLogger.{name} with the bound context."
    return operation


class BoundLogger:
    """A LevelLogger view that supplies a fixed context handle.

    Replaces "call log methods on any host object": bind the host once,
    then log through the handle. Configuration is shared with the
    underlying logger.
    """

    def __init__(self, logger: LevelLogger, context: Any):
        self.logger = logger
        self.context = context

    def __repr__(self):
        return f"BoundLogger(context={self.context!r})"


for _name in _BOUND_OPERATIONS:
    setattr(BoundLogger, _name, _forward(_name))
del _name


# =============================================================================
# Module-level singleton
# =============================================================================

_logger: Optional[LevelLogger] = None


def init_logger(sink: Sink = None, config: LoggerConfig = None,
                flags: BuildFlags = None) -> LevelLogger:
    """Initialize the process-wide LevelLogger.

    Call once at program startup. Missing pieces are resolved from the
    environment (see lvlog.config and lvlog.build).

    Returns:
        The initialized LevelLogger instance
    """
    global _logger
    if config is None:
        config = resolve_config()
    _logger = LevelLogger(sink=sink, config=config, flags=flags)
    return _logger


def get_logger() -> LevelLogger:
    """Get the process-wide LevelLogger, creating a default if needed."""
    global _logger
    if _logger is None:
        init_logger()
    return _logger
