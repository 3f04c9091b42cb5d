"""
Sinks: where decorated messages end up.

The facade only ever calls ``log(severity, text, context, markup=...)``
and ``log_exception(exception, context)``. A sink decides how to render,
store or display them. ``markup`` is True only for text the facade
colorized, and only rich-text sinks ever receive it. Sink failures propagate to the logging caller.

Bundled sinks:
    StreamSink   plain text to a stream (default: stderr)
    LoggingSink  bridge to the standard library ``logging`` module
    RichSink     rich Console rendering, color markup honoured
    MemorySink   in-memory capture (tests, embedding)
"""

import logging
import sys
import traceback
from abc import ABC, abstractmethod
from typing import Any, List, NamedTuple, Optional, TextIO

from rich.console import Console
from rich.text import Text
from rich.traceback import Traceback

from .levels import SinkSeverity


class Sink(ABC):
    """Receives fully decorated messages from the facade.

    Attributes:
        rich_text: True when the sink renders color markup. The facade
            only colorizes messages for sinks that do.
    """

    rich_text: bool = False

    @abstractmethod
    def log(self, severity: SinkSeverity, text: str,
            context: Any = None, *, markup: bool = False) -> None:
        """Deliver one rendered message.

        Args:
            severity: Sink severity category
            text: Final message text
            context: Opaque handle from the caller
            markup: True when text is rich color markup
        """

    @abstractmethod
    def log_exception(self, exception: BaseException,
                      context: Any = None) -> None:
        """Deliver an exception through the sink's native path."""


class StreamSink(Sink):
    """Print each message to a text stream.

    Usage::

        sink = StreamSink(template="{severity}: {text}")
    """

    def __init__(self, file: TextIO = None, template: str = "{text}"):
        self.file = file if file is not None else sys.stderr
        self.template = template

    def log(self, severity, text, context=None, *, markup=False):
        line = self.template.format(severity=severity.name, text=text)
        print(line, file=self.file)

    def log_exception(self, exception, context=None):
        traceback.print_exception(type(exception), exception,
                                  exception.__traceback__, file=self.file)


_LOGGING_LEVELS = {
    SinkSeverity.LOG: logging.INFO,
    SinkSeverity.WARNING: logging.WARNING,
    SinkSeverity.ERROR: logging.ERROR,
    SinkSeverity.ASSERT: logging.ERROR,
}


class LoggingSink(Sink):
    """Forward to a standard library logger.

    The context handle travels as ``record.lvlog_context``.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger if logger is not None else logging.getLogger("lvlog")

    def log(self, severity, text, context=None, *, markup=False):
        self.logger.log(_LOGGING_LEVELS[severity], "%s", text,
                        extra={"lvlog_context": context})

    def log_exception(self, exception, context=None):
        self.logger.error("%s: %s", type(exception).__name__, exception,
                          exc_info=exception,
                          extra={"lvlog_context": context})


class RichSink(Sink):
    """Render through a rich Console.

    Text flagged as markup is parsed as rich markup; everything else is
    printed literally so brackets in plain messages are never parsed.
    """

    rich_text = True

    STYLES = {
        SinkSeverity.LOG: None,
        SinkSeverity.WARNING: "yellow",
        SinkSeverity.ERROR: "bold red",
        SinkSeverity.ASSERT: "bold magenta",
    }

    def __init__(self, console: Optional[Console] = None):
        self.console = console if console is not None else Console(stderr=True)

    def log(self, severity, text, context=None, *, markup=False):
        if markup:
            renderable = Text.from_markup(text)
        else:
            renderable = Text(text, style=self.STYLES[severity] or "")
        self.console.print(renderable, overflow="fold")

    def log_exception(self, exception, context=None):
        self.console.print(Traceback.from_exception(
            type(exception), exception, exception.__traceback__))


class SinkRecord(NamedTuple):
    severity: SinkSeverity
    text: str
    context: Any = None
    markup: bool = False


class MemorySink(Sink):
    """Keep every delivered message in memory."""

    def __init__(self, rich_text: bool = False):
        self.rich_text = rich_text
        self.records: List[SinkRecord] = []
        self.exceptions: List[tuple] = []

    def log(self, severity, text, context=None, *, markup=False):
        self.records.append(SinkRecord(severity, text, context, markup))

    def log_exception(self, exception, context=None):
        self.exceptions.append((exception, context))

    @property
    def texts(self) -> List[str]:
        return [r.text for r in self.records]

    def clear(self):
        self.records.clear()
        self.exceptions.clear()
