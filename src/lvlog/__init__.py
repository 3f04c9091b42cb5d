"""
lvlog — leveled logging facade.

A process-wide logging utility that gates every call on a severity
threshold, decorates enabled messages (caller scope, critical wrapper,
color) and forwards them to a sink.

Public API:
    Level, SinkSeverity       — severity model
    LevelLogger, BoundLogger  — the facade and context-bound handles
    init_logger, get_logger   — process-wide singleton
    LoggerConfig              — threshold + colorize
    BuildMode, BuildFlags     — diagnostic/optimized build flags
    Sink and bundled sinks    — StreamSink, LoggingSink, RichSink, MemorySink
    trace                     — function tracing decorator
"""

from lvlog._version import __version__, __app_name__
from lvlog.levels import Level, SinkSeverity, sink_severity_for, is_enabled
from lvlog.config import LoggerConfig, resolve_config
from lvlog.build import (
    BuildMode, BuildFlags, resolve_build_flags, format_flag_report,
)
from lvlog.sinks import (
    Sink, SinkRecord, StreamSink, LoggingSink, RichSink, MemorySink,
)
from lvlog.logger import LevelLogger, BoundLogger, init_logger, get_logger
from lvlog.trace import trace

__all__ = [
    '__version__', '__app_name__',
    'Level', 'SinkSeverity', 'sink_severity_for', 'is_enabled',
    'LoggerConfig', 'resolve_config',
    'BuildMode', 'BuildFlags', 'resolve_build_flags', 'format_flag_report',
    'Sink', 'SinkRecord', 'StreamSink', 'LoggingSink', 'RichSink', 'MemorySink',
    'LevelLogger', 'BoundLogger', 'init_logger', 'get_logger',
    'trace',
]
