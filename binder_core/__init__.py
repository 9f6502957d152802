"""
Diagnostic logging plumbing shared by the binder application.
"""

from .log_categories import LogCategory
from .log_sink import LogSink, NullLogSink, StandardLogSink, MemoryLogSink
from .log_host import LogHost, install_default_sink
from .config import LoggingConfig, get_config
from .logging_config import (
    setup_logger,
    get_category_logger,
    configure_from_config
)
from .models import LogEntry

__all__ = [
    'LogCategory',
    'LogSink',
    'NullLogSink',
    'StandardLogSink',
    'MemoryLogSink',
    'LogHost',
    'install_default_sink',
    'LoggingConfig',
    'get_config',
    'setup_logger',
    'get_category_logger',
    'configure_from_config',
    'LogEntry',
]

__version__ = "1.0.0"
