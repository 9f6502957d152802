"""
Process-wide slot for the active log sink.

Prefer passing a ``LogSink`` explicitly (constructor or argument). The host
slot exists for static call sites that have no injection path. Tests should
reset it between cases, either with :meth:`LogHost.reset` or
:meth:`LogHost.use_sink`.

The slot is a single reference assigned without locking. A reader running
concurrently with :meth:`LogHost.set_sink` may observe either the old or
the new sink; the last write wins.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from .config import LoggingConfig, get_config
from .log_sink import LogSink, StandardLogSink
from .logging_config import configure_from_config


class LogHost:
    """Holds the optional active sink. No sink is a normal state."""

    _sink: Optional[LogSink] = None

    @classmethod
    def get_sink(cls) -> Optional[LogSink]:
        return cls._sink

    @classmethod
    def set_sink(cls, sink: Optional[LogSink]) -> None:
        """Replace the active sink. ``None`` clears it."""
        cls._sink = sink

    @classmethod
    def reset(cls) -> None:
        cls._sink = None

    @classmethod
    def log(cls, message: str, category: Optional[str] = None) -> None:
        """Send a message to the active sink, or drop it if none is set."""
        sink = cls._sink
        if sink is None:
            return
        sink.log(message, category)

    @classmethod
    @contextmanager
    def use_sink(cls, sink: Optional[LogSink]) -> Iterator[Optional[LogSink]]:
        """Install ``sink`` for the duration of the block, then restore."""
        previous = cls._sink
        cls._sink = sink
        try:
            yield sink
        finally:
            cls._sink = previous


def install_default_sink(config: Optional[LoggingConfig] = None) -> StandardLogSink:
    """
    Configure the ``binder`` logger and install a forwarding sink on the host.
    
    Args:
        config: Logging configuration (default: read from the environment)
    
    Returns:
        The installed sink
    """
    config = config or get_config()
    if not config.validate():
        raise ValueError(f"Invalid logging configuration: level={config.log_level}")
    sink = StandardLogSink(configure_from_config(config))
    LogHost.set_sink(sink)
    return sink
