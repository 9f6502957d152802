"""
Log sinks: the capability of accepting a log message, plus the concrete
destinations used by the application and its tests.
"""

import logging
import threading
from typing import List, Optional, Protocol, runtime_checkable

from .config import get_config
from .logging_config import ROOT_LOGGER_NAME, configure_from_config, get_category_logger
from .models import LogEntry


@runtime_checkable
class LogSink(Protocol):
    """
    Anything that can accept a log message.
    
    Implementations must not raise for any string input (empty message,
    ``None`` category) and must return promptly.
    """

    def log(self, message: str, category: Optional[str] = None) -> None: ...


class NullLogSink:
    """Discards every message. Used in tests to suppress output."""

    def log(self, message: str, category: Optional[str] = None) -> None:
        pass


class StandardLogSink:
    """Forwards messages to a standard library logger."""
    
    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        level: int = logging.INFO
    ):
        """
        Initialize the sink.
        
        Args:
            logger: Destination logger (default: the ``binder`` logger,
                configured from the environment if it has no handlers yet)
            level: Level every message is emitted at
        """
        if logger is None:
            logger = logging.getLogger(ROOT_LOGGER_NAME)
            if not logger.handlers:
                logger = configure_from_config(get_config())
        self.logger = logger
        self.level = level
    
    @classmethod
    def for_category(cls, category, level: int = logging.INFO) -> "StandardLogSink":
        """
        Create a sink writing to the child logger of one category.
        
        The child logger has no handlers or level of its own. Until the
        ``binder`` logger is configured (``install_default_sink`` or
        ``configure_from_config``) its effective level is the root
        logger's, WARNING by default, so INFO messages are dropped.
        """
        return cls(get_category_logger(category), level=level)
    
    def log(self, message: str, category: Optional[str] = None) -> None:
        """Write the message, prefixed with ``[category]`` when one is given."""
        if category:
            category = str(category)
            self.logger.log(
                self.level,
                "[%s] %s",
                category,
                message,
                extra={"category": category}
            )
        else:
            self.logger.log(self.level, "%s", message, extra={"category": None})


class MemoryLogSink:
    """Collects messages in memory so tests can assert on them."""
    
    def __init__(self):
        self._entries: List[LogEntry] = []
        self._lock = threading.Lock()
    
    def log(self, message: str, category: Optional[str] = None) -> None:
        entry = LogEntry(
            message=message,
            category=str(category) if category is not None else None
        )
        with self._lock:
            self._entries.append(entry)
    
    @property
    def entries(self) -> List[LogEntry]:
        """Snapshot of captured entries, oldest first."""
        with self._lock:
            return list(self._entries)
    
    def messages(self, category: Optional[str] = None) -> List[str]:
        """
        Get captured messages.
        
        Args:
            category: Only return messages logged under this category
        
        Returns:
            List of message strings in arrival order
        """
        entries = self.entries
        if category is not None:
            category = str(category)
            entries = [e for e in entries if e.category == category]
        return [e.message for e in entries]
    
    def clear(self) -> None:
        """Drop all captured entries."""
        with self._lock:
            self._entries.clear()
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
