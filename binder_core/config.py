"""
Configuration management for binder logging.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from .logging_config import setup_logger

logger = setup_logger(__name__, file_output=False)

# Load environment variables
load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


class LoggingConfig:
    """Logging configuration read from the environment."""
    
    def __init__(self):
        # Output configuration
        self.log_level: str = os.getenv("BINDER_LOG_LEVEL", "INFO").upper()
        self.log_dir: Path = Path(os.getenv("BINDER_LOG_DIR", "logs"))
        self.console_output: bool = _env_flag("BINDER_LOG_CONSOLE", True)
        self.file_output: bool = _env_flag("BINDER_LOG_FILE", True)
        self.max_bytes: int = int(os.getenv("BINDER_LOG_MAX_BYTES", "10485760"))
        self.backup_count: int = int(os.getenv("BINDER_LOG_BACKUP_COUNT", "5"))
        
        # Runtime debug flags, enabled only by the exact value "1"
        self.qty_debug: bool = os.getenv("ENFOLDERER_QTY_DEBUG") == "1"
        self.cache_debug: bool = os.getenv("ENFOLDERER_CACHE_DEBUG") == "1"
    
    def level(self) -> int:
        """
        Get the numeric logging level.
        
        Returns:
            int: Level for ``log_level``, INFO when the name is unknown
        """
        value = logging.getLevelName(self.log_level)
        return value if isinstance(value, int) else logging.INFO
    
    def validate(self) -> bool:
        """
        Validate configuration.
        
        Returns:
            bool: True if configuration is valid
        """
        if not isinstance(logging.getLevelName(self.log_level), int):
            logger.error(f"Unknown BINDER_LOG_LEVEL: {self.log_level}")
            return False
        
        if not self.console_output and not self.file_output:
            logger.warning(
                "Both console and file log output are disabled. "
                "Messages sent to the standard sink will be dropped."
            )
        
        return True


_default: Optional[LoggingConfig] = None


def get_config() -> LoggingConfig:
    """Get the process-wide configuration, loading it on first use."""
    global _default
    if _default is None:
        _default = LoggingConfig()
    return _default
