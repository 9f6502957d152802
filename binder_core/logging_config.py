"""
Centralized logging configuration for the binder application.
Provides consistent logging format and handlers across all modules.
"""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = 'binder'

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_dir: Optional[str] = None,
    console_output: bool = True,
    file_output: bool = True,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5
) -> logging.Logger:
    """
    Configure and return a logger with both console and file handlers.
    
    Args:
        name: Logger name, typically __name__ of the calling module
        level: Logging level (default: INFO)
        log_dir: Directory for log files (default: logs/)
        console_output: Enable console output
        file_output: Enable file output
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of backup files to keep
    
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    
    # Prevent duplicate handlers
    if logger.handlers:
        return logger
    
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    
    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
    
    # File handler with rotation
    if file_output:
        if log_dir is None:
            log_dir = Path(__file__).parent.parent / 'logs'
        else:
            log_dir = Path(log_dir)
        
        log_dir.mkdir(parents=True, exist_ok=True)
        
        log_file = log_dir / f"{name.replace('.', '_')}_{datetime.now().strftime('%Y%m%d')}.log"
        
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    
    return logger


def get_category_logger(category) -> logging.Logger:
    """
    Get the child logger for a log category.
    
    Category loggers carry no handlers of their own; records propagate to
    the ``binder`` logger configured by :func:`configure_from_config`.
    
    Args:
        category: A ``LogCategory`` member or its string value
    
    Returns:
        Logger named ``binder.<category>``
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{str(category)}")


def configure_from_config(config) -> logging.Logger:
    """
    Set up the ``binder`` logger from a ``LoggingConfig``.
    
    Handlers from an earlier configuration are closed and replaced, so
    calling this again applies the new settings.
    
    Args:
        config: Logging configuration
    
    Returns:
        The configured ``binder`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    
    return setup_logger(
        ROOT_LOGGER_NAME,
        level=config.level(),
        log_dir=str(config.log_dir),
        console_output=config.console_output,
        file_output=config.file_output,
        max_bytes=config.max_bytes,
        backup_count=config.backup_count
    )
