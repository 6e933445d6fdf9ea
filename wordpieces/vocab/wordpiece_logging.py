#!/usr/bin/env python3
"""
wordpiece_logging.py

Centralized logging configuration for the word piece pipelines.
Provides consistent logging setup with Rich formatting and optional file output.

Console output goes to stderr so that the ``print`` pipeline can write
segmented text to stdout.
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_FILE_NAME = "wordpieces.log"


def setup_wordpiece_logging(
    log_dir: Optional[Path] = None,
    logger_name: str = 'wordpieces',
    verbose: bool = False,
) -> logging.Logger:
    """
    Setup logging for the word piece pipelines.
    
    Args:
        log_dir: Directory for the log file; no log file is written when None
        logger_name: Name for the logger (default: 'wordpieces')
        verbose: Show DEBUG messages on the console
        
    Returns:
        Configured logger instance
    """
    # Clear any existing handlers to avoid conflicts
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    
    console = Console(stderr=True)
    
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    log_file = None
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        detailed_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(funcName)-20s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        log_file = log_dir / LOG_FILE_NAME
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)
    
    console_handler = RichHandler(
        console=console, 
        show_path=False, 
        rich_tracebacks=True,
        markup=False
    )
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    root_logger.addHandler(console_handler)
    
    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = True
    
    logger.debug(f"Logging started at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    if log_file is not None:
        logger.debug(f"Log file: {log_file}")
    
    return logger


def get_wordpiece_logger(logger_name: str = 'wordpieces') -> logging.Logger:
    """
    Get a pipeline logger, creating a basic one if none exists.
    
    Args:
        logger_name: Name of the logger to retrieve
        
    Returns:
        Logger instance
    """
    logger = logging.getLogger(logger_name)
    # hasHandlers() walks up to the root logger configured by setup_wordpiece_logging
    if not logger.hasHandlers():
        # Basic handler for library and test use; only warnings and errors
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setLevel(logging.WARNING)
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
    return logger
