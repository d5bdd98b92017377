"""Logging configuration for the lesson formatter."""

import logging

LOGGER_NAME = 'lesson_formatter'


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure logging for the application.
    
    Args:
        verbose: If True, sets log level to DEBUG.
        quiet: If True, only warnings and errors are logged. ``verbose``
            wins when both are set.
            
    Returns:
        Configured logger instance.
    """
    if verbose:
        log_level = logging.DEBUG
    elif quiet:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO
    
    logging.basicConfig(
        format='%(levelname)s %(name)s: %(message)s',
        level=log_level
    )
    
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    
    return logger


# Singleton logger instance
logger = setup_logging()
