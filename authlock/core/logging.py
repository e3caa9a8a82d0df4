"""Logging utilities for authlock modules."""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits its configuration from the root logger.
    
    Loggers created here propagate to the root logger, so a plain
    ``logging.basicConfig()`` in the host application is enough to see
    authlock output. When the root logger has no handlers yet the logger
    stays at WARNING so embedding applications are not flooded.
    
    Args:
        name: Logger name (typically ``authlock.<area>``)
        
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    
    root_logger = logging.getLogger()
    if not root_logger.handlers and logger.level == logging.NOTSET:
        logger.setLevel(logging.WARNING)
    
    return logger
