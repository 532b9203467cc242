"""
Common error handling utilities for the BGG client package.
"""

import logging
from typing import Optional, Any, Callable
from functools import wraps

logger = logging.getLogger(__name__)


class BGGClientError(Exception):
    """Base class for errors raised while talking to the BGG XML API."""


class FetchError(BGGClientError):
    """The transport could not retrieve a response body."""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"{message} ({url})")
        self.url = url
        self.status_code = status_code


class DocumentParseError(BGGClientError):
    """A response body could not be parsed as XML."""


def handle_errors(default_return: Any = None, default_factory: Optional[Callable[[], Any]] = None,
                  log_error: bool = True):
    """
    Decorator to handle common exceptions and provide consistent error logging.
    
    Args:
        default_return: Value to return on error
        default_factory: Callable producing a fresh value to return on error
            (takes precedence over default_return; use for mutable defaults)
        log_error: Whether to log the error
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                if log_error:
                    logger.error(f"Error in {func.__name__}: {e}")
                if default_factory is not None:
                    return default_factory()
                return default_return
        return wrapper
    return decorator


def safe_execute(func: Callable, *args, default_return: Any = None, 
                 error_msg: Optional[str] = None, **kwargs) -> Any:
    """
    Safely execute a function with error handling.
    
    Args:
        func: Function to execute
        *args: Arguments for the function
        default_return: Value to return on error
        error_msg: Custom error message
        **kwargs: Keyword arguments for the function
        
    Returns:
        Function result or default_return on error
    """
    try:
        return func(*args, **kwargs)
    except Exception as e:
        if error_msg:
            logger.error(f"{error_msg}: {e}")
        else:
            logger.error(f"Error in {func.__name__}: {e}")
        return default_return
