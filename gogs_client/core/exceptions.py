from typing import Any, Dict, Optional

class GogsError(Exception):
    """Base exception class for all gogs_client exceptions"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

class ConfigError(GogsError):
    """Raised when there is a configuration error"""
    pass

class LoggerError(GogsError):
    """Raised when there is a logging error"""
    pass

class ValidationError(GogsError):
    """Raised when a required argument is missing or blank"""
    pass
