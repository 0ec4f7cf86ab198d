"""
Enum definitions for the Car Store Backend
"""

from enum import Enum


class ErrorType(str, Enum):
    """Failure kinds reported by the service layer"""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    STORAGE_ERROR = "STORAGE_ERROR"
