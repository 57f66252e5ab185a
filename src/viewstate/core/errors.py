"""
Error Types - Contract Violations and Argument Errors

⚠️ Error Taxonomy:
Field validation messages are plain data and are never raised. The classes
in this module are reserved for hard failures at the point of misuse:

- ArgumentError: a required argument was None or otherwise unusable
- IllegalStateError: an operation was invoked while its guard was false
- ValidationFailure: save was requested for an invalid customer
- UnknownPropertyError: a property or field name does not exist (debug builds)
- DataFileError: the customer data file is missing or malformed
"""

from typing import Dict, Optional


class ViewStateError(Exception):
    """Base class for all viewstate errors"""


class ArgumentError(ViewStateError, ValueError):
    """Raised when a required argument is missing or invalid"""

    def __init__(self, argument: str, message: Optional[str] = None):
        super().__init__(message or f"Argument '{argument}' must not be None")
        self.argument = argument


class IllegalStateError(ViewStateError, RuntimeError):
    """Raised when an operation is invoked while it is not allowed"""


class ValidationFailure(IllegalStateError):
    """Raised when an invalid customer is saved"""

    def __init__(self, message: str, errors: Dict[str, str] = None):
        super().__init__(message)
        self.errors = errors or {}


class UnknownPropertyError(IllegalStateError):
    """Raised in debug mode when a property name is not defined on the target"""

    def __init__(self, property_name: str, owner: str):
        super().__init__(f"Invalid property name: {property_name} (on {owner})")
        self.property_name = property_name
        self.owner = owner


class DataFileError(ViewStateError):
    """Raised when a customer data file cannot be read"""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


__all__ = [
    "ViewStateError", "ArgumentError", "IllegalStateError",
    "ValidationFailure", "UnknownPropertyError", "DataFileError",
]
