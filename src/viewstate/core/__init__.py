from .entity import Customer
from .errors import (
    ViewStateError, ArgumentError, IllegalStateError,
    ValidationFailure, UnknownPropertyError, DataFileError,
)
from .resources import Strings
from .signals import Signal, ChangeNotifier
from .validation import CustomerField, validate, validation_errors, is_valid

__all__ = [
    'Customer',
    'ViewStateError',
    'ArgumentError',
    'IllegalStateError',
    'ValidationFailure',
    'UnknownPropertyError',
    'DataFileError',
    'Strings',
    'Signal',
    'ChangeNotifier',
    'CustomerField',
    'validate',
    'validation_errors',
    'is_valid',
]
