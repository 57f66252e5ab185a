"""
viewstate - Reactive View-Model State for Customer Editing

Keeps customers, the view models wrapping them and command enablement
consistent under live edits, with field-level and cross-field validation.
"""

from .config import (
    ViewStateConfig, Environment, LoggingConfig,
    get_config, set_config, reset_config, configure_logging,
)
from .core import (
    Customer, CustomerField, validate, validation_errors, is_valid,
    Signal, ChangeNotifier, Strings,
    ViewStateError, ArgumentError, IllegalStateError,
    ValidationFailure, UnknownPropertyError, DataFileError,
)
from .persistence import (
    CustomerRepository, CustomerAddedEventArgs, MemoryCustomerRepository, load_customers,
)
from .viewmodels import (
    ObservableObject, ViewModelBase, WorkspaceViewModel, RelayCommand,
    ObservableCollection, CollectionChangedEventArgs, CollectionChangeAction,
    CustomerViewModel, CustomerType, AllCustomersViewModel,
)

__version__ = "0.1.0"

__all__ = [
    # Configuration
    'ViewStateConfig',
    'Environment',
    'LoggingConfig',
    'get_config',
    'set_config',
    'reset_config',
    'configure_logging',

    # Core
    'Customer',
    'CustomerField',
    'validate',
    'validation_errors',
    'is_valid',
    'Signal',
    'ChangeNotifier',
    'Strings',

    # Errors
    'ViewStateError',
    'ArgumentError',
    'IllegalStateError',
    'ValidationFailure',
    'UnknownPropertyError',
    'DataFileError',

    # Persistence
    'CustomerRepository',
    'CustomerAddedEventArgs',
    'MemoryCustomerRepository',
    'load_customers',

    # View models
    'ObservableObject',
    'ViewModelBase',
    'WorkspaceViewModel',
    'RelayCommand',
    'ObservableCollection',
    'CollectionChangedEventArgs',
    'CollectionChangeAction',
    'CustomerViewModel',
    'CustomerType',
    'AllCustomersViewModel',
]
