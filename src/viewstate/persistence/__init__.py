"""
viewstate Persistence Layer

The view models depend only on the abstract CustomerRepository contract.
"""

from .base import CustomerRepository, CustomerAddedEventArgs
from .loader import load_customers, DEFAULT_DATA_FILE
from .memory import MemoryCustomerRepository

__all__ = [
    'CustomerRepository',
    'CustomerAddedEventArgs',
    'MemoryCustomerRepository',
    'load_customers',
    'DEFAULT_DATA_FILE',
]
