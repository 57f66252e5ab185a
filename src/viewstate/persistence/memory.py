"""
viewstate Persistence Layer - Memory Backend

In-memory customer repository for development, demos and testing.
Data is lost when the application exits.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..config import ViewStateConfig, get_config
from ..core.entity import Customer
from ..core.errors import ArgumentError
from .base import CustomerRepository
from .loader import DEFAULT_DATA_FILE, load_customers

logger = logging.getLogger(__name__)

class MemoryCustomerRepository(CustomerRepository):
    """
    List-backed customer repository.

    Membership is by object identity, so an edited customer is still the
    same customer and two blank customers never collide.
    """

    def __init__(self, customers: Optional[Iterable[Customer]] = None):
        super().__init__()
        self._customers: List[Customer] = []
        for customer in customers or ():
            if not self._contains(customer):
                self._customers.append(customer)

    @classmethod
    def from_file(cls, path: Union[str, Path] = DEFAULT_DATA_FILE) -> 'MemoryCustomerRepository':
        """Create a repository holding the customers of a data file."""
        return cls(load_customers(path))

    @classmethod
    def from_config(cls, config: Optional[ViewStateConfig] = None) -> 'MemoryCustomerRepository':
        """Create a repository from the configured data file (or the bundled sample)."""
        config = config or get_config()
        return cls.from_file(config.data_file or DEFAULT_DATA_FILE)

    def get_customers(self) -> List[Customer]:
        return list(self._customers)

    def contains_customer(self, customer: Customer) -> bool:
        if customer is None:
            raise ArgumentError("customer")
        return self._contains(customer)

    def add_customer(self, customer: Customer) -> None:
        if customer is None:
            raise ArgumentError("customer")

        if self._contains(customer):
            logger.debug(f"Ignoring repeated add of {customer!r}")
            return

        self._customers.append(customer)
        logger.info(f"Added {customer!r} ({len(self._customers)} customers)")
        self._on_customer_added(customer)

    def _contains(self, customer: Customer) -> bool:
        return any(existing is customer for existing in self._customers)

    def __len__(self) -> int:
        return len(self._customers)
