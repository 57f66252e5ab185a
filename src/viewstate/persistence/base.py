"""
viewstate Persistence Layer - Base Classes

This module provides the abstract customer repository the view models talk
to. The view models only ever list customers, ask whether one is known, and
request an addition; how customers are stored is up to the implementation.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from ..core.entity import Customer
from ..core.signals import Signal

@dataclass(frozen=True)
class CustomerAddedEventArgs:
    """Payload of the ``customer_added`` signal."""
    new_customer: Customer

class CustomerRepository(ABC):
    """
    Abstract base class for customer repositories.

    Subscribers to ``customer_added`` are called synchronously with
    ``(repository, CustomerAddedEventArgs)`` each time a customer that was
    not already contained is added.
    """

    def __init__(self):
        """Initialize the repository's added-customer signal."""
        self.customer_added = Signal("customer_added")

    @abstractmethod
    def get_customers(self) -> List[Customer]:
        """
        Return all customers in repository order.

        Returns:
            A new list; mutating it does not affect the repository
        """
        pass

    @abstractmethod
    def contains_customer(self, customer: Customer) -> bool:
        """
        Check whether this exact customer instance is in the repository.

        Raises:
            ArgumentError: customer is None
        """
        pass

    @abstractmethod
    def add_customer(self, customer: Customer) -> None:
        """
        Add a customer and fire ``customer_added``.

        Adding a customer that is already contained does nothing.

        Raises:
            ArgumentError: customer is None
        """
        pass

    def _on_customer_added(self, customer: Customer) -> None:
        self.customer_added.emit(self, CustomerAddedEventArgs(customer))
