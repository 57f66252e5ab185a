"""
All Customers View Model - Live Customer List and Selection Total

Keeps an observable collection of ``CustomerViewModel`` objects in step with
a ``CustomerRepository`` and exposes the total sales of the selected
customers.

Wiring rules:
- Members present at construction are subscribed before the collection is
  published, so no member is ever observable without its subscription.
- Afterwards, subscriptions follow ``collection_changed`` rather than the
  code paths that add members, so any way of adding a member is wired.
- The collection never holds two wrappers of the same customer. Adding one
  by any path raises ``ArgumentError`` before the list changes.
- Only ``is_selected`` notifications from members re-fire
  ``total_selected_sales``.
"""

import logging

from ..core.errors import ArgumentError
from ..core.resources import Strings
from ..persistence.base import CustomerAddedEventArgs, CustomerRepository
from .base import WorkspaceViewModel
from .collection import CollectionChangedEventArgs, ObservableCollection
from .customer import CustomerViewModel

logger = logging.getLogger(__name__)


class AllCustomersViewModel(WorkspaceViewModel):
    """
    A container of CustomerViewModel objects that stays synchronized with
    the customer repository.
    """

    def __init__(self, customer_repository: CustomerRepository):
        if customer_repository is None:
            raise ArgumentError("customer_repository")

        super().__init__(Strings.ALL_CUSTOMERS_VIEW_MODEL_DISPLAY_NAME)
        self._customer_repository = customer_repository

        # Subscribe for notifications of when a new customer is saved.
        self._customer_repository.customer_added.subscribe(self._on_customer_added_to_repository)

        self._create_all_customers()

    def _create_all_customers(self) -> None:
        all_customers = [CustomerViewModel(customer, self._customer_repository)
                         for customer in self._customer_repository.get_customers()]

        for customer_view_model in all_customers:
            customer_view_model.property_changed.subscribe(self._on_customer_view_model_property_changed)

        self._all_customers: ObservableCollection[CustomerViewModel] = ObservableCollection(all_customers)
        self._all_customers.collection_changing.subscribe(self._on_collection_changing)
        self._all_customers.collection_changed.subscribe(self._on_collection_changed)
        logger.debug(f"Wrapped {len(all_customers)} customers")

    @property
    def all_customers(self) -> ObservableCollection[CustomerViewModel]:
        """The live list of wrapped customers."""
        return self._all_customers

    @property
    def total_selected_sales(self) -> float:
        """Total sales of all selected customers."""
        return sum(customer_view_model.total_sales
                   for customer_view_model in self.all_customers
                   if customer_view_model.is_selected)

    def on_dispose(self) -> None:
        for customer_view_model in self.all_customers:
            customer_view_model.property_changed.unsubscribe(self._on_customer_view_model_property_changed)
            customer_view_model.dispose()

        self.all_customers.collection_changing.unsubscribe(self._on_collection_changing)
        self.all_customers.collection_changed.unsubscribe(self._on_collection_changed)
        self._customer_repository.customer_added.unsubscribe(self._on_customer_added_to_repository)
        self.all_customers.clear()

    # Event handling

    def _on_collection_changing(self, sender: ObservableCollection,
                                e: CollectionChangedEventArgs) -> None:
        for candidate in e.new_items:
            for member in sender:
                if any(member is old_item for old_item in e.old_items):
                    continue
                if candidate.shares_customer_with(member):
                    raise ArgumentError(
                        "customer_view_model",
                        f"{member.display_name!r} is already in the collection")

    def _on_collection_changed(self, sender: ObservableCollection,
                               e: CollectionChangedEventArgs) -> None:
        for customer_view_model in e.new_items:
            customer_view_model.property_changed.subscribe(self._on_customer_view_model_property_changed)

        for customer_view_model in e.old_items:
            customer_view_model.property_changed.unsubscribe(self._on_customer_view_model_property_changed)

    def _on_customer_view_model_property_changed(self, sender: CustomerViewModel,
                                                 property_name: str) -> None:
        is_selected = "is_selected"

        # Debug builds catch a renamed property here.
        sender.verify_property_name(is_selected)

        if property_name == is_selected:
            self.on_property_changed("total_selected_sales")

    def _on_customer_added_to_repository(self, sender: CustomerRepository,
                                         e: CustomerAddedEventArgs) -> None:
        if any(customer_view_model.wraps(e.new_customer) for customer_view_model in self.all_customers):
            logger.debug(f"{e.new_customer!r} is already listed")
            return

        self.all_customers.append(CustomerViewModel(e.new_customer, self._customer_repository))


__all__ = ["AllCustomersViewModel"]
