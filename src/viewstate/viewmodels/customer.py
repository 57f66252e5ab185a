"""
Customer View Model - Editing Surface for One Customer

A UI-friendly wrapper around a single ``Customer``. It forwards edits to the
customer with change notification, adds presentation-only state (the
customer type selector and the selection flag), exposes validation messages
per field, and owns the save command.
"""

import logging
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from ..core.entity import Customer
from ..core.errors import ArgumentError, ValidationFailure
from ..core.resources import Strings
from ..core.validation import CustomerField, is_valid, validate, validation_errors
from ..persistence.base import CustomerRepository
from .base import WorkspaceViewModel
from .command import RelayCommand

logger = logging.getLogger(__name__)


class CustomerType(str, Enum):
    """
    Values of the customer type selector.

    Maps onto ``Customer.is_company`` but, unlike a bool, has an
    unselected state.
    """
    NOT_SPECIFIED = Strings.CUSTOMER_VIEW_MODEL_CUSTOMER_TYPE_OPTION_NOT_SPECIFIED
    PERSON = Strings.CUSTOMER_VIEW_MODEL_CUSTOMER_TYPE_OPTION_PERSON
    COMPANY = Strings.CUSTOMER_VIEW_MODEL_CUSTOMER_TYPE_OPTION_COMPANY


class CustomerViewModel(WorkspaceViewModel):
    """
    A UI-friendly wrapper for a Customer object.

    The wrapped customer is fixed for the lifetime of the view model.
    """

    # last_name is validated differently for companies, so a change of
    # customer type invalidates whatever last name is currently stored.
    property_dependencies = {"customer_type": ("last_name",)}

    # Properties whose changes can flip the save command's guard.
    SAVE_DEPENDENCIES = ("email", "first_name", "last_name", "customer_type")

    def __init__(self, customer: Customer, customer_repository: CustomerRepository):
        if customer is None:
            raise ArgumentError("customer")
        if customer_repository is None:
            raise ArgumentError("customer_repository")

        super().__init__()
        self._customer = customer
        self._customer_repository = customer_repository
        self._customer_type = CustomerType.NOT_SPECIFIED
        self._is_selected = False
        self._save_command: Optional[RelayCommand] = None

    # Customer properties

    @property
    def email(self) -> Optional[str]:
        return self._customer.email

    @email.setter
    def email(self, value: Optional[str]):
        if value == self._customer.email:
            return
        self._customer.email = value
        self.on_property_changed("email")

    @property
    def first_name(self) -> Optional[str]:
        return self._customer.first_name

    @first_name.setter
    def first_name(self, value: Optional[str]):
        if value == self._customer.first_name:
            return
        self._customer.first_name = value
        self.on_property_changed("first_name")

    @property
    def last_name(self) -> Optional[str]:
        return self._customer.last_name

    @last_name.setter
    def last_name(self, value: Optional[str]):
        if value == self._customer.last_name:
            return
        self._customer.last_name = value
        self.on_property_changed("last_name")

    @property
    def is_company(self) -> bool:
        return self._customer.is_company

    @property
    def total_sales(self) -> float:
        return self._customer.total_sales

    # Presentation properties

    @property
    def customer_type(self) -> CustomerType:
        """
        What kind of customer this is.

        Setting PERSON or COMPANY updates ``Customer.is_company``. Setting
        NOT_SPECIFIED, an empty value or the current value does nothing.
        """
        return self._customer_type

    @customer_type.setter
    def customer_type(self, value: Union[CustomerType, str, None]):
        if value is None or value == "":
            return

        try:
            value = CustomerType(value)
        except ValueError:
            raise ArgumentError("customer_type", f"Unknown customer type: {value!r}")

        if value == self._customer_type or value is CustomerType.NOT_SPECIFIED:
            return

        self._customer_type = value
        self._customer.is_company = value is CustomerType.COMPANY
        self.on_property_changed("customer_type")

    @property
    def customer_type_options(self) -> Tuple[CustomerType, ...]:
        """Options for the customer type selector, in display order."""
        return (CustomerType.NOT_SPECIFIED, CustomerType.PERSON, CustomerType.COMPANY)

    @property
    def display_name(self) -> Optional[str]:
        if self.is_new_customer:
            return Strings.CUSTOMER_VIEW_MODEL_DISPLAY_NAME
        if self._customer.is_company:
            return self._customer.first_name
        return f"{self._customer.last_name}, {self._customer.first_name}"

    @property
    def is_selected(self) -> bool:
        """Whether this customer is selected in the UI."""
        return self._is_selected

    @is_selected.setter
    def is_selected(self, value: bool):
        value = bool(value)
        if value == self._is_selected:
            return
        self._is_selected = value
        self.on_property_changed("is_selected")

    @property
    def is_new_customer(self) -> bool:
        """True until the customer has been added to the repository."""
        return not self._customer_repository.contains_customer(self._customer)

    @property
    def can_save(self) -> bool:
        """True if a customer type is chosen and the customer is valid."""
        return self._validate_customer_type() is None and is_valid(self._customer)

    @property
    def save_command(self) -> RelayCommand:
        """Command that saves the customer; enabled only while ``can_save``."""
        if self._save_command is None:
            self._save_command = RelayCommand(self.save, lambda: self.can_save, name="save")
            self._save_command.watch(self.property_changed, *self.SAVE_DEPENDENCIES)
        return self._save_command

    # Public methods

    def save(self) -> None:
        """
        Save the customer to the repository.

        Raises:
            ValidationFailure: the customer has validation errors
        """
        if not is_valid(self._customer):
            errors = {field.value: message
                      for field, message in validation_errors(self._customer).items()}
            logger.warning(f"Refused to save {self._customer!r}: {errors}")
            raise ValidationFailure(Strings.CUSTOMER_VIEW_MODEL_EXCEPTION_CANNOT_SAVE, errors)

        if self.is_new_customer:
            self._customer_repository.add_customer(self._customer)

        self.on_property_changed("display_name")

    def wraps(self, customer: Customer) -> bool:
        """True if this view model wraps exactly ``customer``."""
        return self._customer is customer

    def shares_customer_with(self, other: "CustomerViewModel") -> bool:
        return other.wraps(self._customer)

    # Validation

    def field_error(self, property_name: str) -> Optional[str]:
        """
        Get the validation message for a property, or None if it is valid.

        ``customer_type`` is checked here because ``Customer.is_company``
        has no unselected state; everything else is checked against the
        customer.
        """
        if property_name == "customer_type":
            return self._validate_customer_type()
        return validate(self._customer, property_name)

    def validation_errors(self) -> Dict[str, str]:
        """All current validation messages keyed by property name."""
        errors = {}
        customer_type_error = self._validate_customer_type()
        if customer_type_error is not None:
            errors["customer_type"] = customer_type_error
        for field in CustomerField:
            error = validate(self._customer, field)
            if error is not None:
                errors[field.value] = error
        return errors

    def _validate_customer_type(self) -> Optional[str]:
        if self._customer_type in (CustomerType.PERSON, CustomerType.COMPANY):
            return None
        return Strings.CUSTOMER_VIEW_MODEL_ERROR_MISSING_CUSTOMER_TYPE

    def on_dispose(self) -> None:
        if self._save_command is not None:
            self._save_command.dispose()

    def __repr__(self):
        return f"CustomerViewModel({self._customer!r})"


__all__ = ["CustomerViewModel", "CustomerType"]
