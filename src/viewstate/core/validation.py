"""
Customer Validation - Field and Cross-Field Rules

✅ Validation as Data:
Validation results are returned as messages (or None), never raised, so the
UI can render them inline next to the offending field.

The set of validated fields is closed: ``CustomerField`` enumerates them and
``_FIELD_RULES`` maps each one to its check. Anything outside the set is
either ignored (production) or reported as a programming error
(``strict_field_names`` in debug configurations).
"""

import logging
import re
from enum import Enum
from typing import Callable, Dict, Optional, Union

from ..config import get_config
from .entity import Customer
from .errors import UnknownPropertyError
from .resources import Strings

logger = logging.getLogger(__name__)


class CustomerField(str, Enum):
    """Customer fields that carry validation rules"""
    EMAIL = "email"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"


# Optionally quoted local part without leading, trailing or doubled dots,
# then a domain whose final label is alphabetic.
_EMAIL_PATTERN = re.compile(
    r"""^(?!\.)("([^"\r\\]|\\["\r\\])*"|([-a-z0-9!#$%&'*+/=?^_`{|}~]|(?<!\.)\.)*)(?<!\.)"""
    r"""@[a-z0-9]([\w.-]*[a-z0-9])?\.[a-z][a-z.]*[a-z]$""",
    re.IGNORECASE,
)


def is_string_missing(value: Optional[str]) -> bool:
    """True for None, the empty string and whitespace-only strings."""
    return value is None or value.strip() == ""


def is_valid_email_address(email: Optional[str]) -> bool:
    if is_string_missing(email):
        return False
    return _EMAIL_PATTERN.match(email) is not None


def _validate_email(customer: Customer) -> Optional[str]:
    if is_string_missing(customer.email):
        return Strings.CUSTOMER_ERROR_MISSING_EMAIL
    if not is_valid_email_address(customer.email):
        return Strings.CUSTOMER_ERROR_INVALID_EMAIL
    return None


def _validate_first_name(customer: Customer) -> Optional[str]:
    if is_string_missing(customer.first_name):
        return Strings.CUSTOMER_ERROR_MISSING_FIRST_NAME
    return None


def _validate_last_name(customer: Customer) -> Optional[str]:
    # A company keeps its name in first_name; any last name is an error.
    if customer.is_company:
        if not is_string_missing(customer.last_name):
            return Strings.CUSTOMER_ERROR_COMPANY_HAS_NO_LAST_NAME
    elif is_string_missing(customer.last_name):
        return Strings.CUSTOMER_ERROR_MISSING_LAST_NAME
    return None


_FIELD_RULES: Dict[CustomerField, Callable[[Customer], Optional[str]]] = {
    CustomerField.EMAIL: _validate_email,
    CustomerField.FIRST_NAME: _validate_first_name,
    CustomerField.LAST_NAME: _validate_last_name,
}


def _resolve_field(field: Union[CustomerField, str]) -> Optional[CustomerField]:
    if isinstance(field, CustomerField):
        return field
    try:
        return CustomerField(field)
    except ValueError:
        if get_config().strict_field_names:
            raise UnknownPropertyError(str(field), Customer.__name__)
        logger.debug(f"Ignoring validation of unrecognized field {field!r}")
        return None


def validate(customer: Customer, field: Union[CustomerField, str]) -> Optional[str]:
    """
    Validate a single field of a customer.

    Args:
        customer: Customer to check
        field: A ``CustomerField`` or its string value

    Returns:
        The error message, or None when the field is valid or not validated

    Raises:
        UnknownPropertyError: ``field`` is unrecognized and the active
            configuration has ``strict_field_names`` enabled
    """
    resolved = _resolve_field(field)
    if resolved is None:
        return None
    return _FIELD_RULES[resolved](customer)


def validation_errors(customer: Customer) -> Dict[CustomerField, str]:
    """Map every failing field to its message."""
    errors = {}
    for field in CustomerField:
        error = validate(customer, field)
        if error is not None:
            errors[field] = error
    return errors


def is_valid(customer: Customer) -> bool:
    """True if every validated field of the customer passes."""
    # Every rule runs; command guards rely on a full evaluation.
    results = [validate(customer, field) for field in CustomerField]
    return all(error is None for error in results)


__all__ = [
    "CustomerField", "validate", "validation_errors", "is_valid",
    "is_string_missing", "is_valid_email_address",
]
