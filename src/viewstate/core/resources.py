"""
User-facing strings.

Localization is handled outside this package; these are the default English
texts shown by the view models and validators.
"""


class Strings:
    ALL_CUSTOMERS_VIEW_MODEL_DISPLAY_NAME = "All Customers"

    CUSTOMER_ERROR_COMPANY_HAS_NO_LAST_NAME = "A company does not have a last name"
    CUSTOMER_ERROR_INVALID_EMAIL = "The e-mail address is invalid"
    CUSTOMER_ERROR_MISSING_EMAIL = "Missing e-mail address"
    CUSTOMER_ERROR_MISSING_FIRST_NAME = "Missing first name"
    CUSTOMER_ERROR_MISSING_LAST_NAME = "Missing last name"

    CUSTOMER_VIEW_MODEL_CUSTOMER_TYPE_OPTION_COMPANY = "Company"
    CUSTOMER_VIEW_MODEL_CUSTOMER_TYPE_OPTION_NOT_SPECIFIED = "(Not Specified)"
    CUSTOMER_VIEW_MODEL_CUSTOMER_TYPE_OPTION_PERSON = "Person"
    CUSTOMER_VIEW_MODEL_DISPLAY_NAME = "New Customer"
    CUSTOMER_VIEW_MODEL_ERROR_MISSING_CUSTOMER_TYPE = "Customer type must be 'Person' or 'Company'"
    CUSTOMER_VIEW_MODEL_EXCEPTION_CANNOT_SAVE = "Customer cannot be saved while it has validation errors"

    COMMAND_EXCEPTION_CANNOT_EXECUTE = "Command cannot execute in its current state"
    WORKSPACE_VIEW_MODEL_CLOSE = "Close"


__all__ = ["Strings"]
