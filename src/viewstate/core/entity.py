from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Customer(BaseModel):
    """
    A customer of a company.

    Customers are plain value holders; the rules that decide whether a
    customer is complete live in ``viewstate.core.validation`` and the
    editing surface lives in ``CustomerViewModel``.

    Identity matters: repositories and collections track customers by
    object identity (``is``), so two blank customers are two customers even
    though pydantic considers them equal.
    """
    model_config = ConfigDict(validate_assignment=True,
                              alias_generator=to_camel,
                              populate_by_name=True)

    # Total amount of money spent by the customer. Fixed at creation.
    total_sales: float = Field(default=0.0, frozen=True)

    # If this customer is a company, first_name stores the company's name
    # and last_name is left unset.
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_company: bool = False
    email: Optional[str] = None

    @classmethod
    def create_new_customer(cls) -> 'Customer':
        """Create a blank customer for data entry."""
        return cls()

    @classmethod
    def create_customer(cls,
                        total_sales: float,
                        first_name: Optional[str],
                        last_name: Optional[str],
                        is_company: bool,
                        email: Optional[str]) -> 'Customer':
        """Create a customer from known values."""
        return cls(total_sales=total_sales,
                   first_name=first_name,
                   last_name=last_name,
                   is_company=is_company,
                   email=email)

    def __repr__(self) -> str:
        kind = "company" if self.is_company else "person"
        return f"Customer({self.first_name!r}, {self.last_name!r}, {kind}, {self.email!r})"


__all__ = ["Customer"]
