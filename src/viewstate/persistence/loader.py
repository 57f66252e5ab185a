"""
Customer data files.

A data file is a JSON array of customer records using camel-case keys::

    [{"totalSales": 1250.0, "firstName": "Josh", "lastName": "Smith",
      "isCompany": false, "email": "josh@example.com"}]
"""

import logging
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from ..core.entity import Customer
from ..core.errors import DataFileError

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path(__file__).resolve().parent.parent / "data" / "customers.json"

_customer_list = TypeAdapter(List[Customer])

def load_customers(path: Union[str, Path] = DEFAULT_DATA_FILE) -> List[Customer]:
    """
    Read customers from a JSON data file.

    Args:
        path: Data file to read (defaults to the bundled sample data)

    Returns:
        Customers in file order

    Raises:
        DataFileError: the file cannot be read or does not hold customer records
    """
    path = Path(path)
    if not path.exists():
        raise DataFileError(f"Missing customer data file: {path}", str(path))

    try:
        data = path.read_bytes()
    except OSError as e:
        raise DataFileError(f"Cannot read customer data file {path}: {e}", str(path)) from e

    try:
        customers = _customer_list.validate_json(data)
    except ValidationError as e:
        raise DataFileError(f"Malformed customer data file {path}: {e}", str(path)) from e

    logger.info(f"Loaded {len(customers)} customers from {path}")
    return customers

__all__ = ["load_customers", "DEFAULT_DATA_FILE"]
