"""Shared fixtures for the viewstate test suite."""

import pytest

from viewstate import (
    Customer, Environment, MemoryCustomerRepository, ViewStateConfig,
    reset_config, set_config,
)


@pytest.fixture(autouse=True)
def testing_config():
    """Run every test with the testing configuration (debug checks on)."""
    config = ViewStateConfig.for_environment(Environment.TESTING)
    set_config(config)
    yield config
    reset_config()


@pytest.fixture
def production_config():
    """Switch to the production configuration (debug checks off)."""
    config = ViewStateConfig.for_environment(Environment.PRODUCTION)
    set_config(config)
    return config


@pytest.fixture
def customers():
    return [
        Customer.create_customer(100.0, "Josh", "Smith", False, "josh@example.com"),
        Customer.create_customer(250.5, "Contoso", None, True, "sales@contoso.example.com"),
        Customer.create_customer(40.25, "Maria", "Anders", False, "maria@example.net"),
    ]


@pytest.fixture
def repository(customers):
    return MemoryCustomerRepository(customers)


@pytest.fixture
def listen():
    """Record the property names reported by a ChangeNotifier."""
    def _listen(notifier):
        received = []
        notifier.subscribe(lambda sender, property_name: received.append(property_name))
        return received
    return _listen
