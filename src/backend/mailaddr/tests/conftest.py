"""Fixtures for tests in the mailaddr application"""
# pylint: disable=redefined-outer-name

import pytest

from mailaddr import factories


@pytest.fixture
def address():
    """Create an address with a display name."""
    return factories.AddressFactory()


@pytest.fixture
def bare_address():
    """Create an address without a display name."""
    return factories.BareAddressFactory()
