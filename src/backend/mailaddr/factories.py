"""
Address factories for tests.
"""

import factory
from faker import Faker

from mailaddr.rfc5322 import Address

fake = Faker()


class AddressFactory(factory.Factory):
    """A factory to random valid addresses with a simple display name."""

    class Meta:
        model = Address

    username = factory.Sequence(lambda n: f"john.doe{n!s}")
    hostname = factory.Sequence(lambda n: f"example{n}.com")
    display_name = factory.Faker("name")


class BareAddressFactory(AddressFactory):
    """A factory to random addresses without a display name."""

    display_name = None


class LiteralAddressFactory(BareAddressFactory):
    """A factory to addresses using a bracketed IPv4 literal as hostname."""

    hostname = factory.LazyFunction(lambda: f"[{fake.ipv4()}]")
