"""
Tests that encoded addresses are understood by the Flanker address parser.
"""

import pytest
from flanker.addresslib import address as flanker_address

from mailaddr.rfc5322 import Address


class TestFlankerInterop:
    """Tests for parsing encoded addresses with Flanker."""

    @pytest.mark.parametrize(
        "addr",
        [
            Address("jane", "example.com"),
            Address("jane", "example.com", "Jane Doe"),
            Address("j.r.r.tolkien", "example.org", "J.R.R. Tolkien"),
        ],
    )
    def test_encoded_address_is_parsed(self, addr):
        """Test that Flanker reads back the same address and name."""
        parsed = flanker_address.parse(addr.encode())
        assert parsed is not None
        assert parsed.address == addr.full_address
        assert (parsed.display_name or None) == addr.display_name

    def test_flanker_formatted_address_is_decoded(self):
        """Test that a Flanker formatted address decodes to the same parts."""
        parsed = flanker_address.parse('"Jane Doe" <jane@example.com>')
        decoded = Address.decode(parsed.full_spec())
        assert decoded.full_address == parsed.address
        assert decoded.display_name == parsed.display_name
