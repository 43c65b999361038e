"""
RFC5322 address parsing helpers.

Tuple-returning wrappers around ``Address.decode`` for code that only needs
the display name and the address string.
"""

from typing import Tuple

from .address import Address


def parse_email_address(address_str: str) -> Tuple[str, str]:
    """
    Parse a header address token that might include a display name.

    Args:
        address_str: String containing a bracketed address, possibly with a name

    Returns:
        Tuple of (display_name, email_address), the name being "" when absent

    Raises:
        EmailAddressFormatError: If the token cannot be decoded.

    Examples:
        >>> parse_email_address('<user@example.com>')
        ('', 'user@example.com')
        >>> parse_email_address('User <user@example.com>')
        ('User', 'user@example.com')
    """
    if not address_str:
        return "", ""

    parsed = Address.decode(address_str)
    return parsed.display_name or "", parsed.full_address
