"""
RFC5322 address formatting helpers.

Builds header values from JMAP-style ``{"name": ..., "email": ...}`` data
using the address codec.
"""

from typing import Dict, List

from .address import Address


def format_address(name: str, email: str) -> str:
    """
    Format a name and email address for a header.

    Args:
        name: The display name (can be empty)
        email: The email address, without brackets

    Returns:
        The encoded address, or "" when no email is given

    Raises:
        EmailAddressFormatError: If the email is not a valid address.

    Examples:
        >>> format_address('', 'user@example.com')
        '<user@example.com>'
        >>> format_address('John Doe', 'john@example.com')
        '"John Doe" <john@example.com>'
    """
    if not email:
        return ""

    return Address.from_address(email.strip(), name or None).encode()


def format_address_list(addresses: List[Dict[str, str]]) -> str:
    """
    Format a list of address objects into a comma-separated string.

    Each entry is one already-separated address, encoded with format_address.

    Args:
        addresses: List of dicts with 'name' and 'email' keys

    Returns:
        Comma-separated string of formatted addresses
    """
    formatted = []
    for addr in addresses:
        name = addr.get("name", "")
        email = addr.get("email", "")
        if email:
            formatted.append(format_address(name, email))

    return ", ".join(formatted)
