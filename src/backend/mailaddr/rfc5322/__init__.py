"""
RFC5322 address package.

This package provides parsing and formatting of single email address
header values.
"""

from .address import (
    ADDRESS_REGEXP,
    Address,
    EmailAddressFormatError,
    validate_address,
)
from .composer import format_address, format_address_list
from .parser import parse_email_address

__all__ = [
    # Codec
    "Address",
    "ADDRESS_REGEXP",
    "validate_address",
    "EmailAddressFormatError",
    # Parser functions
    "parse_email_address",
    # Composer functions
    "format_address",
    "format_address_list",
]
