"""
RFC5322 single address codec.

This module converts a single header address token (as found in "From" or
"To" fields) to and from a structured Address. It accepts the bare form
``<user@host>`` and the named forms ``"Name" <user@host>`` and
``Name <user@host>``. Address lists, header folding and RFC 2047 decoding
are handled by the callers.
"""

import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

# Practical approximation of the RFC5322 addr-spec, not the full grammar.
ADDRESS_REGEXP = re.compile(
    r"^(([^<>()\[\]\\.,;:\s@\"]+(\.[^<>()\[\]\\.,;:\s@\"]+)*)|(\".+\"))"
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}])"
    r"|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$"
)

# Names made only of these characters are emitted quoted.
SIMPLE_NAME_REGEXP = re.compile(r"^[a-zA-Z\d\s_\-.]+$", re.ASCII)

WHITESPACE_REGEXP = re.compile(r"\s+")


class EmailAddressFormatError(Exception):
    """Exception raised when an address token is not in the expected format."""


def validate_address(raw) -> bool:
    """
    Check a raw ``user@host`` string against the address grammar.

    Never raises: anything that is not a matching string gives False.
    """
    if not isinstance(raw, str):
        return False
    return ADDRESS_REGEXP.fullmatch(raw) is not None


def _split_address(raw: str):
    username, _, hostname = raw.partition("@")
    return username, hostname


def _reject(reason: str, raw: str):
    logger.debug("Rejected address token %r: %s", raw, reason)
    return EmailAddressFormatError(reason)


class Address:
    """
    An email address with an optional display name.

    Instances are immutable values. Constructing one directly trusts the
    caller; use ``from_address`` or ``decode`` for untrusted input.
    """

    __slots__ = ("_username", "_hostname", "_display_name")

    def __init__(
        self, username: str, hostname: str, display_name: Optional[str] = None
    ):
        object.__setattr__(self, "_username", username)
        object.__setattr__(self, "_hostname", hostname)
        object.__setattr__(self, "_display_name", display_name)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def username(self) -> str:
        """The local-part, before the ``@``."""
        return self._username

    @property
    def hostname(self) -> str:
        """The domain or bracketed IPv4 literal, after the ``@``."""
        return self._hostname

    @property
    def display_name(self) -> Optional[str]:
        """The display name, or None when no name was given."""
        return self._display_name

    @property
    def full_address(self) -> str:
        """The username and hostname joined by ``@``."""
        return f"{self._username}@{self._hostname}"

    def __eq__(self, other):
        if not isinstance(other, Address):
            return NotImplemented
        return (self._username, self._hostname, self._display_name) == (
            other._username,
            other._hostname,
            other._display_name,
        )

    def __hash__(self):
        return hash((self._username, self._hostname, self._display_name))

    def __repr__(self):
        return (
            f"Address(username={self._username!r}, hostname={self._hostname!r}, "
            f"display_name={self._display_name!r})"
        )

    def __str__(self):
        return self.encode()

    validate = staticmethod(validate_address)

    def encode(self, simple: bool = False) -> str:
        """
        Encode the address for use in a header.

        Args:
            simple: Leave out the display name even if there is one

        Returns:
            ``<user@host>``, ``"Name" <user@host>`` or ``Name <user@host>``

        Examples:
            >>> Address("jane", "example.com").encode()
            '<jane@example.com>'
            >>> Address("jane", "example.com", "Jane Doe").encode()
            '"Jane Doe" <jane@example.com>'
            >>> Address("jane", "example.com", "Jane (Ops)").encode()
            'Jane (Ops) <jane@example.com>'
        """
        if simple or self._display_name is None:
            return f"<{self.full_address}>"

        if SIMPLE_NAME_REGEXP.fullmatch(self._display_name):
            escaped_name = self._display_name.replace('"', '\\"')
            return f'"{escaped_name}" <{self.full_address}>'

        # Emitted verbatim, brackets or quotes in the name are not escaped.
        return f"{self._display_name} <{self.full_address}>"

    @classmethod
    def from_address(cls, raw: str, display_name: Optional[str] = None) -> "Address":
        """
        Build an address from a raw ``user@host`` string.

        Args:
            raw: The address, without brackets
            display_name: Optional name, kept as given

        Returns:
            The Address

        Raises:
            EmailAddressFormatError: If ``raw`` does not match the grammar.
        """
        if not validate_address(raw):
            raise _reject("E-mail address is not in the proper format.", raw)

        username, hostname = _split_address(raw)
        return cls(username, hostname, display_name)

    @classmethod
    def decode(cls, raw: str) -> "Address":
        """
        Decode a header token holding one address and an optional name.

        Args:
            raw: The token, e.g. ``"Jane Doe" <jane@example.com>``

        Returns:
            The decoded Address

        Raises:
            EmailAddressFormatError: If a quote or bracket is missing, or the
                bracketed address is not valid.
        """
        original = raw
        remaining = WHITESPACE_REGEXP.sub(" ", raw).strip()
        name = None

        # Quoted name
        opening_quote = remaining.find('"')
        if opening_quote != -1:
            closing_quote = -1
            for index in range(opening_quote + 1, len(remaining)):
                previous_char = (
                    None if index == opening_quote + 1 else remaining[index - 1]
                )
                if remaining[index] == '"' and previous_char != "\\":
                    closing_quote = index
                    break

            if closing_quote == -1:
                raise _reject("Could not find closing quote.", original)

            name = remaining[opening_quote + 1 : closing_quote].replace('\\"', '"')
            remaining = remaining[closing_quote + 1 :].strip()

        opening_bracket = -1
        for index, char in enumerate(remaining):
            if char == "<":
                opening_bracket = index
                break

        if opening_bracket == -1:
            raise _reject("Could not find opening bracket.", original)

        # Unquoted name, only when no quoted one was found.
        if opening_bracket > 0 and name is None:
            name = remaining[:opening_bracket].strip()

        closing_bracket = -1
        for index in range(opening_bracket + 1, len(remaining)):
            if remaining[index] == ">":
                closing_bracket = index
                break

        if closing_bracket == -1:
            raise _reject("Missing closing bracket.", original)

        address = remaining[opening_bracket + 1 : closing_bracket]
        if not validate_address(address):
            raise _reject("E-mail address is not in the proper format.", original)

        username, hostname = _split_address(address)
        return cls(username, hostname, name)
