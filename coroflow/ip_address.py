"""IPv4 and IPv6 addresses held in binary form."""

from __future__ import annotations

import functools
import socket
from enum import IntEnum


class Domain(IntEnum):
    """Address family of an IP address."""

    IPV4 = socket.AF_INET
    IPV6 = socket.AF_INET6

    def __str__(self) -> str:
        return self.name.lower()


_IPV4_LEN = 4
_IPV6_LEN = 16


@functools.total_ordering
class IpAddress:
    """An immutable binary IP address together with its domain.

    Addresses order by domain first and then by their bytes.
    """

    __slots__ = ("_domain", "_raw")

    IPV4_LEN = _IPV4_LEN
    IPV6_LEN = _IPV6_LEN

    def __init__(self, binary_address: bytes = b"", domain: Domain = Domain.IPV4) -> None:
        domain = Domain(domain)
        raw = bytes(binary_address)
        if domain is Domain.IPV4 and len(raw) > _IPV4_LEN:
            raise ValueError("provided binary ip address is too long")
        if len(raw) > _IPV6_LEN:
            raise ValueError("provided binary ip address is too long")
        self._domain = domain
        self._raw = raw.ljust(_IPV6_LEN, b"\0")

    @property
    def domain(self) -> Domain:
        """The address family."""
        return self._domain

    @property
    def data(self) -> bytes:
        """The address bytes: 4 for IPv4, 16 for IPv6."""
        length = _IPV4_LEN if self._domain is Domain.IPV4 else _IPV6_LEN
        return self._raw[:length]

    @staticmethod
    def from_string(address: str, domain: Domain = Domain.IPV4) -> IpAddress:
        """Parse the textual form of an address of the given domain.

        Raises ValueError if the text is not a valid address.
        """
        domain = Domain(domain)
        try:
            packed = socket.inet_pton(int(domain), address)
        except (OSError, ValueError) as exc:
            raise ValueError(f"failed to convert {address!r} to an ip address") from exc
        return IpAddress(packed, domain)

    def to_string(self) -> str:
        """The textual form of the address."""
        try:
            return socket.inet_ntop(int(self._domain), self.data)
        except (OSError, ValueError) as exc:
            raise ValueError("failed to convert ip address to its string form") from exc

    def _key(self) -> tuple[int, bytes]:
        return (int(self._domain), self._raw)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IpAddress):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IpAddress):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"IpAddress({self.to_string()!r}, {self._domain})"