"""Thin socket ownership and helpers for creating client and server sockets."""

from __future__ import annotations

import socket
from dataclasses import dataclass
from enum import Enum

from coroflow.ip_address import Domain, IpAddress


class SocketType(Enum):
    """Kind of socket."""

    UDP = "udp"
    TCP = "tcp"

    @property
    def os_type(self) -> int:
        """The operating system's socket type constant."""
        return socket.SOCK_DGRAM if self is SocketType.UDP else socket.SOCK_STREAM


class Blocking(Enum):
    """Whether system calls on a socket block."""

    YES = "yes"
    NO = "no"


class ShutdownHow(Enum):
    """Which directions of a socket to shut down."""

    READ = socket.SHUT_RD
    WRITE = socket.SHUT_WR
    READ_WRITE = socket.SHUT_RDWR


@dataclass(frozen=True)
class SocketOptions:
    """How to create a socket."""

    domain: Domain
    type: SocketType
    blocking: Blocking


class Socket:
    """Owns an operating system socket and closes it when done."""

    def __init__(self, sock: socket.socket | None = None) -> None:
        self._sock = sock

    def __enter__(self) -> Socket:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def sock(self) -> socket.socket | None:
        """The underlying socket object, None once closed."""
        return self._sock

    def is_valid(self) -> bool:
        """True if a file descriptor is held; it says nothing about usability."""
        return self._sock is not None and self._sock.fileno() != -1

    def blocking(self, block: Blocking) -> bool:
        """Switch the blocking mode; True on success."""
        if not self.is_valid():
            return False
        assert self._sock is not None
        try:
            self._sock.setblocking(block is Blocking.YES)
        except OSError:
            return False
        return True

    def shutdown(self, how: ShutdownHow = ShutdownHow.READ_WRITE) -> bool:
        """Shut down the given directions; True on success."""
        if not self.is_valid():
            return False
        assert self._sock is not None
        try:
            self._sock.shutdown(how.value)
        except OSError:
            return False
        return True

    def close(self) -> None:
        """Close the socket and leave this object invalid."""
        sock, self._sock = self._sock, None
        if sock is not None:
            sock.close()

    def native_handle(self) -> int:
        """The file descriptor, or -1 if there is none."""
        return self._sock.fileno() if self._sock is not None else -1

    def __repr__(self) -> str:
        return f"Socket(fd={self.native_handle()})"


def make_socket(opts: SocketOptions) -> Socket:
    """Create a socket as described by ``opts``; raises OSError on failure."""
    raw = socket.socket(int(opts.domain), opts.type.os_type, 0)
    if opts.blocking is Blocking.NO:
        try:
            raw.setblocking(False)
        except OSError:
            raw.close()
            raise
    return Socket(raw)


def make_accept_socket(
    opts: SocketOptions, address: IpAddress, port: int, backlog: int = 128
) -> Socket:
    """Create a socket bound to ``address``:``port``; TCP sockets also listen.

    Raises OSError if any step fails.
    """
    s = make_socket(opts)
    raw = s.sock
    assert raw is not None
    try:
        raw.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        if hasattr(socket, "SO_REUSEPORT"):
            raw.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEPORT, 1)
        raw.bind((address.to_string(), port))
        if opts.type is SocketType.TCP:
            raw.listen(backlog)
    except OSError:
        s.close()
        raise
    return s