"""Status codes reported by network operations."""

from __future__ import annotations

import errno
from enum import Enum, IntEnum


class ConnectStatus(Enum):
    """Outcome of a connection attempt."""

    #: The connection has been established.
    CONNECTED = "connected"
    #: The given ip address could not be parsed or is invalid.
    INVALID_IP_ADDRESS = "invalid_ip_address"
    #: The connection attempt timed out.
    TIMEOUT = "timeout"
    #: Some other error occurred.
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


class RecvStatus(IntEnum):
    """Outcome of a receive call; positive values are errno codes."""

    OK = 0
    #: The peer closed the socket.
    CLOSED = -1
    #: The udp socket has not been bound to a local port.
    UDP_NOT_BOUND = -2
    WOULD_BLOCK = errno.EWOULDBLOCK
    TRY_AGAIN = errno.EAGAIN
    BAD_FILE_DESCRIPTOR = errno.EBADF
    CONNECTION_REFUSED = errno.ECONNREFUSED
    MEMORY_FAULT = errno.EFAULT
    INTERRUPTED = errno.EINTR
    INVALID_ARGUMENT = errno.EINVAL
    NO_MEMORY = errno.ENOMEM
    NOT_CONNECTED = errno.ENOTCONN
    NOT_A_SOCKET = errno.ENOTSOCK
    SSL_ERROR = -3

    def __str__(self) -> str:
        return self.name.lower()


class SendStatus(IntEnum):
    """Outcome of a send call; positive values are errno codes."""

    OK = 0
    PERMISSION_DENIED = errno.EACCES
    WOULD_BLOCK = errno.EWOULDBLOCK
    TRY_AGAIN = errno.EAGAIN
    ALREADY_IN_PROGRESS = errno.EALREADY
    BAD_FILE_DESCRIPTOR = errno.EBADF
    CONNECTION_RESET = errno.ECONNRESET
    NO_PEER_ADDRESS = errno.EDESTADDRREQ
    MEMORY_FAULT = errno.EFAULT
    INTERRUPTED = errno.EINTR
    IS_CONNECTION = errno.EISCONN
    MESSAGE_SIZE = errno.EMSGSIZE
    OUTPUT_QUEUE_FULL = errno.ENOBUFS
    NO_MEMORY = errno.ENOMEM
    NOT_CONNECTED = errno.ENOTCONN
    NOT_A_SOCKET = errno.ENOTSOCK
    OPERATION_NOT_SUPPORTED = errno.EOPNOTSUPP
    PIPE_CLOSED = errno.EPIPE
    SSL_ERROR = -3

    def __str__(self) -> str:
        return self.name.lower()


class SslHandshakeStatus(Enum):
    """Outcome of a TLS handshake."""

    OK = "ok"
    NOT_CONNECTED = "not_connected"
    SSL_CONTEXT_REQUIRED = "ssl_context_required"
    SSL_RESOURCE_ALLOCATION_FAILED = "ssl_resource_allocation_failed"
    SSL_SET_FD_FAILURE = "ssl_set_fd_failure"
    HANDSHAKE_FAILED = "handshake_failed"
    TIMEOUT = "timeout"
    POLL_ERROR = "poll_error"
    UNEXPECTED_CLOSE = "unexpected_close"

    def __str__(self) -> str:
        return self.value