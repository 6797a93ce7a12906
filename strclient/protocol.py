"""Socket helpers for the length-prefixed string protocol."""

from __future__ import annotations

import socket
import struct

_CHUNK_SIZE = 65536
_HEADER = struct.Struct("!H")
_COUNT = struct.Struct("!I")


class ProtocolError(Exception):
    """Raised when the conversation with the server fails."""


def connect(host: str, port: str | int) -> socket.socket:
    """Open a TCP connection over IPv4 to the first address of ``host``."""
    infos = socket.getaddrinfo(host, port, socket.AF_INET, socket.SOCK_STREAM)
    family, sock_type, proto, _canonname, address = infos[0]
    sock = socket.socket(family, sock_type, proto)
    try:
        sock.connect(address)
    except OSError:
        sock.close()
        raise
    return sock


def send_count(sock: socket.socket, count: int) -> int:
    """Send ``count`` as a 4-byte big-endian integer; return bytes sent."""
    if not 0 <= count < 2**32:
        raise ValueError(f"count does not fit in 32 bits: {count}")
    data = _COUNT.pack(count)
    try:
        sock.sendall(data)
    except OSError as exc:
        raise ProtocolError(f"sendall: {exc.strerror or exc}") from exc
    return len(data)


def recv_exact(sock: socket.socket, n: int) -> bytes:
    """Receive ``n`` bytes, stopping early if the peer closes the stream."""
    if n < 0:
        raise ValueError(f"negative byte count: {n}")
    chunks = []
    remaining = n
    while remaining > 0:
        try:
            chunk = sock.recv(min(remaining, _CHUNK_SIZE))
        except OSError as exc:
            raise ProtocolError(f"recv: {exc.strerror or exc}") from exc
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def recv_string(sock: socket.socket) -> str:
    """Receive one string packet: a 2-byte big-endian length, then the text."""
    header = recv_exact(sock, _HEADER.size)
    if len(header) < _HEADER.size:
        raise ProtocolError("connection closed before string length")
    (length,) = _HEADER.unpack(header)
    body = recv_exact(sock, length)
    return body.decode("utf-8", errors="replace")