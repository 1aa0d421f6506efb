"""
Bind Prober - try to bind a single protocol/family to a port

A probe binds a socket, reads back the port the OS gave it and closes the
socket again. Failing to bind is the common case, so it is reported as
None rather than raised.
"""
import logging
import socket
import sys
from typing import Optional

logger = logging.getLogger(__name__)

IPV4_ANY = "0.0.0.0"
IPV6_ANY = "::"


def _family(host: str) -> int:
    return socket.AF_INET6 if ":" in host else socket.AF_INET


def _probe(kind: int, host: str, port: int) -> Optional[int]:
    try:
        with socket.socket(_family(host), kind) as sock:
            if kind == socket.SOCK_STREAM:
                # Match a typical server listener; on Windows this flag
                # would allow binding over a live socket
                if sys.platform != "win32":
                    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
                sock.bind((host, port))
                sock.listen(1)
            else:
                sock.bind((host, port))
            return sock.getsockname()[1]
    except (OSError, OverflowError) as e:
        logger.debug(f"Bind failed on [{host}]:{port}: {e}")
        return None


def bind_tcp(host: str, port: int) -> Optional[int]:
    """
    Try to bind a TCP listener on host:port.

    Args:
        host: Wildcard address literal, IPv4 or IPv6
        port: Port to bind, or 0 to let the OS choose

    Returns:
        The bound port, or None if the bind failed
    """
    return _probe(socket.SOCK_STREAM, host, port)


def bind_udp(host: str, port: int) -> Optional[int]:
    """Try to bind a UDP socket on host:port, returning the bound port or None"""
    return _probe(socket.SOCK_DGRAM, host, port)
