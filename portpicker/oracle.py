"""
Free-Port Oracle - decide whether a port is usable on both IP versions
"""
from .probe import IPV4_ANY, IPV6_ANY, bind_tcp, bind_udp


def is_free_udp(port: int) -> bool:
    """Check if a port is free on UDP for both IPv6 and IPv4"""
    return bind_udp(IPV6_ANY, port) is not None and bind_udp(IPV4_ANY, port) is not None


def is_free_tcp(port: int) -> bool:
    """Check if a port is free on TCP for both IPv6 and IPv4"""
    return bind_tcp(IPV6_ANY, port) is not None and bind_tcp(IPV4_ANY, port) is not None


def is_free(port: int) -> bool:
    """
    Check if a port is free on both TCP and UDP.

    A single failing protocol/family combination makes the whole port
    unusable.
    """
    return is_free_tcp(port) and is_free_udp(port)
