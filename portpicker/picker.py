"""
Port Search Strategy - pick a port that is free on TCP and UDP

Two ways to search:
  * pick_unused_port(): random sampling in a quiet band of ports, then
    asking the OS for a port if sampling keeps hitting busy ones
  * pick_unused_port_range(): ascending scan of a caller supplied range

A port is only known to be free at the moment it was probed. Another
process can take it before the caller binds it; nothing here reserves it.
"""
import logging
import random
from typing import Iterable, Optional

from .config import PickerConfig
from .oracle import is_free, is_free_udp
from .probe import IPV4_ANY, IPV6_ANY, bind_tcp


class NoFreePortError(RuntimeError):
    """Raised by the require_* helpers when a search finds nothing"""


def _describe(port_range: Iterable[int]) -> str:
    if isinstance(port_range, range) and port_range.step == 1:
        return f"range {port_range.start}-{port_range.stop - 1}"
    return f"ports {list(port_range)}"


class PortPicker:
    """Service for picking unused TCP/UDP ports"""

    def __init__(self, config: Optional[PickerConfig] = None, seed: Optional[int] = None):
        self.config = config or PickerConfig()
        self.logger = logging.getLogger(__name__)
        self._rng = random.Random(seed)

    def _ask_os_for_tcp_port(self) -> Optional[int]:
        """Let the OS choose a TCP port, preferring the IPv6 wildcard"""
        port = bind_tcp(IPV6_ANY, 0)
        if port is None:
            port = bind_tcp(IPV4_ANY, 0)
        return port

    def pick_unused_port(self) -> Optional[int]:
        """
        Pick a port that is free on both TCP and UDP.

        Random candidates from the configured band are tried first. If all
        of them are busy, the OS is asked for TCP ports, which are then
        checked on UDP as well.

        Returns:
            A free port, or None if every attempt failed
        """
        cfg = self.config

        for _ in range(cfg.random_attempts):
            port = self._rng.randrange(cfg.random_range_start, cfg.random_range_end)
            if is_free(port):
                return port
        self.logger.debug(
            f"No free port after {cfg.random_attempts} random picks in "
            f"{cfg.random_range_start}-{cfg.random_range_end - 1}, asking the OS"
        )

        # OS assigned ports are only known free on TCP, so check UDP too
        for _ in range(cfg.os_attempts):
            port = self._ask_os_for_tcp_port()
            if port is not None and is_free_udp(port):
                return port

        self.logger.warning(
            f"Could not find an unused port after "
            f"{cfg.random_attempts + cfg.os_attempts} attempts"
        )
        return None

    def pick_unused_port_range(self, port_range: Iterable[int]) -> Optional[int]:
        """
        Pick the lowest port in a range that is free on both TCP and UDP.

        Args:
            port_range: Ports to try in order, usually range(start, end)

        Returns:
            The first free port, or None if none in the range is free
        """
        for port in port_range:
            if is_free(port):
                return port
        self.logger.debug(f"No free port in {_describe(port_range)}")
        return None

    def require_unused_port(self) -> int:
        """
        Like pick_unused_port(), but fail loudly.

        Raises:
            NoFreePortError: If no port could be found
        """
        port = self.pick_unused_port()
        if port is None:
            raise NoFreePortError("No unused port found")
        return port

    def require_unused_port_range(self, port_range: Iterable[int]) -> int:
        """
        Like pick_unused_port_range(), but fail loudly.

        Raises:
            NoFreePortError: If no port in the range is free
        """
        port = self.pick_unused_port_range(port_range)
        if port is None:
            raise NoFreePortError(f"No unused port found in {_describe(port_range)}")
        return port

    def find_service_port(self, service_name: str,
                          port_range: Optional[Iterable[int]] = None) -> int:
        """
        Find a port for a named service, with logging.

        Args:
            service_name: Name of the service (for logging)
            port_range: Restrict the search to these ports

        Returns:
            Free port number
        """
        if port_range is None:
            port = self.require_unused_port()
        else:
            port = self.require_unused_port_range(port_range)
        self.logger.info(f"{service_name} will use port {port}")
        return port


_default_picker = PortPicker()


def pick_unused_port() -> Optional[int]:
    """Pick a port free on TCP and UDP, or None. See PortPicker.pick_unused_port"""
    return _default_picker.pick_unused_port()


def pick_unused_port_range(port_range: Iterable[int]) -> Optional[int]:
    """Pick the lowest free port in port_range, or None"""
    return _default_picker.pick_unused_port_range(port_range)


def require_unused_port() -> int:
    return _default_picker.require_unused_port()


def require_unused_port_range(port_range: Iterable[int]) -> int:
    return _default_picker.require_unused_port_range(port_range)
