"""
portpicker - find an unused TCP/UDP port on the local host
"""
from .config import PickerConfig
from .oracle import is_free, is_free_tcp, is_free_udp
from .picker import (
    NoFreePortError,
    PortPicker,
    pick_unused_port,
    pick_unused_port_range,
    require_unused_port,
    require_unused_port_range,
)

__version__ = "1.0.0"

__all__ = [
    "PickerConfig",
    "PortPicker",
    "NoFreePortError",
    "is_free",
    "is_free_tcp",
    "is_free_udp",
    "pick_unused_port",
    "pick_unused_port_range",
    "require_unused_port",
    "require_unused_port_range",
]
