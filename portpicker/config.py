"""
Search configuration for the port picker
"""
from dataclasses import dataclass

MAX_PORT = 65535


@dataclass
class PickerConfig:
    """Configuration for the port search strategy"""
    random_range_start: int = 15000
    random_range_end: int = 25000  # Exclusive
    random_attempts: int = 10
    os_attempts: int = 10  # Attempts after random sampling is exhausted

    def __post_init__(self):
        """Reject ranges and attempt counts the search cannot use"""
        if not 0 < self.random_range_start < self.random_range_end <= MAX_PORT + 1:
            raise ValueError(
                f"Invalid random port range "
                f"{self.random_range_start}-{self.random_range_end}"
            )
        if self.random_attempts < 0 or self.os_attempts < 0:
            raise ValueError("Attempt counts must not be negative")
