"""
Command line entry point for portpicker
"""

import argparse
import logging
import sys
from typing import List, Optional

from .oracle import is_free
from .picker import NoFreePortError, PortPicker


def _pick_distinct(picker: PortPicker, count: int, port_range: Optional[range]) -> List[int]:
    """Pick count different ports, giving up after a bounded number of tries"""
    if port_range is not None:
        # A ranged pick always returns the lowest free port, so walk past
        # each one instead of asking again
        ports: List[int] = []
        remaining = port_range
        while len(ports) < count:
            port = picker.require_unused_port_range(remaining)
            ports.append(port)
            remaining = range(port + 1, port_range.stop)
        return ports

    ports = []
    for _ in range(count * 10):
        port = picker.require_unused_port()
        if port not in ports:
            ports.append(port)
        if len(ports) == count:
            return ports
    raise NoFreePortError(f"Found only {len(ports)} of {count} distinct unused ports")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="Print a port that is free on both TCP and UDP",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Any free port
  portpicker

  # Lowest free port in 15000-15999
  portpicker --range 15000 16000

  # Is 8080 free?
  portpicker --check 8080
        """
    )

    parser.add_argument(
        '--range', '-r',
        nargs=2,
        type=int,
        metavar=('START', 'END'),
        help='Only consider ports START <= port < END'
    )

    parser.add_argument(
        '--check', '-c',
        type=int,
        metavar='PORT',
        help='Report whether PORT is free instead of picking one'
    )

    parser.add_argument(
        '--count', '-n',
        type=int,
        default=1,
        help='Number of distinct ports to print (default: 1)'
    )

    parser.add_argument(
        '--log-level', '-l',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='WARNING',
        help='Logging level (default: WARNING)'
    )

    args = parser.parse_args(argv)

    if args.count < 1:
        parser.error("--count must be at least 1")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.check is not None:
        free = is_free(args.check)
        print("free" if free else "in use")
        return 0 if free else 1

    port_range = range(*args.range) if args.range else None

    try:
        ports = _pick_distinct(PortPicker(), args.count, port_range)
    except NoFreePortError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for port in ports:
        print(port)
    return 0


if __name__ == '__main__':
    sys.exit(main())
