"""LAN address resolution for the advertised pairing URL.

The host running the server is usually reachable from a tablet on the same
Wi-Fi segment through its default-route address. Resolution never fails the
caller: when nothing better is found the loopback address is advertised,
which only works for same-machine testing.
"""

from __future__ import annotations

import ipaddress
import socket

from retadi.exceptions import ResolveDegraded
from retadi.utils.logging import get_logger

logger = get_logger(__name__)

LOOPBACK = "127.0.0.1"

# Never contacted: connect() on a UDP socket only selects a route.
_ROUTE_TARGETS: tuple[tuple[int, str], ...] = (
    (socket.AF_INET, "10.255.255.255"),
    (socket.AF_INET6, "fd00::1"),
)


def _route_addresses() -> list[str]:
    """Addresses the kernel would use for outbound LAN traffic."""
    found: list[str] = []
    for family, target in _ROUTE_TARGETS:
        try:
            with socket.socket(family, socket.SOCK_DGRAM) as s:
                s.connect((target, 1))
                found.append(s.getsockname()[0])
        except OSError:
            continue
    return found


def _hostname_addresses() -> list[str]:
    """Addresses registered for this machine's hostname."""
    try:
        infos = socket.getaddrinfo(socket.gethostname(), None, proto=socket.IPPROTO_TCP)
    except OSError:
        return []
    return [info[4][0] for info in infos]


def _candidate_addresses() -> list[str]:
    return [a.split("%", 1)[0] for a in _route_addresses() + _hostname_addresses()]


def is_lan_address(address: str) -> bool:
    """Return True if *address* is usable by another device on the LAN."""
    try:
        ip = ipaddress.ip_address(address)
    except ValueError:
        return False
    return not (ip.is_loopback or ip.is_link_local or ip.is_unspecified or ip.is_multicast)


def lan_address() -> str:
    """Return the first LAN-reachable address, preferring IPv4.

    Raises:
        ResolveDegraded: If no non-loopback address exists.
    """
    usable = [a for a in _candidate_addresses() if is_lan_address(a)]
    for address in usable:
        if ipaddress.ip_address(address).version == 4:
            return address
    if usable:
        return usable[0]
    raise ResolveDegraded("No LAN address found on any interface")


def format_url(host: str, port: int) -> str:
    """Format ``http://host:port`` with IPv6 hosts bracketed."""
    if ":" in host:
        host = f"[{host}]"
    return f"http://{host}:{port}"


def resolve(configured_port: int) -> str:
    """Return the connection URL for a server listening on *configured_port*."""
    try:
        host = lan_address()
    except (ResolveDegraded, OSError) as exc:
        logger.warning("address_resolve_degraded", error=str(exc), fallback=LOOPBACK)
        host = LOOPBACK
    return format_url(host, configured_port)
