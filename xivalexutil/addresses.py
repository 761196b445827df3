"""Parsing and comparison of IPv4/IPv6 addresses, ports and ranges."""

from __future__ import annotations

import re
from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Any, Optional, Sequence, TypeVar, Union

from .strings import split, trim

T = TypeVar("T")

_UINT32 = 0xFFFFFFFF
_UINT16_MAX = 0xFFFF
_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")

_LOOPBACK = (0x7F000000, 0x7FFFFFFF)
_PRIVATE = [
    (0x0A000000, 0x0AFFFFFF),
    (0xA9FE0000, 0xA9FEFFFF),
    (0xAC100000, 0xAC1FFFFF),
    (0xC0A80000, 0xC0A8FFFF),
]


def parse_ip(text: str) -> IPv4Address:
    """Parse a dotted-quad IPv4 address."""
    try:
        return IPv4Address(text)
    except ValueError:
        raise ValueError(f'"{text}" is an invalid IP address.') from None


def _leading_number(text: str) -> tuple[int, int]:
    match = _NUMBER.match(text)
    if match is None:
        raise ValueError(f'"{text}" does not start with a number')
    value = int(match.group(2))
    if match.group(1) == "-":
        value = -value
    return value, match.end()


def parse_port(text: str) -> int:
    """Parse a whole string as a port number between 0 and 65535."""
    value, end = _leading_number(text)
    if value < 0 or value > _UINT16_MAX:
        raise ValueError("Not in uint16 range")
    if end != len(text):
        raise ValueError("Incomplete conversion")
    return value


def _parse_subnet(text: str) -> int:
    value, _ = _leading_number(text)
    if not -(2**31) <= value < 2**31:
        raise ValueError("subnet length out of range")
    return value


def _parse_ip_item(item: str) -> tuple[int, int]:
    if "/" in item:
        pos = item.index("/")
        subnet = _parse_subnet(trim(item[pos + 1:]))
        start = end = int(parse_ip(item[:pos]))
        if subnet == 0:
            return 0, _UINT32
        if subnet < 32:
            bits = 32 - subnet
            start = start & ~((1 << bits) - 1) & _UINT32
            end = ((((end >> bits) + 1) << bits) - 1) & _UINT32
        return start, end
    ips = split(item, "-")
    if len(ips) > 2:
        raise ValueError("Too many items in range specification.")
    start = int(parse_ip(ips[0]))
    end = int(parse_ip(ips[1])) if len(ips) == 2 else start
    return (end, start) if start > end else (start, end)


def parse_ip_range(
    text: str, allow_all: bool, allow_private: bool, allow_loopback: bool
) -> list[tuple[int, int]]:
    """Parse comma-separated IPv4 ranges into inclusive ``(start, end)`` integers.

    Items are single addresses, ``a-b`` ranges or ``a/n`` subnets. When any
    item was given, ``allow_all`` empties the result (meaning no restriction);
    otherwise the loopback and private ranges are appended as requested.
    """
    result: list[tuple[int, int]] = []
    for raw in split(text, ","):
        item = trim(raw)
        if not item:
            continue
        try:
            result.append(_parse_ip_item(item))
        except ValueError as e:
            raise ValueError(
                f'Invalid IP range item "{item}": {e}. It must be in the form of '
                '"0.0.0.0", "0.0.0.0-255.255.255.255", or "127.0.0.0/8", '
                "delimited by comma(,)."
            ) from e
    if result:
        if allow_all:
            result.clear()
        else:
            if allow_loopback:
                result.append(_LOOPBACK)
            if allow_private:
                result.extend(_PRIVATE)
    return result


def parse_port_range(text: str, allow_all: bool) -> list[tuple[int, int]]:
    """Parse comma-separated ports or ``a-b`` port ranges; ``allow_all`` empties the result."""
    result: list[tuple[int, int]] = []
    for raw in split(text, ","):
        item = trim(raw)
        if not item:
            continue
        try:
            ports = split(item, "-")
            if len(ports) > 2:
                raise ValueError("Too many items in range specification.")
            start = parse_port(ports[0])
            end = parse_port(ports[1]) if len(ports) == 2 else start
            result.append((end, start) if start > end else (start, end))
        except ValueError as e:
            raise ValueError(
                f'Invalid port range item "{item}": {e}. It must be in the form of '
                '"0-65535" or single item, delimited by comma(,).'
            ) from e
    if allow_all:
        result.clear()
    return result


SocketAddress = Sequence[Any]


def _sort_key(address: SocketAddress) -> tuple[int, tuple]:
    host, port, *rest = address
    ip = ip_address(host)
    if isinstance(ip, IPv4Address):
        return 0, (int(ip), int(port))
    flowinfo, scope_id = (list(rest) + [0, 0])[:2]
    return 1, (ip.packed, int(port), int(flowinfo), int(scope_id))


def compare_sockaddr(a: SocketAddress, b: SocketAddress) -> int:
    """Order two socket addresses: IPv4 before IPv6, then address, port and extras.

    Addresses are tuples as used by the ``socket`` module: ``(host, port)``
    or ``(host, port, flowinfo, scope_id)``. Returns -1, 0 or 1.
    """
    family_a, key_a = _sort_key(a)
    family_b, key_b = _sort_key(b)
    if family_a != family_b:
        return -1 if family_a < family_b else 1
    return (key_a > key_b) - (key_a < key_b)


def format_address(address: Union[str, IPv4Address, IPv6Address, SocketAddress]) -> str:
    """Text form of an address, or of a socket address as ``host:port``."""
    if isinstance(address, (IPv4Address, IPv6Address)):
        return str(address)
    if isinstance(address, str):
        return str(ip_address(address))
    host, port, *_ = address
    return f"{ip_address(host)}:{port}"


def boundary_check(value: int, offset: int, length: int, description: Optional[str] = None) -> None:
    """Raise ``IndexError`` unless ``offset <= value <= offset + length``."""
    if value < offset or value > offset + length:
        raise IndexError(f"out of boundary ({description})" if description else "out of boundary")


def clamp(value: T, low: T, high: T) -> T:
    """Limit ``value`` to the range from ``low`` to ``high``."""
    return min(high, max(low, value))