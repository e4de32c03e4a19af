from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Union

Address = Union[IPv4Address, IPv6Address]


def parse_ip(text: str | None) -> Address | None:
    """Parse a bare IPv4/IPv6 literal, returning None if it isn't one.

    Zone ids, brackets and ports are not accepted.
    """
    if not text:
        return None
    text = text.strip()
    if not text or "%" in text:
        return None
    try:
        return ip_address(text)
    except ValueError:
        return None


def _is_local_v4(addr: IPv4Address) -> bool:
    a, b, c, d = addr.packed

    # private
    if a == 10:
        return True
    if a == 172 and 16 <= b <= 31:
        return True
    if a == 192 and b == 168:
        return True
    # loopback
    if a == 127:
        return True
    # link-local
    if a == 169 and b == 254:
        return True
    # broadcast
    if (a, b, c, d) == (255, 255, 255, 255):
        return True
    # documentation
    if (a, b, c) in ((192, 0, 2), (198, 51, 100), (203, 0, 113)):
        return True
    # unspecified
    return (a, b, c, d) == (0, 0, 0, 0)


def _segments(addr: IPv6Address) -> list[int]:
    value = int(addr)
    return [(value >> (112 - 16 * i)) & 0xFFFF for i in range(8)]


def _is_local_v6(addr: IPv6Address) -> bool:
    seg = _segments(addr)

    if seg[0] & 0xFF00 == 0xFF00:
        # multicast: only global scope (14) counts as public
        return seg[0] & 0x000F != 14

    if seg == [0, 0, 0, 0, 0, 0, 0, 1] or seg == [0] * 8:
        return True
    # link-local, site-local
    if seg[0] & 0xFFC0 in (0xFE80, 0xFEC0):
        return True
    # unique-local
    if seg[0] & 0xFE00 == 0xFC00:
        return True
    # documentation 2001:db8::/32
    return seg[0] == 0x2001 and seg[1] == 0x0DB8


def is_local_ip(addr: Address) -> bool:
    """True when ``addr`` is non-routable for proxy-trust purposes.

    This is a deliberate policy: documentation ranges, broadcast and
    non-global multicast count as local alongside the private, loopback
    and link-local ranges.
    """
    if addr.version == 4:
        return _is_local_v4(addr)
    return _is_local_v6(addr)
