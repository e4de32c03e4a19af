from __future__ import annotations

from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address

from .classify import Address


@dataclass(frozen=True, eq=False)
class ClientAddr:
    ip: Address

    def _key(self) -> tuple[int, int]:
        # version first so v4 and v6 never get compared directly
        return (self.ip.version, int(self.ip))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClientAddr):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: ClientAddr) -> bool:
        if not isinstance(other, ClientAddr):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return str(self.ip)

    @property
    def ipv4(self) -> IPv4Address | None:
        if isinstance(self.ip, IPv4Address):
            return self.ip
        mapped = self.ip.ipv4_mapped
        if mapped is not None:
            return mapped
        # IPv4-compatible ::a.b.c.d
        if int(self.ip) >> 32 == 0:
            return IPv4Address(int(self.ip) & 0xFFFFFFFF)
        return None

    @property
    def ipv4_string(self) -> str | None:
        ipv4 = self.ipv4
        return str(ipv4) if ipv4 is not None else None

    @property
    def ipv6(self) -> IPv6Address:
        if isinstance(self.ip, IPv6Address):
            return self.ip
        return IPv6Address(f"::ffff:{self.ip}")

    @property
    def ipv6_string(self) -> str:
        ipv6 = self.ipv6
        # str() only renders the dotted tail itself on newer interpreters
        if ipv6.ipv4_mapped is not None:
            return f"::ffff:{ipv6.ipv4_mapped}"
        return str(ipv6)

    def to_dict(self) -> dict:
        return {
            "ip": str(self.ip),
            "version": self.ip.version,
            "ipv4": self.ipv4_string,
            "ipv6": self.ipv6_string,
        }
