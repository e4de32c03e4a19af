from __future__ import annotations

from .chain import resolve_from_chain
from .classify import Address, parse_ip
from .models import ClientAddr


def resolve_client_addr(
    peer: Address | None,
    forwarded_for: str | None,
    real_ip: Address | None,
) -> ClientAddr | None:
    """Pick the most plausible client address for one request.

    Precedence: walked X-Forwarded-For chain, then the platform's real IP,
    then the TCP peer. A public peer is not returned early; a public load
    balancer may still have the real client behind it in the chain.
    """
    remote_fallback = peer

    if forwarded_for and forwarded_for.strip():
        ip = resolve_from_chain(forwarded_for)
        if ip is not None:
            return ClientAddr(ip)

    if real_ip is not None:
        return ClientAddr(real_ip)

    if remote_fallback is not None:
        return ClientAddr(remote_fallback)

    return None


def resolve_client_real_addr(
    peer: Address | None,
    forwarded_for: str | None,
    real_ip: Address | None,
) -> ClientAddr | None:
    # Trusts whatever the headers say: real IP, then the leftmost forwarded hop.
    if real_ip is not None:
        return ClientAddr(real_ip)

    if forwarded_for:
        ip = parse_ip(forwarded_for.split(",", 1)[0])
        if ip is not None:
            return ClientAddr(ip)

    if peer is not None:
        return ClientAddr(peer)

    return None
