from __future__ import annotations

import logging

from .classify import Address, is_local_ip, parse_ip

logger = logging.getLogger(__name__)


def resolve_from_chain(header_value: str | None) -> Address | None:
    """Walk an X-Forwarded-For value from the server side outward.

    The first public hop wins. If every parsed hop is local, the furthest
    one reached is returned. An unparseable token ends the walk, since
    anything beyond it can't be trusted.
    """
    if not header_value:
        return None

    last_ip: Address | None = None
    for token in reversed(header_value.split(",")):
        ip = parse_ip(token)
        if ip is None:
            logger.debug("Stopping X-Forwarded-For walk at unparseable hop %r", token.strip())
            break

        last_ip = ip
        if not is_local_ip(ip):
            break

    return last_ip
