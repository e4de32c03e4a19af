from __future__ import annotations

from flask import Request, current_app, has_app_context
from flask import request as current_request

from ..resolve.classify import Address, parse_ip
from ..resolve.models import ClientAddr
from ..resolve.service import resolve_client_addr, resolve_client_real_addr

_PROXY_FIX_ORIG = "werkzeug.proxy_fix.orig"

CLIENT_ADDR_KEY = "clientaddr.client_addr"
CLIENT_REAL_ADDR_KEY = "clientaddr.client_real_addr"


def _original_remote_addr(request: Request) -> str | None:
    orig = request.environ.get(_PROXY_FIX_ORIG)
    if orig is not None:
        return orig.get("REMOTE_ADDR")
    return request.remote_addr


def get_peer_ip(request: Request) -> Address | None:
    """The TCP peer, as seen before ProxyFix rewrote REMOTE_ADDR."""
    return parse_ip(_original_remote_addr(request))


def get_forwarded_for(request: Request) -> str | None:
    # Only the first header instance counts.
    values = request.headers.getlist("X-Forwarded-For")
    return values[0] if values else None


def get_platform_real_ip(request: Request) -> Address | None:
    header = "X-Real-IP"
    if has_app_context():
        header = current_app.config.get("REAL_IP_HEADER", header)

    if header:
        values = request.headers.getlist(header)
        if values:
            return parse_ip(values[0])

    # ProxyFix already validated REMOTE_ADDR against its trusted hop count.
    if _PROXY_FIX_ORIG in request.environ:
        original = _original_remote_addr(request)
        if request.remote_addr and request.remote_addr != original:
            return parse_ip(request.remote_addr)

    return None


def _cached(key: str, request: Request | None, resolver) -> ClientAddr | None:
    # Stored in the WSGI environ so the cache lives and dies with the request.
    request = request if request is not None else current_request
    environ = request.environ
    if key not in environ:
        environ[key] = resolver(
            get_peer_ip(request),
            get_forwarded_for(request),
            get_platform_real_ip(request),
        )
    return environ[key]


def get_client_addr(request: Request | None = None) -> ClientAddr | None:
    return _cached(CLIENT_ADDR_KEY, request, resolve_client_addr)


def get_client_real_addr(request: Request | None = None) -> ClientAddr | None:
    return _cached(CLIENT_REAL_ADDR_KEY, request, resolve_client_real_addr)
