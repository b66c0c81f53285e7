"""Client IP resolution with proxy-header priority and private-range filtering."""

from __future__ import annotations

import ipaddress
import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loginllama.views.base import RequestView

logger = logging.getLogger(__name__)

PRIVATE_IP_PATTERNS = tuple(
    re.compile(pattern)
    for pattern in (
        r"^10\.",
        r"^172\.(1[6-9]|2\d|3[01])\.",
        r"^192\.168\.",
        r"^127\.",
        r"^::1$",
        r"^fc00:",
        r"^fe80:",
    )
)

# Consulted after X-Forwarded-For, in order.  Each must hold a single public IP.
SINGLE_IP_HEADERS = ("CF-Connecting-IP", "X-Real-IP", "True-Client-IP")


def is_valid_ip(value: str) -> bool:
    """Return ``True`` if *value* is a syntactically valid IPv4 or IPv6 address."""
    try:
        address = ipaddress.ip_address(value)
    except ValueError:
        return False
    # Zone identifiers ("fe80::1%eth0") are not addresses a client can present.
    return not getattr(address, "scope_id", None)


def is_public_ip(value: str) -> bool:
    """Return ``True`` if *value* is a valid IP outside the private/local ranges."""
    if not is_valid_ip(value):
        return False
    return not any(pattern.search(value) for pattern in PRIVATE_IP_PATTERNS)


def parse_forwarded_for(header: str) -> str | None:
    """Return the first public address in an ``X-Forwarded-For`` list."""
    for token in header.split(","):
        candidate = token.strip()
        if is_public_ip(candidate):
            return candidate
    return None


def resolve_ip(view: RequestView | None) -> str | None:
    """Return the best guess at the client's IP address.

    Priority order:

    1. ``X-Forwarded-For`` (first public entry)
    2. ``CF-Connecting-IP`` (Cloudflare)
    3. ``X-Real-IP`` (nginx)
    4. ``True-Client-IP`` (Akamai / Cloudflare Enterprise)
    5. The direct peer address, unfiltered

    Returns ``None`` when nothing usable is found.
    """
    if view is None:
        return None

    forwarded_for = view.header("X-Forwarded-For")
    if forwarded_for:
        ip = parse_forwarded_for(forwarded_for)
        if ip:
            logger.debug("Resolved client IP from X-Forwarded-For")
            return ip

    for name in SINGLE_IP_HEADERS:
        value = view.header(name)
        if value and is_public_ip(value):
            logger.debug("Resolved client IP from %s", name)
            return value

    return view.remote_ip() or None
