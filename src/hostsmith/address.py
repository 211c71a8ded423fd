"""Address shape classification.

These checks only look at the *shape* of a token.  They are good enough to
tell the address column of a hosts file line apart from the domain columns;
they do not tell whether an address is valid or routable.
"""

from __future__ import annotations

import re

__all__ = ["looks_like_ipv4", "looks_like_ipv6", "looks_like_ip"]

IPV4_PATTERN = re.compile(r"[0-9]{1,3}(?:\.[0-9]{1,3}){3}")

# Hextets and colons (at least two colons, so ``::1`` qualifies), an optional
# dotted IPv4 tail and an optional zone identifier such as ``%lo0``.
IPV6_PATTERN = re.compile(
    r"(?=[^%]*:[^%]*:)[0-9a-f:]+(?:[0-9]{1,3}(?:\.[0-9]{1,3}){3})?(?:%[0-9a-z._-]+)?",
    re.IGNORECASE,
)


def looks_like_ipv4(token: str) -> bool:
    """Return ``True`` if *token* looks like a dotted-quad IPv4 address."""
    return IPV4_PATTERN.fullmatch(token) is not None


def looks_like_ipv6(token: str) -> bool:
    """Return ``True`` if *token* looks like an IPv6 address."""
    return IPV6_PATTERN.fullmatch(token) is not None


def looks_like_ip(token: str) -> bool:
    return looks_like_ipv4(token) or looks_like_ipv6(token)
