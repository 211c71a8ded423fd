"""hostsmith - parse, edit and canonically format the hosts file"""
from __future__ import annotations

__version__ = "0.1.0"

from .address import looks_like_ip, looks_like_ipv4, looks_like_ipv6  # noqa: E402
from .hostfile import Hostfile, load_hostfile  # noqa: E402
from .hostname import Hostname  # noqa: E402
from .parser import parse_line  # noqa: E402

__all__: list[str] = [
    "Hostfile",
    "Hostname",
    "load_hostfile",
    "looks_like_ip",
    "looks_like_ipv4",
    "looks_like_ipv6",
    "parse_line",
]
