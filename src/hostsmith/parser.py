"""Line parser turning raw hosts file lines into :class:`Hostname` records."""

from __future__ import annotations

import logging
import re
from typing import List

from .address import looks_like_ip
from .hostname import Hostname

__all__ = ["parse_line", "trim_ws"]

logger = logging.getLogger("hostsmith.parser")

# Only tabs and spaces separate columns; other whitespace stays in the token
SEPARATOR = re.compile(r"[ \t]+")


def trim_ws(text: str) -> str:
    """Strip spaces, tabs and newlines from both ends of *text*."""
    return text.strip(" \n\t")


def parse_line(line: str) -> List[Hostname]:
    """Parse one hosts file *line*.

    A leading ``#`` marks every entry on the line as disabled; any later
    ``#`` starts a comment.  The first token must look like an address,
    otherwise the line yields nothing.  Every following token becomes one
    :class:`Hostname`, in the order it appears on the line.
    """
    if not line:
        return []

    enabled = True
    if line[0] == "#":
        enabled = False
        line = trim_ws(line[1:])

    # Anything after a remaining '#' is a plain comment
    line = line.split("#", 1)[0]

    # Tabs and runs of spaces all count as one separator
    line = line.strip(" \t")
    if not line:
        return []
    words = SEPARATOR.split(line)

    ip, domains = words[0], words[1:]
    if not looks_like_ip(ip):
        logger.debug(f"Skipping line without a leading address: {line!r}")
        return []

    return [Hostname(domain, ip, enabled) for domain in domains]
