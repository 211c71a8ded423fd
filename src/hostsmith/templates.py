"""Default hosts file contents used to seed a missing file."""

from __future__ import annotations

import sys
from typing import Optional

__all__ = ["DEFAULT_DARWIN", "DEFAULT_LINUX", "default_hosts"]

DEFAULT_DARWIN = """
##
# Host Database
#
# localhost is used to configure the loopback interface
# when the system is booting.  Do not change this entry.
##

127.0.0.1       localhost
255.255.255.255 broadcasthost
::1             localhost
fe80::1%lo0     localhost
"""

DEFAULT_LINUX = """
127.0.0.1   localhost
127.0.1.1   HOSTNAME

# The following lines are desirable for IPv6 capable hosts
::1     localhost ip6-localhost ip6-loopback
fe00::0 ip6-localnet
ff00::0 ip6-mcastprefix
ff02::1 ip6-allnodes
ff02::2 ip6-allrouters
ff02::3 ip6-allhosts
"""


def default_hosts(platform: Optional[str] = None) -> str:
    """Return the default template for *platform* (``sys.platform`` if omitted).

    macOS and the BSDs share the Darwin layout; everything else gets the
    Debian-style Linux layout.
    """
    platform = platform or sys.platform
    if platform.startswith(("darwin", "freebsd", "openbsd", "netbsd")):
        return DEFAULT_DARWIN
    return DEFAULT_LINUX
