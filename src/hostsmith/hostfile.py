"""In-memory model of a hosts file.

The :class:`Hostfile` keeps one :class:`~hostsmith.hostname.Hostname` per
domain, rejects duplicate and conflicting insertions, and renders itself back
into a canonical, deterministically ordered text.
"""

from __future__ import annotations

import dataclasses
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional

from .exceptions import (
    ConflictingEntryError,
    DuplicateEntryError,
    HostsEntryError,
    HostsWriteError,
    SourceUnavailableError,
    handle_errors,
)
from .hostname import Hostname
from .parser import parse_line
from .templates import default_hosts

__all__ = ["Hostfile", "load_hostfile", "move_to_front", "write_default_hostfile"]

logger = logging.getLogger("hostsmith.hostfile")

LOOPBACK_PREFIX = "127."


def move_to_front(items: List[str], search: str) -> List[str]:
    """Return *items* with *search* moved to the front, if it is present."""
    if search not in items:
        return list(items)
    return [search] + [item for item in items if item != search]


class Hostfile:
    """A hosts file: a mapping from domain to :class:`Hostname`.

    Parameters
    ----------
    path:
        Location the file is loaded from and saved to.  The store never
        inspects it beyond passing it to the filesystem.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self.hosts: Dict[str, Hostname] = {}
        self.data = ""

    def __len__(self) -> int:
        return len(self.hosts)

    # ------------------------------------------------------------------
    # Loading & parsing
    # ------------------------------------------------------------------

    def load(self) -> str:
        """Read the backing file into the raw buffer and return it."""
        try:
            # Undecodable bytes (e.g. a cp1252 comment) survive a save unchanged
            self.data = Path(self.path).read_text(encoding="utf-8", errors="surrogateescape")
        except OSError as e:
            logger.error(f"Can't read {self.path}: {e}")
            raise SourceUnavailableError(
                f"Can't read {self.path}",
                {"path": self.path, "original_error": str(e)},
            ) from e
        logger.debug(f"Loaded {len(self.data)} bytes from {self.path}")
        return self.data

    def parse(self) -> List[HostsEntryError]:
        """Parse the raw buffer into the store.

        Every line is parsed even when earlier ones were rejected; the
        rejections are returned in the order they happened.
        """
        errors: List[HostsEntryError] = []
        for line in self.data.splitlines():
            for hostname in parse_line(line):
                try:
                    self.add(hostname)
                except HostsEntryError as e:
                    logger.warning(e.message)
                    errors.append(e)
        logger.debug(f"Parsed {len(self.hosts)} entries with {len(errors)} rejections")
        return errors

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, host: Hostname) -> None:
        """Insert *host* unless its domain is already present.

        Raises
        ------
        DuplicateEntryError
            The domain is already bound to ``host.ip``.
        ConflictingEntryError
            The domain is already bound to another address.
        """
        existing = self.hosts.get(host.domain)
        if existing is not None:
            if existing.ip == host.ip:
                raise DuplicateEntryError(host.domain, host.ip)
            raise ConflictingEntryError(host.domain, host.ip, existing.ip)
        self.hosts[host.domain] = dataclasses.replace(host)

    def delete(self, domain: str) -> None:
        """Remove *domain*; absent domains are ignored."""
        self.hosts.pop(domain, None)

    def enable(self, domain: str) -> None:
        if domain in self.hosts:
            self.hosts[domain].enabled = True

    def disable(self, domain: str) -> None:
        if domain in self.hosts:
            self.hosts[domain].enabled = False

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, host: Hostname) -> bool:
        """Return ``True`` if an entry equal to *host* in every field is stored."""
        return any(stored == host for stored in self.hosts.values())

    def contains_domain(self, domain: str) -> bool:
        return domain in self.hosts

    def list_domains(self) -> List[str]:
        """Return all domains in alphabetical order."""
        return sorted(self.hosts)

    def list_domains_by_ip(self, ip: str) -> List[str]:
        """Return the domains bound to *ip* in alphabetical order.

        On ``127.0.0.1`` the ``localhost`` domain always comes first, since
        some resolvers expect it to lead the loopback line.
        """
        names = sorted(host.domain for host in self.hosts.values() if host.ip == ip)
        if ip == "127.0.0.1":
            names = move_to_front(names, "localhost")
        return names

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def _format_ip(self, ip: str) -> List[str]:
        enabled = [ip]
        disabled = ["#", ip]
        for domain in self.list_domains_by_ip(ip):
            if self.hosts[domain].enabled:
                enabled.append(domain)
            else:
                disabled.append(domain)

        lines = []
        if len(enabled) > 1:
            lines.append(" ".join(enabled))
        if len(disabled) > 2:
            lines.append(" ".join(disabled))
        return lines

    def format(self) -> str:
        """Render the store as hosts file text.

        Ordering rules:

        1. ``127.*`` addresses come first so boot-time resolvers keep working.
        2. Within each group, addresses are sorted as plain strings.
        3. Each address gets one line for enabled domains followed by one
           commented-out line for disabled domains, skipping empty ones.
        4. ``localhost`` leads the ``127.0.0.1`` line when present.
        """
        loopback = sorted({h.ip for h in self.hosts.values() if h.ip.startswith(LOOPBACK_PREFIX)})
        others = sorted({h.ip for h in self.hosts.values() if not h.ip.startswith(LOOPBACK_PREFIX)})

        out: List[str] = []
        for ip in loopback + others:
            out.extend(self._format_ip(ip))
        return "\n".join(out)

    @handle_errors(HostsWriteError, logger)
    def save(self) -> None:
        """Atomically write :meth:`format` output to :attr:`path`."""
        # Replace the symlink target, not the link itself
        target = Path(self.path).resolve()
        temp_fd, temp_path = tempfile.mkstemp(dir=target.parent, prefix=".hosts.tmp.", text=True)
        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8", errors="surrogateescape") as f:
                f.write(self.format() + "\n")
            if target.exists():
                os.chmod(temp_path, target.stat().st_mode & 0o777)
            else:
                os.chmod(temp_path, 0o644)
            os.replace(temp_path, target)
        except Exception:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise
        logger.info(f"💾 Saved {len(self.hosts)} entries to {self.path}")


def load_hostfile(path: str, seed_if_missing: bool = False, platform: Optional[str] = None):
    """Load and parse the hosts file at *path*.

    When *seed_if_missing* is set and nothing exists at *path* yet, the
    platform's default template is parsed instead of failing.

    Returns a ``(hostfile, errors)`` tuple where *errors* lists the entries
    rejected while parsing.
    """
    hostfile = Hostfile(path)
    if seed_if_missing and not Path(path).exists():
        logger.info(f"{path} does not exist, seeding from default template")
        hostfile.data = default_hosts(platform)
    else:
        hostfile.load()
    errors = hostfile.parse()
    return hostfile, errors


@handle_errors(HostsWriteError, logger)
def write_default_hostfile(path: str, platform: Optional[str] = None) -> None:
    """Create *path* from the platform's default template."""
    Path(path).write_text(default_hosts(platform).lstrip("\n"), encoding="utf-8")
    logger.info(f"Created {path} from the default template")
