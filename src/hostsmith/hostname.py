"""The hostname record stored in a hosts file."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Hostname"]


@dataclass
class Hostname:
    """A single domain bound to a single address.

    Two records are equal only when domain, address *and* enabled state all
    match.  ``domain`` and ``ip`` are fixed once set; ``enabled`` is the only
    attribute that may be flipped afterwards.
    """

    domain: str
    ip: str
    enabled: bool = True

    def __setattr__(self, name, value) -> None:
        if name in ("domain", "ip") and name in self.__dict__:
            raise AttributeError(f"Hostname.{name} cannot be changed once set")
        super().__setattr__(name, value)

    def format_human(self) -> str:
        state = "(On)" if self.enabled else "(Off)"
        return f"{self.domain} -> {self.ip} {state}"

    def __str__(self) -> str:
        return self.format_human()
