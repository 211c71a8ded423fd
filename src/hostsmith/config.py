"""
Configuration management with environment variable and dotenv support.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values

from .exceptions import HostsmithConfigError

__all__ = ["Settings", "get_hosts_path", "default_hosts_path"]

ENV_HOSTS_FILE = "HOSTSMITH_FILE"
ENV_LOG_LEVEL = "HOSTSMITH_LOG_LEVEL"
ENV_LOG_FILE = "HOSTSMITH_LOG_FILE"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def default_hosts_path(platform: Optional[str] = None) -> str:
    """Return the OS-standard hosts file location."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        system_root = os.environ.get("SystemRoot", r"C:\Windows")
        return system_root + r"\System32\drivers\etc\hosts"
    return "/etc/hosts"


def get_hosts_path(environ: Optional[Mapping[str, Optional[str]]] = None) -> str:
    """Return ``HOSTSMITH_FILE`` from *environ* if set, else the OS default."""
    environ = os.environ if environ is None else environ
    return environ.get(ENV_HOSTS_FILE) or default_hosts_path()


@dataclass
class Settings:
    """Runtime settings, loaded from the environment and an optional dotenv file."""

    hosts_path: str = "/etc/hosts"
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, env_file: Optional[str] = ".env") -> "Settings":
        """
        Load settings from the process environment.

        Values in *env_file* (when it exists) act as defaults that the real
        environment overrides.

        Environment variables:
            HOSTSMITH_FILE: hosts file path (default: OS hosts file)
            HOSTSMITH_LOG_LEVEL: log level (default: INFO)
            HOSTSMITH_LOG_FILE: optional log file path
        """
        values = dotenv_values(env_file) if env_file and Path(env_file).exists() else {}
        merged = {**values, **os.environ}
        return cls(
            hosts_path=get_hosts_path(merged),
            log_level=(merged.get(ENV_LOG_LEVEL) or "INFO").upper(),
            log_file=merged.get(ENV_LOG_FILE) or None,
        )

    def validate(self) -> None:
        """Check that the settings are usable."""
        if self.log_level not in VALID_LOG_LEVELS:
            raise HostsmithConfigError(
                f"Invalid {ENV_LOG_LEVEL}: {self.log_level}. "
                f"Must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}",
                {"log_level": self.log_level},
            )
        if not self.hosts_path:
            raise HostsmithConfigError("Hosts file path must not be empty")
