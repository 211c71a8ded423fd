from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from .address import looks_like_ip
from .config import Settings
from .exceptions import ConflictingEntryError, DuplicateEntryError, HostsmithError, format_error_message
from .hostfile import Hostfile, load_hostfile, write_default_hostfile
from .hostname import Hostname
from .log_config import setup_logging
from .cli_helpers.display import (
    display_error,
    display_hostnames,
    display_info,
    display_rejections,
    display_success,
    display_warning,
)

__all__ = ["cli"]

logger = logging.getLogger("hostsmith")


def _open_hostfile(ctx: click.Context, seed_if_missing: bool = False) -> Hostfile:
    """Load the configured hosts file, reporting parse rejections."""
    settings: Settings = ctx.obj["settings"]
    try:
        hostfile, errors = load_hostfile(settings.hosts_path, seed_if_missing=seed_if_missing)
    except HostsmithError as e:
        display_error(format_error_message(e))
        raise SystemExit(1)
    display_rejections(errors)
    return hostfile


def _save(hostfile: Hostfile) -> None:
    try:
        hostfile.save()
    except HostsmithError as e:
        display_error(format_error_message(e))
        raise SystemExit(1)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--file",
    "-f",
    "hosts_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Hosts file to manage. Defaults to $HOSTSMITH_FILE or the OS hosts file.",
)
@click.option(
    "--env-file",
    "-e",
    type=click.Path(dir_okay=False),
    default=".env",
    show_default=True,
    help="Optional dotenv file providing HOSTSMITH_* settings.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging output.",
)
@click.pass_context
def cli(ctx: click.Context, hosts_file: Optional[str], env_file: str, verbose: bool) -> None:
    """hostsmith – keep your hosts file tidy."""
    settings = Settings.from_env(env_file)
    if hosts_file:
        settings.hosts_path = hosts_file
    try:
        settings.validate()
    except HostsmithError as e:
        display_error(format_error_message(e))
        raise SystemExit(2)

    setup_logging(verbose=verbose, log_file=settings.log_file, level=settings.log_level)
    logger.debug(f"Using hosts file {settings.hosts_path}")

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command()
@click.argument("domain")
@click.argument("ip")
@click.option("--force", is_flag=True, help="Replace an existing entry bound to another address.")
@click.pass_context
def add(ctx: click.Context, domain: str, ip: str, force: bool) -> None:
    """Add DOMAIN pointing at IP."""
    if not looks_like_ip(ip):
        raise click.BadParameter(f"{ip!r} does not look like an IPv4 or IPv6 address", param_hint="IP")

    hostfile = _open_hostfile(ctx, seed_if_missing=True)
    hostname = Hostname(domain, ip, True)
    try:
        hostfile.add(hostname)
    except DuplicateEntryError:
        hostfile.enable(domain)
        display_info(f"{domain} already points to {ip}")
    except ConflictingEntryError as e:
        if not force:
            display_error(f"{domain} already points to {e.existing_ip}; use --force to replace it")
            raise SystemExit(1)
        hostfile.delete(domain)
        hostfile.add(hostname)
        display_warning(f"Replaced {domain} -> {e.existing_ip}")

    _save(hostfile)
    display_success(f"Added {hostname.format_human()}")


@cli.command(name="rm")
@click.argument("domain")
@click.pass_context
def remove(ctx: click.Context, domain: str) -> None:
    """Remove DOMAIN from the hosts file."""
    hostfile = _open_hostfile(ctx)
    if not hostfile.contains_domain(domain):
        display_info(f"{domain} not found, nothing to remove")
        return
    hostfile.delete(domain)
    _save(hostfile)
    display_success(f"Removed {domain}")


def _toggle(ctx: click.Context, domain: str, enabled: bool) -> None:
    hostfile = _open_hostfile(ctx)
    if not hostfile.contains_domain(domain):
        display_error(f"{domain} not found")
        raise SystemExit(1)
    if enabled:
        hostfile.enable(domain)
    else:
        hostfile.disable(domain)
    _save(hostfile)
    display_success(hostfile.hosts[domain].format_human())


@cli.command()
@click.argument("domain")
@click.pass_context
def on(ctx: click.Context, domain: str) -> None:  # noqa: D401
    """Enable DOMAIN."""
    _toggle(ctx, domain, True)


@cli.command()
@click.argument("domain")
@click.pass_context
def off(ctx: click.Context, domain: str) -> None:  # noqa: D401
    """Disable DOMAIN by commenting it out."""
    _toggle(ctx, domain, False)


@cli.command()
@click.argument("domain")
@click.pass_context
def has(ctx: click.Context, domain: str) -> None:
    """Exit 0 if DOMAIN is in the hosts file, 1 otherwise."""
    hostfile = _open_hostfile(ctx)
    if hostfile.contains_domain(domain):
        display_success(f"Found {hostfile.hosts[domain].format_human()}")
        raise SystemExit(0)
    display_warning(f"{domain} not found")
    raise SystemExit(1)


@cli.command(name="ls")
@click.option("--ip", default=None, help="Only list domains bound to this address.")
@click.pass_context
def list_entries(ctx: click.Context, ip: Optional[str]) -> None:
    """List hosts file entries."""
    hostfile = _open_hostfile(ctx)
    domains = hostfile.list_domains_by_ip(ip) if ip else hostfile.list_domains()
    display_hostnames((hostfile.hosts[d] for d in domains), title=ip or "Hosts")


@cli.command(name="fmt")
@click.option("--check", is_flag=True, help="Only report whether the file is already formatted.")
@click.pass_context
def fmt(ctx: click.Context, check: bool) -> None:
    """Rewrite the hosts file in canonical order."""
    hostfile = _open_hostfile(ctx)
    formatted = hostfile.format() + "\n"
    if check:
        if hostfile.data == formatted:
            display_success("Hosts file is formatted")
            raise SystemExit(0)
        display_warning("Hosts file needs formatting, run `hostsmith fmt`")
        raise SystemExit(1)
    _save(hostfile)
    display_success(f"Formatted {len(hostfile)} entries")


@cli.command()
@click.option("--platform", default=None, help="Template platform (defaults to the running one).")
@click.pass_context
def init(ctx: click.Context, platform: Optional[str]) -> None:
    """Create the hosts file from the default template if it is missing."""
    settings: Settings = ctx.obj["settings"]
    target = Path(settings.hosts_path)
    if target.exists():
        display_info(f"{target} already exists")
        return
    try:
        write_default_hostfile(str(target), platform)
    except HostsmithError as e:
        display_error(format_error_message(e))
        raise SystemExit(1)
    display_success(f"Created {target}")
