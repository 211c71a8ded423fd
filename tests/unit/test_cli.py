"""Unit tests for the hostsmith command line."""
from __future__ import annotations

from pathlib import Path
from typing import List

import pytest
from click.testing import CliRunner

from hostsmith.cli import cli
from hostsmith.templates import DEFAULT_LINUX

pytestmark = pytest.mark.unit


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


def invoke(runner: CliRunner, hosts: Path, args: List[str]):
    env_file = hosts.parent / ".env.unused"
    return runner.invoke(cli, ["-f", str(hosts), "-e", str(env_file), *args])


class TestMutatingCommands:
    def test_add_writes_canonical_file(self, runner, hosts_file):
        result = invoke(runner, hosts_file, ["add", "cache.example.com", "10.0.0.1"])
        assert result.exit_code == 0, result.output
        assert "Added cache.example.com -> 10.0.0.1 (On)" in result.output
        assert hosts_file.read_text(encoding="utf-8") == (
            "127.0.0.1 localhost\n"
            "10.0.0.1 api.example.com cache.example.com db.example.com\n"
            "# 10.0.0.5 old-service\n"
        )

    def test_add_rejects_non_address(self, runner, hosts_file):
        result = invoke(runner, hosts_file, ["add", "a.example.com", "not-an-ip"])
        assert result.exit_code == 2
        assert "does not look like" in result.output

    def test_add_conflict_requires_force(self, runner, hosts_file):
        before = hosts_file.read_text(encoding="utf-8")
        result = invoke(runner, hosts_file, ["add", "api.example.com", "10.0.0.9"])
        assert result.exit_code == 1
        assert "use --force" in result.output
        assert hosts_file.read_text(encoding="utf-8") == before

    def test_add_force_replaces(self, runner, hosts_file):
        result = invoke(runner, hosts_file, ["add", "--force", "api.example.com", "10.0.0.9"])
        assert result.exit_code == 0, result.output
        content = hosts_file.read_text(encoding="utf-8")
        assert "10.0.0.9 api.example.com" in content
        assert "10.0.0.1 db.example.com" in content

    def test_add_existing_disabled_entry_enables_it(self, runner, hosts_file):
        result = invoke(runner, hosts_file, ["add", "old-service", "10.0.0.5"])
        assert result.exit_code == 0, result.output
        assert "10.0.0.5 old-service\n" in hosts_file.read_text(encoding="utf-8")
        assert "# 10.0.0.5" not in hosts_file.read_text(encoding="utf-8")

    def test_add_seeds_missing_file(self, runner, temp_dir):
        hosts = temp_dir / "hosts"
        result = invoke(runner, hosts, ["add", "dev.local", "10.1.1.1"])
        assert result.exit_code == 0, result.output
        content = hosts.read_text(encoding="utf-8")
        assert content.startswith("127.0.0.1 localhost\n")
        assert "10.1.1.1 dev.local" in content

    def test_rm(self, runner, hosts_file):
        result = invoke(runner, hosts_file, ["rm", "db.example.com"])
        assert result.exit_code == 0, result.output
        assert "db.example.com" not in hosts_file.read_text(encoding="utf-8")

    def test_rm_absent_is_not_an_error(self, runner, hosts_file):
        before = hosts_file.read_text(encoding="utf-8")
        result = invoke(runner, hosts_file, ["rm", "missing.example.com"])
        assert result.exit_code == 0
        assert "nothing to remove" in result.output
        assert hosts_file.read_text(encoding="utf-8") == before

    def test_off_and_on(self, runner, hosts_file):
        result = invoke(runner, hosts_file, ["off", "api.example.com"])
        assert result.exit_code == 0, result.output
        content = hosts_file.read_text(encoding="utf-8")
        assert "10.0.0.1 db.example.com\n# 10.0.0.1 api.example.com\n" in content

        result = invoke(runner, hosts_file, ["on", "old-service"])
        assert result.exit_code == 0, result.output
        assert "old-service -> 10.0.0.5 (On)" in result.output
        assert "10.0.0.5 old-service" in hosts_file.read_text(encoding="utf-8")

    def test_toggle_unknown_domain_fails(self, runner, hosts_file):
        result = invoke(runner, hosts_file, ["off", "missing.example.com"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestReadOnlyCommands:
    def test_has(self, runner, hosts_file):
        assert invoke(runner, hosts_file, ["has", "localhost"]).exit_code == 0
        assert invoke(runner, hosts_file, ["has", "old-service"]).exit_code == 0
        assert invoke(runner, hosts_file, ["has", "missing"]).exit_code == 1

    def test_ls(self, runner, hosts_file):
        result = invoke(runner, hosts_file, ["ls"])
        assert result.exit_code == 0, result.output
        for domain in ("localhost", "old-service", "api.example.com", "db.example.com"):
            assert domain in result.output

    def test_ls_by_ip(self, runner, hosts_file):
        result = invoke(runner, hosts_file, ["ls", "--ip", "10.0.0.1"])
        assert result.exit_code == 0, result.output
        assert "api.example.com" in result.output
        assert "localhost" not in result.output

    def test_missing_file_is_reported(self, runner, temp_dir):
        result = invoke(runner, temp_dir / "missing", ["ls"])
        assert result.exit_code == 1
        assert "Can't read" in result.output

    def test_rejections_are_reported(self, runner, temp_dir):
        hosts = temp_dir / "hosts"
        hosts.write_text("10.0.0.1 a\n10.0.0.2 a\n", encoding="utf-8")
        result = invoke(runner, hosts, ["has", "a"])
        assert result.exit_code == 0
        assert "Conflicting hostname entries for a" in result.output


class TestFmtAndInit:
    def test_fmt_check_and_rewrite(self, runner, hosts_file):
        result = invoke(runner, hosts_file, ["fmt", "--check"])
        assert result.exit_code == 1

        result = invoke(runner, hosts_file, ["fmt"])
        assert result.exit_code == 0, result.output
        assert "Formatted 4 entries" in result.output

        result = invoke(runner, hosts_file, ["fmt", "--check"])
        assert result.exit_code == 0, result.output

    def test_init_creates_file(self, runner, temp_dir):
        hosts = temp_dir / "hosts"
        result = invoke(runner, hosts, ["init", "--platform", "linux"])
        assert result.exit_code == 0, result.output
        assert hosts.read_text(encoding="utf-8") == DEFAULT_LINUX.lstrip("\n")

    def test_init_leaves_existing_file(self, runner, hosts_file):
        before = hosts_file.read_text(encoding="utf-8")
        result = invoke(runner, hosts_file, ["init"])
        assert result.exit_code == 0
        assert "already exists" in result.output
        assert hosts_file.read_text(encoding="utf-8") == before

    def test_init_into_missing_directory_fails_cleanly(self, runner, temp_dir):
        result = invoke(runner, temp_dir / "nope" / "hosts", ["init", "--platform", "linux"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "hostsmith error" in result.output
        assert not (temp_dir / "nope").exists()


def test_invalid_log_level_from_env_file(runner, hosts_file):
    env_file = hosts_file.parent / ".env"
    env_file.write_text("HOSTSMITH_LOG_LEVEL=chatty\n", encoding="utf-8")
    result = runner.invoke(cli, ["-f", str(hosts_file), "-e", str(env_file), "ls"])
    assert result.exit_code == 2
    assert "Invalid HOSTSMITH_LOG_LEVEL" in result.output
