"""Tests for the command line entry point."""
import pytest

from netconfig import __version__
from netconfig.cli import main
from netconfig.errors import ServiceError
from netconfig.service import objects


@pytest.fixture(autouse=True)
def no_settings_file(monkeypatch, tmp_path):
    monkeypatch.setenv("NETCONFIG_CONFIG", str(tmp_path / "absent.yaml"))
    monkeypatch.delenv("NETCONFIG_DEFAULT_IFACE", raising=False)
    monkeypatch.delenv("NETCONFIG_LOG_FILE", raising=False)


class TestHelp:
    """Tests for banner and help output."""

    def test_no_arguments(self, capsys):
        assert main(["netconfig"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("OpenBMC network configuration.\n")
        assert f"Version {__version__}." in out
        assert "Usage: netconfig COMMAND [OPTION...]" in out
        assert "Command format: vlan {add|del} ID [IP/PREFIX GATEWAY]" in out

    @pytest.mark.parametrize("token", ["help", "--help", "-h"])
    def test_help_tokens(self, token, capsys):
        assert main(["/usr/bin/netconfig", token]) == 0
        assert "Usage: netconfig COMMAND" in capsys.readouterr().out

    def test_help_for_command(self, capsys):
        assert main(["netconfig", "help", "dhcpcfg"]) == 0
        out = capsys.readouterr().out
        assert "Usage:" not in out
        assert out == (
            "Enable or disable DHCP features\n"
            "dhcpcfg {enable|disable} {dns|ntp}\n"
        )

    def test_help_for_unknown_command(self, capsys):
        assert main(["netconfig", "--help", "bogus"]) == 1
        err = capsys.readouterr().err
        assert "bogus is not a valid command, try --help option" in err

    def test_help_with_extra_arguments(self, capsys):
        assert main(["netconfig", "help", "ip", "add"]) == 1
        assert "Unexpected arguments: add" in capsys.readouterr().err

    def test_command_help_flag(self, service, capsys):
        assert main(["netconfig", "syslog", "-h"], service=service) == 0
        assert "syslog {enable ADDR[:PORT]|disable}" in capsys.readouterr().out


class TestExitStatus:
    """Tests for exit codes and error reporting."""

    def test_success(self, service, capsys):
        assert main(["netconfig", "hostname", "bmc-02"], service=service) == 0
        assert "Request has been sent" in capsys.readouterr().out
        assert service.managed[objects.OBJECT_CONFIG][objects.SYSCFG_INTERFACE][
            objects.SYSCFG_HOSTNAME
        ] == "bmc-02"

    def test_invalid_command(self, service, capsys):
        assert main(["netconfig", "route", "add"], service=service) == 1
        assert capsys.readouterr().err.strip() == "Invalid command: route"

    def test_invalid_argument(self, service, capsys):
        assert main(["netconfig", "gateway", "300.1.1.1"], service=service) == 1
        captured = capsys.readouterr()
        assert "Invalid IP address: 300.1.1.1" in captured.err
        assert captured.out == ""
        assert service.writes == []

    def test_service_error(self, service, capsys, monkeypatch):
        async def reject(*args, **kwargs):
            raise ServiceError("Permission denied", "org.freedesktop.DBus.Error.AccessDenied")

        monkeypatch.setattr(service, "set_property", reject)
        assert main(["netconfig", "dhcpcfg", "enable", "dns"], service=service) == 1
        assert (
            "Permission denied (org.freedesktop.DBus.Error.AccessDenied)"
            in capsys.readouterr().err
        )

    def test_settings_error(self, service, capsys, monkeypatch):
        monkeypatch.setenv("NETCONFIG_TIMEOUT", "soon")
        assert main(["netconfig", "show"], service=service) == 1
        assert "Invalid numeric setting" in capsys.readouterr().err

    def test_default_interface_from_env(self, service, monkeypatch):
        monkeypatch.setenv("NETCONFIG_DEFAULT_IFACE", "eth1")
        assert main(["netconfig", "dhcp", "enable"], service=service) == 0
        assert service.writes[0][1] == objects.eth_object("eth1")

    def test_interrupted(self, monkeypatch):
        def interrupt(*args, **kwargs):
            raise KeyboardInterrupt

        monkeypatch.setattr("netconfig.cli.execute", interrupt)
        assert main(["netconfig", "show"]) == 130

    def test_unreadable_settings(self, service, capsys, monkeypatch, tmp_path):
        monkeypatch.setenv("NETCONFIG_CONFIG", str(tmp_path))
        assert main(["netconfig", "gateway", "10.0.0.1"], service=service) == 1
        err = capsys.readouterr().err
        assert "Cannot read settings file" in err
        assert len(err.strip().splitlines()) == 1
        assert service.writes == []

    def test_unexpected_failure(self, service, capsys, monkeypatch):
        async def broken(*args, **kwargs):
            raise RuntimeError("bus went away")

        monkeypatch.setattr(service, "set_property", broken)
        assert main(["netconfig", "hostname", "bmc"], service=service) == 1
        err = capsys.readouterr().err
        assert err.strip() == "Error: bus went away"
