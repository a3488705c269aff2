import pytest

from termquest.services.apt_simulator import AptSimulator
from termquest.services.package_hunt import SECRET_MESSAGE


@pytest.fixture
def hunt(terminal):
    terminal.machine.navigate("package_hunt")
    return terminal


def test_main_commands_are_not_available(hunt) -> None:
    assert hunt.submit("puzzle").output.startswith("Command not found: puzzle.")


def test_ubdecode_needs_the_package(hunt) -> None:
    result = hunt.submit("ubdecode clue.enc")

    assert result.output.startswith("ubdecode: command not found")
    assert "ubdecode <file>" not in hunt.submit("help").output


def test_install_then_decode(hunt) -> None:
    install = hunt.submit("apt install ubdecode")
    assert "✓ ubdecode successfully installed!" in install.output

    assert "ubdecode <file>" in hunt.submit("help").output
    assert SECRET_MESSAGE in hunt.submit("ubdecode clue.enc").output
    assert "cannot find file" in hunt.submit("ubdecode clue.txt").output


def test_remove_uninstalls_again(hunt) -> None:
    hunt.submit("apt install ubdecode")
    hunt.submit("apt remove ubdecode")

    assert hunt.submit("ubdecode clue.enc").output.startswith("ubdecode: command not found")


def test_apt_argument_errors(hunt) -> None:
    assert hunt.submit("apt").output.startswith("apt: missing command")
    assert hunt.submit("apt install").output.startswith("apt install: missing package name")
    assert hunt.submit("apt frob").output.startswith("apt: unknown command 'frob'")
    assert hunt.submit("dpkg -x").output.startswith("dpkg: unknown option '-x'")


def test_simulator_queries() -> None:
    apt = AptSimulator()

    assert "ubdecode/focal" in apt.search("decoder")
    assert apt.search("zzz") == "No packages found matching 'zzz'"
    assert "Status: not found" in apt.show("zzz")
    assert "Package: git" in apt.show("git")
    assert "already the newest version" in apt.install("curl")
    assert "not found" in apt.install("zzz")
    assert "ii  curl" in apt.dpkg_list()
    assert "gimp" not in apt.list_installed()


def test_simulators_do_not_share_state() -> None:
    first = AptSimulator()
    second = AptSimulator()

    first.install("gimp")

    assert first.is_installed("gimp")
    assert not second.is_installed("gimp")
