from unittest import mock

import pytest

from liliumtools.archinfo import ArchInfo, ArchType, arch_name, current_arch, main


@pytest.mark.parametrize(
    "arch, name",
    [
        (ArchType.X86_64, "x86_64"),
        (ArchType.ARM32, "arm"),
        (ArchType.X86_IA_32, "i686"),
        (ArchType.AARCH64, "aarch64"),
        (ArchType.CLEVER_ISA, "clever"),
        (ArchType.RISCV32, "riscv32"),
        (ArchType.RISCV64, "riscv64"),
    ],
)
def test_arch_names(arch, name):
    assert arch_name(arch) == name


def test_unknown_arch_name():
    assert arch_name("mips") == "**UNKNOWN ARCH mips**"


@pytest.mark.parametrize(
    "machine, expected",
    [
        ("AMD64", ArchType.X86_64),
        ("x86_64", ArchType.X86_64),
        ("aarch64", ArchType.AARCH64),
        ("arm64", ArchType.AARCH64),
        ("armv7l", ArchType.ARM32),
        ("riscv64", ArchType.RISCV64),
        ("i686", ArchType.X86_IA_32),
    ],
)
def test_current_arch_known(machine, expected):
    with mock.patch("platform.machine", return_value=machine):
        assert current_arch().arch_type is expected


def test_current_arch_ia32_version():
    with mock.patch("platform.machine", return_value="i586"):
        assert current_arch() == ArchInfo(ArchType.X86_IA_32, 5)


def test_current_arch_unknown_keeps_name():
    with mock.patch("platform.machine", return_value="sparc"):
        assert current_arch().arch_type == "sparc"


def test_main_prints_arch(capsys):
    with mock.patch("platform.machine", return_value="aarch64"):
        assert main(["arch"]) == 0
    assert capsys.readouterr().out == "aarch64\n"


def test_main_help(capsys):
    assert main(["arch", "--help"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Usage: arch [OPTION]"
    assert lines[1] == "Prints the host machine"


def test_main_version(capsys):
    assert main(["arch", "--version"]) == 0
    assert capsys.readouterr().out == "arch (lilium-tools) v0.1.0\n"


def test_main_unknown_option(capsys):
    assert main(["arch", "--bogus"]) == 1
    assert capsys.readouterr().out == "arch: Unknown option --bogus\n"