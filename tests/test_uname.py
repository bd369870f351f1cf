import pytest

from liliumtools.archinfo import ArchInfo, ArchType
from liliumtools.errors import ErrorKind, ToolError
from liliumtools.uname import (
    PrintMode,
    SystemInfo,
    collect_system_info,
    format_report,
    main,
    parse_options,
)


def test_parse_options_default_is_kernel_name():
    assert parse_options([]) == [PrintMode.KERNEL_NAME]


def test_parse_options_flags_in_order():
    assert parse_options(["-sn", "-m"]) == [
        PrintMode.KERNEL_NAME,
        PrintMode.NODE_NAME,
        PrintMode.MACHINE,
    ]


def test_parse_options_all_lists_every_mode():
    assert parse_options(["-a"]) == list(PrintMode)
    assert len(parse_options(["-aa"])) == 2 * len(PrintMode)


def test_lone_dash_falls_back_to_default():
    assert parse_options(["-"]) == [PrintMode.KERNEL_NAME]


@pytest.mark.parametrize(
    "arg, message",
    [
        ("--bogus", "Unknown Option --bogus"),
        ("--", "Unknown Option --"),
        ("-sz", "Unknown Option -z"),
        ("extra", "Unknown Argument extra"),
    ],
)
def test_parse_options_errors(arg, message):
    with pytest.raises(ToolError) as info:
        parse_options([arg])
    assert info.value.kind is ErrorKind.INVALID_INPUT
    assert str(info.value) == message


def test_format_kernel_name():
    assert format_report([PrintMode.KERNEL_NAME], SystemInfo()) == "Lilium "


def test_format_release_and_version():
    info = SystemInfo(
        kernel_vendor="K", kernel_major=1, kernel_minor=2, build_id=7,
        os_name="O", os_major=3, os_minor=4,
    )
    assert format_report([PrintMode.KERNEL_RELEASE], info) == "O 3.4 (K 1.2) "
    assert format_report([PrintMode.KERNEL_VERSION], info) == "K 1.2-7 "
    assert format_report([PrintMode.OS], info) == "O "


def test_format_node_name_uses_given_name():
    info = SystemInfo(computer_name="box")
    assert format_report([PrintMode.NODE_NAME, PrintMode.KERNEL_NAME], info) == "box Lilium "


@pytest.mark.parametrize(
    "arch, machine, processor",
    [
        (ArchInfo(ArchType.X86_64, 3), "x86_64", "x86_64v3"),
        (ArchInfo(ArchType.X86_64, 1), "x86_64", "x86_64"),
        (ArchInfo(ArchType.X86_IA_32, 6), "i686", "i686"),
        (ArchInfo(ArchType.CLEVER_ISA, 2), "Clever-ISA", "Clever-ISA 1.2"),
        (ArchInfo(ArchType.RISCV64), "riscv64", "riscv64"),
        (ArchInfo("weird"), "**UNKNOWN ARCH**!", "Unknown Arch weird"),
    ],
)
def test_format_arch_fields(arch, machine, processor):
    info = SystemInfo(arch=arch)
    assert format_report([PrintMode.MACHINE], info) == f"{machine} "
    assert format_report([PrintMode.PROCESSOR], info) == f"{processor} "
    assert format_report([PrintMode.HARDWARE_PLATFORM], info) == f"{processor} "


def test_format_missing_info_raises():
    with pytest.raises(ValueError):
        format_report([PrintMode.MACHINE], SystemInfo())


def test_collect_only_requested_parts():
    info = collect_system_info([PrintMode.KERNEL_NAME])
    assert info.kernel_vendor is None
    assert info.os_name is None
    assert info.computer_name is None
    assert info.arch is None


def test_collect_all_parts_allows_full_report():
    modes = list(PrintMode)
    info = collect_system_info(modes)
    assert info.arch is not None and info.kernel_vendor is not None
    assert format_report(modes, info).startswith("Lilium ")


def test_main_default(capsys):
    assert main(["uname"]) == 0
    assert capsys.readouterr().out == "Lilium \n"


def test_main_version(capsys):
    assert main(["uname", "-s", "--version"]) == 0
    assert capsys.readouterr().out == "uname (lilium-tools) 0.1.0\n"


def test_main_help(capsys):
    assert main(["uname", "--help"]) == 0
    assert capsys.readouterr().out == "<Insert Help Here>\n"


def test_main_unknown_option_reports_error(capsys):
    assert main(["uname", "-q", "--version"]) == -1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("uname: ")
    assert "Unknown Option -q" in captured.err