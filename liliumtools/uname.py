"""Print information about the running system."""

from __future__ import annotations

import enum
import platform
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional, Union

from .archinfo import ArchInfo, ArchType, current_arch
from .errors import ErrorKind, ToolError
from .runtime import run_main

_VERSION = "0.1.0"
_NUMBERS_RE = re.compile(r"(\d+)(?:\.(\d+))?")


class PrintMode(enum.Enum):
    """One field that uname can print, in the order of ``-a``."""

    KERNEL_NAME = enum.auto()
    NODE_NAME = enum.auto()
    KERNEL_RELEASE = enum.auto()
    KERNEL_VERSION = enum.auto()
    MACHINE = enum.auto()
    PROCESSOR = enum.auto()
    HARDWARE_PLATFORM = enum.auto()
    OS = enum.auto()


_FLAGS = {
    "s": PrintMode.KERNEL_NAME,
    "n": PrintMode.NODE_NAME,
    "r": PrintMode.KERNEL_RELEASE,
    "v": PrintMode.KERNEL_VERSION,
    "m": PrintMode.MACHINE,
    "p": PrintMode.PROCESSOR,
    "i": PrintMode.HARDWARE_PLATFORM,
    "o": PrintMode.OS,
}

_MACHINE_NAMES = {
    ArchType.X86_64: "x86_64",
    ArchType.X86_IA_32: "i686",
    ArchType.AARCH64: "aarch64",
    ArchType.ARM32: "arm",
    ArchType.RISCV32: "riscv32",
    ArchType.RISCV64: "riscv64",
    ArchType.CLEVER_ISA: "Clever-ISA",
}

_NEEDS_KERNEL = {PrintMode.KERNEL_VERSION, PrintMode.KERNEL_RELEASE}
_NEEDS_OS = {PrintMode.OS, PrintMode.KERNEL_RELEASE}
_NEEDS_ARCH = {PrintMode.MACHINE, PrintMode.PROCESSOR, PrintMode.HARDWARE_PLATFORM}


class _EarlyExit(Exception):
    """Signals that an option asked for a message to be printed instead of a report."""

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text


@dataclass
class SystemInfo:
    """The system facts a report draws on; parts not gathered stay None."""

    kernel_vendor: Optional[str] = None
    kernel_major: int = 0
    kernel_minor: int = 0
    build_id: Union[int, str] = 0
    os_name: Optional[str] = None
    os_major: int = 0
    os_minor: int = 0
    computer_name: Optional[str] = None
    arch: Optional[ArchInfo] = None


def parse_options(args: Iterable[str]) -> list[PrintMode]:
    """Turn command-line options (program name excluded) into print modes.

    With no mode selected the kernel name is printed. Unknown options and
    arguments raise a ToolError of kind INVALID_INPUT.
    """
    modes: list[PrintMode] = []
    for arg in args:
        if arg == "--version":
            raise _EarlyExit(f"uname (lilium-tools) {_VERSION}")
        if arg == "--help":
            raise _EarlyExit("<Insert Help Here>")
        if arg.startswith("--"):
            raise ToolError(ErrorKind.INVALID_INPUT, f"Unknown Option {arg}")
        if arg.startswith("-"):
            for flag in arg[1:]:
                if flag == "a":
                    modes.extend(PrintMode)
                elif flag in _FLAGS:
                    modes.append(_FLAGS[flag])
                else:
                    raise ToolError(ErrorKind.INVALID_INPUT, f"Unknown Option -{flag}")
            continue
        raise ToolError(ErrorKind.INVALID_INPUT, f"Unknown Argument {arg}")
    return modes or [PrintMode.KERNEL_NAME]


def _require(value, what: str):
    if value is None:
        raise ValueError(f"missing {what} information")
    return value


def _processor_name(arch: ArchInfo) -> str:
    kind, version = arch.arch_type, arch.arch_version
    if kind is ArchType.X86_64:
        return f"x86_64v{version}" if version > 1 else "x86_64"
    if kind is ArchType.X86_IA_32:
        return f"i{version}86"
    if kind is ArchType.CLEVER_ISA:
        return f"Clever-ISA 1.{version}"
    if isinstance(kind, ArchType):
        return _MACHINE_NAMES[kind]
    return f"Unknown Arch {kind}"


def _field(mode: PrintMode, info: SystemInfo) -> str:
    if mode is PrintMode.KERNEL_NAME:
        return "Lilium"
    if mode is PrintMode.NODE_NAME:
        return _require(info.computer_name, "computer name")
    if mode is PrintMode.KERNEL_RELEASE:
        vendor = _require(info.kernel_vendor, "kernel vendor")
        os_name = _require(info.os_name, "os version")
        return (
            f"{os_name} {info.os_major}.{info.os_minor} "
            f"({vendor} {info.kernel_major}.{info.kernel_minor})"
        )
    if mode is PrintMode.KERNEL_VERSION:
        vendor = _require(info.kernel_vendor, "kernel vendor")
        return f"{vendor} {info.kernel_major}.{info.kernel_minor}-{info.build_id}"
    if mode is PrintMode.OS:
        return _require(info.os_name, "os version")
    arch = _require(info.arch, "architecture")
    if mode is PrintMode.MACHINE:
        kind = arch.arch_type
        return _MACHINE_NAMES.get(kind, "**UNKNOWN ARCH**!") if isinstance(kind, ArchType) else "**UNKNOWN ARCH**!"
    return _processor_name(arch)


def format_report(modes: Iterable[PrintMode], info: SystemInfo) -> str:
    """Render each mode's field followed by a space, in the order given."""
    return "".join(f"{_field(mode, info)} " for mode in modes)


def _version_pair(text: str) -> tuple[int, int]:
    match = _NUMBERS_RE.search(text)
    if not match:
        return 0, 0
    return int(match.group(1)), int(match.group(2) or 0)


def _os_release() -> tuple[str, str]:
    try:
        release = platform.freedesktop_os_release()
    except OSError:
        return platform.system(), platform.release()
    return release.get("NAME", platform.system()), release.get("VERSION_ID", "")


def collect_system_info(modes: Iterable[PrintMode]) -> SystemInfo:
    """Gather only the system facts the given modes need."""
    wanted = set(modes)
    info = SystemInfo()
    if wanted & _NEEDS_KERNEL:
        info.kernel_vendor = platform.system()
        info.kernel_major, info.kernel_minor = _version_pair(platform.release())
        info.build_id = platform.version()
    if wanted & _NEEDS_OS:
        name, version = _os_release()
        info.os_name = name
        info.os_major, info.os_minor = _version_pair(version)
    if PrintMode.NODE_NAME in wanted:
        info.computer_name = platform.node()
    if wanted & _NEEDS_ARCH:
        info.arch = current_arch()
    return info


def _run(options: list[str]) -> int:
    try:
        modes = parse_options(options)
    except _EarlyExit as early:
        print(early.text)
        return 0
    print(format_report(modes, collect_system_info(modes)))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Print the selected system information; returns the exit status."""
    args = sys.argv if argv is None else argv
    prg_name, *options = args
    return run_main(lambda: _run(options), program_name=prg_name, stderr=sys.stderr)