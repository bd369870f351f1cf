"""Report the host machine architecture."""

from __future__ import annotations

import enum
import platform
import re
import sys
from dataclasses import dataclass
from typing import Optional, Union

_VERSION = "0.1.0"
_IA32_RE = re.compile(r"i([3-6])86")


class ArchType(enum.Enum):
    """Processor architectures the tools know by name."""

    X86_64 = enum.auto()
    ARM32 = enum.auto()
    X86_IA_32 = enum.auto()
    AARCH64 = enum.auto()
    CLEVER_ISA = enum.auto()
    RISCV32 = enum.auto()
    RISCV64 = enum.auto()


_ARCH_NAMES = {
    ArchType.X86_64: "x86_64",
    ArchType.ARM32: "arm",
    ArchType.X86_IA_32: "i686",
    ArchType.AARCH64: "aarch64",
    ArchType.CLEVER_ISA: "clever",
    ArchType.RISCV32: "riscv32",
    ArchType.RISCV64: "riscv64",
}


@dataclass(frozen=True)
class ArchInfo:
    """The architecture type (or raw machine name if unknown) and its version."""

    arch_type: Union[ArchType, str]
    arch_version: int = 0


def current_arch() -> ArchInfo:
    """Describe the architecture of the running machine."""
    machine = platform.machine().lower()
    if machine in ("x86_64", "amd64", "x64"):
        return ArchInfo(ArchType.X86_64, 1)
    ia32 = _IA32_RE.fullmatch(machine)
    if ia32:
        return ArchInfo(ArchType.X86_IA_32, int(ia32.group(1)))
    if machine in ("x86", "i86pc"):
        return ArchInfo(ArchType.X86_IA_32, 6)
    if machine in ("aarch64", "arm64"):
        return ArchInfo(ArchType.AARCH64)
    if machine.startswith("arm"):
        return ArchInfo(ArchType.ARM32)
    if machine == "riscv64":
        return ArchInfo(ArchType.RISCV64)
    if machine == "riscv32":
        return ArchInfo(ArchType.RISCV32)
    return ArchInfo(machine)


def arch_name(arch_type: Union[ArchType, str]) -> str:
    """Return the short name printed for an architecture."""
    if isinstance(arch_type, ArchType):
        return _ARCH_NAMES[arch_type]
    return f"**UNKNOWN ARCH {arch_type}**"


def main(argv: Optional[list[str]] = None) -> int:
    """Print the host machine architecture; handles --help and --version."""
    args = sys.argv if argv is None else argv
    prg_name, *options = args
    for arg in options:
        if arg == "--help":
            print(f"Usage: {prg_name} [OPTION]")
            print("Prints the host machine")
            print("Options:")
            print("\t--help: Prints this message and exits")
            print("\t--version: Prints version information and exits")
            return 0
        if arg == "--version":
            print(f"arch (lilium-tools) v{_VERSION}")
            return 0
        print(f"{prg_name}: Unknown option {arg}")
        return 1
    print(arch_name(current_arch().arch_type))
    return 0