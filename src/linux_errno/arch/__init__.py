"""Linux error numbers for specific target architectures.

Each attribute is the :class:`~linux_errno.table.ErrnoTable` for one
architecture family, for example ``arch.alpha.EAGAIN`` or
``arch.x86.name_for(err)``.
"""

from __future__ import annotations

from types import MappingProxyType

from linux_errno.arch._alpha import ALPHA
from linux_errno.arch._base import BASE
from linux_errno.arch._generic import GENERIC
from linux_errno.arch._mips import MIPS
from linux_errno.arch._parisc import PARISC
from linux_errno.arch._powerpc import POWERPC
from linux_errno.arch._sparc import SPARC
from linux_errno.enums import Architecture
from linux_errno.table import ErrnoTable

alpha = ALPHA
arm = GENERIC  # arm and aarch64
m68k = GENERIC
mips = MIPS  # mips and mips64
powerpc = POWERPC  # powerpc and powerpc64
parisc = PARISC
riscv32 = GENERIC  # riscv32 and riscv64
s390x = GENERIC  # s390 uses asm-generic, not the sparc numbering
sparc = SPARC  # sparc and sparc64
x86 = GENERIC  # x86 and x86_64

TABLES: MappingProxyType[Architecture, ErrnoTable] = MappingProxyType(
    {
        Architecture.ALPHA: alpha,
        Architecture.ARM: arm,
        Architecture.M68K: m68k,
        Architecture.MIPS: mips,
        Architecture.POWERPC: powerpc,
        Architecture.PARISC: parisc,
        Architecture.RISCV32: riscv32,
        Architecture.S390X: s390x,
        Architecture.SPARC: sparc,
        Architecture.X86: x86,
    }
)


def table_for(arch: Architecture | str) -> ErrnoTable:
    """Return the errno table for an architecture family."""
    return TABLES[Architecture(arch)]


__all__ = [
    "BASE",
    "GENERIC",
    "TABLES",
    "alpha",
    "arm",
    "m68k",
    "mips",
    "parisc",
    "powerpc",
    "riscv32",
    "s390x",
    "sparc",
    "table_for",
    "x86",
]
