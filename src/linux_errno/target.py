"""Selection of the errno table for the architecture this process targets.

The active architecture is resolved once, on import, from
``LINUX_ERRNO_TARGET_ARCH`` or ``platform.machine()``. An unrecognised
machine raises :class:`UnsupportedArchitectureError`; there is no fallback
table.
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from linux_errno.arch import table_for
from linux_errno.config.env import target_machine
from linux_errno.enums import Architecture
from linux_errno.error import Error
from linux_errno.errors import UnsupportedArchitectureError
from linux_errno.table import ErrnoTable

logger = logging.getLogger(__name__)

MACHINE_ALIASES: MappingProxyType[str, Architecture] = MappingProxyType(
    {
        "alpha": Architecture.ALPHA,
        "arm": Architecture.ARM,
        "armv5tel": Architecture.ARM,
        "armv6l": Architecture.ARM,
        "armv7l": Architecture.ARM,
        "armv8l": Architecture.ARM,
        "aarch64": Architecture.ARM,
        "aarch64_be": Architecture.ARM,
        "arm64": Architecture.ARM,
        "m68k": Architecture.M68K,
        "mips": Architecture.MIPS,
        "mipsel": Architecture.MIPS,
        "mips64": Architecture.MIPS,
        "mips64el": Architecture.MIPS,
        "powerpc": Architecture.POWERPC,
        "powerpc64": Architecture.POWERPC,
        "powerpc64le": Architecture.POWERPC,
        "ppc": Architecture.POWERPC,
        "ppc64": Architecture.POWERPC,
        "ppc64le": Architecture.POWERPC,
        "parisc": Architecture.PARISC,
        "parisc64": Architecture.PARISC,
        "riscv32": Architecture.RISCV32,
        "riscv64": Architecture.RISCV32,
        "s390x": Architecture.S390X,
        "sparc": Architecture.SPARC,
        "sparc64": Architecture.SPARC,
        "x86": Architecture.X86,
        "x86_64": Architecture.X86,
        "amd64": Architecture.X86,
        "i386": Architecture.X86,
        "i486": Architecture.X86,
        "i586": Architecture.X86,
        "i686": Architecture.X86,
    }
)
"""Machine identifiers (``uname -m`` and compiler target names) per family."""


def resolve_architecture(machine: str) -> Architecture:
    """Map a machine identifier to its architecture family, or raise."""
    arch = MACHINE_ALIASES.get(machine.strip().lower())
    if arch is None:
        raise UnsupportedArchitectureError(machine)
    return arch


def _select() -> tuple[Architecture, ErrnoTable]:
    machine = target_machine()
    arch = resolve_architecture(machine)
    logger.debug("Resolved errno target %s from machine %r", arch.value, machine)
    return arch, table_for(arch)


ARCHITECTURE, TABLE = _select()


def name_for(err: Error) -> str | None:
    """Return the symbolic name of ``err`` for the active target, or ``None``."""
    return TABLE.name_for(err)


__all__ = [
    "ARCHITECTURE",
    "MACHINE_ALIASES",
    "TABLE",
    "name_for",
    "resolve_architecture",
]
