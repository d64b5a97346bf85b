"""Centralized semantic enums for linux_errno."""

from __future__ import annotations

from enum import Enum


class Architecture(str, Enum):
    """Architecture families with their own Linux errno numbering."""

    ALPHA = "alpha"
    ARM = "arm"
    M68K = "m68k"
    MIPS = "mips"
    POWERPC = "powerpc"
    PARISC = "parisc"
    RISCV32 = "riscv32"
    S390X = "s390x"
    SPARC = "sparc"
    X86 = "x86"


class OutputFormat(str, Enum):
    """Rendering modes for the command-line lookup tool."""

    TEXT = "text"
    JSON = "json"
