"""Invariant: public modules expose only their __all__ via star import."""

from __future__ import annotations

import importlib

import linux_errno

PUBLIC_MODULES = {
    "linux_errno.arch": (
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
    ),
    "linux_errno.error": ("ERRNO_MAX", "Error"),
    "linux_errno.errors": ("UnsupportedArchitectureError",),
    "linux_errno.ints": (
        "SUPPORTED_TYPES",
        "NonZero",
        "bit_pattern",
        "bits",
        "is_supported",
    ),
    "linux_errno.posix": ("POSIX_NAMES", "PosixError", "UNMAPPED", "from_posix"),
    "linux_errno.table": ("ErrnoSpec", "ErrnoTable"),
    "linux_errno.target": (
        "ARCHITECTURE",
        "MACHINE_ALIASES",
        "TABLE",
        "name_for",
        "resolve_architecture",
    ),
}

PACKAGE_EXPORTS = (
    "ARCHITECTURE",
    "ERRNO_MAX",
    "Architecture",
    "ErrnoSpec",
    "ErrnoTable",
    "Error",
    "NonZero",
    "TABLE",
    "UnsupportedArchitectureError",
    "name_for",
)


def _star_imported(module_name: str) -> dict[str, object]:
    namespace: dict[str, object] = {"__builtins__": __builtins__}
    exec(f"from {module_name} import *", namespace)
    namespace.pop("__builtins__", None)
    return namespace


def test_public_star_imports_match_all() -> None:
    for module_name, expected in PUBLIC_MODULES.items():
        module = importlib.import_module(module_name)
        exports = tuple(getattr(module, "__all__", ()))
        assert exports == expected, (
            f"{module_name} __all__ changed: expected {expected}, got {exports}"
        )
        assert set(_star_imported(module_name)) == set(expected), (
            f"{module_name} star import drifted from __all__"
        )


def test_package_star_import_carries_active_constants() -> None:
    exports = tuple(linux_errno.__all__)
    assert exports[: len(PACKAGE_EXPORTS)] == PACKAGE_EXPORTS
    assert exports[len(PACKAGE_EXPORTS) :] == linux_errno.TABLE.names()

    namespace = _star_imported("linux_errno")
    assert set(namespace) == set(exports)
    assert namespace["EAGAIN"] == linux_errno.TABLE.EAGAIN
