from __future__ import annotations

import pytest

from linux_errno import arch
from linux_errno.arch import TABLES, table_for
from linux_errno.enums import Architecture
from linux_errno.error import Error


def test_eagain_differs_between_x86_and_alpha() -> None:
    assert arch.x86.EAGAIN == 11
    assert arch.alpha.EAGAIN == 35
    assert arch.x86.EAGAIN != arch.alpha.EAGAIN
    assert arch.alpha.name_for(Error.new_unchecked(11)) == "EDEADLK"
    assert arch.x86.name_for(Error.new_unchecked(35)) == "EDEADLK"


@pytest.mark.parametrize(
    ("table", "name", "value"),
    [
        (arch.x86, "EDEADLOCK", 35),
        (arch.powerpc, "EDEADLOCK", 58),
        (arch.sparc, "EDEADLOCK", 108),
        (arch.mips, "EDEADLOCK", 56),
        (arch.mips, "EDQUOT", 1133),
        (arch.parisc, "ECANCELLED", 253),
        (arch.parisc, "ECANCELED", 253),
        (arch.parisc, "EREFUSED", 239),
        (arch.alpha, "ENOSYS", 78),
        (arch.x86, "ENOSYS", 38),
    ],
)
def test_architecture_specific_values(table, name: str, value: int) -> None:
    assert table[name] == value


def test_aliases_resolve_to_their_primary_name() -> None:
    for table in (arch.x86, arch.alpha, arch.mips, arch.parisc, arch.sparc):
        assert table.EWOULDBLOCK == table.EAGAIN
        assert table.name_for(table.EWOULDBLOCK) == "EAGAIN"
    assert arch.x86.name_for(arch.x86.EDEADLOCK) == "EDEADLK"
    assert arch.parisc.name_for(arch.parisc.ECANCELED) == "ECANCELLED"
    assert arch.parisc.name_for(arch.parisc.EREFUSED) == "ECONNREFUSED"


def test_powerpc_deadlock_is_its_own_number() -> None:
    assert arch.powerpc.EDEADLOCK != arch.powerpc.EDEADLK
    assert arch.powerpc.name_for(arch.powerpc.EDEADLOCK) == "EDEADLOCK"
    assert arch.powerpc.spec("EDEADLOCK").alias_of is None


def test_mips_reserved_number_is_kept() -> None:
    assert arch.mips.EINIT == 141
    assert arch.mips.name_for(Error.new_unchecked(141)) == "EINIT"


def test_sparc_only_names() -> None:
    assert arch.sparc.EPROCLIM == 67
    assert "EPROCLIM" not in arch.x86


def test_generic_gaps_have_no_name() -> None:
    for gap in (41, 58):
        assert arch.x86.name_for(Error.new_unchecked(gap)) is None


def test_families_sharing_the_generic_table() -> None:
    for family in (arch.arm, arch.m68k, arch.riscv32, arch.s390x):
        assert family is arch.x86
    assert arch.GENERIC is arch.x86
    assert arch.BASE.EAGAIN == 11
    assert "EDEADLK" not in arch.BASE


def test_table_for_accepts_enum_and_value() -> None:
    assert table_for(Architecture.ALPHA) is arch.alpha
    assert table_for("sparc") is arch.sparc
    with pytest.raises(ValueError):
        table_for("vax")
    assert set(TABLES) == set(Architecture)
