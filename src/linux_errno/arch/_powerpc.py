"""PowerPC error numbers: the generic table plus a separate EDEADLOCK.

Source: https://git.kernel.org/pub/scm/linux/kernel/git/torvalds/linux.git/tree/arch/powerpc/include/uapi/asm/errno.h?h=v5.19
"""

from __future__ import annotations

from linux_errno.arch._generic import GENERIC

POWERPC = GENERIC.derive(
    "powerpc",
    (("EDEADLOCK", 58, "File locking deadlock error"),),
)
