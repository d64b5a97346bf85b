"""Bridge between :class:`Error` and portable POSIX error codes.

Importing this module enables ``Error == PosixError`` in both directions.
A POSIX code equals an ``Error`` only when :func:`from_posix` maps it to
that exact value in the active target table.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from linux_errno.error import Error
from linux_errno.table import ErrnoTable


class PosixError(Enum):
    """Architecture-independent POSIX error names."""

    E2BIG = "E2BIG"
    EACCES = "EACCES"
    EADDRINUSE = "EADDRINUSE"
    EADDRNOTAVAIL = "EADDRNOTAVAIL"
    EAFNOSUPPORT = "EAFNOSUPPORT"
    EAGAIN = "EAGAIN"
    EALREADY = "EALREADY"
    EBADF = "EBADF"
    EBADMSG = "EBADMSG"
    EBUSY = "EBUSY"
    ECANCELED = "ECANCELED"
    ECHILD = "ECHILD"
    ECONNABORTED = "ECONNABORTED"
    ECONNREFUSED = "ECONNREFUSED"
    ECONNRESET = "ECONNRESET"
    EDEADLK = "EDEADLK"
    EDESTADDRREQ = "EDESTADDRREQ"
    EDOM = "EDOM"
    EDQUOT = "EDQUOT"
    EEXIST = "EEXIST"
    EFAULT = "EFAULT"
    EFBIG = "EFBIG"
    EHOSTUNREACH = "EHOSTUNREACH"
    EIDRM = "EIDRM"
    EILSEQ = "EILSEQ"
    EINPROGRESS = "EINPROGRESS"
    EINTR = "EINTR"
    EINVAL = "EINVAL"
    EIO = "EIO"
    EISCONN = "EISCONN"
    EISDIR = "EISDIR"
    ELOOP = "ELOOP"
    EMFILE = "EMFILE"
    EMLINK = "EMLINK"
    EMSGSIZE = "EMSGSIZE"
    EMULTIHOP = "EMULTIHOP"
    ENAMETOOLONG = "ENAMETOOLONG"
    ENETDOWN = "ENETDOWN"
    ENETRESET = "ENETRESET"
    ENETUNREACH = "ENETUNREACH"
    ENFILE = "ENFILE"
    ENOBUFS = "ENOBUFS"
    ENODATA = "ENODATA"
    ENODEV = "ENODEV"
    ENOENT = "ENOENT"
    ENOEXEC = "ENOEXEC"
    ENOLCK = "ENOLCK"
    ENOLINK = "ENOLINK"
    ENOMEM = "ENOMEM"
    ENOMSG = "ENOMSG"
    ENOPROTOOPT = "ENOPROTOOPT"
    ENOSPC = "ENOSPC"
    ENOSR = "ENOSR"
    ENOSTR = "ENOSTR"
    ENOSYS = "ENOSYS"
    ENOTCONN = "ENOTCONN"
    ENOTDIR = "ENOTDIR"
    ENOTEMPTY = "ENOTEMPTY"
    ENOTRECOVERABLE = "ENOTRECOVERABLE"
    ENOTSOCK = "ENOTSOCK"
    ENOTSUP = "ENOTSUP"
    ENOTTY = "ENOTTY"
    ENXIO = "ENXIO"
    EOPNOTSUPP = "EOPNOTSUPP"
    EOVERFLOW = "EOVERFLOW"
    EOWNERDEAD = "EOWNERDEAD"
    EPERM = "EPERM"
    EPIPE = "EPIPE"
    EPROTO = "EPROTO"
    EPROTONOSUPPORT = "EPROTONOSUPPORT"
    EPROTOTYPE = "EPROTOTYPE"
    ERANGE = "ERANGE"
    EROFS = "EROFS"
    ESPIPE = "ESPIPE"
    ESRCH = "ESRCH"
    ESTALE = "ESTALE"
    ETIME = "ETIME"
    ETIMEDOUT = "ETIMEDOUT"
    ETXTBSY = "ETXTBSY"
    EWOULDBLOCK = "EWOULDBLOCK"
    EXDEV = "EXDEV"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Error):
            mapped = from_posix(self)
            return mapped is not None and mapped == other
        if isinstance(other, PosixError):
            return self is other
        return NotImplemented

    def __hash__(self) -> int:
        # Must agree with hash(Error) for every code that compares equal to one.
        mapped = from_posix(self)
        if mapped is None:
            return hash(self._name_)
        return hash(mapped)


POSIX_NAMES: MappingProxyType[str, str] = MappingProxyType(
    {code.name: code.value for code in PosixError if code.name != "ENOTSUP"}
)
"""Explicit mapping from POSIX name to the Linux constant name it matches.

Linux defines ENOTSUP as EOPNOTSUPP, so it is left out rather than reported
under a second name.
"""


def from_posix(code: PosixError, table: ErrnoTable | None = None) -> Error | None:
    """Return the Linux error number for ``code``, or ``None`` if it has none."""
    name = POSIX_NAMES.get(code.name)
    if name is None:
        return None
    if table is None:
        from linux_errno import target

        table = target.TABLE
    return table.get(name)


UNMAPPED: frozenset[PosixError] = frozenset(
    code for code in PosixError if code.name not in POSIX_NAMES
)
"""POSIX codes with no Linux counterpart of their own."""


__all__ = ["POSIX_NAMES", "PosixError", "UNMAPPED", "from_posix"]
