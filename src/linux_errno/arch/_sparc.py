"""SPARC error numbers, inherited from SunOS.

Source: https://git.kernel.org/pub/scm/linux/kernel/git/torvalds/linux.git/tree/arch/sparc/include/uapi/asm/errno.h?h=v5.19
"""

from __future__ import annotations

from linux_errno.arch._base import BASE
from linux_errno.table import ErrnoSpec

SPARC = BASE.derive(
    "sparc",
    (
        ("EINPROGRESS", 36, "Operation now in progress"),
        ("EALREADY", 37, "Operation already in progress"),
        ("ENOTSOCK", 38, "Socket operation on non-socket"),
        ("EDESTADDRREQ", 39, "Destination address required"),
        ("EMSGSIZE", 40, "Message too long"),
        ("EPROTOTYPE", 41, "Protocol wrong type for socket"),
        ("ENOPROTOOPT", 42, "Protocol not available"),
        ("EPROTONOSUPPORT", 43, "Protocol not supported"),
        ("ESOCKTNOSUPPORT", 44, "Socket type not supported"),
        ("EOPNOTSUPP", 45, "Op not supported on transport endpoint"),
        ("EPFNOSUPPORT", 46, "Protocol family not supported"),
        ("EAFNOSUPPORT", 47, "Address family not supported by protocol"),
        ("EADDRINUSE", 48, "Address already in use"),
        ("EADDRNOTAVAIL", 49, "Cannot assign requested address"),
        ("ENETDOWN", 50, "Network is down"),
        ("ENETUNREACH", 51, "Network is unreachable"),
        ("ENETRESET", 52, "Net dropped connection because of reset"),
        ("ECONNABORTED", 53, "Software caused connection abort"),
        ("ECONNRESET", 54, "Connection reset by peer"),
        ("ENOBUFS", 55, "No buffer space available"),
        ("EISCONN", 56, "Transport endpoint is already connected"),
        ("ENOTCONN", 57, "Transport endpoint is not connected"),
        ("ESHUTDOWN", 58, "No send after transport endpoint shutdown"),
        ("ETOOMANYREFS", 59, "Too many references: cannot splice"),
        ("ETIMEDOUT", 60, "Connection timed out"),
        ("ECONNREFUSED", 61, "Connection refused"),
        ("ELOOP", 62, "Too many symbolic links encountered"),
        ("ENAMETOOLONG", 63, "File name too long"),
        ("EHOSTDOWN", 64, "Host is down"),
        ("EHOSTUNREACH", 65, "No route to host"),
        ("ENOTEMPTY", 66, "Directory not empty"),
        ("EPROCLIM", 67, "SUNOS: Too many processes"),
        ("EUSERS", 68, "Too many users"),
        ("EDQUOT", 69, "Quota exceeded"),
        ("ESTALE", 70, "Stale file handle"),
        ("EREMOTE", 71, "Object is remote"),
        ("ENOSTR", 72, "Device not a stream"),
        ("ETIME", 73, "Timer expired"),
        ("ENOSR", 74, "Out of streams resources"),
        ("ENOMSG", 75, "No message of desired type"),
        ("EBADMSG", 76, "Not a data message"),
        ("EIDRM", 77, "Identifier removed"),
        ("EDEADLK", 78, "Resource deadlock would occur"),
        ("ENOLCK", 79, "No record locks available"),
        ("ENONET", 80, "Machine is not on the network"),
        ("ERREMOTE", 81, "SunOS: Too many lvls of remote in path"),
        ("ENOLINK", 82, "Link has been severed"),
        ("EADV", 83, "Advertise error"),
        ("ESRMNT", 84, "Srmount error"),
        ("ECOMM", 85, "Communication error on send"),
        ("EPROTO", 86, "Protocol error"),
        ("EMULTIHOP", 87, "Multihop attempted"),
        ("EDOTDOT", 88, "RFS specific error"),
        ("EREMCHG", 89, "Remote address changed"),
        ("ENOSYS", 90, "Function not implemented"),
        ("ESTRPIPE", 91, "Streams pipe error"),
        ("EOVERFLOW", 92, "Value too large for defined data type"),
        ("EBADFD", 93, "File descriptor in bad state"),
        ("ECHRNG", 94, "Channel number out of range"),
        ("EL2NSYNC", 95, "Level 2 not synchronized"),
        ("EL3HLT", 96, "Level 3 halted"),
        ("EL3RST", 97, "Level 3 reset"),
        ("ELNRNG", 98, "Link number out of range"),
        ("EUNATCH", 99, "Protocol driver not attached"),
        ("ENOCSI", 100, "No CSI structure available"),
        ("EL2HLT", 101, "Level 2 halted"),
        ("EBADE", 102, "Invalid exchange"),
        ("EBADR", 103, "Invalid request descriptor"),
        ("EXFULL", 104, "Exchange full"),
        ("ENOANO", 105, "No anode"),
        ("EBADRQC", 106, "Invalid request code"),
        ("EBADSLT", 107, "Invalid slot"),
        ("EDEADLOCK", 108, "File locking deadlock error"),
        ("EBFONT", 109, "Bad font file format"),
        ("ELIBEXEC", 110, "Cannot exec a shared library directly"),
        ("ENODATA", 111, "No data available"),
        ("ELIBBAD", 112, "Accessing a corrupted shared library"),
        ("ENOPKG", 113, "Package not installed"),
        ("ELIBACC", 114, "Can not access a needed shared library"),
        ("ENOTUNIQ", 115, "Name not unique on network"),
        ("ERESTART", 116, "Interrupted syscall should be restarted"),
        ("EUCLEAN", 117, "Structure needs cleaning"),
        ("ENOTNAM", 118, "Not a XENIX named type file"),
        ("ENAVAIL", 119, "No XENIX semaphores available"),
        ("EISNAM", 120, "Is a named type file"),
        ("EREMOTEIO", 121, "Remote I/O error"),
        ("EILSEQ", 122, "Illegal byte sequence"),
        ("ELIBMAX", 123, "Attempt to link in too many shared libs"),
        ("ELIBSCN", 124, ".lib section in a.out corrupted"),
        ("ENOMEDIUM", 125, "No medium found"),
        ("EMEDIUMTYPE", 126, "Wrong medium type"),
        ("ECANCELED", 127, "Operation Cancelled"),
        ("ENOKEY", 128, "Required key not available"),
        ("EKEYEXPIRED", 129, "Key has expired"),
        ("EKEYREVOKED", 130, "Key has been revoked"),
        ("EKEYREJECTED", 131, "Key was rejected by service"),
        ("EOWNERDEAD", 132, "Owner died"),
        ("ENOTRECOVERABLE", 133, "State not recoverable"),
        ("ERFKILL", 134, "Operation not possible due to RF-kill"),
        ("EHWPOISON", 135, "Memory page has hardware error"),
        ErrnoSpec.alias("EWOULDBLOCK", "EAGAIN", "Operation would block"),
    ),
)
