"""Alpha error numbers. EAGAIN and EDEADLK trade places with the generic values.

Source: https://git.kernel.org/pub/scm/linux/kernel/git/torvalds/linux.git/tree/arch/alpha/include/uapi/asm/errno.h?h=v5.19
"""

from __future__ import annotations

from linux_errno.arch._base import BASE
from linux_errno.table import ErrnoSpec

ALPHA = BASE.derive(
    "alpha",
    (
        ("EDEADLK", 11, "Resource deadlock would occur"),
        ("EAGAIN", 35, "Try again"),
        ("EINPROGRESS", 36, "Operation now in progress"),
        ("EALREADY", 37, "Operation already in progress"),
        ("ENOTSOCK", 38, "Socket operation on non-socket"),
        ("EDESTADDRREQ", 39, "Destination address required"),
        ("EMSGSIZE", 40, "Message too long"),
        ("EPROTOTYPE", 41, "Protocol wrong type for socket"),
        ("ENOPROTOOPT", 42, "Protocol not available"),
        ("EPROTONOSUPPORT", 43, "Protocol not supported"),
        ("ESOCKTNOSUPPORT", 44, "Socket type not supported"),
        ("EOPNOTSUPP", 45, "Operation not supported on transport endpoint"),
        ("EPFNOSUPPORT", 46, "Protocol family not supported"),
        ("EAFNOSUPPORT", 47, "Address family not supported by protocol"),
        ("EADDRINUSE", 48, "Address already in use"),
        ("EADDRNOTAVAIL", 49, "Cannot assign requested address"),
        ("ENETDOWN", 50, "Network is down"),
        ("ENETUNREACH", 51, "Network is unreachable"),
        ("ENETRESET", 52, "Network dropped connection because of reset"),
        ("ECONNABORTED", 53, "Software caused connection abort"),
        ("ECONNRESET", 54, "Connection reset by peer"),
        ("ENOBUFS", 55, "No buffer space available"),
        ("EISCONN", 56, "Transport endpoint is already connected"),
        ("ENOTCONN", 57, "Transport endpoint is not connected"),
        ("ESHUTDOWN", 58, "Cannot send after transport endpoint shutdown"),
        ("ETOOMANYREFS", 59, "Too many references: cannot splice"),
        ("ETIMEDOUT", 60, "Connection timed out"),
        ("ECONNREFUSED", 61, "Connection refused"),
        ("ELOOP", 62, "Too many symbolic links encountered"),
        ("ENAMETOOLONG", 63, "File name too long"),
        ("EHOSTDOWN", 64, "Host is down"),
        ("EHOSTUNREACH", 65, "No route to host"),
        ("ENOTEMPTY", 66, "Directory not empty"),
        ("EUSERS", 68, "Too many users"),
        ("EDQUOT", 69, "Quota exceeded"),
        ("ESTALE", 70, "Stale file handle"),
        ("EREMOTE", 71, "Object is remote"),
        ("ENOLCK", 77, "No record locks available"),
        ("ENOSYS", 78, "Function not implemented"),
        ("ENOMSG", 80, "No message of desired type"),
        ("EIDRM", 81, "Identifier removed"),
        ("ENOSR", 82, "Out of streams resources"),
        ("ETIME", 83, "Timer expired"),
        ("EBADMSG", 84, "Not a data message"),
        ("EPROTO", 85, "Protocol error"),
        ("ENODATA", 86, "No data available"),
        ("ENOSTR", 87, "Device not a stream"),
        ("ECHRNG", 88, "Channel number out of range"),
        ("EL2NSYNC", 89, "Level 2 not synchronized"),
        ("EL3HLT", 90, "Level 3 halted"),
        ("EL3RST", 91, "Level 3 reset"),
        ("ENOPKG", 92, "Package not installed"),
        ("ELNRNG", 93, "Link number out of range"),
        ("EUNATCH", 94, "Protocol driver not attached"),
        ("ENOCSI", 95, "No CSI structure available"),
        ("EL2HLT", 96, "Level 2 halted"),
        ("EBADE", 97, "Invalid exchange"),
        ("EBADR", 98, "Invalid request descriptor"),
        ("EXFULL", 99, "Exchange full"),
        ("ENOANO", 100, "No anode"),
        ("EBADRQC", 101, "Invalid request code"),
        ("EBADSLT", 102, "Invalid slot"),
        ("EBFONT", 104, "Bad font file format"),
        ("ENONET", 105, "Machine is not on the network"),
        ("ENOLINK", 106, "Link has been severed"),
        ("EADV", 107, "Advertise error"),
        ("ESRMNT", 108, "Srmount error"),
        ("ECOMM", 109, "Communication error on send"),
        ("EMULTIHOP", 110, "Multihop attempted"),
        ("EDOTDOT", 111, "RFS specific error"),
        ("EOVERFLOW", 112, "Value too large for defined data type"),
        ("ENOTUNIQ", 113, "Name not unique on network"),
        ("EBADFD", 114, "File descriptor in bad state"),
        ("EREMCHG", 115, "Remote address changed"),
        ("EILSEQ", 116, "Illegal byte sequence"),
        ("EUCLEAN", 117, "Structure needs cleaning"),
        ("ENOTNAM", 118, "Not a XENIX named type file"),
        ("ENAVAIL", 119, "No XENIX semaphores available"),
        ("EISNAM", 120, "Is a named type file"),
        ("EREMOTEIO", 121, "Remote I/O error"),
        ("ELIBACC", 122, "Can not access a needed shared library"),
        ("ELIBBAD", 123, "Accessing a corrupted shared library"),
        ("ELIBSCN", 124, ".lib section in a.out corrupted"),
        ("ELIBMAX", 125, "Attempting to link in too many shared libraries"),
        ("ELIBEXEC", 126, "Cannot exec a shared library directly"),
        ("ERESTART", 127, "Interrupted system call should be restarted"),
        ("ESTRPIPE", 128, "Streams pipe error"),
        ("ENOMEDIUM", 129, "No medium found"),
        ("EMEDIUMTYPE", 130, "Wrong medium type"),
        ("ECANCELED", 131, "Operation Cancelled"),
        ("ENOKEY", 132, "Required key not available"),
        ("EKEYEXPIRED", 133, "Key has expired"),
        ("EKEYREVOKED", 134, "Key has been revoked"),
        ("EKEYREJECTED", 135, "Key was rejected by service"),
        ("EOWNERDEAD", 136, "Owner died"),
        ("ENOTRECOVERABLE", 137, "State not recoverable"),
        ("ERFKILL", 138, "Operation not possible due to RF-kill"),
        ("EHWPOISON", 139, "Memory page has hardware error"),
        ErrnoSpec.alias("EDEADLOCK", "EDEADLK", "Alias for EDEADLK"),
        ErrnoSpec.alias("EWOULDBLOCK", "EAGAIN", "Operation would block"),
    ),
)
