"""MIPS error numbers, inherited from IRIX.

Source: https://git.kernel.org/pub/scm/linux/kernel/git/torvalds/linux.git/tree/arch/mips/include/uapi/asm/errno.h?h=v5.19
"""

from __future__ import annotations

from linux_errno.arch._base import BASE
from linux_errno.table import ErrnoSpec

MIPS = BASE.derive(
    "mips",
    (
        ("ENOMSG", 35, "No message of desired type"),
        ("EIDRM", 36, "Identifier removed"),
        ("ECHRNG", 37, "Channel number out of range"),
        ("EL2NSYNC", 38, "Level 2 not synchronized"),
        ("EL3HLT", 39, "Level 3 halted"),
        ("EL3RST", 40, "Level 3 reset"),
        ("ELNRNG", 41, "Link number out of range"),
        ("EUNATCH", 42, "Protocol driver not attached"),
        ("ENOCSI", 43, "No CSI structure available"),
        ("EL2HLT", 44, "Level 2 halted"),
        ("EDEADLK", 45, "Resource deadlock would occur"),
        ("ENOLCK", 46, "No record locks available"),
        ("EBADE", 50, "Invalid exchange"),
        ("EBADR", 51, "Invalid request descriptor"),
        ("EXFULL", 52, "Exchange full"),
        ("ENOANO", 53, "No anode"),
        ("EBADRQC", 54, "Invalid request code"),
        ("EBADSLT", 55, "Invalid slot"),
        ("EDEADLOCK", 56, "File locking deadlock error"),
        ("EBFONT", 59, "Bad font file format"),
        ("ENOSTR", 60, "Device not a stream"),
        ("ENODATA", 61, "No data available"),
        ("ETIME", 62, "Timer expired"),
        ("ENOSR", 63, "Out of streams resources"),
        ("ENONET", 64, "Machine is not on the network"),
        ("ENOPKG", 65, "Package not installed"),
        ("EREMOTE", 66, "Object is remote"),
        ("ENOLINK", 67, "Link has been severed"),
        ("EADV", 68, "Advertise error"),
        ("ESRMNT", 69, "Srmount error"),
        ("ECOMM", 70, "Communication error on send"),
        ("EPROTO", 71, "Protocol error"),
        ("EDOTDOT", 73, "RFS specific error"),
        ("EMULTIHOP", 74, "Multihop attempted"),
        ("EBADMSG", 77, "Not a data message"),
        ("ENAMETOOLONG", 78, "File name too long"),
        ("EOVERFLOW", 79, "Value too large for defined data type"),
        ("ENOTUNIQ", 80, "Name not unique on network"),
        ("EBADFD", 81, "File descriptor in bad state"),
        ("EREMCHG", 82, "Remote address changed"),
        ("ELIBACC", 83, "Can not access a needed shared library"),
        ("ELIBBAD", 84, "Accessing a corrupted shared library"),
        ("ELIBSCN", 85, ".lib section in a.out corrupted"),
        ("ELIBMAX", 86, "Attempting to link in too many shared libraries"),
        ("ELIBEXEC", 87, "Cannot exec a shared library directly"),
        ("EILSEQ", 88, "Illegal byte sequence"),
        ("ENOSYS", 89, "Function not implemented"),
        ("ELOOP", 90, "Too many symbolic links encountered"),
        ("ERESTART", 91, "Interrupted system call should be restarted"),
        ("ESTRPIPE", 92, "Streams pipe error"),
        ("ENOTEMPTY", 93, "Directory not empty"),
        ("EUSERS", 94, "Too many users"),
        ("ENOTSOCK", 95, "Socket operation on non-socket"),
        ("EDESTADDRREQ", 96, "Destination address required"),
        ("EMSGSIZE", 97, "Message too long"),
        ("EPROTOTYPE", 98, "Protocol wrong type for socket"),
        ("ENOPROTOOPT", 99, "Protocol not available"),
        ("EPROTONOSUPPORT", 120, "Protocol not supported"),
        ("ESOCKTNOSUPPORT", 121, "Socket type not supported"),
        ("EOPNOTSUPP", 122, "Operation not supported on transport endpoint"),
        ("EPFNOSUPPORT", 123, "Protocol family not supported"),
        ("EAFNOSUPPORT", 124, "Address family not supported by protocol"),
        ("EADDRINUSE", 125, "Address already in use"),
        ("EADDRNOTAVAIL", 126, "Cannot assign requested address"),
        ("ENETDOWN", 127, "Network is down"),
        ("ENETUNREACH", 128, "Network is unreachable"),
        ("ENETRESET", 129, "Network dropped connection because of reset"),
        ("ECONNABORTED", 130, "Software caused connection abort"),
        ("ECONNRESET", 131, "Connection reset by peer"),
        ("ENOBUFS", 132, "No buffer space available"),
        ("EISCONN", 133, "Transport endpoint is already connected"),
        ("ENOTCONN", 134, "Transport endpoint is not connected"),
        ("EUCLEAN", 135, "Structure needs cleaning"),
        ("ENOTNAM", 137, "Not a XENIX named type file"),
        ("ENAVAIL", 138, "No XENIX semaphores available"),
        ("EISNAM", 139, "Is a named type file"),
        ("EREMOTEIO", 140, "Remote I/O error"),
        ("EINIT", 141, "Reserved"),
        ("EREMDEV", 142, "Error 142"),
        ("ESHUTDOWN", 143, "Cannot send after transport endpoint shutdown"),
        ("ETOOMANYREFS", 144, "Too many references: cannot splice"),
        ("ETIMEDOUT", 145, "Connection timed out"),
        ("ECONNREFUSED", 146, "Connection refused"),
        ("EHOSTDOWN", 147, "Host is down"),
        ("EHOSTUNREACH", 148, "No route to host"),
        ("EALREADY", 149, "Operation already in progress"),
        ("EINPROGRESS", 150, "Operation now in progress"),
        ("ESTALE", 151, "Stale file handle"),
        ("ECANCELED", 158, "AIO operation canceled"),
        ("ENOMEDIUM", 159, "No medium found"),
        ("EMEDIUMTYPE", 160, "Wrong medium type"),
        ("ENOKEY", 161, "Required key not available"),
        ("EKEYEXPIRED", 162, "Key has expired"),
        ("EKEYREVOKED", 163, "Key has been revoked"),
        ("EKEYREJECTED", 164, "Key was rejected by service"),
        ("EOWNERDEAD", 165, "Owner died"),
        ("ENOTRECOVERABLE", 166, "State not recoverable"),
        ("ERFKILL", 167, "Operation not possible due to RF-kill"),
        ("EHWPOISON", 168, "Memory page has hardware error"),
        ("EDQUOT", 1133, "Quota exceeded"),
        ErrnoSpec.alias("EWOULDBLOCK", "EAGAIN", "Operation would block"),
    ),
)
