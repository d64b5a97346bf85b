"""PA-RISC error numbers, inherited from HP-UX.

Source: https://git.kernel.org/pub/scm/linux/kernel/git/torvalds/linux.git/tree/arch/parisc/include/uapi/asm/errno.h?h=v5.19
"""

from __future__ import annotations

from linux_errno.arch._base import BASE
from linux_errno.table import ErrnoSpec

PARISC = BASE.derive(
    "parisc",
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
        ("EILSEQ", 47, "Illegal byte sequence"),
        ("ENONET", 50, "Machine is not on the network"),
        ("ENODATA", 51, "No data available"),
        ("ETIME", 52, "Timer expired"),
        ("ENOSR", 53, "Out of streams resources"),
        ("ENOSTR", 54, "Device not a stream"),
        ("ENOPKG", 55, "Package not installed"),
        ("ENOLINK", 57, "Link has been severed"),
        ("EADV", 58, "Advertise error"),
        ("ESRMNT", 59, "Srmount error"),
        ("ECOMM", 60, "Communication error on send"),
        ("EPROTO", 61, "Protocol error"),
        ("EMULTIHOP", 64, "Multihop attempted"),
        ("EDOTDOT", 66, "RFS specific error"),
        ("EBADMSG", 67, "Not a data message"),
        ("EUSERS", 68, "Too many users"),
        ("EDQUOT", 69, "Quota exceeded"),
        ("ESTALE", 70, "Stale file handle"),
        ("EREMOTE", 71, "Object is remote"),
        ("EOVERFLOW", 72, "Value too large for defined data type"),
        ("EBADE", 160, "Invalid exchange"),
        ("EBADR", 161, "Invalid request descriptor"),
        ("EXFULL", 162, "Exchange full"),
        ("ENOANO", 163, "No anode"),
        ("EBADRQC", 164, "Invalid request code"),
        ("EBADSLT", 165, "Invalid slot"),
        ("EBFONT", 166, "Bad font file format"),
        ("ENOTUNIQ", 167, "Name not unique on network"),
        ("EBADFD", 168, "File descriptor in bad state"),
        ("EREMCHG", 169, "Remote address changed"),
        ("ELIBACC", 170, "Can not access a needed shared library"),
        ("ELIBBAD", 171, "Accessing a corrupted shared library"),
        ("ELIBSCN", 172, ".lib section in a.out corrupted"),
        ("ELIBMAX", 173, "Attempting to link in too many shared libraries"),
        ("ELIBEXEC", 174, "Cannot exec a shared library directly"),
        ("ERESTART", 175, "Interrupted system call should be restarted"),
        ("ESTRPIPE", 176, "Streams pipe error"),
        ("EUCLEAN", 177, "Structure needs cleaning"),
        ("ENOTNAM", 178, "Not a XENIX named type file"),
        ("ENAVAIL", 179, "No XENIX semaphores available"),
        ("EISNAM", 180, "Is a named type file"),
        ("EREMOTEIO", 181, "Remote I/O error"),
        ("ENOMEDIUM", 182, "No medium found"),
        ("EMEDIUMTYPE", 183, "Wrong medium type"),
        ("ENOKEY", 184, "Required key not available"),
        ("EKEYEXPIRED", 185, "Key has expired"),
        ("EKEYREVOKED", 186, "Key has been revoked"),
        ("EKEYREJECTED", 187, "Key was rejected by service"),
        ("ENOSYM", 215, "symbol does not exist in executable"),
        ("ENOTSOCK", 216, "Socket operation on non-socket"),
        ("EDESTADDRREQ", 217, "Destination address required"),
        ("EMSGSIZE", 218, "Message too long"),
        ("EPROTOTYPE", 219, "Protocol wrong type for socket"),
        ("ENOPROTOOPT", 220, "Protocol not available"),
        ("EPROTONOSUPPORT", 221, "Protocol not supported"),
        ("ESOCKTNOSUPPORT", 222, "Socket type not supported"),
        ("EOPNOTSUPP", 223, "Operation not supported on transport endpoint"),
        ("EPFNOSUPPORT", 224, "Protocol family not supported"),
        ("EAFNOSUPPORT", 225, "Address family not supported by protocol"),
        ("EADDRINUSE", 226, "Address already in use"),
        ("EADDRNOTAVAIL", 227, "Cannot assign requested address"),
        ("ENETDOWN", 228, "Network is down"),
        ("ENETUNREACH", 229, "Network is unreachable"),
        ("ENETRESET", 230, "Network dropped connection because of reset"),
        ("ECONNABORTED", 231, "Software caused connection abort"),
        ("ECONNRESET", 232, "Connection reset by peer"),
        ("ENOBUFS", 233, "No buffer space available"),
        ("EISCONN", 234, "Transport endpoint is already connected"),
        ("ENOTCONN", 235, "Transport endpoint is not connected"),
        ("ESHUTDOWN", 236, "Cannot send after transport endpoint shutdown"),
        ("ETOOMANYREFS", 237, "Too many references: cannot splice"),
        ("ETIMEDOUT", 238, "Connection timed out"),
        ("ECONNREFUSED", 239, "Connection refused"),
        ("EREMOTERELEASE", 240, "Remote peer released connection"),
        ("EHOSTDOWN", 241, "Host is down"),
        ("EHOSTUNREACH", 242, "No route to host"),
        ("EALREADY", 244, "Operation already in progress"),
        ("EINPROGRESS", 245, "Operation now in progress"),
        ("ENOTEMPTY", 247, "Directory not empty"),
        ("ENAMETOOLONG", 248, "File name too long"),
        ("ELOOP", 249, "Too many symbolic links encountered"),
        ("ENOSYS", 251, "Function not implemented"),
        ("ECANCELLED", 253, "aio request was canceled before complete (POSIX.4 / HPUX)"),
        ("EOWNERDEAD", 254, "Owner died"),
        ("ENOTRECOVERABLE", 255, "State not recoverable"),
        ("ERFKILL", 256, "Operation not possible due to RF-kill"),
        ("EHWPOISON", 257, "Memory page has hardware error"),
        ErrnoSpec.alias("ECANCELED", "ECANCELLED", "SuSv3 and Solaris wants one 'L'"),
        ErrnoSpec.alias("EDEADLOCK", "EDEADLK", "Alias for EDEADLK"),
        ErrnoSpec.alias("EREFUSED", "ECONNREFUSED", "For HP's NFS apparently"),
        ErrnoSpec.alias("EWOULDBLOCK", "EAGAIN", "Operation would block (Not HPUX compliant)"),
    ),
)
