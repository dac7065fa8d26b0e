import ctypes

from .bsd import BsdMounts

MFSNAMELEN = 16
MNAMELEN = 1024

MNT_RDONLY = 0x0000000000000001
MNT_SYNCHRONOUS = 0x0000000000000002
MNT_NOEXEC = 0x0000000000000004
MNT_NOSUID = 0x0000000000000008
MNT_UNION = 0x0000000000000020
MNT_ASYNC = 0x0000000000000040
MNT_EXPORTED = 0x0000000000000100
MNT_LOCAL = 0x0000000000001000
MNT_QUOTA = 0x0000000000002000
MNT_SUIDDIR = 0x0000000000100000
MNT_SOFTDEP = 0x0000000000200000
MNT_NOSYMFOLLOW = 0x0000000000400000
MNT_GJOURNAL = 0x0000000002000000
MNT_MULTILABEL = 0x0000000004000000
MNT_ACLS = 0x0000000008000000
MNT_NOATIME = 0x0000000010000000
MNT_NOCLUSTERR = 0x0000000040000000
MNT_NOCLUSTERW = 0x0000000080000000

# Same order and wording as mount(8)
OPTNAMES = (
    (MNT_ASYNC, "asynchronous"),
    (MNT_EXPORTED, "NFS exported"),
    (MNT_LOCAL, "local"),
    (MNT_NOATIME, "noatime"),
    (MNT_NOEXEC, "noexec"),
    (MNT_NOSUID, "nosuid"),
    (MNT_NOSYMFOLLOW, "nosymfollow"),
    (MNT_QUOTA, "with quotas"),
    (MNT_RDONLY, "read-only"),
    (MNT_SYNCHRONOUS, "synchronous"),
    (MNT_UNION, "union"),
    (MNT_NOCLUSTERR, "noclusterr"),
    (MNT_NOCLUSTERW, "noclusterw"),
    (MNT_SUIDDIR, "suiddir"),
    (MNT_SOFTDEP, "soft-updates"),
    (MNT_MULTILABEL, "multilabel"),
    (MNT_ACLS, "acls"),
    (MNT_GJOURNAL, "gjournal"),
)


class fsid_t(ctypes.Structure):
    _fields_ = [("val", ctypes.c_int32 * 2)]


class statfs(ctypes.Structure):
    """
    struct statfs, STATFS_VERSION 0x20140518 (FreeBSD 12 and later)
    """
    _fields_ = [
        ("f_version", ctypes.c_uint32),
        ("f_type", ctypes.c_uint32),
        ("f_flags", ctypes.c_uint64),
        ("f_bsize", ctypes.c_uint64),
        ("f_iosize", ctypes.c_uint64),
        ("f_blocks", ctypes.c_uint64),
        ("f_bfree", ctypes.c_uint64),
        ("f_bavail", ctypes.c_int64),
        ("f_files", ctypes.c_uint64),
        ("f_ffree", ctypes.c_int64),
        ("f_syncwrites", ctypes.c_uint64),
        ("f_asyncwrites", ctypes.c_uint64),
        ("f_syncreads", ctypes.c_uint64),
        ("f_asyncreads", ctypes.c_uint64),
        ("f_spare", ctypes.c_uint64 * 10),
        ("f_namemax", ctypes.c_uint32),
        ("f_owner", ctypes.c_uint32),
        ("f_fsid", fsid_t),
        ("f_charspare", ctypes.c_char * 80),
        ("f_fstypename", ctypes.c_char * MFSNAMELEN),
        ("f_mntfromname", ctypes.c_char * MNAMELEN),
        ("f_mntonname", ctypes.c_char * MNAMELEN),
    ]


class Mounts(BsdMounts):
    statfs = statfs
    optnames = OPTNAMES


if __name__ == "__main__":
    for m in Mounts():
        print(m)
