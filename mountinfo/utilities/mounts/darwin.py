import ctypes

from .bsd import BsdMounts

MFSTYPENAMELEN = 16
MAXPATHLEN = 1024

MNT_RDONLY = 0x00000001
MNT_SYNCHRONOUS = 0x00000002
MNT_NOEXEC = 0x00000004
MNT_NOSUID = 0x00000008
MNT_NODEV = 0x00000010
MNT_UNION = 0x00000020
MNT_ASYNC = 0x00000040
MNT_CPROTECT = 0x00000080
MNT_EXPORTED = 0x00000100
MNT_QUARANTINE = 0x00000400
MNT_LOCAL = 0x00001000
MNT_QUOTA = 0x00002000
MNT_ROOTFS = 0x00004000
MNT_DOVOLFS = 0x00008000
MNT_DONTBROWSE = 0x00100000
MNT_IGNORE_OWNERSHIP = 0x00200000
MNT_AUTOMOUNTED = 0x00400000
MNT_JOURNALED = 0x00800000
MNT_NOUSERXATTR = 0x01000000
MNT_DEFWRITE = 0x02000000
MNT_MULTILABEL = 0x04000000
MNT_NOATIME = 0x10000000
MNT_SNAPSHOT = 0x40000000

# Same order and wording as mount(8)
OPTNAMES = (
    (MNT_ASYNC, "asynchronous"),
    (MNT_EXPORTED, "NFS exported"),
    (MNT_LOCAL, "local"),
    (MNT_NOATIME, "noatime"),
    (MNT_NOEXEC, "noexec"),
    (MNT_NOSUID, "nosuid"),
    (MNT_NODEV, "nodev"),
    (MNT_QUOTA, "with quotas"),
    (MNT_RDONLY, "read-only"),
    (MNT_SYNCHRONOUS, "synchronous"),
    (MNT_UNION, "union"),
    (MNT_AUTOMOUNTED, "automounted"),
    (MNT_JOURNALED, "journaled"),
    (MNT_DEFWRITE, "defwrite"),
    (MNT_IGNORE_OWNERSHIP, "noowners"),
    (MNT_NOUSERXATTR, "nouserxattr"),
    (MNT_QUARANTINE, "quarantine"),
    (MNT_DONTBROWSE, "nobrowse"),
    (MNT_CPROTECT, "protect"),
    (MNT_MULTILABEL, "multilabel"),
    (MNT_SNAPSHOT, "snapshot"),
)


class fsid_t(ctypes.Structure):
    _fields_ = [("val", ctypes.c_int32 * 2)]


class statfs(ctypes.Structure):
    """
    struct statfs, 64-bit inode variant
    """
    _fields_ = [
        ("f_bsize", ctypes.c_uint32),
        ("f_iosize", ctypes.c_int32),
        ("f_blocks", ctypes.c_uint64),
        ("f_bfree", ctypes.c_uint64),
        ("f_bavail", ctypes.c_uint64),
        ("f_files", ctypes.c_uint64),
        ("f_ffree", ctypes.c_uint64),
        ("f_fsid", fsid_t),
        ("f_owner", ctypes.c_uint32),
        ("f_type", ctypes.c_uint32),
        ("f_flags", ctypes.c_uint32),
        ("f_fssubtype", ctypes.c_uint32),
        ("f_fstypename", ctypes.c_char * MFSTYPENAMELEN),
        ("f_mntonname", ctypes.c_char * MAXPATHLEN),
        ("f_mntfromname", ctypes.c_char * MAXPATHLEN),
        ("f_flags_ext", ctypes.c_uint32),
        ("f_reserved", ctypes.c_uint32 * 7),
    ]


class Mounts(BsdMounts):
    statfs = statfs
    optnames = OPTNAMES
    # x86_64 exports the 64-bit inode struct under a suffixed symbol
    getmntinfo_symbols = ("getmntinfo$INODE64", "getmntinfo")


if __name__ == "__main__":
    for m in Mounts():
        print(m)
