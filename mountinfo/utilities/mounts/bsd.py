"""
Mount table enumeration through the getmntinfo(3) libc function, shared by
the BSD flavored kernels. Subclasses provide the struct statfs layout, the
getmntinfo symbol name and the mount flags translation table.
"""
import ctypes
import ctypes.util
import os

import mountinfo.core.exceptions as ex
from .mounts import BaseMounts, Mount

MNT_WAIT = 1
MNT_NOWAIT = 2


def flags_to_options(flags, optnames):
    """
    Translate a mount flags bitmask to a comma separated list of option
    names, in <optnames> order.
    """
    names = []
    for opt, name in optnames:
        if not flags:
            break
        if flags & opt:
            names.append(name)
        flags &= ~opt
    return ",".join(names)


def decode_name(buff):
    return os.fsdecode(buff)


class LibC(object):
    _libc = None

    def _load_lib(self):
        if self._libc:
            return
        libname = ctypes.util.find_library("c")
        if libname is None:
            raise ex.Error("getmntinfo: cannot find the C library")
        self._libc = ctypes.CDLL(libname, use_errno=True)

    def func(self, symbol):
        self._load_lib()
        try:
            return self._libc[symbol]
        except AttributeError:
            raise ex.Error("getmntinfo: %s not found in the C library" % symbol)


libc = LibC()


class BsdMounts(BaseMounts):
    statfs = None
    getmntinfo_symbols = ("getmntinfo",)
    optnames = ()

    def getmntinfo_func(self):
        err = None
        for symbol in self.getmntinfo_symbols:
            try:
                func = libc.func(symbol)
            except ex.Error as exc:
                err = exc
                continue
            func.restype = ctypes.c_int
            func.argtypes = [ctypes.POINTER(ctypes.POINTER(self.statfs)), ctypes.c_int]
            return func
        raise err

    def getmntinfo(self):
        """
        Call getmntinfo(3) once and return the list of struct statfs.
        """
        func = self.getmntinfo_func()
        mnts = ctypes.POINTER(self.statfs)()
        nmnts = func(ctypes.byref(mnts), MNT_NOWAIT)
        if nmnts == 0:
            errno = ctypes.get_errno()
            raise ex.Error("getmntinfo: %s" % os.strerror(errno))
        # the buffer is owned by libc and reused by the next call
        return [mnts[i] for i in range(nmnts)]

    def statfs_to_mount(self, st):
        return Mount(
            decode_name(st.f_mntfromname),
            decode_name(st.f_mntonname),
            decode_name(st.f_fstypename),
            flags_to_options(st.f_flags, self.optnames),
        )

    def parse_mounts(self):
        return [self.statfs_to_mount(st) for st in self.getmntinfo()]
