import errno

import pytest

import mountinfo.core.exceptions as ex
import mountinfo.utilities.mounts.darwin as darwin
import mountinfo.utilities.mounts.freebsd as freebsd
from mountinfo.utilities.mounts.bsd import flags_to_options
from mountinfo.utilities.mounts.mounts import Mount


def freebsd_statfs(dev, mnt, fstype, flags):
    st = freebsd.statfs()
    st.f_mntfromname = dev.encode()
    st.f_mntonname = mnt.encode()
    st.f_fstypename = fstype.encode()
    st.f_flags = flags
    return st


@pytest.mark.ci
class TestFlagsToOptions:
    @staticmethod
    def test_no_flag_is_an_empty_string():
        assert flags_to_options(0, freebsd.OPTNAMES) == ""

    @staticmethod
    def test_names_are_joined_in_table_order():
        flags = freebsd.MNT_RDONLY | freebsd.MNT_LOCAL | freebsd.MNT_ASYNC
        assert flags_to_options(flags, freebsd.OPTNAMES) == "asynchronous,local,read-only"

    @staticmethod
    def test_unknown_flags_are_ignored():
        flags = freebsd.MNT_NOSUID | 0x00000800
        assert flags_to_options(flags, freebsd.OPTNAMES) == "nosuid"

    @staticmethod
    def test_darwin_table():
        flags = darwin.MNT_JOURNALED | darwin.MNT_LOCAL | darwin.MNT_DONTBROWSE
        assert flags_to_options(flags, darwin.OPTNAMES) == "local,journaled,nobrowse"


@pytest.mark.ci
class TestFreeBSDStatfs:
    @staticmethod
    def test_struct_size():
        import ctypes
        assert ctypes.sizeof(freebsd.statfs) == 2344


@pytest.mark.ci
class TestBsdMounts:
    @staticmethod
    def test_parse_mounts(mocker):
        mocker.patch.object(freebsd.Mounts, "getmntinfo", return_value=[
            freebsd_statfs("/dev/ada0p2", "/", "ufs", freebsd.MNT_LOCAL | freebsd.MNT_SOFTDEP),
            freebsd_statfs("devfs", "/dev", "devfs", 0),
        ])
        assert list(freebsd.Mounts()) == [
            Mount("/dev/ada0p2", "/", "ufs", "local,soft-updates"),
            Mount("devfs", "/dev", "devfs", ""),
        ]

    @staticmethod
    def test_getmntinfo_failure_raises(mocker):
        mocker.patch.object(freebsd.Mounts, "getmntinfo_func", return_value=lambda mnts, mode: 0)
        mocker.patch("ctypes.get_errno", return_value=errno.EPERM)
        with pytest.raises(ex.Error, match="getmntinfo: Operation not permitted"):
            freebsd.Mounts()

    @staticmethod
    def test_missing_symbol_raises(mocker):
        mocker.patch("mountinfo.utilities.mounts.bsd.libc.func",
                     side_effect=ex.Error("getmntinfo: getmntinfo not found in the C library"))
        with pytest.raises(ex.Error, match="not found in the C library"):
            darwin.Mounts()
