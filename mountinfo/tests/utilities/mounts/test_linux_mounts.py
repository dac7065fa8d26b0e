import os

import pytest

import mountinfo.core.exceptions as ex
from mountinfo.utilities.mounts import mounts_class
from mountinfo.utilities.mounts.linux import Mounts
from mountinfo.utilities.mounts.mounts import Mount


@pytest.mark.ci
class TestLinuxMounts:
    @staticmethod
    def test_parse_the_table_in_order(mount_table):
        mount_table("/dev/sda1 / ext4 rw,relatime 0 0\n"
                    "tmpfs /run tmpfs rw,nosuid 0 0\n")
        assert list(Mounts()) == [
            Mount("/dev/sda1", "/", "ext4", "rw,relatime"),
            Mount("tmpfs", "/run", "tmpfs", "rw,nosuid"),
        ]

    @staticmethod
    def test_extra_fields_are_ignored(mount_table):
        mount_table("/dev/sda1 / ext4 rw 0 0 extra\n")
        assert list(Mounts()) == [Mount("/dev/sda1", "/", "ext4", "rw")]

    @staticmethod
    def test_malformed_lines_are_skipped(mount_table):
        mount_table("garbage\n"
                    "\n"
                    "/dev/sda1 / ext4\n"
                    "tmpfs /run tmpfs rw\n")
        assert list(Mounts()) == [Mount("tmpfs", "/run", "tmpfs", "rw")]

    @staticmethod
    def test_rootfs_is_kept_by_the_adapter(mount_table):
        mount_table("rootfs / rootfs rw 0 0\n")
        assert len(Mounts()) == 1

    @staticmethod
    def test_non_utf8_paths_are_kept(mount_table):
        mount_table(b"/dev/sdb1 /mnt/caf\xe9 ext4 rw 0 0\n"
                    b"/dev/sda1 / ext4 rw 0 0\n")
        mounts = list(Mounts())
        assert len(mounts) == 2
        assert mounts[0].mnt == "/mnt/caf\udce9"
        assert os.fsencode(mounts[0].mnt) == b"/mnt/caf\xe9"

    @staticmethod
    def test_explicit_table_path(tmp_file):
        with open(tmp_file, "w") as ofile:
            ofile.write("proc /proc proc rw 0 0\n")
        assert list(Mounts(table=tmp_file)) == [Mount("proc", "/proc", "proc", "rw")]

    @staticmethod
    def test_unreadable_table_raises(non_existing_file):
        with pytest.raises(ex.Error, match="getmntinfo: No such file or directory"):
            Mounts(table=non_existing_file)

    @staticmethod
    def test_str(mount_table):
        mount_table("tmpfs /run tmpfs rw 0 0\n")
        assert str(Mounts()) == "Mounts\n  Mount: dev[tmpfs] mnt[/run] type[tmpfs] options[rw]"


@pytest.mark.ci
class TestMountsClass:
    @staticmethod
    @pytest.mark.parametrize("sysname", ["linux", "freebsd", "darwin"])
    def test_supported(sysname):
        assert mounts_class(sysname).__module__ == "mountinfo.utilities.mounts." + sysname

    @staticmethod
    @pytest.mark.parametrize("sysname", ["sunos", "aix", "windows", "netbsd"])
    def test_unsupported(sysname):
        with pytest.raises(ex.Error, match="operating system not supported"):
            mounts_class(sysname)

    @staticmethod
    def test_defaults_to_the_running_os(mock_sysname):
        mock_sysname("Linux")
        assert mounts_class() is Mounts
