import logging
import os

import pytest  # nopep8

from mountinfo.env import Env  # nopep8
from mountinfo.utilities.mounts.mounts import Mount  # nopep8

PROC_MOUNTS = """\
rootfs / rootfs rw 0 0
/dev/sda1 / ext4 rw,relatime 0 0
tmpfs /run tmpfs rw,nosuid,nodev,mode=755 0 0
proc /proc proc rw,nosuid,nodev,noexec,relatime 0 0
/dev/sda2 /home ext4 rw,relatime 0 0
/dev/loop0 /snap/core/1 squashfs ro,nodev,relatime 0 0
/dev/mapper/data /mnt/data xfs rw,noatime 0 0
"""


@pytest.fixture(scope='function', autouse=True)
def clean_rc_env(monkeypatch):
    for name in Env.envvars.values():
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope='function', autouse=True)
def reset_logger():
    yield
    log = logging.getLogger(Env.applet)
    for handler in list(log.handlers):
        log.removeHandler(handler)


@pytest.fixture(scope='function', name='mock_sysname')
def mock_sysname_fixture(mocker):
    def func(sysname):
        mocker.patch.object(Env, 'sysname', sysname)
        mocker.patch.object(Env, 'module_sysname', sysname.lower().replace("-", ""))

    return func


@pytest.fixture(scope='function')
def tmp_file(tmp_path):
    return os.path.join(str(tmp_path), 'tmp-file')


@pytest.fixture(scope='function')
def mount_table(tmp_path, mocker):
    """
    Write a /proc/mounts like table and point Env.paths.mount_table to it.
    Return a function accepting the table content, as str or raw bytes.
    """
    def func(content=PROC_MOUNTS):
        path = os.path.join(str(tmp_path), 'mounts')
        mode = 'wb' if isinstance(content, bytes) else 'w'
        with open(path, mode) as ofile:
            ofile.write(content)
        mocker.patch.object(Env.paths, 'mount_table', path)
        return path

    return func


@pytest.fixture(scope='function')
def linux_mounts(mock_sysname, mount_table):
    mock_sysname('Linux')
    mount_table()


@pytest.fixture(scope='function')
def mounts():
    return [
        Mount("/dev/sda1", "/", "ext4", "rw,relatime"),
        Mount("tmpfs", "/run", "tmpfs", "rw,nosuid"),
    ]


@pytest.fixture(scope='function')
def non_existing_file(tmp_path):
    assert os.path.exists(str(tmp_path))
    return os.path.join(str(tmp_path), 'foo')
