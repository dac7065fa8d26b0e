import importlib

import mountinfo.core.exceptions as ex
from mountinfo.env import Env

SUPPORTED = ("linux", "freebsd", "darwin")


def mounts_class(sysname=None):
    """
    Return the Mounts class implementing the mount table enumeration for
    <sysname>, defaulting to the running operating system.
    """
    if sysname is None:
        sysname = Env.module_sysname
    if sysname not in SUPPORTED:
        raise ex.Error("%s: operating system not supported" % sysname)
    _os = importlib.import_module("." + sysname, package=__name__)
    return _os.Mounts


def Mounts(*args, **kwargs):
    return mounts_class()(*args, **kwargs)
