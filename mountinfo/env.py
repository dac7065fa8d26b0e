import os
import platform
import sys

from mountinfo.utilities.storage import Storage


class Paths(object):
    def __init__(self):
        self.mount_table = os.environ.get("MOUNTINFO_MOUNT_TABLE", "/proc/mounts")
        self.syslog_socks = ["/dev/log", "/var/run/syslog"]


class Env(object):
    """Class to store globals
    """
    package = os.path.basename(os.path.dirname(__file__))
    applet = "mountinfo"

    _platform = sys.platform
    sysname, x, x, x, machine, x = platform.uname()
    module_sysname = sysname.lower().replace("-", "")

    # environment variables shared with the rc scripts
    envvars = Storage(
        quiet="RC_QUIET",
        nocolor="RC_NOCOLOR",
        verbose="RC_VERBOSE",
    )
    loglevel = None

    paths = Paths()

    @staticmethod
    def is_env(name, value):
        """
        Return True if the environment variable <name> is set to exactly
        <value>.
        """
        return os.environ.get(name) == value
