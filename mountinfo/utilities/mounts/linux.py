import logging
import sys

import mountinfo.core.exceptions as ex
from mountinfo.env import Env
from .mounts import BaseMounts, Mount

logger = logging.getLogger(Env.applet)


class Mounts(BaseMounts):
    """
    Mount table enumeration from the kernel virtual table file.

    Each line holds whitespace separated fields: source, target, fstype,
    options, then dump and pass numbers which are ignored.
    """
    def __init__(self, table=None):
        self.table = table or Env.paths.mount_table
        super(Mounts, self).__init__()

    def parse_mounts(self):
        mounts = []
        try:
            with open(self.table, "r", encoding=sys.getfilesystemencoding(),
                      errors="surrogateescape") as ofile:
                for lineno, line in enumerate(ofile, 1):
                    words = line.split()
                    if len(words) < 4:
                        logger.debug("%s:%d: skip malformed line: %s",
                                     self.table, lineno, line.rstrip("\n"))
                        continue
                    dev, mnt, type, mnt_opt = words[:4]
                    mounts.append(Mount(dev, mnt, type, mnt_opt))
        except OSError as exc:
            raise ex.Error("getmntinfo: %s" % (exc.strerror or exc))
        return mounts


if __name__ == "__main__":
    for m in Mounts():
        print(m)
