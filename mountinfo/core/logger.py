import logging
import logging.handlers
import os
import sys

from mountinfo.env import Env
from mountinfo.utilities.render.color import colorize, color

DEFAULT_HANDLERS = ["stream"]


class MountinfoFormatter(logging.Formatter):
    """
    Add context information embedded in the record via "extra".
    If human is True, factorize the context information, trim the level and colorize.
    """
    def __init__(self, *args, **kwargs):
        logging.Formatter.__init__(self, *args, **kwargs)
        self.human = False
        self.last_context = None
        self.attrs = [
            ("mnt", "m"),
            ("dev", "d"),
        ]

    def format(self, record):
        record.message = record.getMessage()
        record.context = ""
        for xattr, key in self.attrs:
            try:
                val = getattr(record, xattr)
                if val in (None, ""):
                    continue
                record.context += "%s:%s " % (key, val)
            except AttributeError:
                pass
        record.context = record.context.rstrip()

        if not self.human:
            return logging.Formatter.format(self, record)

        # Factorize context information, trim the level and colorize.
        buff = ""
        if record.context and self.last_context != record.context:
            buff += colorize("@ " + record.context, color.LIGHTBLUE) + "\n"
            self.last_context = record.context
        if record.levelname == "INFO":
            buff += "  " + record.message
        elif record.levelname in ("ERROR", "CRITICAL"):
            buff += colorize("E " + record.message, color.RED)
        elif record.levelname == "WARNING":
            buff += colorize("W " + record.message, color.BROWN)
        elif record.levelname == "DEBUG":
            buff += colorize("D " + record.message, color.LIGHTBLUE)
        return buff


def syslog_address():
    for path in Env.paths.syslog_socks:
        if os.path.exists(path):
            return os.path.realpath(path)
    return ("localhost", 514)


def initLogger(root, handlers=None, debug=False):
    if handlers is None:
        handlers = DEFAULT_HANDLERS
    log = logging.getLogger(root)
    log.propagate = False
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()

    if "stream" in handlers:
        streamformatter = MountinfoFormatter("%(levelname)s %(context)s %(message)s")
        streamformatter.human = True
        streamhandler = logging.StreamHandler(sys.stderr)
        streamhandler.setFormatter(streamformatter)
        log.addHandler(streamhandler)

        if debug:
            Env.loglevel = logging.DEBUG
            streamhandler.setLevel(logging.DEBUG)
        else:
            Env.loglevel = logging.INFO
            streamhandler.setLevel(logging.INFO)

    if "syslog" in handlers:
        syslogformatter = MountinfoFormatter(Env.applet + ": %(context)s %(message)s")
        try:
            sysloghandler = logging.handlers.SysLogHandler(address=syslog_address(),
                                                           facility="daemon")
        except OSError:
            sysloghandler = None
        if sysloghandler:
            sysloghandler.setLevel(logging.WARNING)
            sysloghandler.setFormatter(syslogformatter)
            log.addHandler(sysloghandler)

    log.setLevel(logging.DEBUG)

    return log
