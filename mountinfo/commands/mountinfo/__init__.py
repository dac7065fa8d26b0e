import sys

import mountinfo.core.exceptions as ex
import mountinfo.utilities.render.color
from mountinfo.commands.mountinfo.parser import MountinfoOptParser
from mountinfo.core.filters import FilterConfig, REGEX_KEYWORDS
from mountinfo.core.logger import initLogger
from mountinfo.core.pipeline import run
from mountinfo.env import Env


def get_mount_points(args):
    """
    Validate the positional arguments. Each must be an absolute path.
    """
    for arg in args:
        if not arg.startswith("/"):
            raise ex.Error("%s: `%s' is not a mount point" % (Env.applet, arg))
    return args


def filter_config(options, args):
    patterns = dict((kw, getattr(options, kw)) for kw in REGEX_KEYWORDS)
    return FilterConfig(
        mounts=get_mount_points(args),
        select=options.select,
        quiet=options.quiet or Env.is_env(Env.envvars.quiet, "yes"),
        **patterns
    )


def _main(argv=None, mounts=None):
    optparser = MountinfoOptParser()
    options, args = optparser.parse_args(argv)

    if options.nocolor:
        mountinfo.utilities.render.color.use_color = "no"
    else:
        mountinfo.utilities.render.color.use_color = "auto"
    debug = options.verbose or options.debug or Env.is_env(Env.envvars.verbose, "yes")
    handlers = ["stream"]
    if options.syslog:
        handlers.append("syslog")
    initLogger(Env.applet, handlers=handlers, debug=debug)

    config = filter_config(options, args)
    return run(config, mounts=mounts)


def main(argv=None, mounts=None):
    if argv is None:
        argv = sys.argv[1:]
    log = initLogger(Env.applet)
    try:
        return _main(argv=argv, mounts=mounts)
    except ex.Error as exc:
        log.error("%s", exc)
        return 1
    except ex.Version as exc:
        print(exc)
        return 0
    except ex.Usage:
        return 0
    except KeyboardInterrupt:
        sys.stderr.write("Keyboard Interrupt\n")
        return 1


if __name__ == "__main__":
    ret = main()
    sys.exit(ret)
