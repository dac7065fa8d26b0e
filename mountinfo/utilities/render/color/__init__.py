import os

from mountinfo.env import Env

use_color = "auto"


class color:
    END = '\033[000m'
    BOLD = '\033[001m'

    RED = '\033[031m'
    GREEN = '\033[032m'
    BROWN = '\033[033m'
    LIGHTBLUE = '\033[094m'


if os.environ.get("TERM") in ("screen-256color", "xterm-256color", "screen-256color-bce"):
    color.LIGHTBLUE = '\033[038;5;243m'


def ansi_colorize(s, c=None, fd=2):
    global use_color
    if c is None:
        return s
    if Env.is_env(Env.envvars.nocolor, "yes"):
        return s
    if use_color in ("never", "no") or (use_color == "auto" and not os.isatty(fd)):
        return s
    return c + s + color.END

colorize = ansi_colorize
