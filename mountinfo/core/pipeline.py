import logging
import os
import sys

from mountinfo.core.filters import ACCEPT, evaluate, matches
from mountinfo.core.selection import SelectionSet
from mountinfo.env import Env

logger = logging.getLogger(Env.applet)


def find_mounts(config, mounts):
    """
    Evaluate the filters on each mount of <mounts>, and return the
    SelectionSet of the accepted mounts selected field, in descending order.
    """
    selection = SelectionSet()
    for mount in mounts:
        decision, value = evaluate(config, mount)
        if decision != ACCEPT:
            continue
        selection.insert_sorted(value)
    selection.reverse()
    return selection


def point_filter(config, selection):
    """
    Yield the values of <selection> passing the point_regex and
    skip_point_regex filters.
    """
    for value in selection:
        if config.point_regex and not matches(config.point_regex, value):
            logger.debug("skip: point %s does not match %s", value, config.point_regex.pattern)
            continue
        if config.skip_point_regex and matches(config.skip_point_regex, value):
            logger.debug("skip: point %s matches %s", value, config.skip_point_regex.pattern)
            continue
        yield value


def write_value(stream, value):
    """
    Mount paths are raw bytes decoded with surrogateescape. Write them back
    as the original bytes when the stream exposes its binary buffer.
    """
    buff = getattr(stream, "buffer", None)
    if buff is None:
        stream.write(value + "\n")
        return
    stream.flush()
    buff.write(os.fsencode(value) + b"\n")


def output(config, values, stream=None):
    """
    Write each value on its own line, unless quiet.
    Return 0 if at least one value was seen, 1 otherwise.
    """
    if stream is None:
        stream = sys.stdout
    ret = 1
    for value in values:
        if not config.quiet:
            write_value(stream, value)
        ret = 0
    return ret


def run(config, mounts=None, stream=None):
    if mounts is None:
        from mountinfo.utilities.mounts import Mounts
        mounts = Mounts()
    selection = find_mounts(config, mounts)
    try:
        return output(config, point_filter(config, selection), stream=stream)
    finally:
        selection.clear()
