"""
The per-mount filters.

A FilterConfig is built once from the command line options. evaluate()
decides, for each mount of the table, if the mount is rejected or accepted,
and which of its fields is reported when accepted.

The filters are tested in a fixed order, the first failing one rejects the
mount:

1. platform artifacts (rootfs on Linux)
2. node_regex, skip_node_regex, against the mount source
3. fstype_regex, skip_fstype_regex, against the filesystem type
4. options_regex, skip_options_regex, against the mount options
5. the explicit mount points list, exact match against the mount target
"""
import logging
import re
from collections import namedtuple

import mountinfo.core.exceptions as ex
from mountinfo.env import Env

logger = logging.getLogger(Env.applet)

SELECT_NODE = "node"
SELECT_POINT = "point"
SELECT_FSTYPE = "fstype"
SELECT_OPTIONS = "options"

SELECT_ATTRS = {
    SELECT_NODE: "dev",
    SELECT_POINT: "mnt",
    SELECT_FSTYPE: "type",
    SELECT_OPTIONS: "mnt_opt",
}

REJECT = "reject"
ARTIFACT = "artifact"
ACCEPT = "accept"

# Filesystem types always hidden, whatever the user filters, keyed by
# Env.module_sysname.
PLATFORM_ARTIFACT_FSTYPES = {
    "linux": ("rootfs",),
}

REGEX_KEYWORDS = (
    "node_regex",
    "skip_node_regex",
    "fstype_regex",
    "skip_fstype_regex",
    "options_regex",
    "skip_options_regex",
    "point_regex",
    "skip_point_regex",
)


# POSIX bracket expression character classes, as re class contents.
POSIX_CLASSES = {
    "alnum": "0-9A-Za-z",
    "alpha": "A-Za-z",
    "blank": " \\t",
    "cntrl": "\\x00-\\x1f\\x7f",
    "digit": "0-9",
    "graph": "\\x21-\\x7e",
    "lower": "a-z",
    "print": "\\x20-\\x7e",
    "punct": "!-/:-@\\[-`{-~",
    "space": " \\t\\n\\r\\f\\v",
    "upper": "A-Z",
    "xdigit": "0-9A-Fa-f",
}


def _bracket_item(pattern, i):
    """
    Return the re translation of the bracket expression item starting at
    <i>, and the index of the next item.
    """
    if pattern.startswith("[:", i):
        end = pattern.find(":]", i + 2)
        if end < 0:
            raise re.error("unterminated character class", pattern, i)
        name = pattern[i + 2:end]
        if name not in POSIX_CLASSES:
            raise re.error("invalid character class name %s" % name, pattern, i)
        return POSIX_CLASSES[name], end + 2
    if pattern.startswith("[=", i) or pattern.startswith("[.", i):
        delim = pattern[i + 1] + "]"
        end = pattern.find(delim, i + 2)
        if end < 0:
            raise re.error("unterminated collating element", pattern, i)
        return re.escape(pattern[i + 2:end]), end + 2
    if pattern[i] == "\\":
        return pattern[i:i + 2], i + 2
    if pattern[i] == "[":
        return "\\[", i + 1
    return pattern[i], i + 1


def translate_posix_classes(pattern):
    """
    Rewrite the POSIX bracket expressions of <pattern>, like [[:digit:]] or
    []a], in the re syntax. Other constructs are kept as is.
    """
    if "[" not in pattern:
        return pattern
    buff = ""
    i = 0
    length = len(pattern)
    while i < length:
        char = pattern[i]
        if char == "\\":
            buff += pattern[i:i + 2]
            i += 2
            continue
        buff += char
        i += 1
        if char != "[":
            continue
        if pattern.startswith("^", i):
            buff += "^"
            i += 1
        if pattern.startswith("]", i):
            buff += "\\]"
            i += 1
        while i < length and pattern[i] != "]":
            item, i = _bracket_item(pattern, i)
            buff += item
        if i < length:
            buff += "]"
            i += 1
    return buff


def get_regex(pattern):
    """
    Compile <pattern>, an extended regular expression. Raise ex.Error if the
    pattern is not a valid regular expression.
    """
    try:
        return re.compile(translate_posix_classes(pattern))
    except re.error as exc:
        raise ex.Error("%s: invalid regex `%s': %s" % (Env.applet, pattern, exc))


def matches(regex, value):
    return regex.search(value) is not None


def is_platform_artifact(mount, sysname=None):
    if sysname is None:
        sysname = Env.module_sysname
    return mount.type in PLATFORM_ARTIFACT_FSTYPES.get(sysname, ())


_FilterConfig = namedtuple("_FilterConfig", REGEX_KEYWORDS + ("mounts", "select", "quiet"))


class FilterConfig(_FilterConfig):
    """
    The immutable filters configuration. Regex fields hold compiled patterns
    or None when unset.
    """
    __slots__ = ()

    def __new__(cls, mounts=None, select=SELECT_POINT, quiet=False, **patterns):
        for keyword in patterns:
            if keyword not in REGEX_KEYWORDS:
                raise TypeError("unexpected filter keyword: %s" % keyword)
        if select not in SELECT_ATTRS:
            raise ex.Error("%s: unsupported selected field: %s" % (Env.applet, select))
        regexes = {}
        for keyword in REGEX_KEYWORDS:
            pattern = patterns.get(keyword)
            if pattern is None:
                regexes[keyword] = None
            elif isinstance(pattern, str):
                regexes[keyword] = get_regex(pattern)
            else:
                regexes[keyword] = pattern
        return super(FilterConfig, cls).__new__(
            cls,
            mounts=tuple(mounts or ()),
            select=select,
            quiet=bool(quiet),
            **regexes
        )

    def select_value(self, mount):
        return getattr(mount, SELECT_ATTRS[self.select])


def _reject(mount, reason, *args):
    logger.debug("skip: " + reason, *args, extra={"mnt": mount.mnt, "dev": mount.dev})
    return REJECT, None


def evaluate(config, mount):
    """
    Return a (decision, value) tuple for <mount>.

    decision is one of ARTIFACT, REJECT or ACCEPT. value is the selected field
    of an accepted mount, None otherwise.
    """
    if is_platform_artifact(mount):
        logger.debug("skip: %s platform artifact", mount.type,
                     extra={"mnt": mount.mnt, "dev": mount.dev})
        return ARTIFACT, None

    if config.node_regex and not matches(config.node_regex, mount.dev):
        return _reject(mount, "node %s does not match %s", mount.dev, config.node_regex.pattern)
    if config.skip_node_regex and matches(config.skip_node_regex, mount.dev):
        return _reject(mount, "node %s matches %s", mount.dev, config.skip_node_regex.pattern)

    if config.fstype_regex and not matches(config.fstype_regex, mount.type):
        return _reject(mount, "fstype %s does not match %s", mount.type, config.fstype_regex.pattern)
    if config.skip_fstype_regex and matches(config.skip_fstype_regex, mount.type):
        return _reject(mount, "fstype %s matches %s", mount.type, config.skip_fstype_regex.pattern)

    if config.options_regex and not matches(config.options_regex, mount.mnt_opt):
        return _reject(mount, "options %s do not match %s", mount.mnt_opt, config.options_regex.pattern)
    if config.skip_options_regex and matches(config.skip_options_regex, mount.mnt_opt):
        return _reject(mount, "options %s match %s", mount.mnt_opt, config.skip_options_regex.pattern)

    if config.mounts and mount.mnt not in config.mounts:
        return _reject(mount, "not a requested mount point")

    return ACCEPT, config.select_value(mount)
