"""
The mountinfo command options.
"""
from mountinfo.core.filters import SELECT_FSTYPE, SELECT_NODE, SELECT_OPTIONS, SELECT_POINT
from mountinfo.utilities.optparser import OptionParser, Option
from mountinfo.utilities.storage import Storage

PROG = "mountinfo"

USAGE = "%prog [options] [mount point ...]"

DESCRIPTION = "Print the mount points, or another field of the mounted " \
              "filesystems table, matching the filters. Exit 0 if at " \
              "least one value is reported, 1 otherwise."

OPT = Storage({
    "fstype_regex": Option(
        "-f", "--fstype-regex", action="store", dest="fstype_regex",
        metavar="REGEX",
        help="Only report filesystems with a type matching REGEX."),
    "skip_fstype_regex": Option(
        "-F", "--skip-fstype-regex", action="store", dest="skip_fstype_regex",
        metavar="REGEX",
        help="Do not report filesystems with a type matching REGEX."),
    "node_regex": Option(
        "-n", "--node-regex", action="store", dest="node_regex",
        metavar="REGEX",
        help="Only report filesystems with a source node matching REGEX."),
    "skip_node_regex": Option(
        "-N", "--skip-node-regex", action="store", dest="skip_node_regex",
        metavar="REGEX",
        help="Do not report filesystems with a source node matching REGEX."),
    "options_regex": Option(
        "-o", "--options-regex", action="store", dest="options_regex",
        metavar="REGEX",
        help="Only report filesystems with mount options matching REGEX."),
    "skip_options_regex": Option(
        "-O", "--skip-options-regex", action="store", dest="skip_options_regex",
        metavar="REGEX",
        help="Do not report filesystems with mount options matching REGEX."),
    "point_regex": Option(
        "-p", "--point-regex", action="store", dest="point_regex",
        metavar="REGEX",
        help="Only report values matching REGEX. Applies to the reported "
             "field, whichever it is."),
    "skip_point_regex": Option(
        "-P", "--skip-point-regex", action="store", dest="skip_point_regex",
        metavar="REGEX",
        help="Do not report values matching REGEX. Applies to the reported "
             "field, whichever it is."),
    "options": Option(
        "-i", "--options", action="store_const", dest="select",
        const=SELECT_OPTIONS,
        help="Report the mount options instead of the mount points."),
    "fstype": Option(
        "-s", "--fstype", action="store_const", dest="select",
        const=SELECT_FSTYPE,
        help="Report the filesystem types instead of the mount points."),
    "node": Option(
        "-t", "--node", action="store_const", dest="select",
        const=SELECT_NODE,
        help="Report the source nodes instead of the mount points."),
    "quiet": Option(
        "-q", "--quiet", default=False, action="store_true", dest="quiet",
        help="Do not print the reported values. The exit code still tells "
             "if a value matched. Also set by RC_QUIET=yes."),
    "verbose": Option(
        "-v", "--verbose", default=False, action="store_true", dest="verbose",
        help="Log the reason each filesystem is skipped. Also set by "
             "RC_VERBOSE=yes."),
    "debug": Option(
        "--debug", default=False, action="store_true", dest="debug",
        help="Same as --verbose."),
    "nocolor": Option(
        "-C", "--nocolor", default=False, action="store_true", dest="nocolor",
        help="Disable colors in the log messages. Also set by RC_NOCOLOR=yes."),
    "syslog": Option(
        "--syslog", default=False, action="store_true", dest="syslog",
        help="Also send the warning and error messages to syslog."),
})

OPTIONS = [
    OPT.fstype_regex,
    OPT.skip_fstype_regex,
    OPT.node_regex,
    OPT.skip_node_regex,
    OPT.options_regex,
    OPT.skip_options_regex,
    OPT.point_regex,
    OPT.skip_point_regex,
    OPT.options,
    OPT.fstype,
    OPT.node,
    OPT.quiet,
    OPT.verbose,
    OPT.debug,
    OPT.nocolor,
    OPT.syslog,
]


class MountinfoOptParser(OptionParser):
    """
    The mountinfo command options parser class.
    """
    def __init__(self):
        OptionParser.__init__(self, prog=PROG, usage=USAGE,
                              description=DESCRIPTION, options=OPTIONS)
        self.set_defaults(select=SELECT_POINT)
