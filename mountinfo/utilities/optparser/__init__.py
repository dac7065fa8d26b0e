"""
Helper module to handle optparser configuration.

Wrap the optparse module so errors, help and version requests raise
exceptions instead of calling sys.exit, and format the help message with
one paragraph per option.
"""
import optparse
import textwrap

import mountinfo.core.exceptions as ex
from mountinfo.utilities.version import agent_version


class Option(optparse.Option):
    pass


class MountinfoHelpFormatter(optparse.IndentedHelpFormatter):
    def format_option(self, option):
        result = []
        opts = self.option_strings[option]
        opt_width = self.help_position - self.current_indent - 2
        if len(opts) > opt_width:
            opts = "%*s%s\n" % (self.current_indent, "", opts)
            indent_first = self.help_position
        else:                       # start help on same line as opts
            opts = "%*s%-*s  " % (self.current_indent, "", opt_width, opts)
            indent_first = 0
        result.append(opts)
        if option.help:
            help_text = self.expand_default(option)
            help_lines = []
            for block in help_text.splitlines():
                help_lines += textwrap.wrap(block, self.help_width)
            result.append("%*s%s\n" % (indent_first, "", help_lines[0]))
            result.extend(["%*s%s\n" % (self.help_position, "", line)
                           for line in help_lines[1:]])
        elif opts[-1] != "\n":
            result.append("\n")
        return "".join(result)


class OptionParser(optparse.OptionParser):
    def __init__(self, prog="", usage=None, description=None, options=None):
        optparse.OptionParser.__init__(
            self,
            prog=prog,
            usage=usage,
            description=description,
            formatter=MountinfoHelpFormatter(),
            add_help_option=False,
        )
        self.add_option("-h", "--help", action="help",
                        help="Show this help message and exit.")
        self.version = prog + " " + agent_version()
        self.add_option("-V", "--version", action="version",
                        help="Show the program version and exit.")
        for option in options or []:
            self.add_option(option)

    def exit(self, status=0, msg=None):
        """
        Override optparse.exit so sys.exit doesn't get called.
        """
        if status == 0 and not msg:
            raise ex.Usage()
        raise ex.Error(msg.strip() if msg else "")

    def error(self, msg):
        """
        Override optparse.error so sys.exit doesn't get called.
        """
        raise ex.Error("%s: %s" % (self.get_prog_name(), msg))

    def print_version(self, file=None):
        """
        Override optparse.print_version so sys.exit doesn't get called.
        """
        raise ex.Version(self.get_version())
