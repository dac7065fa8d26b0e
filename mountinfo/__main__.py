import sys

from mountinfo.commands.mountinfo import main

if __name__ == "__main__":
    ret = main(sys.argv[1:])
    sys.exit(ret)
