import mountinfo.core.exceptions as ex


class Mount(object):
    def __init__(self, dev, mnt, type, mnt_opt):
        self.dev = dev
        self.mnt = mnt
        self.type = type
        self.mnt_opt = mnt_opt

    def __eq__(self, other):
        if not isinstance(other, Mount):
            return NotImplemented
        return (self.dev, self.mnt, self.type, self.mnt_opt) == \
               (other.dev, other.mnt, other.type, other.mnt_opt)

    def __str__(self):
        return "Mount: dev[%s] mnt[%s] type[%s] options[%s]" % \
               (self.dev, self.mnt, self.type, self.mnt_opt)

    __repr__ = __str__


class BaseMounts(object):
    """
    The OS mount table, as an iterable of Mount in enumeration order.

    The table is read once, at instanciation. Errors reading it are fatal
    and propagate as ex.Error.
    """
    def __init__(self):
        self.mounts = self.parse_mounts()

    def __iter__(self):
        return iter(self.mounts)

    def __len__(self):
        return len(self.mounts)

    def parse_mounts(self):
        raise ex.Error("parse_mounts is not implemented")

    def __str__(self):
        output = "%s" % self.__class__.__name__
        for m in self.mounts:
            output += "\n  %s" % m.__str__()
        return output
