class MountinfoException(Exception):
    pass

class Error(MountinfoException):
    """ Failed action
    """
    def __init__(self, value=""):
        self.value = value
    def __str__(self):
        return str(self.value)

class Version(MountinfoException):
    """ propagate the version string
    """
    def __init__(self, value=""):
        self.value = value
    def __str__(self):
        return str(self.value)

class Usage(MountinfoException):
    """ propagate the help message
    """
    def __init__(self, value=""):
        self.value = value
    def __str__(self):
        return str(self.value)
