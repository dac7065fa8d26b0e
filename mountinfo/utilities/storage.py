class Storage(dict):
    """
    A dict whose keys are also readable and writable as attributes.
    A missing key reads as None.
    """
    def __getattr__(self, key):
        return self.get(key)

    def __setattr__(self, key, value):
        self[key] = value

    def __delattr__(self, key):
        del self[key]

    def __repr__(self):
        return "<Storage %s>" % dict.__repr__(self)
