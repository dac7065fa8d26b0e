from bisect import bisect_left


class SelectionSet(object):
    """
    An ordered list of unique strings.

    insert_sorted() keeps the list ascending, using case-sensitive codepoint
    comparison, and ignores values already present. reverse() flips the
    order in place, after which insert_sorted() must not be used anymore.
    """
    def __init__(self, values=None):
        self.values = []
        self.reversed = False
        for value in values or []:
            self.insert_sorted(value)

    def insert_sorted(self, value):
        if self.reversed:
            raise ValueError("can not insert in a reversed selection")
        idx = bisect_left(self.values, value)
        if idx < len(self.values) and self.values[idx] == value:
            return False
        self.values.insert(idx, value)
        return True

    def reverse(self):
        self.values.reverse()
        self.reversed = not self.reversed

    def clear(self):
        del self.values[:]
        self.reversed = False

    def __iter__(self):
        return iter(self.values)

    def __len__(self):
        return len(self.values)

    def __contains__(self, value):
        return value in self.values

    def __repr__(self):
        return "<SelectionSet %s>" % repr(self.values)
