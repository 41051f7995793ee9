class ParseError(Exception):
    def __init__(self, value):
        self.value = value

    def __str__(self):
        return repr(self.value)


class RowCountMismatchError(Exception):
    def __init__(self, value):
        self.value = value

    def __str__(self):
        return repr(self.value)


class RowNamesMismatchError(Exception):
    def __init__(self, value):
        self.value = value

    def __str__(self):
        return repr(self.value)
