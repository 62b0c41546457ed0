class Error(Exception):
    pass


class ParseError(Error, ValueError):
    def __init__(self, msg, source=None, lineno=None, line=None):
        self.source = source
        self.lineno = lineno
        self.line = line
        if lineno is not None:
            msg = '{}:{}: {}: {!r}'.format(source, lineno, msg, line)
        elif source is not None:
            msg = '{}: {}'.format(source, msg)
        super().__init__(msg)


class DegenerateGeometryError(Error, ValueError):
    pass


class OutOfRangeError(Error, IndexError):
    pass


def expect_positive(name, value):
    if not value > 0:
        raise DegenerateGeometryError(
            '{} should be positive, got {}'.format(name, value))
    return value
