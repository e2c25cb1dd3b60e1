class NestacError(Exception):
    """Base class for every error raised by nestac."""


class PathSyntaxError(NestacError, ValueError):
    pass


class MalformedIndexTokenError(PathSyntaxError):
    """An index token whose digits do not fit in a sequence index."""


class ShapeMismatchError(NestacError, TypeError):
    """The path does not agree with the shape of the document it is applied to."""


class IndexOutOfRangeError(ShapeMismatchError, IndexError):
    pass
