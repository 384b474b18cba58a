from enum import Enum


class ErrorKind(Enum):
    """What went wrong while reading an ini file"""
    FILE_NOT_FOUND = 'FILE_NOT_FOUND'
    READ = 'READ'
    SYNTAX = 'SYNTAX'


class IniError(Exception):
    """Base class for all errors raised while reading ini files"""
    kind = None


class FileNotFound(IniError, FileNotFoundError):
    """The input file cannot be opened"""
    kind = ErrorKind.FILE_NOT_FOUND

    def __init__(self, filename):
        super().__init__("Cannot open file \"%s\" for reading" % filename)
        self.filename = filename

    def __str__(self):
        return self.args[0]


class ReadError(IniError):
    """The input could be opened but not read or decoded"""
    kind = ErrorKind.READ


class IniSyntaxError(IniError, SyntaxError):
    """
    Invalid token sequence in an ini file

    :ivar message: full human readable message
    :ivar source: name of the file (or stream)
    :ivar line: 1-based line number
    :ivar context: (previous, offending, next) token display strings,
                   None where there is no such token
    """
    kind = ErrorKind.SYNTAX

    def __init__(self, message, source, line, context):
        super().__init__(message)
        self.message = message
        self.source = source
        self.line = line
        self.context = context
        # SyntaxError compatible attributes
        self.filename = source
        self.lineno = line

    def __str__(self):
        return self.message


class Result(object):
    """
    Outcome of a read: either a value or an error, never both
    """

    def __init__(self, value=None, error: IniError = None):
        self.value = value
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind:
        """Kind of the carried error, None on success"""
        if self.error is None:
            return None
        return self.error.kind

    def unwrap(self):
        """
        Get the value

        :return: the value
        :raises IniError: the carried error, if any
        """
        if self.error is not None:
            raise self.error
        return self.value

    def __repr__(self):
        if self.ok:
            return "Result(value=%r)" % (self.value,)
        return "Result(error=%r)" % (self.error,)
