from typing import TypeVar

_str = TypeVar('_str', str, None)


class At(object):
    """
    Location object
    """
    def __init__(self, source, line=None, pos=None):
        """
        Construct a location object

        :param source: the filename
        :param line: line number
        :param pos: character on line
        """
        self.source = source
        self.line = line
        self.pos = pos

    def __str__(self) -> str:
        if self.line is None:
            return self.source
        else:
            return "%s:%d:%d" % (self.source, self.line, self.pos)


class Reader(object):
    """
    Line buffered reader with one character lookahead and location
    """

    def __init__(self, source, name="<UNKNOWN>"):
        """
        Construct a reader

        :param source: input file handle (text mode)
        :param name: name of source
        """
        self._source = source
        self._source_name = name
        self._buffer = ""
        self._line = 0
        self._pos = 0
        self._eof = False
        self._read_line()

    def name(self) -> str:
        return self._source_name

    def _read_line(self) -> None:
        """
        Replace the buffer with the next line of input
        """
        line = self._source.readline()
        if line == "":
            self._eof = True
            self._buffer = ""
        else:
            self._line = self._line + 1
            self._buffer = line
        self._pos = 0

    def peek(self) -> _str:
        """
        Look at the next character without consuming it

        :return: character (str) or None if at end of file
        """
        if self.eof():
            return None
        return self._buffer[self._pos]

    def get(self) -> _str:
        """
        Get a character from the input

        :return: character (str) or None if at end of file
        """
        if self.eof():
            return None
        c = self._buffer[self._pos]
        self._pos = self._pos + 1
        if self._pos == len(self._buffer):
            self._read_line()
        return c

    def eof(self) -> bool:
        """
        Is the input consumed

        :return: at end of file
        """
        return self._eof

    def at(self) -> At:
        """
        The current location in the input

        :return: At (location) object
        """
        if self.eof():
            return At(self._source_name + ":EOF")
        return At(self._source_name, self._line, self._pos + 1)
