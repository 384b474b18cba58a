import sys
from typing import List, Tuple, TypeVar

from inireader.config import Configuration
from inireader.errors import IniError, ReadError, Result
from inireader.parser import Parser
from inireader.source import Reader
from inireader.tokenizer import Tokenizer
from inireader.utils import logger


class IniFile(object):
    """
Ini file reader

    ini = IniFile("config.ini")
    ini.read()
    ini.get("server", "port")

Reading adds to what is already stored, call clear() between unrelated files.
"""

    def __init__(self, filename: str = "", encoding: str = 'utf-8', skip_empty: bool = False) -> TypeVar('IniFile'):
        """
        Constructor

        :param filename: default file for read()
        :param encoding: text encoding of files
        :param skip_empty: drop whitespace-only runs, see Tokenizer
        :returns: new object
        """
        self.filename = filename
        self.encoding = encoding
        self.skip_empty = skip_empty
        self.configuration = Configuration()

    def read(self, filename: str = None) -> Configuration:
        """
        Tokenize and parse a file into the store

        :param filename: file to read, defaults to the one given to the constructor
        :returns: the store
        :raises FileNotFound: if the file cannot be opened
        :raises ReadError: if the file cannot be decoded
        :raises IniSyntaxError: if the content is malformed (the store may be partially filled)
        """
        if filename is None:
            filename = self.filename
        logger.debug("Reading %s", filename)
        try:
            tokenizer = Tokenizer.from_file(filename, encoding=self.encoding, skip_empty=self.skip_empty)
            return self._parse(tokenizer)
        except IniError as e:
            logger.debug("Failed reading %s: %s", filename, e)
            raise

    def try_read(self, filename: str = None) -> Result:
        """
        Like read(), but reports failure in the returned value

        :param filename: file to read, defaults to the one given to the constructor
        :returns: Result with the store, or with the error
        """
        try:
            return Result(value=self.read(filename))
        except IniError as e:
            return Result(error=e)

    def read_stream(self, stream, name: str = "<UNKNOWN>") -> Configuration:
        """
        Tokenize and parse an already opened text stream into the store

        :param stream: text stream, not closed by this method
        :param name: source name for error messages
        :returns: the store
        :raises ReadError: if the stream cannot be read or decoded
        :raises IniSyntaxError: if the content is malformed
        """
        try:
            return self._parse(Tokenizer(Reader(stream, name=name), skip_empty=self.skip_empty))
        except (UnicodeDecodeError, OSError) as e:
            logger.debug("Failed reading %s: %s", name, e)
            raise ReadError("Cannot read stream \"%s\": %s" % (name, e)) from e

    def _parse(self, tokenizer: Tokenizer) -> Configuration:
        tokens = tokenizer.tokenize()
        logger.debug("%s: read %d tokens", tokenizer.name(), len(tokens))
        return Parser(self.configuration, source=tokenizer.name()).parse(tokens)

    def get(self, section: str, key: str) -> str:
        """
        Look up a value, "" if it is not set

        A missing section is created empty
        """
        return self.configuration.get(section, key)

    def __getitem__(self, section: str):
        return self.configuration.section(section)

    def clear(self) -> None:
        self.configuration.clear()

    def dump(self) -> List[Tuple[str, str, str]]:
        return self.configuration.dump()

    def print(self, file=None) -> None:
        """
        Write all entries as [section][key]=value lines

        :param file: output stream, defaults to stdout
        """
        if file is None:
            file = sys.stdout
        for (section, key, value) in self.dump():
            file.write("[%s][%s]=%s\n" % (section, key, value))
