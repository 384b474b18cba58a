from enum import Enum
from io import StringIO
from typing import TypeVar, List, Iterator

from inireader.errors import FileNotFound, ReadError
from inireader.source import Reader, At


class TokenType(Enum):
    """
Type of token

Everything that is not one of the reserved single characters is an IDENT
    """
    IDENT = 'IDENT'
    LBRACKET = 'LBRACK'
    RBRACKET = 'RBRACK'
    EQ = 'EQ'
    SEMICOLON = 'SEMICOLON'
    NEWLINE = 'NEWLINE'


class Token(object):
    """
Container for a token

Implements location, type and content
    """

    def __init__(self, at: At, token_type: TokenType, content: str) -> TypeVar('Token'):
        """
        Token class contructor

        :param at: Location of token
        :param token_type: type
        :param content: content string
        :returns: new object
        """
        self._at = at
        self._token_type = token_type
        self._content = content

    def at(self) -> At:
        """
        Get location of token

        :returns: At object where this token starts
        """
        return self._at

    def token_type(self) -> TokenType:
        return self._token_type

    def content(self) -> str:
        """
        Get string with token content, the trimmed text for IDENT tokens

        :returns: content string
        """
        return self._content

    def is_a(self, wanted_type: TokenType) -> bool:
        return wanted_type is self._token_type

    def is_ident(self) -> bool:
        """
        Can the token be used as a section name, key, value or comment

        Empty identifiers count

        :returns: true unless the token is a reserved symbol
        """
        return self._token_type is TokenType.IDENT

    def display(self) -> str:
        """
        Content as shown in error messages, newline is shown as LF

        :returns: printable content
        """
        if self._token_type is TokenType.NEWLINE:
            return "LF"
        return self._content

    def __str__(self):
        return "{%s,%s,%s}" % (self._token_type, self._at, self.display())

    def __repr__(self):
        return "Token(%s, %r)" % (self._token_type.name, self._content)


class Tokenizer(object):
    """
Tokenizer for ini files

Splits the input into the reserved characters [ ] = ; and newline,
and the trimmed text between them
"""
    _SINGLE_CHARACTER_TOKENS = {
        '[': TokenType.LBRACKET,
        ']': TokenType.RBRACKET,
        '=': TokenType.EQ,
        ';': TokenType.SEMICOLON,
        '\n': TokenType.NEWLINE,
    }
    _WHITESPACE = " \t\r\n"

    @staticmethod
    def from_file(filename: str, encoding: str = 'utf-8', skip_empty: bool = False) -> TypeVar('Tokenizer'):
        """
        Create a Tokenizer from a file

        The file is read into memory and closed before tokenizing starts.

        :param filename: path of file
        :param encoding: text encoding of the file
        :param skip_empty: drop identifiers that are empty after trimming
        :returns: new object
        :raises FileNotFound: if the file cannot be opened
        :raises ReadError: if the content cannot be decoded
        """
        try:
            f = open(filename, 'r', encoding=encoding)
        except OSError as e:
            raise FileNotFound(filename) from e
        with f:
            try:
                content = f.read()
            except UnicodeDecodeError as e:
                raise ReadError("Cannot decode file \"%s\" as %s: %s" % (filename, encoding, e)) from e
        reader = Reader(source=StringIO(content), name=filename)
        return Tokenizer(reader=reader, skip_empty=skip_empty)

    @staticmethod
    def from_string(text: str, name: str = "<UNKNOWN>", skip_empty: bool = False) -> TypeVar('Tokenizer'):
        return Tokenizer(reader=Reader(source=StringIO(text), name=name), skip_empty=skip_empty)

    def __init__(self, reader: Reader, skip_empty: bool = False) -> TypeVar('Tokenizer'):
        """
        Tokenizer constructor

        :param reader: the file source
        :param skip_empty: should whitespace-only runs be dropped instead of
                           producing empty IDENT tokens
        :returns: new object
        """
        self._reader = reader
        self._skip_empty = skip_empty

    def name(self) -> str:
        """
        Name of the input, used in error messages

        :returns: source name
        """
        return self._reader.name()

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def tokenize(self) -> List[Token]:
        """
        Consume the whole input

        :returns: all tokens in input order
        """
        return list(self)

    def next_token(self) -> Token:
        """
        Construct the next token from the input

        :returns: token or None at end of input
        """
        while True:
            at = self._reader.at()
            c = self._reader.peek()
            if c is None:
                return None
            if c in self._SINGLE_CHARACTER_TOKENS:
                self._reader.get()
                return Token(at, self._SINGLE_CHARACTER_TOKENS[c], c)

            content = StringIO()
            while c is not None and c not in self._SINGLE_CHARACTER_TOKENS:
                content.write(self._reader.get())
                c = self._reader.peek()
            text = content.getvalue().strip(self._WHITESPACE)
            if text or not self._skip_empty:
                return Token(at, TokenType.IDENT, text)
