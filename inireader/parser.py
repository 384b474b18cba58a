from enum import Enum
from typing import Iterable, List, TypeVar

from inireader.config import Configuration
from inireader.errors import IniSyntaxError
from inireader.tokenizer import Token, TokenType
from inireader.utils import logger


class State(Enum):
    """
Grammar state

IDLE is both the start state and the only accepting one
"""
    IDLE = 0
    SAW_OPEN_BRACKET = 1
    SAW_SECTION_IDENT = 2
    SAW_KEY_IDENT = 3
    SAW_EQUALS = 4
    SAW_SEMICOLON = 5


class Parser(object):
    """
Finite state machine recognizing ini lines

    [section]
    key = value
    key =
    ; comment

Every state has a transition method taking the token and the pending payload
of the state (section name, or (section, key) pair) and returning the next
(state, payload), or None if the token is not allowed there.
"""

    def __init__(self, configuration: Configuration = None, source: str = "<UNKNOWN>") -> TypeVar('Parser'):
        """
        Parser constructor

        :param configuration: store to fill, a new one if not given
        :param source: name of input for error messages
        :returns: new object
        """
        if configuration is None:
            configuration = Configuration()
        self.configuration = configuration
        self._source = source
        self._section = ""
        self._line = 1
        self._transitions = {
            State.IDLE: self._idle,
            State.SAW_OPEN_BRACKET: self._open_bracket,
            State.SAW_SECTION_IDENT: self._section_ident,
            State.SAW_KEY_IDENT: self._key_ident,
            State.SAW_EQUALS: self._equals,
            State.SAW_SEMICOLON: self._semicolon,
        }

    def parse(self, tokens: Iterable[Token]) -> Configuration:
        """
        Run the state machine over all tokens, storing assignments as they complete

        :param tokens: token sequence (consumed once)
        :returns: the configuration store
        :raises IniSyntaxError: on an unexpected token, or if input ends mid-line
        """
        tokens = list(tokens)
        self._section = ""
        self._line = 1
        state = State.IDLE
        pending = None
        stored = 0
        for (i, token) in enumerate(tokens):
            step = self._transitions[state](token, pending)
            if step is None:
                raise self._unexpected_token(tokens, i)
            if state is State.SAW_EQUALS:
                stored = stored + 1
            (state, pending) = step
        if state is not State.IDLE:
            raise self._unexpected_eof(tokens)
        logger.debug("%s: %d tokens, %d assignments", self._source, len(tokens), stored)
        return self.configuration

    def line(self) -> int:
        """
        Current line, 1-based

        :returns: number of newlines consumed + 1
        """
        return self._line

    def _idle(self, token, pending):
        if token.is_a(TokenType.LBRACKET):
            return State.SAW_OPEN_BRACKET, None
        if token.is_ident():
            return State.SAW_KEY_IDENT, (self._section, token.content())
        if token.is_a(TokenType.SEMICOLON):
            return State.SAW_SEMICOLON, None
        if token.is_a(TokenType.NEWLINE):
            self._line = self._line + 1
            return State.IDLE, None
        return None

    def _open_bracket(self, token, pending):
        if token.is_ident():
            return State.SAW_SECTION_IDENT, token.content()
        return None

    def _section_ident(self, token, pending):
        if token.is_a(TokenType.RBRACKET):
            self._section = pending
            return State.IDLE, None
        return None

    def _key_ident(self, token, pending):
        if token.is_a(TokenType.EQ):
            return State.SAW_EQUALS, pending
        return None

    def _equals(self, token, pending):
        (section, key) = pending
        if token.is_ident():
            self.configuration.set(section, key, token.content())
            return State.IDLE, None
        if token.is_a(TokenType.NEWLINE):
            self.configuration.set(section, key, "")
            self._line = self._line + 1
            return State.IDLE, None
        return None

    def _semicolon(self, token, pending):
        # The comment text is a single IDENT, dropped
        if token.is_ident():
            return State.IDLE, None
        return None

    def _unexpected_token(self, tokens: List[Token], i: int) -> IniSyntaxError:
        previous = tokens[i - 1].display() if i > 0 else None
        offending = tokens[i].display()
        following = tokens[i + 1].display() if i + 1 < len(tokens) else None
        message = "Syntax error on file \"%s\" at line %d.\n...%s ->%s<- %s..." % (
            self._source, self._line, previous or "", offending, following or "")
        return IniSyntaxError(message, self._source, self._line, (previous, offending, following))

    def _unexpected_eof(self, tokens: List[Token]) -> IniSyntaxError:
        previous = tokens[-2].display() if len(tokens) > 1 else None
        last = tokens[-1].display()
        message = "Syntax error on file \"%s\" at line %d: unexpected end of file.\n...%s ->%s<- EOF" % (
            self._source, self._line, previous or "", last)
        return IniSyntaxError(message, self._source, self._line, (previous, last, "EOF"))
