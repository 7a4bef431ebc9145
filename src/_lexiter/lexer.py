from abc import ABC, abstractmethod

from _lexiter.cursor import make_cursor
from _lexiter.span import Span, WithSpan


class AbstractLexer(ABC):
    """
    An iterator over the tokens of a source that stops when the end token of
    the token type is found. The end token itself is never yielded.

    The lexer owns a cursor created by token_type.lexer(source). Every call
    to next() captures an item from the cursor and then advances the cursor
    by exactly one match, so the item describes the match the cursor was at
    when the call started. Once the end token is reached the lexer is
    exhausted and stays exhausted.

    Subclasses decide what is captured from the cursor, see Lexer and
    BareLexer.
    """

    def __init__(self, source, token_type):
        """
        :param source: The input to tokenize, str or bytes-like for token
            types decorated with @lexicon.
        :param token_type: A lexable token type, see _lexiter.cursor.Lexable.
        """
        self._source = source
        self._cursor = make_cursor(token_type, source)
        self._end_token = token_type.end_token

    @property
    def source(self):
        return self._source

    @abstractmethod
    def capture(self, cursor):
        """
        :returns: The item to be yielded for the current match of cursor.
        """
        pass

    def __iter__(self):
        return self

    def __next__(self):
        if self._cursor.token == self._end_token:
            raise StopIteration
        item = self.capture(self._cursor)
        self._cursor.advance()
        return item


class Lexer(AbstractLexer):
    """
    Lexer that yields each token wrapped in WithSpan, where the span is the
    location of the token in the source.

    >>> [t.item for t in Lexer("1 + 1", Token)]
    [<Token.DIGIT: ...>, <Token.PLUS: ...>, <Token.DIGIT: ...>]
    """

    def capture(self, cursor):
        start, end = cursor.span()
        return WithSpan(cursor.token, Span(start, end))


class BareLexer(AbstractLexer):
    """
    Lexer that yields the tokens only. Yields the same tokens as Lexer
    does for the same source and token type.
    """

    def capture(self, cursor):
        return cursor.token
