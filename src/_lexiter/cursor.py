"""
The token cursor is the interface between a lexer and the tokenizing engine
that does the actual matching. A cursor is always positioned at exactly one
match, which it exposes through its token attribute and span() method, and
advance() moves it to the next match. When the input is exhausted the
cursor's token is the end token of the token type and stays there.

A token type is lexable when it provides the end token and a way to create
a cursor for a source, see Lexable. Types decorated with
_lexiter.engine.lexicon are lexable, but any class providing the same
attributes can be used.
"""

from typing import Any, Protocol, Tuple, runtime_checkable

from _lexiter.errors import NotLexableError


@runtime_checkable
class TokenCursor(Protocol):
    token: Any

    def span(self) -> Tuple[int, int]:
        """
        :returns: The start and end offsets of the current match.
        """
        ...

    def advance(self) -> None:
        ...


@runtime_checkable
class Lexable(Protocol):
    end_token: Any

    def lexer(self, source) -> TokenCursor:
        """
        :returns: A new cursor over source, positioned at the first match.
        """
        ...


def make_cursor(token_type, source):
    """
    Create a new cursor for source from token_type.

    :raises NotLexableError: If token_type does not provide lexer and
        end_token.
    """
    if not isinstance(token_type, Lexable):
        raise NotLexableError(
            f"{getattr(token_type, '__name__', token_type)!r} does not provide "
            "lexer() and end_token, did you forget the @lexicon decorator?"
        )
    return token_type.lexer(source)
