import lexiter.version
from _lexiter.columns import TokenColumns, token_columns
from _lexiter.cursor import Lexable, TokenCursor
from _lexiter.engine import end, error, lexicon, regex, token
from _lexiter.errors import LexiconError, NotLexableError
from _lexiter.lexer import AbstractLexer, BareLexer, Lexer
from _lexiter.span import Span, SpanBytes, SpanStr, WithSpan, span_indexable

__version__ = lexiter.version.version

__all__ = [
    "AbstractLexer",
    "BareLexer",
    "Lexable",
    "Lexer",
    "LexiconError",
    "NotLexableError",
    "Span",
    "SpanBytes",
    "SpanStr",
    "TokenColumns",
    "TokenCursor",
    "WithSpan",
    "end",
    "error",
    "lexicon",
    "regex",
    "span_indexable",
    "token",
    "token_columns",
]
