"""
In this module, the lexicon is a tokenizing engine for token types declared
as an Enum whose values are rules, see _lexiter.engine.rules. The lexicon
decorator compiles the rules and makes the enum lexable, so that it can be
given to Lexer and BareLexer.

Tokens are matched by regular expressions from the re module. At each
position the longest match wins, and skipped input (by default spaces,
tabs and form feeds) is not part of any token. Input that no rule matches
does not raise, instead it becomes the error token of the enum, one byte or
character at a time. Definition errors in the enum itself, including
patterns that cannot be used for bytes sources, raise LexiconError when the
decorator is applied.

Both str and bytes-like sources are supported. Spans are then offsets into
the str or bytes respectively. Patterns are used as utf-8 bytes for
bytes-like sources, see Lexicon.
"""

from .lexicon import Lexicon, lexicon
from .regex_cursor import RegexCursor
from .rules import end, error, regex, token

__all__ = [
    "Lexicon",
    "RegexCursor",
    "end",
    "error",
    "lexicon",
    "regex",
    "token",
]
