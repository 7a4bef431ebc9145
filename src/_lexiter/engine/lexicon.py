import re
import warnings
from enum import Enum
from functools import cached_property

from _lexiter.engine.regex_cursor import RegexCursor
from _lexiter.engine.rules import End, Error, is_matching_rule
from _lexiter.errors import LexiconError

DEFAULT_SKIP = r"[ \t\f]+"


def compile_pattern(name, pattern, as_bytes):
    if as_bytes:
        pattern = pattern.encode("utf-8")
    try:
        return re.compile(pattern)
    except re.error as err:
        raise LexiconError(f"Invalid pattern for {name}: {err}") from err


class Lexicon:
    """
    The compiled rules of a token enum. Matches tokens at a given position
    of a source, see Lexicon.match.

    Patterns are compiled separately for str and for bytes-like sources.
    The bytes form of a pattern is its utf-8 encoding, so non-ascii
    characters are matched byte by byte: regex("é") matches the two bytes
    of "é".encode(), while the class regex("[é]") matches either one of
    those bytes on its own. Literal tokens are not affected.
    """

    def __init__(self, token_type, skip=DEFAULT_SKIP):
        """
        :param token_type: An Enum with rules as values, see
            _lexiter.engine.rules.
        :param skip: Regular expression for input that is skipped
            between tokens, or None to not skip anything.
        :raises LexiconError: If the rules are invalid.
        """
        if not (isinstance(token_type, type) and issubclass(token_type, Enum)):
            raise LexiconError(f"Expected an Enum, got {token_type!r}")
        self.token_type = token_type
        self.skip = skip
        self.end_token = self._find_marker(End)
        self.error_token = self._find_marker(Error)
        self.rules = []
        for member in token_type:
            rule = member.value
            if is_matching_rule(rule):
                self.rules.append((member, rule))
            elif member not in (self.end_token, self.error_token):
                raise LexiconError(
                    f"{member.name} has value {rule!r}, expected one of "
                    "token(), regex(), end() or error()."
                )
        self._check_empty_matches()
        # Both forms are compiled up front so that a pattern which is only
        # valid for str sources fails here rather than when lexing bytes.
        self.str_patterns
        self.bytes_patterns
        self._warn_aliases()

    def _find_marker(self, marker):
        # Aliases count, two end() members are equal values and so aliases.
        found = [
            name
            for name, member in self.token_type.__members__.items()
            if isinstance(member.value, marker)
        ]
        if len(found) != 1:
            raise LexiconError(
                f"{self.token_type.__name__} must have exactly one "
                f"{marker.__name__.lower()}() member, found {len(found)}"
                + (f": {', '.join(found)}" if found else "")
            )
        return self.token_type[found[0]]

    def _check_empty_matches(self):
        named = [(m.name, r.pattern) for m, r in self.rules]
        if self.skip is not None:
            named.append(("skip", self.skip))
        for name, pattern in named:
            if compile_pattern(name, pattern, as_bytes=False).fullmatch(""):
                raise LexiconError(
                    f"The pattern {pattern!r} for {name} matches the empty string"
                )

    def _warn_aliases(self):
        for name, member in self.token_type.__members__.items():
            if member.name != name:
                warnings.warn(
                    f"{self.token_type.__name__}.{name} is an alias of "
                    f"{member.name} and will never be produced by the lexer",
                    stacklevel=4,
                )

    def _compile(self, as_bytes):
        skip = None
        if self.skip is not None:
            skip = compile_pattern("skip", self.skip, as_bytes)
        rules = [
            (
                member,
                compile_pattern(member.name, rule.pattern, as_bytes),
                rule.priority,
            )
            for member, rule in self.rules
        ]
        return skip, rules

    @cached_property
    def str_patterns(self):
        return self._compile(as_bytes=False)

    @cached_property
    def bytes_patterns(self):
        return self._compile(as_bytes=True)

    def patterns_for(self, source):
        if isinstance(source, str):
            return self.str_patterns
        return self.bytes_patterns

    def skip_from(self, source, pos):
        """
        :returns: The first position at or after pos which is not
            skipped.
        """
        skip, _ = self.patterns_for(source)
        if skip is None:
            return pos
        match = skip.match(source, pos)
        if match is None:
            return pos
        return match.end()

    def match(self, source, pos):
        """
        Find the token at pos in source. The longest match wins, when
        several rules match equally long input the rule with the highest
        priority wins (literal tokens before regular expressions), and after
        that the first rule declared.

        :returns: Tuple of the token and end of the match, or (None, pos)
            if no rule matches a non-empty input at pos.
        """
        _, rules = self.patterns_for(source)
        best = None
        best_end = pos
        best_priority = 0
        for member, pattern, priority in rules:
            match = pattern.match(source, pos)
            if match is None:
                continue
            end = match.end()
            if end > best_end or (end == best_end and priority > best_priority):
                if end > pos:
                    best, best_end, best_priority = member, end, priority
        return best, best_end

    def cursor(self, source):
        """
        :returns: A RegexCursor over source positioned at the first token.
        """
        return RegexCursor(self, source)


def lexicon(skip=DEFAULT_SKIP):
    """
    Class decorator making an Enum of rules lexable, ie.

    >>> @lexicon(skip=r"[ \\t]+")
    ... @unique
    ... class Token(Enum):
    ...     EOF = end()
    ...     UNKNOWN = error()
    ...     DIGIT = regex("[0-9]")
    ...     PLUS = token("+")
    >>> list(BareLexer("1 + 1", Token))
    [<Token.DIGIT: ...>, <Token.PLUS: ...>, <Token.DIGIT: ...>]

    The decorated class gets the attributes lexer (creates a cursor for a
    source), end_token, error_token and lexicon.

    :param skip: Regular expression for input skipped between tokens, by
        default spaces, tabs and form feeds. None disables skipping.
    :raises LexiconError: If the rules of the class are invalid.
    """

    def decorate(token_type):
        compiled = Lexicon(token_type, skip=skip)
        token_type.lexicon = compiled
        token_type.lexer = compiled.cursor
        token_type.end_token = compiled.end_token
        token_type.error_token = compiled.error_token
        return token_type

    return decorate
