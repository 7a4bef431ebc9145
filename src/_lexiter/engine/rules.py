"""
Rules are the values of the members of a token enum, and tell the lexicon
how each token is matched:

    @lexicon()
    class Token(Enum):
        EOF = end()
        UNKNOWN = error()
        DIGIT = regex("[0-9]")
        PLUS = token("+")

"""

import re
from dataclasses import dataclass

# When two rules match the same number of characters, the rule with the
# highest priority wins.
LITERAL_PRIORITY = 2
REGEX_PRIORITY = 1


@dataclass(frozen=True)
class Literal:
    text: str

    @property
    def pattern(self):
        return re.escape(self.text)

    priority = LITERAL_PRIORITY


@dataclass(frozen=True)
class Regex:
    pattern: str

    priority = REGEX_PRIORITY


@dataclass(frozen=True)
class End:
    """
    Marks the token produced when the end of the input is reached.
    """

    pass


@dataclass(frozen=True)
class Error:
    """
    Marks the token produced for input that no other rule matches.
    """

    pass


def token(text):
    """
    A token matching exactly the given text.
    """
    return Literal(text)


def regex(pattern):
    """
    A token matching the given regular expression (see the re module).
    """
    return Regex(pattern)


def end():
    return End()


def error():
    return Error()


def is_matching_rule(rule):
    return isinstance(rule, (Literal, Regex))
