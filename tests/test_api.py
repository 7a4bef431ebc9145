from enum import Enum, unique

import lexiter


def test_version():
    assert isinstance(lexiter.__version__, str)


def test_readme_example():
    @lexiter.lexicon(skip=r"[ \t]+")
    @unique
    class Token(Enum):
        EOF = lexiter.end()
        UNKNOWN = lexiter.error()
        DIGIT = lexiter.regex("[0-9]")
        PLUS = lexiter.token("+")
        MINUS = lexiter.token("-")
        EQUAL = lexiter.token("=")
        END = lexiter.token(";")
        NEWLINE = lexiter.regex(r"\r?\n")

    source = "1 + 1 = 2;\n2 + 2 = 4;"
    indexable = lexiter.span_indexable(source)

    tokens = list(lexiter.Lexer(source, Token))
    assert len(tokens) == 13
    assert tokens[0] == lexiter.WithSpan(Token.DIGIT, lexiter.Span(0, 1))
    assert indexable[tokens[0].span] == "1"
    assert list(lexiter.BareLexer(source, Token)) == [t.item for t in tokens]
    assert isinstance(Token, lexiter.Lexable)
