class LexiconError(Exception):
    """
    Raised by the lexicon decorator when the rules of a token type cannot
    be compiled into a tokenizer, ie. a missing end token or a pattern that
    matches the empty string.
    """

    pass


class NotLexableError(TypeError):
    """
    Thrown when a lexer is created for a token type that does not provide
    a way to create a token cursor, see _lexiter.cursor.Lexable.
    """

    pass
