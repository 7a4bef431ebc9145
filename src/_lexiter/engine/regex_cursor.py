class RegexCursor:
    """
    A token cursor (see _lexiter.cursor.TokenCursor) over a str or
    bytes-like source, matching tokens with the rules of a Lexicon.

    The cursor matches the first token when created. Input skipped by the
    lexicon is not part of any span, and input matched by no rule becomes
    the error token spanning a single byte (or character for str sources).
    Once the end of the source is reached, token is the end token with the
    empty span (len(source), len(source)) and advancing has no effect.
    """

    def __init__(self, lexicon, source):
        self.lexicon = lexicon
        self.source = source
        self.token = None
        self._start = 0
        self._end = 0
        self.advance()

    def span(self):
        return self._start, self._end

    def slice(self):
        """
        :returns: The part of the source matched by the current token.
        """
        return self.source[self._start : self._end]

    def advance(self):
        length = len(self.source)
        pos = self.lexicon.skip_from(self.source, self._end)
        if pos >= length:
            self.token = self.lexicon.end_token
            self._start = self._end = length
            return

        token, end = self.lexicon.match(self.source, pos)
        if token is None:
            token = self.lexicon.error_token
            end = pos + 1
        self.token = token
        self._start = pos
        self._end = end
