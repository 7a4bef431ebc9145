from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Span:
    """
    The half-open range start..end of a token in the source it was
    matched from. A span holds coordinates only, the source is always
    kept by the caller.

    For bytes-like sources the offsets are byte offsets, for str sources
    they are offsets of code points (which coincide for ascii text).

    >>> span = Span(4, 5)
    >>> span.get_value("1 + 1 = 2;")
    '1'
    >>> len(span)
    1
    """

    start: int
    end: int

    def __len__(self):
        return self.end - self.start

    def as_slice(self):
        return slice(self.start, self.end)

    def get_value(self, source):
        """
        :returns: The part of source covered by the span, ie.
            source[start:end]. Works with any sliceable source, including
            memoryview which does not copy the underlying buffer.

        Note that a span into a utf-8 encoded byte string can split a
        multi-byte character, in which case decoding the result fails.
        """
        return source[self.start : self.end]


@dataclass(frozen=True)
class WithSpan:
    """
    A token together with the Span it was matched at.
    """

    item: Any
    span: Span

    def get_value(self, source):
        return self.span.get_value(source)


class SpanStr(str):
    """
    A str which can be indexed by a Span in addition to
    integers and slices.

    >>> source = SpanStr("1 + 1")
    >>> source[Span(2, 3)]
    '+'
    """

    def __getitem__(self, key):
        if isinstance(key, Span):
            key = key.as_slice()
        return str.__getitem__(self, key)


class SpanBytes(bytes):
    """
    A bytes object which can be indexed by a Span in addition to
    integers and slices.
    """

    def __getitem__(self, key):
        if isinstance(key, Span):
            key = key.as_slice()
        return bytes.__getitem__(self, key)


def span_indexable(source):
    """
    Wrap source so that it can be indexed with a Span.

    :param source: Either a str or a bytes-like object
        (bytes, bytearray, memoryview).
    :returns: SpanStr for str sources and SpanBytes for bytes-like
        sources.
    """
    if isinstance(source, str):
        return SpanStr(source)
    if isinstance(source, (bytes, bytearray, memoryview)):
        return SpanBytes(source)
    raise TypeError(f"Cannot index {type(source).__name__} with a Span")
