import hypothesis.strategies as st
import pytest
from hypothesis import given

from _lexiter.span import Span, SpanBytes, SpanStr, WithSpan, span_indexable


@st.composite
def sources_and_spans(draw):
    source = draw(st.one_of(st.text(max_size=20), st.binary(max_size=20)))
    start = draw(st.integers(min_value=0, max_value=len(source)))
    end = draw(st.integers(min_value=start, max_value=len(source)))
    return source, Span(start, end)


@given(sources_and_spans())
def test_get_value_is_slice(source_and_span):
    source, span = source_and_span
    assert span.get_value(source) == source[span.start : span.end]
    assert len(span.get_value(source)) == len(span)


@given(sources_and_spans())
def test_span_indexable(source_and_span):
    source, span = source_and_span
    indexable = span_indexable(source)
    assert indexable == source
    assert indexable[span] == source[span.start : span.end]


def test_span_str_keeps_str_indexing():
    source = SpanStr("abcdef")
    assert source[1] == "b"
    assert source[1:3] == "bc"
    assert source[Span(2, 4)] == "cd"
    assert source[Span(3, 3)] == ""


def test_span_bytes_keeps_bytes_indexing():
    source = SpanBytes(b"abcdef")
    assert source[1] == ord("b")
    assert source[1:3] == b"bc"
    assert source[Span(2, 4)] == b"cd"


@pytest.mark.parametrize("source", [bytearray(b"abc"), memoryview(b"abc")])
def test_span_indexable_bytes_like(source):
    indexable = span_indexable(source)
    assert isinstance(indexable, SpanBytes)
    assert indexable[Span(0, 2)] == b"ab"


def test_get_value_memoryview_does_not_copy():
    buffer = bytearray(b"1 + 1")
    value = Span(2, 3).get_value(memoryview(buffer))
    assert isinstance(value, memoryview)
    buffer[2] = ord("-")
    assert value.tobytes() == b"-"


def test_span_indexable_rejects_other_types():
    with pytest.raises(TypeError, match="list"):
        span_indexable([1, 2, 3])


def test_span_split_utf8_character():
    source = "é".encode("utf-8")
    value = Span(0, 1).get_value(source)
    with pytest.raises(UnicodeDecodeError):
        value.decode("utf-8")


def test_span_as_slice():
    assert Span(1, 4).as_slice() == slice(1, 4)


def test_with_span_equality():
    assert WithSpan("a", Span(0, 1)) == WithSpan("a", Span(0, 1))
    assert WithSpan("a", Span(0, 1)) != WithSpan("a", Span(0, 2))
    assert WithSpan("a", Span(0, 1)) != WithSpan("b", Span(0, 1))
    assert hash(Span(0, 1)) == hash(Span(0, 1))


def test_with_span_get_value():
    assert WithSpan("word", Span(4, 9)).get_value("the quick") == "quick"
