from typing import NamedTuple

import numpy as np


class TokenColumns(NamedTuple):
    items: np.ndarray
    starts: np.ndarray
    ends: np.ndarray


def token_columns(tokens):
    """
    Collect a stream of spanned tokens into arrays, so that spans
    of large inputs can be processed with numpy, ie.

    >>> columns = token_columns(Lexer("1 + 1", Token))
    >>> columns.starts
    array([0, 2, 4])
    >>> int((columns.ends - columns.starts).max())
    1

    :param tokens: Iterable of WithSpan, ie. a Lexer.
    :returns: TokenColumns with the tokens as an object array, and the
        start and end offsets as int64 arrays.
    """
    collected = list(tokens)
    items = np.empty(len(collected), dtype=object)
    # One element at a time, tuple tokens must not become extra dimensions.
    for i, t in enumerate(collected):
        items[i] = t.item
    starts = np.fromiter(
        (t.span.start for t in collected), dtype=np.int64, count=len(collected)
    )
    ends = np.fromiter(
        (t.span.end for t in collected), dtype=np.int64, count=len(collected)
    )
    return TokenColumns(items, starts, ends)
