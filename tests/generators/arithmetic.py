from enum import Enum, unique

import hypothesis.strategies as st

from _lexiter.engine import end, error, lexicon, regex, token


@lexicon(skip=r"[ \t]+")
@unique
class Token(Enum):
    EOF = end()
    UNKNOWN = error()
    DIGIT = regex("[0-9]")
    PLUS = token("+")
    MINUS = token("-")
    EQUAL = token("=")
    END = token(";")
    NEWLINE = regex(r"\r?\n")


# Characters covering every rule, skipped input and unknown input
alphabet = "0123456789+-=;\r\n \tx#é"

arithmetic_text = st.text(alphabet=alphabet, max_size=40)

arithmetic_bytes = st.builds(lambda s: s.encode("utf-8"), arithmetic_text)

arithmetic_sources = st.one_of(arithmetic_text, arithmetic_bytes)


@st.composite
def equations(draw):
    def operand():
        return str(draw(st.integers(min_value=0, max_value=9)))

    op = draw(st.sampled_from(["+", "-"]))
    space = draw(st.sampled_from(["", " ", "\t"]))
    return space.join([operand(), op, operand(), "=", operand()]) + ";"
