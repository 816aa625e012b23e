from enum import Enum, auto, unique

import hypothesis.strategies as st

from lexiter import Token


@unique
class Kind(Enum):
    DNUMBER = auto()
    WHITESPACE = auto()
    STRING = auto()
    SYMBOL = auto()


# Covers every character, so any text can be tokenized
covering_patterns = {
    Kind.DNUMBER: r"\d+",
    Kind.WHITESPACE: r"\s+",
    Kind.STRING: r"\w+",
    Kind.SYMBOL: r"[^\w\s]",
}

texts = st.text(max_size=50)

lines = st.text(alphabet=st.sampled_from("ab \n\t"), max_size=30)

words = st.text(
    alphabet=st.characters(whitelist_categories=("Ll", "Lu")), min_size=1, max_size=5
)


@st.composite
def token_lists(draw, max_size=10):
    """
    Contiguous tokens as produced by a tokenizer, alternating words and
    whitespace, ie. [STRING "a", WHITESPACE " ", DNUMBER "12"].
    """
    pieces = draw(
        st.lists(
            st.one_of(
                st.tuples(words, st.just(Kind.STRING)),
                st.tuples(st.sampled_from([" ", "\n"]), st.just(Kind.WHITESPACE)),
                st.tuples(
                    st.from_regex(r"[0-9]{1,3}", fullmatch=True), st.just(Kind.DNUMBER)
                ),
            ),
            max_size=max_size,
        )
    )
    tokens = []
    offset = 0
    for value, kind in pieces:
        tokens.append(Token(value, offset, kind))
        offset += len(value)
    return tokens


filters = st.lists(
    st.one_of(st.sampled_from(Kind), st.sampled_from([" ", "a", "1"])), max_size=2
)
