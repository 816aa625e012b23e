"""
In this module, a tokenizer splits a string into a flat list of tokens
using an ordered table of regular expression fragments.

The fragments are combined into a single alternation which is matched
at the current position of the input. The alternation is tried in
table order, so the first fragment that matches wins even if a later one
would produce a longer token. For instance, a table containing a keyword
fragment r"if" followed by an identifier fragment r"\\w+" tokenizes "iffy"
as "if" followed by "fy", so order fragments from more to less specific and
guard keywords with r"\\b" where that matters.

Fragments may only use non-capturing groups, as every fragment is
wrapped in a group identifying the type of the tokens it produces.

Tokenization is done in one go for the whole input: either every
character is covered by some token or a TokenizerException tells
where the input could not be matched.
"""

from .errors import ConfigurationError, LexIterError, TokenizerException
from .pattern_table import PatternTable
from .regex_tokenizer import Tokenizer, get_coordinates
from .token import Token

__all__ = [
    "ConfigurationError",
    "LexIterError",
    "PatternTable",
    "Token",
    "Tokenizer",
    "TokenizerException",
    "get_coordinates",
]
