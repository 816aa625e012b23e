import lexiter.version
from _lexiter.token_iterator import TokenIterator
from _lexiter.tokenizer import (
    ConfigurationError,
    LexIterError,
    PatternTable,
    Token,
    Tokenizer,
    TokenizerException,
    get_coordinates,
)

__author__ = """LexIter developers"""

__version__ = lexiter.version.version

__all__ = [
    "ConfigurationError",
    "LexIterError",
    "PatternTable",
    "Token",
    "TokenIterator",
    "Tokenizer",
    "TokenizerException",
    "get_coordinates",
]
