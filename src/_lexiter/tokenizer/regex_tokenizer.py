from _lexiter.token_iterator import TokenIterator
from _lexiter.tokenizer.errors import TokenizerException
from _lexiter.tokenizer.pattern_table import PatternTable
from _lexiter.tokenizer.token import Token


def get_coordinates(text, offset):
    """
    :param text: Any text.
    :param offset: Offset into text.
    :returns: The 1-based (line, column) of the character at offset,
        ie. (2, 1) for offset 4 in "say\\n123".
    """
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column


class Tokenizer:
    def __init__(self, patterns, flags=0):
        """
        :param patterns: The pattern table, see PatternTable.
        :param flags: Flags from the re module (such as re.IGNORECASE)
            applied when matching.
        :raises ConfigurationError: If the patterns can not be used.
        """
        self.table = PatternTable(patterns, _stacklevel=3)
        self.pattern = self.table.compile(flags)

    @property
    def types(self):
        return self.table.types

    def tokenize_iter(self, text):
        """
        Tokenize text, yielding one Token for each match.

        :raises TokenizerException: When reaching a position where no
            pattern matches.
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected text to tokenize, got {type(text).__name__}")
        offset = 0
        end = len(text)
        while offset < end:
            match = self.pattern.match(text, offset)
            # a fragment with lookarounds can still match nothing
            if match is None or match.end() == offset:
                line, column = get_coordinates(text, offset)
                raise TokenizerException(text, offset, line, column)
            yield Token(match.group(), offset, self.table.type_of(match))
            offset = match.end()

    def tokenize(self, text):
        """
        :returns: List of all tokens in text, in order.
        :raises TokenizerException: If some part of text is not matched by
            any pattern, no tokens are returned in that case.
        """
        return list(self.tokenize_iter(text))

    def iterate(self, text, ignored=()):
        """
        :returns: A TokenIterator over the tokens of text.
        """
        return TokenIterator(self.tokenize(text), ignored)
