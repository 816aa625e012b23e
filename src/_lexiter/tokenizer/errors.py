class LexIterError(Exception):
    """
    Base class of all errors raised by lexiter.
    """

    pass


class ConfigurationError(LexIterError, ValueError):
    """
    Thrown when a Tokenizer is constructed from a pattern table that
    cannot be used, ie. the table is empty, a fragment is not a valid regular
    expression, or two entries share the same type.
    """

    pass


class TokenizerException(LexIterError):
    """
    A tokenizer will throw a TokenizerException if none of its patterns
    match at some position of the input. The exception carries the
    unmatched character together with its 1-based line and column.
    """

    def __init__(self, text, offset, line, column):
        self.text = text
        self.offset = offset
        self.line = line
        self.column = column
        self.char = text[offset : offset + 1]
        context = text[offset : offset + 10].replace("\n", "\\n")
        super().__init__(f"Unexpected '{context}' on line {line}, column {column}.")
