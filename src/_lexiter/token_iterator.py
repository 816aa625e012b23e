"""
A TokenIterator is a cursor over a list of tokens (see lexiter.tokenizer),
used when writing recursive descent parsers by hand.

The cursor starts before the first token (position -1) and is moved by
the next_* methods. All methods take a list of filters, each being either a
token type or a token value. A token matches the filters if its type or its
value equals one of them, and every token matches an empty list of filters.

Tokens of the types in TokenIterator.ignored (typically whitespace and
comments) are skipped by every method as if they were not in the list.

No method raises when the wanted tokens are not there, instead None (or
an empty result) is returned and the cursor stays where it was. Probing for
optional constructs is therefore done by checking the returned value.
"""


class TokenIterator:
    def __init__(self, tokens, ignored=()):
        """
        :param tokens: Sequence of tokens, ie. the result of Tokenizer.tokenize.
        :param ignored: Token types to be skipped. Tokens with unhashable
            types are never skipped.
        """
        self._tokens = tuple(tokens)
        self.ignored = set(ignored)
        # Plain attribute so that parsers can save and restore it when
        # backtracking. Any int is allowed, out of range means no current token.
        self.position = -1

    @property
    def tokens(self):
        return self._tokens

    def __len__(self):
        return len(self._tokens)

    def __iter__(self):
        return iter(self._tokens)

    def __repr__(self):
        return f"TokenIterator(position={self.position}, tokens={len(self._tokens)})"

    def _token_at(self, index):
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        return None

    def _visible(self, start, step):
        """
        :returns: Generator of (index, token) for the tokens from start
            going in the direction of step, skipping ignored tokens.
        """
        index = start
        token = self._token_at(index)
        while token is not None:
            if not self._is_ignored(token):
                yield index, token
            index += step
            token = self._token_at(index)

    def _is_ignored(self, token):
        try:
            return token.type in self.ignored
        except TypeError:
            # unhashable types, ie. of tokens built by hand, can not be ignored
            return False

    @staticmethod
    def _matches(token, filters):
        if not filters:
            return True
        return any(token.type == f or token.value == f for f in filters)

    def _peek(self, step, filters):
        found = next(self._visible(self.position + step, step), None)
        if found is not None and self._matches(found[1], filters):
            return found
        return None

    def _scan(self, filters, until):
        """
        Advance over the following tokens as long as they match filters
        (or, with until, as long as they do not).

        :returns: The list of tokens advanced over.
        """
        result = []
        for index, token in self._visible(self.position + 1, 1):
            if self._matches(token, filters) == until:
                break
            result.append(token)
            self.position = index
        return result

    def current_token(self):
        """
        :returns: The token at the current position, or None.
        """
        return self._token_at(self.position)

    def current_value(self):
        token = self.current_token()
        return None if token is None else token.value

    def next_token(self, *filters):
        """
        Move to the next token if it matches filters.

        :returns: The next token, or None if it does not match filters or
            there are no more tokens.
        """
        found = self._peek(1, filters)
        if found is None:
            return None
        self.position, token = found
        return token

    def next_value(self, *filters):
        token = self.next_token(*filters)
        return None if token is None else token.value

    def next_all(self, *filters):
        """
        Move past all the following tokens that match filters, ie.
        next_all("number", ",") for "1,2,3 ;" gives the tokens for "1,2,3".

        :returns: List of the tokens moved past.
        """
        return self._scan(filters, until=False)

    def join_all(self, *filters):
        return "".join(token.value for token in self.next_all(*filters))

    def next_until(self, *filters):
        """
        Move up to (but not onto) the next token matching filters, ie.
        next_until(";") for "a = 1;" gives the tokens for "a = 1". If
        no token matches, the cursor moves to the last token.

        :returns: List of the tokens moved past.
        """
        return self._scan(filters, until=True)

    def join_until(self, *filters):
        return "".join(token.value for token in self.next_until(*filters))

    def is_current(self, *filters):
        token = self.current_token()
        return token is not None and self._matches(token, filters)

    def is_next(self, *filters):
        """
        :returns: Whether the token following the current position
            matches filters. Does not move the cursor.
        """
        return self._peek(1, filters) is not None

    def is_prev(self, *filters):
        """
        :returns: Whether the token preceding the current position
            matches filters. Does not move the cursor.
        """
        return self._peek(-1, filters) is not None

    def reset(self):
        self.position = -1
