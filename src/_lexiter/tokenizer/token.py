from dataclasses import dataclass
from typing import Hashable, Optional


@dataclass(frozen=True)
class Token:
    """
    A token in the input, ie. Token("123", 4, "number") for the
    digits in "say 123" tokenized with a pattern named "number".

    The fields can be unpacked positionally in the order value, offset, type.
    """

    value: str
    offset: int
    type: Optional[Hashable] = None

    @property
    def end(self):
        """
        :returns: The offset just past the last character of the token.
        """
        return self.offset + len(self.value)

    def __iter__(self):
        return iter((self.value, self.offset, self.type))

    def __getitem__(self, key):
        return (self.value, self.offset, self.type)[key]

    def __len__(self):
        return 3
