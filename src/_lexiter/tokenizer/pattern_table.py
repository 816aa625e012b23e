import re
import warnings
from collections.abc import Hashable, Mapping

from _lexiter.tokenizer.errors import ConfigurationError


def _entries(patterns):
    """
    Normalize the accepted forms of pattern tables into a list of
    (type, fragment) pairs.

    :param patterns: Either a mapping of type to fragment, a sequence of
        (type, fragment) pairs or a sequence of fragments.
    :returns: Tuple of the list of entries and whether the entries are named.
    """
    if isinstance(patterns, Mapping):
        return list(patterns.items()), True
    if isinstance(patterns, (str, bytes)):
        raise ConfigurationError(
            f"Expected a mapping or sequence of patterns, got {patterns!r}"
        )
    patterns = list(patterns)
    if all(isinstance(entry, tuple) and len(entry) == 2 for entry in patterns):
        return patterns, bool(patterns)
    return [(None, fragment) for fragment in patterns], False


def _validate_fragment(kind, fragment):
    if not isinstance(fragment, str):
        raise ConfigurationError(
            f"Pattern for {kind!r} must be a string, got {fragment!r}"
        )
    # Wrapped as in the combined pattern, where r"(?i)if" is not valid.
    try:
        compiled = re.compile(f"({fragment})")
    except re.error as err:
        raise ConfigurationError(
            f"Pattern for {kind!r} is not a valid regular expression: {err}"
        ) from err
    if compiled.groups != 1:
        raise ConfigurationError(
            f"Pattern for {kind!r} contains a capturing group, use (?:...) instead"
        )
    if compiled.fullmatch(""):
        raise ConfigurationError(f"Pattern for {kind!r} matches the empty string")


class PatternTable:
    """
    An ordered table of regular expression fragments, each producing tokens
    of one type. The order of the table is the matching priority: when several
    fragments match at the same position, the first one listed wins, regardless
    of the length of the match.

    >>> table = PatternTable({"number": r"\\d+", "word": r"\\w+"})
    >>> table.compile().pattern
    '(\\\\d+)|(\\\\w+)'

    """

    def __init__(self, patterns, _stacklevel=2):
        """
        :param patterns: A mapping of type to fragment, a sequence of
            (type, fragment) pairs or, for anonymous tokens, a sequence
            of fragments.
        :raises ConfigurationError: If the table is empty, a fragment is
            invalid or a type is given twice.
        """
        entries, named = _entries(patterns)
        if not entries:
            raise ConfigurationError("Pattern table must contain at least one pattern")

        seen_types = set()
        seen_fragments = {}
        for index, (kind, fragment) in enumerate(entries):
            _validate_fragment(kind, fragment)
            if named:
                if not isinstance(kind, Hashable):
                    raise ConfigurationError(f"Token type {kind!r} is not hashable")
                if kind in seen_types:
                    raise ConfigurationError(f"Token type {kind!r} is given twice")
                seen_types.add(kind)
            name = repr(kind) if named else f"pattern {index}"
            if fragment in seen_fragments:
                warnings.warn(
                    f"Pattern for {name} is identical to the pattern for "
                    f"{seen_fragments[fragment]} and will never match",
                    UserWarning,
                    stacklevel=_stacklevel,
                )
            else:
                seen_fragments[fragment] = name

        self.fragments = tuple(fragment for _, fragment in entries)
        self.types = tuple(kind for kind, _ in entries) if named else None

    def __len__(self):
        return len(self.fragments)

    def compile(self, flags=0):
        """
        :param flags: Flags from the re module applied to the combined pattern.
        :returns: The alternation of all fragments, each wrapped in
            one group so that group i + 1 identifies fragment i.
        :raises ConfigurationError: If the fragments can not be combined
            or flags can not be used.
        """
        try:
            return re.compile("|".join(f"({f})" for f in self.fragments), flags)
        except (re.error, ValueError) as err:
            raise ConfigurationError(
                f"Patterns can not be compiled with flags {flags!r}: {err}"
            ) from err

    def type_of(self, match):
        """
        :param match: A match of the compiled pattern.
        :returns: The type of the fragment that produced the match, or None
            for anonymous tables.
        """
        if self.types is None:
            return None
        return self.types[match.lastindex - 1]
