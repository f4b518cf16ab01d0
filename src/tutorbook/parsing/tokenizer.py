"""
Tokenizer for prefixed command arguments.

This module splits argument text such as `n/John Doe p/98765432 s/Math` into
values keyed by prefix. A prefix only counts when it starts the text or
follows whitespace, so prefix-like text inside a value (`a/Blk 30/n/a`) is
left alone.

When registered prefixes overlap (`n/` and `n/f/`), the longest prefix
matching at a position wins and shorter matches at that position are ignored.
"""

import logging
from dataclasses import dataclass

from tutorbook.exceptions import ParseError
from tutorbook.parsing.prefix import Prefix

logger = logging.getLogger(__name__)

MESSAGE_DUPLICATE_FIELDS = (
    "Multiple values specified for the following single-valued field(s): "
)


@dataclass(frozen=True)
class PrefixPosition:
    """A recognised prefix occurrence and the index where it starts."""

    prefix: Prefix
    start: int

    @property
    def value_start(self) -> int:
        return self.start + len(self.prefix)


class ArgumentMultimap:
    """
    Values found for each prefix, in order of appearance.

    A prefix given several times keeps every value. Text before the first
    prefix is kept separately as the preamble.
    """

    def __init__(self, preamble: str = ""):
        self._preamble = preamble
        self._values: dict[Prefix, list[str]] = {}

    def put(self, prefix: Prefix, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    def get_value(self, prefix: Prefix) -> str | None:
        """Return the first value given for `prefix`, or None if absent."""
        values = self._values.get(prefix)
        return values[0] if values else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        """Return every value given for `prefix`; empty if absent."""
        return list(self._values.get(prefix, []))

    def get_preamble(self) -> str:
        return self._preamble

    def contains(self, prefix: Prefix) -> bool:
        return prefix in self._values

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        """
        Check that none of `prefixes` was given more than once.

        Raises:
            ParseError: Naming every prefix that was repeated
        """
        duplicated = [
            prefix for prefix in prefixes if len(self._values.get(prefix, [])) > 1
        ]
        if duplicated:
            raise ParseError(
                MESSAGE_DUPLICATE_FIELDS + " ".join(str(prefix) for prefix in duplicated)
            )

    def __repr__(self) -> str:
        return f"ArgumentMultimap(preamble={self._preamble!r}, values={self._values!r})"


def find_prefix_positions(args: str, prefixes: tuple[Prefix, ...]) -> list[PrefixPosition]:
    """
    Locate every recognised prefix occurrence in `args`.

    Params:
        args: Argument text to scan
        prefixes: Prefixes to look for

    Returns:
        Prefix occurrences ordered by start index, at most one per index
    """
    claimed: dict[int, Prefix] = {}
    # Longest first, so a longer prefix claims a shared start index.
    for prefix in sorted(set(prefixes), key=len, reverse=True):
        start = args.find(prefix.text)
        while start != -1:
            if (start == 0 or args[start - 1].isspace()) and start not in claimed:
                claimed[start] = prefix
            start = args.find(prefix.text, start + 1)
    return [PrefixPosition(prefix=claimed[start], start=start) for start in sorted(claimed)]


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """
    Split argument text into values keyed by prefix.

    Each value runs from the end of its prefix to the start of the next
    recognised prefix, with surrounding whitespace removed.

    Params:
        args: Argument text, usually everything after the command keyword
        prefixes: Prefixes the command accepts

    Returns:
        ArgumentMultimap holding the preamble and the values for each prefix
    """
    positions = find_prefix_positions(args, prefixes)
    preamble_end = positions[0].start if positions else len(args)
    multimap = ArgumentMultimap(preamble=args[:preamble_end].strip())

    for current, following in zip(positions, positions[1:] + [None]):
        value_end = following.start if following else len(args)
        multimap.put(current.prefix, args[current.value_start : value_end].strip())

    logger.debug("Tokenized %r into %r", args, multimap)
    return multimap
