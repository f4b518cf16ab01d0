"""
Argument prefixes such as `n/` that tag the start of a named argument.
"""

from attrs import field, frozen


@frozen
class Prefix:
    """An immutable argument marker, compared by its text."""

    text: str = field()

    @text.validator
    def _check_text(self, attribute, value):
        if not value or any(char.isspace() for char in value):
            raise ValueError(f"Invalid prefix {value!r}: must be non-empty without whitespace")

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text
