"""
Positions in the displayed person list.
"""

from attrs import field, frozen


@frozen
class Index:
    """
    A list position, stored zero-based.

    Users see one-based positions, so commands build indexes with
    `from_one_based` and executors read `zero_based`.
    """

    zero_based: int = field()

    @zero_based.validator
    def _check_non_negative(self, attribute, value):
        if value < 0:
            raise ValueError(f"Index must not be negative, got {value}")

    @classmethod
    def from_zero_based(cls, zero_based: int) -> "Index":
        return cls(zero_based)

    @classmethod
    def from_one_based(cls, one_based: int) -> "Index":
        return cls(one_based - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1
