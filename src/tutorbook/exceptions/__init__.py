"""
TutorBook exception classes.

This package provides all exception types used throughout TutorBook
for consistent error handling and reporting.
"""

from tutorbook.exceptions.core import (
    DuplicateIdentityError,
    DuplicateSecondaryKeyError,
    EntityNotFoundError,
    InvalidFormatError,
    ParseError,
    TutorBookError,
)

__all__ = [
    "TutorBookError",
    "ParseError",
    "InvalidFormatError",
    "DuplicateIdentityError",
    "DuplicateSecondaryKeyError",
    "EntityNotFoundError",
]
