"""
Command parsing for TutorBook.

This package contains the prefix tokenizer, the field converters and one
parser per command keyword.
"""

from tutorbook.parsing.parser import (
    CommandParser,
    TutorBookParser,
    parse_command,
)
from tutorbook.parsing.prefix import Prefix
from tutorbook.parsing.tokenizer import ArgumentMultimap, tokenize

__all__ = [
    "ArgumentMultimap",
    "CommandParser",
    "Prefix",
    "TutorBookParser",
    "parse_command",
    "tokenize",
]
