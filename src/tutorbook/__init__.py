"""
TutorBook - contact and lesson scheduling records for private tutors

TutorBook parses prefixed commands such as `add n/John Doe p/98765432 ...` and
keeps persons in a registry that enforces unique names and phone numbers.
"""

import logging
from importlib.metadata import version

from tutorbook.model.person import Person
from tutorbook.model.unique_list import UniquePersonList
from tutorbook.parsing.parser import TutorBookParser, parse_command

__version__ = version("tutorbook")

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Person",
    "UniquePersonList",
    "TutorBookParser",
    "parse_command",
]
