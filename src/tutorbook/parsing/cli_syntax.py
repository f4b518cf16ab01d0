"""
Prefixes recognised by TutorBook commands.
"""

from tutorbook.parsing.prefix import Prefix

PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_SUBJECT = Prefix("s/")
PREFIX_TAG = Prefix("t/")
PREFIX_NEXT_LESSON = Prefix("l/")

PERSON_FIELD_PREFIXES = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_ADDRESS,
    PREFIX_SUBJECT,
    PREFIX_TAG,
    PREFIX_NEXT_LESSON,
)

# Prefixes that may be given more than once in a single command
REPEATABLE_PREFIXES = frozenset({PREFIX_SUBJECT, PREFIX_TAG})

SINGLE_VALUED_PREFIXES = tuple(
    prefix for prefix in PERSON_FIELD_PREFIXES if prefix not in REPEATABLE_PREFIXES
)
