"""
Exception classes for TutorBook command parsing and record management.

This module defines specific exception types for the two families of failure:
user input that cannot be parsed into a command, and operations that would
break the invariants of the person registry.
"""


class TutorBookError(Exception):
    """Base exception for all TutorBook errors."""

    pass


class ParseError(TutorBookError):
    """Raised when command text cannot be turned into a command request."""

    def __init__(self, message: str, usage: str | None = None):
        """
        Initialize the exception.

        Params:
            message: What was wrong with the input, naming the field or format
            usage: Optional usage hint for the command being parsed
        """
        self.message = message
        self.usage = usage
        full_message = f"{message}\n{usage}" if usage else message
        super().__init__(full_message)


class InvalidFormatError(ParseError):
    """Raised when a next lesson value does not follow `D/M/Y HHMM-HHMM`."""

    def __init__(self, value: str, reason: str):
        """
        Initialize the exception.

        Params:
            value: The raw text that failed to parse
            reason: Which part of the grammar was violated
        """
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid format '{value}': {reason}")


class DuplicateIdentityError(TutorBookError):
    """Raised when an operation would store two entities with the same identity."""

    def __init__(self, label: str = "entities"):
        """
        Initialize the exception.

        Params:
            label: Plural name of the stored entities, used in the message
        """
        self.label = label
        super().__init__(f"Operation would result in duplicate {label}")


class DuplicateSecondaryKeyError(TutorBookError):
    """Raised when an operation would store two entities sharing a unique key."""

    def __init__(self, key_label: str = "unique keys"):
        """
        Initialize the exception.

        Params:
            key_label: Plural name of the unique key, used in the message
        """
        self.key_label = key_label
        super().__init__(f"Operation would result in duplicate {key_label}")


class EntityNotFoundError(TutorBookError):
    """Raised when the target of an update or removal is not in the list."""

    def __init__(self, label: str = "entity"):
        """
        Initialize the exception.

        Params:
            label: Singular name of the stored entity, used in the message
        """
        self.label = label
        super().__init__(f"The {label} could not be found in the list")
