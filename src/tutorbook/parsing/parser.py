"""
Parsers for TutorBook commands.

This module turns a command line such as
`add n/John Doe p/98765432 e/john@example.com a/Clementi s/Math` into a
validated command request. Each command keyword has its own parser declaring
which prefixes it accepts, which are required and which may repeat;
TutorBookParser picks the parser by keyword.
"""

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Callable

from tutorbook.commands.requests import (
    AddCommand,
    ClearCommand,
    CommandRequest,
    DeleteCommand,
    EditCommand,
    EditPersonDescriptor,
    ExitCommand,
    FindCommand,
    FindSubjectCommand,
    HelpCommand,
    ListCommand,
    SortCommand,
)
from tutorbook.exceptions import ParseError
from tutorbook.model.next_lesson import NextLesson
from tutorbook.model.person import Person
from tutorbook.model.predicates import (
    NameContainsKeywordsPredicate,
    SubjectContainsKeywordsPredicate,
)
from tutorbook.parsing import parser_util
from tutorbook.parsing.cli_syntax import (
    PERSON_FIELD_PREFIXES,
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_NEXT_LESSON,
    PREFIX_PHONE,
    PREFIX_SUBJECT,
    PREFIX_TAG,
    SINGLE_VALUED_PREFIXES,
)
from tutorbook.parsing.tokenizer import ArgumentMultimap, tokenize

logger = logging.getLogger(__name__)

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format!"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"


class CommandParser(ABC):
    """Parser for the argument text of a single command keyword."""

    @abstractmethod
    def parse(self, args: str) -> CommandRequest:
        """
        Parse the text following the command keyword.

        Params:
            args: Argument text, possibly with leading whitespace

        Returns:
            The validated command request

        Raises:
            ParseError: If the arguments are missing, repeated or invalid
        """


def _invalid_format(usage: str) -> ParseError:
    return ParseError(MESSAGE_INVALID_COMMAND_FORMAT, usage)


class AddCommandParser(CommandParser):
    """Parses `add n/NAME p/PHONE e/EMAIL a/ADDRESS [s/SUBJECT]... [t/TAG]... [l/NEXT_LESSON]`."""

    REQUIRED_PREFIXES = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)

    def parse(self, args: str) -> AddCommand:
        multimap = tokenize(args, *PERSON_FIELD_PREFIXES)

        if multimap.get_preamble() or not all(
            multimap.contains(prefix) for prefix in self.REQUIRED_PREFIXES
        ):
            raise _invalid_format(AddCommand.MESSAGE_USAGE)
        multimap.verify_no_duplicate_prefixes_for(*SINGLE_VALUED_PREFIXES)

        raw_lesson = multimap.get_value(PREFIX_NEXT_LESSON)
        person = Person(
            name=parser_util.parse_name(multimap.get_value(PREFIX_NAME)),
            phone=parser_util.parse_phone(multimap.get_value(PREFIX_PHONE)),
            email=parser_util.parse_email(multimap.get_value(PREFIX_EMAIL)),
            address=parser_util.parse_address(multimap.get_value(PREFIX_ADDRESS)),
            subjects=parser_util.parse_subjects(multimap.get_all_values(PREFIX_SUBJECT)),
            tags=parser_util.parse_tags(multimap.get_all_values(PREFIX_TAG)),
            next_lesson=(
                parser_util.parse_schedule(raw_lesson)
                if raw_lesson is not None
                else NextLesson.EMPTY
            ),
        )
        return AddCommand(person=person)


class EditCommandParser(CommandParser):
    """
    Parses `edit INDEX [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [s/SUBJECT]... [t/TAG]... [l/NEXT_LESSON]`.

    A lone empty `s/` or `t/` clears the subjects or tags; an empty `l/`
    clears the next lesson.
    """

    def parse(self, args: str) -> EditCommand:
        multimap = tokenize(args, *PERSON_FIELD_PREFIXES)

        try:
            index = parser_util.parse_index(multimap.get_preamble())
        except ParseError as e:
            raise _invalid_format(EditCommand.MESSAGE_USAGE) from e
        multimap.verify_no_duplicate_prefixes_for(*SINGLE_VALUED_PREFIXES)

        descriptor = EditPersonDescriptor(
            name=self._optional(multimap, PREFIX_NAME, parser_util.parse_name),
            phone=self._optional(multimap, PREFIX_PHONE, parser_util.parse_phone),
            email=self._optional(multimap, PREFIX_EMAIL, parser_util.parse_email),
            address=self._optional(multimap, PREFIX_ADDRESS, parser_util.parse_address),
            subjects=self._collection(
                multimap, PREFIX_SUBJECT, parser_util.parse_subjects
            ),
            tags=self._collection(multimap, PREFIX_TAG, parser_util.parse_tags),
            next_lesson=self._next_lesson(multimap),
        )
        if not descriptor.is_any_field_edited():
            raise ParseError(EditCommand.MESSAGE_NOT_EDITED)
        return EditCommand(index=index, descriptor=descriptor)

    @staticmethod
    def _optional(multimap: ArgumentMultimap, prefix, convert: Callable):
        raw = multimap.get_value(prefix)
        return convert(raw) if raw is not None else None

    @staticmethod
    def _collection(multimap: ArgumentMultimap, prefix, convert: Callable):
        values = multimap.get_all_values(prefix)
        if not values:
            return None
        if values == [""]:
            return frozenset()
        return convert(values)

    @staticmethod
    def _next_lesson(multimap: ArgumentMultimap) -> NextLesson | None:
        raw = multimap.get_value(PREFIX_NEXT_LESSON)
        if raw is None:
            return None
        if raw == "":
            return NextLesson.EMPTY
        return parser_util.parse_schedule(raw)


class DeleteCommandParser(CommandParser):
    def parse(self, args: str) -> DeleteCommand:
        try:
            index = parser_util.parse_index(args)
        except ParseError as e:
            raise _invalid_format(DeleteCommand.MESSAGE_USAGE) from e
        return DeleteCommand(index=index)


class FindCommandParser(CommandParser):
    def parse(self, args: str) -> FindCommand:
        keywords = args.split()
        if not keywords:
            raise _invalid_format(FindCommand.MESSAGE_USAGE)
        return FindCommand(predicate=NameContainsKeywordsPredicate(keywords))


class FindSubjectCommandParser(CommandParser):
    def parse(self, args: str) -> FindSubjectCommand:
        keywords = args.split()
        if not keywords:
            raise _invalid_format(FindSubjectCommand.MESSAGE_USAGE)
        return FindSubjectCommand(predicate=SubjectContainsKeywordsPredicate(keywords))


class NoArgumentCommandParser(CommandParser):
    """Parser for commands that take no arguments; trailing text is ignored."""

    def __init__(self, command_class: type):
        self.command_class = command_class

    def parse(self, args: str) -> CommandRequest:
        return self.command_class()


class TutorBookParser:
    """Dispatches a full command line to the parser for its keyword."""

    BASIC_COMMAND_FORMAT = re.compile(
        r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL
    )

    def __init__(self):
        self.parsers: dict[str, CommandParser] = {
            AddCommand.COMMAND_WORD: AddCommandParser(),
            EditCommand.COMMAND_WORD: EditCommandParser(),
            DeleteCommand.COMMAND_WORD: DeleteCommandParser(),
            FindCommand.COMMAND_WORD: FindCommandParser(),
            FindSubjectCommand.COMMAND_WORD: FindSubjectCommandParser(),
            SortCommand.COMMAND_WORD: NoArgumentCommandParser(SortCommand),
            ListCommand.COMMAND_WORD: NoArgumentCommandParser(ListCommand),
            ClearCommand.COMMAND_WORD: NoArgumentCommandParser(ClearCommand),
            HelpCommand.COMMAND_WORD: NoArgumentCommandParser(HelpCommand),
            ExitCommand.COMMAND_WORD: NoArgumentCommandParser(ExitCommand),
        }

    def parse(self, user_input: str) -> CommandRequest:
        """
        Parse a full command line.

        Params:
            user_input: Command keyword followed by its arguments

        Returns:
            The validated command request

        Raises:
            ParseError: If the keyword is unknown or its arguments are invalid
        """
        match = self.BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if not match:
            raise _invalid_format(HelpCommand.MESSAGE_USAGE)

        command_word = match.group("command_word")
        parser = self.parsers.get(command_word)
        if parser is None:
            logger.warning("Unknown command word %r", command_word)
            raise ParseError(MESSAGE_UNKNOWN_COMMAND)

        logger.debug("Parsing %r command", command_word)
        try:
            return parser.parse(match.group("arguments"))
        except ParseError as e:
            logger.warning("Rejected %r command: %s", command_word, e.message)
            raise


_default_parser = TutorBookParser()


def parse_command(user_input: str) -> CommandRequest:
    """
    Convenience function to parse a command line.

    Params:
        user_input: Command keyword followed by its arguments

    Returns:
        The validated command request
    """
    return _default_parser.parse(user_input)
