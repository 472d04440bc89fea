"""Parsers that turn one command's argument string into a Command."""

from datetime import datetime
from typing import Callable

from ..errors import ParseError, MESSAGE_EMPTY_FILTER_VALUE, MESSAGE_NO_FILTER_PREFIX, invalid_format
from ..model import (
    ApplicationPredicate,
    DEFAULT_STATUS,
    DeadlinePredicate,
    JobApplication,
    NameContainsKeywordsPredicate,
    PREDICATE_SHOW_ALL_APPLICATIONS,
    RoleContainsKeywordPredicate,
    SortField,
    SortOrder,
    StatusMatchesKeywordPredicate,
    TagsContainKeywordPredicate,
)
from .argument_tokenizer import ArgumentMultimap, tokenize
from .cli_syntax import Prefix, PREFIX_COMPANY, PREFIX_DEADLINE, PREFIX_ROLE, PREFIX_STATUS, PREFIX_TAG
from .commands import AddCommand, DeleteCommand, FilterCommand, FindCommand, SortCommand
from .parser_util import (
    parse_company,
    parse_date,
    parse_deadline,
    parse_index,
    parse_raw_tokens,
    parse_role,
    parse_status,
    parse_tags,
    validate_deadline_not_in_past,
)


class FindCommandParser:
    """Parses the arguments of ``find``."""

    def parse(self, args: str) -> FindCommand:
        """
        Parse keywords into a FindCommand.

        Keywords keep their order, case and duplicates.

        Raises:
            ParseError: If no keyword is given.
        """
        try:
            keywords = parse_raw_tokens(args)
        except ParseError as e:
            raise e.with_descriptor(FindCommand.MESSAGE_USAGE) from e
        return FindCommand(NameContainsKeywordsPredicate(keywords))


def _keyword(value: str) -> str:
    if not value:
        raise ParseError(MESSAGE_EMPTY_FILTER_VALUE)
    return value.lower()


def build_tag_predicate(value: str) -> ApplicationPredicate:
    return TagsContainKeywordPredicate(_keyword(value))


def build_role_predicate(value: str) -> ApplicationPredicate:
    return RoleContainsKeywordPredicate(_keyword(value))


def build_status_predicate(value: str) -> ApplicationPredicate:
    return StatusMatchesKeywordPredicate(_keyword(value))


def build_deadline_predicate(value: str) -> ApplicationPredicate:
    return DeadlinePredicate(parse_date(value))


# Highest priority first; only the first prefix present is used
FILTER_BUILDERS: tuple[tuple[Prefix, Callable[[str], ApplicationPredicate]], ...] = (
    (PREFIX_TAG, build_tag_predicate),
    (PREFIX_ROLE, build_role_predicate),
    (PREFIX_STATUS, build_status_predicate),
    (PREFIX_DEADLINE, build_deadline_predicate),
)


class FilterCommandParser:
    """Parses the arguments of ``filter``."""

    NONE_KEYWORD = "none"

    def parse(self, args: str) -> FilterCommand:
        """
        Parse a filter criterion into a FilterCommand.

        ``none`` clears the filter and wins over any prefix. Otherwise the
        first of tag, role, status, deadline that is present is used and the
        rest are ignored.

        Raises:
            ParseError: If there is stray text, no criterion, a repeated
                criterion, or a malformed date.
        """
        arg_multimap = tokenize(args, *(prefix for prefix, _ in FILTER_BUILDERS))
        preamble = arg_multimap.get_preamble()

        if preamble.lower() == self.NONE_KEYWORD:
            return FilterCommand(PREDICATE_SHOW_ALL_APPLICATIONS)

        if preamble:
            raise invalid_format(FilterCommand.MESSAGE_USAGE)

        return FilterCommand(self.get_predicate(arg_multimap))

    @staticmethod
    def get_predicate(arg_multimap: ArgumentMultimap) -> ApplicationPredicate:
        """
        Build the predicate for the highest-priority prefix present.

        Raises:
            ParseError: If no filter prefix is present, or the chosen one
                repeats or has an invalid value.
        """
        for prefix, build in FILTER_BUILDERS:
            value = arg_multimap.get_value(prefix)
            if value is not None:
                arg_multimap.verify_no_duplicate_prefixes_for(prefix)
                return build(value.strip())
        raise ParseError(MESSAGE_NO_FILTER_PREFIX)


class SortCommandParser:
    """Parses the arguments of ``sort``.

    Accepted forms::

        sort deadline
        sort company desc
        sort role asc

    Tokens after the order are ignored.
    """

    def parse(self, args: str) -> SortCommand:
        """
        Parse a sort field and optional order into a SortCommand.

        Raises:
            ParseError: If no field is given or a name is not recognized.
        """
        try:
            tokens = parse_raw_tokens(args)
        except ParseError as e:
            raise e.with_descriptor(SortCommand.MESSAGE_USAGE) from e

        try:
            field = SortField.from_name(tokens[0])
            order = SortOrder.from_name(tokens[1]) if len(tokens) >= 2 else SortOrder.ASC
        except ValueError as e:
            raise ParseError(str(e)) from e

        return SortCommand(field, order)


class AddCommandParser:
    """Parses the arguments of ``add``."""

    def __init__(self, now: Callable[[], datetime] = datetime.now):
        """
        Initialize the parser.

        Args:
            now: Source of the current time for deadline validation.
        """
        self._now = now

    def parse(self, args: str) -> AddCommand:
        """
        Parse company, role, deadline, status and tags into an AddCommand.

        Raises:
            ParseError: If a required field is missing, a single-valued
                field repeats, or any value is invalid.
        """
        arg_multimap = tokenize(
            args, PREFIX_COMPANY, PREFIX_ROLE, PREFIX_DEADLINE, PREFIX_STATUS, PREFIX_TAG
        )

        required = (PREFIX_COMPANY, PREFIX_ROLE, PREFIX_DEADLINE)
        if arg_multimap.get_preamble() or any(arg_multimap.get_value(p) is None for p in required):
            raise invalid_format(AddCommand.MESSAGE_USAGE)

        arg_multimap.verify_no_duplicate_prefixes_for(
            PREFIX_COMPANY, PREFIX_ROLE, PREFIX_DEADLINE, PREFIX_STATUS
        )

        company = parse_company(arg_multimap.get_value(PREFIX_COMPANY))
        role = parse_role(arg_multimap.get_value(PREFIX_ROLE))
        deadline = parse_deadline(arg_multimap.get_value(PREFIX_DEADLINE))
        validate_deadline_not_in_past(deadline, self._now)

        status_value = arg_multimap.get_value(PREFIX_STATUS)
        status = parse_status(status_value) if status_value is not None else DEFAULT_STATUS
        tags = parse_tags(arg_multimap.get_all_values(PREFIX_TAG))

        return AddCommand(JobApplication(company, role, deadline, status, tags))


class DeleteCommandParser:
    """Parses the arguments of ``delete``."""

    def parse(self, args: str) -> DeleteCommand:
        """
        Parse a one-based index into a DeleteCommand.

        Raises:
            ParseError: If the index is invalid; the usage text is attached.
        """
        try:
            return DeleteCommand(parse_index(args))
        except ParseError as e:
            raise e.with_descriptor(DeleteCommand.MESSAGE_USAGE) from e
