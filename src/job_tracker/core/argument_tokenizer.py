"""Tokenizer that splits an argument string on registered prefixes."""

import re

from .cli_syntax import Prefix
from ..errors import MESSAGE_DUPLICATE_FIELDS, ParseError


class ArgumentMultimap:
    """Preamble plus the ordered values found for each prefix.

    A prefix may map to any number of values. The multimap is built once by
    ``tokenize`` and only read afterwards.
    """

    def __init__(self, preamble: str = "", values: dict[Prefix, list[str]] | None = None):
        self._preamble = preamble
        self._values: dict[Prefix, tuple[str, ...]] = {
            prefix: tuple(found) for prefix, found in (values or {}).items()
        }

    def get_value(self, prefix: Prefix) -> str | None:
        """Return the first value for ``prefix``, or None if it never occurs."""
        found = self._values.get(prefix)
        return found[0] if found else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        """Return every value for ``prefix`` in left-to-right order."""
        return list(self._values.get(prefix, ()))

    def get_preamble(self) -> str:
        """Return the text before the first recognized prefix."""
        return self._preamble

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        """
        Check that each of ``prefixes`` occurs at most once.

        Raises:
            ParseError: If any of the prefixes has more than one value.
        """
        duplicated = [p for p in prefixes if len(self._values.get(p, ())) > 1]
        if duplicated:
            raise ParseError(MESSAGE_DUPLICATE_FIELDS + " ".join(str(p) for p in duplicated))

    def __repr__(self) -> str:
        return f"ArgumentMultimap(preamble={self._preamble!r}, values={self._values!r})"


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """
    Split ``args`` into a preamble and per-prefix values.

    A prefix only counts when it starts the string or follows whitespace,
    so ``r/`` inside ``marketer/sales`` is plain text. Each value runs up to
    the next recognized prefix and is trimmed.

    Args:
        args: The argument string following the command word.
        prefixes: The prefixes to recognize.

    Returns:
        ArgumentMultimap holding the preamble and the values.
    """
    positions = sorted(
        (position for prefix in set(prefixes) for position in _find_prefix_positions(args, prefix)),
        key=lambda position: position[0],
    )

    if not positions:
        return ArgumentMultimap(args.strip())

    preamble = args[: positions[0][0]].strip()
    values: dict[Prefix, list[str]] = {}

    for i, (start, prefix) in enumerate(positions):
        end = positions[i + 1][0] if i + 1 < len(positions) else len(args)
        value = args[start + len(prefix.value):end].strip()
        values.setdefault(prefix, []).append(value)

    return ArgumentMultimap(preamble, values)


def _find_prefix_positions(args: str, prefix: Prefix) -> list[tuple[int, Prefix]]:
    """Find every position where ``prefix`` starts at a token boundary."""
    pattern = re.compile(r"(?:^|(?<=\s))" + re.escape(prefix.value))
    return [(match.start(), prefix) for match in pattern.finditer(args)]
