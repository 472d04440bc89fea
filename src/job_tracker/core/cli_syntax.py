"""Prefix markers that delimit fields in a command's argument string."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Prefix:
    """A marker such as ``t/`` that starts a named argument field."""

    value: str

    def __str__(self) -> str:
        return self.value


PREFIX_COMPANY = Prefix("c/")
PREFIX_ROLE = Prefix("r/")
PREFIX_STATUS = Prefix("s/")
PREFIX_DEADLINE = Prefix("d/")
PREFIX_TAG = Prefix("t/")
