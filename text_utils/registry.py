"""Registry module – looks up text operations by name for the CLI and MCP server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from text_utils.transforms import (
    camel_case,
    capitalize,
    clean_whitespace,
    is_palindrome,
    kebab_case,
    reverse,
    snake_case,
    title_case,
    truncate,
    word_count,
)


@dataclass(frozen=True)
class Operation:
    """A named text operation and what it returns."""

    name: str
    func: Callable[..., Any]
    returns: type
    summary: str
    accepts_length: bool = False

    def __call__(self, text: Any, max_length: float | None = None) -> str | int | bool:
        if max_length is None:
            return self.func(text)
        if not self.accepts_length:
            raise ValueError(f"Operation '{self.name}' does not take a max length")
        return self.func(text, max_length)


class UnknownOperationError(KeyError):
    """Raised when an operation name matches nothing in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown operation '{self.name}'. Choose from: {', '.join(OPERATIONS)}"


OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in (
        Operation("capitalize", capitalize, str, "Uppercase the first character, lowercase the rest."),
        Operation("title_case", title_case, str, "Capitalize each space-separated word."),
        Operation("camel_case", camel_case, str, "Join words into camelCase."),
        Operation("kebab_case", kebab_case, str, "Join words into kebab-case."),
        Operation("snake_case", snake_case, str, "Join words into snake_case."),
        Operation("truncate", truncate, str, "Shorten to a max length with an ellipsis.", accepts_length=True),
        Operation("word_count", word_count, int, "Count whitespace-separated words."),
        Operation("clean_whitespace", clean_whitespace, str, "Collapse whitespace runs and trim."),
        Operation("reverse", reverse, str, "Reverse the characters."),
        Operation("is_palindrome", is_palindrome, bool, "Check for a palindrome, ignoring case and punctuation."),
    )
}


def normalize_name(name: str) -> str:
    """Map any common spelling of an operation name to its registry key.

    ``"titleCase"``, ``"title-case"`` and ``"Title Case"`` all become
    ``"title_case"``.
    """
    return snake_case(str(name).strip()).replace("-", "_")


def get_operation(name: str) -> Operation:
    """Return the :class:`Operation` registered under *name*.

    Raises :class:`UnknownOperationError` when nothing matches.
    """
    try:
        return OPERATIONS[normalize_name(name)]
    except KeyError:
        raise UnknownOperationError(name) from None


def apply_operation(name: str, text: Any, max_length: float | None = None) -> str | int | bool:
    """Run the operation called *name* on *text*.

    *max_length* is forwarded only when given, and only operations that take a
    length accept it; anything else raises ``ValueError``.
    """
    return get_operation(name)(text, max_length)


def apply_all(text: Any) -> dict[str, str | int | bool]:
    """Run every registered operation on *text* with its defaults."""
    return {name: op(text) for name, op in OPERATIONS.items()}
