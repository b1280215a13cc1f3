"""Text Utils – small, pure string-transformation helpers."""

from text_utils.registry import (
    OPERATIONS,
    Operation,
    UnknownOperationError,
    apply_all,
    apply_operation,
    get_operation,
)
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

__all__ = [
    "capitalize",
    "title_case",
    "camel_case",
    "kebab_case",
    "snake_case",
    "truncate",
    "word_count",
    "clean_whitespace",
    "reverse",
    "is_palindrome",
    "OPERATIONS",
    "Operation",
    "UnknownOperationError",
    "get_operation",
    "apply_operation",
    "apply_all",
]
