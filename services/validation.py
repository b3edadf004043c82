"""Stateless form validation helpers for the product category page."""
import re
from typing import Any, Dict

from returns.result import Failure, Result, Success

PTYPE = "ptype"

EMPTY_PTYPE_MESSAGE = "Please enter a Product Category."
SINGLE_WORD_PTYPE_MESSAGE = "Please enter a Product Category as a Single Word."

SINGLE_WORD_PATTERN = re.compile(r"\w*")


def is_empty_post_field(value: Any) -> bool:
    """True for a missing value or one that is blank after trimming."""
    return value is None or not str(value).strip()


def is_single_word(value: Any) -> bool:
    """True when the value holds word characters only (no whitespace anywhere)."""
    text = "" if value is None else str(value)
    return SINGLE_WORD_PATTERN.fullmatch(text) is not None


def validate_ptype(raw: Any) -> Result[str, Dict[str, str]]:
    """
    Validate the submitted product category name.

    Both checks always run in order and write to the same key, so when both
    fail only the single-word message survives.

    Returns:
        Success with the trimmed name, or Failure with a field -> message map.
    """
    value = "" if raw is None else str(raw)
    error_messages: Dict[str, str] = {}

    if is_empty_post_field(value):
        error_messages[PTYPE] = EMPTY_PTYPE_MESSAGE
    if not is_single_word(value):
        error_messages[PTYPE] = SINGLE_WORD_PTYPE_MESSAGE

    if error_messages:
        return Failure(error_messages)
    return Success(value.strip())
